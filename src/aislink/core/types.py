"""Core enumerations for AIS message fields."""

from __future__ import annotations

import enum


class MessageType(enum.IntEnum):
    """ITU-R M.1371 message identifiers."""

    POSITION_REPORT_SCHEDULED = 1
    POSITION_REPORT_ASSIGNED = 2
    POSITION_REPORT_RESPONSE = 3
    BASE_STATION_REPORT = 4
    STATIC_AND_VOYAGE_DATA = 5
    ADDRESSED_BINARY = 6
    BINARY_ACKNOWLEDGE = 7
    BINARY_BROADCAST = 8
    SAR_AIRCRAFT_POSITION = 9
    UTC_DATE_INQUIRY = 10
    UTC_DATE_RESPONSE = 11
    ADDRESSED_SAFETY = 12
    SAFETY_ACKNOWLEDGE = 13
    SAFETY_BROADCAST = 14
    INTERROGATION = 15
    ASSIGNED_MODE_COMMAND = 16
    DGNSS_BROADCAST = 17
    STANDARD_CLASS_B_POSITION = 18
    EXTENDED_CLASS_B_POSITION = 19
    DATA_LINK_MANAGEMENT = 20
    AID_TO_NAVIGATION = 21
    CHANNEL_MANAGEMENT = 22
    GROUP_ASSIGNMENT = 23
    STATIC_DATA_REPORT = 24
    SINGLE_SLOT_BINARY = 25
    MULTIPLE_SLOT_BINARY = 26
    LONG_RANGE_BROADCAST = 27


class NavigationStatus(enum.IntEnum):
    UNDER_WAY_USING_ENGINE = 0
    AT_ANCHOR = 1
    NOT_UNDER_COMMAND = 2
    RESTRICTED_MANOEUVRABILITY = 3
    CONSTRAINED_BY_DRAUGHT = 4
    MOORED = 5
    AGROUND = 6
    ENGAGED_IN_FISHING = 7
    UNDER_WAY_SAILING = 8
    RESERVED_HSC = 9
    RESERVED_WIG = 10
    POWER_DRIVEN_TOWING_ASTERN = 11
    POWER_DRIVEN_PUSHING_AHEAD = 12
    RESERVED = 13
    AIS_SART = 14
    NOT_DEFINED = 15


class PositionFixType(enum.IntEnum):
    """Type of electronic position fixing device (EPFD).

    Values 9-14 are not used by the standard.
    """

    UNDEFINED = 0
    GPS = 1
    GLONASS = 2
    COMBINED_GPS_GLONASS = 3
    LORAN_C = 4
    CHAYKA = 5
    INTEGRATED_NAVIGATION = 6
    SURVEYED = 7
    GALILEO = 8
    INTERNAL_GNSS = 15


class TimeStampStatus(enum.Enum):
    """Meaning of the 6-bit UTC second field.

    60-63 are four distinct reserved meanings, not a generic "invalid".
    """

    VALID = "valid"                     # 0-59
    NOT_AVAILABLE = "not_available"     # 60
    MANUAL_INPUT = "manual_input"       # 61
    DEAD_RECKONING = "dead_reckoning"   # 62
    INOPERATIVE = "inoperative"         # 63


class ManeuverIndicator(enum.IntEnum):
    NOT_AVAILABLE = 0
    NO_SPECIAL_MANEUVER = 1
    SPECIAL_MANEUVER = 2


class StationType(enum.IntEnum):
    """Station types addressed by group assignment (type 23)."""

    ALL_MOBILES = 0
    RESERVED_1 = 1
    ALL_CLASS_B = 2
    SAR_AIRBORNE = 3
    AID_TO_NAVIGATION = 4
    CLASS_B_SHIPBORNE = 5
    REGIONAL_6 = 6
    REGIONAL_7 = 7
    REGIONAL_8 = 8
    REGIONAL_9 = 9


class AidType(enum.IntEnum):
    """Aid-to-navigation type codes used by type 21 (subset with names)."""

    UNSPECIFIED = 0
    REFERENCE_POINT = 1
    RACON = 2
    FIXED_STRUCTURE = 3
    LIGHT_WITHOUT_SECTORS = 5
    LIGHT_WITH_SECTORS = 6
    LEADING_LIGHT_FRONT = 7
    LEADING_LIGHT_REAR = 8
    BEACON_CARDINAL_N = 9
    BEACON_CARDINAL_E = 10
    BEACON_CARDINAL_S = 11
    BEACON_CARDINAL_W = 12
    BEACON_PORT_HAND = 13
    BEACON_STARBOARD_HAND = 14
    BEACON_PREFERRED_CHANNEL_PORT = 15
    BEACON_PREFERRED_CHANNEL_STARBOARD = 16
    BEACON_ISOLATED_DANGER = 17
    BEACON_SAFE_WATER = 18
    BEACON_SPECIAL_MARK = 19
    CARDINAL_MARK_N = 20
    CARDINAL_MARK_E = 21
    CARDINAL_MARK_S = 22
    CARDINAL_MARK_W = 23
    PORT_HAND_MARK = 24
    STARBOARD_HAND_MARK = 25
    PREFERRED_CHANNEL_PORT = 26
    PREFERRED_CHANNEL_STARBOARD = 27
    ISOLATED_DANGER = 28
    SAFE_WATER = 29
    SPECIAL_MARK = 30
    LIGHT_VESSEL = 31
