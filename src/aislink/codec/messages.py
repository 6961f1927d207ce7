"""AIS message records (ITU-R M.1371-4).

Frozen dataclasses, one per message layout.  Field declaration order is
wire order; fields declared through :mod:`aislink.codec.fields` carry
their bit widths.  Fields declared as plain dataclass fields (repeated
groups, optional sections, trailing text or binary payloads) are handled
by the type's codec in :mod:`aislink.codec.encoding`.

All numeric fields hold raw wire values.  Defaults are the standard's
"not available" values so that a record built with keywords only is
always fully populated.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from aislink.codec import units
from aislink.codec.bits import BinaryData
from aislink.codec.fields import chars, flag, latlon, reserved, sint, uint
from aislink.codec.position import Position, ShortPosition
from aislink.core.types import (
    AidType,
    ManeuverIndicator,
    MessageType,
    NavigationStatus,
    PositionFixType,
    StationType,
    TimeStampStatus,
)

# ------------------------------------------------------------------
# Shared header
# ------------------------------------------------------------------


@dataclass(frozen=True)
class Header:
    """Fields common to every message: type, repeat indicator, MMSI."""

    message_type: int
    repeat: int
    mmsi: int

    BITS: ClassVar[int] = 38


@dataclass(frozen=True)
class AisMessage:
    """Base record: the 38-bit header."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = ()

    message_type: int = uint(6)
    repeat: int = uint(2)
    mmsi: int = uint(30)

    @property
    def header(self) -> Header:
        return Header(self.message_type, self.repeat, self.mmsi)

    @property
    def kind(self) -> MessageType | None:
        try:
            return MessageType(self.message_type)
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view: positions in degrees, binary data as hex."""
        out: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            out[f.name] = _jsonable(getattr(self, f.name))
        return out


def _jsonable(value: Any) -> Any:
    if isinstance(value, Position):
        return value.to_dict()
    if isinstance(value, BinaryData):
        return {"bits": value.bit_length, "hex": value.hex()}
    if isinstance(value, tuple):
        return [_jsonable(v) for v in value]
    if dataclasses.is_dataclass(value):
        return {f.name: _jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    return value


# ------------------------------------------------------------------
# Interpretation mixins
# ------------------------------------------------------------------


class _SpeedCourseMixin:
    sog: int
    cog: int

    @property
    def speed_knots(self) -> float | None:
        return units.speed_knots(self.sog)

    @property
    def speed_saturated(self) -> bool:
        return units.speed_is_saturated(self.sog)

    @property
    def course(self) -> float | None:
        return units.course_degrees(self.cog)


class _HeadingMixin:
    heading: int

    @property
    def true_heading(self) -> int | None:
        return units.heading_degrees(self.heading)


class _TimeStampMixin:
    second: int

    @property
    def timestamp_status(self) -> TimeStampStatus:
        return units.timestamp_status(self.second)

    @property
    def utc_second(self) -> int | None:
        return units.utc_second(self.second)


class _FixTypeMixin:
    epfd: int

    @property
    def position_fix_type(self) -> PositionFixType | None:
        return units.position_fix_type(self.epfd)


class _DimensionsMixin:
    to_bow: int
    to_stern: int
    to_port: int
    to_starboard: int

    @property
    def length(self) -> int:
        return self.to_bow + self.to_stern

    @property
    def beam(self) -> int:
        return self.to_port + self.to_starboard


# ------------------------------------------------------------------
# Types 1, 2, 3
# ------------------------------------------------------------------


@dataclass(frozen=True)
class PositionReport(
    _SpeedCourseMixin, _HeadingMixin, _TimeStampMixin, AisMessage
):
    """Class A position report (types 1, 2, 3), 168 bits.

    ``radio`` is the 19-bit SOTDMA (1, 2) or ITDMA (3) communication state.
    """

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (1, 2, 3)

    message_type: int = uint(6, default=1)
    nav_status: int = uint(4, default=15)
    rot: int = sint(8, default=-128)
    sog: int = uint(10, default=1023)
    position_accuracy: bool = flag()
    position: Position = latlon()
    cog: int = uint(12, default=3600)
    heading: int = uint(9, default=511)
    second: int = uint(6, default=60)
    maneuver: int = uint(2)
    spare: int = reserved(3)
    raim: bool = flag()
    radio: int = uint(19)

    @property
    def navigation_status(self) -> NavigationStatus:
        return units.navigation_status(self.nav_status)

    @property
    def rate_of_turn(self) -> float | None:
        return units.rate_of_turn(self.rot)

    @property
    def maneuver_indicator(self) -> ManeuverIndicator | None:
        return units.maneuver_indicator(self.maneuver)


# ------------------------------------------------------------------
# Types 4, 11
# ------------------------------------------------------------------


@dataclass(frozen=True)
class BaseStationReport(_FixTypeMixin, AisMessage):
    """Base station report (4) / UTC and date response (11), 168 bits."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (4, 11)

    message_type: int = uint(6, default=4)
    year: int = uint(14)
    month: int = uint(4)
    day: int = uint(5)
    hour: int = uint(5, default=24)
    minute: int = uint(6, default=60)
    second: int = uint(6, default=60)
    position_accuracy: bool = flag()
    position: Position = latlon()
    epfd: int = uint(4)
    spare: int = reserved(10)
    raim: bool = flag()
    radio: int = uint(19)


# ------------------------------------------------------------------
# Type 5
# ------------------------------------------------------------------


@dataclass(frozen=True)
class StaticAndVoyageData(_FixTypeMixin, _DimensionsMixin, AisMessage):
    """Class A static and voyage related data, 424 bits."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (5,)

    message_type: int = uint(6, default=5)
    ais_version: int = uint(2)
    imo: int = uint(30)
    callsign: str = chars(7)
    shipname: str = chars(20)
    ship_type: int = uint(8)
    to_bow: int = uint(9)
    to_stern: int = uint(9)
    to_port: int = uint(6)
    to_starboard: int = uint(6)
    epfd: int = uint(4)
    eta_month: int = uint(4)
    eta_day: int = uint(5)
    eta_hour: int = uint(5, default=24)
    eta_minute: int = uint(6, default=60)
    draught: int = uint(8)             # 1/10 m
    destination: str = chars(20)
    dte: bool = flag()
    spare: int = reserved(1)

    @property
    def draught_meters(self) -> float:
        return units.draught_meters(self.draught)


# ------------------------------------------------------------------
# Types 6, 8: binary messages
# ------------------------------------------------------------------


@dataclass(frozen=True)
class AddressedBinaryMessage(AisMessage):
    """Addressed binary message (6), 88-1008 bits."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (6,)

    message_type: int = uint(6, default=6)
    seqno: int = uint(2)
    dest_mmsi: int = uint(30)
    retransmit: bool = flag()
    spare: int = reserved(1)
    dac: int = uint(10)
    fid: int = uint(6)
    data: BinaryData = field(default_factory=BinaryData)


@dataclass(frozen=True)
class BinaryBroadcastMessage(AisMessage):
    """Binary broadcast message (8), 56-1008 bits."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (8,)

    message_type: int = uint(6, default=8)
    spare: int = reserved(2)
    dac: int = uint(10)
    fid: int = uint(6)
    data: BinaryData = field(default_factory=BinaryData)


# ------------------------------------------------------------------
# Types 7, 13
# ------------------------------------------------------------------


@dataclass(frozen=True)
class Acknowledgement:
    mmsi: int = 0
    seqno: int = 0


@dataclass(frozen=True)
class BinaryAcknowledge(AisMessage):
    """Binary (7) or safety (13) acknowledge: one to four destinations."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (7, 13)

    message_type: int = uint(6, default=7)
    spare: int = reserved(2)
    acks: tuple[Acknowledgement, ...] = ()


# ------------------------------------------------------------------
# Type 9
# ------------------------------------------------------------------


@dataclass(frozen=True)
class SarAircraftPositionReport(_TimeStampMixin, AisMessage):
    """Standard SAR aircraft position report, 168 bits.

    Unlike the vessel reports, ``sog`` is in whole knots here.
    """

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (9,)

    message_type: int = uint(6, default=9)
    altitude: int = uint(12, default=4095)
    sog: int = uint(10, default=1023)
    position_accuracy: bool = flag()
    position: Position = latlon()
    cog: int = uint(12, default=3600)
    second: int = uint(6, default=60)
    regional: int = uint(8)
    dte: bool = flag()
    spare: int = reserved(3)
    assigned: bool = flag()
    raim: bool = flag()
    radio_selector: bool = flag()
    radio: int = uint(19)

    @property
    def altitude_meters(self) -> int | None:
        return units.altitude_meters(self.altitude)

    @property
    def speed_knots(self) -> int | None:
        return None if self.sog == units.SPEED_NOT_AVAILABLE else self.sog

    @property
    def course(self) -> float | None:
        return units.course_degrees(self.cog)


# ------------------------------------------------------------------
# Type 10
# ------------------------------------------------------------------


@dataclass(frozen=True)
class UtcDateInquiry(AisMessage):
    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (10,)

    message_type: int = uint(6, default=10)
    spare: int = reserved(2)
    dest_mmsi: int = uint(30)
    spare2: int = reserved(2)


# ------------------------------------------------------------------
# Types 12, 14: safety related text
# ------------------------------------------------------------------


@dataclass(frozen=True)
class AddressedSafetyMessage(AisMessage):
    """Addressed safety related message (12), up to 156 characters."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (12,)
    MAX_CHARS: ClassVar[int] = 156

    message_type: int = uint(6, default=12)
    seqno: int = uint(2)
    dest_mmsi: int = uint(30)
    retransmit: bool = flag()
    spare: int = reserved(1)
    text: str = ""


@dataclass(frozen=True)
class SafetyBroadcastMessage(AisMessage):
    """Safety related broadcast message (14), up to 161 characters."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (14,)
    MAX_CHARS: ClassVar[int] = 161

    message_type: int = uint(6, default=14)
    spare: int = reserved(2)
    text: str = ""


# ------------------------------------------------------------------
# Type 15
# ------------------------------------------------------------------


@dataclass(frozen=True)
class Interrogation(AisMessage):
    """Interrogation (15).

    88 bits: one station, one message.  110 bits: the first station is
    asked for a second message (``type1_2`` set).  160 bits: a second
    station is interrogated as well (``mmsi2`` set); the 160-bit form
    always carries the first station's second request, so ``type1_2``
    must be set whenever ``mmsi2`` is.
    """

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (15,)

    message_type: int = uint(6, default=15)
    spare: int = reserved(2)
    mmsi1: int = uint(30)
    type1_1: int = uint(6)
    offset1_1: int = uint(12)
    spare2: int = 0
    type1_2: int | None = None
    offset1_2: int = 0
    spare3: int = 0
    mmsi2: int | None = None
    type2_1: int = 0
    offset2_1: int = 0
    spare4: int = 0


# ------------------------------------------------------------------
# Type 16
# ------------------------------------------------------------------


@dataclass(frozen=True)
class AssignedModeCommand(AisMessage):
    """Assigned mode command (16): 96 bits for one station, 144 for two."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (16,)

    message_type: int = uint(6, default=16)
    spare: int = reserved(2)
    dest_mmsi_a: int = uint(30)
    offset_a: int = uint(12)
    increment_a: int = uint(10)
    dest_mmsi_b: int | None = None
    offset_b: int = 0
    increment_b: int = 0
    spare2: int = 0                    # 4 bits, only in the 96-bit form


# ------------------------------------------------------------------
# Type 17
# ------------------------------------------------------------------


@dataclass(frozen=True)
class DgnssBroadcast(AisMessage):
    """GNSS broadcast binary message (17): reference position + DGNSS words."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (17,)

    message_type: int = uint(6, default=17)
    spare: int = reserved(2)
    position: ShortPosition = latlon(ShortPosition)
    spare2: int = reserved(5)
    data: BinaryData = field(default_factory=BinaryData)


# ------------------------------------------------------------------
# Type 18
# ------------------------------------------------------------------


@dataclass(frozen=True)
class StandardClassBPositionReport(
    _SpeedCourseMixin, _HeadingMixin, _TimeStampMixin, AisMessage
):
    """Standard Class B equipment position report, 168 bits."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (18,)

    message_type: int = uint(6, default=18)
    spare: int = reserved(8)
    sog: int = uint(10, default=1023)
    position_accuracy: bool = flag()
    position: Position = latlon()
    cog: int = uint(12, default=3600)
    heading: int = uint(9, default=511)
    second: int = uint(6, default=60)
    spare2: int = reserved(2)
    cs_unit: bool = flag()
    display: bool = flag()
    dsc: bool = flag()
    band: bool = flag()
    msg22: bool = flag()
    assigned: bool = flag()
    raim: bool = flag()
    radio_selector: bool = flag()
    radio: int = uint(19)


# ------------------------------------------------------------------
# Type 19
# ------------------------------------------------------------------


@dataclass(frozen=True)
class ExtendedClassBPositionReport(
    _SpeedCourseMixin,
    _HeadingMixin,
    _TimeStampMixin,
    _FixTypeMixin,
    _DimensionsMixin,
    AisMessage,
):
    """Extended Class B equipment position report, 312 bits.

    Layout after the header: spare(8) sog(10) accuracy(1) lon(28) lat(27)
    cog(12) heading(9) second(6) spare(4) name(120) type(8) bow(9) stern(9)
    port(6) starboard(6) epfd(4) raim(1) dte(1) assigned(1) spare(4).
    """

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (19,)

    message_type: int = uint(6, default=19)
    spare: int = reserved(8)
    sog: int = uint(10, default=1023)
    position_accuracy: bool = flag()
    position: Position = latlon()
    cog: int = uint(12, default=3600)
    heading: int = uint(9, default=511)
    second: int = uint(6, default=60)
    spare2: int = reserved(4)
    shipname: str = chars(20)
    ship_type: int = uint(8)
    to_bow: int = uint(9)
    to_stern: int = uint(9)
    to_port: int = uint(6)
    to_starboard: int = uint(6)
    epfd: int = uint(4)
    raim: bool = flag()
    dte: bool = flag()
    assigned: bool = flag()
    spare3: int = reserved(4)


# ------------------------------------------------------------------
# Type 20
# ------------------------------------------------------------------


@dataclass(frozen=True)
class SlotReservation:
    offset: int = 0        # 12 bits
    slots: int = 0         # 4 bits
    timeout: int = 0       # 3 bits
    increment: int = 0     # 11 bits


@dataclass(frozen=True)
class DataLinkManagement(AisMessage):
    """Data link management (20): one to four slot reservations."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (20,)

    message_type: int = uint(6, default=20)
    spare: int = reserved(2)
    reservations: tuple[SlotReservation, ...] = ()


# ------------------------------------------------------------------
# Type 21
# ------------------------------------------------------------------


@dataclass(frozen=True)
class AidToNavigationReport(
    _TimeStampMixin, _FixTypeMixin, _DimensionsMixin, AisMessage
):
    """Aid-to-navigation report (21), 272-360 bits.

    ``name_extension`` carries up to 14 characters beyond the 20-character
    name; the message is zero padded to a byte boundary.
    """

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (21,)
    MAX_EXTENSION_CHARS: ClassVar[int] = 14

    message_type: int = uint(6, default=21)
    aid_type: int = uint(5)
    name: str = chars(20)
    position_accuracy: bool = flag()
    position: Position = latlon()
    to_bow: int = uint(9)
    to_stern: int = uint(9)
    to_port: int = uint(6)
    to_starboard: int = uint(6)
    epfd: int = uint(4)
    second: int = uint(6, default=60)
    off_position: bool = flag()
    regional: int = uint(8)
    raim: bool = flag()
    virtual_aid: bool = flag()
    assigned: bool = flag()
    spare: int = reserved(1)
    name_extension: str = ""

    @property
    def full_name(self) -> str:
        return units.clean_text(self.name + self.name_extension)

    @property
    def aid(self) -> AidType | None:
        try:
            return AidType(self.aid_type)
        except ValueError:
            return None


# ------------------------------------------------------------------
# Type 22
# ------------------------------------------------------------------


@dataclass(frozen=True)
class ChannelManagement(AisMessage):
    """Channel management (22), 168 bits.

    The 70 bits after ``power`` hold either a NE/SW region or two
    addressed stations; the ``addressed`` flag that follows them selects
    the interpretation.
    """

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (22,)

    message_type: int = uint(6, default=22)
    spare: int = reserved(2)
    channel_a: int = uint(12)
    channel_b: int = uint(12)
    txrx: int = uint(4)
    power: bool = flag()
    ne_position: ShortPosition = field(default_factory=ShortPosition.not_available)
    sw_position: ShortPosition = field(default_factory=ShortPosition.not_available)
    dest_mmsi_a: int = 0
    spare2: int = 0
    dest_mmsi_b: int = 0
    spare3: int = 0
    addressed: bool = False
    band_a: bool = False
    band_b: bool = False
    zone_size: int = 0
    spare4: int = 0


# ------------------------------------------------------------------
# Type 23
# ------------------------------------------------------------------


@dataclass(frozen=True)
class GroupAssignmentCommand(AisMessage):
    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (23,)

    message_type: int = uint(6, default=23)
    spare: int = reserved(2)
    ne_position: ShortPosition = latlon(ShortPosition)
    sw_position: ShortPosition = latlon(ShortPosition)
    station_type: int = uint(4)
    ship_type: int = uint(8)
    spare2: int = reserved(22)
    txrx: int = uint(2)
    interval: int = uint(4)
    quiet: int = uint(4)
    spare3: int = reserved(6)

    @property
    def station(self) -> StationType | None:
        """Addressed station class; 10-15 are reserved for future use."""
        try:
            return StationType(self.station_type)
        except ValueError:
            return None


# ------------------------------------------------------------------
# Type 24
# ------------------------------------------------------------------


@dataclass(frozen=True)
class StaticDataReportPartA(AisMessage):
    """Class B static data report, part A (vessel name), 160 bits."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (24,)
    PART_NUMBER: ClassVar[int] = 0

    message_type: int = uint(6, default=24)
    part_number: int = uint(2, default=0)
    shipname: str = chars(20)


@dataclass(frozen=True)
class StaticDataReportPartB(_DimensionsMixin, AisMessage):
    """Class B static data report, part B, 168 bits.

    For auxiliary craft (MMSI 98MIDxxxx) the 30 dimension bits carry the
    mothership MMSI instead; see :attr:`mothership_mmsi`.
    """

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (24,)
    PART_NUMBER: ClassVar[int] = 1

    message_type: int = uint(6, default=24)
    part_number: int = uint(2, default=1)
    ship_type: int = uint(8)
    vendor_id: str = chars(7)
    callsign: str = chars(7)
    to_bow: int = uint(9)
    to_stern: int = uint(9)
    to_port: int = uint(6)
    to_starboard: int = uint(6)
    spare: int = reserved(6)

    @property
    def is_auxiliary(self) -> bool:
        return str(self.mmsi).startswith("98")

    @property
    def mothership_mmsi(self) -> int | None:
        if not self.is_auxiliary:
            return None
        return (
            (self.to_bow << 21)
            | (self.to_stern << 12)
            | (self.to_port << 6)
            | self.to_starboard
        )


# ------------------------------------------------------------------
# Types 25, 26: slot binary messages
# ------------------------------------------------------------------


@dataclass(frozen=True)
class SingleSlotBinaryMessage(AisMessage):
    """Single slot binary message (25), 40-168 bits."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (25,)

    message_type: int = uint(6, default=25)
    addressed: bool = flag()
    structured: bool = flag()
    dest_mmsi: int = 0
    spare: int = 0
    app_id: int = 0
    data: BinaryData = field(default_factory=BinaryData)


@dataclass(frozen=True)
class MultipleSlotBinaryMessage(AisMessage):
    """Multiple slot binary message with communications state (26)."""

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (26,)

    message_type: int = uint(6, default=26)
    addressed: bool = flag()
    structured: bool = flag()
    dest_mmsi: int = 0
    spare: int = 0
    app_id: int = 0
    data: BinaryData = field(default_factory=BinaryData)
    radio_selector: bool = False
    radio: int = 0


# ------------------------------------------------------------------
# Type 27
# ------------------------------------------------------------------


@dataclass(frozen=True)
class LongRangeBroadcast(AisMessage):
    """Position report for long-range applications (27), 96 bits.

    Speed is in whole knots (63 = not available) and course in whole
    degrees (511 = not available).
    """

    MESSAGE_TYPES: ClassVar[tuple[int, ...]] = (27,)

    message_type: int = uint(6, default=27)
    position_accuracy: bool = flag()
    raim: bool = flag()
    nav_status: int = uint(4, default=15)
    position: ShortPosition = latlon(ShortPosition)
    sog: int = uint(6, default=63)
    cog: int = uint(9, default=511)
    gnss: bool = flag()
    spare: int = reserved(1)

    @property
    def navigation_status(self) -> NavigationStatus:
        return units.navigation_status(self.nav_status)

    @property
    def speed_knots(self) -> int | None:
        return units.long_range_speed_knots(self.sog)

    @property
    def course(self) -> int | None:
        return units.long_range_course_degrees(self.cog)


AnyMessage = Union[
    PositionReport,
    BaseStationReport,
    StaticAndVoyageData,
    AddressedBinaryMessage,
    BinaryAcknowledge,
    BinaryBroadcastMessage,
    SarAircraftPositionReport,
    UtcDateInquiry,
    AddressedSafetyMessage,
    SafetyBroadcastMessage,
    Interrogation,
    AssignedModeCommand,
    DgnssBroadcast,
    StandardClassBPositionReport,
    ExtendedClassBPositionReport,
    DataLinkManagement,
    AidToNavigationReport,
    ChannelManagement,
    GroupAssignmentCommand,
    StaticDataReportPartA,
    StaticDataReportPartB,
    SingleSlotBinaryMessage,
    MultipleSlotBinaryMessage,
    LongRangeBroadcast,
]
