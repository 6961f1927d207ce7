"""Raw field value -> semantic value helpers.

Records store raw wire values; these functions interpret them, mapping
the standard's reserved values to ``None`` or to an explicit status.
"""

from __future__ import annotations

from aislink.core.types import (
    ManeuverIndicator,
    NavigationStatus,
    PositionFixType,
    TimeStampStatus,
)

SPEED_NOT_AVAILABLE = 1023
SPEED_SATURATED = 1022          # 102.2 knots or more
COURSE_NOT_AVAILABLE = 3600
HEADING_NOT_AVAILABLE = 511
ROT_NOT_AVAILABLE = -128
SECOND_NOT_AVAILABLE = 60
ALTITUDE_NOT_AVAILABLE = 4095
ALTITUDE_SATURATED = 4094       # 4094 m or higher
LONG_RANGE_SPEED_NOT_AVAILABLE = 63
LONG_RANGE_COURSE_NOT_AVAILABLE = 511

_TIMESTAMP_RESERVED = {
    60: TimeStampStatus.NOT_AVAILABLE,
    61: TimeStampStatus.MANUAL_INPUT,
    62: TimeStampStatus.DEAD_RECKONING,
    63: TimeStampStatus.INOPERATIVE,
}


def speed_knots(raw: int) -> float | None:
    """Speed over ground in knots (1/10 knot steps); 1022 means >= 102.2."""
    if raw == SPEED_NOT_AVAILABLE:
        return None
    return raw / 10.0


def speed_is_saturated(raw: int) -> bool:
    return raw == SPEED_SATURATED


def course_degrees(raw: int) -> float | None:
    """Course over ground in degrees (1/10 degree steps)."""
    if raw >= COURSE_NOT_AVAILABLE:
        return None
    return raw / 10.0


def heading_degrees(raw: int) -> int | None:
    if raw == HEADING_NOT_AVAILABLE:
        return None
    return raw


def rate_of_turn(raw: int) -> float | None:
    """Rate of turn in degrees/minute from the signed ROT indicator.

    +/-127 are the "turning faster than 5 deg/30 s" indicators and are
    returned as +/-720 (the indicator does not carry a finer value).
    """
    if raw == ROT_NOT_AVAILABLE:
        return None
    if raw in (127, -127):
        return 720.0 if raw > 0 else -720.0
    rate = (raw / 4.733) ** 2
    return rate if raw >= 0 else -rate


def timestamp_status(raw: int) -> TimeStampStatus:
    if raw < SECOND_NOT_AVAILABLE:
        return TimeStampStatus.VALID
    return _TIMESTAMP_RESERVED.get(raw, TimeStampStatus.NOT_AVAILABLE)


def utc_second(raw: int) -> int | None:
    return raw if raw < SECOND_NOT_AVAILABLE else None


def position_fix_type(raw: int) -> PositionFixType | None:
    """EPFD type, or None for the unused codes 9-14."""
    try:
        return PositionFixType(raw)
    except ValueError:
        return None


def navigation_status(raw: int) -> NavigationStatus:
    return NavigationStatus(raw & 0xF)


def maneuver_indicator(raw: int) -> ManeuverIndicator | None:
    try:
        return ManeuverIndicator(raw)
    except ValueError:
        return None


def altitude_meters(raw: int) -> int | None:
    """SAR aircraft altitude; 4094 means 4094 m or higher."""
    if raw == ALTITUDE_NOT_AVAILABLE:
        return None
    return raw


def draught_meters(raw: int) -> float:
    return raw / 10.0


def long_range_speed_knots(raw: int) -> int | None:
    if raw == LONG_RANGE_SPEED_NOT_AVAILABLE:
        return None
    return raw


def long_range_course_degrees(raw: int) -> int | None:
    if raw == LONG_RANGE_COURSE_NOT_AVAILABLE:
        return None
    return raw


def clean_text(text: str) -> str:
    """Display form of a six-bit text field (drops ``@`` padding and blanks)."""
    return text.split("@", 1)[0].rstrip()
