"""Fixed-point AIS positions.

Positions keep the raw two's complement values exactly as transmitted so
that decode -> encode is bit-exact, including the "not available"
sentinels (181 degrees longitude, 91 degrees latitude).  Degree values are
derived on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from aislink.codec.bits import BitBuffer, BitEncoder


def _to_signed(raw: int, bits: int) -> int:
    raw &= (1 << bits) - 1
    if raw >= (1 << (bits - 1)):
        raw -= (1 << bits)
    return raw


@dataclass(frozen=True)
class Position:
    """Longitude (28 bits) / latitude (27 bits) in 1/10000 minute."""

    LON_BITS: ClassVar[int] = 28
    LAT_BITS: ClassVar[int] = 27
    SCALE: ClassVar[float] = 600000.0   # units per degree
    LON_NOT_AVAILABLE: ClassVar[int] = 0x6791AC0   # 181 deg
    LAT_NOT_AVAILABLE: ClassVar[int] = 0x3412140   # 91 deg

    raw_longitude: int = LON_NOT_AVAILABLE
    raw_latitude: int = LAT_NOT_AVAILABLE

    # ------------------------------------------------------------------

    @classmethod
    def decode(cls, raw_longitude: int, raw_latitude: int) -> Position:
        return cls(
            raw_longitude & ((1 << cls.LON_BITS) - 1),
            raw_latitude & ((1 << cls.LAT_BITS) - 1),
        )

    @classmethod
    def read(cls, buf: BitBuffer) -> Position:
        lon = buf.read_uint(cls.LON_BITS)
        lat = buf.read_uint(cls.LAT_BITS)
        return cls(lon, lat)

    def encode(self, enc: BitEncoder) -> None:
        enc.write_uint(self.raw_longitude, self.LON_BITS)
        enc.write_uint(self.raw_latitude, self.LAT_BITS)

    @classmethod
    def from_degrees(cls, latitude: float | None, longitude: float | None) -> Position:
        """Build from degrees; ``None`` selects the matching sentinel."""
        if longitude is None:
            raw_lon = cls.LON_NOT_AVAILABLE
        else:
            raw_lon = round(longitude * cls.SCALE) & ((1 << cls.LON_BITS) - 1)
        if latitude is None:
            raw_lat = cls.LAT_NOT_AVAILABLE
        else:
            raw_lat = round(latitude * cls.SCALE) & ((1 << cls.LAT_BITS) - 1)
        return cls(raw_lon, raw_lat)

    @classmethod
    def not_available(cls) -> Position:
        return cls(cls.LON_NOT_AVAILABLE, cls.LAT_NOT_AVAILABLE)

    # ------------------------------------------------------------------

    @property
    def longitude_available(self) -> bool:
        return self.raw_longitude != self.LON_NOT_AVAILABLE

    @property
    def latitude_available(self) -> bool:
        return self.raw_latitude != self.LAT_NOT_AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.longitude_available and self.latitude_available

    @property
    def longitude(self) -> float | None:
        """Longitude in degrees, or None when not available."""
        if not self.longitude_available:
            return None
        return _to_signed(self.raw_longitude, self.LON_BITS) / self.SCALE

    @property
    def latitude(self) -> float | None:
        """Latitude in degrees, or None when not available."""
        if not self.latitude_available:
            return None
        return _to_signed(self.raw_latitude, self.LAT_BITS) / self.SCALE

    def to_dict(self) -> dict:
        return {"lat": self.latitude, "lon": self.longitude}


@dataclass(frozen=True)
class ShortPosition(Position):
    """Longitude (18 bits) / latitude (17 bits) in 1/10 minute.

    Used by DGNSS broadcasts, channel management, group assignment and
    long-range reports.
    """

    LON_BITS: ClassVar[int] = 18
    LAT_BITS: ClassVar[int] = 17
    SCALE: ClassVar[float] = 600.0
    LON_NOT_AVAILABLE: ClassVar[int] = 0x1A838
    LAT_NOT_AVAILABLE: ClassVar[int] = 0xD548

    raw_longitude: int = LON_NOT_AVAILABLE
    raw_latitude: int = LAT_NOT_AVAILABLE
