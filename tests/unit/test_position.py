"""Unit tests for full and short resolution positions."""

from __future__ import annotations

import pytest

from aislink.codec.bits import BitEncoder
from aislink.codec.position import Position, ShortPosition


class TestPositionSentinels:
    def test_sentinel_values(self):
        assert Position.LON_NOT_AVAILABLE == 0x6791AC0 == 181 * 600000
        assert Position.LAT_NOT_AVAILABLE == 0x3412140 == 91 * 600000

    def test_default_is_not_available(self):
        pos = Position()
        assert pos == Position.not_available()
        assert not pos.is_available
        assert pos.longitude is None
        assert pos.latitude is None

    def test_sentinels_round_trip_through_bits(self):
        enc = BitEncoder()
        Position.not_available().encode(enc)
        assert enc.bit_position == 55
        pos = Position.read(enc.to_buffer())
        assert pos.raw_longitude == 0x6791AC0
        assert pos.raw_latitude == 0x3412140

    def test_partial_availability(self):
        pos = Position.from_degrees(None, 10.0)
        assert pos.longitude_available
        assert not pos.latitude_available
        assert not pos.is_available
        assert pos.longitude == pytest.approx(10.0)


class TestPositionDegrees:
    def test_negative_longitude(self):
        pos = Position.from_degrees(-10.0, -20.0)
        assert pos.longitude == pytest.approx(-20.0)
        assert pos.latitude == pytest.approx(-10.0)
        # stored as unsigned two's complement
        assert pos.raw_longitude == (1 << 28) - 20 * 600000

    def test_round_trip_through_bits(self):
        pos = Position.from_degrees(47.582833, -122.345833)
        enc = BitEncoder()
        pos.encode(enc)
        assert Position.read(enc.to_buffer()) == pos

    def test_decode_masks_to_width(self):
        pos = Position.decode(-1, -1)
        assert pos.raw_longitude == (1 << 28) - 1
        assert pos.raw_latitude == (1 << 27) - 1
        assert pos.longitude == pytest.approx(-1 / 600000)

    def test_to_dict(self):
        assert Position().to_dict() == {"lat": None, "lon": None}


class TestShortPosition:
    def test_widths(self):
        enc = BitEncoder()
        ShortPosition().encode(enc)
        assert enc.bit_position == 35

    def test_sentinels(self):
        pos = ShortPosition.not_available()
        assert pos.raw_longitude == 0x1A838 == 181 * 600
        assert pos.raw_latitude == 0xD548 == 91 * 600
        assert not pos.is_available

    def test_degrees(self):
        pos = ShortPosition.from_degrees(-33.5, 151.25)
        assert pos.latitude == pytest.approx(-33.5)
        assert pos.longitude == pytest.approx(151.25)
        enc = BitEncoder()
        pos.encode(enc)
        assert ShortPosition.read(enc.to_buffer()) == pos

    def test_not_equal_to_full_position(self):
        assert ShortPosition(0, 0) != Position(0, 0)
