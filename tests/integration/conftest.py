"""Shared fixtures for integration tests."""

from __future__ import annotations

import pytest

from aislink.codec.bits import BinaryData
from aislink.codec.messages import (
    AidToNavigationReport,
    BaseStationReport,
    BinaryBroadcastMessage,
    SafetyBroadcastMessage,
    StaticAndVoyageData,
    StaticDataReportPartA,
    StaticDataReportPartB,
)
from aislink.codec.position import Position


@pytest.fixture
def traffic(position_report, testvessel):
    """A small mixed picture from one harbour."""
    return [
        position_report,
        testvessel,
        BaseStationReport(
            mmsi=2442000,
            year=2024,
            month=6,
            day=1,
            hour=12,
            minute=30,
            second=5,
            position=Position.from_degrees(51.95, 4.05),
            epfd=1,
        ),
        StaticAndVoyageData(
            mmsi=244123456,
            imo=9074729,
            callsign="PDAB",
            shipname="NORTHERN STAR",
            ship_type=70,
            to_bow=120,
            to_stern=30,
            to_port=10,
            to_starboard=12,
            epfd=1,
            eta_month=6,
            eta_day=2,
            eta_hour=8,
            eta_minute=0,
            draught=85,
            destination="ROTTERDAM",
        ),
        SafetyBroadcastMessage(mmsi=2442000, text="GALE WARNING"),
        BinaryBroadcastMessage(mmsi=2442000, dac=1, fid=31, data=BinaryData(b"\xde\xad\xbe\xef", 32)),
        AidToNavigationReport(
            mmsi=992446001,
            aid_type=14,
            name="MAASMOND NOORD ENTRA",
            position=Position.from_degrees(51.98, 4.02),
            name_extension="NCE",
        ),
        StaticDataReportPartA(mmsi=244999001, shipname="SAILOR"),
        StaticDataReportPartB(mmsi=244999001, ship_type=36, vendor_id="ABC", callsign="PE1234"),
    ]
