"""Shared pytest fixtures for AISLINK tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from omegaconf import OmegaConf

from aislink.codec.messages import ExtendedClassBPositionReport, PositionReport
from aislink.codec.position import Position

# Class A position report, MMSI 477553000, moored.
SAMPLE_TYPE1_SENTENCE = "!AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0*5C"
SAMPLE_TYPE1_PAYLOAD = "177KQJ5000G?tO`K>RA1wUbN0TKH"


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(project_root: Path) -> Path:
    return project_root / "config" / "default.yaml"


@pytest.fixture
def default_config(config_path: Path):
    return OmegaConf.load(config_path)


@pytest.fixture
def type1_sentence() -> str:
    return SAMPLE_TYPE1_SENTENCE


@pytest.fixture
def type1_payload() -> str:
    return SAMPLE_TYPE1_PAYLOAD


@pytest.fixture
def position_report() -> PositionReport:
    """A fully populated, range-valid class A report."""
    return PositionReport(
        message_type=1,
        repeat=0,
        mmsi=244123456,
        nav_status=0,
        rot=12,
        sog=123,
        position_accuracy=True,
        position=Position.from_degrees(51.9225, 4.47917),
        cog=2451,
        heading=245,
        second=30,
        maneuver=1,
        raim=True,
        radio=0x1234,
    )


@pytest.fixture
def testvessel() -> ExtendedClassBPositionReport:
    """Type 19 with unavailable position and a name."""
    return ExtendedClassBPositionReport(
        mmsi=123456789,
        sog=0,
        position_accuracy=True,
        position=Position.not_available(),
        shipname="TESTVESSEL",
        ship_type=70,
    )
