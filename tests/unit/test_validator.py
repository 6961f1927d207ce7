"""Tests for AisValidator field range checks."""

from __future__ import annotations

import dataclasses

from aislink.codec.messages import (
    Acknowledgement,
    BaseStationReport,
    BinaryAcknowledge,
    DataLinkManagement,
    ExtendedClassBPositionReport,
    Interrogation,
    PositionReport,
    StaticAndVoyageData,
)
from aislink.codec.validator import AisValidator, ValidationResult


def _fields(results: list[ValidationResult]) -> set[str]:
    return {r.field_name for r in results}


class TestValidRecords:
    def test_fixture_report_valid(self, position_report):
        assert AisValidator.validate(position_report) == []

    def test_defaults_valid(self):
        assert AisValidator.validate(PositionReport()) == []
        assert AisValidator.validate(StaticAndVoyageData()) == []

    def test_testvessel_valid(self, testvessel):
        assert AisValidator.validate(testvessel) == []


class TestRanges:
    def test_mmsi_too_large(self, position_report):
        rec = dataclasses.replace(position_report, mmsi=1_000_000_000)
        results = AisValidator.validate(rec)
        assert _fields(results) == {"mmsi"}
        assert not results[0].valid
        assert "out of range" in results[0].message

    def test_heading(self, position_report):
        assert _fields(AisValidator.validate(dataclasses.replace(position_report, heading=360))) == {"heading"}
        assert AisValidator.validate(dataclasses.replace(position_report, heading=511)) == []

    def test_course_and_speed(self, position_report):
        rec = dataclasses.replace(position_report, cog=3601, sog=1024)
        assert _fields(AisValidator.validate(rec)) == {"cog", "sog"}

    def test_date_fields(self):
        rec = BaseStationReport(month=13, day=32, hour=25, minute=61)
        assert _fields(AisValidator.validate(rec)) == {"month", "day", "hour", "minute"}

    def test_epfd(self, testvessel):
        assert _fields(AisValidator.validate(dataclasses.replace(testvessel, epfd=12))) == {"epfd"}
        assert AisValidator.validate(dataclasses.replace(testvessel, epfd=15)) == []

    def test_repeat(self, position_report):
        assert _fields(AisValidator.validate(dataclasses.replace(position_report, repeat=4))) == {"repeat"}

    def test_text_alphabet(self, testvessel):
        rec = dataclasses.replace(testvessel, shipname="tëst")
        assert _fields(AisValidator.validate(rec)) == {"shipname"}

    def test_type_mismatch(self):
        rec = ExtendedClassBPositionReport(message_type=18)
        assert "message_type" in _fields(AisValidator.validate(rec))


class TestGroups:
    def test_ack_count(self):
        assert _fields(AisValidator.validate(BinaryAcknowledge())) == {"acks"}
        acks = tuple(Acknowledgement(i, 0) for i in range(5))
        assert _fields(AisValidator.validate(BinaryAcknowledge(acks=acks))) == {"acks"}

    def test_ack_entries(self):
        rec = BinaryAcknowledge(acks=(Acknowledgement(1_000_000_000, 0),))
        assert _fields(AisValidator.validate(rec)) == {"acks[0].mmsi"}

    def test_reservation_count(self):
        assert _fields(AisValidator.validate(DataLinkManagement())) == {"reservations"}

    def test_second_station_needs_first_request(self):
        rec = Interrogation(mmsi1=244123456, type1_1=5, mmsi2=244999001)
        assert _fields(AisValidator.validate(rec)) == {"type1_2"}
        assert AisValidator.validate(dataclasses.replace(rec, type1_2=24)) == []

    def test_single_station_forms_valid(self):
        assert AisValidator.validate(Interrogation(mmsi1=244123456, type1_1=5)) == []
        assert AisValidator.validate(Interrogation(mmsi1=244123456, type1_1=5, type1_2=24)) == []


class TestUnknownObject:
    def test_non_record(self):
        results = AisValidator.validate(object())
        assert len(results) == 1
        assert results[0].field_name == "type"
        assert not results[0].valid
