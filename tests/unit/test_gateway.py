"""Tests for AisGateway skip-and-continue processing."""

from __future__ import annotations

import dataclasses

import pytest
from omegaconf import OmegaConf

from aislink.codec.bits import EncodedPayload
from aislink.codec.config import GatewayConfig
from aislink.codec.encoding import encode_message
from aislink.codec.gateway import AisGateway
from aislink.codec.messages import BinaryAcknowledge, Interrogation, PositionReport
from aislink.nmea.sentence import build_sentence, checksum


def _frame(body: str) -> str:
    return f"!{body}*{checksum(body)}"


# ===========================================================================
# Inbound
# ===========================================================================


class TestProcessLine:
    def test_decodes_known_sentence(self, type1_sentence):
        gw = AisGateway()
        msg = gw.process_line(type1_sentence)
        assert isinstance(msg, PositionReport)
        assert msg.mmsi == 477553000
        stats = gw.get_stats()
        assert stats["sentences_received"] == 1
        assert stats["messages_decoded"] == 1

    def test_bad_checksum_counted(self, type1_sentence):
        gw = AisGateway()
        assert gw.process_line(type1_sentence[:-2] + "00") is None
        assert gw.get_stats()["sentence_errors"] == 1

    def test_fragment_skipped(self):
        gw = AisGateway()
        assert gw.process_line(_frame("AIVDM,2,1,7,A,55NBjP01mtGIL@CW,0")) is None
        assert gw.get_stats()["fragments_skipped"] == 1

    def test_unknown_type_counted(self):
        gw = AisGateway()
        line = build_sentence(EncodedPayload("L" + "0" * 27, 168))
        assert gw.process_line(line) is None
        assert gw.get_stats()["unknown_type"] == 1

    def test_wrong_length_counted(self, type1_payload):
        gw = AisGateway()
        line = build_sentence(EncodedPayload(type1_payload[:27], 162))
        assert gw.process_line(line) is None
        assert gw.get_stats()["wrong_length"] == 1

    def test_malformed_counted(self):
        gw = AisGateway()
        line = _frame("AIVDM,1,1,,A,1X,0")
        assert gw.process_line(line) is None
        assert gw.get_stats()["malformed"] == 1

    def test_invalid_counted(self, position_report):
        gw = AisGateway()
        bad = dataclasses.replace(position_report, heading=400)
        line = build_sentence(encode_message(bad))
        assert gw.process_line(line) is None
        assert gw.get_stats()["invalid"] == 1

    def test_validation_disabled(self, position_report):
        gw = AisGateway(GatewayConfig(validate_inbound=False))
        bad = dataclasses.replace(position_report, heading=400)
        msg = gw.process_line(build_sentence(encode_message(bad)))
        assert msg == bad

    def test_vdo_rejected_when_disabled(self, type1_payload):
        gw = AisGateway(GatewayConfig(accept_vdo=False))
        line = build_sentence(EncodedPayload(type1_payload, 168), kind="VDO")
        assert gw.process_line(line) is None
        stats = gw.get_stats()
        assert stats["vdo_skipped"] == 1
        assert stats["decode_errors"] == 0

    def test_vdo_accepted_by_default(self, type1_payload):
        gw = AisGateway()
        line = build_sentence(EncodedPayload(type1_payload, 168), kind="VDO")
        assert gw.process_line(line).mmsi == 477553000
        assert gw.get_stats()["vdo_skipped"] == 0


class TestSkipAndContinue:
    def test_stream_survives_failures(self, type1_sentence, type1_payload):
        gw = AisGateway()
        lines = [
            type1_sentence,
            "garbage",
            type1_sentence[:-2] + "00",
            build_sentence(EncodedPayload("L" + "0" * 27, 168)),
            build_sentence(EncodedPayload(type1_payload[:27], 162)),
            "",
            type1_sentence,
        ]
        msgs = gw.process_lines(lines)
        assert len(msgs) == 2
        assert all(m.mmsi == 477553000 for m in msgs)
        stats = gw.get_stats()
        assert stats["sentence_errors"] == 2
        assert stats["unknown_type"] == 1
        assert stats["wrong_length"] == 1
        assert stats["decode_errors"] == 2
        assert stats["sentences_received"] == 6


# ===========================================================================
# Outbound
# ===========================================================================


class TestEncodeLine:
    def test_round_trip(self, position_report):
        gw = AisGateway()
        line = gw.encode_line(position_report)
        assert line is not None
        assert line.startswith("!AIVDM,1,1,,A,")
        assert gw.process_line(line) == position_report
        assert gw.get_stats()["messages_encoded"] == 1

    def test_channel_override(self, position_report):
        line = AisGateway().encode_line(position_report, channel="B")
        assert ",B," in line

    def test_invalid_outbound_dropped(self, position_report):
        gw = AisGateway()
        assert gw.encode_line(dataclasses.replace(position_report, sog=2000)) is None
        assert gw.get_stats()["invalid"] == 1

    def test_encode_error_counted(self):
        gw = AisGateway(GatewayConfig(validate_outbound=False))
        assert gw.encode_line(BinaryAcknowledge()) is None
        assert gw.get_stats()["encode_errors"] == 1

    def test_record_type_mismatch_counted(self):
        gw = AisGateway(GatewayConfig(validate_outbound=False))
        assert gw.encode_line(PositionReport(message_type=5)) is None
        stats = gw.get_stats()
        assert stats["encode_errors"] == 1
        assert stats["messages_encoded"] == 0

    def test_second_station_without_first_request_rejected(self):
        gw = AisGateway()
        assert gw.encode_line(Interrogation(mmsi=2442000, mmsi1=244123456, type1_1=5, mmsi2=244999001)) is None
        assert gw.get_stats()["invalid"] == 1


# ===========================================================================
# Config / stats
# ===========================================================================


class TestGatewayConfig:
    def test_defaults(self):
        cfg = GatewayConfig.from_omegaconf(None)
        assert cfg.validate_inbound is True
        assert cfg.talker == "AI"

    def test_from_omegaconf(self):
        cfg = OmegaConf.create({"validate_inbound": False, "channel": "B"})
        gw = AisGateway.from_config(cfg)
        assert gw.config.validate_inbound is False
        assert gw.config.channel == "B"

    def test_from_dict(self):
        assert GatewayConfig.from_omegaconf({"talker": "AB"}).talker == "AB"

    def test_stats_reset(self, type1_sentence):
        gw = AisGateway()
        gw.process_line(type1_sentence)
        gw.stats.reset()
        assert all(v == 0 for v in gw.get_stats().values())


@pytest.mark.parametrize("line", ["", "!", "!*", "!AIVDM*00"])
def test_degenerate_lines_never_raise(line):
    gw = AisGateway()
    assert gw.process_line(line) is None
