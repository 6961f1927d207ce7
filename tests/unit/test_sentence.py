"""Tests for NMEA VDM/VDO sentence framing."""

from __future__ import annotations

import pytest

from aislink.codec.bits import EncodedPayload
from aislink.nmea.sentence import (
    SentenceError,
    build_sentence,
    checksum,
    parse_sentence,
)


def _frame(body: str) -> str:
    return f"!{body}*{checksum(body)}"


class TestChecksum:
    def test_known_sentence(self, type1_sentence):
        body = type1_sentence[1:type1_sentence.index("*")]
        assert checksum(body) == "5C"

    def test_empty(self):
        assert checksum("") == "00"


class TestParse:
    def test_known_sentence(self, type1_sentence, type1_payload):
        s = parse_sentence(type1_sentence)
        assert s.talker == "AI"
        assert s.kind == "VDM"
        assert s.fragment_count == 1
        assert s.fragment_number == 1
        assert s.sequence_id is None
        assert s.channel == "B"
        assert s.payload == type1_payload
        assert s.fill_bits == 0
        assert s.bit_length == 168
        assert not s.is_fragmented
        assert not s.own_ship

    def test_trailing_whitespace(self, type1_sentence):
        assert parse_sentence(type1_sentence + "\r\n").bit_length == 168

    def test_lower_case_checksum(self):
        line = _frame("AIVDM,1,1,,A,1,0")
        assert parse_sentence(line[:-2] + line[-2:].lower()).payload == "1"

    def test_fill_bits_reduce_length(self):
        s = parse_sentence(_frame("AIVDO,1,1,,A,ww,2"))
        assert s.bit_length == 10
        assert s.own_ship

    def test_fragment(self):
        s = parse_sentence(_frame("BSVDM,2,1,3,A,55NBjP01mtGIL@CW;SM<D60P5Ld000000000000P0`<3557l0<50@kk@K5h@00000,0"))
        assert s.is_fragmented
        assert s.sequence_id == 3
        assert s.talker == "BS"

    def test_bad_checksum(self, type1_sentence):
        with pytest.raises(SentenceError, match="Checksum mismatch"):
            parse_sentence(type1_sentence[:-2] + "00")

    def test_missing_checksum(self):
        with pytest.raises(SentenceError, match="Missing checksum"):
            parse_sentence("!AIVDM,1,1,,A,1,0")

    def test_not_encapsulated(self):
        with pytest.raises(SentenceError):
            parse_sentence(_frame("GPGGA,1,2,3").replace("!", "$"))

    def test_wrong_sentence_type(self):
        with pytest.raises(SentenceError, match="Unsupported sentence address"):
            parse_sentence(_frame("GPGGA,1,1,,A,1,0"))

    def test_field_count(self):
        with pytest.raises(SentenceError, match="Expected 7 fields"):
            parse_sentence(_frame("AIVDM,1,1,,A,1"))

    def test_non_numeric(self):
        with pytest.raises(SentenceError, match="Non-numeric"):
            parse_sentence(_frame("AIVDM,x,1,,A,1,0"))

    def test_fill_bits_range(self):
        with pytest.raises(SentenceError, match="Fill bits"):
            parse_sentence(_frame("AIVDM,1,1,,A,1,6"))

    def test_fragment_number_range(self):
        with pytest.raises(SentenceError, match="Fragment"):
            parse_sentence(_frame("AIVDM,1,2,,A,1,0"))

    def test_non_ascii_rejected(self, type1_payload):
        # U+FFFD pushes the XOR checksum past two hex digits
        body = f"A\ufffdVDM,1,1,,A,{type1_payload},0"
        assert len(checksum(body)) == 4
        with pytest.raises(SentenceError, match="Non-ASCII"):
            parse_sentence(f"!{body}*{checksum(body)}")

    @pytest.mark.parametrize("given", ["5", "5C0", "0x5C", "G1", ""])
    def test_malformed_checksum(self, given):
        with pytest.raises(SentenceError, match="Malformed checksum"):
            parse_sentence(f"!AIVDM,1,1,,A,1,0*{given}")

    def test_sentence_error_is_value_error(self):
        assert issubclass(SentenceError, ValueError)


class TestBuild:
    def test_round_trip(self, type1_payload, type1_sentence):
        line = build_sentence(EncodedPayload(type1_payload, 168), channel="B")
        assert line == type1_sentence

    def test_fill_bits_written(self):
        line = build_sentence(EncodedPayload("ww", 10))
        s = parse_sentence(line)
        assert s.fill_bits == 2
        assert s.bit_length == 10
        assert s.channel == "A"

    def test_vdo(self):
        assert build_sentence(EncodedPayload("1", 6), kind="VDO").startswith("!AIVDO,")

    def test_unknown_kind(self):
        with pytest.raises(SentenceError):
            build_sentence(EncodedPayload("1", 6), kind="GGA")
