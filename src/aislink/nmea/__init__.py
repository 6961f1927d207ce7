"""NMEA VDM/VDO sentence framing for AIS payloads."""

from aislink.nmea.sentence import (
    SentenceError,
    VdmSentence,
    build_sentence,
    checksum,
    parse_sentence,
)

__all__ = [
    "SentenceError",
    "VdmSentence",
    "build_sentence",
    "checksum",
    "parse_sentence",
]
