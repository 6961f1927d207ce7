"""NMEA 0183 VDM/VDO sentence framing.

A single AIS sentence looks like::

    !AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0*5C

i.e. talker + kind, fragment count, fragment number, sequential message
id, radio channel, armored payload, fill bits, then ``*`` and a two-digit
hex XOR checksum of everything between ``!`` and ``*``.

Multi-fragment messages are parsed but not reassembled.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from aislink.codec.bits import EncodedPayload

KINDS = ("VDM", "VDO")
_FIELD_COUNT = 7
_CHECKSUM_RE = re.compile(r"[0-9A-Fa-f]{2}")


class SentenceError(ValueError):
    """Sentence framing, field count or checksum failure."""


def checksum(body: str) -> str:
    """XOR of the characters of *body* as two upper-case hex digits."""
    value = 0
    for char in body:
        value ^= ord(char)
    return f"{value:02X}"


@dataclass(frozen=True)
class VdmSentence:
    talker: str
    kind: str
    fragment_count: int
    fragment_number: int
    sequence_id: int | None
    channel: str
    payload: str
    fill_bits: int

    @property
    def bit_length(self) -> int:
        return 6 * len(self.payload) - self.fill_bits

    @property
    def is_fragmented(self) -> bool:
        return self.fragment_count > 1

    @property
    def own_ship(self) -> bool:
        """VDO sentences report the receiving station's own transmissions."""
        return self.kind == "VDO"


def parse_sentence(line: str) -> VdmSentence:
    """Parse and checksum-verify one ``!xxVDM``/``!xxVDO`` line."""
    line = line.strip()
    if not line.startswith("!"):
        raise SentenceError(f"Not an encapsulation sentence: {line[:16]!r}")
    if not line.isascii():
        raise SentenceError(f"Non-ASCII characters in {line[:16]!r}")
    body, star, given = line[1:].partition("*")
    if not star:
        raise SentenceError("Missing checksum")
    if not _CHECKSUM_RE.fullmatch(given):
        raise SentenceError(f"Malformed checksum {given!r}")
    expected = checksum(body)
    if given.upper() != expected:
        raise SentenceError(f"Checksum mismatch: got {given!r}, computed {expected}")

    parts = body.split(",")
    if len(parts) != _FIELD_COUNT:
        raise SentenceError(f"Expected {_FIELD_COUNT} fields, got {len(parts)}")

    address = parts[0]
    talker, kind = address[:-3], address[-3:]
    if len(talker) != 2 or kind not in KINDS:
        raise SentenceError(f"Unsupported sentence address {address!r}")

    try:
        fragment_count = int(parts[1])
        fragment_number = int(parts[2])
        sequence_id = int(parts[3]) if parts[3] else None
        fill_bits = int(parts[6]) if parts[6] else 0
    except ValueError:
        raise SentenceError(f"Non-numeric field in {line!r}") from None

    if not 1 <= fragment_number <= fragment_count:
        raise SentenceError(f"Fragment {fragment_number} of {fragment_count}")
    if not 0 <= fill_bits <= 5:
        raise SentenceError(f"Fill bits {fill_bits} out of range [0, 5]")

    payload = parts[5]
    if fill_bits and not payload:
        raise SentenceError("Fill bits on an empty payload")

    return VdmSentence(
        talker=talker,
        kind=kind,
        fragment_count=fragment_count,
        fragment_number=fragment_number,
        sequence_id=sequence_id,
        channel=parts[4],
        payload=payload,
        fill_bits=fill_bits,
    )


def build_sentence(
    encoded: EncodedPayload,
    channel: str = "A",
    talker: str = "AI",
    kind: str = "VDM",
) -> str:
    """Wrap an encoded payload in a single-fragment sentence."""
    if kind not in KINDS:
        raise SentenceError(f"Unsupported sentence kind {kind!r}")
    body = f"{talker}{kind},1,1,,{channel},{encoded.text},{encoded.fill_bits}"
    return f"!{body}*{checksum(body)}"
