"""Bit-level reader/writer for six-bit armored AIS payloads.

AIS payloads travel as printable "armor" characters, each carrying six
bits of the binary message MSB-first.  BitBuffer unpacks the armor into a
bit array and pulls fixed-width fields from it; BitEncoder appends fields
and re-armors the result.

Text fields use a separate six-bit alphabet (ITU-R M.1371 Table 47):
values 0-31 map to ``@A-Z[\\]^_`` and 32-63 map to `` !"#...?``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from aislink.codec.errors import MalformedFieldError

# ------------------------------------------------------------------
# Six-bit tables (read-only, process-wide)
# ------------------------------------------------------------------

SIXBIT_ALPHABET = (
    "@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_"
    " !\"#$%&'()*+,-./0123456789:;<=>?"
)
_CHAR_TO_SIXBIT: dict[str, int] = {c: i for i, c in enumerate(SIXBIT_ALPHABET)}

# Armor: 0-39 -> '0'..'W', 40-63 -> '`'..'w'
ARMOR_ALPHABET = "".join(chr(v + 48) if v < 40 else chr(v + 56) for v in range(64))

_INVALID = 0xFF
_ARMOR_LUT = np.full(256, _INVALID, dtype=np.uint8)
for _value, _char in enumerate(ARMOR_ALPHABET):
    _ARMOR_LUT[ord(_char)] = _value
_ARMOR_LUT.setflags(write=False)
del _value, _char

TEXT_PAD = "@"


def sixbit_to_char(value: int) -> str:
    return SIXBIT_ALPHABET[value & 0x3F]


def char_to_sixbit(char: str) -> int:
    """Map a text character to its six-bit value (lower case is folded)."""
    try:
        return _CHAR_TO_SIXBIT[char.upper()]
    except KeyError:
        raise MalformedFieldError(f"Character {char!r} has no six-bit encoding") from None


def is_sixbit_text(text: str) -> bool:
    return all(c.upper() in _CHAR_TO_SIXBIT for c in text)


# ------------------------------------------------------------------
# Value types
# ------------------------------------------------------------------


@dataclass(frozen=True)
class BinaryData:
    """Opaque sized bit blob, packed MSB-first into bytes.

    Bits past ``bit_length`` in the final byte are always zero, so two
    blobs carrying the same bits compare equal.
    """

    data: bytes = b""
    bit_length: int = 0

    def __post_init__(self) -> None:
        if self.bit_length < 0:
            raise ValueError("bit_length must be >= 0")
        n_bytes = (self.bit_length + 7) // 8
        if len(self.data) < n_bytes:
            raise ValueError(
                f"{self.bit_length} bits need {n_bytes} bytes, got {len(self.data)}"
            )
        raw = bytearray(self.data[:n_bytes])
        tail = n_bytes * 8 - self.bit_length
        if raw and tail:
            raw[-1] &= (0xFF << tail) & 0xFF
        object.__setattr__(self, "data", bytes(raw))

    @classmethod
    def from_int(cls, value: int, bit_length: int) -> BinaryData:
        n_bytes = (bit_length + 7) // 8
        value &= (1 << bit_length) - 1
        shifted = value << (n_bytes * 8 - bit_length)
        return cls(shifted.to_bytes(n_bytes, "big"), bit_length)

    def to_int(self) -> int:
        if self.bit_length == 0:
            return 0
        n_bytes = len(self.data)
        return int.from_bytes(self.data, "big") >> (n_bytes * 8 - self.bit_length)

    def hex(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class EncodedPayload:
    """Armored payload ready for insertion into a VDM/VDO sentence."""

    text: str
    bit_length: int

    @property
    def fill_bits(self) -> int:
        return (-self.bit_length) % 6


# ------------------------------------------------------------------
# Reader
# ------------------------------------------------------------------


class BitBuffer:
    """Cursor over the bits of a six-bit decoded payload.

    The declared length may be shorter than the armor carries (fill bits);
    it may never be longer.
    """

    __slots__ = ("_bits", "_bit_pos", "_total_bits")

    def __init__(self, bits: np.ndarray, bit_length: int | None = None) -> None:
        available = int(bits.size)
        if bit_length is None:
            bit_length = available
        if bit_length < 0 or bit_length > available:
            raise MalformedFieldError(
                f"Declared length {bit_length} exceeds the {available} bits available"
            )
        self._bits = bits
        self._bit_pos = 0
        self._total_bits = bit_length

    @classmethod
    def from_armor(cls, payload: str, bit_length: int | None = None) -> BitBuffer:
        """Unpack armor text; ``bit_length`` defaults to 6 * len(payload)."""
        try:
            raw = np.frombuffer(payload.encode("latin-1"), dtype=np.uint8)
        except UnicodeEncodeError as exc:
            raise MalformedFieldError(f"Invalid armor character at {exc.start}") from None
        values = _ARMOR_LUT[raw]
        bad = np.flatnonzero(values == _INVALID)
        if bad.size:
            idx = int(bad[0])
            raise MalformedFieldError(f"Invalid armor character {payload[idx]!r} at {idx}")
        bits = np.unpackbits(values.reshape(-1, 1), axis=1)[:, 2:].reshape(-1)
        return cls(bits, bit_length)

    # ------------------------------------------------------------------

    def read_uint(self, bits: int) -> int:
        """Read an unsigned integer of *bits* width (MSB first)."""
        chunk = self._take(bits)
        value = 0
        for bit in chunk.tolist():
            value = (value << 1) | bit
        return value

    def read_int(self, bits: int) -> int:
        """Read a signed (two's complement) integer of *bits* width."""
        unsigned = self.read_uint(bits)
        if unsigned >= (1 << (bits - 1)):
            unsigned -= (1 << bits)
        return unsigned

    def read_bool(self) -> bool:
        return self.read_uint(1) == 1

    def read_text(self, n_chars: int) -> str:
        """Read ``n_chars`` six-bit characters, padding included."""
        return "".join(sixbit_to_char(self.read_uint(6)) for _ in range(n_chars))

    def read_binary(self, bits: int) -> BinaryData:
        if bits == 0:
            return BinaryData()
        chunk = self._take(bits)
        return BinaryData(np.packbits(chunk).tobytes(), bits)

    # ------------------------------------------------------------------

    @property
    def bits_remaining(self) -> int:
        return self._total_bits - self._bit_pos

    @property
    def bit_position(self) -> int:
        return self._bit_pos

    @property
    def bit_length(self) -> int:
        return self._total_bits

    def peek_uint(self, offset: int, bits: int) -> int:
        """Read *bits* at absolute *offset* without moving the cursor."""
        if offset < 0 or offset + bits > self._total_bits:
            raise MalformedFieldError(
                f"Cannot peek {bits} bits at {offset}: buffer holds {self._total_bits}"
            )
        value = 0
        for bit in self._bits[offset:offset + bits].tolist():
            value = (value << 1) | bit
        return value

    # ------------------------------------------------------------------

    def _take(self, bits: int) -> np.ndarray:
        if bits <= 0:
            raise ValueError("bits must be > 0")
        if self._bit_pos + bits > self._total_bits:
            raise MalformedFieldError(
                f"Buffer exhausted: cannot read {bits} bits, only {self.bits_remaining} remaining"
            )
        chunk = self._bits[self._bit_pos:self._bit_pos + bits]
        self._bit_pos += bits
        return chunk


# ------------------------------------------------------------------
# Writer
# ------------------------------------------------------------------


class BitEncoder:
    """Append-only bit sequence that produces six-bit armor.

    Values wider than the requested field width are silently truncated to
    their low bits; no overflow is reported.
    """

    __slots__ = ("_value", "_bit_pos")

    def __init__(self) -> None:
        self._value = 0
        self._bit_pos = 0

    # ------------------------------------------------------------------

    def write_uint(self, value: int, bits: int) -> None:
        """Append the low *bits* bits of *value*."""
        if bits <= 0:
            raise ValueError("bits must be > 0")
        self._value = (self._value << bits) | (int(value) & ((1 << bits) - 1))
        self._bit_pos += bits

    def write_int(self, value: int, bits: int) -> None:
        """Append *value* in two's complement (low *bits* bits)."""
        self.write_uint(int(value) & ((1 << bits) - 1), bits)

    def write_bool(self, value: bool) -> None:
        self.write_uint(1 if value else 0, 1)

    def write_text(self, text: str, n_chars: int) -> None:
        """Append exactly ``n_chars`` characters, ``@``-padded or truncated."""
        text = text[:n_chars].ljust(n_chars, TEXT_PAD)
        for char in text:
            self.write_uint(char_to_sixbit(char), 6)

    def write_binary(self, data: BinaryData) -> None:
        if data.bit_length:
            self.write_uint(data.to_int(), data.bit_length)

    def pad_to_byte(self) -> None:
        remainder = self._bit_pos % 8
        if remainder:
            self.write_uint(0, 8 - remainder)

    # ------------------------------------------------------------------

    @property
    def bit_position(self) -> int:
        return self._bit_pos

    def to_armor(self) -> EncodedPayload:
        """Armor the bits written so far, zero-filling to a six-bit boundary."""
        fill = (-self._bit_pos) % 6
        value = self._value << fill
        n_chars = (self._bit_pos + fill) // 6
        chars = [
            ARMOR_ALPHABET[(value >> (6 * (n_chars - 1 - i))) & 0x3F]
            for i in range(n_chars)
        ]
        return EncodedPayload("".join(chars), self._bit_pos)

    def to_buffer(self) -> BitBuffer:
        encoded = self.to_armor()
        return BitBuffer.from_armor(encoded.text, encoded.bit_length)
