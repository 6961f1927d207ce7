"""Declarative field layout for AIS message dataclasses.

Each wire field of a message record is declared with one of the helpers
below.  The helper stores the field kind and bit width in the dataclass
field metadata; ``dataclasses.fields()`` order is the wire order, so a
single generic codec can read and write any fixed layout.

Kinds:
    uint      unsigned integer of ``bits`` width
    int       two's complement integer of ``bits`` width
    bool      single bit
    text      fixed-width six-bit text of ``chars`` characters
    position  28/27-bit Position (or 18/17-bit ShortPosition)
    spare     reserved bits, kept verbatim so decode -> encode is exact
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterator

from aislink.codec.bits import TEXT_PAD, BitBuffer, BitEncoder
from aislink.codec.position import Position


def uint(bits: int, default: int = 0) -> Any:
    return dataclasses.field(default=default, metadata={"kind": "uint", "bits": bits})


def sint(bits: int, default: int = 0) -> Any:
    return dataclasses.field(default=default, metadata={"kind": "int", "bits": bits})


def flag(default: bool = False) -> Any:
    return dataclasses.field(default=default, metadata={"kind": "bool", "bits": 1})


def chars(count: int, default: str = "") -> Any:
    return dataclasses.field(
        default=default, metadata={"kind": "text", "bits": 6 * count, "chars": count}
    )


def reserved(bits: int) -> Any:
    return dataclasses.field(default=0, metadata={"kind": "spare", "bits": bits})


def latlon(cls: type[Position] = Position) -> Any:
    return dataclasses.field(
        default_factory=cls.not_available,
        metadata={"kind": "position", "bits": cls.LON_BITS + cls.LAT_BITS, "type": cls},
    )


def wire_fields(cls: type) -> Iterator[dataclasses.Field]:
    """Yield the fields of *cls* that occupy bits on the wire, in order."""
    for f in dataclasses.fields(cls):
        if "kind" in f.metadata:
            yield f


def layout_bits(cls: type) -> int:
    """Total wire width of the declared fields of *cls*."""
    return sum(f.metadata["bits"] for f in wire_fields(cls))


def strip_padding(value: str) -> str:
    """Drop trailing ``@`` padding; encode pads it back, so this is lossless."""
    return value.rstrip(TEXT_PAD)


# ------------------------------------------------------------------
# Per-kind read/write
# ------------------------------------------------------------------


def read_field(buf: BitBuffer, f: dataclasses.Field) -> Any:
    kind = f.metadata["kind"]
    bits = f.metadata["bits"]
    if kind in ("uint", "spare"):
        return buf.read_uint(bits)
    if kind == "int":
        return buf.read_int(bits)
    if kind == "bool":
        return buf.read_bool()
    if kind == "text":
        return strip_padding(buf.read_text(f.metadata["chars"]))
    if kind == "position":
        return f.metadata["type"].read(buf)
    raise ValueError(f"Unsupported field kind: {kind}")


def write_field(enc: BitEncoder, f: dataclasses.Field, value: Any) -> None:
    kind = f.metadata["kind"]
    bits = f.metadata["bits"]
    if kind in ("uint", "spare"):
        enc.write_uint(value, bits)
    elif kind == "int":
        enc.write_int(value, bits)
    elif kind == "bool":
        enc.write_bool(value)
    elif kind == "text":
        enc.write_text(value, f.metadata["chars"])
    elif kind == "position":
        value.encode(enc)
    else:
        raise ValueError(f"Unsupported field kind: {kind}")


def read_layout(buf: BitBuffer, cls: type) -> dict[str, Any]:
    return {f.name: read_field(buf, f) for f in wire_fields(cls)}


def write_layout(enc: BitEncoder, msg: Any) -> None:
    for f in wire_fields(type(msg)):
        write_field(enc, f, getattr(msg, f.name))
