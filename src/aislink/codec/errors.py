"""AIS codec error taxonomy.

All codec failures are local to a single message. Callers are expected to
log, count and skip the offending sentence and continue with the stream.
"""

from __future__ import annotations


class AisCodecError(ValueError):
    """Base class for every decode/encode failure raised by the codec."""

    def __init__(self, message: str, msg_type: int | None = None) -> None:
        super().__init__(message)
        self.msg_type = msg_type


class WrongLengthError(AisCodecError):
    """Declared bit length does not match the length mandated for the type."""

    def __init__(self, msg_type: int, bit_length: int, expected: str) -> None:
        super().__init__(
            f"Message {msg_type} wrong length {bit_length} (expected {expected})",
            msg_type=msg_type,
        )
        self.bit_length = bit_length
        self.expected = expected


class UnknownTypeError(AisCodecError):
    """Message type discriminant outside the modelled 1-27 set."""

    def __init__(self, msg_type: int) -> None:
        super().__init__(f"Unknown AIS message type: {msg_type}", msg_type=msg_type)


class MalformedFieldError(AisCodecError):
    """Invalid armor or text character, or a read past the end of the buffer."""
