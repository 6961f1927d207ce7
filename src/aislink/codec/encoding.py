"""Encode/decode AIS message records to and from six-bit armor.

Fixed layouts are read and written by walking the record's declared
fields.  Types with repeated groups, optional sections or trailing
payloads extend the generic codec with ``_decode_tail``/``_encode_tail``.

Every codec checks the declared bit length against the lengths the
standard allows for its type before a single field is read, and checks
the produced length again after encoding.
"""

from __future__ import annotations

from typing import Any, ClassVar

from aislink.codec.bits import BitBuffer, BitEncoder, EncodedPayload
from aislink.codec.errors import MalformedFieldError, UnknownTypeError, WrongLengthError
from aislink.codec.fields import read_layout, strip_padding, write_layout
from aislink.codec.messages import (
    Acknowledgement,
    AddressedBinaryMessage,
    AddressedSafetyMessage,
    AidToNavigationReport,
    AisMessage,
    AssignedModeCommand,
    BaseStationReport,
    BinaryAcknowledge,
    BinaryBroadcastMessage,
    ChannelManagement,
    DataLinkManagement,
    DgnssBroadcast,
    ExtendedClassBPositionReport,
    GroupAssignmentCommand,
    Interrogation,
    LongRangeBroadcast,
    MultipleSlotBinaryMessage,
    PositionReport,
    SafetyBroadcastMessage,
    SarAircraftPositionReport,
    SingleSlotBinaryMessage,
    SlotReservation,
    StandardClassBPositionReport,
    StaticAndVoyageData,
    StaticDataReportPartA,
    StaticDataReportPartB,
    UtcDateInquiry,
)
from aislink.codec.position import ShortPosition

_TYPE_BITS = 6
_HEADER_BITS = 38


# ------------------------------------------------------------------
# Generic codec
# ------------------------------------------------------------------


class MessageCodec:
    """Layout-driven codec; subclasses name the record and its lengths.

    ``BIT_LENGTHS`` lists the exact lengths a type may have.  Types with a
    free-length payload leave it empty and set ``MIN_BITS``/``MAX_BITS``.
    """

    RECORD: ClassVar[type[AisMessage]] = AisMessage
    BIT_LENGTHS: ClassVar[tuple[int, ...]] = ()
    MIN_BITS: ClassVar[int] = 0
    MAX_BITS: ClassVar[int] = 0

    @classmethod
    def accepts_length(cls, bit_length: int) -> bool:
        if cls.BIT_LENGTHS:
            return bit_length in cls.BIT_LENGTHS
        return cls.MIN_BITS <= bit_length <= cls.MAX_BITS

    @classmethod
    def describe_lengths(cls) -> str:
        if cls.BIT_LENGTHS:
            return "/".join(str(n) for n in cls.BIT_LENGTHS)
        return f"{cls.MIN_BITS}..{cls.MAX_BITS}"

    @classmethod
    def check_length(cls, msg_type: int, bit_length: int) -> None:
        if not cls.accepts_length(bit_length):
            raise WrongLengthError(msg_type, bit_length, cls.describe_lengths())

    # ------------------------------------------------------------------

    @classmethod
    def decode(cls, buf: BitBuffer) -> Any:
        """Decode a fresh buffer (cursor at bit 0) into ``RECORD``."""
        msg_type = buf.peek_uint(0, _TYPE_BITS)
        cls.check_length(msg_type, buf.bit_length)
        values = read_layout(buf, cls.RECORD)
        values.update(cls._decode_tail(buf, values))
        return cls.RECORD(**values)

    @classmethod
    def encode(cls, msg: Any) -> EncodedPayload:
        enc = BitEncoder()
        write_layout(enc, msg)
        cls._encode_tail(enc, msg)
        cls.check_length(msg.message_type, enc.bit_position)
        return enc.to_armor()

    # ------------------------------------------------------------------

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        return {}

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        pass


# ------------------------------------------------------------------
# Fixed layouts
# ------------------------------------------------------------------


class PositionReportCodec(MessageCodec):
    RECORD = PositionReport
    BIT_LENGTHS = (168,)


class BaseStationReportCodec(MessageCodec):
    RECORD = BaseStationReport
    BIT_LENGTHS = (168,)


class StaticAndVoyageDataCodec(MessageCodec):
    RECORD = StaticAndVoyageData
    BIT_LENGTHS = (424,)


class SarAircraftPositionCodec(MessageCodec):
    RECORD = SarAircraftPositionReport
    BIT_LENGTHS = (168,)


class UtcDateInquiryCodec(MessageCodec):
    RECORD = UtcDateInquiry
    BIT_LENGTHS = (72,)


class StandardClassBCodec(MessageCodec):
    RECORD = StandardClassBPositionReport
    BIT_LENGTHS = (168,)


class ExtendedClassBCodec(MessageCodec):
    RECORD = ExtendedClassBPositionReport
    BIT_LENGTHS = (312,)


class GroupAssignmentCodec(MessageCodec):
    RECORD = GroupAssignmentCommand
    BIT_LENGTHS = (160,)


class StaticDataPartACodec(MessageCodec):
    RECORD = StaticDataReportPartA
    BIT_LENGTHS = (160,)


class StaticDataPartBCodec(MessageCodec):
    RECORD = StaticDataReportPartB
    BIT_LENGTHS = (168,)


class LongRangeBroadcastCodec(MessageCodec):
    RECORD = LongRangeBroadcast
    BIT_LENGTHS = (96,)


# ------------------------------------------------------------------
# Trailing binary payloads (6, 8, 17)
# ------------------------------------------------------------------


class _BinaryTailCodec(MessageCodec):
    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        return {"data": buf.read_binary(buf.bits_remaining)}

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        enc.write_binary(msg.data)


class AddressedBinaryCodec(_BinaryTailCodec):
    RECORD = AddressedBinaryMessage
    MIN_BITS, MAX_BITS = 88, 1008


class BinaryBroadcastCodec(_BinaryTailCodec):
    RECORD = BinaryBroadcastMessage
    MIN_BITS, MAX_BITS = 56, 1008


class DgnssBroadcastCodec(_BinaryTailCodec):
    RECORD = DgnssBroadcast
    MIN_BITS, MAX_BITS = 80, 816


# ------------------------------------------------------------------
# Trailing text (12, 14)
# ------------------------------------------------------------------


class _TextTailCodec(MessageCodec):
    """Text fills the rest of the message; leftover bits (< 6) are dropped.

    Text longer than the type's capacity is truncated on encode.
    """

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        return {"text": buf.read_text(buf.bits_remaining // 6)}

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        text = msg.text[: cls.RECORD.MAX_CHARS]
        enc.write_text(text, len(text))


class AddressedSafetyCodec(_TextTailCodec):
    RECORD = AddressedSafetyMessage
    MIN_BITS, MAX_BITS = 72, 1008


class SafetyBroadcastCodec(_TextTailCodec):
    RECORD = SafetyBroadcastMessage
    MIN_BITS, MAX_BITS = 40, 1008


# ------------------------------------------------------------------
# Repeated groups (7/13, 15, 16, 20)
# ------------------------------------------------------------------


class BinaryAcknowledgeCodec(MessageCodec):
    RECORD = BinaryAcknowledge
    BIT_LENGTHS = (72, 104, 136, 168)

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        acks = []
        while buf.bits_remaining >= 32:
            acks.append(Acknowledgement(mmsi=buf.read_uint(30), seqno=buf.read_uint(2)))
        return {"acks": tuple(acks)}

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        for ack in msg.acks[:4]:
            enc.write_uint(ack.mmsi, 30)
            enc.write_uint(ack.seqno, 2)


class InterrogationCodec(MessageCodec):
    RECORD = Interrogation
    BIT_LENGTHS = (88, 110, 160)

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if buf.bit_length >= 110:
            out["spare2"] = buf.read_uint(2)
            out["type1_2"] = buf.read_uint(6)
            out["offset1_2"] = buf.read_uint(12)
            out["spare3"] = buf.read_uint(2)
        if buf.bit_length >= 160:
            out["mmsi2"] = buf.read_uint(30)
            out["type2_1"] = buf.read_uint(6)
            out["offset2_1"] = buf.read_uint(12)
            out["spare4"] = buf.read_uint(2)
        return out

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        if msg.type1_2 is not None or msg.mmsi2 is not None:
            enc.write_uint(msg.spare2, 2)
            enc.write_uint(msg.type1_2 or 0, 6)
            enc.write_uint(msg.offset1_2, 12)
            enc.write_uint(msg.spare3, 2)
        if msg.mmsi2 is not None:
            enc.write_uint(msg.mmsi2, 30)
            enc.write_uint(msg.type2_1, 6)
            enc.write_uint(msg.offset2_1, 12)
            enc.write_uint(msg.spare4, 2)


class AssignedModeCodec(MessageCodec):
    RECORD = AssignedModeCommand
    BIT_LENGTHS = (96, 144)

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        if buf.bit_length == 144:
            return {
                "dest_mmsi_b": buf.read_uint(30),
                "offset_b": buf.read_uint(12),
                "increment_b": buf.read_uint(10),
            }
        return {"spare2": buf.read_uint(4)}

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        if msg.dest_mmsi_b is None:
            enc.write_uint(msg.spare2, 4)
            return
        enc.write_uint(msg.dest_mmsi_b, 30)
        enc.write_uint(msg.offset_b, 12)
        enc.write_uint(msg.increment_b, 10)


class DataLinkManagementCodec(MessageCodec):
    RECORD = DataLinkManagement
    BIT_LENGTHS = (72, 104, 136, 160)

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        reservations = []
        while buf.bits_remaining >= 30:
            reservations.append(SlotReservation(
                offset=buf.read_uint(12),
                slots=buf.read_uint(4),
                timeout=buf.read_uint(3),
                increment=buf.read_uint(11),
            ))
        return {"reservations": tuple(reservations)}

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        for res in msg.reservations[:4]:
            enc.write_uint(res.offset, 12)
            enc.write_uint(res.slots, 4)
            enc.write_uint(res.timeout, 3)
            enc.write_uint(res.increment, 11)
        enc.pad_to_byte()


# ------------------------------------------------------------------
# Type 21
# ------------------------------------------------------------------


class AidToNavigationCodec(MessageCodec):
    RECORD = AidToNavigationReport
    MIN_BITS, MAX_BITS = 272, 360

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        n_chars = min(buf.bits_remaining // 6, AidToNavigationReport.MAX_EXTENSION_CHARS)
        return {"name_extension": strip_padding(buf.read_text(n_chars))}

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        ext = msg.name_extension[: AidToNavigationReport.MAX_EXTENSION_CHARS]
        enc.write_text(ext, len(ext))
        enc.pad_to_byte()


# ------------------------------------------------------------------
# Type 22
# ------------------------------------------------------------------


class ChannelManagementCodec(MessageCodec):
    RECORD = ChannelManagement
    BIT_LENGTHS = (168,)

    _AREA_OFFSET = 69
    _ADDRESSED_OFFSET = _AREA_OFFSET + 70

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        addressed = buf.peek_uint(cls._ADDRESSED_OFFSET, 1) == 1
        if addressed:
            out["dest_mmsi_a"] = buf.read_uint(30)
            out["spare2"] = buf.read_uint(5)
            out["dest_mmsi_b"] = buf.read_uint(30)
            out["spare3"] = buf.read_uint(5)
        else:
            out["ne_position"] = ShortPosition.read(buf)
            out["sw_position"] = ShortPosition.read(buf)
        out["addressed"] = buf.read_bool()
        out["band_a"] = buf.read_bool()
        out["band_b"] = buf.read_bool()
        out["zone_size"] = buf.read_uint(3)
        out["spare4"] = buf.read_uint(23)
        return out

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        if msg.addressed:
            enc.write_uint(msg.dest_mmsi_a, 30)
            enc.write_uint(msg.spare2, 5)
            enc.write_uint(msg.dest_mmsi_b, 30)
            enc.write_uint(msg.spare3, 5)
        else:
            msg.ne_position.encode(enc)
            msg.sw_position.encode(enc)
        enc.write_bool(msg.addressed)
        enc.write_bool(msg.band_a)
        enc.write_bool(msg.band_b)
        enc.write_uint(msg.zone_size, 3)
        enc.write_uint(msg.spare4, 23)


# ------------------------------------------------------------------
# Type 24
# ------------------------------------------------------------------


class StaticDataReportCodec(MessageCodec):
    """Selects part A or part B by the 2-bit part number after the header."""

    BIT_LENGTHS = (160, 168)

    _PARTS: ClassVar[dict[int, type[MessageCodec]]] = {
        0: StaticDataPartACodec,
        1: StaticDataPartBCodec,
    }

    @classmethod
    def decode(cls, buf: BitBuffer) -> Any:
        cls.check_length(24, buf.bit_length)
        part = buf.peek_uint(_HEADER_BITS, 2)
        codec = cls._PARTS.get(part)
        if codec is None:
            raise MalformedFieldError(f"Message 24 part number {part} is not defined", msg_type=24)
        return codec.decode(buf)

    @classmethod
    def encode(cls, msg: Any) -> EncodedPayload:
        if isinstance(msg, StaticDataReportPartA):
            return StaticDataPartACodec.encode(msg)
        return StaticDataPartBCodec.encode(msg)


# ------------------------------------------------------------------
# Types 25, 26
# ------------------------------------------------------------------


class SingleSlotBinaryCodec(MessageCodec):
    RECORD = SingleSlotBinaryMessage
    MIN_BITS, MAX_BITS = 40, 168

    _TRAILER_BITS = 0

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if values["addressed"]:
            out["dest_mmsi"] = buf.read_uint(30)
            out["spare"] = buf.read_uint(2)
        if values["structured"]:
            out["app_id"] = buf.read_uint(16)
        data_bits = buf.bits_remaining - cls._TRAILER_BITS
        if data_bits < 0:
            raise MalformedFieldError(
                f"Message {values['message_type']} too short for its addressing fields",
                msg_type=values["message_type"],
            )
        out["data"] = buf.read_binary(data_bits)
        return out

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        if msg.addressed:
            enc.write_uint(msg.dest_mmsi, 30)
            enc.write_uint(msg.spare, 2)
        if msg.structured:
            enc.write_uint(msg.app_id, 16)
        enc.write_binary(msg.data)


class MultipleSlotBinaryCodec(SingleSlotBinaryCodec):
    RECORD = MultipleSlotBinaryMessage
    MIN_BITS, MAX_BITS = 60, 1064

    _TRAILER_BITS = 20

    @classmethod
    def _decode_tail(cls, buf: BitBuffer, values: dict[str, Any]) -> dict[str, Any]:
        out = super()._decode_tail(buf, values)
        out["radio_selector"] = buf.read_bool()
        out["radio"] = buf.read_uint(19)
        return out

    @classmethod
    def _encode_tail(cls, enc: BitEncoder, msg: Any) -> None:
        super()._encode_tail(enc, msg)
        enc.write_bool(msg.radio_selector)
        enc.write_uint(msg.radio, 19)


# ------------------------------------------------------------------
# Dispatch
# ------------------------------------------------------------------

CODECS: dict[int, type[MessageCodec]] = {
    1: PositionReportCodec,
    2: PositionReportCodec,
    3: PositionReportCodec,
    4: BaseStationReportCodec,
    5: StaticAndVoyageDataCodec,
    6: AddressedBinaryCodec,
    7: BinaryAcknowledgeCodec,
    8: BinaryBroadcastCodec,
    9: SarAircraftPositionCodec,
    10: UtcDateInquiryCodec,
    11: BaseStationReportCodec,
    12: AddressedSafetyCodec,
    13: BinaryAcknowledgeCodec,
    14: SafetyBroadcastCodec,
    15: InterrogationCodec,
    16: AssignedModeCodec,
    17: DgnssBroadcastCodec,
    18: StandardClassBCodec,
    19: ExtendedClassBCodec,
    20: DataLinkManagementCodec,
    21: AidToNavigationCodec,
    22: ChannelManagementCodec,
    23: GroupAssignmentCodec,
    24: StaticDataReportCodec,
    25: SingleSlotBinaryCodec,
    26: MultipleSlotBinaryCodec,
    27: LongRangeBroadcastCodec,
}


def peek_message_type(buf: BitBuffer) -> int:
    """Read the 6-bit type discriminant without consuming the buffer."""
    return buf.peek_uint(0, _TYPE_BITS)


def decode_message(payload: str | BitBuffer, bit_length: int | None = None) -> Any:
    """Decode armor text (or a fresh BitBuffer) into a message record.

    Raises:
        UnknownTypeError: discriminant outside 1-27.
        WrongLengthError: declared length not allowed for the type.
        MalformedFieldError: bad armor character or read past the end.
    """
    if isinstance(payload, BitBuffer):
        buf = payload
    else:
        buf = BitBuffer.from_armor(payload, bit_length)
    msg_type = peek_message_type(buf)
    codec = CODECS.get(msg_type)
    if codec is None:
        raise UnknownTypeError(msg_type)
    return codec.decode(buf)


def encode_message(msg: AisMessage) -> EncodedPayload:
    """Encode a record into armor text and its exact bit length."""
    codec = CODECS.get(msg.message_type)
    if codec is None:
        raise UnknownTypeError(msg.message_type)
    record = (StaticDataReportPartA, StaticDataReportPartB) if codec is StaticDataReportCodec else codec.RECORD
    if not isinstance(msg, record):
        raise TypeError(
            f"{type(msg).__name__} cannot carry message type {msg.message_type}"
        )
    return codec.encode(msg)
