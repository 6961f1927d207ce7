"""AIS (ITU-R M.1371) six-bit message codec.

Decodes armored VDM/VDO payloads into typed message records and encodes
records back into bit-identical armor.
"""

from aislink.codec.bits import BinaryData, BitBuffer, BitEncoder, EncodedPayload
from aislink.codec.config import GatewayConfig
from aislink.codec.encoding import (
    CODECS,
    MessageCodec,
    decode_message,
    encode_message,
    peek_message_type,
)
from aislink.codec.errors import (
    AisCodecError,
    MalformedFieldError,
    UnknownTypeError,
    WrongLengthError,
)
from aislink.codec.gateway import AisGateway
from aislink.codec.messages import (
    Acknowledgement,
    AddressedBinaryMessage,
    AddressedSafetyMessage,
    AidToNavigationReport,
    AisMessage,
    AnyMessage,
    AssignedModeCommand,
    BaseStationReport,
    BinaryAcknowledge,
    BinaryBroadcastMessage,
    ChannelManagement,
    DataLinkManagement,
    DgnssBroadcast,
    ExtendedClassBPositionReport,
    GroupAssignmentCommand,
    Header,
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
from aislink.codec.position import Position, ShortPosition
from aislink.codec.stats import CodecStats
from aislink.codec.validator import AisValidator, ValidationResult

__all__ = [
    "CODECS",
    "Acknowledgement",
    "AddressedBinaryMessage",
    "AddressedSafetyMessage",
    "AidToNavigationReport",
    "AisCodecError",
    "AisGateway",
    "AisMessage",
    "AisValidator",
    "AnyMessage",
    "AssignedModeCommand",
    "BaseStationReport",
    "BinaryAcknowledge",
    "BinaryBroadcastMessage",
    "BinaryData",
    "BitBuffer",
    "BitEncoder",
    "ChannelManagement",
    "CodecStats",
    "DataLinkManagement",
    "DgnssBroadcast",
    "EncodedPayload",
    "ExtendedClassBPositionReport",
    "GatewayConfig",
    "GroupAssignmentCommand",
    "Header",
    "Interrogation",
    "LongRangeBroadcast",
    "MalformedFieldError",
    "MessageCodec",
    "MultipleSlotBinaryMessage",
    "Position",
    "PositionReport",
    "SafetyBroadcastMessage",
    "SarAircraftPositionReport",
    "ShortPosition",
    "SingleSlotBinaryMessage",
    "SlotReservation",
    "StandardClassBPositionReport",
    "StaticAndVoyageData",
    "StaticDataReportPartA",
    "StaticDataReportPartB",
    "UnknownTypeError",
    "UtcDateInquiry",
    "ValidationResult",
    "WrongLengthError",
    "decode_message",
    "encode_message",
    "peek_message_type",
]
