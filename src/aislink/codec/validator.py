"""ITU-R M.1371 field range validation for decoded or hand-built records."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from aislink.codec.bits import is_sixbit_text
from aislink.codec.messages import (
    AisMessage,
    BinaryAcknowledge,
    DataLinkManagement,
    Interrogation,
)
from aislink.codec.units import HEADING_NOT_AVAILABLE


@dataclass(frozen=True)
class ValidationResult:
    """Single field validation outcome."""

    valid: bool
    field_name: str
    message: str = ""


class AisValidator:
    """Checks record fields against the ranges the standard defines.

    Checks apply by field name, so one table covers every record type
    carrying that field.
    """

    MMSI_MAX = 999_999_999
    REPEAT_MAX = 3
    MESSAGE_TYPE_MIN, MESSAGE_TYPE_MAX = 1, 27
    SOG_MAX = 1023
    COG_MAX = 3600
    HEADING_MAX = 359
    SECOND_MAX = 63
    VALID_EPFD = frozenset(range(0, 9)) | {15}

    RANGES: dict[str, tuple[int, int]] = {
        "repeat": (0, REPEAT_MAX),
        "mmsi": (0, MMSI_MAX),
        "dest_mmsi": (0, MMSI_MAX),
        "dest_mmsi_a": (0, MMSI_MAX),
        "mmsi1": (0, MMSI_MAX),
        "sog": (0, SOG_MAX),
        "cog": (0, COG_MAX),
        "second": (0, SECOND_MAX),
        "nav_status": (0, 15),
        "month": (0, 12),
        "eta_month": (0, 12),
        "day": (0, 31),
        "eta_day": (0, 31),
        "hour": (0, 24),
        "eta_hour": (0, 24),
        "minute": (0, 60),
        "eta_minute": (0, 60),
        "maneuver": (0, 2),
        "seqno": (0, 3),
        "ship_type": (0, 255),
        "aid_type": (0, 31),
    }

    # ------------------------------------------------------------------

    @classmethod
    def validate(cls, msg: Any) -> list[ValidationResult]:
        """Validate any record; an empty list means every check passed."""
        if not isinstance(msg, AisMessage):
            return [ValidationResult(
                valid=False, field_name="type", message=f"Unknown message type: {type(msg)}"
            )]

        results: list[ValidationResult] = []
        cls._check_range(
            results, "message_type", msg.message_type, cls.MESSAGE_TYPE_MIN, cls.MESSAGE_TYPE_MAX
        )
        if msg.MESSAGE_TYPES and msg.message_type not in msg.MESSAGE_TYPES:
            results.append(ValidationResult(
                valid=False,
                field_name="message_type",
                message=f"{type(msg).__name__} cannot carry message type {msg.message_type}",
            ))

        for f in dataclasses.fields(msg):
            value = getattr(msg, f.name)
            bounds = cls.RANGES.get(f.name)
            if bounds is not None:
                cls._check_range(results, f.name, value, *bounds)
            elif isinstance(value, str):
                cls._check_text(results, f.name, value)

        if hasattr(msg, "heading"):
            cls._check_heading(results, msg.heading)
        if hasattr(msg, "epfd") and msg.epfd not in cls.VALID_EPFD:
            results.append(ValidationResult(
                valid=False, field_name="epfd", message=f"epfd={msg.epfd} is not a defined fix type"
            ))

        results.extend(cls._validate_groups(msg))
        return results

    @classmethod
    def _validate_groups(cls, msg: AisMessage) -> list[ValidationResult]:
        results: list[ValidationResult] = []
        if isinstance(msg, BinaryAcknowledge):
            if not 1 <= len(msg.acks) <= 4:
                results.append(ValidationResult(
                    valid=False, field_name="acks", message=f"{len(msg.acks)} acknowledgements (1-4 allowed)"
                ))
            for i, ack in enumerate(msg.acks):
                cls._check_range(results, f"acks[{i}].mmsi", ack.mmsi, 0, cls.MMSI_MAX)
                cls._check_range(results, f"acks[{i}].seqno", ack.seqno, 0, 3)
        elif isinstance(msg, DataLinkManagement):
            if not 1 <= len(msg.reservations) <= 4:
                results.append(ValidationResult(
                    valid=False,
                    field_name="reservations",
                    message=f"{len(msg.reservations)} reservations (1-4 allowed)",
                ))
        elif isinstance(msg, Interrogation) and msg.mmsi2 is not None:
            cls._check_range(results, "mmsi2", msg.mmsi2, 0, cls.MMSI_MAX)
            # the 160-bit form always carries the first station's second request
            if msg.type1_2 is None:
                results.append(ValidationResult(
                    valid=False,
                    field_name="type1_2",
                    message="type1_2 must be set when mmsi2 is set",
                ))
        return results

    # ------------------------------------------------------------------

    @staticmethod
    def _check_range(
        results: list[ValidationResult],
        field: str,
        value: int | float,
        min_val: int | float,
        max_val: int | float,
    ) -> None:
        if value < min_val or value > max_val:
            results.append(ValidationResult(
                valid=False,
                field_name=field,
                message=f"{field}={value} out of range [{min_val}, {max_val}]",
            ))

    @classmethod
    def _check_heading(cls, results: list[ValidationResult], value: int) -> None:
        if value != HEADING_NOT_AVAILABLE and not 0 <= value <= cls.HEADING_MAX:
            results.append(ValidationResult(
                valid=False,
                field_name="heading",
                message=f"heading={value} out of range [0, {cls.HEADING_MAX}] and not {HEADING_NOT_AVAILABLE}",
            ))

    @staticmethod
    def _check_text(results: list[ValidationResult], field: str, value: str) -> None:
        if not is_sixbit_text(value):
            results.append(ValidationResult(
                valid=False, field_name=field, message=f"{field} has characters outside the six-bit alphabet"
            ))
