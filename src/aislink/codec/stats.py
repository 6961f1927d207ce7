"""Codec statistics and diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CodecStats:
    """Message counts and per-reason failure counts for a sentence stream."""

    sentences_received: int = 0
    messages_decoded: int = 0
    messages_encoded: int = 0
    sentence_errors: int = 0
    fragments_skipped: int = 0
    vdo_skipped: int = 0
    wrong_length: int = 0
    unknown_type: int = 0
    malformed: int = 0
    invalid: int = 0
    encode_errors: int = 0

    @property
    def decode_errors(self) -> int:
        return self.wrong_length + self.unknown_type + self.malformed

    def to_dict(self) -> dict:
        return {
            "sentences_received": self.sentences_received,
            "messages_decoded": self.messages_decoded,
            "messages_encoded": self.messages_encoded,
            "sentence_errors": self.sentence_errors,
            "fragments_skipped": self.fragments_skipped,
            "vdo_skipped": self.vdo_skipped,
            "wrong_length": self.wrong_length,
            "unknown_type": self.unknown_type,
            "malformed": self.malformed,
            "invalid": self.invalid,
            "encode_errors": self.encode_errors,
            "decode_errors": self.decode_errors,
        }

    def reset(self) -> None:
        self.sentences_received = 0
        self.messages_decoded = 0
        self.messages_encoded = 0
        self.sentence_errors = 0
        self.fragments_skipped = 0
        self.vdo_skipped = 0
        self.wrong_length = 0
        self.unknown_type = 0
        self.malformed = 0
        self.invalid = 0
        self.encode_errors = 0
