"""AisGateway: sentence stream <-> message records.

Each sentence goes through framing, decode and optional validation in a
single synchronous call.  A failing sentence is logged, counted by reason
and dropped; the next sentence is processed normally.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from aislink.codec.config import GatewayConfig
from aislink.codec.encoding import decode_message, encode_message
from aislink.codec.errors import (
    AisCodecError,
    MalformedFieldError,
    UnknownTypeError,
    WrongLengthError,
)
from aislink.codec.messages import AisMessage
from aislink.codec.stats import CodecStats
from aislink.codec.validator import AisValidator
from aislink.nmea.sentence import SentenceError, build_sentence, parse_sentence

logger = logging.getLogger(__name__)


class AisGateway:
    """Skip-and-continue AIS sentence processor."""

    def __init__(self, config: GatewayConfig | None = None) -> None:
        self._config = config or GatewayConfig()
        self._stats = CodecStats()

    # ------------------------------------------------------------------
    # Inbound: sentence -> record
    # ------------------------------------------------------------------

    def process_line(self, line: str) -> Any | None:
        """Decode one sentence; returns None if it was skipped."""
        self._stats.sentences_received += 1
        try:
            sentence = parse_sentence(line)
        except SentenceError as exc:
            self._stats.sentence_errors += 1
            logger.debug("Sentence rejected: %s", exc)
            return None

        if sentence.is_fragmented:
            self._stats.fragments_skipped += 1
            logger.debug(
                "Skipping fragment %d/%d", sentence.fragment_number, sentence.fragment_count
            )
            return None
        if sentence.own_ship and not self._config.accept_vdo:
            self._stats.vdo_skipped += 1
            logger.debug("Skipping own-ship VDO sentence from %s", sentence.talker)
            return None

        try:
            msg = decode_message(sentence.payload, sentence.bit_length)
        except WrongLengthError:
            self._stats.wrong_length += 1
            logger.debug("Failed to decode AIS payload", exc_info=True)
            return None
        except UnknownTypeError:
            self._stats.unknown_type += 1
            logger.debug("Failed to decode AIS payload", exc_info=True)
            return None
        except MalformedFieldError:
            self._stats.malformed += 1
            logger.debug("Failed to decode AIS payload", exc_info=True)
            return None

        if self._config.validate_inbound:
            errors = AisValidator.validate(msg)
            if errors:
                self._stats.invalid += 1
                logger.debug("Inbound type %d validation failed: %s", msg.message_type, errors[0].message)
                return None

        self._stats.messages_decoded += 1
        return msg

    def process_lines(self, lines: Iterable[str]) -> list[Any]:
        """Decode every sentence in *lines*, skipping blanks and failures."""
        out = []
        for line in lines:
            if not line.strip():
                continue
            msg = self.process_line(line)
            if msg is not None:
                out.append(msg)
        return out

    # ------------------------------------------------------------------
    # Outbound: record -> sentence
    # ------------------------------------------------------------------

    def encode_line(self, msg: AisMessage, channel: str | None = None) -> str | None:
        """Encode a record into a single-fragment VDM sentence."""
        if self._config.validate_outbound:
            errors = AisValidator.validate(msg)
            if errors:
                self._stats.invalid += 1
                logger.debug("Outbound type %d validation failed: %s", msg.message_type, errors[0].message)
                return None

        try:
            encoded = encode_message(msg)
        except (AisCodecError, TypeError):
            self._stats.encode_errors += 1
            logger.debug("Failed to encode AIS message", exc_info=True)
            return None

        self._stats.messages_encoded += 1
        return build_sentence(
            encoded,
            channel=channel or self._config.channel,
            talker=self._config.talker,
        )

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def get_stats(self) -> dict:
        return self._stats.to_dict()

    @property
    def stats(self) -> CodecStats:
        return self._stats

    @property
    def config(self) -> GatewayConfig:
        return self._config

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def from_config(cls, cfg: Any) -> AisGateway:
        """Build from OmegaConf or dict (the ``aislink.codec`` section)."""
        return cls(config=GatewayConfig.from_omegaconf(cfg))
