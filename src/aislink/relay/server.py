"""Asyncio TCP relay for AIS sentences.

Clients connect and send newline-delimited VDM/VDO sentences.  Each
sentence is decoded through the gateway (one synchronous codec call) and,
if it decodes, forwarded verbatim to every other connected client.
Connections beyond ``max_clients`` are closed as soon as they are accepted.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from aislink.codec.gateway import AisGateway
from aislink.relay.config import RelayConfig

logger = logging.getLogger(__name__)


@dataclass
class RelayStats:
    clients_accepted: int = 0
    clients_rejected: int = 0
    sentences_forwarded: int = 0
    sentences_dropped: int = 0

    def to_dict(self) -> dict:
        return {
            "clients_accepted": self.clients_accepted,
            "clients_rejected": self.clients_rejected,
            "sentences_forwarded": self.sentences_forwarded,
            "sentences_dropped": self.sentences_dropped,
        }


class AisRelay:
    """Listener + forwarder with a concurrent client ceiling."""

    def __init__(self, config: RelayConfig | None = None, gateway: AisGateway | None = None) -> None:
        self._config = config or RelayConfig()
        self._gateway = gateway or AisGateway()
        self._server: asyncio.AbstractServer | None = None
        self._clients: set[asyncio.StreamWriter] = set()
        self._stats = RelayStats()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        if self._server is not None:
            return
        self._server = await asyncio.start_server(
            self._handle_client,
            host=self._config.host,
            port=self._config.port,
            limit=self._config.max_line_bytes,
        )
        logger.info("AIS relay listening on %s:%d", self._config.host, self.port)

    async def serve_forever(self) -> None:
        await self.start()
        assert self._server is not None
        async with self._server:
            await self._server.serve_forever()

    async def stop(self) -> None:
        if self._server is None:
            return
        self._server.close()
        for writer in list(self._clients):
            writer.close()
        await self._server.wait_closed()
        self._server = None
        self._clients.clear()
        logger.info("AIS relay stopped")

    @property
    def port(self) -> int:
        """Bound port (differs from the configured one when that is 0)."""
        if self._server is None or not self._server.sockets:
            return self._config.port
        return self._server.sockets[0].getsockname()[1]

    @property
    def client_count(self) -> int:
        return len(self._clients)

    # ------------------------------------------------------------------
    # Per-client loop
    # ------------------------------------------------------------------

    async def _handle_client(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        peer = writer.get_extra_info("peername")
        if len(self._clients) >= self._config.max_clients:
            self._stats.clients_rejected += 1
            logger.warning("Rejecting %s: %d clients connected", peer, len(self._clients))
            writer.close()
            await self._close_quietly(writer)
            return

        self._clients.add(writer)
        self._stats.clients_accepted += 1
        logger.info("Client connected from %s", peer)
        try:
            while True:
                try:
                    raw = await reader.readline()
                except ValueError:
                    # line longer than max_line_bytes
                    logger.warning("Dropping %s: line exceeds %d bytes", peer, self._config.max_line_bytes)
                    break
                if not raw:
                    break
                line = raw.decode("ascii", errors="replace").strip()
                if not line:
                    continue
                await self._relay_line(line, writer)
        except ConnectionError:
            logger.debug("Client %s connection error", peer, exc_info=True)
        finally:
            self._clients.discard(writer)
            writer.close()
            await self._close_quietly(writer)
            logger.info("Client disconnected from %s", peer)

    async def _relay_line(self, line: str, sender: asyncio.StreamWriter) -> None:
        msg = self._gateway.process_line(line)
        if msg is None:
            self._stats.sentences_dropped += 1
            return
        data = (line + "\r\n").encode("ascii")
        targets = [w for w in self._clients if w is not sender]
        for w in targets:
            w.write(data)
        results = await asyncio.gather(*(w.drain() for w in targets), return_exceptions=True)
        for w, result in zip(targets, results):
            if isinstance(result, Exception):
                logger.debug("Forward to %s failed: %s", w.get_extra_info("peername"), result)
                self._clients.discard(w)
                w.close()
        self._stats.sentences_forwarded += 1

    @staticmethod
    async def _close_quietly(writer: asyncio.StreamWriter) -> None:
        try:
            await writer.wait_closed()
        except ConnectionError:
            logger.debug("Connection already reset", exc_info=True)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def get_stats(self) -> dict:
        return {**self._stats.to_dict(), "clients": self.client_count, "codec": self._gateway.get_stats()}

    @property
    def gateway(self) -> AisGateway:
        return self._gateway

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def from_config(cls, cfg: Any) -> AisRelay | None:
        """Build from the root ``aislink`` section. Returns None if disabled."""
        if cfg is not None and "relay" in cfg:
            relay_cfg = cfg["relay"]
            codec_cfg = cfg.get("codec")
        else:
            relay_cfg = cfg
            codec_cfg = None
        config = RelayConfig.from_omegaconf(relay_cfg)
        if not config.enabled:
            return None
        return cls(config=config, gateway=AisGateway.from_config(codec_cfg))
