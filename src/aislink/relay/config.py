"""TCP relay configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from aislink.codec.config import to_plain_dict


@dataclass
class RelayConfig:
    """Listener/forwarder settings."""

    enabled: bool = True
    host: str = "0.0.0.0"
    port: int = 8090
    max_clients: int = 1000
    max_line_bytes: int = 1024

    @classmethod
    def from_omegaconf(cls, cfg: Any) -> RelayConfig:
        """Build from OmegaConf dict or plain dict."""
        cfg = to_plain_dict(cfg)
        return cls(
            enabled=bool(cfg.get("enabled", True)),
            host=str(cfg.get("host", "0.0.0.0")),
            port=int(cfg.get("port", 8090)),
            max_clients=int(cfg.get("max_clients", 1000)),
            max_line_bytes=int(cfg.get("max_line_bytes", 1024)),
        )
