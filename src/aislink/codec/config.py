"""AIS gateway configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from omegaconf import OmegaConf


def to_plain_dict(cfg: Any) -> dict:
    """Accept a DictConfig, a plain mapping or None."""
    if cfg is None:
        return {}
    if OmegaConf.is_config(cfg):
        cfg = OmegaConf.to_container(cfg, resolve=True)
    if not isinstance(cfg, dict):
        cfg = dict(cfg)
    return cfg


@dataclass
class GatewayConfig:
    """Sentence -> record gateway configuration."""

    validate_inbound: bool = True
    validate_outbound: bool = True
    accept_vdo: bool = True
    talker: str = "AI"
    channel: str = "A"

    @classmethod
    def from_omegaconf(cls, cfg: Any) -> GatewayConfig:
        """Build from OmegaConf dict or plain dict."""
        cfg = to_plain_dict(cfg)
        return cls(
            validate_inbound=bool(cfg.get("validate_inbound", True)),
            validate_outbound=bool(cfg.get("validate_outbound", True)),
            accept_vdo=bool(cfg.get("accept_vdo", True)),
            talker=str(cfg.get("talker", "AI")),
            channel=str(cfg.get("channel", "A")),
        )
