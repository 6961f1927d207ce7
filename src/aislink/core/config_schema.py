"""Pydantic schema for AISLINK configuration validation.

Mirrors the YAML structure in config/default.yaml. Used when
``validate=True`` is passed to ``AislinkConfig.load()``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SystemConfig(BaseModel):
    name: str = "AISLINK"
    version: str = "0.1.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    validate_config: bool = False
    log_file: str | None = None
    log_json: bool = False


class CodecConfig(BaseModel):
    validate_inbound: bool = True
    validate_outbound: bool = True
    accept_vdo: bool = True
    talker: str = Field(default="AI", min_length=2, max_length=2)
    channel: str = Field(default="A", max_length=1)


class RelayConfig(BaseModel):
    enabled: bool = True
    host: str = "0.0.0.0"
    port: int = Field(default=8090, ge=0, le=65535)
    max_clients: int = Field(default=1000, gt=0)
    max_line_bytes: int = Field(default=1024, ge=82)


class AislinkRootConfig(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)
    relay: RelayConfig = Field(default_factory=RelayConfig)


class AislinkConfigSchema(BaseModel):
    """Top-level wrapper matching YAML root key ``aislink:``."""

    aislink: AislinkRootConfig

    model_config = {"extra": "allow"}


def validate_config(cfg_dict: dict) -> AislinkConfigSchema:
    """Validate a raw config dict (e.g. from OmegaConf) against the schema.

    Raises ``pydantic.ValidationError`` on invalid config.
    """
    return AislinkConfigSchema.model_validate(cfg_dict)
