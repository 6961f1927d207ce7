"""TCP relay for AIS sentence streams."""

from aislink.relay.config import RelayConfig
from aislink.relay.server import AisRelay, RelayStats

__all__ = ["AisRelay", "RelayConfig", "RelayStats"]
