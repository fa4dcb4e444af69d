"""Detect `/zc` chat commands and relay them to a ZeroClaw bridge endpoint."""

from __future__ import annotations

from .client import BridgeClient, send_to_bridge
from .commands import extract_zeroclaw_command
from .config import BridgeConfig, load_bridge_config, parse_timeout_ms
from .relay import relay_command

__all__ = [
    "BridgeClient",
    "BridgeConfig",
    "extract_zeroclaw_command",
    "load_bridge_config",
    "parse_timeout_ms",
    "relay_command",
    "send_to_bridge",
]
