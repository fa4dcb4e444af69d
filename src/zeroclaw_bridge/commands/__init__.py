"""Command handling for the ZeroClaw bridge.

This module provides detection of the `/zc` command in chat messages.
"""

from __future__ import annotations

from .parse import COMMAND_TOKEN, extract_zeroclaw_command

__all__ = [
    "COMMAND_TOKEN",
    "extract_zeroclaw_command",
]
