"""Glue between command detection and the bridge client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .client import BridgeClient, send_to_bridge
from .commands import extract_zeroclaw_command


async def relay_command(
    content: str,
    assistant_name: str,
    *,
    allow_plain_command: bool = False,
    metadata: Mapping[str, Any] | None = None,
    client: BridgeClient | None = None,
) -> str | None:
    """Forward a `/zc` command found in *content* and return the bridge reply.

    Returns None when *content* is not a `/zc` command, so callers can fall
    through to their normal message handling.
    """
    payload = extract_zeroclaw_command(content, assistant_name, allow_plain_command)
    if payload is None:
        return None
    if client is None:
        return await send_to_bridge(payload, metadata)
    return await client.send(payload, metadata)
