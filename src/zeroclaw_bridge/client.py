"""HTTP client for the ZeroClaw bridge."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import anyio
import httpx

from .config import DEFAULT_CONFIG, BridgeConfig
from .logging import get_logger

logger = get_logger("zeroclaw_bridge.client")

API_KEY_HEADER = "X-Bridge-Key"

USAGE_MESSAGE = "Usage: /zc <message>"
NOT_CONFIGURED_MESSAGE = (
    "ZeroClaw bridge is not configured. Set ZEROCLAW_BRIDGE_URL in .env."
)
EMPTY_RESPONSE_MESSAGE = "ZeroClaw bridge returned an empty response."
TIMEOUT_MESSAGE = "ZeroClaw bridge timed out."


def _parse_body(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def _string_field(body: dict[str, Any], key: str) -> str:
    value = body.get(key)
    return value if isinstance(value, str) else ""


def _format_reply(response: httpx.Response) -> str:
    body = _parse_body(response)
    response_text = _string_field(body, "response").strip()
    details = _string_field(body, "details")

    if not response.is_success:
        if details:
            return f"ZeroClaw bridge error: {details}"
        return f"ZeroClaw bridge error (HTTP {response.status_code})."

    if not response_text:
        return EMPTY_RESPONSE_MESSAGE

    return response_text


class BridgeClient:
    """Forward command payloads to the bridge endpoint.

    `send` never raises: every outcome, including timeouts and transport
    failures, is returned as display text.
    """

    def __init__(
        self,
        config: BridgeConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def config(self) -> BridgeConfig:
        return self._config

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._config.api_key:
            headers[API_KEY_HEADER] = self._config.api_key
        return headers

    async def send(
        self, message: str, metadata: Mapping[str, Any] | None = None
    ) -> str:
        trimmed = message.strip()
        if not trimmed:
            return USAGE_MESSAGE

        if not self._config.configured:
            return NOT_CONFIGURED_MESSAGE

        payload: dict[str, Any] = {"message": trimmed}
        if metadata is not None:
            payload["metadata"] = dict(metadata)

        try:
            with anyio.fail_after(self._config.timeout_s):
                async with httpx.AsyncClient(
                    transport=self._transport, timeout=None
                ) as http:
                    response = await http.post(
                        self._config.url, headers=self._headers(), json=payload
                    )
        except (TimeoutError, httpx.TimeoutException):
            logger.warning(
                "zeroclaw.bridge.timeout", timeout_ms=self._config.timeout_ms
            )
            return TIMEOUT_MESSAGE
        except Exception as exc:
            logger.warning(
                "zeroclaw.bridge.request_failed",
                error=str(exc),
                error_type=exc.__class__.__name__,
            )
            reason = str(exc) or exc.__class__.__name__
            return f"ZeroClaw bridge request failed: {reason}"

        logger.debug("zeroclaw.bridge.response", status=response.status_code)
        return _format_reply(response)


_default_client = BridgeClient(DEFAULT_CONFIG)


async def send_to_bridge(
    message: str, metadata: Mapping[str, Any] | None = None
) -> str:
    """Send *message* to the bridge configured for this process."""
    return await _default_client.send(message, metadata)
