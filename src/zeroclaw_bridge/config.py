"""Bridge configuration, resolved once per process."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from .logging import get_logger

logger = get_logger("zeroclaw_bridge.config")

URL_ENV = "ZEROCLAW_BRIDGE_URL"
API_KEY_ENV = "ZEROCLAW_BRIDGE_API_KEY"
TIMEOUT_ENV = "ZEROCLAW_BRIDGE_TIMEOUT_MS"
BRIDGE_ENV_KEYS = (URL_ENV, API_KEY_ENV, TIMEOUT_ENV)

DEFAULT_TIMEOUT_MS = 45_000.0
MAX_TIMEOUT_MS = 60_000.0
DEFAULT_ENV_FILE = ".env"


@dataclass(frozen=True, slots=True)
class BridgeConfig:
    url: str = ""
    api_key: str = ""
    timeout_ms: float = DEFAULT_TIMEOUT_MS

    @property
    def configured(self) -> bool:
        return bool(self.url)

    @property
    def timeout_s(self) -> float:
        return self.timeout_ms / 1000


def parse_timeout_ms(raw: str | None) -> float:
    """Parse a timeout in milliseconds, falling back to the default.

    Unparseable, non-finite and non-positive values resolve to
    `DEFAULT_TIMEOUT_MS`; anything above `MAX_TIMEOUT_MS` is clamped.
    """
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_MS
    try:
        parsed = float(raw)
    except ValueError:
        logger.warning("zeroclaw.config.timeout_invalid", value=raw)
        return DEFAULT_TIMEOUT_MS
    if not math.isfinite(parsed) or parsed <= 0:
        logger.warning("zeroclaw.config.timeout_invalid", value=raw)
        return DEFAULT_TIMEOUT_MS
    return min(parsed, MAX_TIMEOUT_MS)


def _read_env_file(path: Path) -> dict[str, str]:
    if not path.is_file():
        return {}
    values = dotenv_values(path)
    return {
        key: value
        for key, value in values.items()
        if key in BRIDGE_ENV_KEYS and value is not None
    }


def load_bridge_config(
    environ: Mapping[str, str] | None = None,
    env_file: str | Path | None = DEFAULT_ENV_FILE,
) -> BridgeConfig:
    """Resolve bridge settings from the environment and an optional env file.

    A non-empty process environment value wins over the env file, which wins
    over the built-in default. The env file is read but never exported into
    the process environment.
    """
    env = os.environ if environ is None else environ
    file_values = _read_env_file(Path(env_file)) if env_file is not None else {}

    def _lookup(name: str) -> str:
        return env.get(name) or file_values.get(name) or ""

    config = BridgeConfig(
        url=_lookup(URL_ENV),
        api_key=_lookup(API_KEY_ENV),
        timeout_ms=parse_timeout_ms(_lookup(TIMEOUT_ENV) or None),
    )
    logger.debug(
        "zeroclaw.config.loaded",
        configured=config.configured,
        has_api_key=bool(config.api_key),
        timeout_ms=config.timeout_ms,
    )
    return config


DEFAULT_CONFIG = load_bridge_config()
