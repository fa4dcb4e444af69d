"""Tests for bridge configuration loading."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from zeroclaw_bridge.config import (
    DEFAULT_TIMEOUT_MS,
    MAX_TIMEOUT_MS,
    BridgeConfig,
    load_bridge_config,
    parse_timeout_ms,
)


@pytest.mark.parametrize("raw", ["0", "-5", "abc", "", "   ", None, "inf", "nan"])
def test_parse_timeout_falls_back_to_default(raw: str | None) -> None:
    assert parse_timeout_ms(raw) == DEFAULT_TIMEOUT_MS


def test_parse_timeout_clamps_to_max() -> None:
    assert parse_timeout_ms("99999") == MAX_TIMEOUT_MS


@pytest.mark.parametrize(
    ("raw", "expected"), [("1500", 1500), ("60000", 60000), ("2.5", 2.5)]
)
def test_parse_timeout_passes_through_valid_values(raw: str, expected: float) -> None:
    assert parse_timeout_ms(raw) == expected


def test_load_defaults_without_sources(tmp_path: Path) -> None:
    config = load_bridge_config(environ={}, env_file=tmp_path / "missing.env")

    assert config == BridgeConfig()
    assert config.configured is False
    assert config.timeout_ms == 45_000


def test_environment_wins_over_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "ZEROCLAW_BRIDGE_URL=http://file.example/bridge\n"
        "ZEROCLAW_BRIDGE_API_KEY=file-key\n"
        "ZEROCLAW_BRIDGE_TIMEOUT_MS=1000\n",
        encoding="utf-8",
    )
    environ = {
        "ZEROCLAW_BRIDGE_URL": "http://env.example/bridge",
        "ZEROCLAW_BRIDGE_API_KEY": "",
    }

    config = load_bridge_config(environ=environ, env_file=env_file)

    assert config.url == "http://env.example/bridge"
    assert config.api_key == "file-key"
    assert config.timeout_ms == 1000
    assert config.timeout_s == 1.0


def test_env_file_ignores_unrelated_keys(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("OTHER=1\nZEROCLAW_BRIDGE_URL=http://x\n", encoding="utf-8")

    config = load_bridge_config(environ={}, env_file=env_file)

    assert config.url == "http://x"
    assert config.api_key == ""


def test_reads_process_environment_by_default(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("ZEROCLAW_BRIDGE_URL", "http://proc.example")
    monkeypatch.setenv("ZEROCLAW_BRIDGE_TIMEOUT_MS", "99999")

    config = load_bridge_config(env_file=tmp_path / "missing.env")

    assert config.url == "http://proc.example"
    assert config.timeout_ms == 60_000


def test_config_is_immutable() -> None:
    config = BridgeConfig(url="http://x")
    with pytest.raises(FrozenInstanceError):
        config.url = "http://y"  # type: ignore[misc]
