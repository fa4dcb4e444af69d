"""Command parsing utilities."""

from __future__ import annotations

import re

COMMAND_TOKEN = "/zc"

_PAYLOAD_PATTERN = rf"{re.escape(COMMAND_TOKEN)}\b\s*:?\s*(.*)"
_PLAIN_RE = re.compile(rf"^{_PAYLOAD_PATTERN}$", re.IGNORECASE)


def _mention_pattern(assistant_name: str) -> re.Pattern[str]:
    return re.compile(
        rf"^@{re.escape(assistant_name)}\s+{_PAYLOAD_PATTERN}$", re.IGNORECASE
    )


def extract_zeroclaw_command(
    content: str, assistant_name: str, allow_plain_command: bool
) -> str | None:
    """Extract the payload of a `/zc` command from message text.

    `@<assistant_name> /zc <payload>` is always accepted. The bare form
    `/zc <payload>` is accepted only when *allow_plain_command* is set.

    Args:
        content: The message text to inspect.
        assistant_name: Name the message must mention for the addressed form.
        allow_plain_command: Whether `/zc` without a mention counts.

    Returns:
        The payload (possibly empty), or None if the message is not a
        `/zc` command.
    """
    trimmed = content.strip()
    if not trimmed:
        return None

    match = _mention_pattern(assistant_name).match(trimmed)
    if match is not None:
        return match.group(1) or ""

    if allow_plain_command:
        match = _PLAIN_RE.match(trimmed)
        if match is not None:
            return match.group(1) or ""

    return None
