# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import datetime as dt
import re

from time_flies.errors import MalformedDurationError

_DURATION_RE = re.compile(r"(?:\d+[hms])+")
_PART_RE = re.compile(r"(\d+)([hms])")

_UNIT_SECONDS: dict[str, int] = {
    "h": 3_600,
    "m": 60,
    "s": 1,
}

# Largest duration a label may declare, about 292 years.
MAX_SECONDS = 2_562_047 * 3_600


def parse_duration(raw: str, key: str | None = None) -> dt.timedelta:
    """
    Parse a label duration such as ``'1h30m'``.

    Args:
        raw: One or more ``<integer><unit>`` pairs, units ``h``, ``m``, ``s``.
        key: Label key the value came from, used in the error message.

    Raises:
        MalformedDurationError: If ``raw`` does not match the grammar or
            exceeds :data:`MAX_SECONDS`.
    """
    text = raw.strip()
    if not _DURATION_RE.fullmatch(text):
        raise MalformedDurationError(raw, key=key)
    seconds = sum(int(amount) * _UNIT_SECONDS[unit] for amount, unit in _PART_RE.findall(text))
    if seconds > MAX_SECONDS:
        raise MalformedDurationError(raw, key=key)
    return dt.timedelta(seconds=seconds)


def format_duration(duration: dt.timedelta) -> str:
    """Format a duration in the label grammar, dropping sub-second precision."""
    seconds = int(duration.total_seconds())
    if seconds <= 0:
        return "0s"
    hours, remainder = divmod(seconds, 3_600)
    minutes, seconds = divmod(remainder, 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds:
        parts.append(f"{seconds}s")
    return "".join(parts)
