# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
JSON export of totals and parsed logs.

Durations are written as ISO 8601 durations and dates as ISO dates, so
:func:`totals_from_json` restores every field of :func:`totals_to_json`.
"""

from __future__ import annotations

import json

from pydantic import TypeAdapter

from time_flies.types import Log, Total, Week

_TOTALS_ADAPTER = TypeAdapter(list[Total])
_LOG_ADAPTER = TypeAdapter(list[Week])


def totals_to_json(totals: list[Total]) -> str:
    """Serialise totals to a JSON array string with 2-space indentation."""
    return json.dumps(
        [total.model_dump(mode="json") for total in totals],
        indent=2,
        ensure_ascii=False,
    )


def totals_from_json(text: str) -> list[Total]:
    """Parse the output of :func:`totals_to_json`."""
    return _TOTALS_ADAPTER.validate_python(json.loads(text))


def log_to_json(log: Log) -> str:
    """Serialise a parsed log to a JSON array string with 2-space indentation."""
    return json.dumps(
        [week.model_dump(mode="json") for week in log],
        indent=2,
        ensure_ascii=False,
    )


def log_from_json(text: str) -> Log:
    """Parse the output of :func:`log_to_json`."""
    return _LOG_ADAPTER.validate_python(json.loads(text))
