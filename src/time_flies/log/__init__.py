# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from time_flies.log.merge import merge_headers, merge_logs, merge_weeks, read_logs
from time_flies.log.parse import (
    DATE_FORMATS,
    dewhite,
    parse_date,
    parse_entry,
    parse_labels,
    parse_log,
    parse_week,
    read_log,
)

__all__ = [
    "DATE_FORMATS",
    "dewhite",
    "parse_date",
    "parse_entry",
    "parse_labels",
    "parse_log",
    "parse_week",
    "read_log",
    "merge_headers",
    "merge_weeks",
    "merge_logs",
    "read_logs",
]
