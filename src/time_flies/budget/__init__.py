# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from time_flies.budget.duration import format_duration, parse_duration
from time_flies.budget.focus import focus, focus_total
from time_flies.budget.grouping import get_total, group_entries
from time_flies.budget.merge import merge_by_value, merge_subtotals, merge_totals
from time_flies.budget.period import get_totals, truncate_date
from time_flies.budget.reconcile import EntryTime, declared_times, reconcile

__all__ = [
    "parse_duration",
    "format_duration",
    "EntryTime",
    "declared_times",
    "reconcile",
    "group_entries",
    "get_total",
    "merge_totals",
    "merge_by_value",
    "merge_subtotals",
    "get_totals",
    "truncate_date",
    "focus",
    "focus_total",
]
