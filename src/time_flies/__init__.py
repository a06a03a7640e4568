# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
time-flies: budget focus time from a weekly activity log.

Quick start::

    from time_flies import BudgetConfig, focus, get_totals, parse_log

    log = parse_log(open("tf.log").read())
    totals = get_totals(log, BudgetConfig(aggregation_period="Monthly"))
    engineering = focus(totals, "eng")
"""

from time_flies.budget import (
    EntryTime,
    focus,
    format_duration,
    get_total,
    get_totals,
    group_entries,
    merge_by_value,
    merge_subtotals,
    merge_totals,
    parse_duration,
    reconcile,
    truncate_date,
)
from time_flies.config import (
    AppConfig,
    BudgetConfig,
    FileConfig,
    ResolvedBudgetConfig,
    ViewConfig,
    load_config,
    parse_period,
)
from time_flies.errors import (
    ConfigurationError,
    EmptyMergeError,
    InvalidPeriodError,
    LabelMismatchError,
    LogParseError,
    MalformedDurationError,
    TimeFliesError,
    ValueMismatchError,
)
from time_flies.export import log_from_json, log_to_json, totals_from_json, totals_to_json
from time_flies.log import merge_logs, parse_entry, parse_log, parse_week, read_log, read_logs
from time_flies.tidy import format_log, format_todo
from time_flies.types import PERIOD_DAYS, Entry, Log, Period, SubTotal, Total, Week
from time_flies.view import render_totals

__all__ = [
    # Types
    "Period",
    "PERIOD_DAYS",
    "Entry",
    "Week",
    "Log",
    "SubTotal",
    "Total",
    "EntryTime",
    # Config
    "AppConfig",
    "BudgetConfig",
    "ResolvedBudgetConfig",
    "FileConfig",
    "ViewConfig",
    "load_config",
    "parse_period",
    # Errors
    "TimeFliesError",
    "MalformedDurationError",
    "EmptyMergeError",
    "LabelMismatchError",
    "ValueMismatchError",
    "InvalidPeriodError",
    "LogParseError",
    "ConfigurationError",
    # Budget engine
    "parse_duration",
    "format_duration",
    "reconcile",
    "group_entries",
    "get_total",
    "get_totals",
    "truncate_date",
    "merge_totals",
    "merge_by_value",
    "merge_subtotals",
    "focus",
    # Log files
    "parse_log",
    "parse_week",
    "parse_entry",
    "read_log",
    "read_logs",
    "merge_logs",
    # Output
    "format_log",
    "format_todo",
    "render_totals",
    "totals_to_json",
    "totals_from_json",
    "log_to_json",
    "log_from_json",
]
