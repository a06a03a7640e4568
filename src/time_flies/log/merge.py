# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import datetime as dt

from time_flies.config import FileConfig
from time_flies.log.parse import read_log
from time_flies.types import Log, Week


def merge_headers(
    a: dict[str, list[str]], b: dict[str, list[str]]
) -> dict[str, list[str]]:
    """Union two headers, keeping first-seen value order and dropping repeats."""
    merged: dict[str, list[str]] = {}
    for header in (a, b):
        for key, values in header.items():
            existing = merged.setdefault(key, [])
            for value in values:
                if value not in existing:
                    existing.append(value)
    return merged


def merge_weeks(a: Week, b: Week) -> Week:
    """Combine two records of the same week."""
    return Week(
        date=a.date,
        header=merge_headers(a.header, b.header),
        done=[*a.done, *b.done],
        todo=[*a.todo, *b.todo],
    )


def merge_logs(*logs: Log) -> Log:
    """
    Merge logs week by week.

    Weeks with the same date are combined; the result is ordered by date.
    """
    weeks: dict[dt.date, Week] = {}
    for log in logs:
        for week in log:
            existing = weeks.get(week.date)
            weeks[week.date] = week if existing is None else merge_weeks(existing, week)
    return [weeks[date] for date in sorted(weeks)]


def read_logs(config: FileConfig) -> Log:
    """
    Read the primary log and every extra log named in ``config``.

    Raises:
        OSError: If a file cannot be read.
        LogParseError: If any record is malformed.
    """
    logs = [read_log(config.get_log_file())]
    logs.extend(read_log(path) for path in config.extra_log_files)
    return merge_logs(*logs)
