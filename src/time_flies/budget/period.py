# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Aggregation of weekly totals into coarser periods.

Monthly and quarterly boundaries are fixed 30- and 90-day windows counted
from 0001-01-01, not calendar months or quarters.
"""

from __future__ import annotations

import datetime as dt
import logging

from time_flies.budget.grouping import get_total
from time_flies.budget.merge import merge_totals
from time_flies.config import BudgetConfig
from time_flies.types import PERIOD_DAYS, Log, Period, Total

logger = logging.getLogger("time_flies.budget")


def truncate_date(date: dt.date, period: Period) -> dt.date:
    """Round ``date`` down to the start of its fixed-length ``period`` window."""
    days = PERIOD_DAYS[period]
    # date.min has ordinal 1.
    return dt.date.fromordinal((date.toordinal() - 1) // days * days + 1)


def get_totals(log: Log, config: BudgetConfig | None = None) -> list[Total]:
    """
    Compute totals for every week of ``log`` at the configured period.

    Weekly totals come back in log order. Coarser totals come back one per
    window, ordered by window start.

    Raises:
        MalformedDurationError: If any entry carries an unparsable duration.
    """
    resolved = (config or BudgetConfig()).resolve()
    weekly = [get_total(week, resolved) for week in log]

    period = resolved.aggregation_period
    if period == "Weekly":
        return weekly

    windows: dict[dt.date, list[Total]] = {}
    for total in weekly:
        windows.setdefault(truncate_date(total.date, period), []).append(total)

    logger.debug(
        "aggregating weeks",
        extra={"weeks": len(weekly), "windows": len(windows), "period": period},
    )
    return [merge_totals(windows[start], start, period) for start in sorted(windows)]
