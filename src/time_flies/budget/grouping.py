# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Hierarchical grouping of reconciled entries into a SubTotal tree.

Each level re-runs reconciliation over the entries routed into its parent
bucket, scaled to that bucket's share and time, then buckets them by the
level's label key. Buckets are emitted sorted by label value.
"""

from __future__ import annotations

import datetime as dt
import logging

from time_flies.budget.reconcile import EntryTime, reconcile
from time_flies.config import ResolvedBudgetConfig
from time_flies.types import Entry, SubTotal, Total, Week

logger = logging.getLogger("time_flies.budget")


class _Bucket:
    """Mutable accumulator for one label value during grouping."""

    __slots__ = ("relative", "absolute", "entries")

    def __init__(self) -> None:
        self.relative: float = 0.0
        self.absolute: dt.timedelta = dt.timedelta(0)
        self.entries: list[Entry] = []

    def add(self, entry_time: EntryTime) -> None:
        self.relative += entry_time.relative
        self.absolute += entry_time.absolute
        self.entries.append(entry_time.entry)


def group_entries(
    depth: int,
    relative_share: float,
    absolute_budget: dt.timedelta,
    entries: list[Entry],
    config: ResolvedBudgetConfig,
) -> tuple[list[SubTotal], float]:
    """
    Build the SubTotal tree for ``entries`` starting at grouping ``depth``.

    Args:
        depth: Index into ``config.label_grouping`` for this level.
        relative_share: Share of the whole represented by ``entries``.
        absolute_budget: Time represented by ``entries``.
        entries: Entries routed into this level.
        config: Resolved budget configuration.

    Returns:
        Sibling subtotals sorted by value, and the reconciliation ratio of
        this level.

    Raises:
        MalformedDurationError: If any entry carries an unparsable duration.
    """
    if depth >= len(config.label_grouping):
        return [], 0.0

    label = config.label_grouping[depth]
    entry_times, ratio = reconcile(relative_share, absolute_budget, entries, config)

    buckets: dict[str, _Bucket] = {}
    for entry_time in entry_times:
        value = entry_time.entry.labels.get(label, "")
        buckets.setdefault(value, _Bucket()).add(entry_time)

    subtotals: list[SubTotal] = []
    for value in sorted(buckets):
        bucket = buckets[value]
        children, _ = group_entries(
            depth + 1, bucket.relative, bucket.absolute, bucket.entries, config
        )
        subtotals.append(
            SubTotal(
                label=label,
                value=value,
                relative=bucket.relative,
                absolute=bucket.absolute,
                count=len(bucket.entries),
                subtotals=children,
            )
        )

    logger.debug(
        "grouped entries",
        extra={"depth": depth, "label": label, "buckets": len(subtotals)},
    )
    return subtotals, ratio


def get_total(week: Week, config: ResolvedBudgetConfig) -> Total:
    """
    Compute the weekly Total for the done entries of ``week``.

    Raises:
        MalformedDurationError: If any entry carries an unparsable duration.
    """
    budget = config.weekly_budget
    subtotals, ratio = group_entries(0, 1.0, budget, week.done, config)
    return Total(
        date=week.date,
        period="Weekly",
        absolute=budget,
        subtotals=subtotals,
        ratio=ratio,
    )
