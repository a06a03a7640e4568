# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Merging of totals that describe the same label hierarchy.

Absolute time and counts are summed. Relative shares are summed and divided
by the number of merged totals, so a bucket holding the whole of every week
still holds the whole of the merged period.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable

from time_flies.errors import EmptyMergeError, LabelMismatchError, ValueMismatchError
from time_flies.types import Period, SubTotal, Total

logger = logging.getLogger("time_flies.budget")


def merge_totals(totals: list[Total], date: dt.date, period: Period) -> Total:
    """
    Merge ``totals`` into one Total dated ``date`` and tagged ``period``.

    Raises:
        EmptyMergeError: If ``totals`` is empty.
        LabelMismatchError: If the totals group on different labels.
        ValueMismatchError: If a merged bucket mixes values.
    """
    if not totals:
        raise EmptyMergeError("totals")

    absolute = sum((total.absolute for total in totals), dt.timedelta(0))
    subtotals = merge_by_value((total.subtotals for total in totals), len(totals))

    logger.debug(
        "merged totals",
        extra={"totals": len(totals), "date": date.isoformat(), "period": period},
    )
    return Total(
        date=date,
        period=period,
        absolute=absolute,
        subtotals=subtotals,
        ratio=0.0,
    )


def merge_by_value(subtotal_sets: Iterable[list[SubTotal]], n: int) -> list[SubTotal]:
    """
    Merge sibling sets from several totals into one sibling set.

    Subtotals are grouped by value and each group is merged with
    :func:`merge_subtotals`. The result is sorted by value.

    Args:
        subtotal_sets: Sibling lists taken from the same position in each
            merged total.
        n: Number of top-level totals being merged.

    Raises:
        LabelMismatchError: If the siblings do not all share one label.
    """
    label: str | None = None
    by_value: dict[str, list[SubTotal]] = {}
    for subtotals in subtotal_sets:
        for subtotal in subtotals:
            if label is None:
                label = subtotal.label
            elif subtotal.label != label:
                raise LabelMismatchError(label, subtotal.label)
            by_value.setdefault(subtotal.value, []).append(subtotal)

    return [merge_subtotals(by_value[value], n) for value in sorted(by_value)]


def merge_subtotals(subtotals: list[SubTotal], n: int) -> SubTotal:
    """
    Merge subtotals that share one label and value.

    Args:
        subtotals: The subtotals to merge.
        n: Number of top-level totals being merged. Relative shares are
            averaged over ``n``.

    Raises:
        EmptyMergeError: If ``subtotals`` is empty.
        LabelMismatchError: If the subtotals have different labels.
        ValueMismatchError: If the subtotals have different values.
    """
    if not subtotals:
        raise EmptyMergeError("subtotals")

    first = subtotals[0]
    relative = 0.0
    absolute = dt.timedelta(0)
    count = 0
    for subtotal in subtotals:
        if subtotal.label != first.label:
            raise LabelMismatchError(first.label, subtotal.label)
        if subtotal.value != first.value:
            raise ValueMismatchError(first.label, first.value, subtotal.value)
        relative += subtotal.relative
        absolute += subtotal.absolute
        count += subtotal.count

    return SubTotal(
        label=first.label,
        value=first.value,
        relative=relative / n,
        absolute=absolute,
        count=count,
        subtotals=merge_by_value((subtotal.subtotals for subtotal in subtotals), n),
    )
