# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import datetime as dt

from time_flies.types import SubTotal, Total


def _rescale(subtotal: SubTotal, scale: float) -> SubTotal:
    relative = subtotal.relative / scale if scale else 0.0
    return subtotal.model_copy(
        update={
            "relative": relative,
            "subtotals": [_rescale(child, scale) for child in subtotal.subtotals],
        }
    )


def focus_total(total: Total, value: str) -> Total:
    """Re-root ``total`` onto the children of its top-level ``value`` bucket."""
    for subtotal in total.subtotals:
        if subtotal.value != value:
            continue
        children = [_rescale(child, subtotal.relative) for child in subtotal.subtotals]
        return Total(
            date=total.date,
            period=total.period,
            absolute=sum((child.absolute for child in children), dt.timedelta(0)),
            subtotals=children,
            ratio=total.ratio,
        )
    return Total(date=total.date, period=total.period)


def focus(totals: list[Total], value: str) -> list[Total]:
    """
    Zoom every total onto one top-level value.

    Relative shares of the promoted buckets are renormalized to sum to 1.
    A total without ``value`` becomes an empty total with zero time.
    """
    return [focus_total(total, value) for total in totals]
