# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field

# ─── Period ───────────────────────────────────────────────────────────────────

Period = Literal["Weekly", "Monthly", "Quarterly"]

# Fixed-length windows, not calendar months or quarters.
PERIOD_DAYS: dict[str, int] = {
    "Weekly": 7,
    "Monthly": 30,
    "Quarterly": 90,
}

# Reserved label keys carrying declared durations.
STRICT_LABEL = "t"
FUZZY_LABEL = "f"

# ─── Log records ──────────────────────────────────────────────────────────────


class Entry(BaseModel, frozen=True):
    """
    One logged activity line.

    Attributes:
        line: The activity text with labels stripped.
        labels: Label key to label value. ``t`` and ``f`` carry strict and
            fuzzy durations; every other key is a grouping dimension.
    """

    line: str = ""
    labels: dict[str, str] = Field(default_factory=dict)


class Week(BaseModel, frozen=True):
    """
    One parsed week of the log.

    ``todo`` entries are carried for the todo listing and ignored by the
    budget engine.
    """

    date: dt.date
    header: dict[str, list[str]] = Field(default_factory=dict)
    done: list[Entry] = Field(default_factory=list)
    todo: list[Entry] = Field(default_factory=list)


Log = list[Week]

# ─── Totals ───────────────────────────────────────────────────────────────────


class SubTotal(BaseModel, frozen=True):
    """
    One bucket of the label hierarchy.

    Attributes:
        label: The grouping key for this depth.
        value: The label value shared by the bucket's entries. Empty for
            entries that lack the label.
        relative: Share of the whole budget routed into this bucket. Siblings
            sum to their parent's share.
        absolute: Time allotted to this bucket.
        count: Number of entries routed into this bucket.
        subtotals: Buckets for the next grouping key, sorted by value.
    """

    label: str
    value: str = ""
    relative: float = 0.0
    absolute: dt.timedelta = dt.timedelta(0)
    count: int = 0
    subtotals: list[SubTotal] = Field(default_factory=list)


class Total(BaseModel, frozen=True):
    """
    Aggregated result for one week or one coarser period.

    ``ratio`` is the reconciliation ratio of a single week. It is a
    diagnostic and stays 0 on merged totals.
    """

    date: dt.date
    period: Period = "Weekly"
    absolute: dt.timedelta = dt.timedelta(0)
    subtotals: list[SubTotal] = Field(default_factory=list)
    ratio: float = 0.0
