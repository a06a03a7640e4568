# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Duration reconciliation.

Fits one set of entries into a fixed time budget. Strict time (``t``) is
protected and only scaled when strict time alone fills the budget, or when
there is no fuzzy time to absorb slack. Fuzzy time (``f``, or the configured
default) is then stretched or squeezed so the entries exactly fill the budget.
"""

from __future__ import annotations

import datetime as dt
import logging

from pydantic import BaseModel

from time_flies.budget.duration import parse_duration
from time_flies.config import ResolvedBudgetConfig
from time_flies.types import FUZZY_LABEL, STRICT_LABEL, Entry

logger = logging.getLogger("time_flies.budget")

_ZERO = dt.timedelta(0)


class EntryTime(BaseModel, frozen=True):
    """Time allotted to one entry after reconciliation."""

    entry: Entry
    relative: float
    strict: dt.timedelta
    fuzzy: dt.timedelta

    @property
    def absolute(self) -> dt.timedelta:
        return self.strict + self.fuzzy


def declared_times(
    entry: Entry, config: ResolvedBudgetConfig
) -> tuple[dt.timedelta, dt.timedelta]:
    """
    Return the ``(strict, fuzzy)`` time an entry declares.

    Entries with neither label get the configured default fuzzy time.

    Raises:
        MalformedDurationError: If a ``t`` or ``f`` label does not parse.
    """
    strict = _ZERO
    fuzzy = _ZERO
    has_strict = STRICT_LABEL in entry.labels
    has_fuzzy = FUZZY_LABEL in entry.labels
    if has_strict:
        strict = parse_duration(entry.labels[STRICT_LABEL], key=STRICT_LABEL)
    if has_fuzzy:
        fuzzy = parse_duration(entry.labels[FUZZY_LABEL], key=FUZZY_LABEL)
    if not has_strict and not has_fuzzy:
        fuzzy = config.default_fuzzy
    return strict, fuzzy


def _settle_remainder(
    budget: dt.timedelta, stricts: list[dt.timedelta], fuzzies: list[dt.timedelta]
) -> None:
    """
    Give the microsecond rounding left over by scaling to the largest fitted
    time, in place, so the entries sum to ``budget`` exactly.
    """
    fitted = sum(stricts, _ZERO) + sum(fuzzies, _ZERO)
    if fitted == _ZERO or fitted == budget:
        return
    times = fuzzies if any(fuzzies) else stricts
    index = max(range(len(times)), key=times.__getitem__)
    times[index] += budget - fitted


def reconcile(
    relative_share: float,
    absolute_budget: dt.timedelta,
    entries: list[Entry],
    config: ResolvedBudgetConfig,
) -> tuple[list[EntryTime], float]:
    """
    Fit ``entries`` into ``absolute_budget``.

    Args:
        relative_share: The share of the whole that ``absolute_budget``
            represents. Entry relatives are fractions of this share.
        absolute_budget: Time to distribute across the entries.
        entries: The entries to fit.
        config: Resolved budget configuration.

    Returns:
        The per-entry allocation, in input order, and the ratio applied by the
        last scaling step (0 when nothing was scaled).

    Raises:
        MalformedDurationError: If any entry carries an unparsable duration.
    """
    if not entries:
        return [], 0.0

    declared = [declared_times(entry, config) for entry in entries]
    stricts = [strict for strict, _ in declared]
    fuzzies = [fuzzy for _, fuzzy in declared]
    strict_total = sum(stricts, _ZERO)
    fuzzy_total = sum(fuzzies, _ZERO)
    ratio = 0.0

    # Over-committed on strict time, or nothing flexible to absorb slack.
    if strict_total >= absolute_budget or fuzzy_total == _ZERO:
        declared_total = strict_total + fuzzy_total
        if declared_total > _ZERO:
            ratio = absolute_budget / declared_total
            stricts = [strict * ratio for strict in stricts]
            fuzzies = [fuzzy * ratio for fuzzy in fuzzies]
            strict_total = sum(stricts, _ZERO)
            fuzzy_total = sum(fuzzies, _ZERO)

    if fuzzy_total != _ZERO:
        ratio = (absolute_budget - strict_total) / fuzzy_total
        fuzzies = [fuzzy * ratio for fuzzy in fuzzies]

    _settle_remainder(absolute_budget, stricts, fuzzies)

    budget_seconds = absolute_budget.total_seconds()
    entry_times: list[EntryTime] = []
    for entry, strict, fuzzy in zip(entries, stricts, fuzzies):
        relative = 0.0
        if budget_seconds > 0:
            relative = relative_share * (strict + fuzzy).total_seconds() / budget_seconds
        entry_times.append(
            EntryTime(entry=entry, relative=relative, strict=strict, fuzzy=fuzzy)
        )

    logger.debug(
        "reconciled entries",
        extra={
            "entries": len(entries),
            "budget": str(absolute_budget),
            "ratio": ratio,
        },
    )
    return entry_times, ratio
