# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for time-flies tests."""

from __future__ import annotations

import datetime as dt

import pytest

from time_flies.config import BudgetConfig, ResolvedBudgetConfig
from time_flies.types import Entry, Week


@pytest.fixture
def config() -> ResolvedBudgetConfig:
    """Default budget config: 5 x 8h weeks, 30m default fuzzy, cat/sub grouping."""
    return BudgetConfig().resolve()


@pytest.fixture
def week_date() -> dt.date:
    return dt.date(2026, 1, 5)


@pytest.fixture
def four_entry_week(week_date: dt.date) -> Week:
    """Three 'a' entries (two sub=1, one sub=2) and one 'b' entry, no durations."""
    return Week(
        date=week_date,
        header={},
        done=[
            Entry(line="thing one", labels={"cat": "a", "sub": "1"}),
            Entry(line="thing two", labels={"cat": "a", "sub": "1"}),
            Entry(line="thing three", labels={"cat": "a", "sub": "2"}),
            Entry(line="thing four", labels={"cat": "b", "sub": "2"}),
        ],
        todo=[Entry(line="ignored by the budget")],
    )


@pytest.fixture
def sample_log_text() -> str:
    return (
        "Date: January 5, 2026\n"
        "Focus: shipping\n"
        "\n"
        "wrote the design doc   ##cat=eng sub=docs f=3h\n"
        "[x] reviewed prs       ##cat=eng sub=review\n"
        "# plan next quarter    ##cat=mgmt\n"
        "[ ] file taxes\n"
        "%%\n"
        "Date: Jan 12 2026\n"
        "\n"
        "standup   ##cat=eng t=1h\n"
        "hiring loop   ##cat=mgmt sub=hiring\n"
    )
