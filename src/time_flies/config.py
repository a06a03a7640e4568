# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import datetime as dt
import json
import logging
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, ValidationError

from time_flies.errors import ConfigurationError, InvalidPeriodError
from time_flies.types import PERIOD_DAYS, Period

logger = logging.getLogger("time_flies.config")

DEFAULT_PERIOD: Period = "Weekly"
DEFAULT_DAYS_PER_WEEK = 5
DEFAULT_HOURS_PER_DAY = 8
DEFAULT_FUZZY_MINUTES = 30
DEFAULT_LABEL_GROUPING: tuple[str, ...] = ("cat", "sub")

DEFAULT_SCREEN_WIDTH = 100
MIN_SCREEN_WIDTH = 20

DEFAULT_CONFIG_FILE = ".tf/config"
DEFAULT_LOG_FILE = ".tf/log"


def parse_period(value: str) -> Period:
    """
    Resolve a user-supplied period name, ignoring case.

    Raises:
        InvalidPeriodError: If ``value`` names no known period.
    """
    for period in PERIOD_DAYS:
        if period.lower() == value.strip().lower():
            return period  # type: ignore[return-value]
    raise InvalidPeriodError(value)


class ResolvedBudgetConfig(BaseModel, frozen=True):
    """Budget configuration with every default filled in."""

    aggregation_period: Period
    days_per_week: int
    hours_per_day: int
    default_fuzzy_minutes: int
    label_grouping: tuple[str, ...]

    @property
    def weekly_budget(self) -> dt.timedelta:
        """Absolute time available in one week."""
        return dt.timedelta(hours=self.days_per_week * self.hours_per_day)

    @property
    def default_fuzzy(self) -> dt.timedelta:
        """Fuzzy time given to entries that declare neither ``t`` nor ``f``."""
        return dt.timedelta(minutes=self.default_fuzzy_minutes)


class BudgetConfig(BaseModel, frozen=True):
    """
    Configuration for the budget engine.

    Every field is optional. Call :meth:`resolve` once per aggregation to
    obtain concrete values.

    Attributes:
        aggregation_period: ``'Weekly'`` (default), ``'Monthly'`` or
            ``'Quarterly'``.
        days_per_week: Working days per week, 1 to 7 (default 5).
        hours_per_day: Working hours per day, 1 to 24 (default 8).
        default_fuzzy_minutes: Fuzzy minutes for entries without ``t`` or
            ``f`` labels (default 30).
        label_grouping: Ordered label keys, one per hierarchy level
            (default ``['cat', 'sub']``).
    """

    aggregation_period: Period | None = None
    days_per_week: Annotated[int, Field(gt=0, le=7)] | None = None
    hours_per_day: Annotated[int, Field(gt=0, le=24)] | None = None
    default_fuzzy_minutes: Annotated[int, Field(ge=0)] | None = None
    label_grouping: list[str] | None = None

    def resolve(self) -> ResolvedBudgetConfig:
        """Return a copy of this config with defaults applied."""
        return ResolvedBudgetConfig(
            aggregation_period=self.aggregation_period or DEFAULT_PERIOD,
            days_per_week=self.days_per_week or DEFAULT_DAYS_PER_WEEK,
            hours_per_day=self.hours_per_day or DEFAULT_HOURS_PER_DAY,
            default_fuzzy_minutes=(
                DEFAULT_FUZZY_MINUTES
                if self.default_fuzzy_minutes is None
                else self.default_fuzzy_minutes
            ),
            label_grouping=(
                DEFAULT_LABEL_GROUPING
                if self.label_grouping is None
                else tuple(self.label_grouping)
            ),
        )


class FileConfig(BaseModel, frozen=True):
    """
    Location of the log files.

    Attributes:
        log_file: Primary log file. Defaults to ``~/.tf/log``.
        extra_log_files: Further logs merged into the primary one by week date.
    """

    log_file: str | None = None
    extra_log_files: list[str] = Field(default_factory=list)

    def get_log_file(self) -> Path:
        if self.log_file is None:
            return Path.home() / DEFAULT_LOG_FILE
        return Path(self.log_file).expanduser()


class ViewConfig(BaseModel, frozen=True):
    """
    Rendering options for the terminal bar chart.

    Attributes:
        screen_width: Bar width in characters (default 100, minimum 20).
        focus_group: When set, render the children of this top-level value.
    """

    screen_width: int | None = None
    focus_group: str | None = None

    def get_screen_width(self) -> int:
        if self.screen_width is None:
            return DEFAULT_SCREEN_WIDTH
        return max(self.screen_width, MIN_SCREEN_WIDTH)


class AppConfig(BaseModel, frozen=True):
    """
    Top-level configuration, stored as JSON in ``~/.tf/config``.

    Unrecognised keys are ignored; :func:`load_config` logs a warning for each.

    Example::

        {
            "budget": {"aggregation_period": "Monthly", "label_grouping": ["cat"]},
            "file": {"log_file": "~/notes/tf.log"},
            "view": {"screen_width": 80}
        }
    """

    budget: BudgetConfig = Field(default_factory=BudgetConfig)
    file: FileConfig = Field(default_factory=FileConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)


def _warn_unknown_keys(data: dict[str, object], config_path: Path) -> None:
    sections = {"budget": BudgetConfig, "file": FileConfig, "view": ViewConfig}
    for key, value in data.items():
        section = sections.get(key)
        if section is None:
            logger.warning("ignoring unknown config key %r in %s", key, config_path)
            continue
        if not isinstance(value, dict):
            continue
        for field in value:
            if field not in section.model_fields:
                logger.warning(
                    "ignoring unknown config key %r in %s", f"{key}.{field}", config_path
                )


def load_config(path: str | Path | None = None) -> AppConfig:
    """
    Load the application config.

    Args:
        path: Explicit config file. When omitted, ``~/.tf/config`` is read if
            it exists and defaults are used otherwise.

    Raises:
        ConfigurationError: If an explicit file is missing, or any file is
            unreadable or fails validation.
    """
    must_exist = path is not None
    config_path = Path(path).expanduser() if path is not None else Path.home() / DEFAULT_CONFIG_FILE

    if not config_path.exists():
        if must_exist:
            raise ConfigurationError(f"Config file not found: {config_path}")
        logger.debug("no config file at %s, using defaults", config_path)
        return AppConfig()

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Unable to read config file {config_path}: {exc}") from exc

    try:
        config = AppConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc

    _warn_unknown_keys(json.loads(raw), config_path)
    logger.debug("loaded config from %s", config_path)
    return config
