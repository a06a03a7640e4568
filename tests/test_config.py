# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for configuration models and loading."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest
from pydantic import ValidationError

from time_flies.config import (
    AppConfig,
    BudgetConfig,
    FileConfig,
    ViewConfig,
    load_config,
    parse_period,
)
from time_flies.errors import ConfigurationError, InvalidPeriodError


class TestBudgetConfig:
    def test_defaults(self) -> None:
        resolved = BudgetConfig().resolve()
        assert resolved.aggregation_period == "Weekly"
        assert resolved.days_per_week == 5
        assert resolved.hours_per_day == 8
        assert resolved.default_fuzzy_minutes == 30
        assert resolved.label_grouping == ("cat", "sub")
        assert resolved.weekly_budget == dt.timedelta(hours=40)
        assert resolved.default_fuzzy == dt.timedelta(minutes=30)

    def test_explicit_values_override_defaults(self) -> None:
        resolved = BudgetConfig(
            aggregation_period="Quarterly",
            days_per_week=4,
            hours_per_day=6,
            default_fuzzy_minutes=0,
            label_grouping=["team"],
        ).resolve()
        assert resolved.aggregation_period == "Quarterly"
        assert resolved.weekly_budget == dt.timedelta(hours=24)
        assert resolved.default_fuzzy == dt.timedelta(0)
        assert resolved.label_grouping == ("team",)

    def test_empty_grouping_is_kept(self) -> None:
        assert BudgetConfig(label_grouping=[]).resolve().label_grouping == ()

    def test_invalid_period_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BudgetConfig(aggregation_period="Yearly")  # type: ignore[arg-type]

    def test_non_positive_days_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BudgetConfig(days_per_week=0)

    @pytest.mark.parametrize("fields", [{"days_per_week": 8}, {"hours_per_day": 25}])
    def test_week_longer_than_a_week_rejected(self, fields: dict[str, int]) -> None:
        with pytest.raises(ValidationError):
            BudgetConfig(**fields)

    def test_config_is_frozen(self) -> None:
        config = BudgetConfig()
        with pytest.raises(ValidationError):
            config.days_per_week = 3  # type: ignore[misc]


class TestParsePeriod:
    @pytest.mark.parametrize(
        "text,expected",
        [("weekly", "Weekly"), ("Monthly", "Monthly"), (" QUARTERLY ", "Quarterly")],
    )
    def test_case_insensitive(self, text: str, expected: str) -> None:
        assert parse_period(text) == expected

    def test_unknown_period_raises(self) -> None:
        with pytest.raises(InvalidPeriodError, match="not a valid aggregation period") as exc_info:
            parse_period("yearly")
        assert exc_info.value.code == "INVALID_PERIOD"


class TestViewAndFileConfig:
    def test_screen_width_default_and_minimum(self) -> None:
        assert ViewConfig().get_screen_width() == 100
        assert ViewConfig(screen_width=5).get_screen_width() == 20
        assert ViewConfig(screen_width=80).get_screen_width() == 80

    def test_default_log_file_is_under_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        assert FileConfig().get_log_file() == tmp_path / ".tf" / "log"
        assert FileConfig(log_file="/tmp/x.log").get_log_file() == Path("/tmp/x.log")


class TestLoadConfig:
    def test_missing_default_file_gives_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        assert load_config() == AppConfig()

    def test_default_file_is_read(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / ".tf").mkdir()
        (tmp_path / ".tf" / "config").write_text(
            '{"budget": {"aggregation_period": "Monthly"}, "view": {"focus_group": "eng"}}',
            encoding="utf-8",
        )
        config = load_config()
        assert config.budget.aggregation_period == "Monthly"
        assert config.view.focus_group == "eng"
        assert config.file == FileConfig()

    def test_explicit_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Config file not found"):
            load_config(tmp_path / "nope.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(path)

    def test_invalid_schema_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text('{"budget": {"hours_per_day": -1}}', encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_unknown_keys_are_ignored_with_a_warning(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "config.json"
        path.write_text(
            '{"AggregationPeriod": "Monthly", "budget": {"period": "Monthly", "days_per_week": 4}}',
            encoding="utf-8",
        )
        with caplog.at_level("WARNING", logger="time_flies.config"):
            config = load_config(path)
        assert config.budget.days_per_week == 4
        assert config.budget.aggregation_period is None
        messages = [record.getMessage() for record in caplog.records]
        assert any("'AggregationPeriod'" in message for message in messages)
        assert any("'budget.period'" in message for message in messages)
        assert not any("days_per_week" in message for message in messages)

    def test_known_keys_log_no_warning(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "config.json"
        path.write_text('{"view": {"screen_width": 80}}', encoding="utf-8")
        with caplog.at_level("WARNING", logger="time_flies.config"):
            load_config(path)
        assert caplog.records == []
