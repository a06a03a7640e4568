# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class TimeFliesError(Exception):
    """Base class for all time-flies errors."""

    def __init__(self, message: str, code: str = "TIME_FLIES_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class MalformedDurationError(TimeFliesError):
    """
    Raised when a strict (``t``) or fuzzy (``f``) label does not parse as a
    duration.

    Attributes:
        key: The label key carrying the bad value.
        raw: The raw label text.
    """

    def __init__(self, raw: str, key: str | None = None) -> None:
        key_text = f" in label '{key}'" if key else ""
        super().__init__(
            f"Malformed duration {raw!r}{key_text}. "
            "Expected <integer><unit> pairs such as '1h30m' (units: h, m, s).",
            code="MALFORMED_DURATION",
        )
        self.key = key
        self.raw = raw


class EmptyMergeError(TimeFliesError):
    """Raised when a merge is asked to combine zero totals or subtotals."""

    def __init__(self, what: str = "totals") -> None:
        super().__init__(f"Cannot merge zero {what}.", code="EMPTY_MERGE")
        self.what = what


class LabelMismatchError(TimeFliesError):
    """
    Raised when subtotals merged under one parent disagree on their label.

    This indicates a bucketing bug in the caller, not bad user input.
    """

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            f"Cannot merge subtotals with different labels: "
            f"'{expected}' and '{actual}'.",
            code="LABEL_MISMATCH",
        )
        self.expected = expected
        self.actual = actual


class ValueMismatchError(TimeFliesError):
    """Raised when subtotals merged into one node disagree on their value."""

    def __init__(self, label: str, expected: str, actual: str) -> None:
        super().__init__(
            f"Cannot merge '{label}' subtotals with different values: "
            f"'{expected}' and '{actual}'.",
            code="VALUE_MISMATCH",
        )
        self.label = label
        self.expected = expected
        self.actual = actual


class InvalidPeriodError(TimeFliesError):
    """Raised when an invalid aggregation period string is provided."""

    def __init__(self, value: str) -> None:
        from time_flies.types import PERIOD_DAYS

        super().__init__(
            f"'{value}' is not a valid aggregation period. "
            f"Valid values: {sorted(PERIOD_DAYS)}.",
            code="INVALID_PERIOD",
        )
        self.value = value


class LogParseError(TimeFliesError):
    """Raised when a log record or entry line cannot be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="LOG_PARSE_ERROR")


class ConfigurationError(TimeFliesError):
    """Raised when the tool is misconfigured."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR")
