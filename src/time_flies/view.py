# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Terminal bar chart of totals.

One line per total. Each top-level value gets a colored segment whose width
is proportional to its relative share; the empty value is drawn grey as
``?``. With a focus group the chart is drawn at half width and a second bar
shows how much of the whole week the focused value took.
"""

from __future__ import annotations

from time_flies.budget.focus import focus
from time_flies.config import DEFAULT_HOURS_PER_DAY, ViewConfig
from time_flies.tidy import DISPLAY_DATE_FORMAT
from time_flies.types import Total

COLOR_RESET = "\033[0m"
COLOR_GREY = "\033[90m"
COLORS: tuple[str, ...] = (
    "\033[31m",  # red
    "\033[32m",  # green
    "\033[33m",  # yellow
    "\033[34m",  # blue
    "\033[35m",  # purple
    "\033[36m",  # cyan
)

MISSING_VALUE = "?"


def _segment(text: str, chars: int, color: str) -> str:
    text = text[:chars]
    pad = chars - len(text)
    left = pad // 2
    return f"{color}{'-' * left}{text}{'-' * (pad - left)}{COLOR_RESET}|"


def render_total(
    total: Total,
    top_total: Total,
    values: list[str],
    config: ViewConfig,
    hours_per_day: int = DEFAULT_HOURS_PER_DAY,
) -> str:
    """Render one bar line for ``total``."""
    width = float(config.get_screen_width())
    if config.focus_group:
        width = width / 2

    width_by_value = {subtotal.value: subtotal.relative * width for subtotal in total.subtotals}
    out = f" {total.date.strftime(DISPLAY_DATE_FORMAT)}   |"
    cursor = 0.0
    color_index = 0
    for value in values:
        value_width = width_by_value.get(value, 0.0)
        if value == "":
            color = COLOR_GREY
            text = MISSING_VALUE
        else:
            color = COLORS[color_index % len(COLORS)]
            color_index += 1
            text = value
        chars = int(cursor + value_width) - int(cursor)
        cursor += value_width
        out += _segment(text, chars, color)

    days = total.absolute.total_seconds() / 3_600 / hours_per_day
    out += f"  ({days:.1f}d) "

    if config.focus_group:
        top_width = 0
        for subtotal in top_total.subtotals:
            if subtotal.value == config.focus_group:
                top_width = int(subtotal.relative * width)
        out += f" |{'-' * top_width}|{' ' * (int(width) - top_width)}|"
    return out


def render_totals(
    totals: list[Total],
    config: ViewConfig | None = None,
    hours_per_day: int = DEFAULT_HOURS_PER_DAY,
) -> str:
    """
    Render ``totals`` as a bar chart, one line per total.

    Values are assigned colors in sorted order so a value keeps its color
    across lines.
    """
    config = config or ViewConfig()
    top_level = totals
    if config.focus_group:
        totals = focus(totals, config.focus_group)

    values = sorted({subtotal.value for total in totals for subtotal in total.subtotals})
    return "".join(
        render_total(total, top_total, values, config, hours_per_day) + "\n"
        for total, top_total in zip(totals, top_level)
    )
