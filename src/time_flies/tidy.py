# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Canonical formatting of a log: newest week first, labels aligned in one
column. The output parses back to the same weeks.
"""

from __future__ import annotations

from time_flies.types import Entry, Log, Week

DISPLAY_DATE_FORMAT = "%b %d %Y"
TODO_PREFIX = "# "
DONE_PREFIX = "[x] "

# Text starting with one of these would not parse back as a done entry.
_MARKERS = ("#", "[ ]", "[x]")


def format_labels(labels: dict[str, str]) -> str:
    return " ".join(f"{key}={labels[key]}" for key in sorted(labels))


def _done_text(entry: Entry) -> str:
    if entry.line.startswith(_MARKERS):
        return DONE_PREFIX + entry.line
    return entry.line


def _format_entry(text: str, entry: Entry, width: int) -> str:
    if not entry.labels:
        return text
    return f"{text.ljust(width)}  ## {format_labels(entry.labels)}"


def format_week(week: Week) -> str:
    lines = [f"Date: {week.date.strftime(DISPLAY_DATE_FORMAT)}"]
    for key, values in week.header.items():
        lines.extend(f"{key}: {value}" for value in values)
    lines.append("")

    texts = [_done_text(entry) for entry in week.done]
    texts += [TODO_PREFIX + entry.line for entry in week.todo]
    width = max((len(text) for text in texts), default=0)
    for text, entry in zip(texts, [*week.done, *week.todo]):
        lines.append(_format_entry(text, entry, width))

    return "\n".join(lines) + "\n\n"


def format_log(log: Log) -> str:
    """Format ``log`` newest week first, weeks separated by ``%%`` lines."""
    weeks = sorted(log, key=lambda week: week.date, reverse=True)
    return "%%\n".join(format_week(week) for week in weeks)


def format_todo(log: Log) -> str:
    """List open todo entries under the date of each week that has any."""
    lines: list[str] = []
    for week in log:
        if not week.todo:
            continue
        lines.append(week.date.strftime(DISPLAY_DATE_FORMAT))
        lines.extend(f"[ ] {entry.line}" for entry in week.todo)
    return "".join(f"{line}\n" for line in lines)
