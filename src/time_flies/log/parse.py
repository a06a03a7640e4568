# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Parser for the record-jar weekly log format.

Weeks are separated by ``%%`` lines. Each week starts with RFC 822 style
headers, of which ``Date`` is required, followed by a blank line and one
entry per line::

    Date: Jan 02 2006
    Focus: shipping

    wrote the design doc        ##cat=eng sub=docs f=3h
    [x] reviewed pull requests  ##cat=eng sub=review
    # plan next quarter         ##cat=mgmt

Lines starting with ``[ ]`` or ``#`` are todo entries; everything else,
including ``[x]`` lines, is done. Labels follow the last ``##`` as
space-separated ``key=value`` pairs.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from email.parser import Parser
from pathlib import Path

from time_flies.errors import LogParseError
from time_flies.types import Entry, Log, Week

logger = logging.getLogger("time_flies.log")

DATE_FORMATS: tuple[str, ...] = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%b %d %Y",
)

_SEPARATOR_RE = re.compile(r"^%%[ \t]*(?:\n|$)", re.MULTILINE)
_WHITESPACE_RE = re.compile(r"\s+")


def dewhite(text: str) -> str:
    """Collapse runs of whitespace and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def parse_date(text: str) -> dt.date:
    """
    Parse a week date in any of :data:`DATE_FORMATS`.

    Raises:
        LogParseError: If no format matches.
    """
    for date_format in DATE_FORMATS:
        try:
            return dt.datetime.strptime(text.strip(), date_format).date()
        except ValueError:
            continue
    raise LogParseError(f"Could not parse date: {text!r}")


def parse_labels(text: str) -> dict[str, str]:
    """
    Parse space-separated ``key=value`` pairs.

    Raises:
        LogParseError: If a pair does not contain exactly one ``=``.
    """
    labels: dict[str, str] = {}
    for pair in dewhite(text).split(" "):
        if not pair:
            continue
        parts = pair.split("=")
        if len(parts) != 2:
            raise LogParseError(f"Malformed 'k=v' label: {pair!r}")
        labels[parts[0]] = parts[1]
    return labels


def _split_done(line: str) -> tuple[bool, str]:
    if line.startswith("[ ]"):
        return False, line[3:].strip()
    if line.startswith("[x]"):
        return True, line[3:].strip()
    if line.startswith("#"):
        return False, line[1:].strip()
    return True, line


def parse_entry(line: str) -> tuple[Entry, bool]:
    """
    Parse one body line.

    Returns:
        The entry and whether it is done (as opposed to todo).

    Raises:
        LogParseError: If the labels are malformed.
    """
    done, text = _split_done(dewhite(line))
    head, separator, tail = text.rpartition("##")
    if not separator:
        return Entry(line=text, labels={}), done
    return Entry(line=dewhite(head), labels=parse_labels(tail)), done


def parse_week(record: str) -> Week:
    """
    Parse one ``%%``-delimited record.

    Raises:
        LogParseError: If the ``Date`` header is missing, repeated or
            unparsable, or an entry is malformed.
    """
    message = Parser().parsestr(record)
    dates = message.get_all("Date") or []
    if not dates:
        raise LogParseError(f"Missing required 'Date' header:\n{record}")
    if len(dates) > 1:
        raise LogParseError(f"Duplicate 'Date' header:\n{record}")

    header: dict[str, list[str]] = {}
    for key, value in message.items():
        if key.lower() == "date":
            continue
        header.setdefault(key, []).append(dewhite(value))

    payload = message.get_payload()
    body = payload if isinstance(payload, str) else ""
    done: list[Entry] = []
    todo: list[Entry] = []
    for line in body.splitlines():
        if not dewhite(line):
            continue
        entry, is_done = parse_entry(line)
        (done if is_done else todo).append(entry)

    return Week(date=parse_date(dates[0]), header=header, done=done, todo=todo)


def parse_log(text: str) -> Log:
    """
    Parse a whole log file.

    Blank records, such as one after a trailing ``%%``, are skipped.

    Raises:
        LogParseError: If any record is malformed.
    """
    records = [record.lstrip("\n") for record in _SEPARATOR_RE.split(text)]
    log = [parse_week(record) for record in records if record.strip()]
    logger.debug("parsed log", extra={"weeks": len(log)})
    return log


def read_log(path: str | Path) -> Log:
    """
    Read and parse a log file.

    Raises:
        OSError: If the file cannot be read.
        LogParseError: If any record is malformed.
    """
    log_path = Path(path)
    logger.debug("reading log %s", log_path)
    return parse_log(log_path.read_text(encoding="utf-8"))
