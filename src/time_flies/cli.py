# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Time Flies (tf): budget focus time from a weekly activity log.

Usage::

    tf tots                      # weekly bar chart
    tf tots -p monthly -f eng    # monthly, zoomed into cat=eng
    tf tots --json               # totals as JSON
    tf tidy                      # reformat the log
    tf todo                      # open todo entries
    tf json                      # the parsed log as JSON
    tf edit                      # open the log in $EDITOR
"""

from __future__ import annotations

import argparse
import logging
import os
import shlex
import subprocess
import sys
from typing import Sequence

from time_flies.budget.focus import focus
from time_flies.budget.period import get_totals
from time_flies.config import AppConfig, load_config, parse_period
from time_flies.errors import ConfigurationError, TimeFliesError
from time_flies.export import log_to_json, totals_to_json
from time_flies.log.merge import read_logs
from time_flies.tidy import format_log, format_todo
from time_flies.view import render_totals

logger = logging.getLogger("time_flies.cli")


def _split_keys(value: str) -> list[str]:
    return [key for key in value.split(",") if key]


def _apply_overrides(config: AppConfig, arguments: argparse.Namespace) -> AppConfig:
    budget_update: dict[str, object] = {}
    view_update: dict[str, object] = {}
    file_update: dict[str, object] = {}

    if getattr(arguments, "period", None):
        budget_update["aggregation_period"] = parse_period(arguments.period)
    if getattr(arguments, "group", None):
        budget_update["label_grouping"] = list(arguments.group)
    if getattr(arguments, "focus", None):
        view_update["focus_group"] = arguments.focus
    if arguments.log:
        file_update["log_file"] = arguments.log

    return config.model_copy(
        update={
            "budget": config.budget.model_copy(update=budget_update),
            "view": config.view.model_copy(update=view_update),
            "file": config.file.model_copy(update=file_update),
        }
    )


def _run_totals(config: AppConfig, arguments: argparse.Namespace) -> int:
    log = read_logs(config.file)
    totals = sorted(get_totals(log, config.budget), key=lambda total: total.date)
    if arguments.json:
        if config.view.focus_group:
            totals = focus(totals, config.view.focus_group)
        print(totals_to_json(totals))
        return 0
    hours_per_day = config.budget.resolve().hours_per_day
    print(render_totals(totals, config.view, hours_per_day=hours_per_day))
    return 0


def _run_tidy(config: AppConfig, arguments: argparse.Namespace) -> int:
    print(format_log(read_logs(config.file)), end="")
    return 0


def _run_todo(config: AppConfig, arguments: argparse.Namespace) -> int:
    print(format_todo(read_logs(config.file)), end="")
    return 0


def _run_json(config: AppConfig, arguments: argparse.Namespace) -> int:
    print(log_to_json(read_logs(config.file)))
    return 0


def _run_edit(config: AppConfig, arguments: argparse.Namespace) -> int:
    editor = os.environ.get("EDITOR", "")
    if not editor:
        raise ConfigurationError("No EDITOR set.")
    command = [*shlex.split(editor), str(config.file.get_log_file())]
    logger.debug("launching editor", extra={"command": command})
    return subprocess.run(command, check=False).returncode


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tf",
        description="Time Flies (tf) is a tool for budgeting focus time.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Config file (JSON). Defaults to ~/.tf/config when present.",
    )
    parser.add_argument(
        "-l",
        "--log",
        default=None,
        help="Log file. Defaults to ~/.tf/log.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Emit debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    totals_parser = subparsers.add_parser("tots", help="Output focus totals.")
    totals_parser.add_argument(
        "-p",
        "--period",
        default=None,
        help="Aggregation period: Weekly, Monthly or Quarterly.",
    )
    totals_parser.add_argument(
        "-g",
        "--group",
        type=_split_keys,
        action="extend",
        default=None,
        help="Group entries by these comma-separated label keys, in order.",
    )
    totals_parser.add_argument(
        "-f",
        "--focus",
        default=None,
        help="Focus on the children of one top-level label value.",
    )
    totals_parser.add_argument(
        "--json",
        action="store_true",
        help="Print totals as JSON instead of a bar chart.",
    )
    totals_parser.set_defaults(handler=_run_totals)

    subparsers.add_parser("tidy", help="Reformat the log to spark joy.").set_defaults(
        handler=_run_tidy
    )
    subparsers.add_parser("todo", help="Output open todo entries.").set_defaults(
        handler=_run_todo
    )
    subparsers.add_parser("json", help="Output the log in JSON format.").set_defaults(
        handler=_run_json
    )
    subparsers.add_parser("edit", help="Edit the log file.").set_defaults(
        handler=_run_edit
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    arguments = _build_argument_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if arguments.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _apply_overrides(load_config(arguments.config), arguments)
        return arguments.handler(config, arguments)
    except TimeFliesError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
