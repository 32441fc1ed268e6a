"""CLI adapter – prints every accessor of the Clock Reader.

Usage:
    python -m time_now [--json]
    time-now [--json]                 (after pip install -e .)

Each line takes its own clock reading, so later lines are slightly ahead of
earlier ones.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from time_now.config import ConfigError, EnvSettingsLoader, TimeNowSettings
from time_now.kernel.errors import ClockBeforeEpochError
from time_now.observability.logging import LoggerFactory
from time_now.reader import ClockReader

ACCESSORS = (
    "now_as_secs",
    "now_as_secs_f32",
    "now_as_secs_f64",
    "now_as_millis",
    "now_as_micros",
    "now_as_nanos",
    "duration_since_epoch",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="time-now",
        description="Print the current time since the Unix epoch in several units.",
    )
    parser.add_argument("--json", action="store_true", help="emit a single JSON object")
    return parser


def collect(reader: ClockReader) -> dict[str, Any]:
    """Call every accessor on *reader*, in display order."""
    values: dict[str, Any] = {}
    for name in ACCESSORS:
        values[name] = getattr(reader, name)()
    return values


def _render_text(values: dict[str, Any], out: TextIO) -> None:
    width = max(len(name) for name in values)
    for name, value in values.items():
        out.write(f"time_now.{name.ljust(width)}: {value!r}\n")


def _render_json(values: dict[str, Any], out: TextIO) -> None:
    payload = dict(values)
    duration = payload.pop("duration_since_epoch")
    payload["duration_since_epoch"] = {"secs": duration.secs, "nanos": duration.nanos}
    out.write(json.dumps(payload) + "\n")


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    reader: ClockReader | None = None,
    out: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    if out is None:
        out = sys.stdout

    try:
        settings = EnvSettingsLoader().load(TimeNowSettings)
    except ConfigError as exc:
        sys.stderr.write(f"time-now: {exc.message}\n")
        return 2
    LoggerFactory.configure(settings.level, json=settings.json)

    try:
        values = collect(reader or ClockReader())
    except ClockBeforeEpochError:
        # Already logged by the reader.
        return 1

    if args.json:
        _render_json(values, out)
    else:
        _render_text(values, out)
    return 0
