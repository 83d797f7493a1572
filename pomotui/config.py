"""Startup configuration for the Pomodoro timer."""

import argparse
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

DEFAULT_FOCUS_MINS = 25
DEFAULT_BREAK_MINS = 5

FOCUS_ENV = "POMOTUI_FOCUS"
BREAK_ENV = "POMOTUI_BREAK"


class ConfigError(ValueError):
    """Raised for startup values the timer cannot run with."""


@dataclass
class Settings:
    """Validated startup settings."""
    focus_mins: int = DEFAULT_FOCUS_MINS
    break_mins: int = DEFAULT_BREAK_MINS
    notify: bool = True
    start_paused: bool = False
    debug: bool = False


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="pomotui",
        description="Terminal Pomodoro timer with big digits",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Controls:
  Space    Pause/Resume
  r        Reset current countdown
  f / F    Focus duration +1 / -1 minute
  b / B    Break duration +1 / -1 minute
  q        Quit

Environment:
  {FOCUS_ENV}, {BREAK_ENV}   default durations in minutes

Examples:
  pomotui                  # 25 minute focus, 5 minute break
  pomotui -f 50 -b 10      # 50/10 split
  pomotui --paused         # wait for Space before counting down
""",
    )

    parser.add_argument(
        "-f",
        "--focus",
        type=int,
        default=None,
        metavar="MINS",
        help=f"Focus duration in minutes (default: {DEFAULT_FOCUS_MINS})",
    )
    parser.add_argument(
        "-b",
        "--break",
        type=int,
        default=None,
        dest="break_mins",
        metavar="MINS",
        help=f"Break duration in minutes (default: {DEFAULT_BREAK_MINS})",
    )
    parser.add_argument(
        "--paused",
        action="store_true",
        help="Start paused",
    )
    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Disable notifications (bell and system)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write debug records to the log file",
    )
    return parser


def _env_minutes(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a whole number of minutes, got {raw!r}")


def _check_minutes(label: str, value: int) -> int:
    if value < 1:
        raise ConfigError(f"{label} duration must be at least 1 minute, got {value}")
    return value


def load_settings(
    argv: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Parse and validate startup settings.

    Command line flags win over environment variables, which win over the
    built-in defaults.

    Raises:
        ConfigError: If a duration is non-positive or unparsable.
    """
    env = os.environ if env is None else env
    args = build_parser().parse_args(argv)

    focus_mins = args.focus
    if focus_mins is None:
        focus_mins = _env_minutes(env, FOCUS_ENV, DEFAULT_FOCUS_MINS)
    break_mins = args.break_mins
    if break_mins is None:
        break_mins = _env_minutes(env, BREAK_ENV, DEFAULT_BREAK_MINS)

    return Settings(
        focus_mins=_check_minutes("Focus", focus_mins),
        break_mins=_check_minutes("Break", break_mins),
        notify=not args.no_notify,
        start_paused=args.paused,
        debug=args.debug,
    )
