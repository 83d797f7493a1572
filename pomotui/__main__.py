"""Entry point for python -m pomotui."""

import sys
from typing import Optional, Sequence

from .config import ConfigError, load_settings
from .engine import EventLoop
from .log import get_logger
from .notifications import CompletionNotifier
from .timer import PomodoroTimer
from .ui import run_ui

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    try:
        settings = load_settings(argv)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger = get_logger(debug=settings.debug)
    logger.info(
        "Starting: focus=%dmin break=%dmin notify=%s paused=%s",
        settings.focus_mins,
        settings.break_mins,
        settings.notify,
        settings.start_paused,
    )

    timer = PomodoroTimer(
        focus_mins=settings.focus_mins,
        break_mins=settings.break_mins,
        start_paused=settings.start_paused,
    )
    loop = EventLoop(timer)
    notifier = CompletionNotifier(enabled=settings.notify)

    try:
        code = run_ui(loop, notifier)
    except KeyboardInterrupt:
        code = EXIT_OK

    logger.info("Exiting after %d cycles", timer.cycles_completed)
    return code


if __name__ == "__main__":
    sys.exit(main())
