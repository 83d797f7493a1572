"""Pure logic for the Pomodoro timer state machine."""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

MIN_SECONDS = 1


class Mode(Enum):
    """Timer mode types."""
    FOCUS = "focus"
    BREAK = "break"

    @property
    def label(self) -> str:
        """Human-readable mode label."""
        return "Focus" if self is Mode.FOCUS else "Break"

    @property
    def other(self) -> "Mode":
        """The mode entered when this one finishes."""
        return Mode.BREAK if self is Mode.FOCUS else Mode.FOCUS


@dataclass(frozen=True)
class TickResult:
    """Outcome of a single tick.

    ``finished_mode`` is set only when the tick completed a countdown.
    """
    finished_mode: Optional[Mode] = None

    @property
    def completed(self) -> bool:
        """True if the tick finished a countdown."""
        return self.finished_mode is not None


RUNNING = TickResult()


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of timer state for presentation."""
    mode: Mode
    remaining: float
    focus_total: int
    break_total: int
    running: bool
    cycles_completed: int

    def total_of(self, mode: Mode) -> int:
        """Configured duration in seconds for a given mode."""
        return self.focus_total if mode is Mode.FOCUS else self.break_total

    @property
    def remaining_seconds(self) -> int:
        """Whole seconds remaining, rounded up."""
        return math.ceil(self.remaining)

    @property
    def total_seconds(self) -> int:
        """Total duration of the active mode in seconds."""
        return self.total_of(self.mode)

    @property
    def focus_minutes(self) -> int:
        """Focus duration in whole minutes."""
        return self.focus_total // 60

    @property
    def break_minutes(self) -> int:
        """Break duration in whole minutes."""
        return self.break_total // 60

    @property
    def progress(self) -> float:
        """Progress through the active mode (0.0 to 1.0)."""
        return 1.0 - (self.remaining / self.total_seconds)


class PomodoroTimer:
    """Pomodoro timer state machine.

    Manages the focus/break countdown, pause state, live duration
    adjustments and mode transitions. Every operation is total: out of
    range inputs are clamped instead of rejected.
    """

    def __init__(
        self,
        focus_mins: int = 25,
        break_mins: int = 5,
        start_paused: bool = False,
    ):
        """Initialize the timer.

        Args:
            focus_mins: Duration of the focus mode in minutes.
            break_mins: Duration of the break mode in minutes.
            start_paused: Start in the paused state instead of running.
        """
        self._focus_total = max(focus_mins * 60, MIN_SECONDS)
        self._break_total = max(break_mins * 60, MIN_SECONDS)
        self._mode = Mode.FOCUS
        self._remaining: float = self._focus_total
        self._running = not start_paused
        self._cycles_completed = 0

    @classmethod
    def from_seconds(
        cls, focus_secs: int, break_secs: int, start_paused: bool = False
    ) -> "PomodoroTimer":
        """Build a timer from durations given in seconds."""
        timer = cls(start_paused=start_paused)
        timer._focus_total = max(int(focus_secs), MIN_SECONDS)
        timer._break_total = max(int(break_secs), MIN_SECONDS)
        timer._remaining = timer._focus_total
        return timer

    @property
    def mode(self) -> Mode:
        """Current mode."""
        return self._mode

    @property
    def remaining(self) -> float:
        """Seconds remaining in the current mode."""
        return self._remaining

    @property
    def running(self) -> bool:
        """True unless paused."""
        return self._running

    @property
    def cycles_completed(self) -> int:
        """Number of focus periods finished so far."""
        return self._cycles_completed

    @property
    def focus_total(self) -> int:
        """Configured focus duration in seconds."""
        return self._focus_total

    @property
    def break_total(self) -> int:
        """Configured break duration in seconds."""
        return self._break_total

    def total_of(self, mode: Mode) -> int:
        """Configured duration in seconds for a given mode."""
        return self._focus_total if mode is Mode.FOCUS else self._break_total

    def _set_total(self, mode: Mode, seconds: int) -> None:
        if mode is Mode.FOCUS:
            self._focus_total = seconds
        else:
            self._break_total = seconds

    def toggle_pause(self) -> None:
        """Toggle between running and paused."""
        self._running = not self._running

    def reset(self) -> None:
        """Restart the current mode's countdown at its full duration."""
        self._remaining = self.total_of(self._mode)

    def adjust_duration(self, mode: Mode, delta: int, minimum: int) -> int:
        """Change the configured duration of ``mode`` by ``delta`` seconds.

        The new total never drops below ``minimum``. When ``mode`` is active,
        the remaining time is capped at the new total but otherwise kept, so
        elapsed progress survives the change. Never triggers a transition.

        Returns:
            The new total in seconds.
        """
        new_total = max(self.total_of(mode) + delta, minimum, MIN_SECONDS)
        self._set_total(mode, new_total)
        if mode is self._mode:
            self._remaining = min(self._remaining, new_total)
        return new_total

    def _switch_mode(self) -> Mode:
        """Enter the other mode. Returns the mode that just finished."""
        old_mode = self._mode
        if old_mode is Mode.FOCUS:
            self._cycles_completed += 1
        self._mode = old_mode.other
        self._remaining = self.total_of(self._mode)
        logger.info(
            "%s finished, %s started (cycles=%d)",
            old_mode.label,
            self._mode.label,
            self._cycles_completed,
        )
        return old_mode

    def tick(self, elapsed: float) -> TickResult:
        """Advance the countdown by ``elapsed`` seconds if running.

        At most one transition happens per call; any elapsed time past the
        end of the current countdown is dropped.

        Returns:
            A result carrying the finished mode, or ``RUNNING``.
        """
        if not self._running or elapsed <= 0:
            return RUNNING

        self._remaining = max(self._remaining - elapsed, 0)

        if self._remaining == 0:
            return TickResult(finished_mode=self._switch_mode())

        return RUNNING

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the current state."""
        return Snapshot(
            mode=self._mode,
            remaining=self._remaining,
            focus_total=self._focus_total,
            break_total=self._break_total,
            running=self._running,
            cycles_completed=self._cycles_completed,
        )
