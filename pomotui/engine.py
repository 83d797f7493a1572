"""Event loop driving the timer from key presses and elapsed time."""

import logging
import time
from enum import Enum, auto
from typing import Callable, Dict, Optional

from .timer import Mode, PomodoroTimer, Snapshot, TickResult

logger = logging.getLogger(__name__)

# Seconds to wait for a key before ticking.
POLL_INTERVAL = 0.2
ADJUST_STEP = 60
MIN_DURATION = 60


class Command(Enum):
    """Operations a key press can request."""
    TOGGLE = auto()
    RESET = auto()
    QUIT = auto()
    FOCUS_UP = auto()
    FOCUS_DOWN = auto()
    BREAK_UP = auto()
    BREAK_DOWN = auto()


class LoopState(Enum):
    """Lifecycle of the event loop."""
    ACTIVE = auto()
    TERMINATED = auto()


KEYMAP: Dict[str, Command] = {
    " ": Command.TOGGLE,
    "space": Command.TOGGLE,
    "r": Command.RESET,
    "R": Command.RESET,
    "q": Command.QUIT,
    "Q": Command.QUIT,
    "f": Command.FOCUS_UP,
    "F": Command.FOCUS_DOWN,
    "b": Command.BREAK_UP,
    "B": Command.BREAK_DOWN,
}

_ADJUSTMENTS = {
    Command.FOCUS_UP: (Mode.FOCUS, ADJUST_STEP),
    Command.FOCUS_DOWN: (Mode.FOCUS, -ADJUST_STEP),
    Command.BREAK_UP: (Mode.BREAK, ADJUST_STEP),
    Command.BREAK_DOWN: (Mode.BREAK, -ADJUST_STEP),
}

RenderCallback = Callable[[Snapshot], None]
CompleteCallback = Callable[[Mode], None]


class EventLoop:
    """Single owner and mutator of a PomodoroTimer.

    Each iteration handles exactly one event (a key or an elapsed wait),
    applies at most one timer operation, then hands a fresh snapshot to the
    render callback. Finished countdowns are also reported to the completion
    callback. Callback failures are logged and never stop the loop.
    """

    def __init__(
        self,
        timer: PomodoroTimer,
        on_render: Optional[RenderCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._timer = timer
        self.on_render = on_render
        self.on_complete = on_complete
        self._clock = clock
        self._last_tick = clock()
        # Running time not yet charged when the timer was paused.
        self._carry = 0.0
        self.state = LoopState.ACTIVE

    @property
    def active(self) -> bool:
        """True until quit is requested."""
        return self.state is LoopState.ACTIVE

    def snapshot(self) -> Snapshot:
        """Current timer state, for an initial paint."""
        return self._timer.snapshot()

    def handle_key(self, key: str) -> bool:
        """Apply the operation bound to ``key``.

        Returns:
            False once the loop has been asked to quit, True otherwise.
        """
        if not self.active:
            return False

        command = KEYMAP.get(key)
        if command is Command.QUIT:
            logger.info("Quit requested")
            self.state = LoopState.TERMINATED
            return False

        if command is Command.TOGGLE:
            self._timer.toggle_pause()
            now = self._clock()
            if self._timer.running:
                # Paused time is never charged; the carry is.
                self._last_tick = now - self._carry
                self._carry = 0.0
            else:
                self._carry = now - self._last_tick
            logger.info("%s", "Resumed" if self._timer.running else "Paused")
        elif command is Command.RESET:
            self._timer.reset()
            self._last_tick = self._clock()
            self._carry = 0.0
            logger.info("Reset %s", self._timer.mode.label)
        elif command in _ADJUSTMENTS:
            mode, delta = _ADJUSTMENTS[command]
            total = self._timer.adjust_duration(mode, delta, MIN_DURATION)
            logger.info("%s duration set to %d min", mode.label, total // 60)
        else:
            logger.debug("Ignoring unbound key %r", key)

        self._render()
        return True

    def handle_timeout(self) -> bool:
        """Advance the timer by the wall-clock time since the last tick."""
        if not self.active:
            return False

        now = self._clock()
        elapsed = now - self._last_tick
        self._last_tick = now

        result = self._timer.tick(elapsed)
        self._render()
        if result.completed:
            self._complete(result)
        return True

    def run(self, poll: Callable[[float], Optional[str]]) -> int:
        """Run until quit.

        Args:
            poll: Waits up to the given number of seconds for a key press and
                returns it, or returns None when the wait elapsed.

        Returns:
            The process exit code.
        """
        self._last_tick = self._clock()
        self._render()
        while self.active:
            key = poll(POLL_INTERVAL)
            if key is None:
                self.handle_timeout()
            else:
                self.handle_key(key)
        return 0

    def _render(self) -> None:
        if self.on_render is None:
            return
        try:
            self.on_render(self._timer.snapshot())
        except Exception:
            logger.exception("Render callback failed")

    def _complete(self, result: TickResult) -> None:
        if self.on_complete is None:
            return
        try:
            self.on_complete(result.finished_mode)
        except Exception:
            logger.exception("Completion callback failed")
