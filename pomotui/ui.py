"""Textual-based UI for the Pomodoro timer."""

import time
from typing import Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Static

from .digits import render_big_time
from .engine import POLL_INTERVAL, EventLoop
from .notifications import CompletionNotifier
from .timer import Mode, Snapshot

FLASH_SECONDS = 2.0

MODE_COLORS = {
    Mode.FOCUS: "green",
    Mode.BREAK: "yellow",
}
MODE_ICONS = {
    Mode.FOCUS: "⚡",
    Mode.BREAK: "☕",
}
INACTIVE_STYLE = "bright_black"


def footer_text(snapshot: Snapshot) -> str:
    """Settings and controls line shown under the panels."""
    action = "Pause" if snapshot.running else "Resume"
    return (
        f"Cycles: {snapshot.cycles_completed} | "
        f"Focus: {snapshot.focus_minutes}min | Break: {snapshot.break_minutes}min | "
        f"f/F: focus +/- | b/B: break +/- | "
        f"SPACE: {action} | R: Reset | Q: Quit"
    )


class ModePanel(Static):
    """Big digit countdown for one mode."""

    def __init__(self, mode: Mode, **kwargs) -> None:
        super().__init__(**kwargs)
        self.panel_mode = mode

    def show(self, snapshot: Snapshot) -> None:
        active = snapshot.mode is self.panel_mode
        if active:
            seconds = snapshot.remaining_seconds
            style = f"bold {MODE_COLORS[self.panel_mode]}"
            title = f"{self.panel_mode.label.upper()} TIME {MODE_ICONS[self.panel_mode]}"
        else:
            seconds = snapshot.total_of(self.panel_mode)
            style = INACTIVE_STYLE
            title = f"{self.panel_mode.label.upper()} TIME"

        self.border_title = title
        self.set_class(active, "active")
        self.set_class(not active, "inactive")
        self.update(Text(render_big_time(seconds), style=style, justify="center"))


class PomodoroApp(App):
    """Pomodoro timer application.

    The app is the event source for an EventLoop: key presses and a short
    interval timer are forwarded to it, and it repaints from the snapshots
    the loop hands back.
    """

    CSS_PATH = "pomotui.tcss"
    TITLE = "pomotui"

    def __init__(
        self,
        loop: EventLoop,
        notifier: Optional[CompletionNotifier] = None,
    ) -> None:
        super().__init__()
        self.engine = loop
        self.notifier = notifier
        self._flash_until = 0.0
        self._tick_timer: Timer | None = None
        self._last_snapshot: Snapshot = loop.snapshot()

    def compose(self) -> ComposeResult:
        with Vertical(id="main"):
            yield Static(id="header")
            yield ModePanel(Mode.FOCUS, id="focus-panel")
            yield ModePanel(Mode.BREAK, id="break-panel")
            yield Static(id="controls")

    def on_mount(self) -> None:
        self.engine.on_render = self.render_snapshot
        self.engine.on_complete = self._on_complete
        if self.notifier is not None:
            self.notifier.ring = self._ring
        self.render_snapshot(self.engine.snapshot())
        self._tick_timer = self.set_interval(POLL_INTERVAL, self._tick)

    def on_key(self, event: events.Key) -> None:
        key = "q" if event.key == "ctrl+c" else (event.character or event.key)
        if key is None:
            return
        event.stop()
        if not self.engine.handle_key(key):
            self.exit(0)

    def _tick(self) -> None:
        """Called every poll interval."""
        self.engine.handle_timeout()

    def _on_complete(self, finished: Mode) -> None:
        self._flash_until = time.monotonic() + FLASH_SECONDS
        self._paint_header()
        if self.notifier is not None:
            self.notifier(finished)

    def _ring(self) -> None:
        self.call_from_thread(self.bell)

    @property
    def flashing(self) -> bool:
        """True while the completion flash is showing."""
        return time.monotonic() < self._flash_until

    def render_snapshot(self, snapshot: Snapshot) -> None:
        """Update all display elements."""
        self._last_snapshot = snapshot
        self.query_one("#focus-panel", ModePanel).show(snapshot)
        self.query_one("#break-panel", ModePanel).show(snapshot)
        self.query_one("#controls", Static).update(footer_text(snapshot))
        self._paint_header()

    def _paint_header(self) -> None:
        header = self.query_one("#header", Static)
        if self.flashing:
            header.update(Text("🔔 NOTIFICATION! 🔔", style="bold yellow", justify="center"))
        else:
            label = "🍅 POMODORO TIMER 🍅"
            if not self._last_snapshot.running:
                label += "  (paused)"
            header.update(Text(label, style="bold red", justify="center"))


def run_ui(loop: EventLoop, notifier: Optional[CompletionNotifier] = None) -> int:
    """Run the Pomodoro UI.

    Args:
        loop: The event loop owning the timer.
        notifier: Receives finished modes; None disables notifications.

    Returns:
        The app's exit code.
    """
    app = PomodoroApp(loop, notifier)
    result = app.run()
    if app.return_code:
        return app.return_code
    return result if isinstance(result, int) else 0
