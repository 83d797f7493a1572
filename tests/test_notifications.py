"""Unit tests for notifications.py."""

import threading

from pomotui import notifications
from pomotui.notifications import (
    CompletionNotifier,
    completion_message,
    notify,
    play_pulses,
)
from pomotui.timer import Mode


class TestPulses:
    """Test the bell pattern."""

    def test_three_pulses(self):
        """Three bells with gaps only between them."""
        events = []
        play_pulses(
            bell=lambda: events.append("bell"),
            sleep=lambda secs: events.append(secs),
        )
        assert events == ["bell", 0.2, 0.15, "bell", 0.2, 0.15, "bell", 0.2]


class TestNotify:
    """Test native notification dispatch."""

    def test_linux_uses_notify_send(self, monkeypatch):
        """Linux notifications go through notify-send."""
        calls = []
        monkeypatch.setattr(notifications.platform, "system", lambda: "Linux")
        monkeypatch.setattr(
            notifications,
            "_send_linux_notification",
            lambda title, message: calls.append((title, message)) or True,
        )
        rings = []

        notify("Title", "Body", ring=lambda: rings.append(1))

        assert calls == [("Title", "Body")]
        assert len(rings) == 3

    def test_missing_binary_is_silent(self, monkeypatch):
        """A missing notify-send does not raise."""
        def missing(*args, **kwargs):
            raise FileNotFoundError("notify-send")

        monkeypatch.setattr(notifications.subprocess, "run", missing)
        assert notifications._send_linux_notification("t", "m") is False
        assert notifications._send_macos_notification("t", "m") is False

    def test_bell_disabled(self, monkeypatch):
        """bell=False skips the pulses."""
        monkeypatch.setattr(notifications.platform, "system", lambda: "Windows")
        rings = []
        notify("t", "m", bell=False, ring=lambda: rings.append(1))
        assert rings == []


class TestCompletionMessage:
    """Test message text."""

    def test_focus_finished(self):
        assert completion_message(Mode.FOCUS) == ("Pomodoro Complete!", "Time for a break.")

    def test_break_finished(self):
        assert completion_message(Mode.BREAK) == ("Break Over", "Ready to focus?")


class TestCompletionNotifier:
    """Test the non-blocking notifier."""

    def test_delivers_in_background(self):
        """The send happens on another thread."""
        done = threading.Event()
        seen = []

        def send(title, message, ring):
            seen.append((title, threading.current_thread().name))
            done.set()

        notifier = CompletionNotifier(send=send)
        notifier(Mode.FOCUS)
        assert done.wait(2)
        assert seen == [("Pomodoro Complete!", "pomotui-notify")]

    def test_disabled(self):
        """A disabled notifier sends nothing."""
        seen = []
        notifier = CompletionNotifier(enabled=False, send=lambda *a, **k: seen.append(a))
        notifier(Mode.BREAK)
        assert seen == []

    def test_failures_are_swallowed(self):
        """Send errors stay inside the worker thread."""
        done = threading.Event()

        def send(title, message, ring):
            done.set()
            raise OSError("no audio device")

        notifier = CompletionNotifier(send=send)
        notifier._deliver("t", "m")
        assert done.is_set()
