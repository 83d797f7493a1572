"""Completion notifications for the Pomodoro timer."""

import logging
import platform
import subprocess
import sys
import threading
import time
from typing import Callable, Tuple

from .timer import Mode

logger = logging.getLogger(__name__)

PULSE_COUNT = 3
PULSE_SECONDS = 0.2
GAP_SECONDS = 0.15


def _send_bell() -> None:
    """Send terminal bell."""
    sys.stdout.write("\a")
    sys.stdout.flush()


def play_pulses(
    count: int = PULSE_COUNT,
    on: float = PULSE_SECONDS,
    gap: float = GAP_SECONDS,
    bell: Callable[[], None] = _send_bell,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Ring the bell ``count`` times, spaced by a pulse and a gap."""
    for i in range(count):
        bell()
        sleep(on)
        if i < count - 1:
            sleep(gap)


def _send_macos_notification(title: str, message: str) -> bool:
    """Send macOS notification via osascript.

    Returns:
        True if successful, False otherwise.
    """
    script = f'display notification "{message}" with title "{title}"'
    try:
        subprocess.run(
            ["osascript", "-e", script],
            capture_output=True,
            timeout=5,
        )
        return True
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        logger.debug("osascript unavailable", exc_info=True)
        return False


def _send_linux_notification(title: str, message: str) -> bool:
    """Send Linux notification via notify-send.

    Returns:
        True if successful, False otherwise.
    """
    try:
        subprocess.run(
            ["notify-send", title, message],
            capture_output=True,
            timeout=5,
        )
        return True
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        logger.debug("notify-send unavailable", exc_info=True)
        return False


def notify(
    title: str,
    message: str,
    bell: bool = True,
    ring: Callable[[], None] = _send_bell,
) -> None:
    """Send a notification.

    Sends a native notification where one is available, then rings the
    terminal bell. Fails silently if native notifications are not available.

    Args:
        title: Notification title.
        message: Notification message.
        bell: Whether to ring the terminal bell.
        ring: Emits a single bell pulse.
    """
    system = platform.system()
    if system == "Darwin":
        _send_macos_notification(title, message)
    elif system == "Linux":
        _send_linux_notification(title, message)
    # Windows and other platforms: bell only

    if bell:
        play_pulses(bell=ring)


def completion_message(finished: Mode) -> Tuple[str, str]:
    """Title and body announcing that ``finished`` ended."""
    if finished is Mode.FOCUS:
        return "Pomodoro Complete!", "Time for a break."
    return "Break Over", "Ready to focus?"


class CompletionNotifier:
    """Announces finished countdowns without blocking the caller.

    Each call hands the work to a daemon thread and returns immediately.
    """

    def __init__(
        self,
        enabled: bool = True,
        send: Callable[..., None] = notify,
        ring: Callable[[], None] = _send_bell,
    ) -> None:
        self.enabled = enabled
        self.ring = ring
        self._send = send

    def __call__(self, finished: Mode) -> None:
        if not self.enabled:
            return
        title, message = completion_message(finished)
        thread = threading.Thread(
            target=self._deliver,
            args=(title, message),
            name="pomotui-notify",
            daemon=True,
        )
        thread.start()

    def _deliver(self, title: str, message: str) -> None:
        try:
            self._send(title, message, ring=self.ring)
        except Exception:
            logger.warning("Notification failed", exc_info=True)
