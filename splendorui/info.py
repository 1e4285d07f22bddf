"""The status bar that shows the elapsed game time and the turn number."""

from __future__ import annotations

import time
from typing import Optional

from splendorui.panel import Panel

PADDING = 10


def format_elapsed(seconds: float) -> str:
    """Format a duration in seconds as ``HH:MM:SS``, truncating fractions."""
    if seconds < 0:
        raise ValueError(f"elapsed time cannot be negative: {seconds}")
    hours = int(seconds / 3600)
    minutes = int(seconds / 60) % 60
    secs = int(seconds) % 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class InfoPanel(Panel):
    """A panel holding a running game timer and a turn counter."""

    def __init__(
        self,
        position: tuple[float, float] = (0.0, 0.0),
        size: tuple[float, float] = (1024.0, 100.0),
        active: bool = True,
    ) -> None:
        super().__init__("InfoPanel", size, position, active)
        self.turn = 0
        self.running = False
        self.start_time: Optional[float] = None
        self.current_time: Optional[float] = None
        self.time_title = "Time: "
        self.time_label = "00:00:00"
        self.turn_title = "Turn: "
        self.turn_label = "0"
        for label in (self.time_title, self.time_label, self.turn_title, self.turn_label):
            self.add_drawable(label)

    def increment_turn(self) -> None:
        self.turn += 1
        self.turn_label = str(self.turn)

    def start_timer(self, now: Optional[float] = None) -> None:
        """Start counting from ``now`` (seconds since the epoch by default)."""
        self.running = True
        self.start_time = time.time() if now is None else float(now)

    def stop_timer(self) -> None:
        self.running = False

    def update_time(self, now: Optional[float] = None) -> None:
        """Refresh the time label while the timer runs."""
        if not self.running or self.start_time is None:
            return
        self.current_time = time.time() if now is None else float(now)
        self.time_label = format_elapsed(self.current_time - self.start_time)