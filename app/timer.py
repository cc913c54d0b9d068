from datetime import timedelta

from PySide6.QtCore import QElapsedTimer


class HighResTimer:
    """Monotonic stopwatch. ``start`` only takes effect the first time it is called."""

    def __init__(self):
        self.t = QElapsedTimer()

    @property
    def is_started(self) -> bool:
        return self.t.isValid()

    def start(self):
        if not self.is_started:
            self.t.start()

    def elapsed(self) -> timedelta:
        if not self.is_started:
            return timedelta(0)
        return timedelta(microseconds=max(0, self.t.nsecsElapsed()) // 1000)
