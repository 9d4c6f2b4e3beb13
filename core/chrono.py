from PySide6.QtCore import QObject, QTimer, Signal


class RoundClock(QObject):
    """Once-per-second driver for TypingSession.tick()."""

    ticked = Signal(int)       # seconds left
    timeUp = Signal(object)    # final RoundMetrics

    def __init__(self, session, interval_ms: int = 1000, parent=None):
        super().__init__(parent)
        self.session = session
        self._tick = QTimer(self)
        self._tick.setInterval(interval_ms)
        self._tick.timeout.connect(self._on_tick)

    def is_active(self) -> bool:
        return self._tick.isActive()

    def start(self):
        if self._tick.isActive() or not self.session.is_running:
            return
        self._tick.start()

    def stop(self):
        if self._tick.isActive():
            self._tick.stop()

    def _on_tick(self):
        if not self.session.is_running:
            self.stop()
            return
        ended = self.session.tick()
        self.ticked.emit(self.session.seconds_left)
        if ended:
            self.stop()
            self.timeUp.emit(self.session.metrics)
