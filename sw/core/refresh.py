from datetime import datetime
from PySide6.QtCore import QObject, QTimer, Signal
from sw.common.logger import log
from sw.core.registry import SessionRegistry

TICK_INTERVAL_MS = 1000

# Drives the once-a-second refresh of a SessionRegistry. The QTimer fires on the thread that owns this object (the
# GUI thread), so a tick can never interleave with rows being added or removed there.
class RefreshLoop(QObject):

    # Emitted after every tick with the `now` that every record was evaluated against
    ticked = Signal(datetime)

    def __init__(self, registry: SessionRegistry, clock=datetime.now, parent=None):
        super().__init__(parent)
        self.registry = registry
        self._clock = clock
        self._tick_n = 0
        self._timer = QTimer(self)
        self._timer.setInterval(TICK_INTERVAL_MS)
        self._timer.timeout.connect(self.on_tick)

    @property
    def running(self):
        return self._timer.isActive()

    @property
    def interval_ms(self):
        return self._timer.interval()

    @property
    def tick_count(self):
        return self._tick_n

    # Starts ticking. Calling this while already running does nothing, so the interval is never restarted.
    def start(self):
        if self._timer.isActive():
            return
        self._timer.start()
        log.info(f"Started refresh loop at {self._timer.interval()}ms intervals over {len(self.registry)} sessions")

    # Only used on shutdown, the loop otherwise runs for the lifetime of the window.
    def stop(self):
        if self._timer.isActive():
            self._timer.stop()
            log.info(f"Stopped refresh loop after {self._tick_n} ticks")

    def on_tick(self):
        now = self.registry.refresh(self._clock())
        self._tick_n += 1
        self.ticked.emit(now)
