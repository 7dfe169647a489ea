"""
Fixed-interval refresh in a worker thread.

The callback runs back to back on one thread, so two ticks of the same
poller never overlap.  ``stop()`` sets the stop event and joins the
thread; once it returns no further callback starts.
"""
import logging
import threading

logger = logging.getLogger(__name__)


class ScheduledRefresh:
    def __init__(self, interval: float, callback, name: str = 'scheduled-refresh'):
        self.interval = interval
        self.callback = callback
        self.name = name
        self.last_result = None
        self.last_error = None
        self.ticks = 0
        self._stop = threading.Event()
        self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        logger.info("%s started (every %ss)", self.name, self.interval)

    def tick(self):
        try:
            self.last_result = self.callback()
            self.last_error = None
        except Exception as exc:
            # keep polling; the failure is exposed through last_error
            logger.exception("%s tick failed", self.name)
            self.last_error = exc
        self.ticks += 1
        return self.last_result

    def _run(self):
        while not self._stop.is_set():
            self.tick()
            self._stop.wait(self.interval)

    def stop(self, timeout=None):
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("%s stopped after %d ticks", self.name, self.ticks)

    def wait(self, timeout=None) -> bool:
        """Block until stop() is called; True when stopped."""
        return self._stop.wait(timeout)
