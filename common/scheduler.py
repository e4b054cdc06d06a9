import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class RepeatingTask:
    """Calls ``callback`` every ``interval`` seconds on a worker thread.

    At most one run is outstanding: ``start`` cancels the current run before
    installing a new one.
    """

    def __init__(self, interval: float, callback: Callable[[], None],
                 name: str = "repeating-task") -> None:
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        self.interval = interval
        self.callback = callback
        self.name = name
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None

    @property
    def active(self) -> bool:
        with self._lock:
            return self._thread is not None and not self._stop_event.is_set()

    def start(self) -> None:
        with self._lock:
            self._cancel_locked()
            stop_event = threading.Event()
            thread = threading.Thread(
                target=self._run, args=(stop_event,), name=self.name,
                daemon=True)
            self._stop_event = stop_event
            self._thread = thread
            thread.start()
        logger.debug(f"{self.name}: started, interval {self.interval}s")

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        if self._thread is None:
            return
        self._stop_event.set()
        if self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None
        self._stop_event = None
        logger.debug(f"{self.name}: cancelled")

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            try:
                self.callback()
            except Exception:
                logger.exception(f"{self.name}: callback failed, stopping")
                stop_event.set()
