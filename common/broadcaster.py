import threading
from typing import Any, Optional


class StatusBroadcaster:
    """Holds the latest published value and wakes up anyone waiting on it.

    Every accepted change bumps ``version`` so readers can tell two equal
    snapshots apart from a missed update.
    """

    def __init__(self, initial: Any = None) -> None:
        self._status: Any = initial
        self._version = 0
        self._status_changed = threading.Condition()

    @property
    def version(self) -> int:
        with self._status_changed:
            return self._version

    def set_status(self, new_status: Any) -> bool:
        with self._status_changed:
            if self._status == new_status:
                return False
            self._status = new_status
            self._version += 1
            self._status_changed.notify_all()
            return True

    def get_status(self) -> Any:
        with self._status_changed:
            return self._status

    def wait_for_status_change(
            self, since_version: int, timeout: Optional[float] = None) -> Any:
        """Wait until the version moves past ``since_version``.

        Returns the new status, or None on timeout.
        """
        with self._status_changed:
            changed = self._status_changed.wait_for(
                lambda: self._version > since_version, timeout)
            return self._status if changed else None
