"""Release-once scope handle"""

import threading
from typing import Callable, Optional

from runner_logger.core.activity import Activity


class ScopeHandle:
    """
    Handle returned by TaskRunnerLogger.begin_scope().

    release() runs the close action exactly once; later calls do nothing.
    Used as a context manager, the close action fires on every exit path
    of the with-block. Exceptions raised inside the block are not suppressed.
    """

    def __init__(self, on_release: Callable[[], None]):
        self._on_release = on_release
        self._released = False
        self._lock = threading.Lock()
        self.activity: Optional[Activity] = None

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Run the close action if it has not run yet."""
        with self._lock:
            if self._released:
                return
            self._released = True
        self._on_release()

    def __enter__(self) -> "ScopeHandle":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()
