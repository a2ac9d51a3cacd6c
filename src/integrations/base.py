"""Shared plumbing for external service clients.

IntegrationBase gives every client the same shape (is_configured,
health_check) and a retry helper; RateLimiter caps calls per minute.
"""

import threading
import time
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, TypeVar

from src.core.exceptions import IntegrationError
from src.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class IntegrationBase(ABC):
    """Base class for gateway clients."""

    @abstractmethod
    def is_configured(self) -> bool:
        """True when the credentials the client needs are present."""

    @abstractmethod
    def health_check(self) -> bool:
        """True when the remote service can be reached."""

    def with_retry(
        self,
        func: Callable[[], T],
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        exceptions: tuple = (Exception,),
    ) -> T:
        """Call func, retrying listed exceptions with doubling delays.

        Raises:
            IntegrationError: After max_retries + 1 failed attempts
        """
        attempts = max_retries + 1
        delay = base_delay

        for attempt in range(1, attempts + 1):
            try:
                return func()
            except exceptions as e:
                if attempt == attempts:
                    raise IntegrationError(
                        f"Operation failed after {attempts} attempts: {e}"
                    ) from e
                logger.warning(
                    f"Attempt {attempt}/{attempts} failed, retrying in {delay}s: {e}",
                    extra={"context": {"attempt": attempt}},
                )
                time.sleep(delay)
                delay = min(delay * 2, max_delay)

        raise AssertionError("unreachable")


class RateLimiter:
    """Sliding one-minute window shared by any number of threads.

    Attributes:
        calls_per_minute: Maximum calls allowed in any 60 second window
    """

    WINDOW = 60.0

    def __init__(self, calls_per_minute: int = 60):
        self.calls_per_minute = calls_per_minute
        self._calls: deque[float] = deque()
        self._lock = threading.Lock()

    def wait_if_needed(self) -> None:
        """Block until one more call fits in the window, then record it."""
        with self._lock:
            now = time.time()
            while self._calls and now - self._calls[0] >= self.WINDOW:
                self._calls.popleft()

            if len(self._calls) >= self.calls_per_minute:
                pause = self.WINDOW - (now - self._calls[0])
                if pause > 0:
                    logger.debug(f"Rate limit reached, pausing {pause:.1f}s")
                    time.sleep(pause)
                self._calls.popleft()

            self._calls.append(time.time())
