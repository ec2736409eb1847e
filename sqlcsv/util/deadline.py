import time
from typing import Optional


class Deadline:
    """Wall-clock budget measured from construction with time.monotonic()."""

    def __init__(self, timeout: Optional[float]):
        self.timeout = timeout
        self.start = time.monotonic()

    @property
    def expires_at(self) -> Optional[float]:
        if self.timeout is None:
            return None
        return self.start + self.timeout

    def remaining(self) -> Optional[float]:
        """Seconds left, never negative; None when there is no limit."""
        if self.timeout is None:
            return None
        return max(0.0, self.expires_at - time.monotonic())

    def expired(self) -> bool:
        return self.timeout is not None and time.monotonic() >= self.expires_at

    def elapsed(self) -> float:
        return time.monotonic() - self.start
