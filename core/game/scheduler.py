"""Deferred callbacks driven by the frame loop."""

import logging
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class ScheduledCall:
    """A callback that runs once after ``delay`` seconds of loop time."""

    delay: float
    callback: Callable[[], None]
    name: str = ""

    elapsed: float = field(default=0.0, init=False)
    cancelled: bool = field(default=False, init=False)
    fired: bool = field(default=False, init=False)

    @property
    def is_pending(self) -> bool:
        """Check if the call is still waiting to fire."""
        return not (self.cancelled or self.fired)

    @property
    def remaining(self) -> float:
        """Seconds left before the call fires."""
        return max(0.0, self.delay - self.elapsed)

    def cancel(self) -> None:
        """Prevent the call from firing. Has no effect once fired."""
        if not self.fired:
            self.cancelled = True

    def update(self, dt: float) -> bool:
        """Advance the call by delta time.

        Args:
            dt: Delta time in seconds

        Returns:
            True if still waiting, False once fired or cancelled
        """
        if not self.is_pending:
            return False

        self.elapsed += dt
        if self.elapsed < self.delay:
            return True

        self.fired = True
        self.callback()
        return False


class Scheduler:
    """Runs deferred callbacks on the caller's single-threaded loop.

    Nothing happens in the background: time only advances when the owner
    calls ``update(dt)``, typically once per frame.
    """

    def __init__(self):
        self._calls: list[ScheduledCall] = []

    def call_later(
        self,
        delay: float,
        callback: Callable[[], None],
        name: str = "",
    ) -> ScheduledCall:
        """Schedule ``callback`` to run after ``delay`` seconds.

        Args:
            delay: Delay in seconds (0 runs on the next update)
            callback: Function to call
            name: Label used in log messages

        Returns:
            Handle that can be cancelled
        """
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")

        # Drop calls cancelled since the last update
        self._calls = [c for c in self._calls if c.is_pending]

        call = ScheduledCall(delay=delay, callback=callback, name=name)
        self._calls.append(call)
        logger.debug("Scheduled %s in %.2fs", name or "callback", delay)
        return call

    def update(self, dt: float) -> None:
        """Advance all scheduled calls and fire the due ones.

        Args:
            dt: Delta time in seconds
        """
        # Calls added by a callback wait for the next update
        for call in list(self._calls):
            call.update(dt)
        self._calls = [c for c in self._calls if c.is_pending]

    def cancel_all(self) -> int:
        """Cancel every pending call.

        Returns:
            Number of calls cancelled
        """
        count = 0
        for call in self._calls:
            if call.is_pending:
                call.cancel()
                count += 1
        self._calls.clear()
        return count

    @property
    def pending(self) -> int:
        """Number of calls still waiting to fire."""
        return sum(1 for call in self._calls if call.is_pending)
