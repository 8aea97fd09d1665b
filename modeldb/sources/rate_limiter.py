"""Retry backoff for upstream requests."""

import logging
import random

logger = logging.getLogger(__name__)


class RetryBackoff:
    """Exponential backoff with jitter and a bounded attempt budget.

    Each call to ``next_delay()`` consumes one retry. Once ``max_retries``
    delays have been handed out, ``exhausted`` turns True and the caller
    should give up.
    """

    def __init__(
        self,
        initial_delay: float = 1.0,
        max_delay: float = 30.0,
        backoff_factor: float = 2.0,
        jitter_factor: float = 0.1,
        max_retries: int = 3,
    ):
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.backoff_factor = backoff_factor
        self.jitter_factor = jitter_factor
        self.max_retries = max_retries
        self._delay = initial_delay
        self._attempts = 0

    @property
    def attempts(self) -> int:
        """Retries handed out since the last reset."""
        return self._attempts

    @property
    def exhausted(self) -> bool:
        return self._attempts >= self.max_retries

    def reset(self) -> None:
        """Start over after a successful request."""
        self._delay = self.initial_delay
        self._attempts = 0

    def next_delay(self) -> float:
        """Consume one retry and return the delay (seconds) to wait before it."""
        delay = min(self._delay, self.max_delay)
        self._attempts += 1
        self._delay = min(self._delay * self.backoff_factor, self.max_delay)
        # +/- jitter_factor of the delay
        jitter = delay * self.jitter_factor * (2 * random.random() - 1)
        return max(0.0, delay + jitter)
