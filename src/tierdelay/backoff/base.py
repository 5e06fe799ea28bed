r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from datetime import timedelta


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy maps a retry attempt to the number of seconds to
    wait before running it, which is the interface retry loops expect.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given retry attempt.

        Args:
            attempt: The current attempt number (0-indexed). For example,
                attempt=0 is the first retry, attempt=1 is the second retry, etc.

        Returns:
            The delay in seconds before the retry attempt.
        """

    def calculate_timedelta(self, attempt: int) -> timedelta:
        """Calculate the backoff delay of an attempt as a timedelta."""
        return timedelta(seconds=self.calculate(attempt))
