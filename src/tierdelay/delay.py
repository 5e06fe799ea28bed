r"""Delay value returned when an invocation is resolved."""

from __future__ import annotations

__all__ = ["Delay"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime, timedelta

    from tierdelay.units import TimeUnit


@dataclass(frozen=True)
class Delay:
    """A delay magnitude expressed in a time unit.

    Attributes:
        magnitude: The number of units to wait.
        unit: The time unit of ``magnitude``.

    Example:
        ```pycon
        >>> from datetime import datetime, timezone
        >>> from tierdelay.delay import Delay
        >>> from tierdelay.units import TimeUnit
        >>> delay = Delay(magnitude=90, unit=TimeUnit.SECONDS)
        >>> delay.to_seconds()
        90.0
        >>> delay.apply_to(datetime(2024, 1, 1, tzinfo=timezone.utc))
        datetime.datetime(2024, 1, 1, 0, 1, 30, tzinfo=datetime.timezone.utc)

        ```
    """

    magnitude: int
    unit: TimeUnit

    def to_timedelta(self) -> timedelta:
        return self.unit.to_timedelta(self.magnitude)

    def to_seconds(self) -> float:
        return self.unit.to_seconds(self.magnitude)

    def apply_to(self, instant: datetime) -> datetime:
        """Compute the instant at which the delay elapses.

        Args:
            instant: The reference instant.

        Returns:
            ``instant`` shifted forward by the delay.
        """
        return instant + self.to_timedelta()

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit.symbol}"
