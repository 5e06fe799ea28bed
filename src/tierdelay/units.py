r"""Time units accepted as term suffixes."""

from __future__ import annotations

__all__ = ["UNIT_SUFFIX_CHARS", "TimeUnit"]

from datetime import timedelta
from enum import Enum


class TimeUnit(Enum):
    """Time unit of a delay tier, keyed by its suffix symbol.

    The declaration order is the order used to match suffixes: ``ms``
    must be tried before ``s`` because it ends with it.

    Example:
        ```pycon
        >>> from tierdelay.units import TimeUnit
        >>> TimeUnit.from_suffix("150ms")
        <TimeUnit.MILLISECONDS: 'ms'>
        >>> TimeUnit.from_suffix("3m")
        <TimeUnit.MINUTES: 'm'>
        >>> TimeUnit.HOURS.to_timedelta(12)
        datetime.timedelta(seconds=43200)

        ```
    """

    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"

    @property
    def symbol(self) -> str:
        """The suffix used in expressions (e.g. ``"ms"``)."""
        return self.value

    def to_timedelta(self, magnitude: int) -> timedelta:
        """Convert a magnitude expressed in this unit to a timedelta.

        Args:
            magnitude: The number of units.

        Returns:
            The equivalent ``datetime.timedelta``.
        """
        return timedelta(**{_TIMEDELTA_KEYWORDS[self]: magnitude})

    def to_seconds(self, magnitude: int) -> float:
        """Convert a magnitude expressed in this unit to seconds.

        Unlike ``to_timedelta``, this conversion has no upper bound.
        """
        return magnitude * _MILLISECONDS_PER_UNIT[self] / 1000

    @classmethod
    def from_suffix(cls, text: str) -> TimeUnit | None:
        """Find the unit whose symbol ends ``text``.

        Args:
            text: A term prefix such as ``"100ms"``.

        Returns:
            The first matching unit in declaration order, or ``None`` if
            ``text`` ends with no known suffix.
        """
        for unit in cls:
            if text.endswith(unit.symbol):
                return unit
        return None


_TIMEDELTA_KEYWORDS = {
    TimeUnit.MILLISECONDS: "milliseconds",
    TimeUnit.SECONDS: "seconds",
    TimeUnit.MINUTES: "minutes",
    TimeUnit.HOURS: "hours",
    TimeUnit.DAYS: "days",
}

_MILLISECONDS_PER_UNIT = {
    TimeUnit.MILLISECONDS: 1,
    TimeUnit.SECONDS: 1_000,
    TimeUnit.MINUTES: 60_000,
    TimeUnit.HOURS: 3_600_000,
    TimeUnit.DAYS: 86_400_000,
}

# Characters a well-formed expression may end with, besides digits and "+"
UNIT_SUFFIX_CHARS = frozenset("".join(unit.symbol for unit in TimeUnit))
