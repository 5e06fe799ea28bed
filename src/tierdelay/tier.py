r"""Data model of a single delay tier."""

from __future__ import annotations

__all__ = ["RateStrategy", "Tier"]

from dataclasses import dataclass
from enum import Enum

from tierdelay.delay import Delay
from tierdelay.units import TimeUnit


class RateStrategy(Enum):
    """How many invocations a tier covers.

    Attributes:
        BOUNDED: The tier covers exactly ``repeat_count`` invocations.
        UNBOUNDED: The tier covers every invocation past the bounded
            budget of the sequence.
    """

    BOUNDED = "bounded"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class Tier:
    """One parsed term of a delay expression.

    Args:
        magnitude: The delay magnitude. Must be >= 0.
        unit: The time unit of ``magnitude``.
        repeat_count: The number of invocations covered by the tier.
            Must be >= 1.
        strategy: Whether the tier is bounded or unbounded.

    Raises:
        ValueError: If ``magnitude`` or ``repeat_count`` is out of range.

    Example:
        ```pycon
        >>> from tierdelay.tier import RateStrategy, Tier
        >>> from tierdelay.units import TimeUnit
        >>> tier = Tier(magnitude=1, unit=TimeUnit.MINUTES, repeat_count=3)
        >>> tier.delay
        Delay(magnitude=1, unit=<TimeUnit.MINUTES: 'm'>)
        >>> str(tier)
        '1m/3'
        >>> str(Tier(12, TimeUnit.HOURS, strategy=RateStrategy.UNBOUNDED))
        '12h+'

        ```
    """

    magnitude: int
    unit: TimeUnit
    repeat_count: int = 1
    strategy: RateStrategy = RateStrategy.BOUNDED

    def __post_init__(self) -> None:
        if self.magnitude < 0:
            msg = f"magnitude must be >= 0, got {self.magnitude}"
            raise ValueError(msg)
        if self.repeat_count < 1:
            msg = f"repeat_count must be >= 1, got {self.repeat_count}"
            raise ValueError(msg)

    @property
    def is_unbounded(self) -> bool:
        return self.strategy is RateStrategy.UNBOUNDED

    @property
    def delay(self) -> Delay:
        return Delay(magnitude=self.magnitude, unit=self.unit)

    def __str__(self) -> str:
        text = "0" if self.magnitude == 0 else f"{self.magnitude}{self.unit.symbol}"
        if self.repeat_count != 1:
            text += f"/{self.repeat_count}"
        if self.is_unbounded:
            text += "+"
        return text
