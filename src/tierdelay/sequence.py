r"""Ordered, immutable sequence of delay tiers."""

from __future__ import annotations

__all__ = ["TierSequence"]

from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from tierdelay.tier import Tier


class TierSequence:
    """Ordered sequence of the tiers of an expression.

    The tiers are kept in expression order (left to right). The first
    tier is the head and the last tier is the tail. Only the tail may be
    unbounded.

    Args:
        tiers: The tiers in expression order. Must not be empty.

    Raises:
        ValueError: If ``tiers`` is empty or an unbounded tier is
            followed by another tier.

    Example:
        ```pycon
        >>> from tierdelay.sequence import TierSequence
        >>> from tierdelay.tier import RateStrategy, Tier
        >>> from tierdelay.units import TimeUnit
        >>> sequence = TierSequence(
        ...     [
        ...         Tier(0, TimeUnit.SECONDS, repeat_count=2),
        ...         Tier(1, TimeUnit.MINUTES, repeat_count=3, strategy=RateStrategy.UNBOUNDED),
        ...     ]
        ... )
        >>> len(sequence)
        2
        >>> sequence.total_bounded_repeats()
        5
        >>> sequence.has_unbounded_tail()
        True
        >>> str(sequence)
        '0/2,1m/3+'

        ```
    """

    __slots__ = ("_tiers",)

    def __init__(self, tiers: Iterable[Tier]) -> None:
        tiers = tuple(tiers)
        if not tiers:
            msg = "a tier sequence needs at least one tier"
            raise ValueError(msg)
        for position, tier in enumerate(tiers[:-1]):
            if tier.is_unbounded:
                msg = (
                    f"only the last tier may be unbounded, but tier {position} "
                    f"({tier}) is followed by {len(tiers) - position - 1} other tier(s)"
                )
                raise ValueError(msg)
        self._tiers: tuple[Tier, ...] = tiers

    @property
    def head(self) -> Tier:
        return self._tiers[0]

    @property
    def tail(self) -> Tier:
        return self._tiers[-1]

    @property
    def tiers(self) -> tuple[Tier, ...]:
        return self._tiers

    def total_bounded_repeats(self) -> int:
        """Compute the number of invocations covered by the repeat counts.

        The sum runs over all the tiers, including an unbounded tail,
        whose repeat count is consumed before it takes over for good.

        Returns:
            The sum of the repeat counts of the tiers.
        """
        return sum(tier.repeat_count for tier in self._tiers)

    def has_unbounded_tail(self) -> bool:
        return self.tail.is_unbounded

    def __len__(self) -> int:
        return len(self._tiers)

    def __iter__(self) -> Iterator[Tier]:
        return iter(self._tiers)

    @overload
    def __getitem__(self, index: int) -> Tier: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Tier, ...]: ...

    def __getitem__(self, index: int | slice) -> Tier | tuple[Tier, ...]:
        return self._tiers[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TierSequence):
            return NotImplemented
        return self._tiers == other._tiers

    def __hash__(self) -> int:
        return hash(self._tiers)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({list(self._tiers)!r})"

    def __str__(self) -> str:
        return ",".join(str(tier) for tier in self._tiers)
