r"""Selection of the tier that applies to an invocation.

The tiers of a sequence are consumed from left to right: the first
tier covers the first ``repeat_count`` invocations, the second tier the
following ``repeat_count`` invocations, and so on. Past the total
budget, an unbounded tail keeps applying to every invocation, and a
sequence without unbounded tail cannot resolve the invocation.
"""

from __future__ import annotations

__all__ = ["Delay", "resolve_delay", "select_tier"]

import logging
from typing import TYPE_CHECKING

from tierdelay.core.validation import validate_invocation
from tierdelay.delay import Delay
from tierdelay.exceptions import CalculationError

if TYPE_CHECKING:
    from tierdelay.sequence import TierSequence
    from tierdelay.tier import Tier

logger: logging.Logger = logging.getLogger(__name__)


def select_tier(sequence: TierSequence, invocation: int) -> Tier:
    """Select the tier that applies to an invocation.

    Args:
        sequence: The parsed tiers.
        invocation: The 1-indexed invocation number. For example,
            invocation=1 is the first attempt.

    Returns:
        The tier covering ``invocation``.

    Raises:
        TypeError: If ``invocation`` is not an integer.
        ValueError: If ``invocation`` is lower than 1.
        CalculationError: If ``invocation`` exceeds the budget of the
            sequence and the sequence has no unbounded tail.

    Example:
        ```pycon
        >>> from tierdelay.parser import parse_expression
        >>> from tierdelay.resolver import select_tier
        >>> sequence = parse_expression("0/2,1m/3")
        >>> str(select_tier(sequence, 2))
        '0/2'
        >>> str(select_tier(sequence, 3))
        '1m/3'

        ```
    """
    validate_invocation(invocation)
    budget = sequence.total_bounded_repeats()
    if invocation <= budget:
        remaining = invocation
        for position, tier in enumerate(sequence):
            remaining -= tier.repeat_count
            if remaining <= 0:
                logger.debug(f"Invocation {invocation} falls in tier {position} ({tier})")
                return tier

    if sequence.has_unbounded_tail():
        logger.debug(
            f"Invocation {invocation} exceeds the budget of {budget}, "
            f"using the unbounded tail ({sequence.tail})"
        )
        return sequence.tail

    raise CalculationError(budget=budget, invocation=invocation)


def resolve_delay(sequence: TierSequence, invocation: int) -> Delay:
    """Resolve the delay that applies to an invocation.

    Args:
        sequence: The parsed tiers.
        invocation: The 1-indexed invocation number.

    Returns:
        The magnitude and unit of the selected tier.

    Raises:
        TypeError: If ``invocation`` is not an integer.
        ValueError: If ``invocation`` is lower than 1.
        CalculationError: If ``invocation`` exceeds the budget of the
            sequence and the sequence has no unbounded tail.

    Example:
        ```pycon
        >>> from tierdelay.parser import parse_expression
        >>> from tierdelay.resolver import resolve_delay
        >>> sequence = parse_expression("0,1m,1h,12h")
        >>> str(resolve_delay(sequence, 1))
        '0s'
        >>> str(resolve_delay(sequence, 4))
        '12h'
        >>> resolve_delay(sequence, 5)
        Traceback (most recent call last):
        ...
        tierdelay.exceptions.CalculationError: invocation 5 exceeds the expression budget of 4 invocations

        ```
    """
    return select_tier(sequence, invocation).delay
