r"""Reusable delay expression object."""

from __future__ import annotations

__all__ = ["DelayExpression"]

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from tierdelay.parser import ExpressionParser
from tierdelay.resolver import resolve_delay

if TYPE_CHECKING:
    from tierdelay.core.config import ParserConfig
    from tierdelay.delay import Delay
    from tierdelay.sequence import TierSequence


class DelayExpression:
    r"""Delay expression parsed once and evaluated for any invocation.

    The expression is parsed when the object is created, so a malformed
    expression fails fast. The parsed tiers are immutable and the object
    can be shared between threads.

    Args:
        expression: The expression, for example ``"0,1m,1h,12h+"``.
        config: Optional parser configuration.

    Raises:
        EmptyExpressionError: If the expression is blank.
        FormatError: If the expression violates the grammar.

    Example:
        ```pycon
        >>> from datetime import datetime, timezone
        >>> from tierdelay import DelayExpression
        >>> expression = DelayExpression("0,1m,1h,12h+")
        >>> str(expression.calculate_delay(2))
        '1m'
        >>> str(expression.calculate_delay(100))
        '12h'
        >>> expression.calculate_trigger_time(3, datetime(2024, 1, 1, tzinfo=timezone.utc))
        datetime.datetime(2024, 1, 1, 1, 0, tzinfo=datetime.timezone.utc)
        >>> expression.max_invocations is None
        True

        ```
    """

    def __init__(self, expression: str, config: ParserConfig | None = None) -> None:
        self._expression = expression
        self._sequence = ExpressionParser(config).parse(expression)

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def sequence(self) -> TierSequence:
        return self._sequence

    @property
    def max_invocations(self) -> int | None:
        """The number of invocations the expression can resolve, or
        ``None`` if it ends with an unbounded tier."""
        if self._sequence.has_unbounded_tail():
            return None
        return self._sequence.total_bounded_repeats()

    def calculate_delay(self, invocation: int) -> Delay:
        """Calculate the delay of an invocation.

        Args:
            invocation: The 1-indexed invocation number.

        Returns:
            The delay to wait before the invocation.

        Raises:
            ValueError: If ``invocation`` is lower than 1.
            CalculationError: If the expression cannot cover
                ``invocation``.
        """
        return resolve_delay(self._sequence, invocation)

    def calculate_trigger_time(self, invocation: int, instant: datetime | None = None) -> datetime:
        """Calculate the instant at which an invocation should trigger.

        Args:
            invocation: The 1-indexed invocation number.
            instant: The reference instant. Defaults to the current UTC
                time.

        Returns:
            ``instant`` shifted forward by the delay of the invocation.

        Raises:
            ValueError: If ``invocation`` is lower than 1.
            CalculationError: If the expression cannot cover
                ``invocation``.
        """
        delay = self.calculate_delay(invocation)
        if instant is None:
            instant = datetime.now(timezone.utc)
        return delay.apply_to(instant)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelayExpression):
            return NotImplemented
        return self._expression == other._expression and self._sequence == other._sequence

    def __hash__(self) -> int:
        return hash((self._expression, self._sequence))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self._expression!r})"

    def __str__(self) -> str:
        return self._expression
