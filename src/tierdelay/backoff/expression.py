r"""Backoff strategy driven by a delay expression."""

from __future__ import annotations

__all__ = ["ExpressionBackoff"]

import logging
from typing import TYPE_CHECKING

from tierdelay.backoff.base import BaseBackoffStrategy
from tierdelay.expression import DelayExpression

if TYPE_CHECKING:
    from tierdelay.core.config import ParserConfig

logger: logging.Logger = logging.getLogger(__name__)


class ExpressionBackoff(BaseBackoffStrategy):
    """Backoff strategy reading its delays from a delay expression.

    Attempt ``n`` (0-indexed) is resolved as invocation ``n + 1`` of the
    expression, with optional max_delay cap.

    Args:
        expression: The delay expression, either as text or as an
            already parsed ``DelayExpression``.
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.
        config: Optional parser configuration, only used when
            ``expression`` is a string.

    Raises:
        FormatError: If ``expression`` violates the grammar.
        ValueError: If ``max_delay`` is not positive.

    Example:
        ```pycon
        >>> from tierdelay.backoff import ExpressionBackoff
        >>> backoff = ExpressionBackoff("500ms/2,1m+")
        >>> backoff.calculate(0)  # First retry
        0.5
        >>> backoff.calculate(1)  # Second retry
        0.5
        >>> backoff.calculate(2)  # Third retry
        60.0
        >>> backoff.calculate(50)
        60.0
        >>> # With max_delay cap
        >>> backoff = ExpressionBackoff("1s,1h", max_delay=30.0)
        >>> backoff.calculate(1)  # Would be 3600.0, but capped
        30.0

        ```
    """

    def __init__(
        self,
        expression: str | DelayExpression,
        max_delay: float | None = None,
        config: ParserConfig | None = None,
    ) -> None:
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        if not isinstance(expression, DelayExpression):
            expression = DelayExpression(expression, config=config)
        self.expression = expression
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(expression={str(self.expression)!r}, "
            f"max_delay={self.max_delay})"
        )

    def calculate(self, attempt: int) -> float:
        """Calculate the expression backoff delay.

        Args:
            attempt: The current attempt number (0-indexed).

        Returns:
            The delay of invocation ``attempt + 1`` in seconds, capped at
            max_delay if set.

        Raises:
            CalculationError: If the expression has no delay left for
                the attempt.
        """
        delay = self.expression.calculate_delay(attempt + 1).to_seconds()
        if self.max_delay is not None and delay > self.max_delay:
            logger.debug(
                f"Capping backoff delay from {delay:.2f}s to {self.max_delay:.2f}s "
                f"(max_delay={self.max_delay:.2f}s)"
            )
            delay = self.max_delay
        return delay
