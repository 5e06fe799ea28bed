r"""Exceptions raised while parsing and evaluating delay expressions."""

from __future__ import annotations

__all__ = [
    "CalculationError",
    "EmptyExpressionError",
    "FormatError",
    "TierDelayError",
]


class TierDelayError(Exception):
    """Base class of all the errors raised by ``tierdelay``."""


class FormatError(TierDelayError, ValueError):
    """Exception raised when an expression or a term violates the
    grammar.

    Args:
        text: The offending term or expression.
        message: An optional descriptive error message. If not provided,
            a generic message naming ``text`` is used.

    Attributes:
        text: The offending term or expression.

    Example:
        ```pycon
        >>> from tierdelay.exceptions import FormatError
        >>> raise FormatError("1x")
        Traceback (most recent call last):
            ...
        tierdelay.exceptions.FormatError: '1x' is not a valid delay term

        ```
    """

    def __init__(self, text: str, message: str | None = None) -> None:
        self.text = text
        super().__init__(message or f"{text!r} is not a valid delay term")


class EmptyExpressionError(FormatError):
    """Exception raised when the expression is empty or only contains
    whitespace."""

    def __init__(self, text: str = "") -> None:
        super().__init__(text, "expression must not be blank")


class CalculationError(TierDelayError, RuntimeError):
    """Exception raised when an invocation falls outside the bounded
    budget of an expression that has no unbounded tail.

    Args:
        budget: The total number of invocations covered by the expression.
        invocation: The requested invocation index (1-indexed).

    Attributes:
        budget: The total number of invocations covered by the expression.
        invocation: The requested invocation index (1-indexed).

    Example:
        ```pycon
        >>> from tierdelay.exceptions import CalculationError
        >>> raise CalculationError(budget=5, invocation=6)
        Traceback (most recent call last):
            ...
        tierdelay.exceptions.CalculationError: invocation 6 exceeds the expression budget of 5 invocations

        ```
    """

    def __init__(self, budget: int, invocation: int) -> None:
        self.budget = budget
        self.invocation = invocation
        super().__init__(
            f"invocation {invocation} exceeds the expression budget of {budget} invocations"
        )
