r"""Parameter validation utilities for delay expressions.

This module provides validation functions for the parameters accepted
by the parser and the resolver, to ensure they meet the required
constraints before being used.
"""

from __future__ import annotations

__all__ = ["validate_invocation", "validate_strict_flag"]

from typing import Any


def validate_invocation(invocation: Any) -> None:
    """Validate an invocation index.

    Args:
        invocation: The 1-indexed invocation number. Must be an integer
            >= 1. For example, invocation=1 is the first attempt.

    Raises:
        TypeError: If ``invocation`` is not an integer (``bool`` is
            rejected too).
        ValueError: If ``invocation`` is lower than 1.

    Example:
        ```pycon
        >>> from tierdelay.core.validation import validate_invocation
        >>> validate_invocation(1)
        >>> validate_invocation(42)
        >>> validate_invocation(0)
        Traceback (most recent call last):
        ...
        ValueError: invocation must be >= 1, got 0

        ```
    """
    if isinstance(invocation, bool) or not isinstance(invocation, int):
        msg = f"invocation must be an int, got {type(invocation).__name__}"
        raise TypeError(msg)
    if invocation < 1:
        msg = f"invocation must be >= 1, got {invocation}"
        raise ValueError(msg)


def validate_strict_flag(strict_unbounded: Any) -> None:
    """Validate the ``strict_unbounded`` parser option.

    Args:
        strict_unbounded: Whether an unbounded term is only accepted in
            the last position.

    Raises:
        TypeError: If ``strict_unbounded`` is not a boolean.

    Example:
        ```pycon
        >>> from tierdelay.core.validation import validate_strict_flag
        >>> validate_strict_flag(True)
        >>> validate_strict_flag("yes")  # doctest: +SKIP

        ```
    """
    if not isinstance(strict_unbounded, bool):
        msg = f"strict_unbounded must be a bool, got {type(strict_unbounded).__name__}"
        raise TypeError(msg)
