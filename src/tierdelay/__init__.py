r"""tierdelay - Tiered retry delays from compact textual expressions.

This package parses retry/backoff expressions such as ``"0,1m,1h,12h"``
or ``"0/2,1m/3+"`` into an immutable sequence of delay tiers, and
selects the tier that applies to the Nth invocation.

Key Features:
    - Terms with ``ms``, ``s``, ``m``, ``h`` and ``d`` units, or ``0``
    - Repeat counts per term (``"1m/3"``)
    - Unbounded last term applying to every later invocation (``"12h+"``)
    - Projection of the delay onto a reference instant
    - Backoff strategy adapter for retry loops

Example:
    ```pycon
    >>> from tierdelay import DelayExpression
    >>> expression = DelayExpression("0/2,1m/3")
    >>> str(expression.calculate_delay(2))
    '0s'
    >>> str(expression.calculate_delay(5))
    '1m'
    >>> expression.calculate_delay(6)
    Traceback (most recent call last):
    ...
    tierdelay.exceptions.CalculationError: invocation 6 exceeds the expression budget of 5 invocations

    ```
"""

from __future__ import annotations

__all__ = [
    "CalculationError",
    "Delay",
    "DelayExpression",
    "EmptyExpressionError",
    "ExpressionParser",
    "FormatError",
    "ParserConfig",
    "RateStrategy",
    "Tier",
    "TierDelayError",
    "TierSequence",
    "TimeUnit",
    "__version__",
    "parse_expression",
    "resolve_delay",
]

from importlib.metadata import PackageNotFoundError, version

from tierdelay.core.config import ParserConfig
from tierdelay.delay import Delay
from tierdelay.exceptions import (
    CalculationError,
    EmptyExpressionError,
    FormatError,
    TierDelayError,
)
from tierdelay.expression import DelayExpression
from tierdelay.parser import ExpressionParser, parse_expression
from tierdelay.resolver import resolve_delay
from tierdelay.sequence import TierSequence
from tierdelay.tier import RateStrategy, Tier
from tierdelay.units import TimeUnit

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
