r"""Format predicates of the delay expression grammar.

The grammar of a single term is:

```
term        := "0" | [1-9][0-9]* unit-suffix
unit-suffix := "ms" | "s" | "m" | "h" | "d"
rated-term  := term ["/" [1-9][0-9]*]
full-term   := rated-term ["+"]
```

All the predicates are pure functions on strings. They only accept
ASCII digits.
"""

from __future__ import annotations

__all__ = [
    "is_rate",
    "is_rated_bounded_term",
    "is_rated_unbounded_term",
    "is_simple_bounded_term",
    "is_simple_unbounded_term",
    "is_well_formed_expression",
    "matches_term_shape",
]

import re

from tierdelay.units import UNIT_SUFFIX_CHARS, TimeUnit

# Alternatives are listed in suffix matching order so "ms" wins over "m"
_UNIT = "|".join(re.escape(unit.symbol) for unit in TimeUnit)
_TERM = rf"(?:0|[1-9][0-9]*(?:{_UNIT}))"
_RATE = r"[1-9][0-9]*"

# 0 | 100ms | 100s | 100m | 100h | 100d
_SIMPLE_BOUNDED = re.compile(_TERM)
# 0+ | 100ms+ | 100s+ | 100m+ | 100h+ | 100d+
_SIMPLE_UNBOUNDED = re.compile(rf"{_TERM}\+")
# 0/10 | 100ms/10 | 100s/10 | 100m/10 | 100h/10 | 100d/10
_RATED_BOUNDED = re.compile(rf"{_TERM}/{_RATE}")
# 0/10+ | 100ms/10+ | 100s/10+ | 100m/10+ | 100h/10+ | 100d/10+
_RATED_UNBOUNDED = re.compile(rf"{_TERM}/{_RATE}\+")
_RATE_PATTERN = re.compile(_RATE)

_EXPRESSION_LAST_CHARS = frozenset("0123456789+") | UNIT_SUFFIX_CHARS


def is_well_formed_expression(expression: str) -> bool:
    """Check the first and last characters of a whole expression.

    This is a coarse gate applied before the expression is split into
    terms: the expression must start with a decimal digit and end with
    a decimal digit, ``"+"`` or a unit suffix character. The interior
    is not inspected.

    Args:
        expression: The raw expression.

    Returns:
        ``True`` if the expression passes the gate, otherwise ``False``.

    Example:
        ```pycon
        >>> from tierdelay.grammar import is_well_formed_expression
        >>> is_well_formed_expression("0,1m,1h,12h")
        True
        >>> is_well_formed_expression("0")
        True
        >>> is_well_formed_expression("0,1m,")
        False
        >>> is_well_formed_expression("m1")
        False

        ```
    """
    if not expression:
        return False
    return expression[0] in "0123456789" and expression[-1] in _EXPRESSION_LAST_CHARS


def is_simple_bounded_term(term: str) -> bool:
    """Check a term without rate nor unbounded marker (``"100ms"``)."""
    return _SIMPLE_BOUNDED.fullmatch(term) is not None


def is_simple_unbounded_term(term: str) -> bool:
    """Check a term with an unbounded marker but no rate (``"12h+"``)."""
    return _SIMPLE_UNBOUNDED.fullmatch(term) is not None


def is_rated_bounded_term(term: str) -> bool:
    """Check a term with a rate and no unbounded marker (``"1m/3"``)."""
    return _RATED_BOUNDED.fullmatch(term) is not None


def is_rated_unbounded_term(term: str) -> bool:
    """Check a term with a rate and an unbounded marker (``"1m/3+"``)."""
    return _RATED_UNBOUNDED.fullmatch(term) is not None


def is_rate(text: str) -> bool:
    """Check that ``text`` is a positive integer without leading zero.

    Example:
        ```pycon
        >>> from tierdelay.grammar import is_rate
        >>> is_rate("3")
        True
        >>> is_rate("03")
        False
        >>> is_rate("2a")
        False

        ```
    """
    return _RATE_PATTERN.fullmatch(text) is not None


def matches_term_shape(term: str, *, rated: bool, unbounded: bool) -> bool:
    """Check a term against the precise shape expected for it.

    Args:
        term: The trimmed term, including its rate and unbounded marker.
        rated: Whether the term carries a ``"/rate"`` suffix.
        unbounded: Whether the term ends with ``"+"``.

    Returns:
        ``True`` if the term matches the shape, otherwise ``False``.

    Example:
        ```pycon
        >>> from tierdelay.grammar import matches_term_shape
        >>> matches_term_shape("1m/3+", rated=True, unbounded=True)
        True
        >>> matches_term_shape("1m/3+", rated=False, unbounded=True)
        False
        >>> matches_term_shape("0/2a", rated=True, unbounded=False)
        False

        ```
    """
    if rated:
        return is_rated_unbounded_term(term) if unbounded else is_rated_bounded_term(term)
    return is_simple_unbounded_term(term) if unbounded else is_simple_bounded_term(term)
