r"""Parser turning a delay expression into a tier sequence.

An expression is a comma-separated list of terms, for example
``"0,1m,1h,12h"``, ``"12h+"`` or ``"0/2,1m/3+"``. Each term is a delay
(``"0"`` or a positive magnitude followed by one of the ``ms``, ``s``,
``m``, ``h`` or ``d`` suffixes), optionally followed by a repeat count
(``"/3"``), and the last term may be marked as unbounded (``"+"``).

Example:
    ```pycon
    >>> from tierdelay.parser import parse_expression
    >>> sequence = parse_expression("0/2,1m/3+")
    >>> [str(tier) for tier in sequence]
    ['0/2', '1m/3+']
    >>> sequence.total_bounded_repeats()
    5

    ```
"""

from __future__ import annotations

__all__ = ["ExpressionParser", "parse_expression"]

import logging

from tierdelay.core.config import (
    EXPRESSION_SEPARATOR,
    RATE_SEPARATOR,
    UNBOUNDED_MARKER,
    ZERO_TERM,
    ParserConfig,
)
from tierdelay.exceptions import EmptyExpressionError, FormatError
from tierdelay.grammar import is_rate, is_well_formed_expression, matches_term_shape
from tierdelay.sequence import TierSequence
from tierdelay.tier import RateStrategy, Tier
from tierdelay.units import TimeUnit

logger: logging.Logger = logging.getLogger(__name__)


class ExpressionParser:
    """Parser of delay expressions.

    The parser is stateless apart from its configuration, so one
    instance can parse any number of expressions.

    Args:
        config: Optional parser configuration. Defaults to
            ``ParserConfig()``.

    Example:
        ```pycon
        >>> from tierdelay.core import ParserConfig
        >>> from tierdelay.parser import ExpressionParser
        >>> parser = ExpressionParser()
        >>> str(parser.parse("0, 1m, 1h, 12h"))
        '0,1m,1h,12h'
        >>> lenient = ExpressionParser(ParserConfig(strict_unbounded=False))
        >>> str(lenient.parse("1s+,2s"))
        '1s,2s'

        ```
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config if config is not None else ParserConfig()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self.config!r})"

    def parse(self, expression: str) -> TierSequence:
        """Parse an expression into a tier sequence.

        Args:
            expression: The expression to parse.

        Returns:
            The tiers of the expression, in expression order.

        Raises:
            EmptyExpressionError: If the expression is empty or only
                contains whitespace.
            FormatError: If the expression or one of its terms violates
                the grammar, or if an unbounded term is not the last term
                and ``strict_unbounded`` is enabled.
        """
        if not expression or expression.isspace():
            raise EmptyExpressionError(expression)
        if not is_well_formed_expression(expression):
            raise FormatError(expression, f"{expression!r} is not a valid delay expression")

        terms = [term.strip() for term in expression.split(EXPRESSION_SEPARATOR)]
        tiers = []
        for position, term in enumerate(terms):
            tier = self._parse_term(term)
            if tier.is_unbounded and position < len(terms) - 1:
                tier = self._handle_misplaced_unbounded(tier, term, expression)
            tiers.append(tier)

        sequence = TierSequence(tiers)
        logger.debug(
            f"Parsed expression {expression!r} into {len(sequence)} tier(s) "
            f"(budget={sequence.total_bounded_repeats()}, "
            f"unbounded_tail={sequence.has_unbounded_tail()})"
        )
        return sequence

    def _parse_term(self, term: str) -> Tier:
        if not term:
            raise FormatError(term, "expression contains an empty term")

        unbounded = term.endswith(UNBOUNDED_MARKER)
        body = term[: -len(UNBOUNDED_MARKER)] if unbounded else term

        rated = RATE_SEPARATOR in body
        if rated:
            prefix, _, rate = body.partition(RATE_SEPARATOR)
            if not is_rate(rate):
                raise FormatError(term, f"{term!r} has an invalid repeat count {rate!r}")
            repeat_count = int(rate)
        else:
            prefix, repeat_count = body, 1

        if prefix == ZERO_TERM:
            magnitude, unit = 0, TimeUnit.SECONDS
        else:
            unit = TimeUnit.from_suffix(prefix)
            if unit is None:
                raise FormatError(term, f"{term!r} has no valid time unit suffix")
            magnitude = _parse_int(prefix[: -len(unit.symbol)], term)

        if not matches_term_shape(term, rated=rated, unbounded=unbounded):
            raise FormatError(term)

        return Tier(
            magnitude=magnitude,
            unit=unit,
            repeat_count=repeat_count,
            strategy=RateStrategy.UNBOUNDED if unbounded else RateStrategy.BOUNDED,
        )

    def _handle_misplaced_unbounded(self, tier: Tier, term: str, expression: str) -> Tier:
        if self.config.strict_unbounded:
            raise FormatError(
                term,
                f"{term!r} is unbounded but is not the last term of {expression!r}",
            )
        logger.warning(
            f"Ignoring the unbounded marker of {term!r} because it is not the last "
            f"term of {expression!r}"
        )
        return Tier(
            magnitude=tier.magnitude,
            unit=tier.unit,
            repeat_count=tier.repeat_count,
            strategy=RateStrategy.BOUNDED,
        )


def _parse_int(text: str, term: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise FormatError(term) from exc


def parse_expression(expression: str, config: ParserConfig | None = None) -> TierSequence:
    """Parse an expression into a tier sequence.

    Args:
        expression: The expression to parse.
        config: Optional parser configuration.

    Returns:
        The tiers of the expression, in expression order.

    Raises:
        EmptyExpressionError: If the expression is blank.
        FormatError: If the expression violates the grammar.

    Example:
        ```pycon
        >>> from tierdelay.parser import parse_expression
        >>> parse_expression("12h+").tail
        Tier(magnitude=12, unit=<TimeUnit.HOURS: 'h'>, repeat_count=1, strategy=<RateStrategy.UNBOUNDED: 'unbounded'>)

        ```
    """
    return ExpressionParser(config).parse(expression)
