r"""Configuration dataclass and defaults for the expression parser.

This module provides the grammar constants and a dataclass-based
configuration object for ``ExpressionParser`` and ``DelayExpression``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_STRICT_UNBOUNDED",
    "EXPRESSION_SEPARATOR",
    "RATE_SEPARATOR",
    "UNBOUNDED_MARKER",
    "ZERO_TERM",
    "ParserConfig",
]

from dataclasses import dataclass, replace
from typing import Any

from tierdelay.core.validation import validate_strict_flag

# Separator between the terms of an expression: "0,1m,1h"
EXPRESSION_SEPARATOR = ","

# Separator between a term and its repeat count: "1m/3"
RATE_SEPARATOR = "/"

# Suffix marking the last term as unbounded: "12h+"
UNBOUNDED_MARKER = "+"

# The only term without a unit suffix, always zero seconds
ZERO_TERM = "0"

# Reject an unbounded term that is not the last term of the expression
DEFAULT_STRICT_UNBOUNDED = True


@dataclass(frozen=True)
class ParserConfig:
    """Configuration of the expression parser.

    Args:
        strict_unbounded: If ``True``, an unbounded term (``"1m+"``) that
            is not the last term of the expression raises a
            ``FormatError``. If ``False``, the marker of such a term is
            ignored and the term is parsed as bounded.

    Raises:
        TypeError: If ``strict_unbounded`` is not a boolean.

    Example:
        ```pycon
        >>> from tierdelay.core.config import ParserConfig
        >>> config = ParserConfig()  # Use defaults
        >>> config.strict_unbounded
        True
        >>> lenient = config.merge(strict_unbounded=False)
        >>> lenient.strict_unbounded
        False
        >>> config.strict_unbounded  # Original unchanged
        True

        ```
    """

    strict_unbounded: bool = DEFAULT_STRICT_UNBOUNDED

    def __post_init__(self) -> None:
        validate_strict_flag(self.strict_unbounded)

    def merge(self, **overrides: Any) -> ParserConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ParserConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Example:
            ```pycon
            >>> from tierdelay.core.config import ParserConfig
            >>> ParserConfig(strict_unbounded=False).to_dict()
            {'strict_unbounded': False}

            ```
        """
        return {"strict_unbounded": self.strict_unbounded}
