r"""Configuration and validation shared by the parser and the resolver."""

from __future__ import annotations

__all__ = [
    "DEFAULT_STRICT_UNBOUNDED",
    "EXPRESSION_SEPARATOR",
    "RATE_SEPARATOR",
    "UNBOUNDED_MARKER",
    "ZERO_TERM",
    "ParserConfig",
    "validate_invocation",
    "validate_strict_flag",
]

from tierdelay.core.config import (
    DEFAULT_STRICT_UNBOUNDED,
    EXPRESSION_SEPARATOR,
    RATE_SEPARATOR,
    UNBOUNDED_MARKER,
    ZERO_TERM,
    ParserConfig,
)
from tierdelay.core.validation import validate_invocation, validate_strict_flag
