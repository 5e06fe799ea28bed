from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tierdelay.core.config import ParserConfig
from tierdelay.parser import ExpressionParser


@pytest.fixture
def parser() -> ExpressionParser:
    """Create a parser with the default (strict) configuration."""
    return ExpressionParser()


@pytest.fixture
def lenient_parser() -> ExpressionParser:
    """Create a parser accepting an unbounded marker on any term."""
    return ExpressionParser(ParserConfig(strict_unbounded=False))


@pytest.fixture
def reference_instant() -> datetime:
    """Fixed UTC instant used as reference for trigger times."""
    return datetime(2024, 5, 28, 10, 24, tzinfo=timezone.utc)
