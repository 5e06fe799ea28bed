r"""Unit tests for ParserConfig dataclass.

This file contains tests for the ParserConfig dataclass in
core/config.py.
"""

from __future__ import annotations

import dataclasses

import pytest
from coola.equality import objects_are_equal

from tierdelay.core import (
    DEFAULT_STRICT_UNBOUNDED,
    EXPRESSION_SEPARATOR,
    RATE_SEPARATOR,
    UNBOUNDED_MARKER,
    ZERO_TERM,
    ParserConfig,
)

##################################
#     Tests for ParserConfig     #
##################################


def test_parser_config_defaults() -> None:
    """Test that ParserConfig uses correct default values."""
    config = ParserConfig()
    assert config.strict_unbounded is DEFAULT_STRICT_UNBOUNDED
    assert config.strict_unbounded is True


@pytest.mark.parametrize("strict_unbounded", [True, False])
def test_parser_config_strict_unbounded(strict_unbounded: bool) -> None:
    """Test that ParserConfig accepts custom strict_unbounded values."""
    config = ParserConfig(strict_unbounded=strict_unbounded)
    assert config.strict_unbounded is strict_unbounded


@pytest.mark.parametrize("strict_unbounded", [1, "yes", None])
def test_parser_config_validation_strict_unbounded(strict_unbounded: object) -> None:
    """Test that ParserConfig validates strict_unbounded is a bool."""
    with pytest.raises(TypeError, match=r"strict_unbounded must be a bool"):
        ParserConfig(strict_unbounded=strict_unbounded)  # type: ignore[arg-type]


def test_parser_config_is_frozen() -> None:
    config = ParserConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.strict_unbounded = False  # type: ignore[misc]


def test_parser_config_merge_no_overrides() -> None:
    """Test that merge() with no overrides returns equivalent config."""
    config = ParserConfig(strict_unbounded=False)
    merged = config.merge()
    assert merged == config
    assert merged is not config  # Should be a new instance


def test_parser_config_merge_with_overrides() -> None:
    """Test that merge() applies non-None overrides."""
    config = ParserConfig()
    merged = config.merge(strict_unbounded=False)
    assert merged.strict_unbounded is False
    assert config.strict_unbounded is True  # Original unchanged


def test_parser_config_merge_with_none_values() -> None:
    """Test that merge() ignores None values."""
    config = ParserConfig(strict_unbounded=False)
    assert config.merge(strict_unbounded=None).strict_unbounded is False


def test_parser_config_merge_validates() -> None:
    with pytest.raises(TypeError, match=r"strict_unbounded must be a bool"):
        ParserConfig().merge(strict_unbounded="no")


def test_parser_config_to_dict() -> None:
    assert objects_are_equal(ParserConfig().to_dict(), {"strict_unbounded": True})


###############################
#     Tests for constants     #
###############################


def test_grammar_constants() -> None:
    assert objects_are_equal(
        (EXPRESSION_SEPARATOR, RATE_SEPARATOR, UNBOUNDED_MARKER, ZERO_TERM),
        (",", "/", "+", "0"),
    )
