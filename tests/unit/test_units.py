from __future__ import annotations

from datetime import timedelta

import pytest

from tierdelay.units import UNIT_SUFFIX_CHARS, TimeUnit

##############################
#     Tests for TimeUnit     #
##############################


@pytest.mark.parametrize(
    ("unit", "symbol"),
    [
        (TimeUnit.MILLISECONDS, "ms"),
        (TimeUnit.SECONDS, "s"),
        (TimeUnit.MINUTES, "m"),
        (TimeUnit.HOURS, "h"),
        (TimeUnit.DAYS, "d"),
    ],
)
def test_time_unit_symbol(unit: TimeUnit, symbol: str) -> None:
    """Test that each unit exposes its suffix symbol."""
    assert unit.symbol == symbol


def test_time_unit_matching_order() -> None:
    """Test that milliseconds are matched before seconds."""
    units = list(TimeUnit)
    assert units.index(TimeUnit.MILLISECONDS) < units.index(TimeUnit.SECONDS)


@pytest.mark.parametrize(
    ("text", "unit"),
    [
        ("100ms", TimeUnit.MILLISECONDS),
        ("100s", TimeUnit.SECONDS),
        ("100m", TimeUnit.MINUTES),
        ("100h", TimeUnit.HOURS),
        ("100d", TimeUnit.DAYS),
    ],
)
def test_time_unit_from_suffix(text: str, unit: TimeUnit) -> None:
    """Test that the unit is found from the end of a term."""
    assert TimeUnit.from_suffix(text) is unit


@pytest.mark.parametrize("text", ["100", "100x", "", "100ms "])
def test_time_unit_from_suffix_unknown(text: str) -> None:
    """Test that an unknown suffix yields None."""
    assert TimeUnit.from_suffix(text) is None


def test_time_unit_from_suffix_only_checks_the_end() -> None:
    """Test that only the last characters are compared."""
    assert TimeUnit.from_suffix("100sm") is TimeUnit.MINUTES


@pytest.mark.parametrize(
    ("unit", "magnitude", "expected"),
    [
        (TimeUnit.MILLISECONDS, 1500, timedelta(seconds=1, milliseconds=500)),
        (TimeUnit.SECONDS, 30, timedelta(seconds=30)),
        (TimeUnit.MINUTES, 1, timedelta(minutes=1)),
        (TimeUnit.HOURS, 12, timedelta(hours=12)),
        (TimeUnit.DAYS, 2, timedelta(days=2)),
    ],
)
def test_time_unit_to_timedelta(unit: TimeUnit, magnitude: int, expected: timedelta) -> None:
    """Test the conversion of a magnitude to a timedelta."""
    assert unit.to_timedelta(magnitude) == expected


def test_time_unit_to_seconds() -> None:
    """Test the conversion of a magnitude to seconds."""
    assert TimeUnit.MILLISECONDS.to_seconds(250) == 0.25
    assert TimeUnit.HOURS.to_seconds(1) == 3600.0
    assert TimeUnit.SECONDS.to_seconds(0) == 0.0


def test_time_unit_to_seconds_beyond_timedelta_range() -> None:
    assert TimeUnit.DAYS.to_seconds(1_000_000_000) == 86_400_000_000_000.0
    with pytest.raises(OverflowError):
        TimeUnit.DAYS.to_timedelta(1_000_000_000)


def test_unit_suffix_chars() -> None:
    """Test the characters a unit suffix can end with."""
    assert frozenset("mshd") == UNIT_SUFFIX_CHARS
