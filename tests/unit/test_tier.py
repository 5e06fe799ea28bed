from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from tierdelay.delay import Delay
from tierdelay.tier import RateStrategy, Tier
from tierdelay.units import TimeUnit

##########################
#     Tests for Tier     #
##########################


def test_tier_defaults() -> None:
    """Test that a tier is bounded and used once by default."""
    tier = Tier(magnitude=1, unit=TimeUnit.MINUTES)
    assert tier.repeat_count == 1
    assert tier.strategy is RateStrategy.BOUNDED
    assert not tier.is_unbounded


def test_tier_unbounded() -> None:
    """Test the unbounded flag of a tier."""
    tier = Tier(12, TimeUnit.HOURS, strategy=RateStrategy.UNBOUNDED)
    assert tier.is_unbounded


def test_tier_delay() -> None:
    """Test that the delay of a tier keeps its magnitude and unit."""
    tier = Tier(5, TimeUnit.SECONDS, repeat_count=3)
    assert tier.delay == Delay(magnitude=5, unit=TimeUnit.SECONDS)


def test_tier_is_frozen() -> None:
    """Test that a tier cannot be mutated."""
    tier = Tier(1, TimeUnit.MINUTES)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tier.magnitude = 2  # type: ignore[misc]


def test_tier_zero_magnitude() -> None:
    """Test that a zero magnitude is accepted."""
    assert Tier(0, TimeUnit.SECONDS).magnitude == 0


def test_tier_invalid_magnitude() -> None:
    """Test that a negative magnitude raises ValueError."""
    with pytest.raises(ValueError, match=r"magnitude must be >= 0, got -1"):
        Tier(-1, TimeUnit.SECONDS)


@pytest.mark.parametrize("repeat_count", [0, -3])
def test_tier_invalid_repeat_count(repeat_count: int) -> None:
    """Test that a repeat count lower than 1 raises ValueError."""
    with pytest.raises(ValueError, match=r"repeat_count must be >= 1"):
        Tier(1, TimeUnit.SECONDS, repeat_count=repeat_count)


@pytest.mark.parametrize(
    ("tier", "text"),
    [
        (Tier(0, TimeUnit.SECONDS), "0"),
        (Tier(100, TimeUnit.MILLISECONDS), "100ms"),
        (Tier(1, TimeUnit.MINUTES, repeat_count=3), "1m/3"),
        (Tier(12, TimeUnit.HOURS, strategy=RateStrategy.UNBOUNDED), "12h+"),
        (Tier(2, TimeUnit.DAYS, repeat_count=4, strategy=RateStrategy.UNBOUNDED), "2d/4+"),
    ],
)
def test_tier_str(tier: Tier, text: str) -> None:
    """Test the expression form of a tier."""
    assert str(tier) == text


###########################
#     Tests for Delay     #
###########################


def test_delay_to_timedelta() -> None:
    """Test the conversion of a delay to a timedelta."""
    assert Delay(3, TimeUnit.HOURS).to_timedelta() == timedelta(hours=3)


def test_delay_to_seconds() -> None:
    """Test the conversion of a delay to seconds."""
    assert Delay(1500, TimeUnit.MILLISECONDS).to_seconds() == 1.5


def test_delay_apply_to() -> None:
    """Test that a delay shifts an instant forward."""
    instant = datetime(2024, 1, 31, 23, 0, tzinfo=timezone.utc)
    assert Delay(2, TimeUnit.HOURS).apply_to(instant) == datetime(
        2024, 2, 1, 1, 0, tzinfo=timezone.utc
    )


def test_delay_str() -> None:
    """Test the compact form of a delay."""
    assert str(Delay(0, TimeUnit.SECONDS)) == "0s"
    assert str(Delay(250, TimeUnit.MILLISECONDS)) == "250ms"


def test_delay_equality() -> None:
    """Test that delays compare by value."""
    assert Delay(1, TimeUnit.MINUTES) == Delay(1, TimeUnit.MINUTES)
    assert Delay(1, TimeUnit.MINUTES) != Delay(60, TimeUnit.SECONDS)
