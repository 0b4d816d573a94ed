"""Tests for the fare calculator."""

import pytest

from subway_path.application.services import FareCalculator
from subway_path.domain.models import DEFAULT_FARE, FarePolicy


@pytest.fixture
def calculator() -> FareCalculator:
    """Create a fare calculator with the standard policy."""
    return FareCalculator()


def test_base_fare_within_base_distance(calculator: FareCalculator) -> None:
    """Given an adult trip of at most 10 km, when pricing, then the default fare applies."""
    assert calculator.calculate_fare(age=20, distance=7) == DEFAULT_FARE
    assert calculator.calculate_fare(age=20, distance=10) == 1250


def test_surcharge_is_added(calculator: FareCalculator) -> None:
    """Given a 500 surcharge, when pricing an adult short trip, then the fare is 1750."""
    assert calculator.calculate_fare(age=20, distance=7, surcharge=500) == 1750


@pytest.mark.parametrize(
    ("distance", "expected"),
    [
        (11, 1350),
        (12, 1350),
        (15, 1350),
        (16, 1450),
        (50, 2050),
        (51, 2150),
        (58, 2150),
        (59, 2250),
    ],
)
def test_distance_tiers_round_up(calculator: FareCalculator, distance: int, expected: int) -> None:
    """Given distances across both tiers, when pricing, then every started unit adds 100."""
    assert calculator.calculate_fare(age=20, distance=distance) == expected


def test_partial_unit_charged_at_very_long_distance(calculator: FareCalculator) -> None:
    """Given a distance far beyond float precision, when adding 1 km, then one more unit is charged."""
    distance = 50 + 8 * 10**16

    exact = calculator.calculate_fare(age=20, distance=distance)

    assert exact == 2050 + 10**16 * 100
    assert calculator.calculate_fare(age=20, distance=distance + 1) == exact + 100


@pytest.mark.parametrize(
    ("age", "expected"),
    [
        (0, 0),
        (5, 0),
        (6, 450),
        (10, 450),
        (12, 450),
        (13, 720),
        (18, 720),
        (19, 1250),
        (65, 1250),
    ],
)
def test_age_discounts(calculator: FareCalculator, age: int, expected: int) -> None:
    """Given riders of each age band, when pricing 10 km, then the band's discount applies."""
    assert calculator.calculate_fare(age=age, distance=10) == expected


def test_child_discount_includes_surcharge(calculator: FareCalculator) -> None:
    """Given a child on a surcharged trip, when pricing, then the discount applies to the total."""
    # (1250 + 900 - 350) * 50%
    assert calculator.calculate_fare(age=10, distance=10, surcharge=900) == 900


def test_fare_is_non_decreasing_with_distance(calculator: FareCalculator) -> None:
    """Given fixed age and surcharge, when distance grows, then the fare never drops."""
    for age in (5, 10, 15, 30):
        fares = [calculator.calculate_fare(age, distance, 300) for distance in range(0, 130)]
        assert fares == sorted(fares)


def test_fare_never_below_minimum() -> None:
    """Given a deduction larger than the fare, when pricing a child, then the fare clamps to 0."""
    calculator = FareCalculator(FarePolicy(default_fare=200))

    assert calculator.calculate_fare(age=10, distance=5) == 0


def test_fare_for_keeps_inputs(calculator: FareCalculator) -> None:
    """Given a priced trip, when inspecting the Fare, then it carries base amount and inputs."""
    fare = calculator.fare_for(age=20, distance=12, surcharge=500)

    assert fare.base_amount == 1750
    assert fare.surcharge == 500
    assert fare.distance == 12
    assert fare.age == 20
    assert fare.amount == 1850


def test_custom_policy_is_used() -> None:
    """Given a custom policy, when pricing, then its constants drive the fare."""
    policy = FarePolicy(default_fare=1000, distance_increment=50, short_distance_unit=10)
    calculator = FareCalculator(policy)

    assert calculator.policy is policy
    assert calculator.calculate_fare(age=30, distance=25) == 1100
