"""Fare policy domain model."""

from dataclasses import dataclass

DEFAULT_FARE = 1250
MINIMUM_FARE = 0


@dataclass(frozen=True)
class FarePolicy:
    """Constants of the distance-tiered, age-discounted fare policy.

    Distance up to ``base_distance`` costs ``default_fare``. Beyond it, every
    started ``short_distance_unit`` adds ``distance_increment`` up to
    ``long_distance``; past ``long_distance`` every started
    ``long_distance_unit`` adds ``distance_increment``.

    Riders younger than ``infant_age_limit`` ride free. Younger than
    ``child_age_limit`` and ``teen_age_limit`` respectively, the fare is reduced
    by ``discount_deduction`` and then discounted by the matching percent.
    """

    default_fare: int = DEFAULT_FARE
    minimum_fare: int = MINIMUM_FARE
    base_distance: int = 10
    long_distance: int = 50
    short_distance_unit: int = 5
    long_distance_unit: int = 8
    distance_increment: int = 100
    discount_deduction: int = 350
    infant_age_limit: int = 6
    child_age_limit: int = 13
    teen_age_limit: int = 19
    child_discount_percent: int = 50
    teen_discount_percent: int = 20
