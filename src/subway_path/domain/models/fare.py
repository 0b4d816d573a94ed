"""Fare domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Fare:
    """A priced trip.

    ``base_amount`` is the default fare plus the applied line surcharge, before
    any distance increment or age discount; ``amount`` is what the rider pays.
    """

    base_amount: int
    surcharge: int
    distance: int
    age: int
    amount: int
