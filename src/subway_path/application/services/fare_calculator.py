"""Fare calculator service."""

from subway_path.domain.models.fare import Fare
from subway_path.domain.models.fare_policy import FarePolicy


class FareCalculator:
    """Prices a trip from its distance, the rider's age and the line surcharge."""

    def __init__(self, policy: FarePolicy | None = None) -> None:
        """Initialize with a fare policy, defaulting to the standard one."""
        self._policy = policy or FarePolicy()

    @property
    def policy(self) -> FarePolicy:
        return self._policy

    def calculate_fare(self, age: int, distance: int, surcharge: int = 0) -> int:
        """Calculate the fare a rider pays.

        Args:
            age: Rider age in years.
            distance: Travelled distance in km.
            surcharge: Flat line surcharge added on top of the distance fare.

        Returns:
            Fare amount, never below the policy's minimum fare.
        """
        return self.fare_for(age, distance, surcharge).amount

    def fare_for(self, age: int, distance: int, surcharge: int = 0) -> Fare:
        """Calculate the fare and return it with the inputs it was priced from."""
        base_amount = self._policy.default_fare + surcharge
        fare = base_amount + self.distance_increment(distance)
        amount = max(self._policy.minimum_fare, self._apply_age_discount(fare, age))
        return Fare(
            base_amount=base_amount,
            surcharge=surcharge,
            distance=distance,
            age=age,
            amount=amount,
        )

    def distance_increment(self, distance: int) -> int:
        """Return the extra fare owed for distance beyond the base distance."""
        policy = self._policy
        if distance <= policy.base_distance:
            return 0

        short_over = min(distance, policy.long_distance) - policy.base_distance
        increment = self._units(short_over, policy.short_distance_unit)

        if distance > policy.long_distance:
            long_over = distance - policy.long_distance
            increment += self._units(long_over, policy.long_distance_unit)

        return increment * policy.distance_increment

    @staticmethod
    def _units(over_distance: int, unit: int) -> int:
        # Partial units count as a full unit
        return -(-over_distance // unit)

    def _apply_age_discount(self, fare: int, age: int) -> int:
        policy = self._policy
        if age < policy.infant_age_limit:
            return policy.minimum_fare
        if age < policy.child_age_limit:
            return self._discount(fare, policy.child_discount_percent)
        if age < policy.teen_age_limit:
            return self._discount(fare, policy.teen_discount_percent)
        return fare

    def _discount(self, fare: int, percent: int) -> int:
        remainder = max(fare - self._policy.discount_deduction, 0)
        return remainder * (100 - percent) // 100
