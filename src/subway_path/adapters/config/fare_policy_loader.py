"""Fare policy loader."""

from subway_path.adapters.config.app_config import AppConfig
from subway_path.domain.models.fare_policy import FarePolicy


class FarePolicyLoader:
    """Builds the fare policy from app config."""

    @staticmethod
    def load(config: AppConfig) -> FarePolicy:
        """Load the fare policy from app config."""
        return FarePolicy(
            default_fare=config.default_fare,
            minimum_fare=config.minimum_fare,
            base_distance=config.base_distance,
            long_distance=config.long_distance,
            short_distance_unit=config.short_distance_unit,
            long_distance_unit=config.long_distance_unit,
            distance_increment=config.distance_increment,
            discount_deduction=config.discount_deduction,
            infant_age_limit=config.infant_age_limit,
            child_age_limit=config.child_age_limit,
            teen_age_limit=config.teen_age_limit,
            child_discount_percent=config.child_discount_percent,
            teen_discount_percent=config.teen_discount_percent,
        )
