"""12-factor configuration adapter using environment variables and a TOML network file."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Network configuration
    network_file: str | None = Field(
        default="network.toml",
        description="Path to TOML file describing stations and lines",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level for the CLI")

    # Fare policy
    default_fare: int = Field(default=1250, description="Fare for trips up to base_distance")
    minimum_fare: int = Field(default=0, description="Lowest fare ever charged")
    base_distance: int = Field(
        default=10, description="Distance in km covered by the default fare"
    )
    long_distance: int = Field(
        default=50, description="Distance in km after which the long distance unit applies"
    )
    short_distance_unit: int = Field(
        default=5,
        description="Started km per increment between base_distance and long_distance",
    )
    long_distance_unit: int = Field(
        default=8, description="Started km per increment beyond long_distance"
    )
    distance_increment: int = Field(default=100, description="Fare added per distance unit")
    discount_deduction: int = Field(
        default=350, description="Amount deducted before a child or teen discount"
    )
    infant_age_limit: int = Field(default=6, description="Riders younger than this ride free")
    child_age_limit: int = Field(
        default=13, description="Riders younger than this get the child discount"
    )
    teen_age_limit: int = Field(
        default=19, description="Riders younger than this get the teen discount"
    )
    child_discount_percent: int = Field(default=50, description="Child discount in percent")
    teen_discount_percent: int = Field(default=20, description="Teen discount in percent")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("short_distance_unit", "long_distance_unit")
    @classmethod
    def validate_distance_unit(cls, v: int) -> int:
        """Validate distance units are positive."""
        if v <= 0:
            raise ValueError("distance units must be positive")
        return v

    @field_validator("child_discount_percent", "teen_discount_percent")
    @classmethod
    def validate_discount_percent(cls, v: int) -> int:
        """Validate discounts are between 0 and 100 percent."""
        if not 0 <= v <= 100:
            raise ValueError("discount percent must be between 0 and 100")
        return v

    @model_validator(mode="after")
    def validate_ranges(self) -> "AppConfig":
        """Validate age limits and distance thresholds are ascending."""
        if not self.infant_age_limit <= self.child_age_limit <= self.teen_age_limit:
            raise ValueError("age limits must be ascending: infant <= child <= teen")
        if self.base_distance > self.long_distance:
            raise ValueError("base_distance must not exceed long_distance")
        return self

    def load_network_data(self) -> dict[str, Any]:
        """Load and parse the TOML network file."""
        if not self.network_file:
            raise ValueError("network_file must be set to load the network")

        network_path = Path(self.network_file)
        if not network_path.exists():
            raise FileNotFoundError(f"Network file not found: {network_path}")

        with open(network_path, "rb") as f:
            return tomllib.load(f)
