"""Configuration adapters."""

from subway_path.adapters.config.app_config import AppConfig
from subway_path.adapters.config.fare_policy_loader import FarePolicyLoader
from subway_path.adapters.config.network_loader import NetworkLoader

__all__ = ["AppConfig", "FarePolicyLoader", "NetworkLoader"]
