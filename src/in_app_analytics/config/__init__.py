"""Settings model and YAML loader for in-app analytics."""

from .loader import ConfigurationLoader, load_settings
from .settings import AnalyticsSettings

__all__ = ["AnalyticsSettings", "ConfigurationLoader", "load_settings"]
