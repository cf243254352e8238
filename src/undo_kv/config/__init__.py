from .loader import ConfigError, load_config, parse_config
from .models import LoggingSection, StoreAppConfig, StoreSection

# Config exports are intentionally small.
__all__ = ["ConfigError", "LoggingSection", "StoreAppConfig", "StoreSection", "load_config", "parse_config"]
