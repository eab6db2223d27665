from .loader import ConfigError, build_thing, load_config, parse_config
from .models import FileTargetConfig, LoggerTargetConfig, StdoutTargetConfig, ThingConfig

# Config exports are intentionally small.
__all__ = [
    "ConfigError",
    "FileTargetConfig",
    "LoggerTargetConfig",
    "StdoutTargetConfig",
    "ThingConfig",
    "build_thing",
    "load_config",
    "parse_config",
]
