from .adapters import RecordingWriter, StdoutWriter, SynchronizedWriter
from .config import ConfigError, ThingConfig, build_thing, load_config
from .domain import (
    FileTarget,
    LoggerTarget,
    Target,
    TargetMismatchError,
    Thing,
    WriterTarget,
    new_thing,
)
from .ports import Writer

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "FileTarget",
    "LoggerTarget",
    "RecordingWriter",
    "StdoutWriter",
    "SynchronizedWriter",
    "Target",
    "TargetMismatchError",
    "Thing",
    "ThingConfig",
    "Writer",
    "WriterTarget",
    "build_thing",
    "load_config",
    "new_thing",
]
