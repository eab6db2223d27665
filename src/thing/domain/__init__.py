from .errors import TargetMismatchError
from .targets import FileTarget, LoggerTarget, Target, WriterTarget
from .thing import Thing, new_thing

__all__ = [
    "FileTarget",
    "LoggerTarget",
    "Target",
    "TargetMismatchError",
    "Thing",
    "WriterTarget",
    "new_thing",
]
