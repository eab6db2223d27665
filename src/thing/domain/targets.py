from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from thing.ports.writer import Writer


@dataclass(frozen=True, slots=True)
class FileTarget:
    # LogFile is the least flexible target: it always touches the filesystem.
    path: Path

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))


@dataclass(frozen=True, slots=True)
class LoggerTarget:
    # Logger has more config options but is still a specific type; its owner configures it.
    logger: logging.Logger
    level: int = logging.INFO

    def __post_init__(self) -> None:
        if not isinstance(self.logger, logging.Logger):
            raise TypeError("LoggerTarget.logger must be a logging.Logger")


@dataclass(frozen=True, slots=True)
class WriterTarget:
    # Writer can be anything with write(bytes) -> int; the natural seam for fakes.
    writer: Writer

    def __post_init__(self) -> None:
        if not callable(getattr(self.writer, "write", None)):
            raise TypeError("WriterTarget.writer must provide write(bytes) -> int")


# Exactly one target per Thing makes "one active output" a construction-time fact.
Target = Union[FileTarget, LoggerTarget, WriterTarget]
