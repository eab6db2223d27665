from __future__ import annotations

import logging
from dataclasses import dataclass

from thing.adapters.stdout_writer import StdoutWriter

from .errors import TargetMismatchError
from .targets import FileTarget, LoggerTarget, Target, WriterTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Thing:
    """A message plus the single output it should go to.

    The three ``write_*`` operations are independent; each one only works
    against its own kind of target and raises ``TargetMismatchError`` otherwise.
    ``emit`` picks the operation matching the target.
    """

    message: str | bytes
    target: Target
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        # Messages are text or raw bytes, nothing else.
        if not isinstance(self.message, (str, bytes, bytearray)):
            raise TypeError(f"Thing.message must be str or bytes, got {type(self.message).__name__}")

    def payload(self) -> bytes:
        # Message bytes exactly as they go out: no header, no line terminator.
        if isinstance(self.message, str):
            return self.message.encode(self.encoding)
        return bytes(self.message)

    def write_log_file(self) -> None:
        # Create (or truncate) the file and write the message; OSError from open/write/close propagates.
        target = self._require(FileTarget, "write_log_file")
        data = self.payload()
        with target.path.open("wb") as handle:
            handle.write(data)
        logger.debug("wrote %d bytes to %s", len(data), target.path)

    def write_logger(self) -> None:
        # Fire-and-forget: handler failures are handled by logging itself, nothing is returned.
        target = self._require(LoggerTarget, "write_logger")
        text = self.message if isinstance(self.message, str) else self.message.decode(self.encoding, errors="replace")
        target.logger.log(target.level, "%s", text)

    def write_writer(self) -> None:
        # One write call with the whole buffer; short writes are trusted, not retried.
        target = self._require(WriterTarget, "write_writer")
        data = self.payload()
        target.writer.write(data)
        logger.debug("wrote %d bytes to %r", len(data), target.writer)

    def emit(self) -> None:
        # Dispatch on the active target.
        if isinstance(self.target, FileTarget):
            self.write_log_file()
        elif isinstance(self.target, LoggerTarget):
            self.write_logger()
        elif isinstance(self.target, WriterTarget):
            self.write_writer()
        else:
            raise TypeError(f"Unsupported target: {type(self.target).__name__}")

    def _require(self, kind: type, operation: str):
        if not isinstance(self.target, kind):
            raise TargetMismatchError(operation, kind, self.target)
        return self.target


def new_thing(message: str | bytes) -> Thing:
    """Default happy-path constructor: the message goes to standard output.

    >>> new_thing("hello").write_writer()
    hello
    """
    return Thing(message=message, target=WriterTarget(StdoutWriter()))
