from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock

from thing.ports.writer import Writer


@dataclass
class SynchronizedWriter(Writer):
    # Serializes writes at the boundary; the wrapped writer stays lock-free.
    writer: Writer
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    def write(self, data: bytes) -> int:
        with self._lock:
            return self.writer.write(data)
