from __future__ import annotations

from dataclasses import dataclass, field

from thing.ports.writer import Writer


@dataclass
class RecordingWriter(Writer):
    # In-memory Writer fake: records every write instead of persisting it.
    # Single-threaded by contract; wrap in SynchronizedWriter for concurrent writers.
    records: list[bytes] = field(default_factory=list)

    def write(self, data: bytes) -> int:
        # Copy so later mutation of a bytearray/memoryview does not rewrite history.
        self.records.append(bytes(data))
        return len(data)

    def contains(self, data: bytes | str) -> bool:
        """Return True if any recorded write equals ``data`` exactly."""
        expected = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        return any(record == expected for record in self.records)

    def assert_wrote(self, data: bytes | str) -> None:
        # Ties the assertion to the fake so tests read as behavior, not bookkeeping.
        if not self.contains(data):
            shown = data if isinstance(data, str) else bytes(data).decode("utf-8", errors="replace")
            raise AssertionError(f"'{shown}' was not written")
