from __future__ import annotations

from typing import Protocol, runtime_checkable


# Writer port is the only capability a generic sink has to offer.
# sys.stdout.buffer, binary file handles and io.BytesIO satisfy it structurally.
@runtime_checkable
class Writer(Protocol):
    def write(self, data: bytes) -> int:
        """Accept ``data`` and return the number of bytes taken; raise OSError on failure."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("Writer is a port; use a concrete adapter.")
