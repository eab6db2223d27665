from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from thing.ports.writer import Writer


@dataclass
class StdoutWriter(Writer):
    # Standard output adapter: raw bytes in, nothing appended.
    # stream=None resolves sys.stdout on every write so capture tools can swap it.
    stream: TextIO | None = field(default=None, repr=False)

    def write(self, data: bytes) -> int:
        stream = self.stream if self.stream is not None else sys.stdout
        # Keep ordering with anything already buffered in the text layer.
        stream.flush()
        raw = getattr(stream, "buffer", None)
        if raw is not None:
            raw.write(data)
            raw.flush()
        else:
            # Text-only streams (doctest, StringIO) get the decoded form.
            encoding = getattr(stream, "encoding", None) or "utf-8"
            stream.write(bytes(data).decode(encoding, errors="replace"))
            stream.flush()
        return len(data)
