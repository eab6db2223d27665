from __future__ import annotations

import io
import sys

import pytest

# Writer is the generic sink capability: write(bytes) -> int, OSError on failure.
from thing.adapters import RecordingWriter, StdoutWriter, SynchronizedWriter
from thing.ports.writer import Writer


def test_writer_port_default_raises() -> None:
    # Direct port calls without an adapter are wiring errors (port methods raise by default).
    class _PortOnly(Writer):
        pass

    port = _PortOnly()  # type: ignore[misc,abstract]
    with pytest.raises(NotImplementedError):
        port.write(b"hi")


def test_writer_port_is_structural() -> None:
    # Anything with write() satisfies the port without inheriting it.
    assert isinstance(io.BytesIO(), Writer)
    assert isinstance(sys.stdout.buffer, Writer)
    assert not isinstance(object(), Writer)


def test_adapters_satisfy_writer_port() -> None:
    # Project adapters are all valid Writer implementations.
    assert isinstance(StdoutWriter(), Writer)
    assert isinstance(RecordingWriter(), Writer)
    assert isinstance(SynchronizedWriter(RecordingWriter()), Writer)
