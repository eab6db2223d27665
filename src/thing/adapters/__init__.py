from .recording_writer import RecordingWriter
from .stdout_writer import StdoutWriter
from .synchronized_writer import SynchronizedWriter

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "RecordingWriter",
    "StdoutWriter",
    "SynchronizedWriter",
]
