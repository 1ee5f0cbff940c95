"""Tour reporters: in-memory recording, fan-out and turtle script export."""

from .reporters import TourReporter, RecordingReporter, MultiReporter
from .turtle_script import TurtleScriptReporter

__all__ = [
    "TourReporter",
    "RecordingReporter",
    "MultiReporter",
    "TurtleScriptReporter",
]
