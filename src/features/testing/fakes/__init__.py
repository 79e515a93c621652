"""Testing fakes – engine doubles."""
from features.testing.fakes.recording import RecordingEngine

__all__ = ["RecordingEngine"]
