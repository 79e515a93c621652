"""Testing support – fakes and contract suites.

The contract suite imports ``pytest``; install ``features[test]``.
"""

from features.testing.fakes import RecordingEngine

__all__ = ["RecordingEngine"]
