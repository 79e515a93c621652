"""Testing contracts – shared behaviour suites for engine implementations."""
from features.testing.contracts.engine import EngineContract

__all__ = ["EngineContract"]
