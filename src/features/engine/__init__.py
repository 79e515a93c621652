"""Engine – flag records, the storage port, and the in-memory backend."""
from features.engine.engine import Engine
from features.engine.feature_flag import FeatureFlag, FeatureFlagKey, User
from features.engine.memory import MemoryEngine

__all__ = ["Engine", "FeatureFlag", "FeatureFlagKey", "MemoryEngine", "User"]
