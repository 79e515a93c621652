"""
features – feature-flag evaluation library.

Import path convention::

    from features import Features, FeatureFlag, MemoryEngine
    from features.kernel.errors import NotFoundError, ScopedFlagError
    from features.adapters.redis import RedisEngine
    from features.adapters.fastapi import FeaturesRouter
"""

from features.bucketing import bucket
from features.engine import Engine, FeatureFlag, FeatureFlagKey, MemoryEngine, User
from features.features import Features

__version__ = "0.1.0"
__all__ = [
    "Engine",
    "FeatureFlag",
    "FeatureFlagKey",
    "Features",
    "MemoryEngine",
    "User",
    "__version__",
    "bucket",
]
