"""Redis adapter – RedisEngine."""
from features.adapters.redis.engine import RedisEngine

__all__ = ["RedisEngine"]
