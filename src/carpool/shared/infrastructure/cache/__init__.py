from .cache_aside import CacheAside
from .in_memory_cache_service import InMemoryCacheService
from .redis_cache_service import RedisCacheService

__all__ = ["CacheAside", "InMemoryCacheService", "RedisCacheService"]
