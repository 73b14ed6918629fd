from .store import CacheStore, CacheStats
from .service import CacheService, cache_service

__all__ = ["CacheStore", "CacheStats", "CacheService", "cache_service"]
