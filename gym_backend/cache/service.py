from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from ..constants import CACHE_KEYS, CACHE_TTL
from .store import CacheStore

logger = logging.getLogger(__name__)


def _serialize_filters(filters: Optional[Mapping[str, Any]]) -> str:
    # sorted keys: equal filter objects built in different orders share a key
    return json.dumps(dict(filters or {}), sort_keys=True, separators=(",", ":"), default=str, ensure_ascii=False)


class CacheService:
    """
    Typed helpers over a CacheStore.

    List keys:  ``{base}_page_{page}_limit_{limit}_filters_{json}``
    Item keys:  ``{base}_item_{id}``
    Stats keys: ``{base}_stats``

    Module invalidation drops every key under ``{base}_``; other modules keep
    their entries. clear_all_cache() is the administrative flush.
    """

    def __init__(self, store: Optional[CacheStore] = None):
        self.store = store or CacheStore(default_ttl=CACHE_TTL["MEDIUM"])

    @staticmethod
    def base_key(module: str) -> str:
        return CACHE_KEYS.get(module, module)

    def list_key(self, module: str, page: int, limit: int, filters: Optional[Mapping[str, Any]] = None) -> str:
        return f"{self.base_key(module)}_page_{page}_limit_{limit}_filters_{_serialize_filters(filters)}"

    def item_key(self, module: str, item_id: Any) -> str:
        return f"{self.base_key(module)}_item_{item_id}"

    def stats_key(self, module: str) -> str:
        return f"{self.base_key(module)}_stats"

    def get_list_cache(self, module: str, page: int, limit: int, filters: Optional[Mapping[str, Any]] = None) -> Any:
        return self.store.get(self.list_key(module, page, limit, filters))

    def set_list_cache(
        self,
        module: str,
        page: int,
        limit: int,
        filters: Optional[Mapping[str, Any]],
        data: Any,
        ttl: int = CACHE_TTL["MEDIUM"],
    ) -> None:
        key = self.list_key(module, page, limit, filters)
        self.store.set(key, data, ttl)
        logger.info("Cache set for %s: %s", module, key)

    def get_item_cache(self, module: str, item_id: Any) -> Any:
        return self.store.get(self.item_key(module, item_id))

    def set_item_cache(self, module: str, item_id: Any, data: Any, ttl: int = CACHE_TTL["MEDIUM"]) -> None:
        key = self.item_key(module, item_id)
        self.store.set(key, data, ttl)
        logger.info("Item cache set for %s: %s", module, key)

    def delete_item_cache(self, module: str, item_id: Any) -> None:
        key = self.item_key(module, item_id)
        self.store.delete(key)
        logger.info("Item cache deleted for %s: %s", module, key)

    def get_stats_cache(self, module: str) -> Any:
        return self.store.get(self.stats_key(module))

    def set_stats_cache(self, module: str, data: Any, ttl: int = CACHE_TTL["SHORT"]) -> None:
        self.store.set(self.stats_key(module), data, ttl)

    def invalidate_module_cache(self, module: str) -> int:
        n = self.store.delete_prefix(f"{self.base_key(module)}_")
        logger.info("Cache invalidated for module %s (%d entries)", module, n)
        return n

    def clear_all_cache(self) -> int:
        n = self.store.flush()
        logger.info("All cache cleared (%d entries)", n)
        return n


cache_service = CacheService()
