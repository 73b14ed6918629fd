"""
Generic orchestration for one entity: pagination clamping, cache lookups,
concurrent count + page queries, invalidation after writes, and the uniform
ServiceResponse envelope.

Every public method returns a ServiceResponse. ServiceError subclasses map to
their status code; anything else is logged and answered with a generic 500.
"""
from __future__ import annotations

import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Mapping, Optional, Tuple

from ..cache import CacheService, cache_service
from ..constants import CACHE_TTL, ERROR_MESSAGES, SUCCESS_MESSAGES
from ..domain.pagination import clamp_pagination, pagination_block
from ..domain.query_builder import normalize_filters
from ..domain.response import ServiceResponse
from ..errors import NotFoundError, PersistenceError, ServiceError, ValidationError
from ..logs import LogContext
from ..repository.base import DbResult, EntityRepository
from .utils import require_fields

logger = logging.getLogger(__name__)

# count and page queries for one list call run side by side here
_query_pool = ThreadPoolExecutor(max_workers=8, thread_name_prefix="gym-query")


def enveloped(fn):
    @functools.wraps(fn)
    def wrapper(self, *args, **kwargs) -> ServiceResponse:
        try:
            return fn(self, *args, **kwargs)
        except ServiceError as e:
            return ServiceResponse.from_error(e)
        except Exception:
            logger.exception("Error in %s.%s", type(self).__name__, fn.__name__)
            return ServiceResponse.fail(500, ERROR_MESSAGES["SERVER_ERROR"])
    return wrapper


def _unwrap(res: DbResult) -> Any:
    if res.status:
        return res.data
    if res.not_found:
        raise NotFoundError(res.message)
    raise PersistenceError(res.message)


class EntityService:
    required_fields: Tuple[str, ...] = ()

    def __init__(
        self,
        repo: EntityRepository,
        module_key: str,
        list_key: str,
        item_key: str,
        cache: Optional[CacheService] = None,
    ):
        self.repo = repo
        self.module_key = module_key
        self.list_key = list_key
        self.item_key = item_key
        self.cache = cache or cache_service

    # -- hooks ---------------------------------------------------------------
    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_fields(data, self.required_fields)
        return data

    def prepare_update(self, data: Dict[str, Any], current: Dict[str, Any]) -> Dict[str, Any]:
        return data

    # -- helpers -------------------------------------------------------------
    def clean_filters(self, filters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        return normalize_filters(self.repo.spec.filters, filters)

    def _list_response(self, payload: Dict[str, Any]) -> ServiceResponse:
        res = ServiceResponse.ok(SUCCESS_MESSAGES["FETCHED"])
        res.set_data(self.list_key, payload["items"])
        res.set_data("pagination", {k: payload[k] for k in ("total", "page", "limit", "totalPages")})
        return res

    def _load(self, item_id: Any) -> Dict[str, Any]:
        cached = self.cache.get_item_cache(self.module_key, item_id)
        if cached is not None:
            return cached
        row = _unwrap(self.repo.get_by_id(item_id))
        self.cache.set_item_cache(self.module_key, item_id, row, CACHE_TTL["MEDIUM"])
        return row

    def _existing(self, item_id: Any) -> Dict[str, Any]:
        res = self.repo.get_by_id(item_id)
        if res.not_found:
            raise NotFoundError(ERROR_MESSAGES["RESOURCE_NOT_FOUND"])
        return _unwrap(res)

    def invalidate(self, item_id: Any = None) -> None:
        self.cache.invalidate_module_cache(self.module_key)
        if item_id is not None:
            self.cache.delete_item_cache(self.module_key, item_id)

    # -- operations ----------------------------------------------------------
    @enveloped
    def list(self, page: Optional[int] = None, limit: Optional[int] = None,
             filters: Optional[Mapping[str, Any]] = None) -> ServiceResponse:
        page, limit = clamp_pagination(page, limit)
        clean = self.clean_filters(filters)

        cached = self.cache.get_list_cache(self.module_key, page, limit, clean)
        if cached is not None:
            return self._list_response(cached)

        rows_future = _query_pool.submit(self.repo.fetch_page, clean, page, limit)
        count_future = _query_pool.submit(self.repo.count, clean)
        rows_res, count_res = rows_future.result(), count_future.result()
        items = _unwrap(rows_res)
        total = _unwrap(count_res)

        payload = {"items": items, **pagination_block(total, page, limit)}
        self.cache.set_list_cache(self.module_key, page, limit, clean, payload, CACHE_TTL["MEDIUM"])
        return self._list_response(payload)

    @enveloped
    def get_by_id(self, item_id: Any, only_status: Any = None) -> ServiceResponse:
        row = self._load(item_id)
        if only_status is not None and row.get("status") != only_status:
            raise NotFoundError(f"{self.repo.spec.label.capitalize()} not found")
        return ServiceResponse.ok(SUCCESS_MESSAGES["FETCHED"], **{self.item_key: row})

    @enveloped
    def create(self, data: Mapping[str, Any], log: Optional[LogContext] = None) -> ServiceResponse:
        prepared = self.prepare_create(dict(data))
        row = _unwrap(self.repo.insert(prepared))
        self.invalidate()
        if log:
            log.set_entity(self.item_key, row.get(self.repo.spec.id_column))
            log.set_after(row)
        return ServiceResponse.ok(SUCCESS_MESSAGES["CREATED"], status_code=201, **{self.item_key: row})

    @enveloped
    def update(self, item_id: Any, data: Mapping[str, Any], log: Optional[LogContext] = None) -> ServiceResponse:
        current = self._existing(item_id)
        prepared = self.prepare_update(dict(data), current)
        if not any(c in prepared for c in self.repo.spec.update_columns):
            raise ValidationError(ERROR_MESSAGES["NO_FIELDS_TO_UPDATE"])
        row = _unwrap(self.repo.update(item_id, prepared))
        self.invalidate(item_id)
        if log:
            log.set_entity(self.item_key, item_id)
            log.set_before(current)
            log.set_after(row)
        return ServiceResponse.ok(SUCCESS_MESSAGES["UPDATED"], **{self.item_key: row})

    @enveloped
    def delete(self, item_id: Any, log: Optional[LogContext] = None) -> ServiceResponse:
        current = self._existing(item_id)
        _unwrap(self.repo.delete(item_id))
        self.invalidate(item_id)
        if log:
            log.set_entity(self.item_key, item_id)
            log.set_before(current)
        return ServiceResponse.ok(SUCCESS_MESSAGES["DELETED"])

    @enveloped
    def export(self, filters: Optional[Mapping[str, Any]] = None) -> ServiceResponse:
        rows = _unwrap(self.repo.fetch_all(self.clean_filters(filters)))
        return ServiceResponse.ok(SUCCESS_MESSAGES["EXPORT_READY"], **{self.list_key: rows})

    @enveloped
    def summary(self) -> ServiceResponse:
        counts = self.cache.get_stats_cache(self.module_key)
        if counts is None:
            counts = _unwrap(self.repo.count_by_status())
            self.cache.set_stats_cache(self.module_key, counts, CACHE_TTL["SHORT"])
        return ServiceResponse.ok(SUCCESS_MESSAGES["FETCHED"], summary=counts, total=sum(counts.values()))
