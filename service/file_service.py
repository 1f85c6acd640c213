# service/file_service.py
import logging
from typing import List, Optional
from core.catalog import build_catalog
from core.entities import RetrievalResult
from core.keys import (
    category_label,
    is_pseudo_directory,
    split_object_path,
    to_cache_key,
)
from core.metrics import MetricsRecorder
from repository.cache_repository import CacheRepository
from repository.object_store_repository import ObjectStoreRepository
from util.constants import CACHE_TTL_SECONDS, DEFAULT_CONTENT_TYPE
from util.enums import BackingStoreFailure, CacheLookupStatus, CacheStatus
from util.errors import BackingStoreError
from util.timing import Stopwatch
from util.types import Catalog

logger = logging.getLogger(__name__)


class FileService:
    def __init__(
        self,
        cache: CacheRepository,
        store: ObjectStoreRepository,
        metrics: MetricsRecorder,
    ) -> None:
        self._cache = cache
        self._store = store
        self._metrics = metrics

    async def retrieve(self, category: Optional[str], filename: str) -> RetrievalResult:
        """
        Cache-aside read: lookup -> (on miss) fetch -> store.
        Cache trouble degrades to a plain object-store read; object-store
        failures raise BackingStoreError and leave the cache untouched.
        Logs: key, outcome and size only (no payloads).
        """
        sw = Stopwatch()
        key = to_cache_key(category, filename)
        label = category_label(category)

        # Empty keys and "dir/" markers are never files; nothing is cached or counted.
        if is_pseudo_directory(key):
            logger.warning("file.key.rejected key=%r", key)
            raise BackingStoreError(BackingStoreFailure.NOT_FOUND, "fetch", key)

        lookup = await self._cache.lookup(key)
        if lookup.hit:
            entry = lookup.entry
            duration = sw.stop()
            self._metrics.record_outcome(filename, label, CacheStatus.HIT, duration)
            logger.info("file.hit key=%s bytes=%d", key, len(entry.body))
            return RetrievalResult(
                key=key,
                body=entry.body,
                content_type=entry.content_type or DEFAULT_CONTENT_TYPE,
                cache_status=CacheStatus.HIT,
            )

        if lookup.status == CacheLookupStatus.UNAVAILABLE:
            logger.warning("file.cache.bypass key=%s", key)

        try:
            obj = await self._store.fetch(key)
        except BackingStoreError as e:
            logger.error("file.fetch.error key=%s kind=%s", key, e.kind.value)
            raise

        stored = await self._cache.store(
            key, obj.body, obj.content_type, CACHE_TTL_SECONDS
        )
        duration = sw.stop()
        self._metrics.record_outcome(filename, label, CacheStatus.MISS, duration)
        logger.info(
            "file.miss key=%s bytes=%d cached=%s", key, len(obj.body), stored
        )
        return RetrievalResult(
            key=key,
            body=obj.body,
            content_type=obj.content_type,
            cache_status=CacheStatus.MISS,
        )

    async def retrieve_path(self, path: str) -> RetrievalResult:
        """Flat addressing: "docs/a.pdf" shares a cache entry with ("docs", "a.pdf")."""
        parts = split_object_path(path)
        return await self.retrieve(parts.category, parts.filename)

    async def list_files(self, prefix: Optional[str] = None) -> List[str]:
        keys = await self._store.list(prefix)
        return [k for k in keys if not is_pseudo_directory(k)]

    async def catalog(self, prefix: Optional[str] = None) -> Catalog:
        keys = await self._store.list(prefix)
        catalog = build_catalog(keys)
        logger.info("catalog.built keys=%d categories=%d", len(keys), len(catalog))
        return catalog
