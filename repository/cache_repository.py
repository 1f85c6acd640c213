# repository/cache_repository.py
import logging
from typing import Optional
from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError
from core.entities import CachedObject, CacheLookup
from model.cache import CacheEnvelope
from repository.namespaces import OBJECTS
from util import functions
from util.constants import CACHE_TTL_SECONDS
from util.enums import CacheLookupStatus

logger = logging.getLogger(__name__)


class CacheRepository:
    """
    Redis-backed, fail-soft byte cache keyed by CacheKey.

    Flow:
    - lookup(): HIT with decoded bytes, MISS, or UNAVAILABLE when Redis errors.
      One MGET reads the namespaced entry and, as a fallback, a bare-base64
      value left under the un-prefixed key by older writers.
    - store(): SET with EX ttl; returns False instead of raising on failure.
    - Single attempt per call; no retries.
    """

    def __init__(self, client: Redis, ttl_seconds: int = CACHE_TTL_SECONDS) -> None:
        self._client = client
        self._ttl = int(ttl_seconds)

    @property
    def ttl(self) -> int:
        return self._ttl

    @staticmethod
    def _key(cache_key: str) -> str:
        return f"{OBJECTS}:{cache_key}"

    @staticmethod
    def _encode(body: bytes, content_type: Optional[str]) -> bytes:
        envelope = CacheEnvelope(
            body=functions.encode_body(body), contentType=content_type
        )
        return envelope.model_dump_json().encode("utf-8")

    @staticmethod
    def _decode(raw: bytes | str) -> CachedObject:
        envelope = CacheEnvelope.model_validate_json(raw)
        return CachedObject(
            body=functions.decode_body(envelope.body),
            content_type=envelope.contentType,
        )

    @staticmethod
    def _decode_legacy(raw: bytes | str) -> CachedObject:
        # Legacy writers stored bare base64 under the un-prefixed key, without a content type.
        return CachedObject(body=functions.decode_body(raw), content_type=None)

    async def lookup(self, cache_key: str) -> CacheLookup:
        try:
            raw, legacy = await self._client.mget([self._key(cache_key), cache_key])
        except (RedisError, OSError) as e:
            logger.warning("cache.lookup.error key=%s err=%s", cache_key, type(e).__name__)
            return CacheLookup(status=CacheLookupStatus.UNAVAILABLE)

        if raw is not None:
            decode, value = self._decode, raw
        elif legacy is not None:
            decode, value = self._decode_legacy, legacy
        else:
            return CacheLookup(status=CacheLookupStatus.MISS)

        try:
            entry = decode(value)
        except (ValidationError, ValueError):
            # Treat unreadable entries as absent; the miss path writes a fresh one.
            logger.warning("cache.lookup.malformed key=%s legacy=%s", cache_key, raw is None)
            return CacheLookup(status=CacheLookupStatus.MISS)

        if raw is None:
            logger.info("cache.lookup.legacy key=%s", cache_key)
        return CacheLookup(status=CacheLookupStatus.HIT, entry=entry)

    async def store(
        self,
        cache_key: str,
        body: bytes,
        content_type: Optional[str] = None,
        ttl_seconds: Optional[int] = None,
    ) -> bool:
        ttl = int(ttl_seconds) if ttl_seconds is not None else self._ttl
        try:
            await self._client.set(
                self._key(cache_key), self._encode(body, content_type), ex=ttl
            )
        except (RedisError, OSError) as e:
            logger.warning("cache.store.error key=%s err=%s", cache_key, type(e).__name__)
            return False
        logger.debug("cache.store.ok key=%s bytes=%d ttl=%d", cache_key, len(body), ttl)
        return True
