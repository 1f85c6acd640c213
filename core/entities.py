# core/entities.py
from dataclasses import dataclass
from typing import NamedTuple, Optional
from util.enums import CacheLookupStatus, CacheStatus


class ObjectPathParts(NamedTuple):
    category: Optional[str]
    filename: str


@dataclass(frozen=True)
class CachedObject:
    body: bytes
    content_type: Optional[str]  # None for entries written without a content type


@dataclass(frozen=True)
class CacheLookup:
    """
    Result of a cache read. UNAVAILABLE means the backend failed and the
    caller should fall through to the object store exactly as on a MISS.
    """

    status: CacheLookupStatus
    entry: Optional[CachedObject] = None

    @property
    def hit(self) -> bool:
        return self.status == CacheLookupStatus.HIT and self.entry is not None


@dataclass(frozen=True)
class StoredObject:
    body: bytes
    content_type: str


@dataclass(frozen=True)
class RetrievalResult:
    key: str
    body: bytes
    content_type: str
    cache_status: CacheStatus
