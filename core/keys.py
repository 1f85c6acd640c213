# core/keys.py
from typing import Optional
from core.entities import ObjectPathParts
from util.constants import UNCATEGORIZED


def to_cache_key(category: Optional[str], filename: str) -> str:
    """
    Canonical cache key (and object-store key) for a requested file.

    - "<category>/<filename>" when category is non-empty, else filename as-is.
    - Deterministic; no normalisation. An empty category therefore collides
      with the bare filename: ("", "a.pdf") and (None, "a.pdf") both map to "a.pdf".
    - ".." segments pass through untouched; callers that need sanitising must
      do it before calling.
    """
    if category:
        return f"{category}/{filename}"
    return filename


def split_object_path(path: str) -> ObjectPathParts:
    """
    Split on the first "/". A category is only reported when both sides are
    non-empty; otherwise the whole path is the filename.
    """
    category, sep, filename = path.partition("/")
    if sep and category and filename:
        return ObjectPathParts(category=category, filename=filename)
    return ObjectPathParts(category=None, filename=path)


def category_label(category: Optional[str]) -> str:
    return category or UNCATEGORIZED


def is_pseudo_directory(path: str) -> bool:
    return not path or path.endswith("/")
