# repository/namespaces.py
from typing import Final

ROOT: Final[str] = "objcache"

OBJECTS: Final[str] = f"{ROOT}:objects"  # cached object bodies, keyed by CacheKey
