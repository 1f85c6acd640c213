# util/constants.py
from typing import Final

# Cache entries are never refreshed on read; they simply age out.
CACHE_TTL_SECONDS: Final[int] = 3600

UNCATEGORIZED: Final[str] = "Uncategorized"
DEFAULT_CONTENT_TYPE: Final[str] = "application/octet-stream"

REQUEST_DURATION_BUCKETS: Final[tuple] = (0.01, 0.05, 0.1, 0.3, 0.5, 1, 2, 5)


class InternalURIs:
    FILES = "/files"
    FILES_CATEGORIZED = FILES + "/categorized"
    DOWNLOAD = "/download"
    DOWNLOAD_FLAT = DOWNLOAD + "/{path:path}"
    DOWNLOAD_CATEGORIZED = DOWNLOAD + "/{category}/{filename}"
    METRICS = "/metrics"
    HEALTHZ = "/healthz"


class Headers:
    CACHE_STATUS = "X-Cache-Status"
