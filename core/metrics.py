# core/metrics.py
import logging
from prometheus_client import CollectorRegistry, Counter, Histogram
from util.constants import REQUEST_DURATION_BUCKETS
from util.enums import CacheStatus
from util.types import DurationLabels, MetricLabels

logger = logging.getLogger(__name__)

_LABELS = ("filename", "category", "region")


class MetricsRecorder:
    """
    Per-file cache efficiency and latency metrics.

    Bound to an explicit registry so tests can use a fresh CollectorRegistry
    while the app uses the process-wide one. prometheus_client increments are
    lock-protected, so concurrent requests never lose updates.
    """

    def __init__(self, registry: CollectorRegistry, region: str) -> None:
        self._region = region
        self._views = Counter(
            "file_view_total",
            "Total number of file views",
            _LABELS,
            registry=registry,
        )
        self._hits = Counter(
            "cache_hits_total",
            "Total number of cache hits",
            _LABELS,
            registry=registry,
        )
        self._misses = Counter(
            "cache_misses_total",
            "Total number of cache misses",
            _LABELS,
            registry=registry,
        )
        self._duration = Histogram(
            "file_request_duration_seconds",
            "File request duration in seconds",
            _LABELS + ("cache_status",),
            buckets=REQUEST_DURATION_BUCKETS,
            registry=registry,
        )

    @property
    def region(self) -> str:
        return self._region

    def labels(self, filename: str, category: str) -> MetricLabels:
        return {"filename": filename, "category": category, "region": self._region}

    def record_view(self, filename: str, category: str) -> None:
        self._views.labels(**self.labels(filename, category)).inc()

    def record_hit(self, filename: str, category: str) -> None:
        self._hits.labels(**self.labels(filename, category)).inc()

    def record_miss(self, filename: str, category: str) -> None:
        self._misses.labels(**self.labels(filename, category)).inc()

    def observe_duration(self, labels: DurationLabels, duration_seconds: float) -> None:
        self._duration.labels(**labels).observe(duration_seconds)

    def record_outcome(
        self,
        filename: str,
        category: str,
        status: CacheStatus,
        duration_seconds: float,
    ) -> None:
        """Call exactly once per terminal Hit/Miss outcome."""
        self.record_view(filename, category)
        if status == CacheStatus.HIT:
            self.record_hit(filename, category)
        else:
            self.record_miss(filename, category)
        labels: DurationLabels = {
            **self.labels(filename, category),
            "cache_status": status.value,
        }
        self.observe_duration(labels, duration_seconds)
        logger.debug(
            "metrics.outcome file=%s category=%s status=%s s=%.4f",
            filename,
            category,
            status.value,
            duration_seconds,
        )
