# util/types.py
from typing import Dict, List, Literal, TypedDict

# Flow: category name -> filenames, in backing-store listing order.
Catalog = Dict[str, List[str]]

CacheStatusLabel = Literal["hit", "miss"]


class MetricLabels(TypedDict):
    filename: str
    category: str
    region: str


class DurationLabels(MetricLabels):
    cache_status: CacheStatusLabel
