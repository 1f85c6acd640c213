# core/catalog.py
from typing import Iterable
from core.keys import category_label, is_pseudo_directory, split_object_path
from util.types import Catalog


def build_catalog(keys: Iterable[str]) -> Catalog:
    """
    Group object-store keys by their leading path segment.

    - Empty keys and "dir/" markers are skipped.
    - Keys with no usable category land in "Uncategorized" unchanged.
    - Order inside each list follows the input; nothing is sorted.
    """
    catalog: Catalog = {}
    for key in keys:
        if is_pseudo_directory(key):
            continue
        parts = split_object_path(key)
        catalog.setdefault(category_label(parts.category), []).append(parts.filename)
    return catalog
