from __future__ import annotations

from ..catalog.config import DEFAULT_CATALOG_CONFIG
from ..catalog.loader import load_catalog
from ..catalog.models import Catalog

_catalog: Catalog | None = None


def get_catalog() -> Catalog:
    """Return the process-wide vehicle catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config=DEFAULT_CATALOG_CONFIG)
    return _catalog
