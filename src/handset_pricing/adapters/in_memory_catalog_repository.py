from __future__ import annotations

from handset_pricing.domain.catalog import Catalog
from handset_pricing.ports.catalog_repository import CatalogRepository


class InMemoryCatalogRepository(CatalogRepository):
    """
    Canonical contract implementation for tests.

    - Holds a single snapshot
    - Returns the same snapshot object on every call
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def load_catalog(self) -> Catalog:
        return self._catalog
