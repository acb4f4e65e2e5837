"""InMemoryCatalogRepository contract tests."""

from __future__ import annotations

from handset_pricing.adapters.in_memory_catalog_repository import InMemoryCatalogRepository
from handset_pricing.domain.catalog import Catalog
from handset_pricing.ports.catalog_repository import CatalogRepository


def test_is_a_catalog_repository(catalog: Catalog) -> None:
    assert isinstance(InMemoryCatalogRepository(catalog), CatalogRepository)


def test_returns_the_same_snapshot_every_call(catalog: Catalog) -> None:
    repository = InMemoryCatalogRepository(catalog)

    assert repository.load_catalog() is catalog
    assert repository.load_catalog() is repository.load_catalog()
