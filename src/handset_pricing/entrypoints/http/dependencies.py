"""
Dependency injection for FastAPI routes.

Key principle: the catalog repository is a process-wide singleton (it owns
the snapshot cache), while use cases are cheap per-request objects.
Database sessions are opened per catalog reload, never per request.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from handset_pricing.adapters.cached_catalog_repository import CachedCatalogRepository
from handset_pricing.adapters.json_file_catalog_repository import JsonFileCatalogRepository
from handset_pricing.adapters.postgres_catalog_repository import PostgresCatalogRepository
from handset_pricing.domain.catalog import Catalog
from handset_pricing.infra.config import (
    catalog_cache_ttl_seconds,
    catalog_json_path,
    catalog_source,
)
from handset_pricing.infra.db.session import get_session
from handset_pricing.ports.catalog_repository import CatalogRepository
from handset_pricing.use_cases.calculate_device_price import CalculateDevicePrice
from handset_pricing.use_cases.compare_contract_types import CompareContractTypes
from handset_pricing.use_cases.get_device_by_id import GetDeviceById
from handset_pricing.use_cases.list_device_subsidies import ListDeviceSubsidies
from handset_pricing.use_cases.list_plan_subsidies import ListPlanSubsidies
from handset_pricing.use_cases.list_plans import ListPlans
from handset_pricing.use_cases.search_devices import SearchDevices


def load_postgres_catalog() -> Catalog:
    """Load one snapshot inside its own short-lived session."""
    with get_session() as session:
        return PostgresCatalogRepository(session=session).load_catalog()


@lru_cache
def get_catalog_repository() -> CatalogRepository:
    """
    Build the process-wide cached catalog repository.

    The source is chosen by CATALOG_SOURCE (json | postgres) and the
    snapshot lifetime by CATALOG_CACHE_TTL_SECONDS.
    """
    if catalog_source() == "postgres":
        loader = load_postgres_catalog
    else:
        loader = JsonFileCatalogRepository(catalog_json_path()).load_catalog

    return CachedCatalogRepository(loader=loader, ttl_seconds=catalog_cache_ttl_seconds())


def get_calculate_device_price_use_case(
    repository: CatalogRepository = Depends(get_catalog_repository),
) -> CalculateDevicePrice:
    return CalculateDevicePrice(catalog_repository=repository)


def get_compare_contract_types_use_case(
    repository: CatalogRepository = Depends(get_catalog_repository),
) -> CompareContractTypes:
    return CompareContractTypes(catalog_repository=repository)


def get_search_devices_use_case(
    repository: CatalogRepository = Depends(get_catalog_repository),
) -> SearchDevices:
    return SearchDevices(catalog_repository=repository)


def get_device_by_id_use_case(
    repository: CatalogRepository = Depends(get_catalog_repository),
) -> GetDeviceById:
    return GetDeviceById(catalog_repository=repository)


def get_list_device_subsidies_use_case(
    repository: CatalogRepository = Depends(get_catalog_repository),
) -> ListDeviceSubsidies:
    return ListDeviceSubsidies(catalog_repository=repository)


def get_list_plans_use_case(
    repository: CatalogRepository = Depends(get_catalog_repository),
) -> ListPlans:
    return ListPlans(catalog_repository=repository)


def get_list_plan_subsidies_use_case(
    repository: CatalogRepository = Depends(get_catalog_repository),
) -> ListPlanSubsidies:
    return ListPlanSubsidies(catalog_repository=repository)
