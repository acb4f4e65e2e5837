from __future__ import annotations

import pytest

from handset_pricing.adapters.in_memory_catalog_repository import InMemoryCatalogRepository
from handset_pricing.domain.catalog import Catalog, JoinType
from handset_pricing.domain.errors import NotFoundError
from handset_pricing.use_cases.list_device_subsidies import (
    ListDeviceSubsidies,
    ListDeviceSubsidiesRequest,
)


@pytest.fixture
def use_case(catalog: Catalog) -> ListDeviceSubsidies:
    return ListDeviceSubsidies(InMemoryCatalogRepository(catalog))


def test_groups_subsidies_by_join_type(use_case: ListDeviceSubsidies) -> None:
    response = use_case.execute(ListDeviceSubsidiesRequest(device_id="galaxy-s24-256gb"))

    assert response.device.id == "galaxy-s24-256gb"
    assert [entry.plan_id for entry in response.subsidies[JoinType.CHANGE]] == [
        "5g-premium",
        "lte-basic",
    ]
    assert [entry.plan_id for entry in response.subsidies[JoinType.TRANSFER]] == ["5g-premium"]
    assert [entry.plan_id for entry in response.subsidies[JoinType.NEW]] == ["5g-premium"]


def test_leaves_out_entries_for_hidden_plans(use_case: ListDeviceSubsidies) -> None:
    response = use_case.execute(ListDeviceSubsidiesRequest(device_id="galaxy-s24-256gb"))

    plan_ids = {entry.plan_id for entries in response.subsidies.values() for entry in entries}
    assert "5g-slim-2023" not in plan_ids


def test_leaves_out_hidden_entries(use_case: ListDeviceSubsidies) -> None:
    response = use_case.execute(ListDeviceSubsidiesRequest(device_id="galaxy-a35-128gb"))

    assert response.subsidies[JoinType.TRANSFER] == []


def test_hidden_device_raises_not_found(use_case: ListDeviceSubsidies) -> None:
    with pytest.raises(NotFoundError):
        use_case.execute(ListDeviceSubsidiesRequest(device_id="galaxy-z-flip5-256gb"))
