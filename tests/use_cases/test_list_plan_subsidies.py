from __future__ import annotations

import pytest

from handset_pricing.adapters.in_memory_catalog_repository import InMemoryCatalogRepository
from handset_pricing.domain.catalog import Catalog, JoinType
from handset_pricing.domain.errors import NotFoundError
from handset_pricing.use_cases.list_plan_subsidies import (
    ListPlanSubsidies,
    ListPlanSubsidiesRequest,
)


@pytest.fixture
def use_case(catalog: Catalog) -> ListPlanSubsidies:
    return ListPlanSubsidies(InMemoryCatalogRepository(catalog))


def test_groups_subsidies_by_join_type(use_case: ListPlanSubsidies) -> None:
    response = use_case.execute(ListPlanSubsidiesRequest(plan_id="5g-premium"))

    assert response.plan.id == "5g-premium"
    assert [entry.device_id for entry in response.subsidies[JoinType.CHANGE]] == [
        "galaxy-s24-256gb",
        "galaxy-a35-128gb",
    ]
    assert [entry.device_id for entry in response.subsidies[JoinType.TRANSFER]] == ["galaxy-s24-256gb"]
    assert [entry.device_id for entry in response.subsidies[JoinType.NEW]] == ["galaxy-s24-256gb"]


def test_leaves_out_entries_for_hidden_devices(use_case: ListPlanSubsidies) -> None:
    response = use_case.execute(ListPlanSubsidiesRequest(plan_id="5g-premium"))

    device_ids = {entry.device_id for entries in response.subsidies.values() for entry in entries}
    assert "galaxy-z-flip5-256gb" not in device_ids


def test_leaves_out_hidden_entries(use_case: ListPlanSubsidies) -> None:
    response = use_case.execute(ListPlanSubsidiesRequest(plan_id="lte-basic"))

    assert [entry.device_id for entry in response.subsidies[JoinType.CHANGE]] == ["galaxy-s24-256gb"]
    assert response.subsidies[JoinType.TRANSFER] == []


@pytest.mark.parametrize("plan_id", ["5g-slim-2023", "6g-unlimited"])
def test_hidden_or_unknown_plan_raises_not_found(use_case: ListPlanSubsidies, plan_id: str) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(ListPlanSubsidiesRequest(plan_id=plan_id))

    assert exc_info.value.context["resource"] == "Plan"
