from __future__ import annotations

from dataclasses import dataclass

from handset_pricing.domain.catalog import JoinType, Plan, SubsidyEntry
from handset_pricing.domain.errors import NotFoundError
from handset_pricing.domain.subsidy import subsidies_by_plan
from handset_pricing.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class ListPlanSubsidiesRequest:
    plan_id: str


@dataclass(frozen=True, slots=True)
class ListPlanSubsidiesResponse:
    plan: Plan
    subsidies: dict[JoinType, list[SubsidyEntry]]


class ListPlanSubsidies:
    """Exposed subsidy entries of one plan per join type, limited to exposed devices."""

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: ListPlanSubsidiesRequest) -> ListPlanSubsidiesResponse:
        catalog = self._repository.load_catalog()

        plan = catalog.find_plan(request.plan_id)
        if plan is None:
            raise NotFoundError(resource="Plan", identifier=request.plan_id)

        exposed_device_ids = {device.id for device in catalog.exposed_devices()}
        subsidies = {
            join_type: [entry for entry in entries if entry.device_id in exposed_device_ids]
            for join_type, entries in subsidies_by_plan(catalog, plan.id).items()
        }

        return ListPlanSubsidiesResponse(plan=plan, subsidies=subsidies)
