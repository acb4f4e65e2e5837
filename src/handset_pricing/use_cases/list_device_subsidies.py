from __future__ import annotations

from dataclasses import dataclass

from handset_pricing.domain.catalog import Device, JoinType, SubsidyEntry
from handset_pricing.domain.errors import NotFoundError
from handset_pricing.domain.subsidy import subsidies_by_device
from handset_pricing.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class ListDeviceSubsidiesRequest:
    device_id: str


@dataclass(frozen=True, slots=True)
class ListDeviceSubsidiesResponse:
    device: Device
    subsidies: dict[JoinType, list[SubsidyEntry]]


class ListDeviceSubsidies:
    """
    Exposed subsidy entries of one device, per join type.

    Entries whose plan is hidden are left out so every listed plan can be priced.
    """

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: ListDeviceSubsidiesRequest) -> ListDeviceSubsidiesResponse:
        catalog = self._repository.load_catalog()

        device = catalog.find_device(request.device_id)
        if device is None:
            raise NotFoundError(resource="Device", identifier=request.device_id)

        exposed_plan_ids = {plan.id for plan in catalog.exposed_plans()}
        subsidies = {
            join_type: [entry for entry in entries if entry.plan_id in exposed_plan_ids]
            for join_type, entries in subsidies_by_device(catalog, device.id).items()
        }

        return ListDeviceSubsidiesResponse(device=device, subsidies=subsidies)
