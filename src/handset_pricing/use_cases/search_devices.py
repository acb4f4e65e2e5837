from __future__ import annotations

from dataclasses import dataclass

from handset_pricing.domain.catalog import Device
from handset_pricing.domain.paging import Paging
from handset_pricing.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class SearchDevicesRequest:
    brand: str | None = None
    paging: Paging = Paging()


@dataclass(frozen=True, slots=True)
class SearchDevicesResponse:
    devices: list[Device]
    total_count: int  # Matching exposed devices before paging


class SearchDevices:
    """
    List exposed devices, optionally filtered by brand, with pagination.

    Brand matching is case-insensitive and exact. Devices keep catalog order.
    """

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: SearchDevicesRequest) -> SearchDevicesResponse:
        """
        Execute device search.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        request.paging.validate()

        devices = self._repository.load_catalog().exposed_devices()
        if request.brand:
            brand = request.brand.casefold()
            devices = [device for device in devices if device.brand.casefold() == brand]

        start = request.paging.offset
        return SearchDevicesResponse(
            devices=devices[start : start + request.paging.limit],
            total_count=len(devices),
        )
