"""Get device by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from handset_pricing.domain.catalog import Device
from handset_pricing.domain.errors import NotFoundError
from handset_pricing.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class GetDeviceByIdRequest:
    device_id: str


@dataclass(frozen=True, slots=True)
class GetDeviceByIdResponse:
    device: Device


class GetDeviceById:
    """
    Use case for retrieving a single exposed device.

    Hidden devices are reported exactly like unknown ones.
    """

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: GetDeviceByIdRequest) -> GetDeviceByIdResponse:
        """
        Raises:
            NotFoundError: If the device doesn't exist or is hidden
        """
        device = self._repository.load_catalog().find_device(request.device_id)

        if device is None:
            raise NotFoundError(resource="Device", identifier=request.device_id)

        return GetDeviceByIdResponse(device=device)
