from fastapi import APIRouter, Depends

from handset_pricing.entrypoints.http.dependencies import (
    get_device_by_id_use_case,
    get_list_device_subsidies_use_case,
    get_search_devices_use_case,
)
from handset_pricing.entrypoints.http.dtos.catalog import (
    DeviceResponseDTO,
    DeviceSearchResponseDTO,
    DevicesSearchQueryDTO,
    DeviceSubsidiesResponseDTO,
)
from handset_pricing.entrypoints.http.error_responses import ErrorResponse
from handset_pricing.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from handset_pricing.use_cases.get_device_by_id import GetDeviceById, GetDeviceByIdRequest
from handset_pricing.use_cases.list_device_subsidies import (
    ListDeviceSubsidies,
    ListDeviceSubsidiesRequest,
)
from handset_pricing.use_cases.search_devices import SearchDevices

router = APIRouter(tags=["Devices"])


@router.get(
    "/devices",
    response_model=DeviceSearchResponseDTO,
    summary="List devices",
    description="""
    List exposed devices with an optional brand filter and pagination.

    ## Example
    ```
    GET /v1/devices?brand=Samsung&limit=10
    ```
    """,
)
def get_devices(
    query: DevicesSearchQueryDTO = Depends(),
    use_case: SearchDevices = Depends(get_search_devices_use_case),
) -> DeviceSearchResponseDTO:
    request = CatalogMapper.to_search_request(query)
    result = use_case.execute(request)
    return CatalogMapper.to_search_response(result=result, offset=query.offset, limit=query.limit)


@router.get(
    "/devices/{device_id}",
    response_model=DeviceResponseDTO,
    summary="Get device details",
    responses={404: {"description": "Device not found", "model": ErrorResponse}},
)
def get_device(
    device_id: str,
    use_case: GetDeviceById = Depends(get_device_by_id_use_case),
) -> DeviceResponseDTO:
    result = use_case.execute(GetDeviceByIdRequest(device_id=device_id))
    return CatalogMapper.to_device_response(result.device)


@router.get(
    "/devices/{device_id}/subsidies",
    response_model=DeviceSubsidiesResponseDTO,
    summary="List device subsidies",
    description="Exposed subsidy entries of a device keyed by join type (change, transfer, new).",
    responses={404: {"description": "Device not found", "model": ErrorResponse}},
)
def get_device_subsidies(
    device_id: str,
    use_case: ListDeviceSubsidies = Depends(get_list_device_subsidies_use_case),
) -> DeviceSubsidiesResponseDTO:
    result = use_case.execute(ListDeviceSubsidiesRequest(device_id=device_id))
    return CatalogMapper.to_device_subsidies_response(result)
