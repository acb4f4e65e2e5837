from __future__ import annotations

from handset_pricing.domain.catalog import Device, Plan, SubsidyEntry
from handset_pricing.domain.paging import Paging
from handset_pricing.entrypoints.http.dtos.catalog import (
    DeviceColorDTO,
    DeviceResponseDTO,
    DeviceSearchResponseDTO,
    DevicesSearchQueryDTO,
    DeviceSubsidiesResponseDTO,
    PlanCategoryDTO,
    PlanListResponseDTO,
    PlanResponseDTO,
    PlanSubsidiesResponseDTO,
    PlanSubsidyResponseDTO,
    SubsidyResponseDTO,
)
from handset_pricing.use_cases.list_device_subsidies import ListDeviceSubsidiesResponse
from handset_pricing.use_cases.list_plan_subsidies import ListPlanSubsidiesResponse
from handset_pricing.use_cases.list_plans import ListPlansResponse
from handset_pricing.use_cases.search_devices import (
    SearchDevicesRequest,
    SearchDevicesResponse,
)


class CatalogMapper:
    """Maps between REST DTOs and domain models for catalog browsing."""

    @staticmethod
    def to_search_request(dto: DevicesSearchQueryDTO) -> SearchDevicesRequest:
        return SearchDevicesRequest(
            brand=dto.brand,
            paging=Paging(offset=dto.offset, limit=dto.limit),
        )

    @staticmethod
    def to_device_response(device: Device) -> DeviceResponseDTO:
        return DeviceResponseDTO(
            id=device.id,
            brand=device.brand,
            model=device.model,
            storage_gb=device.storage_gb,
            list_price=device.list_price,
            colors=[
                DeviceColorDTO(code=color.code, name=color.name, hex=color.hex)
                for color in device.colors
            ],
        )

    @staticmethod
    def to_search_response(
        result: SearchDevicesResponse,
        offset: int,
        limit: int,
    ) -> DeviceSearchResponseDTO:
        """
        Converts search result to REST response with pagination metadata.

        Args:
            result: Matching devices and total count
            offset: Current offset (echoed from request)
            limit: Current limit (echoed from request)
        """
        return DeviceSearchResponseDTO(
            devices=[CatalogMapper.to_device_response(device) for device in result.devices],
            total=result.total_count,
            offset=offset,
            limit=limit,
        )

    @staticmethod
    def to_subsidy_response(entry: SubsidyEntry) -> SubsidyResponseDTO:
        return SubsidyResponseDTO(
            plan_id=entry.plan_id,
            common_subsidy=entry.common_subsidy,
            additional_subsidy=entry.additional_subsidy,
            select_subsidy=entry.select_subsidy,
        )

    @staticmethod
    def to_device_subsidies_response(
        result: ListDeviceSubsidiesResponse,
    ) -> DeviceSubsidiesResponseDTO:
        return DeviceSubsidiesResponseDTO(
            device_id=result.device.id,
            subsidies={
                join_type.value: [CatalogMapper.to_subsidy_response(entry) for entry in entries]
                for join_type, entries in result.subsidies.items()
            },
        )

    @staticmethod
    def to_plan_subsidies_response(result: ListPlanSubsidiesResponse) -> PlanSubsidiesResponseDTO:
        return PlanSubsidiesResponseDTO(
            plan_id=result.plan.id,
            subsidies={
                join_type.value: [
                    PlanSubsidyResponseDTO(
                        device_id=entry.device_id,
                        common_subsidy=entry.common_subsidy,
                        additional_subsidy=entry.additional_subsidy,
                        select_subsidy=entry.select_subsidy,
                    )
                    for entry in entries
                ]
                for join_type, entries in result.subsidies.items()
            },
        )

    @staticmethod
    def to_plan_response(plan: Plan) -> PlanResponseDTO:
        return PlanResponseDTO(
            id=plan.id,
            name=plan.name,
            category_id=plan.category_id,
            category_name=plan.category_name,
            base_price=plan.base_price,
            data=plan.data,
            voice=plan.voice,
            sms=plan.sms,
            benefits=list(plan.benefits),
        )

    @staticmethod
    def to_plan_list_response(result: ListPlansResponse) -> PlanListResponseDTO:
        return PlanListResponseDTO(
            plans=[CatalogMapper.to_plan_response(plan) for plan in result.plans],
            categories=[
                PlanCategoryDTO(id=category.id, name=category.name)
                for category in result.categories
            ],
        )
