from __future__ import annotations

from enum import Enum
from typing import TypeVar

from handset_pricing.domain.catalog import JoinType
from handset_pricing.domain.errors import ValidationError
from handset_pricing.domain.pricing import (
    CalculationInput,
    CalculationResult,
    ComparisonInput,
    ComparisonResult,
    ContractType,
    SubsidyDiscountSubsidy,
)
from handset_pricing.domain.settings import BundleOption
from handset_pricing.entrypoints.http.dtos.pricing import (
    CalculateRequestDTO,
    CompareRequestDTO,
    ComparisonResponseDTO,
    PriceBreakdownDTO,
    SelectiveContractSubsidyDTO,
    SubsidyDiscountSubsidyDTO,
)

E = TypeVar("E", bound=Enum)


def _parse_enum(
    enum_type: type[E],
    value: str,
    field: str,
    code: str,
    errors: list[dict[str, str]],
) -> E | None:
    try:
        return enum_type(value)
    except ValueError:
        errors.append(
            {
                "field": field,
                "message": f"Must be one of {[item.value for item in enum_type]}",
                "code": code,
            }
        )
        return None


class PricingMapper:
    """Maps between REST DTOs and domain models for pricing."""

    @staticmethod
    def to_calculation_input(dto: CalculateRequestDTO) -> CalculationInput:
        """
        Converts request DTO to a domain CalculationInput.

        Handles string → enum conversion at the boundary. Every bad field is
        reported at once.

        Raises:
            ValidationError: If join_type, contract_type or bundle_option is unknown
        """
        errors: list[dict[str, str]] = []

        join_type = _parse_enum(JoinType, dto.join_type, "join_type", "INVALID_JOIN_TYPE", errors)
        contract_type = _parse_enum(
            ContractType, dto.contract_type, "contract_type", "INVALID_CONTRACT_TYPE", errors
        )
        bundle_option = _parse_enum(
            BundleOption, dto.bundle_option, "bundle_option", "INVALID_BUNDLE_OPTION", errors
        )

        if errors:
            raise ValidationError(errors=errors)

        return CalculationInput(
            device_id=dto.device_id,
            plan_id=dto.plan_id,
            join_type=join_type,  # type: ignore[arg-type]
            contract_type=contract_type,  # type: ignore[arg-type]
            installment_months=dto.installment_months,
            bundle_option=bundle_option,  # type: ignore[arg-type]
        )

    @staticmethod
    def to_comparison_input(dto: CompareRequestDTO) -> ComparisonInput:
        """
        Converts request DTO to a domain ComparisonInput.

        Raises:
            ValidationError: If join_type or bundle_option is unknown
        """
        errors: list[dict[str, str]] = []

        join_type = _parse_enum(JoinType, dto.join_type, "join_type", "INVALID_JOIN_TYPE", errors)
        bundle_option = _parse_enum(
            BundleOption, dto.bundle_option, "bundle_option", "INVALID_BUNDLE_OPTION", errors
        )

        if errors:
            raise ValidationError(errors=errors)

        return ComparisonInput(
            device_id=dto.device_id,
            plan_id=dto.plan_id,
            join_type=join_type,  # type: ignore[arg-type]
            installment_months=dto.installment_months,
            bundle_option=bundle_option,  # type: ignore[arg-type]
        )

    @staticmethod
    def to_breakdown(result: CalculationResult) -> PriceBreakdownDTO:
        subsidy = result.applied_subsidy
        applied_subsidy: SubsidyDiscountSubsidyDTO | SelectiveContractSubsidyDTO
        if isinstance(subsidy, SubsidyDiscountSubsidy):
            applied_subsidy = SubsidyDiscountSubsidyDTO(
                common_subsidy=subsidy.common_subsidy,
                additional_subsidy=subsidy.additional_subsidy,
                total=subsidy.total,
            )
        else:
            applied_subsidy = SelectiveContractSubsidyDTO(
                select_subsidy=subsidy.select_subsidy,
                total=subsidy.total,
            )

        return PriceBreakdownDTO(
            contract_type=result.contract_type.value,
            contract_type_name=result.contract_type.display_name,
            join_type=result.join_type.value,
            join_type_name=result.join_type.display_name,
            installment_months=result.installment_months,
            bundle_option=result.bundle_option.value,
            list_price=result.list_price,
            applied_subsidy=applied_subsidy,
            principal=result.principal,
            monthly_installment=result.monthly_installment,
            plan_base_fee=result.plan_base_fee,
            plan_discount=result.plan_discount,
            bundle_discount_amount=result.bundle_discount_amount,
            monthly_plan_fee=result.monthly_plan_fee,
            total_monthly=result.total_monthly,
        )

    @staticmethod
    def to_comparison_response(result: ComparisonResult) -> ComparisonResponseDTO:
        return ComparisonResponseDTO(
            subsidy_discount=PricingMapper.to_breakdown(result.subsidy_discount),
            selective_contract=PricingMapper.to_breakdown(result.selective_contract),
            comparison_months=result.comparison_months,
            subsidy_discount_total_cost=result.subsidy_discount_total_cost,
            selective_contract_total_cost=result.selective_contract_total_cost,
            monthly_difference=result.monthly_difference,
            total_cost_difference=result.total_cost_difference,
            recommendation=result.recommendation.value,
            recommendation_name=result.recommendation.display_name,
        )
