from __future__ import annotations

import logging
from typing import cast

from handset_pricing.domain.catalog import Catalog
from handset_pricing.domain.pricing import (
    CalculationResult,
    ComparisonInput,
    ComparisonResult,
    ContractType,
    SelectiveContractResult,
    SubsidyDiscountResult,
)
from handset_pricing.domain.settings import GlobalSettings
from handset_pricing.ports.catalog_repository import CatalogRepository
from handset_pricing.use_cases.calculate_device_price import calculate_price

logger = logging.getLogger(__name__)


def _total_cost(result: CalculationResult, months: int) -> int:
    # Cash purchase: the principal is paid up front
    if result.installment_months == 0:
        return result.principal + result.monthly_plan_fee * months
    return result.total_monthly * months


def _comparison_months(installment_months: int, settings: GlobalSettings) -> int:
    return installment_months or settings.contract_term_months


def compare_contract_types(request: ComparisonInput, catalog: Catalog) -> ComparisonResult:
    """
    Price the same selection under both contract types and recommend one.

    Total cost is measured over the installment term, or over the contract
    term for a cash purchase. The cheaper total wins; a tie goes to
    subsidy_discount.
    """
    catalog.validate()
    request.validate(catalog.settings)

    subsidy_discount = cast(
        SubsidyDiscountResult,
        calculate_price(request.with_contract_type(ContractType.SUBSIDY_DISCOUNT), catalog),
    )
    selective_contract = cast(
        SelectiveContractResult,
        calculate_price(request.with_contract_type(ContractType.SELECTIVE_CONTRACT), catalog),
    )

    months = _comparison_months(request.installment_months, catalog.settings)
    subsidy_total = _total_cost(subsidy_discount, months)
    selective_total = _total_cost(selective_contract, months)

    if selective_total < subsidy_total:
        recommendation = ContractType.SELECTIVE_CONTRACT
    else:
        recommendation = ContractType.SUBSIDY_DISCOUNT

    return ComparisonResult(
        subsidy_discount=subsidy_discount,
        selective_contract=selective_contract,
        comparison_months=months,
        subsidy_discount_total_cost=subsidy_total,
        selective_contract_total_cost=selective_total,
        monthly_difference=abs(subsidy_discount.total_monthly - selective_contract.total_monthly),
        total_cost_difference=abs(subsidy_total - selective_total),
        recommendation=recommendation,
    )


class CompareContractTypes:
    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: ComparisonInput) -> ComparisonResult:
        result = compare_contract_types(request, self._repository.load_catalog())

        logger.debug(
            "Contract types compared",
            extra={
                "device_id": request.device_id,
                "plan_id": request.plan_id,
                "comparison_months": result.comparison_months,
                "recommendation": result.recommendation.value,
                "total_cost_difference": result.total_cost_difference,
            },
        )
        return result
