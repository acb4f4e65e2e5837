from __future__ import annotations

import logging

from handset_pricing.domain.amortization import amortize
from handset_pricing.domain.catalog import Catalog
from handset_pricing.domain.errors import NotFoundError
from handset_pricing.domain.plan_fee import calculate_plan_fee
from handset_pricing.domain.pricing import (
    CalculationInput,
    CalculationResult,
    ContractType,
    SelectiveContractResult,
    SelectiveContractSubsidy,
    SubsidyDiscountResult,
    SubsidyDiscountSubsidy,
)
from handset_pricing.domain.subsidy import resolve_subsidy
from handset_pricing.ports.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


def calculate_price(request: CalculationInput, catalog: Catalog) -> CalculationResult:
    """
    Price one (device, plan, join type, contract type, term, bundle) selection.

    Pure function of its arguments: the same input against the same catalog
    snapshot always yields an equal result.

    Order of operations:
    1. Refuse an inconsistent catalog
    2. Validate the selection before any lookup
    3. Resolve exposed device, plan and subsidy entry
    4. Apply the contract type's subsidy, amortize the principal
    5. Add the discounted plan fee

    Raises:
        DataIntegrityError: If the catalog snapshot is incomplete or inconsistent
        ValidationError: If the selection has invalid fields
        NotFoundError: If the device, plan or combination is unknown or hidden
    """
    catalog.validate()
    settings = catalog.settings
    request.validate(settings)

    device = catalog.find_device(request.device_id)
    if device is None:
        raise NotFoundError(resource="Device", identifier=request.device_id)

    plan = catalog.find_plan(request.plan_id)
    if plan is None:
        raise NotFoundError(resource="Plan", identifier=request.plan_id)

    entry = resolve_subsidy(catalog.subsidies, device.id, plan.id, request.join_type)

    applied_subsidy: SubsidyDiscountSubsidy | SelectiveContractSubsidy
    if request.contract_type is ContractType.SUBSIDY_DISCOUNT:
        applied_subsidy = SubsidyDiscountSubsidy(
            common_subsidy=entry.common_subsidy,
            additional_subsidy=entry.additional_subsidy,
        )
    else:
        applied_subsidy = SelectiveContractSubsidy(select_subsidy=entry.select_subsidy)

    # Subsidy larger than the list price leaves nothing to finance
    principal = max(0, device.list_price - applied_subsidy.total)
    monthly_installment = amortize(
        principal,
        request.installment_months,
        settings.annual_interest_rate,
        settings.rounding_unit,
        settings.rounding_policy,
    )

    fee = calculate_plan_fee(plan.base_price, request.contract_type, request.bundle_option, settings)

    fields = dict(
        join_type=request.join_type,
        installment_months=request.installment_months,
        bundle_option=request.bundle_option,
        list_price=device.list_price,
        principal=principal,
        monthly_installment=monthly_installment,
        plan_base_fee=fee.plan_base_fee,
        plan_discount=fee.plan_discount,
        bundle_discount_amount=fee.bundle_discount_amount,
        monthly_plan_fee=fee.monthly_plan_fee,
        total_monthly=monthly_installment + fee.monthly_plan_fee,
    )

    if isinstance(applied_subsidy, SubsidyDiscountSubsidy):
        return SubsidyDiscountResult(applied_subsidy=applied_subsidy, **fields)
    return SelectiveContractResult(applied_subsidy=applied_subsidy, **fields)


class CalculateDevicePrice:
    """Price a selection against the current catalog snapshot."""

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: CalculationInput) -> CalculationResult:
        result = calculate_price(request, self._repository.load_catalog())

        logger.debug(
            "Price calculated",
            extra={
                "device_id": request.device_id,
                "plan_id": request.plan_id,
                "join_type": result.join_type.value,
                "contract_type": result.contract_type.value,
                "installment_months": result.installment_months,
                "total_monthly": result.total_monthly,
            },
        )
        return result
