from fastapi import APIRouter, Depends

from handset_pricing.entrypoints.http.dependencies import (
    get_calculate_device_price_use_case,
    get_compare_contract_types_use_case,
)
from handset_pricing.entrypoints.http.dtos.pricing import (
    CalculateRequestDTO,
    CompareRequestDTO,
    ComparisonResponseDTO,
    PriceBreakdownDTO,
)
from handset_pricing.entrypoints.http.error_responses import ErrorResponse
from handset_pricing.entrypoints.http.mappers.pricing_mapper import PricingMapper
from handset_pricing.use_cases.calculate_device_price import CalculateDevicePrice
from handset_pricing.use_cases.compare_contract_types import CompareContractTypes

router = APIRouter(tags=["Pricing"])

ERROR_RESPONSES: dict[int | str, dict] = {
    404: {"description": "Device, plan or combination not found", "model": ErrorResponse},
    422: {"description": "Validation error", "model": ErrorResponse},
    503: {"description": "Catalog data unusable", "model": ErrorResponse},
}


@router.post(
    "/pricing/calculate",
    response_model=PriceBreakdownDTO,
    summary="Calculate monthly price",
    description="""
    Price a device on a plan for one join type, contract type, installment
    term and bundle option.

    ## Contract types
    - subsidy_discount (공시지원): common + additional subsidy off the device,
      full-price plan
    - selective_contract (선택약정): select subsidy off the device, plan
      discounted by the catalog's selective discount rate (25%)

    ## Calculation
    - principal = max(0, list_price - applied subsidy)
    - monthly_installment: equal-payment amortization at the catalog's annual
      rate (5.9%), rounded to the catalog's rounding unit (10 won);
      0 for a cash purchase (installment_months = 0)
    - total_monthly = monthly_installment + monthly_plan_fee

    ## Example
    ```
    POST /v1/pricing/calculate
    {
        "device_id": "galaxy-s24-256gb",
        "plan_id": "5g-premium",
        "join_type": "change",
        "contract_type": "selective_contract",
        "installment_months": 24
    }
    ```
    """,
    responses=ERROR_RESPONSES,
)
def calculate_price(
    payload: CalculateRequestDTO,
    use_case: CalculateDevicePrice = Depends(get_calculate_device_price_use_case),
) -> PriceBreakdownDTO:
    """Parse → execute → map → return."""
    request = PricingMapper.to_calculation_input(payload)
    result = use_case.execute(request)
    return PricingMapper.to_breakdown(result)


@router.post(
    "/pricing/compare",
    response_model=ComparisonResponseDTO,
    summary="Compare contract types",
    description="""
    Price the same selection under both contract types and recommend the one
    with the lower total cost.

    - Financed: total cost = total_monthly × installment_months
    - Cash purchase: total cost = principal + monthly_plan_fee × contract term
    - A tie recommends subsidy_discount
    """,
    responses=ERROR_RESPONSES,
)
def compare_contract_types(
    payload: CompareRequestDTO,
    use_case: CompareContractTypes = Depends(get_compare_contract_types_use_case),
) -> ComparisonResponseDTO:
    request = PricingMapper.to_comparison_input(payload)
    result = use_case.execute(request)
    return PricingMapper.to_comparison_response(result)
