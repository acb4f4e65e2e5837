from fastapi import APIRouter, Depends

from handset_pricing.entrypoints.http.dependencies import (
    get_list_plan_subsidies_use_case,
    get_list_plans_use_case,
)
from handset_pricing.entrypoints.http.dtos.catalog import (
    PlanListResponseDTO,
    PlansQueryDTO,
    PlanSubsidiesResponseDTO,
)
from handset_pricing.entrypoints.http.error_responses import ErrorResponse
from handset_pricing.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from handset_pricing.use_cases.list_plan_subsidies import (
    ListPlanSubsidies,
    ListPlanSubsidiesRequest,
)
from handset_pricing.use_cases.list_plans import ListPlans, ListPlansRequest

router = APIRouter(tags=["Plans"])


@router.get(
    "/plans",
    response_model=PlanListResponseDTO,
    summary="List plans",
    description="Exposed plans, optionally of one category, plus every category that has an exposed plan.",
)
def get_plans(
    query: PlansQueryDTO = Depends(),
    use_case: ListPlans = Depends(get_list_plans_use_case),
) -> PlanListResponseDTO:
    result = use_case.execute(ListPlansRequest(category_id=query.category_id))
    return CatalogMapper.to_plan_list_response(result)


@router.get(
    "/plans/{plan_id}/subsidies",
    response_model=PlanSubsidiesResponseDTO,
    summary="List plan subsidies",
    description="Exposed subsidy entries of a plan keyed by join type (change, transfer, new).",
    responses={404: {"description": "Plan not found", "model": ErrorResponse}},
)
def get_plan_subsidies(
    plan_id: str,
    use_case: ListPlanSubsidies = Depends(get_list_plan_subsidies_use_case),
) -> PlanSubsidiesResponseDTO:
    result = use_case.execute(ListPlanSubsidiesRequest(plan_id=plan_id))
    return CatalogMapper.to_plan_subsidies_response(result)
