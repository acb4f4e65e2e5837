from __future__ import annotations

from dataclasses import dataclass

from handset_pricing.domain.catalog import Plan
from handset_pricing.ports.catalog_repository import CatalogRepository


@dataclass(frozen=True, slots=True)
class PlanCategory:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class ListPlansRequest:
    category_id: str | None = None


@dataclass(frozen=True, slots=True)
class ListPlansResponse:
    plans: list[Plan]
    categories: list[PlanCategory]  # All categories with an exposed plan, unfiltered


class ListPlans:
    """Exposed plans, optionally restricted to one category."""

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        self._repository = catalog_repository

    def execute(self, request: ListPlansRequest) -> ListPlansResponse:
        plans = self._repository.load_catalog().exposed_plans()

        # First occurrence wins so categories keep catalog order
        categories: dict[str, PlanCategory] = {}
        for plan in plans:
            categories.setdefault(
                plan.category_id, PlanCategory(id=plan.category_id, name=plan.category_name)
            )

        if request.category_id:
            plans = [plan for plan in plans if plan.category_id == request.category_id]

        return ListPlansResponse(plans=plans, categories=list(categories.values()))
