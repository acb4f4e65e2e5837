from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal

from handset_pricing.domain.pricing import ContractType
from handset_pricing.domain.settings import BundleDiscountBase, BundleOption, GlobalSettings


@dataclass(frozen=True, slots=True)
class PlanFee:
    plan_base_fee: int
    plan_discount: int
    bundle_discount_amount: int
    monthly_plan_fee: int


def _floor_share(amount: int, rate: Decimal) -> int:
    return int((Decimal(amount) * rate).to_integral_value(rounding=ROUND_FLOOR))


def calculate_plan_fee(
    plan_base_price: int,
    contract_type: ContractType,
    bundle_option: BundleOption,
    settings: GlobalSettings,
) -> PlanFee:
    """
    Monthly plan fee after contract and bundle discounts.

    - Selective contract: plan discount = floor(base * selective_discount_rate)
    - Subsidy discount: no plan discount
    - Bundle discount is floored and computed off the amount chosen by
      settings.bundle_discount_base
    - The fee never goes below zero
    """
    if contract_type is ContractType.SELECTIVE_CONTRACT:
        plan_discount = _floor_share(plan_base_price, settings.selective_discount_rate)
    else:
        plan_discount = 0

    if settings.bundle_discount_base is BundleDiscountBase.AFTER_SELECTIVE_DISCOUNT:
        bundle_base = plan_base_price - plan_discount
    else:
        bundle_base = plan_base_price

    bundle_discount_amount = _floor_share(bundle_base, settings.bundle_discount_rate(bundle_option))

    return PlanFee(
        plan_base_fee=plan_base_price,
        plan_discount=plan_discount,
        bundle_discount_amount=bundle_discount_amount,
        monthly_plan_fee=max(0, plan_base_price - plan_discount - bundle_discount_amount),
    )
