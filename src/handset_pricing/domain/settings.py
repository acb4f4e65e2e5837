from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class RoundingPolicy(str, Enum):
    """How the monthly installment is rounded to the rounding unit."""

    HALF_UP = "half_up"
    FLOOR = "floor"
    CEILING = "ceiling"

    @property
    def decimal_rounding(self) -> str:
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING = {
    RoundingPolicy.HALF_UP: ROUND_HALF_UP,
    RoundingPolicy.FLOOR: ROUND_FLOOR,
    RoundingPolicy.CEILING: ROUND_CEILING,
}


class BundleOption(str, Enum):
    """Home internet/TV bundle attached to the mobile line."""

    NONE = "none"
    INTERNET = "internet"
    INTERNET_TV = "internet_tv"


class BundleDiscountBase(str, Enum):
    """Amount the bundle discount rate is applied to.

    PLAN_BASE_PRICE: the bundle discount is computed off the plan base price,
    independently of the selective-contract discount, and both are subtracted.

    AFTER_SELECTIVE_DISCOUNT: the bundle discount is computed off the plan fee
    that remains after the selective-contract discount.
    """

    PLAN_BASE_PRICE = "plan_base_price"
    AFTER_SELECTIVE_DISCOUNT = "after_selective_discount"


DEFAULT_BUNDLE_DISCOUNT_RATES: Mapping[BundleOption, Decimal] = MappingProxyType(
    {
        BundleOption.NONE: Decimal("0"),
        BundleOption.INTERNET: Decimal("0.05"),
        BundleOption.INTERNET_TV: Decimal("0.10"),
    }
)


@dataclass(frozen=True, slots=True)
class GlobalSettings:
    """
    Pricing parameters shared by every calculation on a catalog snapshot.

    Passed explicitly with the catalog into each call; there are no
    module-level pricing constants.

    Defaults mirror the storefront's published terms:
    - 5.9% annual installment interest
    - installment rounded half-up to 10 won
    - 25% selective-contract plan discount
    - bundle discounts of 0% / 5% / 10% off the plan base price
    """

    annual_interest_rate: Decimal = Decimal("0.059")
    rounding_unit: int = 10
    rounding_policy: RoundingPolicy = RoundingPolicy.HALF_UP
    selective_discount_rate: Decimal = Decimal("0.25")
    bundle_discount_rates: Mapping[BundleOption, Decimal] = field(
        default_factory=lambda: DEFAULT_BUNDLE_DISCOUNT_RATES
    )
    bundle_discount_base: BundleDiscountBase = BundleDiscountBase.PLAN_BASE_PRICE
    installment_months: frozenset[int] = frozenset({0, 12, 24, 36})
    contract_term_months: int = 24

    def bundle_discount_rate(self, option: BundleOption) -> Decimal:
        return self.bundle_discount_rates[option]

    def problems(self) -> list[str]:
        """
        Collect integrity problems in these settings.

        Returns:
            Human-readable problem descriptions (empty when settings are sound)
        """
        problems: list[str] = []

        # Guardrails: prevent float leakage past the adapter boundary
        for name in ("annual_interest_rate", "selective_discount_rate"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                problems.append(f"settings.{name} must be Decimal")
            elif not value.is_finite():
                problems.append(f"settings.{name} must be finite")
            elif value < 0:
                problems.append(f"settings.{name} must be >= 0")

        if (
            isinstance(self.selective_discount_rate, Decimal)
            and self.selective_discount_rate.is_finite()
            and self.selective_discount_rate > 1
        ):
            problems.append("settings.selective_discount_rate must be <= 1")

        if not isinstance(self.rounding_unit, int) or self.rounding_unit <= 0:
            problems.append("settings.rounding_unit must be a positive integer")

        if not isinstance(self.rounding_policy, RoundingPolicy):
            problems.append("settings.rounding_policy must be a RoundingPolicy")

        if not isinstance(self.bundle_discount_base, BundleDiscountBase):
            problems.append("settings.bundle_discount_base must be a BundleDiscountBase")

        for option in BundleOption:
            rate = self.bundle_discount_rates.get(option)
            if rate is None:
                problems.append(f"settings.bundle_discount_rates is missing '{option.value}'")
            elif (
                not isinstance(rate, Decimal)
                or not rate.is_finite()
                or not Decimal("0") <= rate <= Decimal("1")
            ):
                problems.append(
                    f"settings.bundle_discount_rates['{option.value}'] must be a Decimal in [0, 1]"
                )

        if not self.installment_months:
            problems.append("settings.installment_months must not be empty")
        elif any(months < 0 for months in self.installment_months):
            problems.append("settings.installment_months must not contain negative terms")

        if self.contract_term_months <= 0:
            problems.append("settings.contract_term_months must be > 0")

        return problems
