from __future__ import annotations

from decimal import Decimal

from handset_pricing.domain.errors import ValidationError
from handset_pricing.domain.settings import RoundingPolicy


class InvalidAmortizationInput(ValidationError):
    pass


def round_to_unit(value: Decimal, unit: int, policy: RoundingPolicy) -> int:
    """
    Round an amount to a multiple of `unit` won.

    Example: 37634.23 with unit 10 → 37630 (HALF_UP), 37630 (FLOOR), 37640 (CEILING)
    """
    unit_amount = Decimal(unit)
    units = (value / unit_amount).quantize(Decimal("1"), rounding=policy.decimal_rounding)
    return int(units * unit_amount)


def amortize(
    principal: int,
    months: int,
    annual_rate: Decimal,
    rounding_unit: int = 1,
    rounding_policy: RoundingPolicy = RoundingPolicy.HALF_UP,
) -> int:
    """
    Monthly payment of an equal-installment loan, in whole won.

    Rounding policy:
    - All intermediate calculations use full precision Decimal
    - Only the final payment is rounded, to `rounding_unit` using `rounding_policy`

    Args:
        principal: Amount financed (device price after subsidy)
        months: Installment term; 0 means a cash purchase
        annual_rate: Annual interest rate (e.g., Decimal("0.059") = 5.9%)
        rounding_unit: Payment is a multiple of this many won
        rounding_policy: Rounding direction

    Returns:
        Monthly payment (0 for a cash purchase)

    Raises:
        InvalidAmortizationInput: If any argument is out of range
    """
    if months < 0:
        raise InvalidAmortizationInput("months must be >= 0", months=months)
    if principal < 0:
        raise InvalidAmortizationInput("principal must be >= 0", principal=principal)
    if annual_rate < 0:
        raise InvalidAmortizationInput("annual_rate must be >= 0", annual_rate=str(annual_rate))
    if rounding_unit <= 0:
        raise InvalidAmortizationInput("rounding_unit must be > 0", rounding_unit=rounding_unit)

    # Cash purchase
    if months == 0:
        return 0

    amount = Decimal(principal)
    monthly_rate = annual_rate / Decimal("12")

    # Standard amortized loan payment:
    # payment = P * (r*(1+r)^n) / ((1+r)^n - 1)
    if monthly_rate == 0:
        payment = amount / Decimal(months)
    else:
        one = Decimal("1")
        factor = (one + monthly_rate) ** months
        payment = amount * (monthly_rate * factor) / (factor - one)

    return round_to_unit(payment, rounding_unit, rounding_policy)
