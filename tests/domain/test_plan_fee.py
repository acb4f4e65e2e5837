"""Plan fee calculator tests: selective discount, bundle discount and ordering policy."""

from dataclasses import replace
from decimal import Decimal

import pytest

from handset_pricing.domain.plan_fee import calculate_plan_fee
from handset_pricing.domain.pricing import ContractType
from handset_pricing.domain.settings import BundleDiscountBase, BundleOption, GlobalSettings

SETTINGS = GlobalSettings()
AFTER_SELECTIVE = replace(SETTINGS, bundle_discount_base=BundleDiscountBase.AFTER_SELECTIVE_DISCOUNT)


# ============================================================================
# CONTRACT TYPE
# ============================================================================


def test_subsidy_discount_pays_full_plan_price() -> None:
    fee = calculate_plan_fee(109_000, ContractType.SUBSIDY_DISCOUNT, BundleOption.NONE, SETTINGS)

    assert fee.plan_base_fee == 109_000
    assert fee.plan_discount == 0
    assert fee.bundle_discount_amount == 0
    assert fee.monthly_plan_fee == 109_000


def test_selective_contract_takes_25_percent_off() -> None:
    fee = calculate_plan_fee(109_000, ContractType.SELECTIVE_CONTRACT, BundleOption.NONE, SETTINGS)

    assert fee.plan_discount == 27_250
    assert fee.monthly_plan_fee == 81_750


@pytest.mark.parametrize(
    ("base_price", "expected_discount"),
    [
        (99_999, 24_999),  # 24,999.75
        (55_001, 13_750),  # 13,750.25
        (33_000, 8_250),
        (1, 0),
    ],
)
def test_selective_discount_is_floored(base_price: int, expected_discount: int) -> None:
    fee = calculate_plan_fee(base_price, ContractType.SELECTIVE_CONTRACT, BundleOption.NONE, SETTINGS)

    assert fee.plan_discount == expected_discount


def test_selective_discount_rate_comes_from_settings() -> None:
    settings = replace(SETTINGS, selective_discount_rate=Decimal("0.20"))

    fee = calculate_plan_fee(109_000, ContractType.SELECTIVE_CONTRACT, BundleOption.NONE, settings)

    assert fee.plan_discount == 21_800


# ============================================================================
# BUNDLE DISCOUNT
# ============================================================================


@pytest.mark.parametrize(
    ("option", "expected"),
    [
        (BundleOption.NONE, 0),
        (BundleOption.INTERNET, 5_450),
        (BundleOption.INTERNET_TV, 10_900),
    ],
)
def test_bundle_discount_rates(option: BundleOption, expected: int) -> None:
    fee = calculate_plan_fee(109_000, ContractType.SUBSIDY_DISCOUNT, option, SETTINGS)

    assert fee.bundle_discount_amount == expected
    assert fee.monthly_plan_fee == 109_000 - expected


def test_bundle_on_plan_base_price_stacks_with_selective_discount() -> None:
    fee = calculate_plan_fee(
        109_000, ContractType.SELECTIVE_CONTRACT, BundleOption.INTERNET_TV, SETTINGS
    )

    assert fee.plan_discount == 27_250
    assert fee.bundle_discount_amount == 10_900
    assert fee.monthly_plan_fee == 70_850


def test_bundle_after_selective_discount_uses_reduced_fee() -> None:
    fee = calculate_plan_fee(
        109_000, ContractType.SELECTIVE_CONTRACT, BundleOption.INTERNET_TV, AFTER_SELECTIVE
    )

    assert fee.bundle_discount_amount == 8_175
    assert fee.monthly_plan_fee == 73_575


def test_bundle_discount_is_floored() -> None:
    # 5% of 81,750 is 4,087.5
    fee = calculate_plan_fee(
        109_000, ContractType.SELECTIVE_CONTRACT, BundleOption.INTERNET, AFTER_SELECTIVE
    )

    assert fee.bundle_discount_amount == 4_087
    assert fee.monthly_plan_fee == 77_663


def test_ordering_policy_is_irrelevant_without_selective_discount() -> None:
    base = calculate_plan_fee(109_000, ContractType.SUBSIDY_DISCOUNT, BundleOption.INTERNET, SETTINGS)
    after = calculate_plan_fee(
        109_000, ContractType.SUBSIDY_DISCOUNT, BundleOption.INTERNET, AFTER_SELECTIVE
    )

    assert base == after


def test_fee_never_goes_negative() -> None:
    settings = replace(
        SETTINGS,
        selective_discount_rate=Decimal("0.9"),
        bundle_discount_rates={
            BundleOption.NONE: Decimal("0"),
            BundleOption.INTERNET: Decimal("0.5"),
            BundleOption.INTERNET_TV: Decimal("0.5"),
        },
    )

    fee = calculate_plan_fee(
        100_000, ContractType.SELECTIVE_CONTRACT, BundleOption.INTERNET_TV, settings
    )

    assert fee.monthly_plan_fee == 0
