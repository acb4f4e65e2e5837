"""
calculate_price / CalculateDevicePrice tests.

Covers:
- Reference selection under both contract types
- Exclusive subsidy per contract type
- Principal floor at zero, cash purchase, bundles
- Validation happens before any lookup
- Unknown, hidden and missing combinations
- Refusal to run on an inconsistent catalog
- Idempotence
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from unittest.mock import Mock

import pytest

from handset_pricing.adapters.in_memory_catalog_repository import InMemoryCatalogRepository
from handset_pricing.domain.catalog import Catalog, JoinType
from handset_pricing.domain.errors import (
    CombinationUnavailableError,
    DataIntegrityError,
    NotFoundError,
    ValidationError,
)
from handset_pricing.domain.pricing import (
    CalculationInput,
    ContractType,
    SelectiveContractResult,
    SelectiveContractSubsidy,
    SubsidyDiscountResult,
    SubsidyDiscountSubsidy,
)
from handset_pricing.domain.settings import BundleOption, GlobalSettings, RoundingPolicy
from handset_pricing.use_cases.calculate_device_price import CalculateDevicePrice, calculate_price


def _request(**overrides) -> CalculationInput:
    fields = dict(
        device_id="galaxy-s24-256gb",
        plan_id="5g-premium",
        join_type=JoinType.CHANGE,
        contract_type=ContractType.SUBSIDY_DISCOUNT,
        installment_months=24,
        bundle_option=BundleOption.NONE,
    )
    fields.update(overrides)
    return CalculationInput(**fields)


# ============================================================================
# REFERENCE SELECTION
# ============================================================================


def test_subsidy_discount_breakdown(catalog: Catalog) -> None:
    result = calculate_price(_request(), catalog)

    assert isinstance(result, SubsidyDiscountResult)
    assert result.contract_type is ContractType.SUBSIDY_DISCOUNT
    assert result.list_price == 1_250_000
    assert result.applied_subsidy == SubsidyDiscountSubsidy(
        common_subsidy=300_000, additional_subsidy=100_000
    )
    assert result.principal == 850_000
    assert result.monthly_installment == 37_630
    assert result.plan_base_fee == 109_000
    assert result.plan_discount == 0
    assert result.bundle_discount_amount == 0
    assert result.monthly_plan_fee == 109_000
    assert result.total_monthly == 146_630


def test_selective_contract_breakdown(catalog: Catalog) -> None:
    result = calculate_price(_request(contract_type=ContractType.SELECTIVE_CONTRACT), catalog)

    assert isinstance(result, SelectiveContractResult)
    assert result.applied_subsidy == SelectiveContractSubsidy(select_subsidy=50_000)
    assert result.principal == 1_200_000
    assert result.monthly_installment == 53_130
    assert result.plan_discount == 27_250
    assert result.monthly_plan_fee == 81_750
    assert result.total_monthly == 134_880


def test_result_echoes_selection(catalog: Catalog) -> None:
    result = calculate_price(
        _request(join_type=JoinType.TRANSFER, installment_months=36, bundle_option=BundleOption.INTERNET),
        catalog,
    )

    assert result.join_type is JoinType.TRANSFER
    assert result.installment_months == 36
    assert result.bundle_option is BundleOption.INTERNET


def test_total_is_installment_plus_plan_fee(catalog: Catalog) -> None:
    for contract_type in ContractType:
        for months in (0, 12, 24, 36):
            for option in BundleOption:
                result = calculate_price(
                    _request(contract_type=contract_type, installment_months=months, bundle_option=option),
                    catalog,
                )
                assert result.total_monthly == result.monthly_installment + result.monthly_plan_fee


# ============================================================================
# SUBSIDY AND PRINCIPAL
# ============================================================================


def test_join_type_changes_subsidy(catalog: Catalog) -> None:
    result = calculate_price(_request(join_type=JoinType.TRANSFER), catalog)

    assert result.applied_subsidy.total == 600_000
    assert result.principal == 650_000


def test_principal_never_negative(catalog: Catalog) -> None:
    # 650,000 of subsidy on a 499,400 device
    result = calculate_price(_request(device_id="galaxy-a35-128gb"), catalog)

    assert result.principal == 0
    assert result.monthly_installment == 0
    assert result.total_monthly == 109_000


def test_cash_purchase_has_no_installment(catalog: Catalog) -> None:
    result = calculate_price(_request(installment_months=0), catalog)

    assert result.principal == 850_000
    assert result.monthly_installment == 0
    assert result.total_monthly == 109_000


def test_bundle_discount_applies_to_plan_fee(catalog: Catalog) -> None:
    result = calculate_price(
        _request(
            contract_type=ContractType.SELECTIVE_CONTRACT,
            bundle_option=BundleOption.INTERNET_TV,
        ),
        catalog,
    )

    assert result.bundle_discount_amount == 10_900
    assert result.monthly_plan_fee == 70_850
    assert result.total_monthly == 53_130 + 70_850


def test_settings_come_from_catalog(make_catalog) -> None:
    settings = replace(GlobalSettings(), rounding_unit=1, rounding_policy=RoundingPolicy.FLOOR)

    result = calculate_price(_request(), make_catalog(settings=settings))

    assert result.monthly_installment == 37_634


# ============================================================================
# ERRORS
# ============================================================================


def test_invalid_months_fail_before_lookup(catalog: Catalog) -> None:
    # Unknown device too, but validation runs first
    with pytest.raises(ValidationError) as exc_info:
        calculate_price(_request(device_id="unknown", installment_months=18), catalog)

    assert exc_info.value.errors[0]["code"] == "INVALID_INSTALLMENT_MONTHS"


def test_unknown_device(catalog: Catalog) -> None:
    with pytest.raises(NotFoundError, match="Device with identifier 'pixel-9' not found"):
        calculate_price(_request(device_id="pixel-9"), catalog)


def test_hidden_device_is_not_found(catalog: Catalog) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        calculate_price(_request(device_id="galaxy-z-flip5-256gb"), catalog)

    assert exc_info.value.context["resource"] == "Device"


def test_hidden_plan_is_not_found(catalog: Catalog) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        calculate_price(_request(plan_id="5g-slim-2023"), catalog)

    assert exc_info.value.context["resource"] == "Plan"


def test_missing_combination(catalog: Catalog) -> None:
    with pytest.raises(CombinationUnavailableError):
        calculate_price(_request(plan_id="lte-basic", join_type=JoinType.NEW), catalog)


def test_refuses_inconsistent_catalog(make_catalog) -> None:
    catalog = make_catalog(subsidies={JoinType.CHANGE: (), JoinType.TRANSFER: ()})

    with pytest.raises(DataIntegrityError) as exc_info:
        calculate_price(_request(), catalog)

    assert "subsidy table 'new' is missing" in exc_info.value.problems


def test_refuses_invalid_settings(make_catalog) -> None:
    settings = replace(GlobalSettings(), annual_interest_rate=Decimal("-0.059"))

    with pytest.raises(DataIntegrityError):
        calculate_price(_request(), make_catalog(settings=settings))


# ============================================================================
# PROPERTIES
# ============================================================================


def test_idempotent(catalog: Catalog) -> None:
    request = _request(contract_type=ContractType.SELECTIVE_CONTRACT, bundle_option=BundleOption.INTERNET)

    assert calculate_price(request, catalog) == calculate_price(request, catalog)


def test_subsidy_is_exclusive_per_contract_type(catalog: Catalog) -> None:
    subsidy = calculate_price(_request(), catalog)
    selective = calculate_price(_request(contract_type=ContractType.SELECTIVE_CONTRACT), catalog)

    assert not hasattr(subsidy.applied_subsidy, "select_subsidy")
    assert not hasattr(selective.applied_subsidy, "common_subsidy")
    assert subsidy.applied_subsidy.total == 400_000
    assert selective.applied_subsidy.total == 50_000


# ============================================================================
# USE CASE
# ============================================================================


def test_use_case_loads_snapshot_from_repository(catalog: Catalog) -> None:
    uc = CalculateDevicePrice(InMemoryCatalogRepository(catalog))

    result = uc.execute(_request())

    assert result.total_monthly == 146_630


def test_use_case_propagates_repository_errors() -> None:
    repository = Mock()
    repository.load_catalog.side_effect = DataIntegrityError("Catalog file not found")

    with pytest.raises(DataIntegrityError):
        CalculateDevicePrice(repository).execute(_request())
