from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from handset_pricing.domain.catalog import JoinType
from handset_pricing.domain.errors import ValidationError
from handset_pricing.domain.settings import BundleOption, GlobalSettings


class ContractType(str, Enum):
    """How the carrier discount is taken."""

    SUBSIDY_DISCOUNT = "subsidy_discount"
    SELECTIVE_CONTRACT = "selective_contract"

    @property
    def display_name(self) -> str:
        return _CONTRACT_TYPE_NAMES[self]


_CONTRACT_TYPE_NAMES = {
    ContractType.SUBSIDY_DISCOUNT: "공시지원",
    ContractType.SELECTIVE_CONTRACT: "선택약정",
}


def _selection_errors(
    join_type: object,
    installment_months: object,
    bundle_option: object,
    settings: GlobalSettings,
) -> list[dict[str, str]]:
    errors: list[dict[str, str]] = []

    if not isinstance(join_type, JoinType):
        errors.append(
            {
                "field": "join_type",
                "message": f"Must be one of {[item.value for item in JoinType]}",
                "code": "INVALID_JOIN_TYPE",
            }
        )
    if (
        not isinstance(installment_months, int)
        or isinstance(installment_months, bool)
        or installment_months not in settings.installment_months
    ):
        errors.append(
            {
                "field": "installment_months",
                "message": f"Must be one of {sorted(settings.installment_months)}",
                "code": "INVALID_INSTALLMENT_MONTHS",
            }
        )
    if not isinstance(bundle_option, BundleOption):
        errors.append(
            {
                "field": "bundle_option",
                "message": f"Must be one of {[item.value for item in BundleOption]}",
                "code": "INVALID_BUNDLE_OPTION",
            }
        )

    return errors


@dataclass(frozen=True, slots=True)
class CalculationInput:
    device_id: str
    plan_id: str
    join_type: JoinType
    contract_type: ContractType
    installment_months: int
    bundle_option: BundleOption = BundleOption.NONE

    def validate(self, settings: GlobalSettings) -> None:
        """
        Validate the selection against the snapshot's settings.

        Raises:
            ValidationError: With one entry per invalid field
        """
        errors = _selection_errors(
            self.join_type, self.installment_months, self.bundle_option, settings
        )
        if not isinstance(self.contract_type, ContractType):
            errors.append(
                {
                    "field": "contract_type",
                    "message": f"Must be one of {[item.value for item in ContractType]}",
                    "code": "INVALID_CONTRACT_TYPE",
                }
            )
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class ComparisonInput:
    """A calculation input without a contract type; both are evaluated."""

    device_id: str
    plan_id: str
    join_type: JoinType
    installment_months: int
    bundle_option: BundleOption = BundleOption.NONE

    def validate(self, settings: GlobalSettings) -> None:
        errors = _selection_errors(
            self.join_type, self.installment_months, self.bundle_option, settings
        )
        if errors:
            raise ValidationError(errors=errors)

    def with_contract_type(self, contract_type: ContractType) -> CalculationInput:
        return CalculationInput(
            device_id=self.device_id,
            plan_id=self.plan_id,
            join_type=self.join_type,
            contract_type=contract_type,
            installment_months=self.installment_months,
            bundle_option=self.bundle_option,
        )


@dataclass(frozen=True, slots=True)
class SubsidyDiscountSubsidy:
    """Device subsidy taken under a subsidy-discount contract."""

    common_subsidy: int
    additional_subsidy: int

    @property
    def total(self) -> int:
        return self.common_subsidy + self.additional_subsidy


@dataclass(frozen=True, slots=True)
class SelectiveContractSubsidy:
    """Device subsidy taken under a selective contract."""

    select_subsidy: int

    @property
    def total(self) -> int:
        return self.select_subsidy


@dataclass(frozen=True, slots=True)
class SubsidyDiscountResult:
    contract_type: ClassVar[ContractType] = ContractType.SUBSIDY_DISCOUNT

    join_type: JoinType
    installment_months: int
    bundle_option: BundleOption
    list_price: int
    applied_subsidy: SubsidyDiscountSubsidy
    principal: int
    monthly_installment: int
    plan_base_fee: int
    plan_discount: int
    bundle_discount_amount: int
    monthly_plan_fee: int
    total_monthly: int


@dataclass(frozen=True, slots=True)
class SelectiveContractResult:
    contract_type: ClassVar[ContractType] = ContractType.SELECTIVE_CONTRACT

    join_type: JoinType
    installment_months: int
    bundle_option: BundleOption
    list_price: int
    applied_subsidy: SelectiveContractSubsidy
    principal: int
    monthly_installment: int
    plan_base_fee: int
    plan_discount: int
    bundle_discount_amount: int
    monthly_plan_fee: int
    total_monthly: int


CalculationResult = Union[SubsidyDiscountResult, SelectiveContractResult]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    subsidy_discount: SubsidyDiscountResult
    selective_contract: SelectiveContractResult
    comparison_months: int
    subsidy_discount_total_cost: int
    selective_contract_total_cost: int
    monthly_difference: int
    total_cost_difference: int
    recommendation: ContractType
