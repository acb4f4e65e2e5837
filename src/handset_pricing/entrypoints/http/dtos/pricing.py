from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CalculateRequestDTO(BaseModel):
    """Request payload for pricing one selection."""

    device_id: str = Field(description="Device option ID", examples=["galaxy-s24-256gb"], min_length=1)
    plan_id: str = Field(description="Plan ID", examples=["5g-premium"], min_length=1)
    join_type: str = Field(
        description="One of: change, transfer, new",
        examples=["change"],
    )
    contract_type: str = Field(
        description="One of: subsidy_discount, selective_contract",
        examples=["selective_contract"],
    )
    installment_months: int = Field(
        description="Installment term in months. Allowed terms come from the catalog settings "
        "(0 = cash purchase, usually 0, 12, 24, 36)",
        examples=[24],
    )
    bundle_option: str = Field(
        default="none",
        description="One of: none, internet, internet_tv",
        examples=["none"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "device_id": "galaxy-s24-256gb",
                "plan_id": "5g-premium",
                "join_type": "change",
                "contract_type": "selective_contract",
                "installment_months": 24,
                "bundle_option": "none",
            }
        }
    )


class CompareRequestDTO(BaseModel):
    """Request payload for comparing both contract types on one selection."""

    device_id: str = Field(description="Device option ID", examples=["galaxy-s24-256gb"], min_length=1)
    plan_id: str = Field(description="Plan ID", examples=["5g-premium"], min_length=1)
    join_type: str = Field(description="One of: change, transfer, new", examples=["change"])
    installment_months: int = Field(description="Installment term in months", examples=[24])
    bundle_option: str = Field(
        default="none",
        description="One of: none, internet, internet_tv",
        examples=["none"],
    )


class SubsidyDiscountSubsidyDTO(BaseModel):
    type: Literal["subsidy_discount"] = "subsidy_discount"
    common_subsidy: int
    additional_subsidy: int
    total: int


class SelectiveContractSubsidyDTO(BaseModel):
    type: Literal["selective_contract"] = "selective_contract"
    select_subsidy: int
    total: int


class PriceBreakdownDTO(BaseModel):
    """Monthly price breakdown. All amounts are whole won."""

    contract_type: str = Field(examples=["selective_contract"])
    contract_type_name: str = Field(examples=["선택약정"])
    join_type: str = Field(examples=["change"])
    join_type_name: str = Field(examples=["기기변경"])
    installment_months: int
    bundle_option: str
    list_price: int
    applied_subsidy: Union[SubsidyDiscountSubsidyDTO, SelectiveContractSubsidyDTO] = Field(
        discriminator="type"
    )
    principal: int = Field(description="list_price - applied subsidy, never negative")
    monthly_installment: int
    plan_base_fee: int
    plan_discount: int
    bundle_discount_amount: int
    monthly_plan_fee: int
    total_monthly: int = Field(description="monthly_installment + monthly_plan_fee")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "contract_type": "selective_contract",
                "contract_type_name": "선택약정",
                "join_type": "change",
                "join_type_name": "기기변경",
                "installment_months": 24,
                "bundle_option": "none",
                "list_price": 1250000,
                "applied_subsidy": {
                    "type": "selective_contract",
                    "select_subsidy": 50000,
                    "total": 50000,
                },
                "principal": 1200000,
                "monthly_installment": 53130,
                "plan_base_fee": 109000,
                "plan_discount": 27250,
                "bundle_discount_amount": 0,
                "monthly_plan_fee": 81750,
                "total_monthly": 134880,
            }
        }
    )


class ComparisonResponseDTO(BaseModel):
    """Both contract types priced side by side with a recommendation."""

    subsidy_discount: PriceBreakdownDTO
    selective_contract: PriceBreakdownDTO
    comparison_months: int = Field(
        description="Horizon of the total cost: the installment term, or the contract term "
        "for a cash purchase"
    )
    subsidy_discount_total_cost: int
    selective_contract_total_cost: int
    monthly_difference: int
    total_cost_difference: int
    recommendation: str = Field(examples=["selective_contract"])
    recommendation_name: str = Field(examples=["선택약정"])
