from pydantic import BaseModel, ConfigDict, Field


class DeviceColorDTO(BaseModel):
    code: str
    name: str
    hex: str


class DeviceResponseDTO(BaseModel):
    id: str
    brand: str
    model: str
    storage_gb: int
    list_price: int
    colors: list[DeviceColorDTO]


class DevicesSearchQueryDTO(BaseModel):
    """Query parameters for listing devices."""

    brand: str | None = Field(
        default=None,
        description="Filter by brand (case-insensitive exact match)",
        examples=["Samsung"],
    )
    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        examples=[20],
        ge=1,
        le=200,
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"brand": "Samsung", "offset": 0, "limit": 20}}
    )


class DeviceSearchResponseDTO(BaseModel):
    devices: list[DeviceResponseDTO]
    total: int
    offset: int
    limit: int


class SubsidyResponseDTO(BaseModel):
    plan_id: str
    common_subsidy: int
    additional_subsidy: int
    select_subsidy: int


class DeviceSubsidiesResponseDTO(BaseModel):
    """Exposed subsidies of one device keyed by join type (change, transfer, new)."""

    device_id: str
    subsidies: dict[str, list[SubsidyResponseDTO]]


class PlanSubsidyResponseDTO(BaseModel):
    device_id: str
    common_subsidy: int
    additional_subsidy: int
    select_subsidy: int


class PlanSubsidiesResponseDTO(BaseModel):
    plan_id: str
    subsidies: dict[str, list[PlanSubsidyResponseDTO]]


class PlanResponseDTO(BaseModel):
    id: str
    name: str
    category_id: str
    category_name: str
    base_price: int
    data: str
    voice: str
    sms: str
    benefits: list[str]


class PlanCategoryDTO(BaseModel):
    id: str
    name: str


class PlansQueryDTO(BaseModel):
    category_id: str | None = Field(
        default=None,
        description="Only plans of this category",
        examples=["5g"],
    )


class PlanListResponseDTO(BaseModel):
    plans: list[PlanResponseDTO]
    categories: list[PlanCategoryDTO]
