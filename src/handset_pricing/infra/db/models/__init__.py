from handset_pricing.infra.db.models.base import Base
from handset_pricing.infra.db.models.catalog import (
    DeviceColorRow,
    DeviceRow,
    PlanRow,
    PricingSettingsRow,
    SubsidyRow,
)

__all__ = [
    "Base",
    "DeviceColorRow",
    "DeviceRow",
    "PlanRow",
    "PricingSettingsRow",
    "SubsidyRow",
]
