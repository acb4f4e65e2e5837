"""PostgreSQL implementation of CatalogRepository."""

from __future__ import annotations

import logging
from decimal import Decimal
from types import MappingProxyType

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from handset_pricing.domain.catalog import (
    Catalog,
    Device,
    DeviceColor,
    JoinType,
    Plan,
    SubsidyEntry,
)
from handset_pricing.domain.errors import DataIntegrityError
from handset_pricing.domain.settings import (
    BundleDiscountBase,
    BundleOption,
    GlobalSettings,
    RoundingPolicy,
)
from handset_pricing.infra.db.models import (
    DeviceRow,
    PlanRow,
    PricingSettingsRow,
    SubsidyRow,
)
from handset_pricing.ports.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

SETTINGS_ROW_ID = 1


class PostgresCatalogRepository(CatalogRepository):
    """
    PostgreSQL implementation of CatalogRepository.

    - Reads the whole catalog in one pass (devices, colors, plans, subsidies, settings)
    - Converts ORM rows (infrastructure) to domain objects
    - Hidden rows are kept; the Catalog itself filters on `exposed`
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def load_catalog(self) -> Catalog:
        """
        Load a full catalog snapshot.

        Raises:
            DataIntegrityError: If the settings row is missing or a row holds
                an unknown join type / policy value
        """
        settings_row = self._session.get(PricingSettingsRow, SETTINGS_ROW_ID)
        if settings_row is None:
            raise DataIntegrityError(
                "Pricing settings are missing",
                problems=[f"pricing_settings row id={SETTINGS_ROW_ID} not found"],
            )

        device_rows = (
            self._session.execute(
                select(DeviceRow).options(selectinload(DeviceRow.colors)).order_by(DeviceRow.id)
            )
            .scalars()
            .all()
        )
        plan_rows = self._session.execute(select(PlanRow).order_by(PlanRow.id)).scalars().all()
        subsidy_rows = (
            self._session.execute(select(SubsidyRow).order_by(SubsidyRow.id)).scalars().all()
        )

        problems: list[str] = []
        subsidies: dict[JoinType, list[SubsidyEntry]] = {join_type: [] for join_type in JoinType}
        for row in subsidy_rows:
            try:
                join_type = JoinType(row.join_type)
            except ValueError:
                problems.append(f"subsidy row {row.id} has unknown join type '{row.join_type}'")
                continue
            subsidies[join_type].append(self._subsidy_to_domain(row))

        settings = self._settings_to_domain(settings_row, problems)

        if problems:
            raise DataIntegrityError("Catalog tables are malformed", problems=problems)

        catalog = Catalog(
            devices=tuple(self._device_to_domain(row) for row in device_rows),
            plans=tuple(self._plan_to_domain(row) for row in plan_rows),
            subsidies=MappingProxyType(
                {join_type: tuple(entries) for join_type, entries in subsidies.items()}
            ),
            settings=settings,
        )

        logger.info(
            "Catalog loaded",
            extra={
                "source": "postgres",
                "devices": len(catalog.devices),
                "plans": len(catalog.plans),
                "subsidies": len(subsidy_rows),
            },
        )
        return catalog

    def _device_to_domain(self, row: DeviceRow) -> Device:
        return Device(
            id=row.id,
            brand=row.brand,
            model=row.model,
            storage_gb=row.storage_gb,
            list_price=row.list_price,
            colors=tuple(
                DeviceColor(code=color.code, name=color.name, hex=color.hex) for color in row.colors
            ),
            exposed=row.exposed,
        )

    def _plan_to_domain(self, row: PlanRow) -> Plan:
        return Plan(
            id=row.id,
            name=row.name,
            category_id=row.category_id,
            base_price=row.base_price,
            category_name=row.category_name,
            data=row.data,
            voice=row.voice,
            sms=row.sms,
            benefits=tuple(row.benefits or ()),
            exposed=row.exposed,
        )

    def _subsidy_to_domain(self, row: SubsidyRow) -> SubsidyEntry:
        return SubsidyEntry(
            device_id=row.device_id,
            plan_id=row.plan_id,
            common_subsidy=row.common_subsidy,
            additional_subsidy=row.additional_subsidy,
            select_subsidy=row.select_subsidy,
            exposed=row.exposed,
        )

    def _settings_to_domain(self, row: PricingSettingsRow, problems: list[str]) -> GlobalSettings:
        """
        Convert the settings row to GlobalSettings.

        NUMERIC columns already come back as Decimal; str() keeps any float
        from a misconfigured driver out of the calculation.
        """
        try:
            rounding_policy = RoundingPolicy(row.rounding_policy)
        except ValueError:
            problems.append(f"unknown rounding policy '{row.rounding_policy}'")
            rounding_policy = RoundingPolicy.HALF_UP

        try:
            bundle_discount_base = BundleDiscountBase(row.bundle_discount_base)
        except ValueError:
            problems.append(f"unknown bundle discount base '{row.bundle_discount_base}'")
            bundle_discount_base = BundleDiscountBase.PLAN_BASE_PRICE

        return GlobalSettings(
            annual_interest_rate=Decimal(str(row.annual_interest_rate)),
            rounding_unit=row.rounding_unit,
            rounding_policy=rounding_policy,
            selective_discount_rate=Decimal(str(row.selective_discount_rate)),
            bundle_discount_rates=MappingProxyType(
                {
                    BundleOption.NONE: Decimal(str(row.bundle_rate_none)),
                    BundleOption.INTERNET: Decimal(str(row.bundle_rate_internet)),
                    BundleOption.INTERNET_TV: Decimal(str(row.bundle_rate_internet_tv)),
                }
            ),
            bundle_discount_base=bundle_discount_base,
            installment_months=frozenset(row.installment_months or ()),
            contract_term_months=row.contract_term_months,
        )
