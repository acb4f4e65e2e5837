"""Canonical products.json → domain Catalog.

The JSON layout uses camelCase keys:

    {
        "devices": [{"id", "brand", "model", "storageGB", "listPrice", "colors", "exposed"}],
        "plans": [{"id", "name", "categoryId", "categoryName", "basePrice",
                   "data", "voice", "sms", "benefits", "exposed"}],
        "subsidies": {"change": [...], "transfer": [...], "new": [...]},
        "settings": {"annualInterestRate", "roundingUnit", "roundingPolicy",
                     "selectiveDiscountRate", "bundleDiscountRates",
                     "bundleDiscountBase", "installmentMonths", "contractTermMonths"}
    }

Rates are converted to Decimal here so no float crosses into the domain.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeVar

from handset_pricing.domain.catalog import Catalog, Device, DeviceColor, JoinType, Plan, SubsidyEntry
from handset_pricing.domain.errors import DataIntegrityError
from handset_pricing.domain.settings import (
    BundleDiscountBase,
    BundleOption,
    GlobalSettings,
    RoundingPolicy,
)

E = TypeVar("E", bound=Enum)

_MISSING = object()

_BUNDLE_RATE_KEYS = {
    BundleOption.NONE: "none",
    BundleOption.INTERNET: "internet",
    BundleOption.INTERNET_TV: "internetTv",
}


class _Parser:
    """Collects every structural problem instead of stopping at the first."""

    def __init__(self) -> None:
        self.problems: list[str] = []

    def field(self, record: dict[str, Any], key: str, kind: type, path: str, default: Any = _MISSING) -> Any:
        required = default is _MISSING
        if key not in record or record[key] is None:
            if required:
                self.problems.append(f"{path}.{key} is required")
                return None
            return default

        value = record[key]
        # bool is an int subclass; never accept it as an amount
        if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
            self.problems.append(f"{path}.{key} must be {kind.__name__}")
            return None if required else default
        return value

    def rate(self, record: dict[str, Any], key: str, path: str, default: Decimal | None = None) -> Decimal:
        if key not in record or record[key] is None:
            if default is None:
                self.problems.append(f"{path}.{key} is required")
                return Decimal("0")
            return default

        value = record[key]
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            self.problems.append(f"{path}.{key} must be a number")
            return Decimal("0")
        try:
            rate = Decimal(str(value))
        except InvalidOperation:
            self.problems.append(f"{path}.{key} must be a number")
            return Decimal("0")

        # json accepts NaN and Infinity literals
        if not rate.is_finite():
            self.problems.append(f"{path}.{key} must be a finite number")
            return Decimal("0")
        return rate

    def enum(self, record: dict[str, Any], key: str, enum_type: type[E], path: str, default: E) -> E:
        raw = self.field(record, key, str, path, default=default.value)
        try:
            return enum_type(raw)
        except ValueError:
            self.problems.append(f"{path}.{key} must be one of {[item.value for item in enum_type]}")
            return default

    def records(self, container: dict[str, Any], key: str, path: str) -> list[dict[str, Any]]:
        items = self.field(container, key, list, path)
        if items is None:
            return []

        records = []
        for index, item in enumerate(items):
            if isinstance(item, dict):
                records.append(item)
            else:
                self.problems.append(f"{path}.{key}[{index}] must be an object")
        return records

    def device(self, record: dict[str, Any], path: str) -> Device:
        colors = tuple(
            DeviceColor(
                code=self.field(color, "code", str, f"{path}.colors[{index}]", default=""),
                name=self.field(color, "name", str, f"{path}.colors[{index}]"),
                hex=self.field(color, "hex", str, f"{path}.colors[{index}]", default=""),
            )
            for index, color in enumerate(self.records(record, "colors", path) if "colors" in record else [])
        )
        return Device(
            id=self.field(record, "id", str, path),
            brand=self.field(record, "brand", str, path),
            model=self.field(record, "model", str, path),
            storage_gb=self.field(record, "storageGB", int, path),
            list_price=self.field(record, "listPrice", int, path),
            colors=colors,
            exposed=self.field(record, "exposed", bool, path, default=True),
        )

    def plan(self, record: dict[str, Any], path: str) -> Plan:
        benefits = self.field(record, "benefits", list, path, default=[])
        return Plan(
            id=self.field(record, "id", str, path),
            name=self.field(record, "name", str, path),
            category_id=self.field(record, "categoryId", str, path),
            category_name=self.field(record, "categoryName", str, path, default=""),
            base_price=self.field(record, "basePrice", int, path),
            data=self.field(record, "data", str, path, default=""),
            voice=self.field(record, "voice", str, path, default=""),
            sms=self.field(record, "sms", str, path, default=""),
            benefits=tuple(str(benefit) for benefit in benefits),
            exposed=self.field(record, "exposed", bool, path, default=True),
        )

    def subsidy(self, record: dict[str, Any], path: str) -> SubsidyEntry:
        return SubsidyEntry(
            device_id=self.field(record, "deviceId", str, path),
            plan_id=self.field(record, "planId", str, path),
            common_subsidy=self.field(record, "commonSubsidy", int, path),
            additional_subsidy=self.field(record, "additionalSubsidy", int, path),
            select_subsidy=self.field(record, "selectSubsidy", int, path),
            exposed=self.field(record, "exposed", bool, path, default=True),
        )

    def settings(self, record: dict[str, Any]) -> GlobalSettings:
        path = "settings"
        defaults = GlobalSettings()

        rates_record = self.field(record, "bundleDiscountRates", dict, path)
        if rates_record is None:
            bundle_rates = defaults.bundle_discount_rates
        else:
            bundle_rates = MappingProxyType(
                {
                    option: self.rate(rates_record, key, f"{path}.bundleDiscountRates")
                    for option, key in _BUNDLE_RATE_KEYS.items()
                }
            )

        months = self.field(
            record, "installmentMonths", list, path, default=sorted(defaults.installment_months)
        )
        if any(isinstance(item, bool) or not isinstance(item, int) for item in months):
            self.problems.append(f"{path}.installmentMonths must be a list of integers")
            months = sorted(defaults.installment_months)

        return GlobalSettings(
            annual_interest_rate=self.rate(record, "annualInterestRate", path),
            rounding_unit=self.field(record, "roundingUnit", int, path),
            rounding_policy=self.enum(
                record, "roundingPolicy", RoundingPolicy, path, defaults.rounding_policy
            ),
            selective_discount_rate=self.rate(record, "selectiveDiscountRate", path),
            bundle_discount_rates=bundle_rates,
            bundle_discount_base=self.enum(
                record, "bundleDiscountBase", BundleDiscountBase, path, defaults.bundle_discount_base
            ),
            installment_months=frozenset(months),
            contract_term_months=self.field(
                record, "contractTermMonths", int, path, default=defaults.contract_term_months
            ),
        )


class CatalogJsonMapper:
    """Maps the canonical products.json document to a domain Catalog."""

    @staticmethod
    def to_domain(data: Any) -> Catalog:
        """
        Parse a decoded products.json document.

        Args:
            data: Decoded JSON document

        Returns:
            Catalog snapshot

        Raises:
            DataIntegrityError: If required arrays or fields are missing or mistyped
        """
        if not isinstance(data, dict):
            raise DataIntegrityError("Catalog document must be a JSON object")

        parser = _Parser()

        devices = tuple(
            parser.device(record, f"devices[{index}]")
            for index, record in enumerate(parser.records(data, "devices", "catalog"))
        )
        plans = tuple(
            parser.plan(record, f"plans[{index}]")
            for index, record in enumerate(parser.records(data, "plans", "catalog"))
        )

        subsidies: dict[JoinType, tuple[SubsidyEntry, ...]] = {}
        subsidy_tables = parser.field(data, "subsidies", dict, "catalog")
        if subsidy_tables is not None:
            for join_type in JoinType:
                path = f"subsidies.{join_type.value}"
                subsidies[join_type] = tuple(
                    parser.subsidy(record, f"{path}[{index}]")
                    for index, record in enumerate(parser.records(subsidy_tables, join_type.value, "subsidies"))
                )

        settings_record = parser.field(data, "settings", dict, "catalog")
        settings = parser.settings(settings_record) if settings_record is not None else GlobalSettings()

        if parser.problems:
            raise DataIntegrityError("Catalog document is malformed", problems=parser.problems)

        return Catalog(
            devices=devices,
            plans=plans,
            subsidies=MappingProxyType(subsidies),
            settings=settings,
        )
