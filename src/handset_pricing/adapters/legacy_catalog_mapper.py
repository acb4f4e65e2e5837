"""Legacy Korean-keyed products.json → canonical catalog document.

The storefront's first data export came straight from the pricing
spreadsheet and keeps the sheet's Korean column names:

    deviceOptions: 기기옵션ID, 모델명, 브랜드, 용량, 출고가, 색상명, 색상코드, 색상HEX, 노출여부
    plans:         요금제ID, 요금제명, 카테고리ID, 카테고리명, 기본요금,
                   데이터용량, 음성통화, 문자, 주요혜택1..3, 노출여부
    subsidies:     change / port / new, each row with
                   기기옵션ID, 요금제ID, 공통지원금, 추가지원금, 선약지원금, 노출여부

This module only renames and reshapes; the canonical CatalogJsonMapper does
all type checking. Nothing here branches on pricing rules.
"""

from __future__ import annotations

import re
from typing import Any

from handset_pricing.domain.settings import BundleOption, GlobalSettings

_EXPOSED = "Y"
_LEGACY_JOIN_TABLES = {
    "change": ("change", "기기변경"),
    "transfer": ("port", "transfer", "번호이동"),
    "new": ("new", "신규가입"),
}
_BENEFIT_KEYS = ("주요혜택1", "주요혜택2", "주요혜택3")


def _amount(value: Any) -> Any:
    """'1,250,000원' → 1250000. Anything unparseable is passed through for the canonical mapper to reject."""
    if isinstance(value, str):
        digits = re.sub(r"[,\s원]", "", value)
        if digits.lstrip("-").isdigit():
            return int(digits)
    return value


def _storage(value: Any) -> Any:
    if isinstance(value, str):
        match = re.fullmatch(r"\s*(\d+)\s*(GB)?\s*", value, flags=re.IGNORECASE)
        if match:
            return int(match.group(1))
    return value


def _exposed(record: dict[str, Any]) -> bool:
    return record.get("노출여부", _EXPOSED) == _EXPOSED


class LegacyCatalogMapper:
    """Maps the legacy Korean-keyed document to the canonical camelCase layout."""

    @staticmethod
    def is_legacy(data: Any) -> bool:
        return isinstance(data, dict) and "deviceOptions" in data

    @staticmethod
    def to_canonical(data: dict[str, Any]) -> dict[str, Any]:
        """
        Reshape a legacy document.

        Per-color device rows are grouped into one device per 기기옵션ID. A device
        is exposed when any of its color rows is exposed. The `port` subsidy
        table becomes `transfer`.

        Args:
            data: Decoded legacy products.json

        Returns:
            Canonical catalog document (still untyped)
        """
        canonical: dict[str, Any] = {}

        if isinstance(data.get("deviceOptions"), list):
            canonical["devices"] = LegacyCatalogMapper._devices(data["deviceOptions"])
        if isinstance(data.get("plans"), list):
            canonical["plans"] = [
                LegacyCatalogMapper._plan(row) for row in data["plans"] if isinstance(row, dict)
            ]
        if isinstance(data.get("subsidies"), dict):
            canonical["subsidies"] = LegacyCatalogMapper._subsidies(data["subsidies"])

        canonical["settings"] = LegacyCatalogMapper._settings(data.get("settings"))
        return canonical

    @staticmethod
    def _devices(rows: list[Any]) -> list[dict[str, Any]]:
        devices: dict[str, dict[str, Any]] = {}

        for row in rows:
            if not isinstance(row, dict):
                continue

            device_id = row.get("기기옵션ID")
            device = devices.get(device_id)
            if device is None:
                device = {
                    "id": device_id,
                    "brand": row.get("브랜드"),
                    "model": row.get("모델명"),
                    "storageGB": _storage(row.get("용량")),
                    "listPrice": _amount(row.get("출고가")),
                    "colors": [],
                    "exposed": False,
                }
                devices[device_id] = device

            device["exposed"] = device["exposed"] or _exposed(row)

            color_name = row.get("색상명")
            if color_name and all(color["name"] != color_name for color in device["colors"]):
                device["colors"].append(
                    {
                        "code": row.get("색상코드") or "",
                        "name": color_name,
                        "hex": row.get("색상HEX") or "",
                    }
                )

        return list(devices.values())

    @staticmethod
    def _plan(row: dict[str, Any]) -> dict[str, Any]:
        category_name = row.get("카테고리명") or ""
        return {
            "id": row.get("요금제ID"),
            "name": row.get("요금제명"),
            "categoryId": row.get("카테고리ID") or category_name,
            "categoryName": category_name,
            "basePrice": _amount(row.get("기본요금")),
            "data": row.get("데이터용량") or "",
            "voice": row.get("음성통화") or "",
            "sms": row.get("문자") or "",
            "benefits": [row[key] for key in _BENEFIT_KEYS if row.get(key)],
            "exposed": _exposed(row),
        }

    @staticmethod
    def _subsidies(tables: dict[str, Any]) -> dict[str, Any]:
        canonical: dict[str, Any] = {}

        for join_type, legacy_keys in _LEGACY_JOIN_TABLES.items():
            rows = next((tables[key] for key in legacy_keys if key in tables), None)
            if not isinstance(rows, list):
                # Left out so the canonical mapper reports the missing table
                continue
            canonical[join_type] = [
                {
                    "deviceId": row.get("기기옵션ID"),
                    "planId": row.get("요금제ID"),
                    "commonSubsidy": _amount(row.get("공통지원금")),
                    "additionalSubsidy": _amount(row.get("추가지원금")),
                    # Blank 선약지원금 cells mean no selective-contract subsidy
                    "selectSubsidy": _amount(row.get("선약지원금") or 0),
                    "exposed": _exposed(row),
                }
                for row in rows
                if isinstance(row, dict)
            ]

        return canonical

    @staticmethod
    def _settings(legacy: Any) -> dict[str, Any]:
        """
        Legacy exports only carry the interest and selective discount rates.
        The remaining pricing policies come from GlobalSettings defaults.
        """
        defaults = GlobalSettings()
        legacy = legacy if isinstance(legacy, dict) else {}
        rates = defaults.bundle_discount_rates

        return {
            "annualInterestRate": legacy.get(
                "installmentInterestRate", str(defaults.annual_interest_rate)
            ),
            "roundingUnit": legacy.get("roundingUnit", defaults.rounding_unit),
            "roundingPolicy": defaults.rounding_policy.value,
            "selectiveDiscountRate": legacy.get(
                "selectiveDiscountRate", str(defaults.selective_discount_rate)
            ),
            "bundleDiscountRates": {
                "none": str(rates[BundleOption.NONE]),
                "internet": str(rates[BundleOption.INTERNET]),
                "internetTv": str(rates[BundleOption.INTERNET_TV]),
            },
        }
