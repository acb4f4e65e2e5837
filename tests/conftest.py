"""Shared catalog fixtures.

The default catalog holds the storefront's reference selection
(Galaxy S24 256GB on 5G 프리미엄, device change): list 1,250,000 won,
plan 109,000 won, subsidies 300,000 / 100,000 / 50,000.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable

import pytest

from handset_pricing.domain.catalog import (
    Catalog,
    Device,
    DeviceColor,
    JoinType,
    Plan,
    SubsidyEntry,
)
from handset_pricing.domain.settings import GlobalSettings

CatalogFactory = Callable[..., Catalog]


def _default_devices() -> tuple[Device, ...]:
    return (
        Device(
            id="galaxy-s24-256gb",
            brand="Samsung",
            model="Galaxy S24",
            storage_gb=256,
            list_price=1_250_000,
            colors=(
                DeviceColor(code="onyx-black", name="오닉스 블랙", hex="#2B2B2B"),
                DeviceColor(code="marble-grey", name="마블 그레이", hex="#C9C9C9"),
            ),
        ),
        Device(
            id="galaxy-a35-128gb",
            brand="Samsung",
            model="Galaxy A35",
            storage_gb=128,
            list_price=499_400,
        ),
        Device(
            id="iphone-16-128gb",
            brand="Apple",
            model="iPhone 16",
            storage_gb=128,
            list_price=1_250_000,
        ),
        Device(
            id="galaxy-z-flip5-256gb",
            brand="Samsung",
            model="Galaxy Z Flip5",
            storage_gb=256,
            list_price=1_399_200,
            exposed=False,
        ),
    )


def _default_plans() -> tuple[Plan, ...]:
    return (
        Plan(
            id="5g-premium",
            name="5G 프리미엄",
            category_id="5g",
            base_price=109_000,
            category_name="5G 요금제",
            data="무제한",
            benefits=("OTT 1종 무료",),
        ),
        Plan(
            id="lte-basic",
            name="LTE 베이직",
            category_id="lte",
            base_price=33_000,
            category_name="LTE 요금제",
        ),
        Plan(
            id="5g-slim-2023",
            name="5G 슬림 (판매종료)",
            category_id="5g",
            base_price=55_000,
            category_name="5G 요금제",
            exposed=False,
        ),
    )


def _default_subsidies() -> dict[JoinType, tuple[SubsidyEntry, ...]]:
    return {
        JoinType.CHANGE: (
            SubsidyEntry("galaxy-s24-256gb", "5g-premium", 300_000, 100_000, 50_000),
            SubsidyEntry("galaxy-s24-256gb", "lte-basic", 100_000, 30_000, 0),
            SubsidyEntry("galaxy-s24-256gb", "5g-slim-2023", 150_000, 45_000, 0),
            SubsidyEntry("galaxy-a35-128gb", "5g-premium", 500_000, 150_000, 100_000),
            SubsidyEntry("galaxy-z-flip5-256gb", "5g-premium", 400_000, 120_000, 60_000),
        ),
        JoinType.TRANSFER: (
            SubsidyEntry("galaxy-s24-256gb", "5g-premium", 450_000, 150_000, 50_000),
            SubsidyEntry("galaxy-a35-128gb", "lte-basic", 200_000, 60_000, 0, exposed=False),
        ),
        JoinType.NEW: (
            SubsidyEntry("galaxy-s24-256gb", "5g-premium", 300_000, 100_000, 50_000),
        ),
    }


@pytest.fixture
def make_catalog() -> CatalogFactory:
    """Build a catalog from the defaults, replacing any part passed in."""

    def factory(
        devices: tuple[Device, ...] | None = None,
        plans: tuple[Plan, ...] | None = None,
        subsidies: dict[JoinType, tuple[SubsidyEntry, ...]] | None = None,
        settings: GlobalSettings | None = None,
    ) -> Catalog:
        return Catalog(
            devices=_default_devices() if devices is None else devices,
            plans=_default_plans() if plans is None else plans,
            subsidies=MappingProxyType(_default_subsidies() if subsidies is None else subsidies),
            settings=GlobalSettings() if settings is None else settings,
        )

    return factory


@pytest.fixture
def catalog(make_catalog: CatalogFactory) -> Catalog:
    return make_catalog()
