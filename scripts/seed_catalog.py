#!/usr/bin/env python3
"""
Seed the catalog tables from a products.json file.

Features:
- Deterministic: the database ends up holding exactly the file's catalog
- Idempotent: safe to run multiple times (clears before seeding)
- Validated: the file goes through the same mappers and integrity checks as
  the JSON catalog source, so a broken file never reaches the database

Usage:
    python scripts/seed_catalog.py                  # data/products.json
    python scripts/seed_catalog.py path/to/products.json
"""

from __future__ import annotations

import sys
from pathlib import Path

from sqlalchemy import delete
from sqlalchemy.orm import Session

from handset_pricing.adapters.json_file_catalog_repository import JsonFileCatalogRepository
from handset_pricing.adapters.postgres_catalog_repository import SETTINGS_ROW_ID
from handset_pricing.domain.catalog import Catalog
from handset_pricing.domain.errors import DataIntegrityError
from handset_pricing.domain.settings import BundleOption
from handset_pricing.infra.config import catalog_json_path
from handset_pricing.infra.db.models import (
    DeviceColorRow,
    DeviceRow,
    PlanRow,
    PricingSettingsRow,
    SubsidyRow,
)
from handset_pricing.infra.db.session import get_session


# ==============================================================================
# Row builders
# ==============================================================================


def build_rows(catalog: Catalog) -> list[object]:
    """Convert a domain catalog to ORM rows, hidden records included."""
    rows: list[object] = []

    for device in catalog.devices:
        rows.append(
            DeviceRow(
                id=device.id,
                brand=device.brand,
                model=device.model,
                storage_gb=device.storage_gb,
                list_price=device.list_price,
                exposed=device.exposed,
                colors=[
                    DeviceColorRow(position=position, code=color.code, name=color.name, hex=color.hex)
                    for position, color in enumerate(device.colors)
                ],
            )
        )

    for plan in catalog.plans:
        rows.append(
            PlanRow(
                id=plan.id,
                name=plan.name,
                category_id=plan.category_id,
                category_name=plan.category_name,
                base_price=plan.base_price,
                data=plan.data,
                voice=plan.voice,
                sms=plan.sms,
                benefits=list(plan.benefits),
                exposed=plan.exposed,
            )
        )

    for join_type, entries in catalog.subsidies.items():
        for entry in entries:
            rows.append(
                SubsidyRow(
                    join_type=join_type.value,
                    device_id=entry.device_id,
                    plan_id=entry.plan_id,
                    common_subsidy=entry.common_subsidy,
                    additional_subsidy=entry.additional_subsidy,
                    select_subsidy=entry.select_subsidy,
                    exposed=entry.exposed,
                )
            )

    settings = catalog.settings
    rows.append(
        PricingSettingsRow(
            id=SETTINGS_ROW_ID,
            annual_interest_rate=settings.annual_interest_rate,
            rounding_unit=settings.rounding_unit,
            rounding_policy=settings.rounding_policy.value,
            selective_discount_rate=settings.selective_discount_rate,
            bundle_rate_none=settings.bundle_discount_rate(BundleOption.NONE),
            bundle_rate_internet=settings.bundle_discount_rate(BundleOption.INTERNET),
            bundle_rate_internet_tv=settings.bundle_discount_rate(BundleOption.INTERNET_TV),
            bundle_discount_base=settings.bundle_discount_base.value,
            installment_months=sorted(settings.installment_months),
            contract_term_months=settings.contract_term_months,
        )
    )

    return rows


def clear_catalog(session: Session) -> None:
    # Children first so foreign keys never dangle
    for model in (SubsidyRow, DeviceColorRow, DeviceRow, PlanRow, PricingSettingsRow):
        session.execute(delete(model))


# ==============================================================================
# Seed
# ==============================================================================


def seed_catalog(path: Path) -> None:
    """
    Replace the database catalog with the one in `path`.

    Raises:
        DataIntegrityError: If the file is missing, malformed or inconsistent
    """
    print(f"🌱 Seeding catalog from {path}...")

    catalog = JsonFileCatalogRepository(path).load_catalog()
    catalog.validate()

    with get_session() as session:
        print("🗑️  Clearing existing catalog...")
        clear_catalog(session)

        rows = build_rows(catalog)
        session.add_all(rows)
        session.flush()

    subsidy_count = sum(len(entries) for entries in catalog.subsidies.values())
    print(
        f"✅ Seeded {len(catalog.devices)} devices, {len(catalog.plans)} plans "
        f"and {subsidy_count} subsidy entries"
    )


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    source = Path(sys.argv[1]) if len(sys.argv) > 1 else catalog_json_path()
    try:
        seed_catalog(source)
    except DataIntegrityError as e:
        print(f"❌ Catalog file rejected: {e}", file=sys.stderr)
        for problem in e.problems:
            print(f"   - {problem}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
