from __future__ import annotations

from typing import Mapping, Sequence

from handset_pricing.domain.catalog import Catalog, JoinType, SubsidyEntry
from handset_pricing.domain.errors import CombinationUnavailableError, DataIntegrityError


def resolve_subsidy(
    subsidies: Mapping[JoinType, Sequence[SubsidyEntry]],
    device_id: str,
    plan_id: str,
    join_type: JoinType,
) -> SubsidyEntry:
    """
    Find the exposed subsidy entry for an exact (device, plan, join type) key.

    No partial matching and no fallback: a missing combination is an error,
    never a zero subsidy.

    Raises:
        DataIntegrityError: If the join type has no subsidy table at all
        CombinationUnavailableError: If no exposed entry matches
    """
    entries = subsidies.get(join_type)
    if entries is None:
        raise DataIntegrityError(
            f"Subsidy table '{join_type.value}' is missing", join_type=join_type.value
        )

    for entry in entries:
        if entry.device_id == device_id and entry.plan_id == plan_id and entry.exposed:
            return entry

    raise CombinationUnavailableError(device_id, plan_id, join_type.value)


def subsidies_by_device(catalog: Catalog, device_id: str) -> dict[JoinType, list[SubsidyEntry]]:
    """Exposed subsidy entries for a device, per join type."""
    return {
        join_type: [
            entry
            for entry in catalog.subsidies.get(join_type, ())
            if entry.device_id == device_id and entry.exposed
        ]
        for join_type in JoinType
    }


def subsidies_by_plan(catalog: Catalog, plan_id: str) -> dict[JoinType, list[SubsidyEntry]]:
    """Exposed subsidy entries for a plan, per join type."""
    return {
        join_type: [
            entry
            for entry in catalog.subsidies.get(join_type, ())
            if entry.plan_id == plan_id and entry.exposed
        ]
        for join_type in JoinType
    }
