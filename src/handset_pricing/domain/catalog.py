from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from handset_pricing.domain.errors import DataIntegrityError
from handset_pricing.domain.settings import GlobalSettings


class JoinType(str, Enum):
    """Subscription acquisition channel."""

    CHANGE = "change"
    TRANSFER = "transfer"
    NEW = "new"

    @property
    def display_name(self) -> str:
        return _JOIN_TYPE_NAMES[self]


_JOIN_TYPE_NAMES = {
    JoinType.CHANGE: "기기변경",
    JoinType.TRANSFER: "번호이동",
    JoinType.NEW: "신규가입",
}


@dataclass(frozen=True, slots=True)
class DeviceColor:
    code: str
    name: str
    hex: str


@dataclass(frozen=True, slots=True)
class Device:
    id: str
    brand: str
    model: str
    storage_gb: int
    list_price: int
    colors: tuple[DeviceColor, ...] = ()
    exposed: bool = True


@dataclass(frozen=True, slots=True)
class Plan:
    id: str
    name: str
    category_id: str
    base_price: int
    category_name: str = ""
    data: str = ""
    voice: str = ""
    sms: str = ""
    benefits: tuple[str, ...] = ()
    exposed: bool = True


@dataclass(frozen=True, slots=True)
class SubsidyEntry:
    device_id: str
    plan_id: str
    common_subsidy: int
    additional_subsidy: int
    select_subsidy: int
    exposed: bool = True


@dataclass(frozen=True, slots=True)
class Catalog:
    """
    Immutable catalog snapshot consumed by the pricing engine.

    Owned by the catalog repository; the engine only reads it. Lookups
    only ever return exposed records.
    """

    devices: tuple[Device, ...]
    plans: tuple[Plan, ...]
    subsidies: Mapping[JoinType, tuple[SubsidyEntry, ...]]
    settings: GlobalSettings = field(default_factory=GlobalSettings)

    def find_device(self, device_id: str) -> Device | None:
        for device in self.devices:
            if device.id == device_id and device.exposed:
                return device
        return None

    def find_plan(self, plan_id: str) -> Plan | None:
        for plan in self.plans:
            if plan.id == plan_id and plan.exposed:
                return plan
        return None

    def exposed_devices(self) -> list[Device]:
        return [device for device in self.devices if device.exposed]

    def exposed_plans(self) -> list[Plan]:
        return [plan for plan in self.plans if plan.exposed]

    def validate(self) -> None:
        """
        Check the snapshot is complete and internally consistent.

        Raises:
            DataIntegrityError: If required data is missing or inconsistent
        """
        problems = self.settings.problems()

        for device_id, count in Counter(device.id for device in self.devices).items():
            if count > 1:
                problems.append(f"duplicate device id '{device_id}'")
        for device in self.devices:
            if device.list_price < 0:
                problems.append(f"device '{device.id}' has a negative list price")

        for plan_id, count in Counter(plan.id for plan in self.plans).items():
            if count > 1:
                problems.append(f"duplicate plan id '{plan_id}'")
        for plan in self.plans:
            if plan.base_price < 0:
                problems.append(f"plan '{plan.id}' has a negative base price")

        for join_type in JoinType:
            entries = self.subsidies.get(join_type)
            if entries is None:
                problems.append(f"subsidy table '{join_type.value}' is missing")
                continue

            keys = Counter((entry.device_id, entry.plan_id) for entry in entries)
            for (device_id, plan_id), count in keys.items():
                if count > 1:
                    problems.append(
                        f"duplicate subsidy '{device_id}/{plan_id}' in '{join_type.value}'"
                    )

            for entry in entries:
                if min(entry.common_subsidy, entry.additional_subsidy, entry.select_subsidy) < 0:
                    problems.append(
                        f"subsidy '{entry.device_id}/{entry.plan_id}' in "
                        f"'{join_type.value}' has a negative amount"
                    )

        if problems:
            raise DataIntegrityError("Catalog failed integrity checks", problems=problems)
