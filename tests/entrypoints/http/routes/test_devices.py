"""
Test suite for the device browsing routes.

- GET /v1/devices
- GET /v1/devices/{device_id}
- GET /v1/devices/{device_id}/subsidies
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from handset_pricing.adapters.in_memory_catalog_repository import InMemoryCatalogRepository
from handset_pricing.domain.catalog import Catalog
from handset_pricing.domain.paging import Paging
from handset_pricing.entrypoints.http.dependencies import (
    get_device_by_id_use_case,
    get_list_device_subsidies_use_case,
    get_search_devices_use_case,
)
from handset_pricing.entrypoints.http.exception_handlers import register_exception_handlers
from handset_pricing.entrypoints.http.routes.devices import router
from handset_pricing.use_cases.get_device_by_id import GetDeviceById
from handset_pricing.use_cases.list_device_subsidies import ListDeviceSubsidies
from handset_pricing.use_cases.search_devices import (
    SearchDevices,
    SearchDevicesRequest,
    SearchDevicesResponse,
)


@pytest.fixture
def app(catalog: Catalog) -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")

    repository = InMemoryCatalogRepository(catalog)
    test_app.dependency_overrides[get_search_devices_use_case] = lambda: SearchDevices(repository)
    test_app.dependency_overrides[get_device_by_id_use_case] = lambda: GetDeviceById(repository)
    test_app.dependency_overrides[get_list_device_subsidies_use_case] = (
        lambda: ListDeviceSubsidies(repository)
    )
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# GET /v1/devices
# ==============================================================================


def test_get_devices_lists_exposed_devices(client: TestClient) -> None:
    response = client.get("/v1/devices")

    assert response.status_code == 200
    data = response.json()
    assert [device["id"] for device in data["devices"]] == [
        "galaxy-s24-256gb",
        "galaxy-a35-128gb",
        "iphone-16-128gb",
    ]
    assert data["total"] == 3
    assert data["offset"] == 0
    assert data["limit"] == 20


def test_get_devices_filters_by_brand(client: TestClient) -> None:
    response = client.get("/v1/devices", params={"brand": "apple"})

    data = response.json()
    assert [device["id"] for device in data["devices"]] == ["iphone-16-128gb"]
    assert data["total"] == 1


def test_get_devices_paginates_after_counting(client: TestClient) -> None:
    response = client.get("/v1/devices", params={"offset": 1, "limit": 1})

    data = response.json()
    assert [device["id"] for device in data["devices"]] == ["galaxy-a35-128gb"]
    assert data["total"] == 3
    assert data["offset"] == 1
    assert data["limit"] == 1


def test_get_devices_device_dto_has_correct_structure(client: TestClient) -> None:
    response = client.get("/v1/devices", params={"limit": 1})

    assert response.json()["devices"][0] == {
        "id": "galaxy-s24-256gb",
        "brand": "Samsung",
        "model": "Galaxy S24",
        "storage_gb": 256,
        "list_price": 1250000,
        "colors": [
            {"code": "onyx-black", "name": "오닉스 블랙", "hex": "#2B2B2B"},
            {"code": "marble-grey", "name": "마블 그레이", "hex": "#C9C9C9"},
        ],
    }


def test_get_devices_rejects_negative_offset(client: TestClient) -> None:
    response = client.get("/v1/devices", params={"offset": -1})

    assert response.status_code == 422


def test_get_devices_rejects_zero_limit(client: TestClient) -> None:
    response = client.get("/v1/devices", params={"limit": 0})

    assert response.status_code == 422


def test_get_devices_rejects_limit_exceeding_max(client: TestClient) -> None:
    response = client.get("/v1/devices", params={"limit": 201})

    assert response.status_code == 422


def test_get_devices_calls_use_case_with_mapped_request(app: FastAPI, client: TestClient) -> None:
    use_case = Mock()
    use_case.execute.return_value = SearchDevicesResponse(devices=[], total_count=0)
    app.dependency_overrides[get_search_devices_use_case] = lambda: use_case

    client.get("/v1/devices", params={"brand": "Samsung", "offset": 5, "limit": 10})

    use_case.execute.assert_called_once_with(
        SearchDevicesRequest(brand="Samsung", paging=Paging(offset=5, limit=10))
    )


# ==============================================================================
# GET /v1/devices/{device_id}
# ==============================================================================


def test_get_device_success(client: TestClient) -> None:
    response = client.get("/v1/devices/galaxy-a35-128gb")

    assert response.status_code == 200
    assert response.json() == {
        "id": "galaxy-a35-128gb",
        "brand": "Samsung",
        "model": "Galaxy A35",
        "storage_gb": 128,
        "list_price": 499400,
        "colors": [],
    }


def test_get_device_unknown_returns_404(client: TestClient) -> None:
    response = client.get("/v1/devices/pixel-9")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Device with identifier 'pixel-9' not found",
        "code": "NOT_FOUND",
    }


def test_get_device_hidden_returns_404(client: TestClient) -> None:
    response = client.get("/v1/devices/galaxy-z-flip5-256gb")

    assert response.status_code == 404


# ==============================================================================
# GET /v1/devices/{device_id}/subsidies
# ==============================================================================


def test_get_device_subsidies_keyed_by_join_type(client: TestClient) -> None:
    response = client.get("/v1/devices/galaxy-s24-256gb/subsidies")

    assert response.status_code == 200
    data = response.json()
    assert data["device_id"] == "galaxy-s24-256gb"
    assert list(data["subsidies"]) == ["change", "transfer", "new"]
    assert [entry["plan_id"] for entry in data["subsidies"]["change"]] == [
        "5g-premium",
        "lte-basic",
    ]
    assert data["subsidies"]["transfer"] == [
        {
            "plan_id": "5g-premium",
            "common_subsidy": 450000,
            "additional_subsidy": 150000,
            "select_subsidy": 50000,
        }
    ]


def test_get_device_subsidies_leaves_out_hidden_entries(client: TestClient) -> None:
    response = client.get("/v1/devices/galaxy-a35-128gb/subsidies")

    data = response.json()
    assert len(data["subsidies"]["change"]) == 1
    assert data["subsidies"]["transfer"] == []
    assert data["subsidies"]["new"] == []


def test_get_device_subsidies_hidden_device_returns_404(client: TestClient) -> None:
    response = client.get("/v1/devices/galaxy-z-flip5-256gb/subsidies")

    assert response.status_code == 404
