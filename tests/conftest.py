"""Pytest fixtures for floorplan-sync tests."""

import json
from datetime import datetime, timezone
from typing import Callable

import httpx
import pytest

from floorplan_sync.config import Settings
from floorplan_sync.models.property import PropertyConfig


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for a recording transport around a request handler."""
    return RecordingTransport


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def property_config() -> PropertyConfig:
    """Single configured property."""
    return PropertyConfig(
        entrata_property_id="123456",
        webflow_site_id="site-abc",
        webflow_collection_id="coll-xyz",
        name="The Heights",
    )


@pytest.fixture
def properties_json() -> str:
    """PROPERTIES value with two properties, as set in the environment."""
    return json.dumps(
        [
            {
                "entrataPropertyId": "123456",
                "webflowSiteId": "site-abc",
                "webflowCollectionId": "coll-xyz",
                "name": "The Heights",
            },
            {
                "entrataPropertyId": 987654,
                "webflowSiteId": "site-def",
                "webflowCollectionId": "coll-uvw",
            },
        ]
    )


@pytest.fixture
def env(properties_json: str) -> dict[str, str]:
    """Complete environment for a network run."""
    return {
        "ENTRATA_API_KEY": "entrata-key",
        "ENTRATA_BASE_URL": "https://apis.entrata.test/ext/",
        "ENTRATA_ORG": "acme",
        "WEBFLOW_API_TOKEN": "wf-token",
        "PROPERTIES": properties_json,
    }


@pytest.fixture
def settings(env: dict[str, str]) -> Settings:
    """Settings with no inter-batch delay."""
    return Settings.from_env(env).model_copy(update={"batch_delay": 0})


@pytest.fixture
def sample_floorplan() -> dict:
    """Entrata getFloorPlans record (MITS-style shape)."""
    return {
        "Identification": {"IDValue": "4411"},
        "Name": "B2 Corner Signature",
        "UnitCount": "24",
        "UnitsAvailable": "3",
        "Room": [
            {"@attributes": {"RoomType": "Bedroom", "Count": 2}},
            {"@attributes": {"RoomType": "Bathroom", "Count": 2}},
        ],
        "SquareFeet": {"@attributes": {"Min": "1,050", "Max": "1,120"}},
        "MarketRent": {"@attributes": {"Min": "1,899", "Max": "2,150"}},
        "File": [],
        "ImageUrl": "https://cdn.test/b2.png",
    }


@pytest.fixture
def sample_unit_type() -> dict:
    """Entrata getUnitTypes record (flat camelCase shape)."""
    return {
        "id": 77,
        "name": "Penthouse Loft",
        "beds": 3,
        "baths": 2.5,
        "sqft": 1800,
        "minRent": "3,000",
        "maxRent": "3,600",
        "availableUnits": 0,
        "totalUnits": 4,
    }
