"""공통 테스트 fixture."""

from datetime import UTC, datetime

import pytest

from tms_load_adapter.domain.entities.create_request import CreateLoadRequest
from tms_load_adapter.domain.entities.load import Load
from tms_load_adapter.usecase.ports.config_port import (
    AppConfig,
    ShipmentConfig,
)


@pytest.fixture
def sample_record():
    """Top-level 필드로 내려오는 shipment."""
    return {
        "id": "99",
        "title": {"displayId": "LD-7"},
        "lane": {"start": "Dallas, TX", "end": "Reno, NV"},
        "customer_orders": [{"customer": {"name": "Acme"}}],
        "contributors": [
            {
                "title": {"value": "Broker"},
                "contributorUser": {"name": "SwiftCarrier"},
            },
        ],
        "status": {"description": "In Transit"},
    }


@pytest.fixture
def project_fields_record():
    """projectFields/details 아래로 내려오는 shipment."""
    return {
        "id": 1042.0,
        "projectFields": {
            "title": {
                "displayId": "LD-1042",
                "customer": [{"name": "Project Customer"}],
            },
            "status": {"description": "Covered"},
        },
        "details": {
            "lane": {"start": "Chicago,IL", "end": " Atlanta , GA "},
            "customer_orders": [{"customer": {"name": "Globex"}}],
            "contributors": [
                {
                    "title": {"value": "Dispatcher"},
                    "contributorUser": {"name": "Someone"},
                },
                {
                    "title": {"value": "Broker"},
                    "contributorUser": {"name": "Roadrunner"},
                },
            ],
            "date": "2025-09-05T08:00:00Z",
        },
    }


@pytest.fixture
def stop_record():
    """stop 목록과 typed contributor를 쓰는 shipment."""
    return {
        "id": "S-55",
        "details": {
            "stops": [
                {
                    "type": "pickup",
                    "location": {"city": "Denver", "state": "CO"},
                },
                {
                    "type": "delivery",
                    "location": {"city": "Kansas City", "state": "MO"},
                },
            ],
            "contributors": [
                {"type": "customer", "name": "Initech"},
                {"type": "carrier", "name": "Hauler Inc"},
            ],
        },
        "status": "active",
        "createdAt": "2025-09-01T10:00:00Z",
    }


@pytest.fixture
def fixed_now():
    return datetime(2025, 9, 4, 8, 0, 0, tzinfo=UTC)


@pytest.fixture
def shipment_config():
    return ShipmentConfig(time_zone="America/New_York")


@pytest.fixture
def sample_config(shipment_config):
    return AppConfig(shipment=shipment_config)


@pytest.fixture
def sample_load():
    return Load(
        origin="Dallas, TX",
        destination="Reno, NV",
        customer="Acme",
        carrier="SwiftCarrier",
    )


@pytest.fixture
def sample_create_request():
    return CreateLoadRequest(
        customer="Acme",
        pickup="Dallas",
        pickup_state="TX",
        pickup_country="USA",
        delivery="Reno",
        delivery_state="NV",
    )
