"""InMemoryTmsGateway 단위 테스트."""

import pytest

from tms_load_adapter.infra.gateway import InMemoryTmsGateway
from tms_load_adapter.infra.tms.shipment_normalizer import normalize


@pytest.fixture
def gateway():
    return InMemoryTmsGateway(expected_token="secret")


@pytest.fixture
def payload():
    return {
        "ltlShipment": False,
        "startDate": {
            "date": "2025-09-05T08:00:00Z", "timeZone": "America/New_York",
        },
        "lane": {"start": "Dallas, TX", "end": "Reno, NV"},
        "customerOrder": [{"customer": {"name": "Acme", "id": "Acme"}}],
        "carrierOrder": [],
    }


class TestList:
    def test_empty(self, gateway):
        response = gateway.list_shipments("secret")
        assert response.status_code == 200
        assert response.body["shipments"] == []
        assert response.body["pagination"]["moreAvailable"] is False

    def test_wrong_token(self, gateway):
        response = gateway.list_shipments("wrong")
        assert response.status_code == 401

    def test_returns_copies(self, gateway, sample_record):
        gateway.seed([sample_record])
        response = gateway.list_shipments("secret")
        response.body["shipments"][0]["id"] = "changed"

        records = gateway.list_shipments("secret").body["shipments"]
        assert records[0]["id"] == "99"


class TestCreate:
    def test_assigns_ids(self, gateway, payload):
        first = gateway.create_shipment("secret", payload)
        second = gateway.create_shipment("secret", payload)

        assert first.status_code == 201
        assert first.body["id"] == 1
        assert first.body["projectFields"]["title"]["displayId"] == "LD-1"
        assert second.body["id"] == 2

    def test_created_record_normalizes(self, gateway, payload):
        gateway.create_shipment("secret", payload)
        record = gateway.list_shipments("secret").body["shipments"][0]

        load = normalize(record)
        assert load.id == "LD-1"
        assert load.internal_id == "1"
        assert load.origin == "Dallas, TX"
        assert load.destination == "Reno, NV"
        assert load.customer == "Acme"
        assert load.status == "Tendered"
        assert load.created_at == "2025-09-05T08:00:00Z"

    def test_ids_continue_after_seed(self, gateway, payload, sample_record):
        gateway.seed([sample_record])
        response = gateway.create_shipment("secret", payload)
        assert response.body["id"] == 100

    def test_unconfirmed_ids(self, payload):
        gateway = InMemoryTmsGateway(confirm_ids=False)
        response = gateway.create_shipment("any", payload)
        assert response.status_code == 201
        assert response.body == {}

    def test_wrong_token(self, gateway, payload):
        assert gateway.create_shipment("wrong", payload).status_code == 401


class TestDelete:
    def test_deletes_by_internal_id(self, gateway, sample_record):
        gateway.seed([sample_record])
        response = gateway.delete_shipment("secret", "99")

        assert response.status_code == 200
        assert gateway.list_shipments("secret").body["shipments"] == []

    def test_display_id_is_not_accepted(self, gateway, sample_record):
        gateway.seed([sample_record])
        assert gateway.delete_shipment("secret", "LD-7").status_code == 404

    def test_wrong_token(self, gateway, sample_record):
        gateway.seed([sample_record])
        assert gateway.delete_shipment("wrong", "99").status_code == 401
