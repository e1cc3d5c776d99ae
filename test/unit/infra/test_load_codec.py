"""Load 요청/응답 dict 변환 단위 테스트."""

import pytest

from tms_load_adapter.domain.entities.create_request import CreateLoadRequest
from tms_load_adapter.domain.entities.load import Load
from tms_load_adapter.domain.exceptions import InvalidRequestError
from tms_load_adapter.infra.tms.load_codec import (
    decode_create_request,
    load_to_dict,
)


class TestDecodeCreateRequest:
    def test_form_request(self):
        data = {
            "customer": "Acme",
            "pickup": "Dallas",
            "pickupState": "TX",
            "pickupCountry": "USA",
            "delivery": "Reno",
            "deliveryState": "NV",
            "deliveryCountry": "",
        }
        result = decode_create_request(data)
        assert result == CreateLoadRequest(
            customer="Acme",
            pickup="Dallas",
            pickup_state="TX",
            pickup_country="USA",
            delivery="Reno",
            delivery_state="NV",
        )

    def test_load_request(self):
        data = {
            "origin": "Dallas, TX",
            "destination": "Reno, NV",
            "customer": "Acme",
            "carrier": "Default Carrier",
            "status": "active",
        }
        result = decode_create_request(data)
        assert result == Load(
            origin="Dallas, TX",
            destination="Reno, NV",
            customer="Acme",
            carrier="Default Carrier",
            status="active",
        )

    def test_missing_fields_are_empty(self):
        assert decode_create_request({}) == Load()

    def test_numbers_are_stringified(self):
        assert decode_create_request({"id": 12}).id == "12"

    @pytest.mark.parametrize("data", [None, [], "x"])
    def test_non_object_raises(self, data):
        with pytest.raises(InvalidRequestError):
            decode_create_request(data)

    @pytest.mark.parametrize("value", [{"a": 1}, ["x"], True])
    def test_bad_field_type_raises(self, value):
        with pytest.raises(InvalidRequestError, match="customer"):
            decode_create_request({"customer": value})


class TestLoadToDict:
    def test_with_internal_id(self):
        load = Load(
            id="LD-7", internal_id="99", origin="Dallas, TX",
            destination="Reno, NV", customer="Acme", carrier="Swift",
            status="In Transit", created_at="2025-09-05T08:00:00Z",
        )
        assert load_to_dict(load) == {
            "id": "LD-7",
            "numericId": "99",
            "origin": "Dallas, TX",
            "destination": "Reno, NV",
            "customer": "Acme",
            "carrier": "Swift",
            "status": "In Transit",
            "created_at": "2025-09-05T08:00:00Z",
        }

    def test_without_internal_id(self):
        data = load_to_dict(Load(id="temp-1"))
        assert "numericId" not in data
        assert data["id"] == "temp-1"
