"""CreateLoad 유스케이스 단위 테스트."""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from tms_load_adapter.domain.entities.load import Load
from tms_load_adapter.domain.exceptions import (
    CollaboratorError,
    InvalidRequestError,
    SerializationShapeError,
)
from tms_load_adapter.infra.gateway import InMemoryTmsGateway
from tms_load_adapter.usecase.create_load import CREATED_STATUS, CreateLoad
from tms_load_adapter.usecase.list_loads import ListLoads
from tms_load_adapter.usecase.ports.tms_gateway import GatewayResponse


@pytest.fixture
def mock_deps(shipment_config):
    gateway = MagicMock()
    token_provider = MagicMock()
    token_provider.get_token.return_value = "token"
    gateway.create_shipment.return_value = GatewayResponse(201, {
        "id": 501,
        "projectFields": {"title": {"displayId": "LD-501"}},
    })
    return gateway, token_provider, shipment_config


@pytest.fixture
def usecase(mock_deps, fixed_now):
    gw, tp, cfg = mock_deps
    return CreateLoad(
        gateway=gw, token_provider=tp, config=cfg, clock=lambda: fixed_now,
    )


class TestPayload:
    def test_sends_serialized_payload(
        self, usecase, mock_deps, sample_load
    ):
        gw, _, _ = mock_deps
        usecase.execute(sample_load)

        token, payload = gw.create_shipment.call_args.args
        assert token == "token"
        assert payload["lane"] == {"start": "Dallas, TX", "end": "Reno, NV"}
        assert payload["startDate"] == {
            "date": "2025-09-05T08:00:00Z", "timeZone": "America/New_York",
        }
        assert payload["endDate"]["date"] == "2025-09-06T08:00:00Z"
        assert payload["customerOrder"][0]["customer"]["name"] == "Acme"

    def test_lead_hours_from_config(self, mock_deps, fixed_now, sample_load):
        gw, tp, cfg = mock_deps
        cfg = replace(cfg, pickup_lead_hours=2, delivery_lead_hours=6)
        CreateLoad(gw, tp, cfg, clock=lambda: fixed_now).execute(sample_load)

        payload = gw.create_shipment.call_args.args[1]
        assert payload["startDate"]["date"] == "2025-09-04T10:00:00Z"
        assert payload["endDate"]["date"] == "2025-09-04T14:00:00Z"

    def test_invalid_location_does_not_call_tms(
        self, usecase, mock_deps, sample_load
    ):
        gw, tp, _ = mock_deps
        with pytest.raises(SerializationShapeError):
            usecase.execute(replace(sample_load, origin="Dallas"))
        gw.create_shipment.assert_not_called()
        tp.get_token.assert_not_called()


class TestConfirmedIdentifiers:
    def test_overlays_response_ids(self, usecase, sample_load):
        load = usecase.execute(sample_load)

        assert load.id == "LD-501"
        assert load.internal_id == "501"
        assert load.origin == "Dallas, TX"
        assert load.destination == "Reno, NV"
        assert load.customer == "Acme"
        assert load.carrier == "SwiftCarrier"

    def test_default_status_and_timestamp(self, usecase, sample_load):
        load = usecase.execute(sample_load)

        assert load.status == CREATED_STATUS
        assert load.created_at == "2025-09-04T08:00:00Z"

    def test_keeps_request_status(self, usecase, sample_load):
        load = usecase.execute(replace(sample_load, status="Tendered"))
        assert load.status == "Tendered"

    def test_create_request(self, usecase, sample_create_request):
        load = usecase.execute(sample_create_request)

        assert load.id == "LD-501"
        assert load.origin == "Dallas, TX, USA"
        assert load.destination == "Reno, NV"
        assert load.customer == "Acme"
        assert load.carrier == ""

    def test_accepts_200(self, usecase, mock_deps, sample_load):
        gw, _, _ = mock_deps
        gw.create_shipment.return_value = GatewayResponse(
            200, {"id": "7", "title": {"displayId": "LD-7"}},
        )
        assert usecase.execute(sample_load).id == "LD-7"


class TestUnconfirmedIdentifiers:
    def test_temporary_id(self, usecase, mock_deps, sample_load, fixed_now):
        gw, _, _ = mock_deps
        gw.create_shipment.return_value = GatewayResponse(201, {})

        load = usecase.execute(sample_load)

        assert load.id == f"temp-{int(fixed_now.timestamp())}"
        assert load.internal_id == ""

    def test_require_confirmed_id(self, mock_deps, fixed_now, sample_load):
        gw, tp, cfg = mock_deps
        gw.create_shipment.return_value = GatewayResponse(201, {})
        usecase = CreateLoad(
            gw, tp, replace(cfg, require_confirmed_id=True),
            clock=lambda: fixed_now,
        )

        with pytest.raises(CollaboratorError):
            usecase.execute(sample_load)


class TestFailures:
    @pytest.mark.parametrize("status", [400, 409, 500])
    def test_non_success_raises(self, usecase, mock_deps, sample_load, status):
        gw, tp, _ = mock_deps
        gw.create_shipment.return_value = GatewayResponse(
            status, {"error": "nope"},
        )

        with pytest.raises(CollaboratorError) as exc_info:
            usecase.execute(sample_load)
        assert exc_info.value.status_code == status
        assert exc_info.value.operation == "create"
        tp.invalidate.assert_not_called()

    def test_unauthorized_invalidates_token(
        self, usecase, mock_deps, sample_load
    ):
        gw, tp, _ = mock_deps
        gw.create_shipment.return_value = GatewayResponse(401)

        with pytest.raises(CollaboratorError):
            usecase.execute(sample_load)
        tp.invalidate.assert_called_once()

    def test_transport_failure_propagates(
        self, usecase, mock_deps, sample_load
    ):
        gw, _, _ = mock_deps
        gw.create_shipment.side_effect = CollaboratorError("create")

        with pytest.raises(CollaboratorError):
            usecase.execute(sample_load)


class TestExecuteRaw:
    def test_form_request(self, usecase, mock_deps):
        load = usecase.execute_raw({
            "customer": "Acme",
            "pickup": "Dallas",
            "pickupState": "TX",
            "delivery": "Reno",
            "deliveryState": "NV",
        })

        assert load.origin == "Dallas, TX"
        assert load.destination == "Reno, NV"
        assert load.id == "LD-501"

    def test_load_request(self, usecase):
        load = usecase.execute_raw({
            "origin": "Dallas, TX",
            "destination": "Reno, NV",
            "customer": "Acme",
            "carrier": "SwiftCarrier",
        })
        assert load.carrier == "SwiftCarrier"

    def test_invalid_request(self, usecase, mock_deps):
        gw, _, _ = mock_deps
        with pytest.raises(InvalidRequestError):
            usecase.execute_raw(["not", "a", "mapping"])
        gw.create_shipment.assert_not_called()


class TestWithInMemoryGateway:
    def test_created_load_is_listed(self, shipment_config, fixed_now):
        gateway = InMemoryTmsGateway()
        token_provider = MagicMock()
        token_provider.get_token.return_value = "any"

        created = CreateLoad(
            gateway, token_provider, shipment_config,
            clock=lambda: fixed_now,
        ).execute(Load(
            origin="Dallas, TX", destination="Reno, NV", customer="Acme",
        ))
        listed = ListLoads(gateway, token_provider).execute()

        assert created.id == "LD-1"
        assert [(load.id, load.internal_id) for load in listed] == [
            ("LD-1", "1"),
        ]
        assert listed[0].origin == created.origin
