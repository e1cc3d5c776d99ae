"""인메모리 TMS gateway 구현체."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any

from tms_load_adapter.infra.tms.shipment_decoder import ShipmentDecoder
from tms_load_adapter.usecase.ports.tms_gateway import (
    GatewayResponse,
    TmsGateway,
)

logger = logging.getLogger(__name__)

_CREATED_STATUS = 'Tendered'


class InMemoryTmsGateway(TmsGateway):
    """TmsGateway의 인메모리 구현체.

    TMS의 ``projectFields``/``details`` 형태로 shipment를 저장하고
    숫자 internal ID와 ``{prefix}-{n}`` display ID를 부여한다.
    모든 접근은 Lock으로 스레드 안전성을 보장한다.

    Args:
        expected_token: 지정하면 다른 토큰의 요청은 401로 거부한다.
        display_prefix: display ID prefix.
        confirm_ids: False면 생성 응답 본문에 ID를 넣지 않는다.
    """

    def __init__(
        self,
        expected_token: str | None = None,
        display_prefix: str = 'LD',
        confirm_ids: bool = True,
    ) -> None:
        self._lock = threading.Lock()
        self._expected_token = expected_token
        self._display_prefix = display_prefix
        self._confirm_ids = confirm_ids
        self._shipments: list[dict[str, Any]] = []
        self._next_id = 1

    def seed(self, records: list[dict[str, Any]]) -> None:
        """임의 형태의 shipment 레코드를 그대로 추가한다."""
        with self._lock:
            for record in records:
                self._shipments.append(copy.deepcopy(record))
                ident = ShipmentDecoder(record).internal_id().value_or('')
                if ident.isdigit():
                    self._next_id = max(self._next_id, int(ident) + 1)

    def list_shipments(self, token: str) -> GatewayResponse:
        if not self._authorized(token):
            return GatewayResponse(401, {'error': 'invalid bearer token'})
        with self._lock:
            shipments = copy.deepcopy(self._shipments)
        return GatewayResponse(200, {
            'shipments': shipments,
            'pagination': {
                'start': 0,
                'pageSize': len(shipments),
                'moreAvailable': False,
            },
        })

    def create_shipment(
        self, token: str, payload: dict[str, Any]
    ) -> GatewayResponse:
        if not self._authorized(token):
            return GatewayResponse(401, {'error': 'invalid bearer token'})

        with self._lock:
            internal_id = self._next_id
            self._next_id += 1
            record = self._build_record(internal_id, payload)
            self._shipments.append(record)

        logger.info(
            "Created shipment %s (%s)",
            internal_id, record['projectFields']['title']['displayId'],
        )
        if not self._confirm_ids:
            return GatewayResponse(201, {})
        return GatewayResponse(201, {
            'id': internal_id,
            'projectFields': copy.deepcopy(record['projectFields']),
        })

    def delete_shipment(self, token: str, internal_id: str) -> GatewayResponse:
        if not self._authorized(token):
            return GatewayResponse(401, {'error': 'invalid bearer token'})

        with self._lock:
            for index, record in enumerate(self._shipments):
                ident = ShipmentDecoder(record).internal_id()
                if ident.value_or('') == internal_id:
                    del self._shipments[index]
                    return GatewayResponse(200, {'deleted': internal_id})
        return GatewayResponse(
            404, {'error': f'shipment {internal_id} not found'}
        )

    def _authorized(self, token: str) -> bool:
        return self._expected_token is None or token == self._expected_token

    def _build_record(
        self, internal_id: int, payload: dict[str, Any]
    ) -> dict[str, Any]:
        orders = payload.get('customerOrder') or [{}]
        customer = orders[0].get('customer', {})
        return {
            'id': internal_id,
            'projectFields': {
                'title': {
                    'displayId': f'{self._display_prefix}-{internal_id}',
                },
                'status': {'description': _CREATED_STATUS},
            },
            'details': {
                'lane': copy.deepcopy(payload.get('lane', {})),
                'customer_orders': [
                    {'customer': {'name': customer.get('name', '')}},
                ],
                'contributors': [],
                'date': payload.get('startDate', {}).get('date', ''),
            },
        }
