"""Load 생성 유스케이스.

생성 요청을 TMS shipment payload로 직렬화하여 전송하고,
TMS가 확인한 ID를 요청 데이터에 덮어써 Load를 만든다.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime, timedelta
import logging
from typing import Any

from tms_load_adapter.domain.entities.create_request import CreateLoadRequest
from tms_load_adapter.domain.entities.load import Load
from tms_load_adapter.domain.exceptions import CollaboratorError
from tms_load_adapter.domain.value_objects.date_window import DateWindow
from tms_load_adapter.infra.tms.load_codec import decode_create_request
from tms_load_adapter.infra.tms.shipment_decoder import ShipmentDecoder
from tms_load_adapter.infra.tms.shipment_serializer import (
    format_timestamp,
    serialize_shipment,
)
from tms_load_adapter.usecase.ports.config_port import ShipmentConfig
from tms_load_adapter.usecase.ports.tms_gateway import (
    GatewayResponse,
    TmsGateway,
)
from tms_load_adapter.usecase.ports.token_provider import TokenProvider

logger = logging.getLogger(__name__)

_SUCCESS_STATUSES = (200, 201)
_UNAUTHORIZED = 401

# 새로 생성된 Load의 기본 상태
CREATED_STATUS = 'active'


def _utc_now() -> datetime:
    return datetime.now(UTC)


class CreateLoad:
    """Load 생성 유스케이스.

    요청 → payload 직렬화 → TMS 생성 → 확인된 ID로 Load 구성.

    Args:
        gateway: TMS 통신 포트.
        token_provider: bearer 토큰 제공자.
        config: shipment 생성 규칙 설정.
        clock: 현재 시각 함수. 테스트에서 교체한다.
    """

    def __init__(
        self,
        gateway: TmsGateway,
        token_provider: TokenProvider,
        config: ShipmentConfig,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._gateway = gateway
        self._token_provider = token_provider
        self._config = config
        self._clock = clock

    def execute_raw(self, data: Any) -> Load:
        """디코딩 전 요청 dict로 Load를 생성한다.

        Raises:
            InvalidRequestError: 요청 형식이 잘못되었을 때.
            SerializationShapeError: payload를 구성할 수 없을 때.
            CollaboratorError: TMS 호출 실패 시.
        """
        return self.execute(decode_create_request(data))

    def execute(self, source: Load | CreateLoadRequest) -> Load:
        """Load를 생성한다.

        Args:
            source: Load 또는 축약된 생성 요청.

        Returns:
            생성된 Load. TMS가 ID를 돌려주지 않으면 임시 ID를 가진다.

        Raises:
            SerializationShapeError: payload를 구성할 수 없을 때.
            CollaboratorError: TMS 호출 실패, 또는 ID 확인이 필수인데
                응답에 ID가 없을 때.
        """
        now = self._clock()
        payload = serialize_shipment(source, self._build_window(now))

        token = self._token_provider.get_token()
        response = self._gateway.create_shipment(token, payload)
        if not response.is_success(_SUCCESS_STATUSES):
            if response.status_code == _UNAUTHORIZED:
                self._token_provider.invalidate()
            raise CollaboratorError(
                'create', response.status_code, str(response.body)
            )

        load = self._overlay_identifiers(
            self._base_load(source, payload, now), response, now
        )
        logger.info("Created load %s (internal=%s)", load.id, load.internal_id)
        return load

    def _build_window(self, now: datetime) -> DateWindow:
        return DateWindow.from_now(
            now,
            start_lead=timedelta(hours=self._config.pickup_lead_hours),
            end_lead=timedelta(hours=self._config.delivery_lead_hours),
            time_zone=self._config.time_zone,
        )

    def _base_load(
        self,
        source: Load | CreateLoadRequest,
        payload: dict[str, Any],
        now: datetime,
    ) -> Load:
        """요청 데이터로 Load를 만든다. 위치는 전송한 lane 값을 따른다."""
        lane = payload['lane']
        if isinstance(source, CreateLoadRequest):
            base = Load(customer=source.customer.strip())
        else:
            base = source
        return replace(
            base,
            origin=lane['start'],
            destination=lane['end'],
            status=base.status or CREATED_STATUS,
            created_at=base.created_at or format_timestamp(now),
        )

    def _overlay_identifiers(
        self, load: Load, response: GatewayResponse, now: datetime
    ) -> Load:
        """응답의 확인된 ID를 덮어쓴다. 없으면 임시 ID를 만든다."""
        decoder = ShipmentDecoder(response.body)
        display_id = decoder.display_id()
        if display_id.found:
            return load.with_identifiers(
                display_id.value_or(''),
                decoder.internal_id().value_or(''),
            )

        if self._config.require_confirmed_id:
            raise CollaboratorError(
                'create', response.status_code,
                '생성 응답에 shipment ID가 없습니다.',
            )

        temp_id = f'{self._config.temp_id_prefix}-{int(now.timestamp())}'
        logger.warning(
            "Create response carried no shipment id, using %s", temp_id
        )
        return load.with_identifiers(temp_id, '')
