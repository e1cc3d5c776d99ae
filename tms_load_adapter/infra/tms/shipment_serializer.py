"""Load → TMS shipment 생성 payload 직렬화.

디코더와 달리 엄격하다. 형식이 맞지 않는 payload는 TMS가
조용히 거부하므로, 구성할 수 없는 입력은 즉시 오류로 보고한다.
"""

from __future__ import annotations

from datetime import UTC, datetime
import logging
from typing import Any

from tms_load_adapter.domain.entities.create_request import CreateLoadRequest
from tms_load_adapter.domain.entities.load import Load
from tms_load_adapter.domain.exceptions import SerializationShapeError
from tms_load_adapter.domain.value_objects.date_window import DateWindow
from tms_load_adapter.domain.value_objects.location import Location

logger = logging.getLogger(__name__)

_TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

# 모든 shipment에 들어가는 기본 품목 (업무 규칙 상수)
_ITEM_NAME = 'General Freight'
_ITEM_DESCRIPTION = 'General freight'
_ITEM_QUANTITY = 1
_ITEM_UNIT = ('6000', 'Pieces')
_ITEM_CATEGORY = ('22300', 'Other')


def format_timestamp(value: datetime) -> str:
    """UTC RFC 3339 문자열로 변환한다. naive datetime은 UTC로 본다."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(_TIMESTAMP_FORMAT)


def serialize_shipment(
    source: Load | CreateLoadRequest, window: DateWindow
) -> dict[str, Any]:
    """Shipment 생성 payload를 만든다.

    Args:
        source: Load 또는 축약된 생성 요청.
        window: 픽업/배송 일정 구간.

    Returns:
        TMS shipment 생성 payload.

    Raises:
        SerializationShapeError: 위치를 분해할 수 없거나
            화주명이 비어있을 때.
    """
    if isinstance(source, CreateLoadRequest):
        origin, destination = source.origin, source.destination
    else:
        origin = Location.parse(source.origin, field='origin')
        destination = Location.parse(source.destination, field='destination')

    customer = source.customer.strip()
    if not customer:
        raise SerializationShapeError(
            'customer', source.customer, '화주명이 비어있습니다.'
        )

    payload = {
        'ltlShipment': False,
        'startDate': _date_entry(window.start, window.time_zone),
        'endDate': _date_entry(window.end, window.time_zone),
        'lane': {
            'start': str(origin),
            'end': str(destination),
        },
        'customerOrder': [
            {
                'customer': {'name': customer, 'id': customer},
                'items': [_default_item()],
            },
        ],
        'carrierOrder': [],
    }
    logger.debug(
        "Serialized shipment %s -> %s for %s",
        origin, destination, customer,
    )
    return payload


def _date_entry(value: datetime, time_zone: str) -> dict[str, str]:
    return {'date': format_timestamp(value), 'timeZone': time_zone}


def _default_item() -> dict[str, Any]:
    unit_key, unit_value = _ITEM_UNIT
    category_key, category_value = _ITEM_CATEGORY
    return {
        'name': _ITEM_NAME,
        'description': _ITEM_DESCRIPTION,
        'qty': _ITEM_QUANTITY,
        'quantity': _ITEM_QUANTITY,
        'unit': {'key': unit_key, 'value': unit_value},
        'itemCategory': {'key': category_key, 'value': category_value},
    }
