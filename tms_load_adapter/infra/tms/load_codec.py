"""Load 요청/응답 dict 변환.

입력 폼의 생성 요청 dict를 도메인 객체로 읽고,
Load를 외부로 내보낼 JSON 호환 dict로 만든다.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tms_load_adapter.domain.entities.create_request import CreateLoadRequest
from tms_load_adapter.domain.entities.load import Load
from tms_load_adapter.domain.exceptions import InvalidRequestError

# 생성 요청 dict 키 ↔ CreateLoadRequest 필드
_CREATE_REQUEST_FIELDS: dict[str, str] = {
    'customer': 'customer',
    'pickup': 'pickup',
    'pickupState': 'pickup_state',
    'pickupCountry': 'pickup_country',
    'delivery': 'delivery',
    'deliveryState': 'delivery_state',
    'deliveryCountry': 'delivery_country',
}

_LOAD_FIELDS: dict[str, str] = {
    'id': 'id',
    'origin': 'origin',
    'destination': 'destination',
    'customer': 'customer',
    'carrier': 'carrier',
    'status': 'status',
}

_FORM_MARKERS = frozenset(
    {'pickup', 'pickupState', 'delivery', 'deliveryState'}
)


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ''
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidRequestError(
            f"'{key}' 필드는 문자열이어야 합니다: {value!r}"
        )
    return str(value).strip()


def decode_create_request(
    data: Any,
) -> Load | CreateLoadRequest:
    """생성 요청 dict를 도메인 객체로 변환한다.

    ``pickup``/``delivery`` 계열 키가 있으면 축약된
    :class:`CreateLoadRequest`, 아니면 ``origin``/``destination`` 을
    가진 :class:`Load` 로 읽는다. 구조 검증은 직렬화 단계에서 한다.

    Raises:
        InvalidRequestError: dict가 아니거나 필드 타입이 잘못되었을 때.
    """
    if not isinstance(data, Mapping):
        raise InvalidRequestError(
            f"생성 요청은 JSON object여야 합니다: {type(data).__name__}"
        )

    if _FORM_MARKERS & data.keys():
        return CreateLoadRequest(**{
            attr: _string_field(data, key)
            for key, attr in _CREATE_REQUEST_FIELDS.items()
        })
    return Load(**{
        attr: _string_field(data, key)
        for key, attr in _LOAD_FIELDS.items()
    })


def load_to_dict(load: Load) -> dict[str, str]:
    """Load를 JSON 호환 dict로 변환한다.

    ``numericId`` 는 internal ID가 있을 때만 포함한다.
    """
    data = {
        'id': load.id,
        'origin': load.origin,
        'destination': load.destination,
        'customer': load.customer,
        'carrier': load.carrier,
        'status': load.status,
        'created_at': load.created_at,
    }
    if load.internal_id:
        data['numericId'] = load.internal_id
    return data
