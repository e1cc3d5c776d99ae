"""외부 TMS shipment 레코드 디코더.

TMS API 버전에 따라 같은 shipment가 서로 다른 구조로 내려온다.
(top-level 필드, ``details.*``, ``projectFields.*``)
필드 경로는 이 모듈에서만 알고, 나머지 코드는 accessor만 사용한다.

모든 accessor는 예외를 던지지 않고 :class:`Lookup` 을 반환한다.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import logging
import math
from typing import Any

from tms_load_adapter.domain.enums import (
    ContributorTitle,
    ContributorType,
    StopType,
)
from tms_load_adapter.domain.value_objects.location import LaneEndpoints
from tms_load_adapter.domain.value_objects.lookup import Lookup

logger = logging.getLogger(__name__)

Path = tuple[str, ...]

_MISSING = object()

# -- 필드 경로 (앞쪽이 우선) --

_DISPLAY_ID_PATHS: tuple[Path, ...] = (
    ('projectFields', 'title', 'displayId'),
    ('title', 'displayId'),
)
_INTERNAL_ID_PATH: Path = ('id',)

_LANE_PATHS: tuple[Path, ...] = (
    ('lane',),
    ('details', 'lane'),
    ('projectFields', 'route'),
)
_STOP_PATHS: tuple[Path, ...] = (
    ('stops',),
    ('details', 'stops'),
)

_CUSTOMER_ORDER_PATHS: tuple[Path, ...] = (
    ('customer_orders',),
    ('details', 'customer_orders'),
)
_CONTRIBUTOR_PATHS: tuple[Path, ...] = (
    ('contributors',),
    ('details', 'contributors'),
)
_PROJECT_CUSTOMER_PATHS: tuple[Path, ...] = (
    ('projectFields', 'title', 'customer'),
    ('title', 'customer'),
)

_STATUS_PATHS: tuple[Path, ...] = (
    ('status', 'description'),
    ('details', 'status', 'description'),
    ('projectFields', 'status', 'description'),
    ('status',),
)
_TIMESTAMP_PATHS: tuple[Path, ...] = (
    ('createdAt',),
    ('created_at',),
    ('details', 'date'),
)

_LISTING_PATHS: tuple[Path, ...] = (
    ('shipments',),
    ('details', 'shipments'),
)
_PAGINATION_PATHS: tuple[Path, ...] = (
    ('pagination',),
    ('details', 'pagination'),
)

_LOCATION_PARTS = ('city', 'state', 'country')


# -- 저수준 탐색 헬퍼 --

def _dig(data: Any, path: Path) -> Any:
    """중첩 dict에서 경로를 따라 값을 꺼낸다. 없으면 _MISSING."""
    current = data
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return _MISSING
        current = current[key]
    return _MISSING if current is None else current


def _text(value: Any) -> str | None:
    """공백이 아닌 문자열이면 strip하여 반환한다."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _first_text(data: Any, paths: Iterable[Path]) -> str | None:
    for path in paths:
        text = _text(_dig(data, path))
        if text is not None:
            return text
    return None


def _first_list(data: Any, paths: Iterable[Path]) -> list[Any]:
    """경로 중 처음으로 비어있지 않은 list를 반환한다."""
    for path in paths:
        value = _dig(data, path)
        if isinstance(value, list) and value:
            return value
    return []


def coerce_identifier(value: Any) -> str | None:
    """숫자/문자열 식별자를 문자열로 변환한다.

    ``99``, ``99.0``, ``"99"`` 는 모두 ``"99"`` 가 된다.
    bool, 컨테이너, NaN/inf 는 식별자로 보지 않는다.

    Returns:
        변환된 문자열 (빈 문자열 가능) 또는 변환 불가 시 None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, str):
        return value.strip()
    return None


def normalize_location_text(value: Any) -> str | None:
    """위치 값을 ``"City, State[, Country]"`` 형태로 관대하게 정규화한다.

    문자열은 쉼표 구분 세그먼트의 공백을 정리하고,
    ``{city, state, country}`` 구조는 이어 붙인다.
    세그먼트 수는 검증하지 않는다.
    """
    if isinstance(value, Mapping):
        parts = [_text(value.get(k)) for k in _LOCATION_PARTS]
    elif isinstance(value, str):
        parts = [_text(p) for p in value.split(',')]
    else:
        return None
    joined = ', '.join(p for p in parts if p)
    return joined or None


# -- 레코드 디코더 --

class ShipmentDecoder:
    """TMS shipment 레코드 하나에 대한 읽기 전용 accessor.

    레코드는 변경하지 않는다. dict가 아닌 레코드는
    모든 필드가 없는 레코드로 취급한다.

    Args:
        record: 디코딩된 JSON shipment 레코드.
    """

    def __init__(self, record: Any) -> None:
        self._record = record if isinstance(record, Mapping) else {}

    def display_id(self) -> Lookup[str]:
        """Display ID.

        ``title.displayId`` 계열 경로를 먼저 보고,
        없으면 top-level ``id`` 를 문자열로 변환해 사용한다.
        """
        for path in (*_DISPLAY_ID_PATHS, _INTERNAL_ID_PATH):
            ident = coerce_identifier(_dig(self._record, path))
            if ident:
                return Lookup.of(ident)
        return Lookup.missing()

    def internal_id(self) -> Lookup[str]:
        """Top-level ``id`` (TMS internal ID).

        키가 있으면 값이 빈 문자열이어도 found로 본다.
        """
        ident = coerce_identifier(_dig(self._record, _INTERNAL_ID_PATH))
        if ident is None:
            return Lookup.missing()
        return Lookup.of(ident)

    def lane_endpoints(self) -> Lookup[LaneEndpoints]:
        """출발/도착지.

        lane ``{start, end}`` 가 stop 목록보다 우선한다.
        stop 목록은 유형별 첫 번째 stop만 사용한다.
        """
        for path in _LANE_PATHS:
            lane = _dig(self._record, path)
            if not isinstance(lane, Mapping):
                continue
            start = normalize_location_text(lane.get('start'))
            end = normalize_location_text(lane.get('end'))
            if start or end:
                return Lookup.of(LaneEndpoints(start or '', end or ''))

        stops = _first_list(self._record, _STOP_PATHS)
        if stops:
            origin = self._first_stop_location(stops, StopType.PICKUP)
            destination = self._first_stop_location(stops, StopType.DELIVERY)
            if origin or destination:
                return Lookup.of(
                    LaneEndpoints(origin or '', destination or '')
                )
        return Lookup.missing()

    def customer_name(self) -> Lookup[str]:
        """화주명.

        1. ``customer_orders[0].customer.name``
        2. 화주 역할 contributor
        3. ``projectFields.title.customer[0].name``

        처음으로 비어있지 않은 값을 사용한다.
        """
        for strategy in (
            self._customer_from_orders,
            self._customer_from_contributors,
            self._customer_from_project,
        ):
            name = strategy()
            if name:
                return Lookup.of(name)
        return Lookup.missing()

    def carrier_name(self) -> Lookup[str]:
        """운송사명.

        ``title.value == 'Broker'`` 또는 ``type == 'carrier'`` 인
        첫 contributor의 이름. 대소문자를 구분한다.
        """
        for contributor in self._contributors():
            role = _dig(contributor, ('title', 'value'))
            if (role == ContributorTitle.BROKER
                    or contributor.get('type') == ContributorType.CARRIER):
                name = _contributor_name(contributor)
                if name:
                    return Lookup.of(name)
        return Lookup.missing()

    def status_description(self) -> Lookup[str]:
        status = _first_text(self._record, _STATUS_PATHS)
        return Lookup.missing() if status is None else Lookup.of(status)

    def timestamp(self) -> Lookup[str]:
        stamp = _first_text(self._record, _TIMESTAMP_PATHS)
        return Lookup.missing() if stamp is None else Lookup.of(stamp)

    # -- 내부 헬퍼 --

    def _contributors(self) -> list[Mapping[str, Any]]:
        return [
            c for c in _first_list(self._record, _CONTRIBUTOR_PATHS)
            if isinstance(c, Mapping)
        ]

    def _customer_from_orders(self) -> str | None:
        orders = _first_list(self._record, _CUSTOMER_ORDER_PATHS)
        if not orders:
            return None
        return _text(_dig(orders[0], ('customer', 'name')))

    def _customer_from_contributors(self) -> str | None:
        for contributor in self._contributors():
            role = _dig(contributor, ('title', 'value'))
            if (role == ContributorTitle.CUSTOMER
                    or contributor.get('type') == ContributorType.CUSTOMER):
                name = _contributor_name(contributor)
                if name:
                    return name
        return None

    def _customer_from_project(self) -> str | None:
        customers = _first_list(self._record, _PROJECT_CUSTOMER_PATHS)
        if not customers:
            return None
        return _text(_dig(customers[0], ('name',)))

    @staticmethod
    def _first_stop_location(
        stops: list[Any], stop_type: StopType
    ) -> str | None:
        for stop in stops:
            if isinstance(stop, Mapping) and stop.get('type') == stop_type:
                return normalize_location_text(stop.get('location'))
        return None


def _contributor_name(contributor: Mapping[str, Any]) -> str | None:
    return (
        _text(_dig(contributor, ('contributorUser', 'name')))
        or _text(contributor.get('name'))
    )


# -- 목록 응답 --

@dataclass(frozen=True)
class ShipmentListing:
    """TMS 목록 응답에서 꺼낸 레코드와 페이지 정보.

    Args:
        records: shipment 레코드 (응답 순서 유지).
        pagination: 페이지 정보. 없으면 빈 dict.
    """

    records: list[Any] = field(default_factory=list)
    pagination: dict[str, Any] = field(default_factory=dict)


def decode_listing(response: Any) -> ShipmentListing:
    """목록 응답을 ShipmentListing으로 변환한다.

    ``{"shipments": [...]}``, ``{"details": {"shipments": [...]}}``,
    또는 레코드 list 자체를 받는다. 인식할 수 없는 응답은 빈 목록이다.
    """
    if isinstance(response, list):
        return ShipmentListing(records=list(response))
    if not isinstance(response, Mapping):
        logger.warning(
            "Unrecognized shipment listing type: %s",
            type(response).__name__,
        )
        return ShipmentListing()

    records: list[Any] = []
    for path in _LISTING_PATHS:
        value = _dig(response, path)
        if isinstance(value, list):
            records = list(value)
            break

    pagination: dict[str, Any] = {}
    for path in _PAGINATION_PATHS:
        value = _dig(response, path)
        if isinstance(value, Mapping):
            pagination = dict(value)
            break

    return ShipmentListing(records=records, pagination=pagination)
