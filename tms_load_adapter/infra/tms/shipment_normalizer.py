"""TMS shipment → Load 정규화."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any

from tms_load_adapter.domain.entities.load import Load, UNKNOWN_STATUS
from tms_load_adapter.domain.value_objects.location import LaneEndpoints
from tms_load_adapter.infra.tms.shipment_decoder import ShipmentDecoder

logger = logging.getLogger(__name__)


def normalize(record: Any) -> Load:
    """Shipment 레코드 하나를 Load로 변환한다.

    찾지 못한 필드는 빈 문자열, 상태는 ``'Unknown'`` 으로 채운다.
    목록에서 읽은 레코드의 생성 시각은 없으면 비워둔다.
    dict가 아닌 레코드는 빈 Load가 되지만, :func:`normalize_all` 은
    그런 항목을 건너뛴다.

    Args:
        record: 디코딩된 shipment 레코드.

    Returns:
        정규화된 Load.
    """
    decoder = ShipmentDecoder(record)
    lane = decoder.lane_endpoints().value_or(LaneEndpoints())
    return Load(
        id=decoder.display_id().value_or(''),
        internal_id=decoder.internal_id().value_or(''),
        origin=lane.origin,
        destination=lane.destination,
        customer=decoder.customer_name().value_or(''),
        carrier=decoder.carrier_name().value_or(''),
        status=decoder.status_description().value_or(UNKNOWN_STATUS),
        created_at=decoder.timestamp().value_or(''),
    )


def normalize_all(records: Iterable[Any]) -> list[Load]:
    """레코드 목록을 순서대로 정규화한다.

    dict가 아닌 항목은 shipment가 아니므로 건너뛴다.
    """
    loads: list[Load] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            logger.warning(
                "Skipping non-object shipment at index %d (%s)",
                index, type(record).__name__,
            )
            continue
        load = normalize(record)
        logger.debug("Normalized shipment %s -> %s", load.internal_id, load.id)
        loads.append(load)
    return loads
