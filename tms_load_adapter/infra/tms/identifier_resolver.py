"""Display ID → TMS internal ID 변환."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging
from typing import Any

from tms_load_adapter.domain.enums import ResolutionFailure
from tms_load_adapter.domain.exceptions import ResolutionNotFoundError
from tms_load_adapter.domain.value_objects.identifier import IdentifierPair
from tms_load_adapter.infra.tms.shipment_decoder import ShipmentDecoder

logger = logging.getLogger(__name__)


def _identifier_pairs(records: Iterable[Any]) -> Iterator[IdentifierPair]:
    for record in records:
        decoder = ShipmentDecoder(record)
        display_id = decoder.display_id()
        if not display_id.found:
            continue
        yield IdentifierPair(
            display_id=display_id.value_or(''),
            internal_id=decoder.internal_id().value_or(''),
        )


def resolve_identifier(
    display_id: str, records: Iterable[Any]
) -> IdentifierPair:
    """목록에서 display ID와 일치하는 첫 레코드의 internal ID를 찾는다.

    Display ID는 목록 안에서 유일하다고 가정하며 중복은 검사하지 않는다.

    Args:
        display_id: 찾을 display ID.
        records: TMS 목록 레코드.

    Returns:
        일치한 IdentifierPair (internal_id는 비어있지 않음).

    Raises:
        ResolutionNotFoundError: 일치하는 레코드가 없거나,
            일치한 레코드에 internal ID가 없을 때.
    """
    for pair in _identifier_pairs(records):
        if pair.display_id != display_id:
            continue
        if not pair.internal_id:
            raise ResolutionNotFoundError(
                display_id, ResolutionFailure.EMPTY_INTERNAL_ID
            )
        logger.debug(
            "Resolved displayId %s -> %s", display_id, pair.internal_id
        )
        return pair
    raise ResolutionNotFoundError(display_id, ResolutionFailure.NO_MATCH)
