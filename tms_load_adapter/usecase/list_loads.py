"""Load 목록 조회 유스케이스.

TMS shipment 목록을 받아 Load 목록으로 정규화한다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

from tms_load_adapter.domain.entities.load import Load
from tms_load_adapter.domain.exceptions import CollaboratorError
from tms_load_adapter.infra.tms.shipment_decoder import (
    decode_listing,
    ShipmentListing,
)
from tms_load_adapter.infra.tms.shipment_normalizer import normalize_all
from tms_load_adapter.usecase.ports.tms_gateway import TmsGateway
from tms_load_adapter.usecase.ports.token_provider import TokenProvider

logger = logging.getLogger(__name__)

_SUCCESS_STATUSES = (200,)
_UNAUTHORIZED = 401


@dataclass(frozen=True)
class LoadPage:
    """정규화된 Load 목록과 TMS 페이지 정보.

    Args:
        loads: TMS 목록 순서 그대로의 Load 목록.
        pagination: TMS가 내려준 페이지 정보. 없으면 빈 dict.
    """

    loads: list[Load] = field(default_factory=list)
    pagination: dict[str, Any] = field(default_factory=dict)


def fetch_listing(
    gateway: TmsGateway,
    token_provider: TokenProvider,
    token: str,
) -> ShipmentListing:
    """TMS 목록을 조회해 ShipmentListing으로 변환한다.

    401 응답이면 캐시된 토큰을 폐기한다. 재시도는 하지 않는다.

    Args:
        gateway: TMS 통신 포트.
        token_provider: 401 응답 시 토큰을 폐기할 제공자.
        token: 요청에 사용할 bearer 토큰.

    Raises:
        CollaboratorError: 응답이 없거나 200이 아닐 때.
    """
    response = gateway.list_shipments(token)
    if not response.is_success(_SUCCESS_STATUSES):
        if response.status_code == _UNAUTHORIZED:
            token_provider.invalidate()
        raise CollaboratorError(
            'list', response.status_code, str(response.body)
        )
    return decode_listing(response.body)


class ListLoads:
    """Load 목록 조회 유스케이스.

    토큰 조회 → TMS 목록 조회 → 레코드별 정규화.

    Args:
        gateway: TMS 통신 포트.
        token_provider: bearer 토큰 제공자.
    """

    def __init__(
        self,
        gateway: TmsGateway,
        token_provider: TokenProvider,
    ) -> None:
        self._gateway = gateway
        self._token_provider = token_provider

    def execute(self) -> list[Load]:
        """Load 목록을 반환한다. 목록이 비어있으면 빈 list.

        Raises:
            CollaboratorError: 토큰 발급 또는 목록 조회 실패 시.
        """
        return self.execute_page().loads

    def execute_page(self) -> LoadPage:
        """Load 목록과 페이지 정보를 반환한다.

        Raises:
            CollaboratorError: 토큰 발급 또는 목록 조회 실패 시.
        """
        token = self._token_provider.get_token()
        listing = fetch_listing(self._gateway, self._token_provider, token)
        loads = normalize_all(listing.records)
        logger.info(
            "Listed %d loads (%d records)", len(loads), len(listing.records)
        )
        return LoadPage(loads=loads, pagination=listing.pagination)
