"""Load 삭제 유스케이스.

TMS 삭제 API는 internal ID를 요구하지만 호출자는 display ID만 안다.
목록 조회 → display ID 변환 → internal ID로 삭제 순으로 처리하며,
이 과정은 TMS에 대해 원자적이지 않다.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from tms_load_adapter.domain.exceptions import (
    CollaboratorError,
    InvalidRequestError,
)
from tms_load_adapter.infra.tms.identifier_resolver import resolve_identifier
from tms_load_adapter.usecase.list_loads import fetch_listing
from tms_load_adapter.usecase.ports.tms_gateway import TmsGateway
from tms_load_adapter.usecase.ports.token_provider import TokenProvider

logger = logging.getLogger(__name__)

_SUCCESS_STATUSES = (200, 204)
_UNAUTHORIZED = 401
_BAD_GATEWAY = 502


@dataclass(frozen=True)
class DeleteResult:
    """삭제 결과.

    Args:
        display_id: 요청된 display ID.
        internal_id: 변환된 internal ID.
        success: 삭제 성공 여부.
        status_code: TMS 응답 상태 코드 (응답이 없으면 502).
        message: 결과 메시지.
    """

    display_id: str
    internal_id: str
    success: bool
    status_code: int
    message: str = ''


class DeleteLoad:
    """Load 삭제 유스케이스.

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

    def execute(self, display_id: str) -> DeleteResult:
        """Display ID로 Load를 삭제한다.

        Args:
            display_id: 삭제할 Load의 display ID.

        Returns:
            삭제 호출 결과. TMS 삭제 실패도 예외 대신 결과로 돌려준다.

        Raises:
            InvalidRequestError: display ID가 비어있을 때.
            ResolutionNotFoundError: display ID와 일치하는 shipment가 없을 때.
            CollaboratorError: 토큰 발급 또는 목록 조회 실패 시.
        """
        if not isinstance(display_id, str) or not display_id.strip():
            raise InvalidRequestError('삭제할 display ID가 필요합니다.')
        display_id = display_id.strip()

        token = self._token_provider.get_token()
        listing = fetch_listing(self._gateway, self._token_provider, token)
        pair = resolve_identifier(display_id, listing.records)

        try:
            result = self._gateway.delete_shipment(token, pair.internal_id)
        except CollaboratorError as e:
            logger.warning(
                "Delete call for %s (internal=%s) failed: %s",
                display_id, pair.internal_id, e,
            )
            return DeleteResult(
                display_id=display_id,
                internal_id=pair.internal_id,
                success=False,
                status_code=e.status_code or _BAD_GATEWAY,
                message=str(e),
            )

        if result.is_success(_SUCCESS_STATUSES):
            logger.info(
                "Deleted load %s (internal=%s)", display_id, pair.internal_id
            )
            return DeleteResult(
                display_id=display_id,
                internal_id=pair.internal_id,
                success=True,
                status_code=result.status_code,
                message='Load deleted successfully',
            )

        if result.status_code == _UNAUTHORIZED:
            self._token_provider.invalidate()
        logger.warning(
            "Delete of %s (internal=%s) rejected with status %d",
            display_id, pair.internal_id, result.status_code,
        )
        return DeleteResult(
            display_id=display_id,
            internal_id=pair.internal_id,
            success=False,
            status_code=result.status_code,
            message=(
                f'Delete failed (status {result.status_code}): {result.body}'
            ),
        )
