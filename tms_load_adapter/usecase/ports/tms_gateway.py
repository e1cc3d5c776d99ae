"""TMS 통신 포트 인터페이스.

외부 TMS shipment API 호출을 추상화한다.
HTTP 전송, 재시도, timeout은 구현체의 책임이다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GatewayResponse:
    """TMS 응답.

    Args:
        status_code: HTTP 상태 코드.
        body: 디코딩된 응답 본문 (목록 응답은 list일 수 있음).
            본문이 없으면 빈 dict.
    """

    status_code: int
    body: Any = field(default_factory=dict)

    def is_success(self, accepted: tuple[int, ...]) -> bool:
        """상태 코드가 허용 목록에 있는지 확인한다."""
        return self.status_code in accepted


class TmsGateway(ABC):
    """외부 TMS shipment API 포트."""

    @abstractmethod
    def list_shipments(self, token: str) -> GatewayResponse:
        """Shipment 목록을 조회한다.

        Args:
            token: Bearer 토큰.

        Returns:
            TMS 응답. 본문 구조는 TMS 버전에 따라 다르다.

        Raises:
            CollaboratorError: 응답을 받지 못했을 때.
        """

    @abstractmethod
    def create_shipment(
        self, token: str, payload: dict[str, Any]
    ) -> GatewayResponse:
        """Shipment를 생성한다.

        Args:
            token: Bearer 토큰.
            payload: 생성 payload.

        Returns:
            TMS 응답.

        Raises:
            CollaboratorError: 응답을 받지 못했을 때.
        """

    @abstractmethod
    def delete_shipment(self, token: str, internal_id: str) -> GatewayResponse:
        """Internal ID로 shipment를 삭제한다.

        Args:
            token: Bearer 토큰.
            internal_id: TMS 내부 ID.

        Returns:
            TMS 응답.

        Raises:
            CollaboratorError: 응답을 받지 못했을 때.
        """
