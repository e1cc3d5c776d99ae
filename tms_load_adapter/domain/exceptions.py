"""TMS Load Adapter 도메인 예외 정의."""

from __future__ import annotations

from tms_load_adapter.domain.enums import ResolutionFailure


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class InvalidRequestError(DomainError):
    """호출자가 전달한 요청 값이 비어있거나 잘못되었을 때."""


class SerializationShapeError(DomainError):
    """Outbound payload 구성에 필요한 구조적 전제가 깨졌을 때.

    Args:
        field: 문제가 된 입력 필드 이름.
        value: 문제가 된 입력 값.
        message: 상세 메시지.
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        super().__init__(f"[{field}] {message} (value={value!r})")
        self.field = field
        self.value = value


class ResolutionNotFoundError(DomainError):
    """Display ID를 internal ID로 변환하지 못했을 때.

    Args:
        display_id: 조회한 display ID.
        reason: 실패 사유.
    """

    def __init__(self, display_id: str, reason: ResolutionFailure) -> None:
        if reason is ResolutionFailure.EMPTY_INTERNAL_ID:
            message = (
                f"displayId [{display_id}]와 일치하는 shipment에 "
                "internal ID가 없습니다."
            )
        else:
            message = f"displayId [{display_id}]와 일치하는 shipment가 없습니다."
        super().__init__(message)
        self.display_id = display_id
        self.reason = reason


class CollaboratorError(DomainError):
    """외부 TMS 호출(목록/생성/삭제/토큰)이 실패했을 때.

    Args:
        operation: 실패한 호출 이름 (e.g. 'list', 'create').
        status_code: 응답 상태 코드. 응답 자체가 없으면 None.
        detail: 응답 본문 또는 실패 사유.
    """

    def __init__(
        self,
        operation: str,
        status_code: int | None = None,
        detail: str = '',
    ) -> None:
        status = status_code if status_code is not None else 'no response'
        super().__init__(f"TMS {operation} 호출 실패 ({status}): {detail}")
        self.operation = operation
        self.status_code = status_code
        self.detail = detail
