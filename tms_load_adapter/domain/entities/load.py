"""Load 엔티티."""

from __future__ import annotations

from dataclasses import dataclass, replace

# 상태를 확인할 수 없을 때의 표시값
UNKNOWN_STATUS = 'Unknown'


@dataclass(frozen=True)
class Load:
    """애플리케이션에 노출되는 정규화된 화물(Load).

    모든 필드는 문자열이며, 값을 확인하지 못한 필드는
    None이 아니라 빈 문자열로 채운다.

    Args:
        id: Display ID (e.g. 'LD-1023') 또는 시스템 할당 ID.
        internal_id: TMS 내부 ID. 모르면 빈 문자열.
        origin: 출발지 ("City, State[, Country]").
        destination: 도착지 ("City, State[, Country]").
        customer: 화주명.
        carrier: 운송사(Broker)명.
        status: 상태 설명.
        created_at: 생성 시각 (ISO-8601).
    """

    id: str = ''
    internal_id: str = ''
    origin: str = ''
    destination: str = ''
    customer: str = ''
    carrier: str = ''
    status: str = ''
    created_at: str = ''

    def with_identifiers(self, display_id: str, internal_id: str) -> Load:
        """ID만 교체한 복사본을 반환한다."""
        return replace(self, id=display_id, internal_id=internal_id)
