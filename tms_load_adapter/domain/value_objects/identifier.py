"""식별자 값 객체."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IdentifierPair:
    """Display ID와 TMS internal ID의 대응.

    삭제 요청 처리 중에만 만들어지며 저장하지 않는다.

    Args:
        display_id: 사용자에게 보이는 ID (e.g. 'LD-7').
        internal_id: TMS 내부 surrogate key (e.g. '99').
    """

    display_id: str
    internal_id: str
