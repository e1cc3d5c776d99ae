"""위치 관련 값 객체."""

from __future__ import annotations

from dataclasses import dataclass

from tms_load_adapter.domain.exceptions import SerializationShapeError

_SEPARATOR = ','


@dataclass(frozen=True)
class Location:
    """도시/주/국가로 구성된 위치.

    정규 문자열 표현은 ``"City, State[, Country]"`` 이다.

    Args:
        city: 도시명.
        state: 주(州) 코드 또는 이름.
        country: 국가. 비어있으면 문자열 표현에서 생략한다.
    """

    city: str
    state: str
    country: str = ''

    @classmethod
    def parse(cls, text: str, field: str = 'location') -> Location:
        """``"City, State[, Country]"`` 문자열을 엄격하게 분해한다.

        Args:
            text: 분해할 위치 문자열.
            field: 오류 메시지에 사용할 입력 필드 이름.

        Returns:
            분해된 Location.

        Raises:
            SerializationShapeError: 세그먼트 수가 2~3개가 아니거나
                빈 세그먼트가 있을 때.
        """
        if not isinstance(text, str) or not text.strip():
            raise SerializationShapeError(field, text, '위치 값이 비어있습니다.')

        segments = [s.strip() for s in text.split(_SEPARATOR)]
        if len(segments) not in (2, 3):
            raise SerializationShapeError(
                field, text,
                f"'City, State[, Country]' 형식이 아닙니다 "
                f"(segments={len(segments)}).",
            )
        if not all(segments):
            raise SerializationShapeError(
                field, text, '빈 위치 세그먼트가 있습니다.'
            )
        return cls(*segments)

    def __str__(self) -> str:
        parts = [self.city, self.state]
        if self.country:
            parts.append(self.country)
        return f'{_SEPARATOR} '.join(parts)


@dataclass(frozen=True)
class LaneEndpoints:
    """Shipment lane의 출발/도착 위치 문자열.

    Args:
        origin: 출발지 ("City, State[, Country]").
        destination: 도착지 ("City, State[, Country]").
    """

    origin: str = ''
    destination: str = ''
