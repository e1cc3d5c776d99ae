"""필드 조회 결과 값 객체."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """값과 발견 여부를 함께 담는 조회 결과.

    필드 부재는 오류가 아니라 정상적인 결과이므로
    예외 대신 ``found=False`` 로 표현한다.

    Args:
        value: 조회된 값. 미발견이면 None.
        found: 발견 여부.
    """

    value: T | None = None
    found: bool = False

    @classmethod
    def of(cls, value: T) -> Lookup[T]:
        return cls(value=value, found=True)

    @classmethod
    def missing(cls) -> Lookup[T]:
        return cls()

    def value_or(self, default: T) -> T:
        """발견된 값, 또는 미발견 시 기본값을 반환한다."""
        if self.found:
            return self.value  # type: ignore[return-value]
        return default
