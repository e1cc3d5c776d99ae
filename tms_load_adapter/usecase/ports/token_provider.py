"""Bearer 토큰 제공 포트 인터페이스."""

from abc import ABC, abstractmethod


class TokenProvider(ABC):
    """TMS bearer 토큰 제공자.

    토큰의 발급/갱신/만료 관리는 구현체가 담당하고,
    호출자는 토큰을 해석하지 않고 그대로 전달한다.
    """

    @abstractmethod
    def get_token(self) -> str:
        """유효한 bearer 토큰을 반환한다.

        Raises:
            CollaboratorError: 토큰 발급 실패 시.
        """

    @abstractmethod
    def invalidate(self) -> None:
        """캐시된 토큰을 폐기한다."""
