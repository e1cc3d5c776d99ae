"""만료 시각 기반 bearer 토큰 캐시 구현체."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
import threading
import time
from typing import Any

from tms_load_adapter.domain.exceptions import CollaboratorError
from tms_load_adapter.usecase.ports.config_port import AuthConfig
from tms_load_adapter.usecase.ports.token_provider import TokenProvider

logger = logging.getLogger(__name__)

# 토큰 응답에 expires_in이 없을 때 가정하는 유효 시간 (초)
_DEFAULT_EXPIRES_IN_SEC = 3600.0


@dataclass(frozen=True)
class TokenGrant:
    """발급받은 토큰.

    Args:
        access_token: bearer 토큰 문자열.
        expires_in_sec: 발급 시점부터의 유효 시간 (초).
    """

    access_token: str
    expires_in_sec: float = _DEFAULT_EXPIRES_IN_SEC


def parse_token_response(body: Mapping[str, Any]) -> TokenGrant:
    """OAuth 토큰 응답 본문에서 TokenGrant를 만든다.

    Raises:
        CollaboratorError: access_token이 없을 때.
    """
    token = body.get('access_token')
    if not isinstance(token, str) or not token:
        raise CollaboratorError('token', detail='access_token이 없습니다.')

    expires_in = body.get('expires_in')
    if isinstance(expires_in, bool) or not isinstance(
        expires_in, (int, float)
    ):
        expires_in = _DEFAULT_EXPIRES_IN_SEC
    return TokenGrant(access_token=token, expires_in_sec=float(expires_in))


class CachedTokenProvider(TokenProvider):
    """TokenProvider의 인메모리 캐시 구현체.

    만료 ``refresh_margin_sec`` 초 전까지는 캐시된 토큰을 반환하고,
    그 이후에는 ``fetch_grant`` 로 새 토큰을 발급받는다.
    margin은 토큰 수명의 절반을 넘지 않는다.
    모든 접근은 Lock으로 스레드 안전성을 보장한다.

    Args:
        fetch_grant: 새 토큰을 발급받는 함수 (인증 collaborator).
        refresh_margin_sec: 만료 전 갱신 여유 시간 (초).
        clock: 단조 증가 시계. 테스트에서 교체한다.
    """

    def __init__(
        self,
        fetch_grant: Callable[[], TokenGrant],
        refresh_margin_sec: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fetch_grant = fetch_grant
        self._margin = refresh_margin_sec
        self._clock = clock
        self._lock = threading.Lock()
        self._token = ''
        self._refresh_at = 0.0

    @classmethod
    def from_config(
        cls,
        config: AuthConfig,
        fetch_grant: Callable[[], TokenGrant],
    ) -> CachedTokenProvider:
        return cls(
            fetch_grant,
            refresh_margin_sec=config.token_refresh_margin_sec,
        )

    def get_token(self) -> str:
        with self._lock:
            now = self._clock()
            if self._token and now < self._refresh_at:
                return self._token

            grant = self._fetch_grant()
            if not grant.access_token:
                raise CollaboratorError(
                    'token', detail='빈 access_token을 받았습니다.'
                )
            self._token = grant.access_token
            lifetime = max(grant.expires_in_sec, 0.0)
            # 수명이 margin보다 짧은 토큰도 절반까지는 재사용한다
            margin = min(self._margin, lifetime / 2)
            self._refresh_at = now + lifetime - margin
            logger.info(
                "Bearer token refreshed (expires in %.0fs)",
                grant.expires_in_sec,
            )
            return self._token

    def invalidate(self) -> None:
        with self._lock:
            self._token = ''
            self._refresh_at = 0.0
        logger.debug("Bearer token invalidated")
