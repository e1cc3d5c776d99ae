"""설정 포트 인터페이스.

애플리케이션 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AuthConfig:
    """Bearer 토큰 캐시 설정.

    Args:
        token_refresh_margin_sec: 만료 몇 초 전에 토큰을 갱신할지.
    """

    token_refresh_margin_sec: float = 60.0


@dataclass(frozen=True)
class ShipmentConfig:
    """Shipment 생성 규칙 설정.

    Args:
        time_zone: startDate/endDate에 함께 보낼 time zone.
        pickup_lead_hours: 생성 시각부터 픽업 시작까지 (시간).
        delivery_lead_hours: 생성 시각부터 배송 종료까지 (시간).
        require_confirmed_id: True면 생성 응답에 ID가 없을 때
            임시 ID 대신 실패로 처리한다.
        temp_id_prefix: 임시 ID prefix.
    """

    time_zone: str = 'America/New_York'
    pickup_lead_hours: float = 24.0
    delivery_lead_hours: float = 48.0
    require_confirmed_id: bool = False
    temp_id_prefix: str = 'temp'


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정."""

    auth: AuthConfig = field(default_factory=AuthConfig)
    shipment: ShipmentConfig = field(default_factory=ShipmentConfig)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> AppConfig:
        """설정을 로드한다.

        Returns:
            로드된 AppConfig. 설정 소스가 없으면 기본값.
        """
