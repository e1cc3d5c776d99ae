"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from tms_load_adapter.usecase.ports.config_port import (
    AppConfig,
    AuthConfig,
    ConfigPort,
    ShipmentConfig,
)
from tms_load_adapter.usecase.ports.tms_gateway import (
    GatewayResponse,
    TmsGateway,
)
from tms_load_adapter.usecase.ports.token_provider import TokenProvider

__all__ = [
    "AppConfig",
    "AuthConfig",
    "ConfigPort",
    "GatewayResponse",
    "ShipmentConfig",
    "TmsGateway",
    "TokenProvider",
]
