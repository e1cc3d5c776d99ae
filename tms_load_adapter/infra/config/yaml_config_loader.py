"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from tms_load_adapter.usecase.ports.config_port import (
    AppConfig,
    AuthConfig,
    ConfigPort,
    ShipmentConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)

_ROOT_KEY = "tms_load_adapter"


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 AppConfig로 변환한다.
    파일이 없거나 형식이 잘못되면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    def load(self) -> AppConfig:
        """YAML 파일에서 설정을 로드한다."""
        params = self._extract_params(self._read_yaml())

        auth_data = _section(params, "auth")
        shipment_data = _section(params, "shipment")

        defaults = AppConfig()
        config = AppConfig(
            auth=AuthConfig(
                token_refresh_margin_sec=auth_data.get(
                    "token_refresh_margin_sec",
                    defaults.auth.token_refresh_margin_sec,
                ),
            ),
            shipment=ShipmentConfig(
                time_zone=shipment_data.get(
                    "time_zone", defaults.shipment.time_zone
                ),
                pickup_lead_hours=shipment_data.get(
                    "pickup_lead_hours", defaults.shipment.pickup_lead_hours
                ),
                delivery_lead_hours=shipment_data.get(
                    "delivery_lead_hours",
                    defaults.shipment.delivery_lead_hours,
                ),
                require_confirmed_id=shipment_data.get(
                    "require_confirmed_id",
                    defaults.shipment.require_confirmed_id,
                ),
                temp_id_prefix=shipment_data.get(
                    "temp_id_prefix", defaults.shipment.temp_id_prefix
                ),
            ),
        )

        logger.info("Config loaded from %s", self._path)
        return config

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """최상위 tms_load_adapter 키가 있으면 그 아래를 사용한다."""
        node_data = raw.get(_ROOT_KEY, raw)
        if isinstance(node_data, dict):
            return node_data
        return {}


def _section(params: dict[str, Any], name: str) -> dict[str, Any]:
    data = params.get(name, {})
    if not isinstance(data, dict):
        logger.warning("Config section '%s' is not a mapping, ignored", name)
        return {}
    return data
