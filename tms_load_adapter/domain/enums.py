"""TMS Load Adapter 도메인 열거형 정의."""

from enum import StrEnum


class StopType(StrEnum):
    """Shipment stop 유형."""

    PICKUP = 'pickup'
    DELIVERY = 'delivery'


class ContributorType(StrEnum):
    """Contributor의 type 필드 값."""

    CUSTOMER = 'customer'
    CARRIER = 'carrier'


class ContributorTitle(StrEnum):
    """Contributor의 title.value 필드 값 (대소문자 구분)."""

    BROKER = 'Broker'
    CUSTOMER = 'Customer'


class ResolutionFailure(StrEnum):
    """Display ID 변환 실패 사유."""

    NO_MATCH = 'NO_MATCH'
    EMPTY_INTERNAL_ID = 'EMPTY_INTERNAL_ID'
