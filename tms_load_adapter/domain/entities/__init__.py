"""TMS Load Adapter 도메인 엔티티."""

from tms_load_adapter.domain.entities.create_request import CreateLoadRequest
from tms_load_adapter.domain.entities.load import Load, UNKNOWN_STATUS

__all__ = [
    'CreateLoadRequest',
    'Load',
    'UNKNOWN_STATUS',
]
