"""TMS Load Adapter 값 객체 (불변, 동등성 기반 비교)."""

from tms_load_adapter.domain.value_objects.date_window import DateWindow
from tms_load_adapter.domain.value_objects.identifier import IdentifierPair
from tms_load_adapter.domain.value_objects.location import (
    LaneEndpoints,
    Location,
)
from tms_load_adapter.domain.value_objects.lookup import Lookup

__all__ = [
    'DateWindow',
    'IdentifierPair',
    'LaneEndpoints',
    'Location',
    'Lookup',
]
