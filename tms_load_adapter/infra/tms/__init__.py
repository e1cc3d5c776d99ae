"""TMS shipment 변환 (디코딩, 정규화, 직렬화, 식별자 변환)."""

from tms_load_adapter.infra.tms.identifier_resolver import resolve_identifier
from tms_load_adapter.infra.tms.load_codec import (
    decode_create_request,
    load_to_dict,
)
from tms_load_adapter.infra.tms.shipment_decoder import (
    decode_listing,
    ShipmentDecoder,
    ShipmentListing,
)
from tms_load_adapter.infra.tms.shipment_normalizer import (
    normalize,
    normalize_all,
)
from tms_load_adapter.infra.tms.shipment_serializer import (
    format_timestamp,
    serialize_shipment,
)

__all__ = [
    'decode_create_request',
    'decode_listing',
    'format_timestamp',
    'load_to_dict',
    'normalize',
    'normalize_all',
    'resolve_identifier',
    'serialize_shipment',
    'ShipmentDecoder',
    'ShipmentListing',
]
