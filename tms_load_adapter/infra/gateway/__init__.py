"""TMS gateway 구현체."""

from tms_load_adapter.infra.gateway.in_memory_tms_gateway import (
    InMemoryTmsGateway,
)

__all__ = ['InMemoryTmsGateway']
