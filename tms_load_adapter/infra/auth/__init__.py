"""Bearer 토큰 제공자 구현체."""

from tms_load_adapter.infra.auth.cached_token_provider import (
    CachedTokenProvider,
    parse_token_response,
    TokenGrant,
)

__all__ = [
    'CachedTokenProvider',
    'parse_token_response',
    'TokenGrant',
]
