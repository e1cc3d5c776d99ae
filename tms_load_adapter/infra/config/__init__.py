"""설정 로더 구현체."""
