"""Infra 레이어 (포트 구현체와 외부 포맷 변환)."""
