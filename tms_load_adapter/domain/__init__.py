"""TMS Load Adapter 도메인 레이어."""
