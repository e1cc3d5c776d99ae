"""TMS Load Adapter.

단순화된 Load 도메인 모델과 외부 TMS shipment 표현 사이의 변환을 담당한다.
"""
