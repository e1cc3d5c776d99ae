"""배송 일정 구간 값 객체."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class DateWindow:
    """픽업 시작 ~ 배송 종료 구간.

    Args:
        start: 시작 시각 (UTC).
        end: 종료 시각 (UTC).
        time_zone: 함께 전송할 기준 time zone (IANA 이름).
    """

    start: datetime
    end: datetime
    time_zone: str

    @classmethod
    def from_now(
        cls,
        now: datetime,
        start_lead: timedelta,
        end_lead: timedelta,
        time_zone: str,
    ) -> DateWindow:
        """현재 시각 기준 lead time으로 구간을 만든다."""
        return cls(start=now + start_lead, end=now + end_lead,
                   time_zone=time_zone)
