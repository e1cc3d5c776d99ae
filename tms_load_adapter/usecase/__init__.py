"""TMS Load Adapter 유스케이스 레이어.

변환 로직과 포트를 조율하는 애플리케이션 서비스를 정의한다.
네트워크 호출은 포트 구현체를 통해서만 한다.
"""

from tms_load_adapter.usecase.create_load import CreateLoad
from tms_load_adapter.usecase.delete_load import DeleteLoad, DeleteResult
from tms_load_adapter.usecase.list_loads import (
    fetch_listing,
    ListLoads,
    LoadPage,
)

__all__ = [
    "CreateLoad",
    "DeleteLoad",
    "DeleteResult",
    "fetch_listing",
    "ListLoads",
    "LoadPage",
]
