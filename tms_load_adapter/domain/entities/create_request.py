"""Load 생성 요청 엔티티."""

from dataclasses import dataclass

from tms_load_adapter.domain.exceptions import SerializationShapeError
from tms_load_adapter.domain.value_objects.location import Location


@dataclass(frozen=True)
class CreateLoadRequest:
    """입력 폼에서 전달되는 축약된 Load 생성 요청.

    Args:
        customer: 화주명.
        pickup: 픽업 도시.
        pickup_state: 픽업 주.
        pickup_country: 픽업 국가 (선택).
        delivery: 배송 도시.
        delivery_state: 배송 주.
        delivery_country: 배송 국가 (선택).
    """

    customer: str = ''
    pickup: str = ''
    pickup_state: str = ''
    pickup_country: str = ''
    delivery: str = ''
    delivery_state: str = ''
    delivery_country: str = ''

    @property
    def origin(self) -> Location:
        """픽업 위치.

        Raises:
            SerializationShapeError: 도시 또는 주가 비어있을 때.
        """
        return _build_location(
            'pickup', self.pickup, self.pickup_state, self.pickup_country
        )

    @property
    def destination(self) -> Location:
        """배송 위치.

        Raises:
            SerializationShapeError: 도시 또는 주가 비어있을 때.
        """
        return _build_location(
            'delivery',
            self.delivery,
            self.delivery_state,
            self.delivery_country,
        )


def _build_location(
    field: str, city: str, state: str, country: str
) -> Location:
    city, state, country = city.strip(), state.strip(), country.strip()
    if not city:
        raise SerializationShapeError(field, city, '도시가 비어있습니다.')
    if not state:
        raise SerializationShapeError(
            f'{field}State', state, '주(state)가 비어있습니다.'
        )
    return Location(city=city, state=state, country=country)
