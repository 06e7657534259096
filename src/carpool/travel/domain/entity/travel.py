import datetime as dt
from dataclasses import dataclass

from carpool.travel.domain.enum import TravelCityType


@dataclass(frozen=True)
class TravelStop:
    """旅程の出発地・到着地"""

    city_id: str
    city_name: str
    type: TravelCityType


@dataclass(frozen=True)
class Travel:
    """旅程エンティティ

    作成後は削除以外の変更を受け付けない。
    """

    id: str
    date: dt.datetime
    kms: float
    seats: int
    driver_id: str
    car_id: str
    stops: tuple[TravelStop, ...] = ()

    @property
    def departure(self) -> TravelStop | None:
        return self._stop(TravelCityType.DEPARTURE)

    @property
    def arrival(self) -> TravelStop | None:
        return self._stop(TravelCityType.ARRIVAL)

    def _stop(self, type: TravelCityType) -> TravelStop | None:
        return next((s for s in self.stops if s.type == type), None)


@dataclass(frozen=True)
class CreateTravelData:
    date: dt.datetime
    kms: float
    seats: int
    driver_id: str
    car_id: str
    departure_city_id: str
    arrival_city_id: str


@dataclass(frozen=True)
class TravelFilters:
    """都市名は完全一致、日付は UTC の同日で絞り込む"""

    departure_city: str | None = None
    arrival_city: str | None = None
    date: dt.date | None = None
