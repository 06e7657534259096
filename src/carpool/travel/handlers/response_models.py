from datetime import datetime

from pydantic import BaseModel

from carpool.travel.domain.entity import Travel


class TravelData(BaseModel):
    """旅程のレスポンスモデル"""

    id: str
    date: datetime
    kms: float
    seats: int
    driver_id: str
    car_id: str
    departure_city: str | None
    arrival_city: str | None

    @classmethod
    def from_entity(cls, travel: Travel) -> "TravelData":
        return cls(
            id=travel.id,
            date=travel.date,
            kms=travel.kms,
            seats=travel.seats,
            driver_id=travel.driver_id,
            car_id=travel.car_id,
            departure_city=travel.departure.city_name if travel.departure else None,
            arrival_city=travel.arrival.city_name if travel.arrival else None,
        )
