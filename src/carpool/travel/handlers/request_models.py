import datetime as dt

from pydantic import Field

from carpool.shared.utils.request_model import RequestModel


class CreateTravelRequest(RequestModel):
    """旅程作成リクエストスキーマ"""

    date: dt.datetime = Field(
        ..., description="出発日時（ISO 8601形式）", examples=["2026-11-02T08:30:00Z"]
    )
    kms: float = Field(..., gt=0, description="走行距離（km）")
    seats: int = Field(..., ge=1, le=8, description="乗客用の座席数")
    car_id: str = Field(..., min_length=1)
    departure_city: str = Field(..., min_length=1, max_length=100, examples=["Lyon"])
    arrival_city: str = Field(..., min_length=1, max_length=100, examples=["Paris"])


class SearchTravelsQuery(RequestModel):
    departure_city: str | None = None
    arrival_city: str | None = None
    date: dt.date | None = None


class CreateCityRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=100)
    zipcode: str = Field(default="", max_length=10)
