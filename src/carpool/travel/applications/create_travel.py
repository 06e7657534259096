from dataclasses import dataclass
from datetime import datetime

from aws_lambda_powertools import Logger

from carpool.driver.domain.repository import DriverRepository
from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import CarNotFoundError, DriverNotFoundError
from carpool.travel.domain.entity import CreateCityData, CreateTravelData, Travel
from carpool.travel.domain.repository import CityRepository, TravelRepository
from carpool.vehicle.domain.repository import CarRepository

logger = Logger(child=True)


@dataclass(frozen=True)
class CreateTravelInput:
    user_id: str
    date: datetime
    kms: float
    seats: int
    car_id: str
    departure_city: str
    arrival_city: str


class CreateTravelUseCase:
    """旅程作成ユースケース

    1. 呼び出し元が運転者であることを確認
    2. 車両の存在確認
    3. 出発地・到着地の都市を名前で検索し、なければ作成
    4. 旅程を作成
    """

    def __init__(
        self,
        travel_repository: TravelRepository,
        driver_repository: DriverRepository,
        car_repository: CarRepository,
        city_repository: CityRepository,
    ) -> None:
        self._travel_repository = travel_repository
        self._driver_repository = driver_repository
        self._car_repository = car_repository
        self._city_repository = city_repository

    def execute(
        self, input: CreateTravelInput
    ) -> Result[Travel, DriverNotFoundError | CarNotFoundError | RepositoryError]:
        driver = self._driver_repository.find_by_user_id(input.user_id)
        if not driver.success:
            return driver
        if driver.value is None:
            return Err(DriverNotFoundError(input.user_id))

        car = self._car_repository.find_by_id(input.car_id)
        if not car.success:
            return car
        if car.value is None:
            return Err(CarNotFoundError(input.car_id))

        departure_id = self._find_or_create_city(input.departure_city)
        if not departure_id.success:
            return departure_id
        arrival_id = self._find_or_create_city(input.arrival_city)
        if not arrival_id.success:
            return arrival_id

        created = self._travel_repository.create(
            CreateTravelData(
                date=input.date,
                kms=input.kms,
                seats=input.seats,
                driver_id=driver.value.id,
                car_id=input.car_id,
                departure_city_id=departure_id.value,
                arrival_city_id=arrival_id.value,
            )
        )
        if created.success:
            logger.info(
                "Travel created",
                extra={"travel_id": created.value.id, "driver_id": driver.value.id},
            )
        return created

    def _find_or_create_city(self, name: str) -> Result[str, RepositoryError]:
        found = self._city_repository.find_by_name(name)
        if not found.success:
            return found
        if found.value is not None:
            return Ok(found.value.id)

        created = self._city_repository.create(CreateCityData(name=name))
        if not created.success:
            return created
        return Ok(created.value.id)
