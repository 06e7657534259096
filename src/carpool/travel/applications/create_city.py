from carpool.shared.domain import RepositoryError, Result
from carpool.travel.domain.entity import City, CreateCityData
from carpool.travel.domain.repository import CityRepository


class CreateCityUseCase:
    def __init__(self, city_repository: CityRepository) -> None:
        self._city_repository = city_repository

    def execute(self, name: str, zipcode: str = "") -> Result[City, RepositoryError]:
        return self._city_repository.create(CreateCityData(name=name, zipcode=zipcode))
