from carpool.shared.domain import RepositoryError, Result
from carpool.vehicle.domain.entity import Brand, CreateBrandData
from carpool.vehicle.domain.repository import BrandRepository


class CreateBrandUseCase:
    def __init__(self, brand_repository: BrandRepository) -> None:
        self._brand_repository = brand_repository

    def execute(self, name: str) -> Result[Brand, RepositoryError]:
        return self._brand_repository.create(CreateBrandData(name=name))
