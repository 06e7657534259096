from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import CarNotFoundError
from carpool.vehicle.domain.repository import CarRepository


class DeleteCarUseCase:
    def __init__(self, car_repository: CarRepository) -> None:
        self._car_repository = car_repository

    def execute(self, id: str) -> Result[None, CarNotFoundError | RepositoryError]:
        found = self._car_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None:
            return Err(CarNotFoundError(id))
        return self._car_repository.delete(id)
