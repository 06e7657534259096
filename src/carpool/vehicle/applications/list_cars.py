from carpool.shared.domain import Ok, Paginated, PaginationParams, RepositoryError, Result
from carpool.vehicle.domain.entity import Car
from carpool.vehicle.domain.repository import CarRepository


class ListCarsUseCase:
    def __init__(self, car_repository: CarRepository) -> None:
        self._car_repository = car_repository

    def execute(
        self, pagination: PaginationParams | None = None
    ) -> Result[Paginated[Car], RepositoryError]:
        params = pagination or PaginationParams()
        result = self._car_repository.find_all(params)
        if not result.success:
            return result
        return Ok(Paginated.from_page(result.value, params))
