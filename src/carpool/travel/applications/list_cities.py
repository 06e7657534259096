from carpool.shared.domain import Ok, Paginated, PaginationParams, RepositoryError, Result
from carpool.travel.domain.entity import City
from carpool.travel.domain.repository import CityRepository


class ListCitiesUseCase:
    def __init__(self, city_repository: CityRepository) -> None:
        self._city_repository = city_repository

    def execute(
        self, pagination: PaginationParams | None = None
    ) -> Result[Paginated[City], RepositoryError]:
        params = pagination or PaginationParams()
        result = self._city_repository.find_all(params)
        if not result.success:
            return result
        return Ok(Paginated.from_page(result.value, params))
