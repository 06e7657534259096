from carpool.shared.domain import Ok, Paginated, PaginationParams, RepositoryError, Result
from carpool.travel.domain.entity import Travel
from carpool.travel.domain.repository import TravelRepository


class ListTravelsUseCase:
    def __init__(self, travel_repository: TravelRepository) -> None:
        self._travel_repository = travel_repository

    def execute(
        self, pagination: PaginationParams | None = None
    ) -> Result[Paginated[Travel], RepositoryError]:
        params = pagination or PaginationParams()
        result = self._travel_repository.find_all(params)
        if not result.success:
            return result
        return Ok(Paginated.from_page(result.value, params))
