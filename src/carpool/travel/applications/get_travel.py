from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import TravelNotFoundError
from carpool.travel.domain.entity import Travel
from carpool.travel.domain.repository import TravelRepository


class GetTravelUseCase:
    def __init__(self, travel_repository: TravelRepository) -> None:
        self._travel_repository = travel_repository

    def execute(self, id: str) -> Result[Travel, TravelNotFoundError | RepositoryError]:
        result = self._travel_repository.find_by_id(id)
        if not result.success:
            return result
        if result.value is None:
            return Err(TravelNotFoundError(id))
        return Ok(result.value)
