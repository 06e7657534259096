from carpool.shared.domain import RepositoryError, Result
from carpool.travel.domain.entity import Travel, TravelFilters
from carpool.travel.domain.repository import TravelRepository


class FindTravelsUseCase:
    """出発地・到着地・日付による旅程検索"""

    def __init__(self, travel_repository: TravelRepository) -> None:
        self._travel_repository = travel_repository

    def execute(self, filters: TravelFilters) -> Result[list[Travel], RepositoryError]:
        return self._travel_repository.find_by_filters(filters)
