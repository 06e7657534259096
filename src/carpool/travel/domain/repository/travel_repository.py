from abc import abstractmethod

from carpool.shared.domain import Page, PaginationParams, Repository, RepositoryError, Result
from carpool.travel.domain.entity import CreateTravelData, Travel, TravelFilters


class TravelRepository(Repository[Travel, CreateTravelData]):
    """旅程リポジトリのインターフェース"""

    @abstractmethod
    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Travel], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def find_by_filters(self, filters: TravelFilters) -> Result[list[Travel], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: str) -> Result[None, RepositoryError]:
        """旅程を削除する（登録も併せて削除される）"""
        raise NotImplementedError
