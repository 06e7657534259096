from aws_lambda_powertools import Logger
from pydantic import TypeAdapter

from carpool.shared.config import CacheConfig
from carpool.shared.domain import Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.service import CacheService
from carpool.shared.infrastructure.cache import CacheAside
from carpool.travel.domain.entity import CreateTravelData, Travel, TravelFilters
from carpool.travel.domain.repository import TravelRepository

_TRAVEL = TypeAdapter(Travel | None)
_TRAVEL_PAGE = TypeAdapter(Page[Travel])
_TRAVELS = TypeAdapter(list[Travel])


class CachedTravelRepository(TravelRepository):
    """TravelRepository のキャッシュアサイド・デコレータ"""

    def __init__(
        self,
        inner: TravelRepository,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self._inner = inner
        self._cache = CacheAside("travel", cache, config, logger)

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Travel], RepositoryError]:
        return self._cache.read(
            "find_all", (pagination,), _TRAVEL_PAGE, lambda: self._inner.find_all(pagination)
        )

    def find_by_id(self, id: str) -> Result[Travel | None, RepositoryError]:
        return self._cache.read(
            "find_by_id", (id,), _TRAVEL, lambda: self._inner.find_by_id(id)
        )

    def find_by_filters(self, filters: TravelFilters) -> Result[list[Travel], RepositoryError]:
        return self._cache.read(
            "find_by_filters",
            (filters,),
            _TRAVELS,
            lambda: self._inner.find_by_filters(filters),
        )

    def create(self, data: CreateTravelData) -> Result[Travel, RepositoryError]:
        result = self._inner.create(data)
        self._cache.invalidate(result, "travel")
        return result

    def delete(self, id: str) -> Result[None, RepositoryError]:
        # 旅程の削除で登録もカスケード削除される
        result = self._inner.delete(id)
        self._cache.invalidate(result, "travel", "inscription")
        return result
