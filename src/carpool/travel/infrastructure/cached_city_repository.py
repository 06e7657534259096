from aws_lambda_powertools import Logger
from pydantic import TypeAdapter

from carpool.shared.config import CacheConfig
from carpool.shared.domain import Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.service import CacheService
from carpool.shared.infrastructure.cache import CacheAside
from carpool.travel.domain.entity import City, CreateCityData
from carpool.travel.domain.repository import CityRepository

_CITY = TypeAdapter(City | None)
_CITY_PAGE = TypeAdapter(Page[City])


class CachedCityRepository(CityRepository):
    def __init__(
        self,
        inner: CityRepository,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self._inner = inner
        self._cache = CacheAside("city", cache, config, logger)

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[City], RepositoryError]:
        return self._cache.read(
            "find_all", (pagination,), _CITY_PAGE, lambda: self._inner.find_all(pagination)
        )

    def find_by_id(self, id: str) -> Result[City | None, RepositoryError]:
        return self._cache.read("find_by_id", (id,), _CITY, lambda: self._inner.find_by_id(id))

    def find_by_name(self, name: str) -> Result[City | None, RepositoryError]:
        return self._cache.read(
            "find_by_name", (name,), _CITY, lambda: self._inner.find_by_name(name)
        )

    def create(self, data: CreateCityData) -> Result[City, RepositoryError]:
        result = self._inner.create(data)
        self._cache.invalidate(result, "city")
        return result

    def delete(self, id: str) -> Result[None, RepositoryError]:
        result = self._inner.delete(id)
        self._cache.invalidate(result, "city")
        return result
