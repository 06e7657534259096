from aws_lambda_powertools import Logger
from pydantic import TypeAdapter

from carpool.shared.config import CacheConfig
from carpool.shared.domain import Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.service import CacheService
from carpool.shared.infrastructure.cache import CacheAside
from carpool.vehicle.domain.entity import Car, CreateCarData, UpdateCarData
from carpool.vehicle.domain.repository import CarRepository

_CAR = TypeAdapter(Car | None)
_CAR_PAGE = TypeAdapter(Page[Car])
_BOOL = TypeAdapter(bool)


class CachedCarRepository(CarRepository):
    """CarRepository のキャッシュアサイド・デコレータ"""

    def __init__(
        self,
        inner: CarRepository,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self._inner = inner
        self._cache = CacheAside("car", cache, config, logger)

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Car], RepositoryError]:
        return self._cache.read(
            "find_all", (pagination,), _CAR_PAGE, lambda: self._inner.find_all(pagination)
        )

    def find_by_id(self, id: str) -> Result[Car | None, RepositoryError]:
        return self._cache.read("find_by_id", (id,), _CAR, lambda: self._inner.find_by_id(id))

    def exists_by_license_plate(self, license_plate: str) -> Result[bool, RepositoryError]:
        return self._cache.read(
            "exists_by_license_plate",
            (license_plate,),
            _BOOL,
            lambda: self._inner.exists_by_license_plate(license_plate),
        )

    def create(self, data: CreateCarData) -> Result[Car, RepositoryError]:
        result = self._inner.create(data)
        self._cache.invalidate(result, "car")
        return result

    def update(self, id: str, data: UpdateCarData) -> Result[Car, RepositoryError]:
        result = self._inner.update(id, data)
        self._cache.invalidate(result, "car")
        return result

    def delete(self, id: str) -> Result[None, RepositoryError]:
        result = self._inner.delete(id)
        self._cache.invalidate(result, "car")
        return result
