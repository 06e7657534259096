from aws_lambda_powertools import Logger
from pydantic import TypeAdapter

from carpool.shared.config import CacheConfig
from carpool.shared.domain import Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.service import CacheService
from carpool.shared.infrastructure.cache import CacheAside
from carpool.vehicle.domain.entity import Color, CreateColorData, UpdateColorData
from carpool.vehicle.domain.repository import ColorRepository

_COLOR = TypeAdapter(Color | None)
_COLOR_PAGE = TypeAdapter(Page[Color])


class CachedColorRepository(ColorRepository):
    def __init__(
        self,
        inner: ColorRepository,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self._inner = inner
        self._cache = CacheAside("color", cache, config, logger)

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Color], RepositoryError]:
        return self._cache.read(
            "find_all", (pagination,), _COLOR_PAGE, lambda: self._inner.find_all(pagination)
        )

    def find_by_id(self, id: str) -> Result[Color | None, RepositoryError]:
        return self._cache.read(
            "find_by_id", (id,), _COLOR, lambda: self._inner.find_by_id(id)
        )

    def find_by_name(self, name: str) -> Result[Color | None, RepositoryError]:
        return self._cache.read(
            "find_by_name", (name,), _COLOR, lambda: self._inner.find_by_name(name)
        )

    def create(self, data: CreateColorData) -> Result[Color, RepositoryError]:
        result = self._inner.create(data)
        self._cache.invalidate(result, "color")
        return result

    def update(self, id: str, data: UpdateColorData) -> Result[Color, RepositoryError]:
        result = self._inner.update(id, data)
        self._cache.invalidate(result, "color")
        return result

    def delete(self, id: str) -> Result[None, RepositoryError]:
        result = self._inner.delete(id)
        self._cache.invalidate(result, "color")
        return result
