from aws_lambda_powertools import Logger
from pydantic import TypeAdapter

from carpool.shared.config import CacheConfig
from carpool.shared.domain import Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.service import CacheService
from carpool.shared.infrastructure.cache import CacheAside
from carpool.vehicle.domain.entity import Brand, CreateBrandData
from carpool.vehicle.domain.repository import BrandRepository

_BRAND = TypeAdapter(Brand | None)
_BRAND_PAGE = TypeAdapter(Page[Brand])


class CachedBrandRepository(BrandRepository):
    def __init__(
        self,
        inner: BrandRepository,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self._inner = inner
        self._cache = CacheAside("brand", cache, config, logger)

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Brand], RepositoryError]:
        return self._cache.read(
            "find_all", (pagination,), _BRAND_PAGE, lambda: self._inner.find_all(pagination)
        )

    def find_by_id(self, id: str) -> Result[Brand | None, RepositoryError]:
        return self._cache.read(
            "find_by_id", (id,), _BRAND, lambda: self._inner.find_by_id(id)
        )

    def create(self, data: CreateBrandData) -> Result[Brand, RepositoryError]:
        result = self._inner.create(data)
        self._cache.invalidate(result, "brand", "model")
        return result

    def delete(self, id: str) -> Result[None, RepositoryError]:
        # 配下の車種はカスケード削除される
        result = self._inner.delete(id)
        self._cache.invalidate(result, "brand", "model")
        return result
