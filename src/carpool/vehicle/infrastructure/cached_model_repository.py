from aws_lambda_powertools import Logger
from pydantic import TypeAdapter

from carpool.shared.config import CacheConfig
from carpool.shared.domain import RepositoryError, Result
from carpool.shared.domain.service import CacheService
from carpool.shared.infrastructure.cache import CacheAside
from carpool.vehicle.domain.entity import CreateModelData, Model
from carpool.vehicle.domain.repository import ModelRepository

_MODEL = TypeAdapter(Model | None)
_MODELS = TypeAdapter(list[Model])


class CachedModelRepository(ModelRepository):
    def __init__(
        self,
        inner: ModelRepository,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self._inner = inner
        self._cache = CacheAside("model", cache, config, logger)

    def find_all(self) -> Result[list[Model], RepositoryError]:
        return self._cache.read("find_all", (), _MODELS, self._inner.find_all)

    def find_by_id(self, id: str) -> Result[Model | None, RepositoryError]:
        return self._cache.read(
            "find_by_id", (id,), _MODEL, lambda: self._inner.find_by_id(id)
        )

    def find_by_name_and_brand(
        self, name: str, brand_id: str
    ) -> Result[Model | None, RepositoryError]:
        return self._cache.read(
            "find_by_name_and_brand",
            (name, brand_id),
            _MODEL,
            lambda: self._inner.find_by_name_and_brand(name, brand_id),
        )

    def create(self, data: CreateModelData) -> Result[Model, RepositoryError]:
        result = self._inner.create(data)
        self._cache.invalidate(result, "model")
        return result
