from aws_lambda_powertools import Logger
from pydantic import TypeAdapter

from carpool.driver.domain.entity import CreateDriverData, Driver
from carpool.driver.domain.repository import DriverRepository
from carpool.shared.config import CacheConfig
from carpool.shared.domain import RepositoryError, Result
from carpool.shared.domain.service import CacheService
from carpool.shared.infrastructure.cache import CacheAside

_DRIVER = TypeAdapter(Driver | None)


class CachedDriverRepository(DriverRepository):
    """DriverRepository のキャッシュアサイド・デコレータ"""

    def __init__(
        self,
        inner: DriverRepository,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self._inner = inner
        self._cache = CacheAside("driver", cache, config, logger)

    def find_by_id(self, id: str) -> Result[Driver | None, RepositoryError]:
        return self._cache.read(
            "find_by_id", (id,), _DRIVER, lambda: self._inner.find_by_id(id)
        )

    def find_by_user_id(self, user_id: str) -> Result[Driver | None, RepositoryError]:
        return self._cache.read(
            "find_by_user_id",
            (user_id,),
            _DRIVER,
            lambda: self._inner.find_by_user_id(user_id),
        )

    def create(self, data: CreateDriverData) -> Result[Driver, RepositoryError]:
        # 運転者登録でユーザーのロールが変わるため user も無効化する
        result = self._inner.create(data)
        self._cache.invalidate(result, "driver", "user")
        return result
