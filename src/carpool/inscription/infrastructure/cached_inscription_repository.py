from aws_lambda_powertools import Logger
from pydantic import TypeAdapter

from carpool.inscription.domain.entity import CreateInscriptionData, Inscription
from carpool.inscription.domain.repository import InscriptionRepository
from carpool.shared.config import CacheConfig
from carpool.shared.domain import Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.service import CacheService
from carpool.shared.infrastructure.cache import CacheAside

_INSCRIPTION = TypeAdapter(Inscription | None)
_INSCRIPTION_PAGE = TypeAdapter(Page[Inscription])
_INSCRIPTIONS = TypeAdapter(list[Inscription])
_BOOL = TypeAdapter(bool)
_INT = TypeAdapter(int)


class CachedInscriptionRepository(InscriptionRepository):
    """InscriptionRepository のキャッシュアサイド・デコレータ

    exists / count もキャッシュするが、これらはユースケースの事前チェックにのみ
    使われ、最終判定は create 側の DB 制約で行われる。
    """

    def __init__(
        self,
        inner: InscriptionRepository,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self._inner = inner
        self._cache = CacheAside("inscription", cache, config, logger)

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Inscription], RepositoryError]:
        return self._cache.read(
            "find_all",
            (pagination,),
            _INSCRIPTION_PAGE,
            lambda: self._inner.find_all(pagination),
        )

    def find_by_id(self, id: str) -> Result[Inscription | None, RepositoryError]:
        return self._cache.read(
            "find_by_id", (id,), _INSCRIPTION, lambda: self._inner.find_by_id(id)
        )

    def find_by_user_id(self, user_id: str) -> Result[list[Inscription], RepositoryError]:
        return self._cache.read(
            "find_by_user_id",
            (user_id,),
            _INSCRIPTIONS,
            lambda: self._inner.find_by_user_id(user_id),
        )

    def find_by_trip_id(self, trip_id: str) -> Result[list[Inscription], RepositoryError]:
        return self._cache.read(
            "find_by_trip_id",
            (trip_id,),
            _INSCRIPTIONS,
            lambda: self._inner.find_by_trip_id(trip_id),
        )

    def exists_by_user_and_trip(
        self, user_id: str, trip_id: str
    ) -> Result[bool, RepositoryError]:
        return self._cache.read(
            "exists_by_user_and_trip",
            (user_id, trip_id),
            _BOOL,
            lambda: self._inner.exists_by_user_and_trip(user_id, trip_id),
        )

    def count_by_trip_id(self, trip_id: str) -> Result[int, RepositoryError]:
        return self._cache.read(
            "count_by_trip_id",
            (trip_id,),
            _INT,
            lambda: self._inner.count_by_trip_id(trip_id),
        )

    def create(self, data: CreateInscriptionData) -> Result[Inscription, RepositoryError]:
        result = self._inner.create(data)
        self._cache.invalidate(result, "inscription", "travel")
        return result

    def delete(self, id: str) -> Result[None, RepositoryError]:
        result = self._inner.delete(id)
        self._cache.invalidate(result, "inscription", "travel")
        return result
