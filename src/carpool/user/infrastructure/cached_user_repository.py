from aws_lambda_powertools import Logger
from pydantic import TypeAdapter

from carpool.shared.config import CacheConfig
from carpool.shared.domain import Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.service import CacheService
from carpool.shared.infrastructure.cache import CacheAside
from carpool.user.domain.entity import CreateUserData, UpdateUserData, User, UserCredentials
from carpool.user.domain.enum import UserRole
from carpool.user.domain.repository import UserRepository

_USER = TypeAdapter(User | None)
_USER_PAGE = TypeAdapter(Page[User])
_CREDENTIALS = TypeAdapter(UserCredentials | None)
_BOOL = TypeAdapter(bool)


class CachedUserRepository(UserRepository):
    """UserRepository のキャッシュアサイド・デコレータ"""

    def __init__(
        self,
        inner: UserRepository,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self._inner = inner
        self._cache = CacheAside("user", cache, config, logger)

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[User], RepositoryError]:
        return self._cache.read(
            "find_all", (pagination,), _USER_PAGE, lambda: self._inner.find_all(pagination)
        )

    def find_by_id(self, id: str) -> Result[User | None, RepositoryError]:
        return self._cache.read(
            "find_by_id", (id,), _USER, lambda: self._inner.find_by_id(id)
        )

    def find_by_email(self, email: str) -> Result[User | None, RepositoryError]:
        return self._cache.read(
            "find_by_email", (email,), _USER, lambda: self._inner.find_by_email(email)
        )

    def find_credentials_by_email(
        self, email: str
    ) -> Result[UserCredentials | None, RepositoryError]:
        return self._cache.read(
            "find_credentials_by_email",
            (email,),
            _CREDENTIALS,
            lambda: self._inner.find_credentials_by_email(email),
        )

    def exists_by_email(self, email: str) -> Result[bool, RepositoryError]:
        return self._cache.read(
            "exists_by_email", (email,), _BOOL, lambda: self._inner.exists_by_email(email)
        )

    def create(self, data: CreateUserData) -> Result[User, RepositoryError]:
        result = self._inner.create(data)
        self._cache.invalidate(result, "user")
        return result

    def update(self, id: str, data: UpdateUserData) -> Result[User, RepositoryError]:
        result = self._inner.update(id, data)
        self._cache.invalidate(result, "user")
        return result

    def update_role(self, id: str, role: UserRole) -> Result[None, RepositoryError]:
        result = self._inner.update_role(id, role)
        self._cache.invalidate(result, "user")
        return result

    def delete(self, id: str) -> Result[None, RepositoryError]:
        # ユーザー削除で drivers 行もカスケード削除されるため driver も無効化する
        result = self._inner.delete(id)
        self._cache.invalidate(result, "user", "driver", "inscription")
        return result

    def anonymize(self, id: str) -> Result[None, RepositoryError]:
        # 運転者情報・登録一覧にもユーザー情報が含まれるため併せて無効化する
        result = self._inner.anonymize(id)
        self._cache.invalidate(result, "user", "driver", "inscription")
        return result
