from abc import abstractmethod

from carpool.shared.domain import Page, PaginationParams, Repository, RepositoryError, Result
from carpool.user.domain.entity import CreateUserData, UpdateUserData, User, UserCredentials
from carpool.user.domain.enum import UserRole


class UserRepository(Repository[User, CreateUserData]):
    """ユーザーリポジトリのインターフェース"""

    @abstractmethod
    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[User], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> Result[User | None, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def find_credentials_by_email(
        self, email: str
    ) -> Result[UserCredentials | None, RepositoryError]:
        """ログイン用にパスワードハッシュ付きで検索する"""
        raise NotImplementedError

    @abstractmethod
    def exists_by_email(self, email: str) -> Result[bool, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def update(self, id: str, data: UpdateUserData) -> Result[User, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def update_role(self, id: str, role: UserRole) -> Result[None, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: str) -> Result[None, RepositoryError]:
        """物理削除する（参照されている場合は RelationConstraintError）"""
        raise NotImplementedError

    @abstractmethod
    def anonymize(self, id: str) -> Result[None, RepositoryError]:
        """個人情報を消去し、anonymized_at を記録する"""
        raise NotImplementedError
