from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from carpool.shared.domain.exception import RepositoryError
from carpool.shared.domain.result import Result

T = TypeVar("T")
CreateT = TypeVar("CreateT")


class Repository(ABC, Generic[T, CreateT]):
    """Repository 基底クラス

    - エンティティの永続化を抽象化する
    - 失敗は例外ではなく Err(RepositoryError) で返す
    - Ok(None) は「見つからない」を表し、エラーとは区別する
    """

    @abstractmethod
    def find_by_id(self, id: str) -> Result[T | None, RepositoryError]:
        """IDでエンティティを検索する"""
        raise NotImplementedError

    @abstractmethod
    def create(self, data: CreateT) -> Result[T, RepositoryError]:
        """エンティティを新規作成する"""
        raise NotImplementedError
