from abc import abstractmethod

from carpool.inscription.domain.entity import CreateInscriptionData, Inscription
from carpool.shared.domain import Page, PaginationParams, Repository, RepositoryError, Result

# create が返す ConstraintViolationError.constraint の値
UNIQUE_INSCRIPTION_CONSTRAINT = "inscription_user_travel"
SEAT_CAPACITY_CONSTRAINT = "travel_seat_capacity"
TRAVEL_REFERENCE_CONSTRAINT = "inscription_travel_reference"


class InscriptionRepository(Repository[Inscription, CreateInscriptionData]):
    """登録リポジトリのインターフェース"""

    @abstractmethod
    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Inscription], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> Result[list[Inscription], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def find_by_trip_id(self, trip_id: str) -> Result[list[Inscription], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def exists_by_user_and_trip(
        self, user_id: str, trip_id: str
    ) -> Result[bool, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def count_by_trip_id(self, trip_id: str) -> Result[int, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def create(self, data: CreateInscriptionData) -> Result[Inscription, RepositoryError]:
        """座席の確保と登録の作成を 1 トランザクションで行う

        事前チェックの結果に関わらず、ここでの判定が最終的な結果となる。

        - 座席が埋まっている: ConstraintViolationError(SEAT_CAPACITY_CONSTRAINT)
        - 登録済み: ConstraintViolationError(UNIQUE_INSCRIPTION_CONSTRAINT)
        - 旅程が存在しない: ConstraintViolationError(TRAVEL_REFERENCE_CONSTRAINT)
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: str) -> Result[None, RepositoryError]:
        """登録を削除し、同じトランザクションで座席を解放する"""
        raise NotImplementedError
