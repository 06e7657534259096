from dataclasses import dataclass

from aws_lambda_powertools import Logger

from carpool.inscription.domain.entity import CreateInscriptionData, Inscription
from carpool.inscription.domain.repository import (
    SEAT_CAPACITY_CONSTRAINT,
    UNIQUE_INSCRIPTION_CONSTRAINT,
    InscriptionRepository,
)
from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import (
    AlreadyInscribedError,
    ConstraintViolationError,
    NoSeatsAvailableError,
    TravelNotFoundError,
    UserNotFoundError,
)
from carpool.travel.domain.repository import TravelRepository
from carpool.user.domain.repository import UserRepository

logger = Logger(child=True)

CreateInscriptionError = (
    UserNotFoundError
    | TravelNotFoundError
    | AlreadyInscribedError
    | NoSeatsAvailableError
    | RepositoryError
)


@dataclass(frozen=True)
class CreateInscriptionInput:
    user_id: str
    trip_id: str


class CreateInscriptionUseCase:
    """旅程への乗客登録（座席予約）ユースケース

    1. ユーザーの存在確認（匿名化済みは存在しない扱い）
    2. 旅程の存在確認
    3. 二重登録の確認
    4. 空席の確認
    5. 登録の作成（座席の確保は InscriptionRepository.create が原子的に行う）

    各ステップは失敗した時点で終了し、リポジトリのエラーはそのまま返す。
    """

    def __init__(
        self,
        inscription_repository: InscriptionRepository,
        user_repository: UserRepository,
        travel_repository: TravelRepository,
    ) -> None:
        self._inscription_repository = inscription_repository
        self._user_repository = user_repository
        self._travel_repository = travel_repository

    def execute(self, input: CreateInscriptionInput) -> Result[Inscription, CreateInscriptionError]:
        user = self._user_repository.find_by_id(input.user_id)
        if not user.success:
            return user
        if user.value is None or user.value.is_anonymized:
            logger.warning("User not found for inscription", extra={"user_id": input.user_id})
            return Err(UserNotFoundError(input.user_id))

        travel = self._travel_repository.find_by_id(input.trip_id)
        if not travel.success:
            return travel
        if travel.value is None:
            logger.warning("Travel not found for inscription", extra={"trip_id": input.trip_id})
            return Err(TravelNotFoundError(input.trip_id))

        exists = self._inscription_repository.exists_by_user_and_trip(
            input.user_id, input.trip_id
        )
        if not exists.success:
            return exists
        if exists.value:
            return Err(AlreadyInscribedError(input.user_id, input.trip_id))

        count = self._inscription_repository.count_by_trip_id(input.trip_id)
        if not count.success:
            return count
        if count.value >= travel.value.seats:
            return Err(NoSeatsAvailableError(input.trip_id))

        created = self._inscription_repository.create(
            CreateInscriptionData(user_id=input.user_id, travel_id=input.trip_id)
        )
        if not created.success:
            return Err(self._to_domain_error(created.error, input))

        logger.info(
            "Inscription created",
            extra={
                "inscription_id": created.value.id,
                "user_id": input.user_id,
                "trip_id": input.trip_id,
            },
        )
        return Ok(created.value)

    @staticmethod
    def _to_domain_error(
        error: RepositoryError, input: CreateInscriptionInput
    ) -> CreateInscriptionError:
        """同時登録で DB 制約に弾かれた場合のみドメインエラーに変換する"""
        if isinstance(error, ConstraintViolationError):
            if error.constraint == UNIQUE_INSCRIPTION_CONSTRAINT:
                return AlreadyInscribedError(input.user_id, input.trip_id)
            if error.constraint == SEAT_CAPACITY_CONSTRAINT:
                return NoSeatsAvailableError(input.trip_id)
        return error
