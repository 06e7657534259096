from dataclasses import dataclass

from aws_lambda_powertools import Logger

from carpool.driver.domain.entity import CreateDriverData, Driver
from carpool.driver.domain.repository import DriverRepository
from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import (
    ConstraintViolationError,
    DriverAlreadyExistsError,
    UserNotFoundError,
)
from carpool.user.domain.enum import UserRole
from carpool.user.domain.repository import UserRepository

logger = Logger(child=True)


@dataclass(frozen=True)
class CreateDriverInput:
    user_id: str
    driver_license: str


class CreateDriverUseCase:
    """運転者登録ユースケース

    1. ユーザーの存在確認
    2. 既に運転者登録済みでないか確認
    3. 運転者を作成し、ユーザーのロールを DRIVER に昇格する
    """

    def __init__(
        self, driver_repository: DriverRepository, user_repository: UserRepository
    ) -> None:
        self._driver_repository = driver_repository
        self._user_repository = user_repository

    def execute(
        self, input: CreateDriverInput
    ) -> Result[Driver, UserNotFoundError | DriverAlreadyExistsError | RepositoryError]:
        user = self._user_repository.find_by_id(input.user_id)
        if not user.success:
            return user
        if user.value is None or user.value.is_anonymized:
            return Err(UserNotFoundError(input.user_id))

        existing = self._driver_repository.find_by_user_id(input.user_id)
        if not existing.success:
            return existing
        if existing.value is not None:
            return Err(DriverAlreadyExistsError(input.user_id))

        created = self._driver_repository.create(
            CreateDriverData(user_id=input.user_id, driver_license=input.driver_license)
        )
        if not created.success:
            if isinstance(created.error, ConstraintViolationError):
                return Err(DriverAlreadyExistsError(input.user_id))
            return created

        promoted = self._user_repository.update_role(input.user_id, UserRole.DRIVER)
        if not promoted.success:
            return promoted

        logger.info(
            "Driver created", extra={"driver_id": created.value.id, "user_id": input.user_id}
        )
        return Ok(created.value)
