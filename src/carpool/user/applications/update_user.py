from aws_lambda_powertools import Logger

from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import UserNotFoundError
from carpool.user.domain.entity import UpdateUserData, User
from carpool.user.domain.repository import UserRepository

logger = Logger(child=True)


class UpdateUserUseCase:
    """ユーザーのプロフィール（氏名・電話番号）更新ユースケース"""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(
        self, id: str, data: UpdateUserData
    ) -> Result[User, UserNotFoundError | RepositoryError]:
        found = self._user_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None or found.value.is_anonymized:
            logger.warning("User not found for update", extra={"user_id": id})
            return Err(UserNotFoundError(id))

        result = self._user_repository.update(id, data)
        if result.success:
            logger.info("User updated", extra={"user_id": id})
        return result
