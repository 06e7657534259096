from aws_lambda_powertools import Logger

from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import UserNotFoundError
from carpool.user.domain.repository import UserRepository

logger = Logger(child=True)


class AnonymizeUserUseCase:
    """ユーザーの匿名化ユースケース

    レコードは削除せず個人情報のみを消去するため、参照整合性は保たれる。
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(self, id: str) -> Result[None, UserNotFoundError | RepositoryError]:
        found = self._user_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None:
            logger.warning("User not found for anonymization", extra={"user_id": id})
            return Err(UserNotFoundError(id))

        result = self._user_repository.anonymize(id)
        if result.success:
            logger.info("User anonymized", extra={"user_id": id})
        return result
