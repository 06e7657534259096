from aws_lambda_powertools import Logger

from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import UserNotFoundError
from carpool.user.domain.repository import UserRepository

logger = Logger(child=True)


class DeleteUserUseCase:
    """ユーザーの物理削除ユースケース

    旅程・登録から参照されている場合は RelationConstraintError となる。
    個人情報の消去には AnonymizeUserUseCase を使う。
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(self, id: str) -> Result[None, UserNotFoundError | RepositoryError]:
        found = self._user_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None:
            logger.warning("User not found for deletion", extra={"user_id": id})
            return Err(UserNotFoundError(id))

        result = self._user_repository.delete(id)
        if result.success:
            logger.info("User deleted", extra={"user_id": id})
        return result
