from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import UserNotFoundError
from carpool.user.domain.entity import User
from carpool.user.domain.repository import UserRepository


class GetUserUseCase:
    """ユーザー取得ユースケース"""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(self, id: str) -> Result[User, UserNotFoundError | RepositoryError]:
        result = self._user_repository.find_by_id(id)
        if not result.success:
            return result
        if result.value is None:
            return Err(UserNotFoundError(id))
        return Ok(result.value)
