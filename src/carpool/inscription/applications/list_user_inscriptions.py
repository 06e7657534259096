from carpool.inscription.domain.entity import Inscription
from carpool.inscription.domain.repository import InscriptionRepository
from carpool.shared.domain import Err, Ok, Paginated, PaginationParams, RepositoryError, Result
from carpool.shared.domain.exception import UserNotFoundError
from carpool.user.domain.repository import UserRepository


class ListUserInscriptionsUseCase:
    """ユーザーの登録一覧（ページングはメモリ上で行う）"""

    def __init__(
        self, inscription_repository: InscriptionRepository, user_repository: UserRepository
    ) -> None:
        self._inscription_repository = inscription_repository
        self._user_repository = user_repository

    def execute(
        self, user_id: str, pagination: PaginationParams | None = None
    ) -> Result[Paginated[Inscription], UserNotFoundError | RepositoryError]:
        user = self._user_repository.find_by_id(user_id)
        if not user.success:
            return user
        if user.value is None:
            return Err(UserNotFoundError(user_id))

        result = self._inscription_repository.find_by_user_id(user_id)
        if not result.success:
            return result
        return Ok(Paginated.slice(result.value, pagination or PaginationParams()))
