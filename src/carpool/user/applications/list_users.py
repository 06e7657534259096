from carpool.shared.domain import Ok, Paginated, PaginationParams, RepositoryError, Result
from carpool.user.domain.entity import User
from carpool.user.domain.repository import UserRepository


class ListUsersUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(
        self, pagination: PaginationParams | None = None
    ) -> Result[Paginated[User], RepositoryError]:
        params = pagination or PaginationParams()
        result = self._user_repository.find_all(params)
        if not result.success:
            return result
        return Ok(Paginated.from_page(result.value, params))
