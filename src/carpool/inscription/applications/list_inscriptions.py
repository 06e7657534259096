from carpool.inscription.domain.entity import Inscription
from carpool.inscription.domain.repository import InscriptionRepository
from carpool.shared.domain import Ok, Paginated, PaginationParams, RepositoryError, Result


class ListInscriptionsUseCase:
    def __init__(self, inscription_repository: InscriptionRepository) -> None:
        self._inscription_repository = inscription_repository

    def execute(
        self, pagination: PaginationParams | None = None
    ) -> Result[Paginated[Inscription], RepositoryError]:
        params = pagination or PaginationParams()
        result = self._inscription_repository.find_all(params)
        if not result.success:
            return result
        return Ok(Paginated.from_page(result.value, params))
