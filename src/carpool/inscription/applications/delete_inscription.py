from aws_lambda_powertools import Logger

from carpool.inscription.domain.repository import InscriptionRepository
from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import ForbiddenError, InscriptionNotFoundError

logger = Logger(child=True)


class DeleteInscriptionUseCase:
    """登録取り消しユースケース（本人のみ取り消せる）"""

    def __init__(self, inscription_repository: InscriptionRepository) -> None:
        self._inscription_repository = inscription_repository

    def execute(
        self, id: str, user_id: str
    ) -> Result[None, InscriptionNotFoundError | ForbiddenError | RepositoryError]:
        found = self._inscription_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None:
            return Err(InscriptionNotFoundError(id))
        if found.value.user_id != user_id:
            return Err(ForbiddenError("inscription", id))

        result = self._inscription_repository.delete(id)
        if result.success:
            logger.info(
                "Inscription deleted",
                extra={"inscription_id": id, "trip_id": found.value.travel_id},
            )
        return result
