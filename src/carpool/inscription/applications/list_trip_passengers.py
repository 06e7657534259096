from aws_lambda_powertools import Logger

from carpool.inscription.domain.entity import Inscription
from carpool.inscription.domain.repository import InscriptionRepository
from carpool.shared.domain import Err, Ok, Paginated, PaginationParams, RepositoryError, Result
from carpool.shared.domain.exception import TravelNotFoundError
from carpool.travel.domain.repository import TravelRepository

logger = Logger(child=True)


class ListTripPassengersUseCase:
    """旅程の乗客（登録）一覧"""

    def __init__(
        self,
        inscription_repository: InscriptionRepository,
        travel_repository: TravelRepository,
    ) -> None:
        self._inscription_repository = inscription_repository
        self._travel_repository = travel_repository

    def execute(
        self, trip_id: str, pagination: PaginationParams | None = None
    ) -> Result[Paginated[Inscription], TravelNotFoundError | RepositoryError]:
        travel = self._travel_repository.find_by_id(trip_id)
        if not travel.success:
            return travel
        if travel.value is None:
            return Err(TravelNotFoundError(trip_id))

        result = self._inscription_repository.find_by_trip_id(trip_id)
        if not result.success:
            logger.error("Failed to list trip passengers", extra={"trip_id": trip_id})
            return result
        logger.info(
            "Listed trip passengers", extra={"trip_id": trip_id, "count": len(result.value)}
        )
        return Ok(Paginated.slice(result.value, pagination or PaginationParams()))
