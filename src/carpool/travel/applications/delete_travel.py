from aws_lambda_powertools import Logger

from carpool.driver.domain.repository import DriverRepository
from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import ForbiddenError, TravelNotFoundError
from carpool.travel.domain.repository import TravelRepository

logger = Logger(child=True)


class DeleteTravelUseCase:
    """旅程削除ユースケース（旅程を作成した運転者のみ削除できる）"""

    def __init__(
        self, travel_repository: TravelRepository, driver_repository: DriverRepository
    ) -> None:
        self._travel_repository = travel_repository
        self._driver_repository = driver_repository

    def execute(
        self, id: str, user_id: str
    ) -> Result[None, TravelNotFoundError | ForbiddenError | RepositoryError]:
        travel = self._travel_repository.find_by_id(id)
        if not travel.success:
            return travel
        if travel.value is None:
            return Err(TravelNotFoundError(id))

        driver = self._driver_repository.find_by_user_id(user_id)
        if not driver.success:
            return driver
        if driver.value is None or driver.value.id != travel.value.driver_id:
            logger.warning(
                "Rejected travel deletion by non-owner",
                extra={"travel_id": id, "user_id": user_id},
            )
            return Err(ForbiddenError("travel", id))

        result = self._travel_repository.delete(id)
        if result.success:
            logger.info("Travel deleted", extra={"travel_id": id})
        return result
