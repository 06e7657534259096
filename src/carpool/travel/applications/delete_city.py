from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import CityNotFoundError
from carpool.travel.domain.repository import CityRepository


class DeleteCityUseCase:
    """都市削除ユースケース（旅程から参照されている場合は RelationConstraintError）"""

    def __init__(self, city_repository: CityRepository) -> None:
        self._city_repository = city_repository

    def execute(self, id: str) -> Result[None, CityNotFoundError | RepositoryError]:
        found = self._city_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None:
            return Err(CityNotFoundError(id))
        return self._city_repository.delete(id)
