from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import BrandNotFoundError
from carpool.vehicle.domain.repository import BrandRepository


class DeleteBrandUseCase:
    """ブランド削除ユースケース（車両から参照中の車種があれば RelationConstraintError）"""

    def __init__(self, brand_repository: BrandRepository) -> None:
        self._brand_repository = brand_repository

    def execute(self, id: str) -> Result[None, BrandNotFoundError | RepositoryError]:
        found = self._brand_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None:
            return Err(BrandNotFoundError(id))
        return self._brand_repository.delete(id)
