from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import ColorNotFoundError
from carpool.vehicle.domain.repository import ColorRepository


class DeleteColorUseCase:
    def __init__(self, color_repository: ColorRepository) -> None:
        self._color_repository = color_repository

    def execute(self, id: str) -> Result[None, ColorNotFoundError | RepositoryError]:
        found = self._color_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None:
            return Err(ColorNotFoundError(id))
        return self._color_repository.delete(id)
