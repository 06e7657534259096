from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import (
    ColorAlreadyExistsError,
    ColorNotFoundError,
    ConstraintViolationError,
)
from carpool.vehicle.domain.entity import Color, UpdateColorData
from carpool.vehicle.domain.repository import ColorRepository


class UpdateColorUseCase:
    def __init__(self, color_repository: ColorRepository) -> None:
        self._color_repository = color_repository

    def execute(
        self, id: str, data: UpdateColorData
    ) -> Result[Color, ColorNotFoundError | ColorAlreadyExistsError | RepositoryError]:
        found = self._color_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None:
            return Err(ColorNotFoundError(id))

        if data.name is not None and data.name != found.value.name:
            same_name = self._color_repository.find_by_name(data.name)
            if not same_name.success:
                return same_name
            if same_name.value is not None:
                return Err(ColorAlreadyExistsError(data.name))

        result = self._color_repository.update(id, data)
        if not result.success and isinstance(result.error, ConstraintViolationError):
            return Err(ColorAlreadyExistsError(data.name or found.value.name))
        return result
