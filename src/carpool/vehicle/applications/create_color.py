from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import ColorAlreadyExistsError, ConstraintViolationError
from carpool.vehicle.domain.entity import Color, CreateColorData
from carpool.vehicle.domain.repository import ColorRepository


class CreateColorUseCase:
    """色の登録ユースケース（色名は一意）"""

    def __init__(self, color_repository: ColorRepository) -> None:
        self._color_repository = color_repository

    def execute(
        self, name: str, hex: str
    ) -> Result[Color, ColorAlreadyExistsError | RepositoryError]:
        existing = self._color_repository.find_by_name(name)
        if not existing.success:
            return existing
        if existing.value is not None:
            return Err(ColorAlreadyExistsError(name))

        result = self._color_repository.create(CreateColorData(name=name, hex=hex))
        if not result.success and isinstance(result.error, ConstraintViolationError):
            return Err(ColorAlreadyExistsError(name))
        return result
