from dataclasses import dataclass

from carpool.shared.domain import Err, RepositoryError, Result
from carpool.shared.domain.exception import (
    BrandNotFoundError,
    CarAlreadyExistsError,
    CarNotFoundError,
    ColorNotFoundError,
    ConstraintViolationError,
)
from carpool.vehicle.domain.entity import Car, UpdateCarData
from carpool.vehicle.domain.repository import (
    BrandRepository,
    CarRepository,
    ColorRepository,
    ModelRepository,
)

from .create_car import resolve_model_id


@dataclass(frozen=True)
class UpdateCarInput:
    """車種の変更は brand_id と model_name の両方が指定された場合のみ"""

    license_plate: str | None = None
    brand_id: str | None = None
    model_name: str | None = None
    color_id: str | None = None


class UpdateCarUseCase:
    def __init__(
        self,
        car_repository: CarRepository,
        brand_repository: BrandRepository,
        model_repository: ModelRepository,
        color_repository: ColorRepository,
    ) -> None:
        self._car_repository = car_repository
        self._brand_repository = brand_repository
        self._model_repository = model_repository
        self._color_repository = color_repository

    def execute(
        self, id: str, input: UpdateCarInput
    ) -> Result[
        Car,
        CarNotFoundError
        | CarAlreadyExistsError
        | BrandNotFoundError
        | ColorNotFoundError
        | RepositoryError,
    ]:
        found = self._car_repository.find_by_id(id)
        if not found.success:
            return found
        if found.value is None:
            return Err(CarNotFoundError(id))

        model_id = None
        if input.brand_id and input.model_name:
            brand = self._brand_repository.find_by_id(input.brand_id)
            if not brand.success:
                return brand
            if brand.value is None:
                return Err(BrandNotFoundError(input.brand_id))
            resolved = resolve_model_id(
                self._model_repository, input.model_name, input.brand_id
            )
            if not resolved.success:
                return resolved
            model_id = resolved.value

        if input.color_id is not None:
            color = self._color_repository.find_by_id(input.color_id)
            if not color.success:
                return color
            if color.value is None:
                return Err(ColorNotFoundError(input.color_id))

        result = self._car_repository.update(
            id,
            UpdateCarData(
                license_plate=input.license_plate,
                model_id=model_id,
                color_id=input.color_id,
            ),
        )
        if not result.success and isinstance(result.error, ConstraintViolationError):
            return Err(CarAlreadyExistsError(input.license_plate or ""))
        return result
