from dataclasses import dataclass

from aws_lambda_powertools import Logger

from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import (
    BrandNotFoundError,
    CarAlreadyExistsError,
    ColorNotFoundError,
    ConstraintViolationError,
)
from carpool.vehicle.domain.entity import Car, CreateCarData, CreateModelData
from carpool.vehicle.domain.repository import (
    BrandRepository,
    CarRepository,
    ColorRepository,
    ModelRepository,
)

logger = Logger(child=True)


@dataclass(frozen=True)
class CreateCarInput:
    license_plate: str
    brand_id: str
    model_name: str
    color_id: str | None = None


class CreateCarUseCase:
    """車両登録ユースケース

    車種はブランド内の名前で検索し、存在しなければ作成する。
    """

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
        self, input: CreateCarInput
    ) -> Result[
        Car,
        CarAlreadyExistsError | BrandNotFoundError | ColorNotFoundError | RepositoryError,
    ]:
        exists = self._car_repository.exists_by_license_plate(input.license_plate)
        if not exists.success:
            return exists
        if exists.value:
            return Err(CarAlreadyExistsError(input.license_plate))

        brand = self._brand_repository.find_by_id(input.brand_id)
        if not brand.success:
            return brand
        if brand.value is None:
            return Err(BrandNotFoundError(input.brand_id))

        if input.color_id is not None:
            color = self._color_repository.find_by_id(input.color_id)
            if not color.success:
                return color
            if color.value is None:
                return Err(ColorNotFoundError(input.color_id))

        model_id = resolve_model_id(self._model_repository, input.model_name, input.brand_id)
        if not model_id.success:
            return model_id

        created = self._car_repository.create(
            CreateCarData(
                license_plate=input.license_plate,
                model_id=model_id.value,
                color_id=input.color_id,
            )
        )
        if not created.success:
            if isinstance(created.error, ConstraintViolationError):
                return Err(CarAlreadyExistsError(input.license_plate))
            return created

        logger.info("Car created", extra={"car_id": created.value.id})
        return Ok(created.value)


def resolve_model_id(
    model_repository: ModelRepository, name: str, brand_id: str
) -> Result[str, RepositoryError]:
    """ブランド内の車種 ID を返す（存在しなければ作成する）"""
    found = model_repository.find_by_name_and_brand(name, brand_id)
    if not found.success:
        return found
    if found.value is not None:
        return Ok(found.value.id)

    created = model_repository.create(CreateModelData(name=name, brand_id=brand_id))
    if not created.success:
        return created
    return Ok(created.value.id)
