from unittest.mock import MagicMock

import pytest

from carpool.shared.domain import Err, Ok, Page, PaginationParams
from carpool.shared.domain.exception import (
    BrandNotFoundError,
    CarAlreadyExistsError,
    ColorNotFoundError,
    ConstraintViolationError,
)
from carpool.vehicle.applications import (
    CreateCarInput,
    CreateCarUseCase,
    ListColorsUseCase,
)
from carpool.vehicle.domain.entity import Brand, Car, Color, Model


class TestListColorsUseCase:
    """ListColorsUseCase のテスト"""

    def test_empty_listing_has_default_meta(self, mock_repository):
        """色が 0 件の場合、既定のページング情報と空のデータを返す"""

        # Arrange
        mock_repository.find_all.return_value = Ok(Page[Color](data=[], total=0))
        use_case = ListColorsUseCase(mock_repository)

        # Act
        result = use_case.execute()

        # Assert
        assert result.success
        assert result.value.data == []
        meta = result.value.meta
        assert (meta.page, meta.limit, meta.total, meta.total_pages) == (1, 20, 0, 0)
        mock_repository.find_all.assert_called_once_with(PaginationParams())

    def test_total_pages_rounds_up(self, mock_repository):
        """総ページ数は総件数 / limit の切り上げ"""

        # Arrange
        colors = [Color(id=f"c{i}", name=f"Color {i}", hex="#000000") for i in range(2)]
        mock_repository.find_all.return_value = Ok(Page[Color](data=colors, total=5))
        use_case = ListColorsUseCase(mock_repository)

        # Act
        result = use_case.execute(PaginationParams(page=3, limit=2))

        # Assert
        assert result.value.meta.total_pages == 3
        assert result.value.data == colors


@pytest.fixture
def car_repositories():
    """全ステップが成功する状態の車両関連リポジトリモック"""
    cars = MagicMock()
    brands = MagicMock()
    models = MagicMock()
    colors = MagicMock()
    cars.exists_by_license_plate.return_value = Ok(False)
    brands.find_by_id.return_value = Ok(Brand(id="brand-1", name="Renault"))
    colors.find_by_id.return_value = Ok(Color(id="color-1", name="Red", hex="#FF0000"))
    models.find_by_name_and_brand.return_value = Ok(
        Model(id="model-1", name="Clio", brand_id="brand-1")
    )
    cars.create.return_value = Ok(
        Car(id="car-1", license_plate="AB-123-CD", model_id="model-1", color_id="color-1")
    )
    return cars, brands, models, colors


def _create_car(car_repositories) -> CreateCarUseCase:
    cars, brands, models, colors = car_repositories
    return CreateCarUseCase(
        car_repository=cars,
        brand_repository=brands,
        model_repository=models,
        color_repository=colors,
    )


INPUT = CreateCarInput(
    license_plate="AB-123-CD", brand_id="brand-1", model_name="Clio", color_id="color-1"
)


class TestCreateCarUseCase:
    """CreateCarUseCase のテスト"""

    def test_reuses_existing_model(self, car_repositories):
        """ブランド内に同名の車種があればその ID で車両を作成する"""

        # Arrange
        cars, _, models, _ = car_repositories
        use_case = _create_car(car_repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result.success
        models.create.assert_not_called()
        data = cars.create.call_args[0][0]
        assert data.model_id == "model-1"
        assert data.color_id == "color-1"

    def test_creates_missing_model(self, car_repositories):
        """車種が存在しなければ作成してから車両を作成する"""

        # Arrange
        cars, _, models, _ = car_repositories
        models.find_by_name_and_brand.return_value = Ok(None)
        models.create.return_value = Ok(Model(id="model-2", name="Clio", brand_id="brand-1"))
        use_case = _create_car(car_repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result.success
        models.create.assert_called_once()
        assert cars.create.call_args[0][0].model_id == "model-2"

    def test_duplicate_license_plate(self, car_repositories):
        """登録済みのナンバーは CarAlreadyExistsError"""

        # Arrange
        cars, brands, _, _ = car_repositories
        cars.exists_by_license_plate.return_value = Ok(True)
        use_case = _create_car(car_repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(CarAlreadyExistsError("AB-123-CD"))
        brands.find_by_id.assert_not_called()

    def test_unknown_brand(self, car_repositories):
        """ブランドが存在しない場合は BrandNotFoundError"""

        # Arrange
        _, brands, _, _ = car_repositories
        brands.find_by_id.return_value = Ok(None)
        use_case = _create_car(car_repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(BrandNotFoundError("brand-1"))

    def test_unknown_color(self, car_repositories):
        """色が指定され、存在しない場合は ColorNotFoundError"""

        # Arrange
        _, _, _, colors = car_repositories
        colors.find_by_id.return_value = Ok(None)
        use_case = _create_car(car_repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(ColorNotFoundError("color-1"))

    def test_constraint_on_create_maps_to_duplicate(self, car_repositories):
        """同時登録で一意制約に弾かれた場合も CarAlreadyExistsError"""

        # Arrange
        cars, _, _, _ = car_repositories
        cars.create.return_value = Err(ConstraintViolationError("car_license_plate"))
        use_case = _create_car(car_repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(CarAlreadyExistsError("AB-123-CD"))
