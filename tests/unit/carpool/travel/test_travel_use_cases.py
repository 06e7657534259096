from datetime import datetime, timezone
from unittest.mock import MagicMock

from carpool.driver.domain.entity import Driver
from carpool.shared.domain import Err, Ok
from carpool.shared.domain.exception import (
    CarNotFoundError,
    DriverNotFoundError,
    ForbiddenError,
    TravelNotFoundError,
)
from carpool.travel.applications import (
    CreateTravelInput,
    CreateTravelUseCase,
    DeleteTravelUseCase,
)
from carpool.travel.domain.entity import City
from carpool.vehicle.domain.entity import Car

DRIVER = Driver(id="driver-1", user_id="user-1", driver_license="B-123456")


class TestDeleteTravelUseCase:
    """DeleteTravelUseCase のテスト"""

    def test_owner_deletes_travel(self, create_travel):
        """旅程を作成した運転者は削除できる"""

        # Arrange
        travels = MagicMock()
        drivers = MagicMock()
        travels.find_by_id.return_value = Ok(create_travel(driver_id="driver-1"))
        drivers.find_by_user_id.return_value = Ok(DRIVER)
        travels.delete.return_value = Ok(None)
        use_case = DeleteTravelUseCase(travel_repository=travels, driver_repository=drivers)

        # Act
        result = use_case.execute("trip-1", "user-1")

        # Assert
        assert result == Ok(None)
        travels.delete.assert_called_once_with("trip-1")

    def test_other_driver_is_forbidden(self, create_travel):
        """他の運転者の旅程は削除できない"""

        # Arrange
        travels = MagicMock()
        drivers = MagicMock()
        travels.find_by_id.return_value = Ok(create_travel(driver_id="driver-2"))
        drivers.find_by_user_id.return_value = Ok(DRIVER)
        use_case = DeleteTravelUseCase(travel_repository=travels, driver_repository=drivers)

        # Act
        result = use_case.execute("trip-1", "user-1")

        # Assert
        assert result == Err(ForbiddenError("travel", "trip-1"))
        travels.delete.assert_not_called()

    def test_passenger_is_forbidden(self, create_travel):
        """運転者でないユーザーは削除できない"""

        # Arrange
        travels = MagicMock()
        drivers = MagicMock()
        travels.find_by_id.return_value = Ok(create_travel())
        drivers.find_by_user_id.return_value = Ok(None)
        use_case = DeleteTravelUseCase(travel_repository=travels, driver_repository=drivers)

        # Act
        result = use_case.execute("trip-1", "user-9")

        # Assert
        assert result == Err(ForbiddenError("travel", "trip-1"))

    def test_missing_travel(self):
        """旅程が存在しない場合は TravelNotFoundError"""

        # Arrange
        travels = MagicMock()
        drivers = MagicMock()
        travels.find_by_id.return_value = Ok(None)
        use_case = DeleteTravelUseCase(travel_repository=travels, driver_repository=drivers)

        # Act
        result = use_case.execute("trip-1", "user-1")

        # Assert
        assert result == Err(TravelNotFoundError("trip-1"))
        drivers.find_by_user_id.assert_not_called()


INPUT = CreateTravelInput(
    user_id="user-1",
    date=datetime(2025, 7, 1, 8, 0, tzinfo=timezone.utc),
    kms=460.0,
    seats=3,
    car_id="car-1",
    departure_city="Paris",
    arrival_city="Lyon",
)


class TestCreateTravelUseCase:
    """CreateTravelUseCase のテスト"""

    def _use_case(self, travels, drivers, cars, cities) -> CreateTravelUseCase:
        return CreateTravelUseCase(
            travel_repository=travels,
            driver_repository=drivers,
            car_repository=cars,
            city_repository=cities,
        )

    def test_creates_missing_cities(self, create_travel):
        """未登録の都市は作成し、登録済みの都市はそのまま使う"""

        # Arrange
        travels, drivers, cars, cities = MagicMock(), MagicMock(), MagicMock(), MagicMock()
        drivers.find_by_user_id.return_value = Ok(DRIVER)
        cars.find_by_id.return_value = Ok(
            Car(id="car-1", license_plate="AB-123-CD", model_id="model-1")
        )
        cities.find_by_name.side_effect = [Ok(City(id="city-1", name="Paris")), Ok(None)]
        cities.create.return_value = Ok(City(id="city-2", name="Lyon"))
        travels.create.return_value = Ok(create_travel())
        use_case = self._use_case(travels, drivers, cars, cities)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Ok(create_travel())
        cities.create.assert_called_once()
        data = travels.create.call_args[0][0]
        assert data.driver_id == "driver-1"
        assert (data.departure_city_id, data.arrival_city_id) == ("city-1", "city-2")

    def test_non_driver_cannot_create(self):
        """運転者登録のないユーザーは DriverNotFoundError"""

        # Arrange
        travels, drivers, cars, cities = MagicMock(), MagicMock(), MagicMock(), MagicMock()
        drivers.find_by_user_id.return_value = Ok(None)
        use_case = self._use_case(travels, drivers, cars, cities)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(DriverNotFoundError("user-1"))
        travels.create.assert_not_called()

    def test_unknown_car(self):
        """車両が存在しない場合は CarNotFoundError"""

        # Arrange
        travels, drivers, cars, cities = MagicMock(), MagicMock(), MagicMock(), MagicMock()
        drivers.find_by_user_id.return_value = Ok(DRIVER)
        cars.find_by_id.return_value = Ok(None)
        use_case = self._use_case(travels, drivers, cars, cities)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(CarNotFoundError("car-1"))
        cities.find_by_name.assert_not_called()
