from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from carpool.inscription.domain.entity import Inscription
from carpool.inscription.domain.enum import InscriptionStatus
from carpool.shared.config import CacheConfig
from carpool.shared.infrastructure.cache import InMemoryCacheService
from carpool.shared.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from carpool.shared.infrastructure.models import (
    BrandRecord,
    CarRecord,
    CityRecord,
    DriverRecord,
    ModelRecord,
    TravelCityRecord,
    TravelRecord,
    UserRecord,
)
from carpool.shared.infrastructure.models.base import new_id
from carpool.travel.domain.entity import Travel, TravelStop
from carpool.travel.domain.enum import TravelCityType
from carpool.user.domain.entity import User
from carpool.user.domain.enum import UserRole

NOW = datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_user():
    """User を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        id: str = "user-1",
        email: str = "alice@example.com",
        role: UserRole = UserRole.USER,
        anonymized_at: datetime | None = None,
    ) -> User:
        return User(
            id=id,
            email=email,
            role=role,
            created_at=NOW,
            updated_at=NOW,
            first_name="Alice",
            last_name="Martin",
            anonymized_at=anonymized_at,
        )

    return _factory


@pytest.fixture
def create_travel():
    """Travel を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        id: str = "trip-1",
        seats: int = 3,
        driver_id: str = "driver-1",
        car_id: str = "car-1",
    ) -> Travel:
        return Travel(
            id=id,
            date=NOW,
            kms=460.0,
            seats=seats,
            driver_id=driver_id,
            car_id=car_id,
            stops=(
                TravelStop("city-1", "Paris", TravelCityType.DEPARTURE),
                TravelStop("city-2", "Lyon", TravelCityType.ARRIVAL),
            ),
        )

    return _factory


@pytest.fixture
def create_inscription():
    """Inscription を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        id: str = "inscription-1",
        user_id: str = "user-1",
        travel_id: str = "trip-1",
    ) -> Inscription:
        return Inscription(
            id=id,
            user_id=user_id,
            travel_id=travel_id,
            status=InscriptionStatus.PENDING,
            created_at=NOW,
        )

    return _factory


@pytest.fixture
def cache_config():
    return CacheConfig()


@pytest.fixture
def cache_service():
    """インメモリのキャッシュサービス"""
    return InMemoryCacheService()


@pytest.fixture
def engine():
    """テーブル作成済みのインメモリ SQLite エンジン"""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def seed_travel():
    """旅程 1 件と乗客ユーザーを DB に直接登録する Factory fixture"""

    def _factory(
        session_factory,
        seats: int = 3,
        passengers: int = 1,
        date: datetime = NOW,
        departure: str = "Paris",
        arrival: str = "Lyon",
    ) -> SimpleNamespace:
        with session_factory() as session, session.begin():
            driver_user = UserRecord(email=f"driver-{new_id()}@example.com", role="DRIVER")
            session.add(driver_user)
            session.flush()
            driver = DriverRecord(user_id=driver_user.id, driver_license="B-123456")
            brand = BrandRecord(name="Renault")
            session.add_all([driver, brand])
            session.flush()
            model = ModelRecord(name="Clio", brand_id=brand.id)
            session.add(model)
            session.flush()
            car = CarRecord(license_plate=f"AB-{new_id()[:8]}", model_id=model.id)
            departure_city = CityRecord(name=departure, zipcode="75000")
            arrival_city = CityRecord(name=arrival, zipcode="69000")
            session.add_all([car, departure_city, arrival_city])
            session.flush()
            travel = TravelRecord(
                date=date,
                kms=460.0,
                seats=seats,
                booked_seats=0,
                driver_id=driver.id,
                car_id=car.id,
                cities=[
                    TravelCityRecord(type="DEPARTURE", city_id=departure_city.id),
                    TravelCityRecord(type="ARRIVAL", city_id=arrival_city.id),
                ],
            )
            users = [
                UserRecord(email=f"passenger-{i}-{new_id()}@example.com", role="USER")
                for i in range(passengers)
            ]
            session.add(travel)
            session.add_all(users)
            session.flush()
            return SimpleNamespace(
                travel_id=travel.id,
                driver_id=driver.id,
                driver_user_id=driver_user.id,
                car_id=car.id,
                passenger_ids=[u.id for u in users],
            )

    return _factory
