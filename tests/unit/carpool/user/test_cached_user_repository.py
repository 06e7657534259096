from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from carpool.driver.domain.entity import CreateDriverData
from carpool.driver.infrastructure import CachedDriverRepository, SqlAlchemyDriverRepository
from carpool.shared.domain import Err, Ok
from carpool.shared.domain.exception import DriverNotFoundError, RelationConstraintError
from carpool.travel.applications import CreateTravelInput, CreateTravelUseCase
from carpool.user.applications import DeleteUserUseCase
from carpool.user.domain.entity import CreateUserData
from carpool.user.infrastructure import CachedUserRepository, SqlAlchemyUserRepository

USER_WRITES_WITH_DRIVER = ["carpool:user:*", "carpool:driver:*", "carpool:inscription:*"]


def _patterns(backend: MagicMock) -> list[str]:
    return [c.args[0] for c in backend.delete_by_pattern.call_args_list]


class TestCachedUserRepositoryWrites:
    """CachedUserRepository の書き込み時の無効化テスト"""

    @pytest.mark.parametrize("method", ["delete", "anonymize"])
    def test_invalidates_user_driver_and_inscription(
        self, mock_repository, cache_config, method
    ):
        """削除・匿名化の成功時は driver と inscription も無効化する"""

        # Arrange
        backend = MagicMock()
        getattr(mock_repository, method).return_value = Ok(None)
        repository = CachedUserRepository(mock_repository, backend, cache_config)

        # Act
        result = getattr(repository, method)("user-1")

        # Assert
        assert result == Ok(None)
        assert _patterns(backend) == USER_WRITES_WITH_DRIVER

    def test_failed_delete_keeps_cache(self, mock_repository, cache_config):
        """削除に失敗した場合はキャッシュを無効化しない"""

        # Arrange
        backend = MagicMock()
        error = RelationConstraintError("user")
        mock_repository.delete.return_value = Err(error)
        repository = CachedUserRepository(mock_repository, backend, cache_config)

        # Act
        result = repository.delete("user-1")

        # Assert
        assert result == Err(error)
        backend.delete_by_pattern.assert_not_called()


class TestDeletedDriverIsNotServedFromCache:
    """ユーザー削除後にキャッシュ済みの運転者情報が残らないことのテスト"""

    @pytest.fixture
    def repositories(self, session_factory, cache_service, cache_config):
        users = CachedUserRepository(
            SqlAlchemyUserRepository(session_factory), cache_service, cache_config
        )
        drivers = CachedDriverRepository(
            SqlAlchemyDriverRepository(session_factory), cache_service, cache_config
        )
        user_id = users.create(
            CreateUserData(email="bob@example.com", password_hash="hashed")
        ).value.id
        drivers.create(CreateDriverData(user_id=user_id, driver_license="B-654321"))
        return users, drivers, user_id

    def test_driver_lookup_misses_after_user_delete(self, repositories):
        """ユーザー削除後の運転者検索は None を返す"""

        # Arrange
        users, drivers, user_id = repositories
        assert drivers.find_by_user_id(user_id).value is not None

        # Act
        deleted = DeleteUserUseCase(users).execute(user_id)

        # Assert
        assert deleted == Ok(None)
        assert drivers.find_by_user_id(user_id) == Ok(None)

    def test_create_travel_reports_missing_driver(self, repositories):
        """削除済みユーザーの旅程作成は DriverNotFoundError（DB エラーにならない）"""

        # Arrange
        users, drivers, user_id = repositories
        drivers.find_by_user_id(user_id)
        DeleteUserUseCase(users).execute(user_id)
        travels, cars, cities = MagicMock(), MagicMock(), MagicMock()
        use_case = CreateTravelUseCase(travels, drivers, cars, cities)

        # Act
        result = use_case.execute(
            CreateTravelInput(
                user_id=user_id,
                date=datetime(2025, 7, 1, 8, 0, tzinfo=timezone.utc),
                kms=460.0,
                seats=3,
                car_id="car-1",
                departure_city="Paris",
                arrival_city="Lyon",
            )
        )

        # Assert
        assert result == Err(DriverNotFoundError(user_id))
        travels.create.assert_not_called()
