from unittest.mock import MagicMock

from carpool.driver.domain.entity import CreateDriverData, Driver
from carpool.driver.infrastructure import CachedDriverRepository
from carpool.shared.domain import Err, Ok
from carpool.shared.domain.exception import ConstraintViolationError

DRIVER = Driver(id="driver-1", user_id="user-1", driver_license="B-123456")
DATA = CreateDriverData(user_id="user-1", driver_license="B-123456")


class TestCachedDriverRepository:
    """CachedDriverRepository のテスト"""

    def test_create_invalidates_driver_and_user(self, mock_repository, cache_config):
        """運転者登録の成功時はロールを持つ user も無効化する"""

        # Arrange
        backend = MagicMock()
        mock_repository.create.return_value = Ok(DRIVER)
        repository = CachedDriverRepository(mock_repository, backend, cache_config)

        # Act
        result = repository.create(DATA)

        # Assert
        assert result == Ok(DRIVER)
        assert [c.args[0] for c in backend.delete_by_pattern.call_args_list] == [
            "carpool:driver:*",
            "carpool:user:*",
        ]

    def test_duplicate_create_keeps_cache(self, mock_repository, cache_config):
        """二重登録で失敗した場合はキャッシュを無効化しない"""

        # Arrange
        backend = MagicMock()
        error = ConstraintViolationError("driver_user")
        mock_repository.create.return_value = Err(error)
        repository = CachedDriverRepository(mock_repository, backend, cache_config)

        # Act
        result = repository.create(DATA)

        # Assert
        assert result == Err(error)
        backend.delete_by_pattern.assert_not_called()

    def test_missing_driver_is_cached_until_create(
        self, mock_repository, cache_service, cache_config
    ):
        """未登録（None）もキャッシュされ、登録後は再取得する"""

        # Arrange
        mock_repository.find_by_user_id.side_effect = [Ok(None), Ok(DRIVER)]
        mock_repository.create.return_value = Ok(DRIVER)
        repository = CachedDriverRepository(mock_repository, cache_service, cache_config)
        repository.find_by_user_id("user-1")
        assert repository.find_by_user_id("user-1") == Ok(None)

        # Act
        repository.create(DATA)
        result = repository.find_by_user_id("user-1")

        # Assert
        assert result == Ok(DRIVER)
        assert mock_repository.find_by_user_id.call_count == 2
