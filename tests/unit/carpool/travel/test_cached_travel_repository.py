from unittest.mock import MagicMock

from carpool.shared.domain import Err, Ok
from carpool.shared.domain.exception import RelationConstraintError
from carpool.travel.infrastructure import CachedTravelRepository


class TestCachedTravelRepository:
    """CachedTravelRepository のテスト"""

    def test_delete_invalidates_travel_and_inscription(self, mock_repository, cache_config):
        """削除成功時に travel と inscription のキーを無効化する"""

        # Arrange
        backend = MagicMock()
        mock_repository.delete.return_value = Ok(None)
        repository = CachedTravelRepository(mock_repository, backend, cache_config)

        # Act
        result = repository.delete("trip-1")

        # Assert
        assert result == Ok(None)
        mock_repository.delete.assert_called_once_with("trip-1")
        assert [c.args[0] for c in backend.delete_by_pattern.call_args_list] == [
            "carpool:travel:*",
            "carpool:inscription:*",
        ]

    def test_failed_delete_keeps_cache(self, mock_repository, cache_config):
        """削除に失敗した場合はキャッシュを無効化しない"""

        # Arrange
        backend = MagicMock()
        error = RelationConstraintError("travel")
        mock_repository.delete.return_value = Err(error)
        repository = CachedTravelRepository(mock_repository, backend, cache_config)

        # Act
        result = repository.delete("trip-1")

        # Assert
        assert result == Err(error)
        backend.delete_by_pattern.assert_not_called()

    def test_find_by_id_reads_through_cache(
        self, mock_repository, cache_service, cache_config, create_travel
    ):
        """2 回目の取得はキャッシュから返す"""

        # Arrange
        mock_repository.find_by_id.return_value = Ok(create_travel())
        repository = CachedTravelRepository(mock_repository, cache_service, cache_config)

        # Act
        repository.find_by_id("trip-1")
        result = repository.find_by_id("trip-1")

        # Assert
        assert result == Ok(create_travel())
        mock_repository.find_by_id.assert_called_once_with("trip-1")
