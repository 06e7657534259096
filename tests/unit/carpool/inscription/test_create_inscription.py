from unittest.mock import MagicMock

import pytest

from carpool.inscription.applications import (
    CreateInscriptionInput,
    CreateInscriptionUseCase,
)
from carpool.inscription.domain.repository import (
    SEAT_CAPACITY_CONSTRAINT,
    TRAVEL_REFERENCE_CONSTRAINT,
    UNIQUE_INSCRIPTION_CONSTRAINT,
)
from carpool.shared.domain import Err, Ok
from carpool.shared.domain.exception import (
    AlreadyInscribedError,
    ConstraintViolationError,
    DatabaseError,
    NoSeatsAvailableError,
    TravelNotFoundError,
    UserNotFoundError,
)


@pytest.fixture
def repositories(create_user, create_travel, create_inscription):
    """全ステップが成功する状態のリポジトリモック"""
    inscriptions = MagicMock()
    users = MagicMock()
    travels = MagicMock()
    users.find_by_id.return_value = Ok(create_user())
    travels.find_by_id.return_value = Ok(create_travel(seats=1))
    inscriptions.exists_by_user_and_trip.return_value = Ok(False)
    inscriptions.count_by_trip_id.return_value = Ok(0)
    inscriptions.create.return_value = Ok(create_inscription())
    return inscriptions, users, travels


def _use_case(repositories) -> CreateInscriptionUseCase:
    inscriptions, users, travels = repositories
    return CreateInscriptionUseCase(
        inscription_repository=inscriptions,
        user_repository=users,
        travel_repository=travels,
    )


INPUT = CreateInscriptionInput(user_id="user-1", trip_id="trip-1")


class TestCreateInscriptionUseCase:
    """CreateInscriptionUseCase のテスト"""

    def test_books_the_last_seat(self, repositories, create_inscription):
        """空席が 1 つの旅程に登録でき、作成された登録が返される"""

        # Arrange
        inscriptions, _, _ = repositories
        use_case = _use_case(repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Ok(create_inscription())
        inscriptions.create.assert_called_once()
        data = inscriptions.create.call_args[0][0]
        assert data.user_id == "user-1"
        assert data.travel_id == "trip-1"

    def test_full_travel_is_rejected_before_create(self, repositories):
        """登録数が座席数に達している場合は NoSeatsAvailableError"""

        # Arrange
        inscriptions, _, _ = repositories
        inscriptions.count_by_trip_id.return_value = Ok(1)
        use_case = _use_case(repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(NoSeatsAvailableError("trip-1"))
        inscriptions.create.assert_not_called()

    def test_duplicate_booking_is_rejected(self, repositories):
        """同じユーザーの二重登録は AlreadyInscribedError で、座席数は確認しない"""

        # Arrange
        inscriptions, _, _ = repositories
        inscriptions.exists_by_user_and_trip.return_value = Ok(True)
        use_case = _use_case(repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(AlreadyInscribedError("user-1", "trip-1"))
        inscriptions.count_by_trip_id.assert_not_called()
        inscriptions.create.assert_not_called()

    def test_missing_travel_does_not_touch_inscriptions(self, repositories):
        """旅程が存在しない場合は TravelNotFoundError で、登録リポジトリは呼ばれない"""

        # Arrange
        inscriptions, _, travels = repositories
        travels.find_by_id.return_value = Ok(None)
        use_case = _use_case(repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(TravelNotFoundError("trip-1"))
        assert inscriptions.method_calls == []

    def test_missing_user_stops_before_travel_lookup(self, repositories):
        """ユーザーが存在しない場合は UserNotFoundError で、旅程は参照しない"""

        # Arrange
        _, users, travels = repositories
        users.find_by_id.return_value = Ok(None)
        use_case = _use_case(repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(UserNotFoundError("user-1"))
        travels.find_by_id.assert_not_called()

    def test_anonymized_user_is_treated_as_missing(self, repositories, create_user):
        """匿名化済みユーザーは存在しない扱い"""

        # Arrange
        _, users, _ = repositories
        users.find_by_id.return_value = Ok(
            create_user(anonymized_at=create_user().created_at)
        )
        use_case = _use_case(repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(UserNotFoundError("user-1"))

    def test_repository_error_is_returned_unchanged(self, repositories):
        """事前チェックでのリポジトリエラーはそのまま返される"""

        # Arrange
        inscriptions, _, _ = repositories
        error = DatabaseError("Failed to check inscription")
        inscriptions.exists_by_user_and_trip.return_value = Err(error)
        use_case = _use_case(repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert isinstance(result, Err)
        assert result.error is error

    @pytest.mark.parametrize(
        ("constraint", "expected"),
        [
            (UNIQUE_INSCRIPTION_CONSTRAINT, AlreadyInscribedError("user-1", "trip-1")),
            (SEAT_CAPACITY_CONSTRAINT, NoSeatsAvailableError("trip-1")),
        ],
    )
    def test_constraint_rejection_maps_to_domain_error(
        self, repositories, constraint, expected
    ):
        """事前チェック後に DB 制約で拒否された場合はドメインエラーに変換される"""

        # Arrange
        inscriptions, _, _ = repositories
        inscriptions.create.return_value = Err(ConstraintViolationError(constraint))
        use_case = _use_case(repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert result == Err(expected)

    def test_other_constraint_is_passed_through(self, repositories):
        """変換対象外の制約違反はリポジトリエラーのまま返される"""

        # Arrange
        inscriptions, _, _ = repositories
        error = ConstraintViolationError(TRAVEL_REFERENCE_CONSTRAINT)
        inscriptions.create.return_value = Err(error)
        use_case = _use_case(repositories)

        # Act
        result = use_case.execute(INPUT)

        # Assert
        assert isinstance(result, Err)
        assert result.error is error
