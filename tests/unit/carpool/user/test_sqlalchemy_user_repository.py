from carpool.inscription.domain.entity import CreateInscriptionData
from carpool.inscription.infrastructure import SqlAlchemyInscriptionRepository
from carpool.shared.domain import Err, Ok
from carpool.shared.domain.exception import ConstraintViolationError, RelationConstraintError
from carpool.shared.infrastructure.models import TravelRecord
from carpool.user.domain.entity import CreateUserData, anonymized_email
from carpool.user.domain.enum import UserRole
from carpool.user.infrastructure import SqlAlchemyUserRepository

ALICE = CreateUserData(
    email="alice@example.com",
    password_hash="hashed",
    first_name="Alice",
    last_name="Martin",
    phone="+33600000000",
)


class TestSqlAlchemyUserRepository:
    """SqlAlchemyUserRepository のテスト（インメモリ SQLite）"""

    def test_create_and_find_credentials(self, session_factory):
        """作成したユーザーの認証情報をメールアドレスで取得できる"""

        # Arrange
        repository = SqlAlchemyUserRepository(session_factory)

        # Act
        created = repository.create(ALICE)
        credentials = repository.find_credentials_by_email("alice@example.com")

        # Assert
        assert created.value.role == UserRole.USER
        assert created.value.created_at.tzinfo is not None
        assert credentials.value.user_id == created.value.id
        assert credentials.value.password_hash == "hashed"

    def test_duplicate_email(self, session_factory):
        """同じメールアドレスの作成は一意制約違反"""

        # Arrange
        repository = SqlAlchemyUserRepository(session_factory)
        repository.create(ALICE)

        # Act
        result = repository.create(ALICE)

        # Assert
        assert isinstance(result, Err)
        assert isinstance(result.error, ConstraintViolationError)
        assert result.error.constraint == "user_email"

    def test_anonymize_erases_personal_data(self, session_factory):
        """匿名化で個人情報が消去され、元のメールアドレスでは見つからない"""

        # Arrange
        repository = SqlAlchemyUserRepository(session_factory)
        user_id = repository.create(ALICE).value.id

        # Act
        result = repository.anonymize(user_id)

        # Assert
        assert result == Ok(None)
        user = repository.find_by_id(user_id).value
        assert user.is_anonymized
        assert user.email == anonymized_email(user_id)
        assert (user.first_name, user.last_name, user.phone) == (None, None, None)
        assert repository.find_by_email("alice@example.com") == Ok(None)

    def test_delete_passenger_releases_seats(self, session_factory, seed_travel):
        """乗客を削除すると登録が消え、座席が解放される"""

        # Arrange
        seeded = seed_travel(session_factory, seats=2)
        passenger = seeded.passenger_ids[0]
        SqlAlchemyInscriptionRepository(session_factory).create(
            CreateInscriptionData(passenger, seeded.travel_id)
        )
        repository = SqlAlchemyUserRepository(session_factory)

        # Act
        result = repository.delete(passenger)

        # Assert
        assert result == Ok(None)
        with session_factory() as session:
            assert session.get(TravelRecord, seeded.travel_id).booked_seats == 0

    def test_delete_driver_with_travels_is_rejected(self, session_factory, seed_travel):
        """旅程を持つ運転者ユーザーは削除できない"""

        # Arrange
        seeded = seed_travel(session_factory)
        repository = SqlAlchemyUserRepository(session_factory)

        # Act
        result = repository.delete(seeded.driver_user_id)

        # Assert
        assert isinstance(result, Err)
        assert isinstance(result.error, RelationConstraintError)
