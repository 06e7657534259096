from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.shared.domain import Err, Ok, Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.exception import ConstraintViolationError
from carpool.shared.infrastructure.database import to_delete_error, to_repository_error
from carpool.shared.infrastructure.models import InscriptionRecord, TravelRecord, UserRecord
from carpool.shared.infrastructure.models.base import new_id, utcnow
from carpool.user.domain.entity import (
    CreateUserData,
    UpdateUserData,
    User,
    UserCredentials,
    anonymized_email,
)
from carpool.user.domain.enum import UserRole
from carpool.user.domain.repository import UserRepository


class SqlAlchemyUserRepository(UserRepository):
    """SQLAlchemy を使用した UserRepository の具象実装"""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[User], RepositoryError]:
        stmt = select(UserRecord).order_by(UserRecord.created_at, UserRecord.id)
        if pagination is not None:
            stmt = stmt.offset(pagination.skip).limit(pagination.take)
        try:
            with self._session_factory() as session:
                records = session.scalars(stmt).all()
                total = session.scalar(select(func.count()).select_from(UserRecord))
                return Ok(
                    Page[User](data=[self._to_entity(r) for r in records], total=total)
                )
        except SQLAlchemyError as e:
            return Err(to_repository_error("list users", e))

    def find_by_id(self, id: str) -> Result[User | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.get(UserRecord, id)
                return Ok(self._to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find user", e))

    def find_by_email(self, email: str) -> Result[User | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.scalar(select(UserRecord).where(UserRecord.email == email))
                return Ok(self._to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find user by email", e))

    def find_credentials_by_email(
        self, email: str
    ) -> Result[UserCredentials | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.scalar(select(UserRecord).where(UserRecord.email == email))
                if record is None:
                    return Ok(None)
                return Ok(
                    UserCredentials(
                        user_id=record.id,
                        email=record.email,
                        password_hash=record.password,
                        role=UserRole(record.role),
                        anonymized_at=record.anonymized_at,
                    )
                )
        except SQLAlchemyError as e:
            return Err(to_repository_error("find credentials", e))

    def exists_by_email(self, email: str) -> Result[bool, RepositoryError]:
        try:
            with self._session_factory() as session:
                found = session.scalar(
                    select(UserRecord.id).where(UserRecord.email == email).limit(1)
                )
                return Ok(found is not None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("check user email", e))

    def create(self, data: CreateUserData) -> Result[User, RepositoryError]:
        record = UserRecord(
            id=new_id(),
            email=data.email,
            password=data.password_hash,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            role=UserRole.USER.value,
        )
        try:
            with self._session_factory() as session, session.begin():
                session.add(record)
                session.flush()
                return Ok(self._to_entity(record))
        except IntegrityError as e:
            return Err(ConstraintViolationError("user_email", cause=e))
        except SQLAlchemyError as e:
            return Err(to_repository_error("create user", e))

    def update(self, id: str, data: UpdateUserData) -> Result[User, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                record = session.get(UserRecord, id)
                if record is None:
                    return Err(RepositoryError(f"User {id} disappeared during update"))
                for field, value in data.changes().items():
                    setattr(record, field, value)
                session.flush()
                return Ok(self._to_entity(record))
        except SQLAlchemyError as e:
            return Err(to_repository_error("update user", e))

    def update_role(self, id: str, role: UserRole) -> Result[None, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                session.execute(
                    update(UserRecord)
                    .where(UserRecord.id == id)
                    .values(role=role.value, updated_at=utcnow())
                )
                return Ok(None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("update user role", e))

    def delete(self, id: str) -> Result[None, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                # カスケード削除される登録の座席を解放する
                booked = select(InscriptionRecord.travel_id).where(
                    InscriptionRecord.user_id == id
                )
                session.execute(
                    update(TravelRecord)
                    .where(TravelRecord.id.in_(booked), TravelRecord.booked_seats > 0)
                    .values(booked_seats=TravelRecord.booked_seats - 1)
                    .execution_options(synchronize_session=False)
                )
                session.execute(delete(UserRecord).where(UserRecord.id == id))
                return Ok(None)
        except SQLAlchemyError as e:
            return Err(to_delete_error("user", e))

    def anonymize(self, id: str) -> Result[None, RepositoryError]:
        now = utcnow()
        try:
            with self._session_factory() as session, session.begin():
                session.execute(
                    update(UserRecord)
                    .where(UserRecord.id == id)
                    .values(
                        email=anonymized_email(id),
                        password=None,
                        first_name=None,
                        last_name=None,
                        phone=None,
                        anonymized_at=now,
                        updated_at=now,
                    )
                )
                return Ok(None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("anonymize user", e))

    @staticmethod
    def _to_entity(record: UserRecord) -> User:
        """ORM レコードをドメインエンティティに変換する"""
        return User(
            id=record.id,
            email=record.email,
            role=UserRole(record.role),
            created_at=record.created_at,
            updated_at=record.updated_at,
            first_name=record.first_name,
            last_name=record.last_name,
            phone=record.phone,
            anonymized_at=record.anonymized_at,
        )
