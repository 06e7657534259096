from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.inscription.domain.entity import CreateInscriptionData, Inscription
from carpool.inscription.domain.enum import InscriptionStatus
from carpool.inscription.domain.repository import (
    SEAT_CAPACITY_CONSTRAINT,
    TRAVEL_REFERENCE_CONSTRAINT,
    UNIQUE_INSCRIPTION_CONSTRAINT,
    InscriptionRepository,
)
from carpool.shared.domain import Err, Ok, Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.exception import ConstraintViolationError, DatabaseError
from carpool.shared.infrastructure.database import to_repository_error
from carpool.shared.infrastructure.models import InscriptionRecord, TravelRecord
from carpool.shared.infrastructure.models.base import new_id


class SqlAlchemyInscriptionRepository(InscriptionRepository):
    """SQLAlchemy を使用した InscriptionRepository の具象実装

    travels.booked_seats を条件付き UPDATE で増減させることで、
    同時登録時も座席数を超えないことを DB 側で保証する。
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Inscription], RepositoryError]:
        stmt = select(InscriptionRecord).order_by(
            InscriptionRecord.created_at, InscriptionRecord.id
        )
        if pagination is not None:
            stmt = stmt.offset(pagination.skip).limit(pagination.take)
        try:
            with self._session_factory() as session:
                records = session.scalars(stmt).all()
                total = session.scalar(select(func.count()).select_from(InscriptionRecord))
                return Ok(
                    Page[Inscription](data=[_to_entity(r) for r in records], total=total)
                )
        except SQLAlchemyError as e:
            return Err(to_repository_error("list inscriptions", e))

    def find_by_id(self, id: str) -> Result[Inscription | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.get(InscriptionRecord, id)
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find inscription", e))

    def find_by_user_id(self, user_id: str) -> Result[list[Inscription], RepositoryError]:
        return self._find_where(
            "find inscriptions by user", InscriptionRecord.user_id == user_id
        )

    def find_by_trip_id(self, trip_id: str) -> Result[list[Inscription], RepositoryError]:
        return self._find_where(
            "find inscriptions by travel", InscriptionRecord.travel_id == trip_id
        )

    def exists_by_user_and_trip(
        self, user_id: str, trip_id: str
    ) -> Result[bool, RepositoryError]:
        try:
            with self._session_factory() as session:
                return Ok(_exists(session, user_id, trip_id))
        except SQLAlchemyError as e:
            return Err(to_repository_error("check inscription", e))

    def count_by_trip_id(self, trip_id: str) -> Result[int, RepositoryError]:
        try:
            with self._session_factory() as session:
                count = session.scalar(
                    select(func.count())
                    .select_from(InscriptionRecord)
                    .where(InscriptionRecord.travel_id == trip_id)
                )
                return Ok(count or 0)
        except SQLAlchemyError as e:
            return Err(to_repository_error("count inscriptions", e))

    def create(self, data: CreateInscriptionData) -> Result[Inscription, RepositoryError]:
        record = InscriptionRecord(
            id=new_id(),
            user_id=data.user_id,
            travel_id=data.travel_id,
            status=InscriptionStatus.PENDING.value,
        )
        try:
            with self._session_factory() as session, session.begin():
                if _exists(session, data.user_id, data.travel_id):
                    return Err(ConstraintViolationError(UNIQUE_INSCRIPTION_CONSTRAINT))

                # 空席がある場合のみ 1 席確保する
                claimed = session.execute(
                    update(TravelRecord)
                    .where(
                        TravelRecord.id == data.travel_id,
                        TravelRecord.booked_seats < TravelRecord.seats,
                    )
                    .values(booked_seats=TravelRecord.booked_seats + 1)
                    .execution_options(synchronize_session=False)
                )
                if claimed.rowcount == 0:
                    if session.get(TravelRecord, data.travel_id) is None:
                        return Err(ConstraintViolationError(TRAVEL_REFERENCE_CONSTRAINT))
                    return Err(ConstraintViolationError(SEAT_CAPACITY_CONSTRAINT))

                session.add(record)
                session.flush()
                return Ok(_to_entity(record))
        except IntegrityError as e:
            # トランザクションはロールバック済みのため、確保した座席も戻っている
            return self._integrity_error(data, e)
        except SQLAlchemyError as e:
            return Err(to_repository_error("create inscription", e))

    def delete(self, id: str) -> Result[None, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                record = session.get(InscriptionRecord, id)
                if record is None:
                    return Ok(None)
                session.execute(
                    update(TravelRecord)
                    .where(TravelRecord.id == record.travel_id, TravelRecord.booked_seats > 0)
                    .values(booked_seats=TravelRecord.booked_seats - 1)
                    .execution_options(synchronize_session=False)
                )
                session.execute(delete(InscriptionRecord).where(InscriptionRecord.id == id))
                return Ok(None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("delete inscription", e))

    def _find_where(self, action: str, criterion) -> Result[list[Inscription], RepositoryError]:
        stmt = (
            select(InscriptionRecord)
            .where(criterion)
            .order_by(InscriptionRecord.created_at, InscriptionRecord.id)
        )
        try:
            with self._session_factory() as session:
                return Ok([_to_entity(r) for r in session.scalars(stmt).all()])
        except SQLAlchemyError as e:
            return Err(to_repository_error(action, e))

    def _integrity_error(
        self, data: CreateInscriptionData, error: IntegrityError
    ) -> Result[Inscription, RepositoryError]:
        """一意制約違反（同時登録）とそれ以外の制約違反を区別する"""
        exists = self.exists_by_user_and_trip(data.user_id, data.travel_id)
        if exists.success and exists.value:
            return Err(ConstraintViolationError(UNIQUE_INSCRIPTION_CONSTRAINT, cause=error))
        return Err(DatabaseError("Failed to create inscription", cause=error))


def _exists(session: Session, user_id: str, trip_id: str) -> bool:
    found = session.scalar(
        select(InscriptionRecord.id)
        .where(InscriptionRecord.user_id == user_id, InscriptionRecord.travel_id == trip_id)
        .limit(1)
    )
    return found is not None


def _to_entity(record: InscriptionRecord) -> Inscription:
    return Inscription(
        id=record.id,
        user_id=record.user_id,
        travel_id=record.travel_id,
        status=InscriptionStatus(record.status),
        created_at=record.created_at,
    )
