from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.shared.domain import Err, Ok, Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.exception import ConstraintViolationError
from carpool.shared.infrastructure.database import to_delete_error, to_repository_error
from carpool.shared.infrastructure.models import ColorRecord
from carpool.shared.infrastructure.models.base import new_id
from carpool.vehicle.domain.entity import Color, CreateColorData, UpdateColorData
from carpool.vehicle.domain.repository import ColorRepository


class SqlAlchemyColorRepository(ColorRepository):
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Color], RepositoryError]:
        stmt = select(ColorRecord).order_by(ColorRecord.name)
        if pagination is not None:
            stmt = stmt.offset(pagination.skip).limit(pagination.take)
        try:
            with self._session_factory() as session:
                records = session.scalars(stmt).all()
                total = session.scalar(select(func.count()).select_from(ColorRecord))
                return Ok(Page[Color](data=[_to_entity(r) for r in records], total=total))
        except SQLAlchemyError as e:
            return Err(to_repository_error("list colors", e))

    def find_by_id(self, id: str) -> Result[Color | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.get(ColorRecord, id)
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find color", e))

    def find_by_name(self, name: str) -> Result[Color | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.scalar(select(ColorRecord).where(ColorRecord.name == name))
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find color by name", e))

    def create(self, data: CreateColorData) -> Result[Color, RepositoryError]:
        record = ColorRecord(id=new_id(), name=data.name, hex=data.hex)
        try:
            with self._session_factory() as session, session.begin():
                session.add(record)
                session.flush()
                return Ok(_to_entity(record))
        except IntegrityError as e:
            return Err(ConstraintViolationError("color_name", cause=e))
        except SQLAlchemyError as e:
            return Err(to_repository_error("create color", e))

    def update(self, id: str, data: UpdateColorData) -> Result[Color, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                record = session.get(ColorRecord, id)
                if record is None:
                    return Err(RepositoryError(f"Color {id} disappeared during update"))
                for field, value in data.changes().items():
                    setattr(record, field, value)
                session.flush()
                return Ok(_to_entity(record))
        except IntegrityError as e:
            return Err(ConstraintViolationError("color_name", cause=e))
        except SQLAlchemyError as e:
            return Err(to_repository_error("update color", e))

    def delete(self, id: str) -> Result[None, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                session.execute(delete(ColorRecord).where(ColorRecord.id == id))
                return Ok(None)
        except SQLAlchemyError as e:
            return Err(to_delete_error("color", e))


def _to_entity(record: ColorRecord) -> Color:
    return Color(id=record.id, name=record.name, hex=record.hex)
