from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.shared.domain import Err, Ok, Page, PaginationParams, RepositoryError, Result
from carpool.shared.infrastructure.database import to_delete_error, to_repository_error
from carpool.shared.infrastructure.models import BrandRecord
from carpool.shared.infrastructure.models.base import new_id
from carpool.vehicle.domain.entity import Brand, CreateBrandData
from carpool.vehicle.domain.repository import BrandRepository


class SqlAlchemyBrandRepository(BrandRepository):
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Brand], RepositoryError]:
        stmt = select(BrandRecord).order_by(BrandRecord.name, BrandRecord.id)
        if pagination is not None:
            stmt = stmt.offset(pagination.skip).limit(pagination.take)
        try:
            with self._session_factory() as session:
                records = session.scalars(stmt).all()
                total = session.scalar(select(func.count()).select_from(BrandRecord))
                return Ok(Page[Brand](data=[_to_entity(r) for r in records], total=total))
        except SQLAlchemyError as e:
            return Err(to_repository_error("list brands", e))

    def find_by_id(self, id: str) -> Result[Brand | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.get(BrandRecord, id)
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find brand", e))

    def create(self, data: CreateBrandData) -> Result[Brand, RepositoryError]:
        record = BrandRecord(id=new_id(), name=data.name)
        try:
            with self._session_factory() as session, session.begin():
                session.add(record)
                session.flush()
                return Ok(_to_entity(record))
        except SQLAlchemyError as e:
            return Err(to_repository_error("create brand", e))

    def delete(self, id: str) -> Result[None, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                session.execute(delete(BrandRecord).where(BrandRecord.id == id))
                return Ok(None)
        except SQLAlchemyError as e:
            return Err(to_delete_error("brand", e))


def _to_entity(record: BrandRecord) -> Brand:
    return Brand(id=record.id, name=record.name)
