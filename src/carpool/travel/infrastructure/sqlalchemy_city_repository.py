from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.shared.domain import Err, Ok, Page, PaginationParams, RepositoryError, Result
from carpool.shared.infrastructure.database import to_delete_error, to_repository_error
from carpool.shared.infrastructure.models import CityRecord
from carpool.shared.infrastructure.models.base import new_id
from carpool.travel.domain.entity import City, CreateCityData
from carpool.travel.domain.repository import CityRepository


class SqlAlchemyCityRepository(CityRepository):
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[City], RepositoryError]:
        stmt = select(CityRecord).order_by(CityRecord.name, CityRecord.id)
        if pagination is not None:
            stmt = stmt.offset(pagination.skip).limit(pagination.take)
        try:
            with self._session_factory() as session:
                records = session.scalars(stmt).all()
                total = session.scalar(select(func.count()).select_from(CityRecord))
                return Ok(Page[City](data=[_to_entity(r) for r in records], total=total))
        except SQLAlchemyError as e:
            return Err(to_repository_error("list cities", e))

    def find_by_id(self, id: str) -> Result[City | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.get(CityRecord, id)
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find city", e))

    def find_by_name(self, name: str) -> Result[City | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.scalar(
                    select(CityRecord).where(CityRecord.name == name).limit(1)
                )
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find city by name", e))

    def create(self, data: CreateCityData) -> Result[City, RepositoryError]:
        record = CityRecord(id=new_id(), name=data.name, zipcode=data.zipcode)
        try:
            with self._session_factory() as session, session.begin():
                session.add(record)
                session.flush()
                return Ok(_to_entity(record))
        except SQLAlchemyError as e:
            return Err(to_repository_error("create city", e))

    def delete(self, id: str) -> Result[None, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                session.execute(delete(CityRecord).where(CityRecord.id == id))
                return Ok(None)
        except SQLAlchemyError as e:
            return Err(to_delete_error("city", e))


def _to_entity(record: CityRecord) -> City:
    return City(id=record.id, name=record.name, zipcode=record.zipcode)
