from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.shared.domain import Err, Ok, Page, PaginationParams, RepositoryError, Result
from carpool.shared.domain.exception import ConstraintViolationError
from carpool.shared.infrastructure.database import to_delete_error, to_repository_error
from carpool.shared.infrastructure.models import CarRecord
from carpool.shared.infrastructure.models.base import new_id
from carpool.vehicle.domain.entity import Car, CreateCarData, UpdateCarData
from carpool.vehicle.domain.repository import CarRepository


class SqlAlchemyCarRepository(CarRepository):
    """SQLAlchemy を使用した CarRepository の具象実装"""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Car], RepositoryError]:
        stmt = select(CarRecord).order_by(CarRecord.license_plate)
        if pagination is not None:
            stmt = stmt.offset(pagination.skip).limit(pagination.take)
        try:
            with self._session_factory() as session:
                records = session.scalars(stmt).all()
                total = session.scalar(select(func.count()).select_from(CarRecord))
                return Ok(Page[Car](data=[_to_entity(r) for r in records], total=total))
        except SQLAlchemyError as e:
            return Err(to_repository_error("list cars", e))

    def find_by_id(self, id: str) -> Result[Car | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.get(CarRecord, id)
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find car", e))

    def exists_by_license_plate(self, license_plate: str) -> Result[bool, RepositoryError]:
        try:
            with self._session_factory() as session:
                found = session.scalar(
                    select(CarRecord.id)
                    .where(CarRecord.license_plate == license_plate)
                    .limit(1)
                )
                return Ok(found is not None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("check license plate", e))

    def create(self, data: CreateCarData) -> Result[Car, RepositoryError]:
        record = CarRecord(
            id=new_id(),
            license_plate=data.license_plate,
            model_id=data.model_id,
            color_id=data.color_id,
        )
        try:
            with self._session_factory() as session, session.begin():
                session.add(record)
                session.flush()
                return Ok(_to_entity(record))
        except IntegrityError as e:
            return Err(ConstraintViolationError("car_license_plate", cause=e))
        except SQLAlchemyError as e:
            return Err(to_repository_error("create car", e))

    def update(self, id: str, data: UpdateCarData) -> Result[Car, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                record = session.get(CarRecord, id)
                if record is None:
                    return Err(RepositoryError(f"Car {id} disappeared during update"))
                for field, value in data.changes().items():
                    setattr(record, field, value)
                session.flush()
                return Ok(_to_entity(record))
        except IntegrityError as e:
            return Err(ConstraintViolationError("car_license_plate", cause=e))
        except SQLAlchemyError as e:
            return Err(to_repository_error("update car", e))

    def delete(self, id: str) -> Result[None, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                session.execute(delete(CarRecord).where(CarRecord.id == id))
                return Ok(None)
        except SQLAlchemyError as e:
            return Err(to_delete_error("car", e))


def _to_entity(record: CarRecord) -> Car:
    return Car(
        id=record.id,
        license_plate=record.license_plate,
        model_id=record.model_id,
        color_id=record.color_id,
    )
