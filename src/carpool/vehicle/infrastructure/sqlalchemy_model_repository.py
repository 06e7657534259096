from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import ConstraintViolationError
from carpool.shared.infrastructure.database import to_repository_error
from carpool.shared.infrastructure.models import ModelRecord
from carpool.shared.infrastructure.models.base import new_id
from carpool.vehicle.domain.entity import CreateModelData, Model
from carpool.vehicle.domain.repository import ModelRepository


class SqlAlchemyModelRepository(ModelRepository):
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_all(self) -> Result[list[Model], RepositoryError]:
        try:
            with self._session_factory() as session:
                records = session.scalars(
                    select(ModelRecord).order_by(ModelRecord.name, ModelRecord.id)
                ).all()
                return Ok([_to_entity(r) for r in records])
        except SQLAlchemyError as e:
            return Err(to_repository_error("list models", e))

    def find_by_id(self, id: str) -> Result[Model | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.get(ModelRecord, id)
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find model", e))

    def find_by_name_and_brand(
        self, name: str, brand_id: str
    ) -> Result[Model | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.scalar(
                    select(ModelRecord).where(
                        ModelRecord.name == name, ModelRecord.brand_id == brand_id
                    )
                )
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find model by name", e))

    def create(self, data: CreateModelData) -> Result[Model, RepositoryError]:
        record = ModelRecord(id=new_id(), name=data.name, brand_id=data.brand_id)
        try:
            with self._session_factory() as session, session.begin():
                session.add(record)
                session.flush()
                return Ok(_to_entity(record))
        except IntegrityError as e:
            return Err(ConstraintViolationError("model_name_brand", cause=e))
        except SQLAlchemyError as e:
            return Err(to_repository_error("create model", e))


def _to_entity(record: ModelRecord) -> Model:
    return Model(id=record.id, name=record.name, brand_id=record.brand_id)
