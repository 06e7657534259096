from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.driver.domain.entity import CreateDriverData, Driver
from carpool.driver.domain.repository import DriverRepository
from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import ConstraintViolationError
from carpool.shared.infrastructure.database import to_repository_error
from carpool.shared.infrastructure.models import DriverRecord
from carpool.shared.infrastructure.models.base import new_id


class SqlAlchemyDriverRepository(DriverRepository):
    """SQLAlchemy を使用した DriverRepository の具象実装"""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_by_id(self, id: str) -> Result[Driver | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.get(DriverRecord, id)
                return Ok(self._to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find driver", e))

    def find_by_user_id(self, user_id: str) -> Result[Driver | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.scalar(
                    select(DriverRecord).where(DriverRecord.user_id == user_id)
                )
                return Ok(self._to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find driver by user", e))

    def create(self, data: CreateDriverData) -> Result[Driver, RepositoryError]:
        record = DriverRecord(
            id=new_id(), user_id=data.user_id, driver_license=data.driver_license
        )
        try:
            with self._session_factory() as session, session.begin():
                session.add(record)
                session.flush()
                return Ok(self._to_entity(record))
        except IntegrityError as e:
            return Err(ConstraintViolationError("driver_user", cause=e))
        except SQLAlchemyError as e:
            return Err(to_repository_error("create driver", e))

    @staticmethod
    def _to_entity(record: DriverRecord) -> Driver:
        return Driver(
            id=record.id, user_id=record.user_id, driver_license=record.driver_license
        )
