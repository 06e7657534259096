from datetime import datetime, time, timedelta, timezone

from sqlalchemy import and_, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.shared.domain import Err, Ok, Page, PaginationParams, RepositoryError, Result
from carpool.shared.infrastructure.database import to_delete_error, to_repository_error
from carpool.shared.infrastructure.models import CityRecord, TravelCityRecord, TravelRecord
from carpool.shared.infrastructure.models.base import new_id
from carpool.travel.domain.entity import CreateTravelData, Travel, TravelFilters, TravelStop
from carpool.travel.domain.enum import TravelCityType
from carpool.travel.domain.repository import TravelRepository


class SqlAlchemyTravelRepository(TravelRepository):
    """SQLAlchemy を使用した TravelRepository の具象実装

    出発地・到着地は travel_cities テーブル（type で区別）で保持する。
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Travel], RepositoryError]:
        stmt = select(TravelRecord).order_by(TravelRecord.date, TravelRecord.id)
        if pagination is not None:
            stmt = stmt.offset(pagination.skip).limit(pagination.take)
        try:
            with self._session_factory() as session:
                records = session.scalars(stmt).all()
                total = session.scalar(select(func.count()).select_from(TravelRecord))
                return Ok(Page[Travel](data=[_to_entity(r) for r in records], total=total))
        except SQLAlchemyError as e:
            return Err(to_repository_error("list travels", e))

    def find_by_id(self, id: str) -> Result[Travel | None, RepositoryError]:
        try:
            with self._session_factory() as session:
                record = session.get(TravelRecord, id)
                return Ok(_to_entity(record) if record else None)
        except SQLAlchemyError as e:
            return Err(to_repository_error("find travel", e))

    def find_by_filters(self, filters: TravelFilters) -> Result[list[Travel], RepositoryError]:
        stmt = select(TravelRecord).order_by(TravelRecord.date, TravelRecord.id)
        if filters.departure_city:
            stmt = stmt.where(_has_stop(TravelCityType.DEPARTURE, filters.departure_city))
        if filters.arrival_city:
            stmt = stmt.where(_has_stop(TravelCityType.ARRIVAL, filters.arrival_city))
        if filters.date:
            start = datetime.combine(filters.date, time.min, tzinfo=timezone.utc)
            stmt = stmt.where(
                TravelRecord.date >= start, TravelRecord.date < start + timedelta(days=1)
            )
        try:
            with self._session_factory() as session:
                return Ok([_to_entity(r) for r in session.scalars(stmt).all()])
        except SQLAlchemyError as e:
            return Err(to_repository_error("find travels by filters", e))

    def create(self, data: CreateTravelData) -> Result[Travel, RepositoryError]:
        record = TravelRecord(
            id=new_id(),
            date=data.date,
            kms=data.kms,
            seats=data.seats,
            booked_seats=0,
            driver_id=data.driver_id,
            car_id=data.car_id,
            cities=[
                TravelCityRecord(
                    type=TravelCityType.DEPARTURE.value, city_id=data.departure_city_id
                ),
                TravelCityRecord(
                    type=TravelCityType.ARRIVAL.value, city_id=data.arrival_city_id
                ),
            ],
        )
        try:
            with self._session_factory() as session, session.begin():
                session.add(record)
                session.flush()
                return Ok(_to_entity(record))
        except SQLAlchemyError as e:
            return Err(to_repository_error("create travel", e))

    def delete(self, id: str) -> Result[None, RepositoryError]:
        try:
            with self._session_factory() as session, session.begin():
                session.execute(delete(TravelRecord).where(TravelRecord.id == id))
                return Ok(None)
        except SQLAlchemyError as e:
            return Err(to_delete_error("travel", e))


def _has_stop(type: TravelCityType, city_name: str):
    return TravelRecord.cities.any(
        and_(
            TravelCityRecord.type == type.value,
            TravelCityRecord.city.has(CityRecord.name == city_name),
        )
    )


def _to_entity(record: TravelRecord) -> Travel:
    """ORM レコードをドメインエンティティに変換する（出発地を先頭に並べる）"""
    stops = sorted(record.cities, key=lambda c: c.type != TravelCityType.DEPARTURE.value)
    return Travel(
        id=record.id,
        date=record.date,
        kms=record.kms,
        seats=record.seats,
        driver_id=record.driver_id,
        car_id=record.car_id,
        stops=tuple(
            TravelStop(
                city_id=stop.city_id,
                city_name=stop.city.name,
                type=TravelCityType(stop.type),
            )
            for stop in stops
        ),
    )
