from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from carpool.shared.infrastructure.database import Base

from .base import UTCDateTime, id_column, utcnow


class CityRecord(Base):
    __tablename__ = "cities"

    id = id_column()
    name = Column(String(100), nullable=False, index=True)
    zipcode = Column(String(10), nullable=False, default="")


class TravelRecord(Base):
    __tablename__ = "travels"
    __table_args__ = (
        CheckConstraint("seats >= 1", name="ck_travel_seats_positive"),
        CheckConstraint("booked_seats >= 0", name="ck_travel_booked_seats_non_negative"),
        CheckConstraint("booked_seats <= seats", name="ck_travel_seat_capacity"),
    )

    id = id_column()
    date = Column(UTCDateTime(), nullable=False)
    kms = Column(Float, nullable=False)
    seats = Column(Integer, nullable=False)
    # 予約済み座席数（InscriptionRecord の件数と同一トランザクションで増減する）
    booked_seats = Column(Integer, nullable=False, default=0)
    driver_id = Column(String(36), ForeignKey("drivers.id"), nullable=False)
    car_id = Column(String(36), ForeignKey("cars.id"), nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)

    cities = relationship(
        "TravelCityRecord",
        back_populates="travel",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )


class TravelCityRecord(Base):
    __tablename__ = "travel_cities"
    travel_id = Column(
        String(36), ForeignKey("travels.id", ondelete="CASCADE"), primary_key=True
    )
    type = Column(String(20), primary_key=True)
    city_id = Column(String(36), ForeignKey("cities.id"), nullable=False)

    travel = relationship("TravelRecord", back_populates="cities")
    city = relationship("CityRecord", lazy="joined")


class InscriptionRecord(Base):
    __tablename__ = "inscriptions"
    __table_args__ = (
        UniqueConstraint("user_id", "travel_id", name="uq_inscription_user_travel"),
    )

    id = id_column()
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    travel_id = Column(
        String(36),
        ForeignKey("travels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status = Column(String(20), nullable=False, default="PENDING")
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
