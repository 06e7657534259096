from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from carpool.shared.infrastructure.database import Base

from .base import UTCDateTime, id_column, utcnow


class UserRecord(Base):
    __tablename__ = "users"

    id = id_column()
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    phone = Column(String(30), nullable=True)
    role = Column(String(20), nullable=False, default="USER")
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at = Column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
    anonymized_at = Column(UTCDateTime(), nullable=True)

    driver = relationship(
        "DriverRecord", back_populates="user", uselist=False, passive_deletes=True
    )


class DriverRecord(Base):
    __tablename__ = "drivers"

    id = id_column()
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    driver_license = Column(String(50), nullable=False)

    user = relationship("UserRecord", back_populates="driver")
