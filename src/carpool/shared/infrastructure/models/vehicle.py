from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from carpool.shared.infrastructure.database import Base

from .base import id_column


class BrandRecord(Base):
    __tablename__ = "brands"

    id = id_column()
    name = Column(String(100), nullable=False)

    models = relationship("ModelRecord", back_populates="brand", passive_deletes=True)


class ModelRecord(Base):
    __tablename__ = "models"
    __table_args__ = (UniqueConstraint("name", "brand_id", name="uq_model_name_brand"),)

    id = id_column()
    name = Column(String(100), nullable=False)
    brand_id = Column(
        String(36), ForeignKey("brands.id", ondelete="CASCADE"), nullable=False
    )

    brand = relationship("BrandRecord", back_populates="models")


class ColorRecord(Base):
    __tablename__ = "colors"

    id = id_column()
    name = Column(String(50), nullable=False, unique=True)
    hex = Column(String(7), nullable=False)


class CarRecord(Base):
    __tablename__ = "cars"

    id = id_column()
    license_plate = Column(String(20), nullable=False, unique=True, index=True)
    model_id = Column(String(36), ForeignKey("models.id"), nullable=False)
    color_id = Column(String(36), ForeignKey("colors.id"), nullable=True)

    model = relationship("ModelRecord")
