"""
ORM models.

The `cities` table mirrors the bulk gazetteer file: one row per place,
written by the importer in chunks and never updated afterwards.
"""

from typing import Optional

from sqlalchemy import String, Integer, Numeric, Index
from sqlalchemy.orm import Mapped, mapped_column
from .db import Base


class City(Base):
    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    name: Mapped[str] = mapped_column(String(100), index=True)
    country: Mapped[str] = mapped_column(String(2))

    # Low-confidence entries come without coordinates
    latitude: Mapped[Optional[float]] = mapped_column(Numeric(10, 7, asdecimal=False), nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Numeric(10, 7, asdecimal=False), nullable=True)

    population: Mapped[int] = mapped_column(Integer, default=0)

    # First-level admin division ("Uusimaa", "Skåne")
    region: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    __table_args__ = (Index("ix_cities_name_country", "name", "country"),)
