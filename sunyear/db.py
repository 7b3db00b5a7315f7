"""
Database configuration for SQLAlchemy + SQLite.

The gazetteer lives in a single SQLite file that an offline importer
fills. This service only ever reads it.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .settings import settings

DATABASE_URL = f"sqlite:///{settings.sqlite_path}"

# SQLite needs check_same_thread=False for FastAPI because FastAPI uses threads.
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
)

# Session factory used for gazetteer index reloads
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Base class for ORM models."""
    pass
