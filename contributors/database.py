"""
Database schema and connection management.

Uses SQLite with SQLAlchemy for the contributor store. Only reads are
needed here; the store itself is filled by whatever processes commits.
"""

from datetime import datetime
from pathlib import Path
from typing import Set

from sqlalchemy import create_engine, Column, Integer, String, DateTime
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


class Contributor(Base):
    """Canonical contributor."""

    __tablename__ = "contributors"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)  # canonical name
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


def init_database(db_path: Path) -> None:
    """
    Initialize database and create tables.

    Args:
        db_path: Path to SQLite database file
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)


def get_session(db_path: Path):
    """
    Get database session.

    Args:
        db_path: Path to SQLite database file

    Returns:
        SQLAlchemy session
    """
    engine = create_engine(f"sqlite:///{db_path}")
    Session = sessionmaker(bind=engine)
    return Session()


def all_names(db_path: Path) -> Set[str]:
    """Returns a set with all canonical contributor names in the store."""
    session = get_session(db_path)
    try:
        return {name for (name,) in session.query(Contributor.name)}
    finally:
        session.close()
