"""SQLAlchemy models for coinwallet storage."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

# Scope of the durable wallet data
LOCAL_SCOPE = "local"


class StorageItem(Base):
    """One key-value entry within a scope."""

    __tablename__ = "storage_items"

    id = Column(Integer, primary_key=True)
    scope = Column(String, nullable=False, default=LOCAL_SCOPE)
    key = Column(String, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    __table_args__ = (UniqueConstraint("scope", "key", name="uq_scope_key"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
