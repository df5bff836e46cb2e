"""SQLAlchemy declarative base; ``Base.metadata`` is what schema bootstrap creates."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
