"""
SQLAlchemy declarative base.

All task-store models inherit from this Base class so that
Alembic and ``create_all`` see them in one metadata collection.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass
