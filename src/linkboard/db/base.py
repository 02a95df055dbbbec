"""
linkboard.db.base

SQLAlchemy declarative base shared by `Profile` and `Analysis`.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# Alembic's env.py reads `Base.metadata`; import `linkboard.db.models` before using it.
