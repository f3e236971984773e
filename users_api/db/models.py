"""SQLAlchemy model for the relational users table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .session import Base


class UserRow(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, nullable=False, unique=True)
    email = Column(Text, nullable=False)
