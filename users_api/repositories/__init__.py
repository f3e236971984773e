"""
Persistence adapters.

Each module implements the ``UserStore`` contract for one backend
(relational via SQLAlchemy, document via pymongo). Services depend on the
contract only; the concrete store is chosen once at startup.
"""

from .base import UserStore

__all__ = ["UserStore"]
