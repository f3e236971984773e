"""
FastAPI routers for the users API.

Each module exposes an ``APIRouter`` included by ``users_api.app``.
"""
