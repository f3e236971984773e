from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StringConstraints

from users_api.domain import ErrorKind, NewUser, StoreError
from users_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

ERROR_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE: 409,
    ErrorKind.UNAVAILABLE: 503,
}

# Same rule as scripts/add_user.py: surrounding blanks dropped, empty rejected.
NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class NewUserIn(BaseModel):
    username: NonBlank
    email: NonBlank


def get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


def _error_response(err: StoreError) -> JSONResponse:
    return JSONResponse({"error": str(err)}, status_code=ERROR_STATUS[err.kind])


@router.post("")
def create_user(payload: NewUserIn, svc: UserService = Depends(get_user_service)):
    try:
        svc.create_user(NewUser(username=payload.username, email=payload.email))
    except StoreError as err:
        return _error_response(err)
    return {"status": "ok"}


# ":path" so usernames containing "/" (sent as %2F) still reach the handler.
@router.get("/{username:path}")
def get_user(username: str, svc: UserService = Depends(get_user_service)):
    try:
        user = svc.get_user(username)
    except StoreError as err:
        return _error_response(err)
    return user.to_dict()
