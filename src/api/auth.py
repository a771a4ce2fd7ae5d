"""Request identity

The caller's user id arrives in the X-User-Id header, set by the fronting
identity provider. Every use case receives it explicitly.
"""

from typing import Optional
from fastapi import Header, status
from pydantic import BaseModel
from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError


class CurrentUser(BaseModel):
    user_id: str
    display_name: Optional[str] = None


async def get_current_user(
    x_user_id: Optional[str] = Header(default=None),
    x_user_name: Optional[str] = Header(default=None),
) -> CurrentUser:
    user_id = (x_user_id or "").strip()
    if user_id:
        return CurrentUser(user_id=user_id, display_name=x_user_name)

    if ApplicationConfig.AUTH_DISABLED:
        return CurrentUser(user_id=ApplicationConfig.DEFAULT_USER_ID, display_name=x_user_name)

    raise ClientError(
        Error(code="UNAUTHENTICATED", message="X-User-Id header is required"),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )
