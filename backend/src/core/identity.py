"""
Access to the authenticated principal from route handlers.

`get_current_user` attaches the principal (a `User` row) to the request.
Handlers that only need one attribute of it ask for that attribute by key:

    user_id: int = Depends(get_user(PrincipalField.ID))

and handlers that need the whole record ask with no key. Only the fields
listed in `PrincipalField` can be extracted; credentials are not among them.
"""
from collections.abc import Awaitable, Callable
from datetime import datetime
from enum import StrEnum

from fastapi import Depends

from core.auth import get_current_user
from models.user import User


class PrincipalField(StrEnum):
    """Principal attributes a handler may request."""

    ID = "id"
    EMAIL = "email"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


PrincipalValue = User | int | str | datetime | None


def extract(principal: User, key: PrincipalField | None = None) -> PrincipalValue:
    """
    Return the whole principal, or the value of a single field when `key` is given.

    No validation is done here; authentication has already produced a
    well-formed principal by the time this runs.
    """
    if key is None:
        return principal
    return getattr(principal, PrincipalField(key).value)


def get_user(
    key: PrincipalField | None = None,
) -> Callable[..., Awaitable[PrincipalValue]]:
    """Build a dependency that yields the current principal or one of its fields."""

    async def dependency(current_user: User = Depends(get_current_user)) -> PrincipalValue:
        return extract(current_user, key)

    return dependency
