"""Service layer for editing user profiles."""
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User
from schemas.user import UserUpdate
from services.exceptions import CredentialsTakenError


async def update_user(db: AsyncSession, user: User, data: UserUpdate) -> User:
    """
    Apply the fields set in `data` to `user`.

    Raises:
        CredentialsTakenError: If the new email belongs to another user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    update_data = data.model_dump(exclude_unset=True)

    new_email = update_data.get("email")
    if new_email is not None and new_email != user.email:
        result = await db.execute(
            select(User.id).where(User.email == new_email, User.id != user.id),
        )
        if result.scalar_one_or_none() is not None:
            raise CredentialsTakenError(new_email)

    for field, value in update_data.items():
        setattr(user, field, value)

    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise CredentialsTakenError(new_email)
    await db.refresh(user)
    return user
