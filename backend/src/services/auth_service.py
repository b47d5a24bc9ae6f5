"""Service layer for account signup, signin, and access token issuance."""
import logging
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from models.user import User
from schemas.auth import AuthCredentials
from services.exceptions import CredentialsTakenError, InvalidCredentialsError

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify a password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash in the database
        logger.warning("Stored password hash could not be parsed")
        return False


def create_access_token(user: User, settings: Settings) -> str:
    """
    Create a signed access token for a user.

    Claims:
        sub: the user ID as a string
        email: the user's email at issue time
        iat / exp: issue and expiry times
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Get a user by (lowercased) email."""
    result = await db.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


async def signup(db: AsyncSession, data: AuthCredentials) -> User:
    """
    Register a new account.

    Raises:
        CredentialsTakenError: If the email is already registered.

    Note: Uses flush(), not commit. Session generator handles commit at request end.
    """
    if await get_user_by_email(db, data.email) is not None:
        raise CredentialsTakenError(data.email)

    user = User(email=data.email, hashed_password=hash_password(data.password))
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        # Race condition: another request registered the same email between
        # our SELECT and INSERT.
        await db.rollback()
        raise CredentialsTakenError(data.email)
    await db.refresh(user)
    logger.info("Created user %s", user.id)
    return user


async def signin(db: AsyncSession, data: AuthCredentials) -> User:
    """
    Authenticate an account by email and password.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong.
    """
    user = await get_user_by_email(db, data.email)
    if user is None or not verify_password(data.password, user.hashed_password):
        logger.warning("Failed signin attempt")
        raise InvalidCredentialsError
    return user
