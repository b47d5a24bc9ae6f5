"""FastAPI dependencies for injection."""
from core.auth import get_current_user
from core.config import get_settings
from core.identity import PrincipalField, get_user
from db.session import get_async_session

__all__ = [
    "PrincipalField",
    "get_async_session",
    "get_current_user",
    "get_settings",
    "get_user",
]
