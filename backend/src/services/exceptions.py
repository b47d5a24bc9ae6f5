"""Shared exceptions for service layer operations."""


class BookmarkAccessDeniedError(Exception):
    """
    Raised when a bookmark mutation matches no row owned by the acting user.

    A missing bookmark and another user's bookmark produce the same error so
    callers cannot probe for the existence of ids they don't own.
    """

    def __init__(self, bookmark_id: int, action: str) -> None:
        self.bookmark_id = bookmark_id
        self.action = action
        super().__init__(f"You are not authorized to {action} this bookmark.")


class CredentialsTakenError(Exception):
    """Raised when an email address is already registered to another account."""

    def __init__(self, email: str | None) -> None:
        self.email = email
        super().__init__("Credentials taken")


class InvalidCredentialsError(Exception):
    """Raised when signin fails, for both unknown email and wrong password."""

    def __init__(self) -> None:
        super().__init__("Credentials incorrect")
