"""Shared exceptions for service layer operations."""


class EmailInUseError(Exception):
    """Raised when a signup or profile edit collides with an existing email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Email already in use")


class InvalidCredentialsError(Exception):
    """
    Raised when signin fails.

    The message is the same for an unknown email and a wrong password so
    callers cannot use it to discover which emails have accounts.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class BookmarkAccessDeniedError(Exception):
    """
    Raised when a bookmark write targets a bookmark the user does not own.

    Also raised when the bookmark does not exist: writes do not distinguish the
    two cases. Reads return None instead of raising.
    """

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__("Access to resource denied")
