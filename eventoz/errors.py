"""
Error types shared by every Eventoz service.

Each error carries the HTTP status code the route handlers answer with,
so a handler can map any of them to a response without a lookup table.
"""


class EventozError(Exception):
    status_code = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class Conflict(EventozError):
    """A resource with the same unique key already exists."""

    status_code = 409


class NotFound(EventozError):
    status_code = 404


class Unauthorized(EventozError):
    """Credentials were supplied but did not match."""

    status_code = 401


class Unauthenticated(EventozError):
    """No usable identity token was presented."""

    status_code = 401


class InvalidToken(Unauthenticated):
    pass


class TokenExpired(Unauthenticated):
    pass


class StoreError(EventozError):
    """Any failure raised by the document store."""

    status_code = 500


class DuplicateKeyError(StoreError):
    status_code = 409
