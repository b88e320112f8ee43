"""hotel-gate exception hierarchy."""


class HotelGateError(Exception):
    """Base exception for all hotel-gate errors."""

    def __init__(self, message: str = "", code: str = "HOTELGATE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class EntitlementError(HotelGateError):
    """Outcome of a failed hotel access check.

    The set is closed: callers match on ``NotFoundError`` and
    ``UnauthorizedError`` only.
    """


class NotFoundError(EntitlementError):
    """Raised when an enrollment, ticket or hotel does not exist."""

    def __init__(self, message: str = "No result for this search"):
        super().__init__(message, code="NOT_FOUND")


class UnauthorizedError(EntitlementError):
    """Raised when a ticket exists but does not grant hotel access."""

    def __init__(self, message: str = "Your ticket does not grant hotel access"):
        super().__init__(message, code="UNAUTHORIZED")
