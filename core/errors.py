"""Error taxonomy shared by services and the API layer"""
from core.domain import ErrorCode


class HotelAIError(Exception):
    """Raised when a request cannot be served, with a specific error code"""

    status_code = 500

    def __init__(self, message: str, error_code: ErrorCode):
        self.message = message
        self.error_code = error_code
        super().__init__(message)

    def __str__(self):
        # Format used for logging
        return f"[{self.error_code.value}] {self.message}"


class InvalidArgumentError(HotelAIError):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.INVALID_ARGUMENT)


class UnauthorizedError(HotelAIError):
    status_code = 401

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, ErrorCode.UNAUTHORIZED)


class NotFoundError(HotelAIError):
    status_code = 404

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.NOT_FOUND)


class UpstreamFailureError(HotelAIError):
    """Record store read failed; no partial results are returned."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.UPSTREAM_FAILURE)
