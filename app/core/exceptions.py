"""Client-facing error taxonomy.

Services raise these; ``app.main`` turns them into ``{"error": {"message": ...}}``
responses with the status code carried by the class. Anything else that
escapes a request is an internal failure.
"""


class ApiError(Exception):
    """Base class for errors that are reported to the client as-is."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ApiError):
    status_code = 400


class InvalidRangeError(BadRequestError):
    """toDate is not after fromDate, or the range overlaps another record."""

    def __init__(self, message: str = "Invalid salary date range"):
        super().__init__(message)


class DuplicateKeyError(BadRequestError):
    """A record with the same employee and fromDate already exists."""

    def __init__(self, message: str = "Salary already exists"):
        super().__init__(message)


class ResourceNotFoundError(ApiError):
    status_code = 404


__all__ = [
    "ApiError",
    "BadRequestError",
    "InvalidRangeError",
    "DuplicateKeyError",
    "ResourceNotFoundError",
]
