"""Custom exceptions for the publishing service client."""


class ServiceError(Exception):
    """Base exception for all publishing service errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ServiceConnectionError(ServiceError):
    """Raised when the service cannot be reached after all retries."""

    pass


class APIError(ServiceError):
    """Raised when the service returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, body: str = "", *args, **kwargs):
        self.status_code = status_code
        self.body = body
        super().__init__(message, *args, **kwargs)


class NotFoundError(APIError):
    """Raised when the service returns 404."""

    def __init__(self, message: str = "Resource not found", body: str = ""):
        super().__init__(message, status_code=404, body=body)


class ConflictError(APIError):
    """Raised when the service returns 409 (e.g. already published)."""

    def __init__(self, message: str = "Conflict", body: str = ""):
        super().__init__(message, status_code=409, body=body)


class RateLimitError(APIError):
    """Raised when the service returns 429."""

    def __init__(self, message: str = "Rate limit exceeded", body: str = ""):
        super().__init__(message, status_code=429, body=body)


class ResponseValidationError(ServiceError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)
