"""SDK exceptions"""


class RozetkaPayError(Exception):
    """Base exception for every error raised by the SDK"""

    pass


class ConfigurationError(RozetkaPayError):
    """Base URL or credentials are missing or invalid"""

    pass


class TransportError(RozetkaPayError):
    """Network-level failure before a response was received"""

    pass


class ApiError(RozetkaPayError):
    """Gateway answered with a non-success HTTP status"""

    def __init__(self, message: str, status_code: int, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class BadRequestError(ApiError):
    """Gateway rejected the request payload (400)"""

    pass


class AuthorizationError(ApiError):
    """Invalid credentials, deactivated account or denied access (401, 403)"""

    pass


class NotFoundError(ApiError):
    """Requested resource does not exist (404)"""

    pass


class RateLimitError(ApiError):
    """Too many requests (429)"""

    def __init__(self, message: str, status_code: int, body: str | None = None, retry_after: float = 60.0):
        super().__init__(message, status_code, body)
        self.retry_after = retry_after


class ParseError(RozetkaPayError):
    """Response body is not a well-formed JSON document of the expected shape"""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body
