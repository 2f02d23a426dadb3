"""
EthProofs API Exception Hierarchy

Two families live here:

- Dispatch errors (``InvalidURLError``, ``RequestError``, ``ApiError``,
  ``ParseError``, ``SerializationError``) raised by the client while talking
  to the service.
- Request validation errors (``MissingFieldError``, ``InvalidFieldError``,
  ``MalformedRequestError``) raised while a request is being built, before
  any network activity.
"""


class EthProofsError(Exception):
    """Base exception for all EthProofs API errors."""

    pass


class InvalidURLError(EthProofsError):
    """Base URL could not be parsed into an absolute http(s) URL."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Invalid URL: {url!r} ({reason})")
        self.url = url
        self.reason = reason


class RequestError(EthProofsError):
    """Transport-level failure (DNS, connection, timeout, body read)."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(f"Request error: {message}")
        self.cause = cause


class ApiError(EthProofsError):
    """Non-2xx response. ``message`` is the raw response body."""

    def __init__(self, status: int, message: str):
        super().__init__(f"API error (status: {status}): {message}")
        self.status = status
        self.message = message


class ParseError(EthProofsError):
    """Response payload does not match the expected type."""

    def __init__(self, message: str, expected: str | None = None):
        super().__init__(f"Failed to parse response: {message}")
        self.expected = expected


class SerializationError(EthProofsError):
    """Request payload could not be turned into a JSON body."""

    pass


# ============================================================================
# Request validation
# ============================================================================


class RequestValidationError(EthProofsError):
    """Base exception for request construction failures."""

    pass


class MissingFieldError(RequestValidationError):
    """A required field was never set."""

    def __init__(self, field: str):
        super().__init__(f"Missing field: {field}")
        self.field = field


class InvalidFieldError(RequestValidationError):
    """A field value violates a range or length constraint."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid field {field}: {reason}")
        self.field = field
        self.reason = reason


class MalformedRequestError(RequestValidationError):
    """Related fields are inconsistent with each other."""

    def __init__(self, reason: str):
        super().__init__(f"Malformed request: {reason}")
        self.reason = reason
