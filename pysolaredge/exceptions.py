from typing import Optional


class PySolarEdgeException(Exception):
    pass


class TransportError(PySolarEdgeException):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""

    def __init__(self, message: str, original: Optional[Exception] = None):
        super().__init__(message)
        self.original = original


class BadURL(PySolarEdgeException):
    def __init__(self, message: str = "Bad URL"):
        super().__init__(message)


class HttpStatusError(PySolarEdgeException):
    status_code: Optional[int] = None
    description = "Unknown error with response"

    def __init__(self, description: Optional[str] = None):
        if description:
            self.description = description
        super().__init__(self.description)


class Unmodified(HttpStatusError):
    status_code = 304
    description = "There is no new data. Content is unmodified."


class BadRequest(HttpStatusError):
    status_code = 400
    description = "Bad Request (400)"


class Unauthorized(HttpStatusError):
    status_code = 401
    description = "Unauthorized (401)"


class Forbidden(HttpStatusError):
    status_code = 403
    description = "Forbidden (403)"


class NotFound(HttpStatusError):
    status_code = 404
    description = "Not Found (404)"


class Conflict(HttpStatusError):
    status_code = 409
    description = "Conflict (409)"


class UnprocessableEntity(HttpStatusError):
    status_code = 422
    description = "Unprocessable Entity (422)"


class TooManyRequests(HttpStatusError):
    status_code = 429
    description = "Too Many Requests (429)"


class InternalServerError(HttpStatusError):
    status_code = 500
    description = "Internal Server Error (500)"


class UnexpectedResponse(HttpStatusError):
    """Any status code without a dedicated error class."""

    def __init__(self, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__()


class DescribedError(PySolarEdgeException):
    """A status error enriched with the text the server sent back."""

    def __init__(self, message: str, status_error: Optional[HttpStatusError] = None):
        super().__init__(message)
        self.message = message
        self.status_error = status_error


class DecodingError(PySolarEdgeException):
    def __init__(self, cause: str):
        super().__init__(f"Error while decoding. {cause}")
        self.cause = cause
