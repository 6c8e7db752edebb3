from typing import Any, Optional


class LlmSdkError(Exception):
    """Base exception for everything raised by llm_sdk."""
    pass


class MissingFieldError(LlmSdkError, ValueError):
    """Raised by a builder when a required field was never set."""
    def __init__(self, field: str):
        super().__init__(f"missing required field: {field}")
        self.field = field


class ResponseDecodeError(LlmSdkError):
    """Raised when a response body does not match the expected schema."""
    pass


class APIError(LlmSdkError):
    """
    The service answered with a 4xx or 5xx status.

    ``body`` is the raw response text, never parsed; ``response`` is the
    ``httpx.Response`` it came from.
    """
    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None, response: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.response = response

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class BadRequestError(APIError):
    """400: the service rejected the request shape or a parameter value."""
    pass


class AuthenticationError(APIError):
    """401: missing or invalid bearer token."""
    pass


class PermissionDeniedError(APIError):
    """403: the token may not use this model or endpoint."""
    pass


class NotFoundError(APIError):
    """404: unknown endpoint or model, usually a wrong base URL."""
    pass


class RateLimitError(APIError):
    """429: rate or quota limit hit. Nothing is retried."""
    pass


class InternalServerError(APIError):
    """Any 5xx status."""
    pass


_STATUS_ERRORS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    429: RateLimitError,
}


def error_for_status(status_code: int, body: str, response: Any = None) -> APIError:
    """Build the exception matching an HTTP status. The body is kept verbatim."""
    error_class = _STATUS_ERRORS.get(status_code, InternalServerError if status_code >= 500 else APIError)
    return error_class(
        message=f"API failed: {body}",
        status_code=status_code,
        response=response,
        body=body,
    )
