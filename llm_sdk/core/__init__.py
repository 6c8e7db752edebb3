from .exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    InternalServerError,
    LlmSdkError,
    MissingFieldError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ResponseDecodeError,
)
from .models import ApiModel, RequestBuilder
from .schema import to_schema
from .transport import HttpRequest, IntoRequest
