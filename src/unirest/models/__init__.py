from .errors import (
    ContentTypeConflictError,
    EncodingError,
    InvalidURLError,
    RequestNotSentError,
    ResponseConsumedError,
    UnirestError,
)

__all__ = [
    "UnirestError",
    "ContentTypeConflictError",
    "InvalidURLError",
    "EncodingError",
    "RequestNotSentError",
    "ResponseConsumedError",
]
