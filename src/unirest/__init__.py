"""Fluent HTTP request builder on top of httpx.

Example:
    >>> import unirest
    >>> request = (
    ...     unirest.new()
    ...     .set_url("https://httpbin.org")
    ...     .append_path("anything")
    ...     .add_query("q", "python")
    ...     .parse_request()
    ... )
    >>> str(request.url)
    'https://httpbin.org/anything?q=python'
"""

from ._builder import RequestBuilder, new
from ._config import Config
from ._response import Response
from ._utils import CloneMode, FileField, RequestSpec
from ._utils.constants import USER_AGENT
from .models.errors import (
    ContentTypeConflictError,
    EncodingError,
    InvalidURLError,
    RequestNotSentError,
    ResponseConsumedError,
    UnirestError,
)

__all__ = [
    "new",
    "RequestBuilder",
    "Response",
    "Config",
    "CloneMode",
    "FileField",
    "RequestSpec",
    "USER_AGENT",
    "UnirestError",
    "ContentTypeConflictError",
    "InvalidURLError",
    "EncodingError",
    "RequestNotSentError",
    "ResponseConsumedError",
]
