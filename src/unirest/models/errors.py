class UnirestError(Exception):
    """Base class for errors raised while building or reading a request."""


class ContentTypeConflictError(UnirestError):
    """Raised when a raw or JSON body is combined with form fields or files."""

    def __init__(
        self,
        message="unirest: can't send this request with multiple content types",
    ):
        self.message = message
        super().__init__(self.message)


class InvalidURLError(UnirestError, ValueError):
    """Raised when the base URL and appended path do not form a valid URL."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"invalid URL {url!r}: {reason}")


class EncodingError(UnirestError):
    """Raised when a part of a multipart body cannot be written."""


class RequestNotSentError(UnirestError):
    def __init__(self, message="the request is not sent"):
        self.message = message
        super().__init__(self.message)


class ResponseConsumedError(UnirestError):
    """Raised when the body of a response wrapper is read a second time.

    Response bodies are read once and the underlying stream is closed
    afterwards; the bytes are not cached by the wrapper.
    """

    def __init__(self, message="the response body has already been consumed"):
        self.message = message
        super().__init__(self.message)
