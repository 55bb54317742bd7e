import json
from typing import Any, Optional

import httpx

from .models.errors import RequestNotSentError, ResponseConsumedError


class Response:
    """Result of sending a request.

    Holds either the ``httpx.Response`` or the error that prevented the
    request from being sent. Errors are deferred: they are raised by the
    first accessor that needs the response, not by ``send``.

    The body can be read once. The wrapper does not keep the bytes, so a
    second ``as_bytes``/``as_string``/``as_json`` call raises
    ``ResponseConsumedError``.
    """

    def __init__(
        self,
        response: Optional[httpx.Response] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._response = response
        self._error = error
        self._consumed = False

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Response(error={self._error!r})"
        if self._response is None:
            return "Response(not sent)"
        return f"Response(status_code={self._response.status_code})"

    @property
    def error(self) -> Optional[Exception]:
        return self._error

    @property
    def http_response(self) -> Optional[httpx.Response]:
        return self._response

    @property
    def ok(self) -> bool:
        """Whether the request was sent; says nothing about the status code."""
        return self._error is None and self._response is not None

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _checked(self) -> httpx.Response:
        if self._error is not None:
            raise self._error
        if self._response is None:
            raise RequestNotSentError()
        return self._response

    @property
    def status_code(self) -> int:
        return self._checked().status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._checked().headers

    def as_bytes(self) -> bytes:
        """Read the whole body and close the response.

        Raises:
            Exception: The error captured when the request was built or sent.
            RequestNotSentError: If the wrapper holds no response.
            ResponseConsumedError: If the body was already read.
        """
        response = self._checked()
        if self._consumed:
            raise ResponseConsumedError()

        try:
            return response.read()
        finally:
            self._consumed = True
            if not response.is_closed:
                response.close()

    def as_string(self) -> str:
        """Read the body as text.

        Decoded with the response charset (UTF-8 when none is declared);
        undecodable bytes are replaced rather than raising.
        """
        content = self.as_bytes()
        encoding = self._checked().encoding or "utf-8"
        return content.decode(encoding, errors="replace")

    def as_json(self) -> Any:
        return json.loads(self.as_bytes())
