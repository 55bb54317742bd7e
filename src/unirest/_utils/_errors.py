from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import EncodingError, InvalidURLError


@contextmanager
def handle_errors(url: str) -> Generator[None, None, None]:
    """Context manager translating httpx URL errors for ``url``.

    Raises:
        InvalidURLError: If httpx rejects the URL.
    """
    try:
        yield
    except httpx.InvalidURL as e:
        raise InvalidURLError(url, str(e)) from e


@contextmanager
def handle_encoding_errors(what: str) -> Generator[None, None, None]:
    """Context manager turning encoding failures into ``EncodingError``.

    ``what`` names the part of the request being built, for the message.

    httpx raises ``TypeError`` for values of an unsupported type and
    ``UnicodeEncodeError`` (a ``ValueError``) for header names it cannot encode.

    Raises:
        EncodingError: If the wrapped code fails to encode a value.
    """
    try:
        yield
    except (TypeError, ValueError) as e:
        raise EncodingError(f"can't encode {what}: {e}") from e
