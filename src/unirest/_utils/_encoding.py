"""Query-string and multipart helpers used when materializing a request."""

from urllib.parse import urlencode

from ._request_spec import FileField
from .constants import CONTENT_TYPE_OCTET_STREAM

MultipartEntry = tuple[str, tuple]


def encode_values(values: dict[str, list[str]]) -> str:
    """URL-encode a multi-valued mapping.

    Keys are sorted; the values of a key keep their insertion order. Spaces
    are encoded as ``+``.

    Examples:
        >>> encode_values({"b": ["2"], "a": ["1", "x y"]})
        'a=1&a=x+y&b=2'
    """
    return urlencode(
        [(key, value) for key in sorted(values) for value in values[key]]
    )


def _field_bytes(key: str, value: object) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bytes):
        return value
    raise TypeError(f"form field {key!r} must be str, not {type(value).__name__}")


def multipart_files(
    files: list[FileField], form: dict[str, list[str]]
) -> list[MultipartEntry]:
    """Entries for httpx's ``files=`` argument.

    Attachments come first, in attachment order, as
    ``application/octet-stream`` parts; every form value follows as a plain
    part without a filename, in key insertion order.

    Raises:
        TypeError: If a form value is neither ``str`` nor ``bytes``.
    """
    entries: list[MultipartEntry] = [
        (file.key, (file.filename, file.content, CONTENT_TYPE_OCTET_STREAM))
        for file in files
    ]
    for key, values in form.items():
        for value in values:
            entries.append((key, (None, _field_bytes(key, value))))
    return entries
