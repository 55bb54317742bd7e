import base64
from logging import getLogger
from typing import Any, Optional, Union

import httpx
from pydantic import ValidationError

from ._config import Config
from ._response import Response
from ._utils import (
    CloneMode,
    FileField,
    RequestSpec,
    copy_values,
    encode_values,
    handle_encoding_errors,
    handle_errors,
    multipart_files,
)
from ._utils.constants import (
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    LOGGER_NAME,
    METHOD_GET,
    METHOD_POST,
    USER_AGENT,
)
from .models.errors import ContentTypeConflictError, UnirestError

logger = getLogger(LOGGER_NAME)

BodyType = Union[bytes, bytearray, memoryview, str]


def _to_bytes(data: BodyType) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"body must be bytes or str, not {type(data).__name__}")


def _header_bytes(value: str) -> Union[str, bytes]:
    # non-ASCII values are sent as UTF-8 rather than rejected
    return value.encode("utf-8") if isinstance(value, str) else value


def _basic_auth_value(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8"))
    return f"Basic {token.decode('ascii')}"


def _client_kwargs(config: Optional[Config]) -> Union[dict[str, Any], Response]:
    try:
        return (config or Config.from_env()).client_kwargs()
    except ValidationError as e:
        logger.warning(f"Invalid transport configuration: {e}")
        return Response(error=e)


def _masked(headers: httpx.Headers) -> dict[str, str]:
    return {
        key: "***" if key.lower() == HEADER_AUTHORIZATION.lower() else value
        for key, value in headers.items()
    }


class RequestBuilder:
    """Fluent builder for HTTP requests.

    Every mutator returns a builder. In ``CloneMode.SHARED`` (the default) the
    receiver is copied first and left untouched, so a builder can be kept as
    a template and branched into several requests. In ``CloneMode.EXCLUSIVE``
    the receiver itself is mutated and returned, which avoids the copies but
    makes the builder single-writer.

    Examples:
        >>> api = new().set_url("https://example.com/api/")
        >>> users = api.append_path("users").add_query("page", "2")
        >>> str(users.parse_request().url)
        'https://example.com/api/users?page=2'
        >>> api.url
        'https://example.com/api'
    """

    def __init__(
        self,
        spec: Optional[RequestSpec] = None,
        clone_mode: CloneMode = CloneMode.SHARED,
    ) -> None:
        self._spec = spec if spec is not None else RequestSpec()
        self._clone_mode = CloneMode(clone_mode)

    def __repr__(self) -> str:
        return (
            f"RequestBuilder(method={self._spec.method!r}, "
            f"url={self._spec.target!r}, clone_mode={self._clone_mode.value!r})"
        )

    def _writable(self) -> "RequestBuilder":
        if self._clone_mode is CloneMode.SHARED:
            return self.clone()
        return self

    def clone(self) -> "RequestBuilder":
        """Return an independent copy of this builder, whatever its mode."""
        return RequestBuilder(self._spec.copy(), self._clone_mode)

    def auto_clone(self, enabled: bool) -> "RequestBuilder":
        """Switch between copy-on-write and in-place mutation.

        The switch is itself a mutation: a shared builder is copied before the
        mode is changed, an exclusive one is changed in place.

        Args:
            enabled: ``True`` for ``CloneMode.SHARED``, ``False`` for
                ``CloneMode.EXCLUSIVE``.
        """
        builder = self._writable()
        builder._clone_mode = CloneMode.SHARED if enabled else CloneMode.EXCLUSIVE
        return builder

    def set_url(self, url: str) -> "RequestBuilder":
        builder = self._writable()
        builder._spec.url = url.rstrip("/")
        return builder

    def append_path(self, path: str) -> "RequestBuilder":
        """Append a path segment, keeping exactly one ``/`` between segments.

        Empty segments are ignored and trailing slashes are dropped.
        """
        builder = self._writable()
        if not path:
            return builder
        if not path.startswith("/"):
            path = "/" + path
        builder._spec.path += path.rstrip("/")
        return builder

    def add_query(self, key: str, value: str) -> "RequestBuilder":
        builder = self._writable()
        builder._spec.query.setdefault(key, []).append(value)
        return builder

    def add_header(self, key: str, value: str) -> "RequestBuilder":
        builder = self._writable()
        builder._spec.add_header(key, value)
        return builder

    def add_form_field(self, key: str, value: str) -> "RequestBuilder":
        """Append a form value. Switches the method to POST."""
        builder = self._writable()
        builder._spec.form.setdefault(key, []).append(value)
        builder._spec.method = METHOD_POST
        return builder

    def add_file(self, key: str, filename: str, content: BodyType) -> "RequestBuilder":
        """Attach a file under the form field ``key``. Switches the method to POST.

        Several files may share the same key; they are sent in the order they
        were attached.
        """
        builder = self._writable()
        builder._spec.files.append(FileField(key, filename, _to_bytes(content)))
        builder._spec.method = METHOD_POST
        return builder

    def set_basic_auth(self, username: str, password: str) -> "RequestBuilder":
        """Store basic-auth credentials.

        The ``Authorization`` header is only produced when ``username`` is
        non-empty.
        """
        builder = self._writable()
        builder._spec.basic_auth = (username, password)
        return builder

    def set_json_body(self, data: BodyType) -> "RequestBuilder":
        """Use already-serialized JSON as the body.

        Sets ``Content-Type: application/json`` and switches the method to
        POST.
        """
        builder = self._writable()
        builder._spec.body = _to_bytes(data)
        builder._spec.set_header(HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON)
        builder._spec.method = METHOD_POST
        return builder

    def set_raw_body(self, data: BodyType) -> "RequestBuilder":
        """Use ``data`` as the body, removing any ``Content-Type`` header.

        Switches the method to POST.
        """
        builder = self._writable()
        builder._spec.body = _to_bytes(data)
        builder._spec.del_header(HEADER_CONTENT_TYPE)
        builder._spec.method = METHOD_POST
        return builder

    def get(self) -> "RequestBuilder":
        builder = self._writable()
        builder._spec.method = METHOD_GET
        return builder

    def post(self) -> "RequestBuilder":
        builder = self._writable()
        builder._spec.method = METHOD_POST
        return builder

    @property
    def clone_mode(self) -> CloneMode:
        return self._clone_mode

    @property
    def spec(self) -> RequestSpec:
        """A copy of the accumulated request state."""
        return self._spec.copy()

    @property
    def method(self) -> str:
        return self._spec.method

    @property
    def url(self) -> str:
        """Base URL joined with the appended path."""
        return self._spec.target

    @property
    def query(self) -> dict[str, list[str]]:
        return copy_values(self._spec.query)

    @property
    def headers(self) -> dict[str, list[str]]:
        return copy_values(self._spec.headers)

    @property
    def form(self) -> dict[str, list[str]]:
        return copy_values(self._spec.form)

    @property
    def files(self) -> list[FileField]:
        return list(self._spec.files)

    @property
    def body(self) -> Optional[bytes]:
        return self._spec.body

    @property
    def basic_auth(self) -> tuple[str, str]:
        return self._spec.basic_auth

    def parse_request(self) -> httpx.Request:
        """Materialize the accumulated state into an ``httpx.Request``.

        The body is chosen in this order: the raw or JSON body, a multipart
        body when files are attached, a URL-encoded body when only form
        fields are set, otherwise no body.

        Returns:
            httpx.Request: A request ready to be sent by any httpx client.

        Raises:
            InvalidURLError: If the base URL and path do not form a valid URL.
            ContentTypeConflictError: If a raw or JSON body is combined with
                form fields or files.
            EncodingError: If a header or multipart part cannot be encoded.
        """
        spec = self._spec

        with handle_encoding_errors("headers"):
            headers = httpx.Headers(
                [
                    (key, _header_bytes(value))
                    for key, values in spec.headers.items()
                    for value in values
                ]
            )
        headers[HEADER_USER_AGENT] = USER_AGENT

        username, password = spec.basic_auth
        if username:
            headers[HEADER_AUTHORIZATION] = _basic_auth_value(username, password)

        target = spec.target
        with handle_errors(target):
            url = httpx.URL(target)
            if spec.query:
                url = url.copy_with(query=encode_values(spec.query).encode("ascii"))

        if spec.body is not None and (spec.files or spec.form):
            raise ContentTypeConflictError()

        content: Optional[bytes] = None
        files = None
        if spec.body is not None:
            content = spec.body
        elif spec.files:
            # httpx sets the multipart Content-Type with its boundary
            headers.pop(HEADER_CONTENT_TYPE, None)
            with handle_encoding_errors("multipart body"):
                files = multipart_files(spec.files, spec.form)
        elif spec.form:
            content = encode_values(spec.form).encode("ascii")
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_FORM

        with handle_encoding_errors("request body"):
            request = httpx.Request(
                spec.method, url, headers=headers, content=content, files=files
            )
            request.read()
        return request

    def _prepare(self) -> Union[httpx.Request, Response]:
        try:
            request = self.parse_request()
        except UnirestError as e:
            logger.debug(f"Request not sent: {e}")
            return Response(error=e)

        logger.debug(f"Request: {request.method} {request.url}")
        logger.debug(f"HEADERS: {_masked(request.headers)}")
        return request

    def send(
        self,
        client: Optional[httpx.Client] = None,
        config: Optional[Config] = None,
    ) -> Response:
        """Materialize and send the request.

        Never raises for construction, configuration or transport failures:
        they are stored in the returned ``Response`` and raised when its body
        is read.

        Args:
            client: Client used to send the request. It is left open. When
                omitted, a client configured from ``config`` is opened for
                this request only.
            config: Transport settings for the per-request client. Defaults to
                ``Config.from_env()``.

        Returns:
            Response: Wrapper holding the HTTP response or the error.
        """
        prepared = self._prepare()
        if isinstance(prepared, Response):
            return prepared

        client_kwargs: dict[str, Any] = {}
        if client is None:
            resolved = _client_kwargs(config)
            if isinstance(resolved, Response):
                return resolved
            client_kwargs = resolved

        try:
            if client is not None:
                response = client.send(prepared)
            else:
                with httpx.Client(**client_kwargs) as own_client:
                    response = own_client.send(prepared)
        except httpx.RequestError as e:
            logger.warning(f"Request failed: {prepared.method} {prepared.url}: {e!r}")
            return Response(error=e)

        logger.debug(f"Response: {response.status_code} {prepared.url}")
        return Response(response)

    async def send_async(
        self,
        client: Optional[httpx.AsyncClient] = None,
        config: Optional[Config] = None,
    ) -> Response:
        """Async counterpart of :meth:`send`."""
        prepared = self._prepare()
        if isinstance(prepared, Response):
            return prepared

        client_kwargs: dict[str, Any] = {}
        if client is None:
            resolved = _client_kwargs(config)
            if isinstance(resolved, Response):
                return resolved
            client_kwargs = resolved

        try:
            if client is not None:
                response = await client.send(prepared)
            else:
                async with httpx.AsyncClient(**client_kwargs) as own_client:
                    response = await own_client.send(prepared)
        except httpx.RequestError as e:
            logger.warning(f"Request failed: {prepared.method} {prepared.url}: {e!r}")
            return Response(error=e)

        logger.debug(f"Response: {response.status_code} {prepared.url}")
        return Response(response)


def new() -> RequestBuilder:
    """Create a GET builder in ``CloneMode.SHARED``."""
    return RequestBuilder()
