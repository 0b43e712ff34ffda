"""
HTTP Client for the VM service.

Resolves request paths against the configured endpoint and sends them
over a single process-scoped httpx transport. Every request carries the
client's User-Agent header.
"""

from collections.abc import Sequence
from typing import Any

import httpx

from mezasi.cli.intents import FileField, Part, RequestIntent
from mezasi.core.config import get_app_config
from mezasi.core.exceptions import AttachmentError, InvalidPath, TransportError
from mezasi.core.logging import get_logger

logger = get_logger(__name__)


class EndpointClient:
    """
    HTTP client bound to one service endpoint.

    Features:
    - RFC 3986 resolution of relative paths against the endpoint
    - Fixed User-Agent header on every request
    - Connect timeout only; reads wait as long as the server takes
    - No retries; transport failures raise TransportError

    Usage:
        with EndpointClient("http://host/api/") as client:
            response = client.send(intents.list_vms())
    """

    def __init__(
        self,
        endpoint: str,
        user_agent: str | None = None,
        connect_timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the endpoint client.

        Args:
            endpoint: Base URL of the VM service.
            user_agent: User-Agent header value. If None, reads from settings/application.yaml.
            connect_timeout: Seconds allowed to establish a connection. If None, reads from settings/application.yaml.
            transport: Optional httpx transport, used by tests to intercept requests.
        """
        if user_agent is None or connect_timeout is None:
            app = get_app_config().application
            user_agent = user_agent if user_agent is not None else app.user_agent
            connect_timeout = connect_timeout if connect_timeout is not None else app.connect_timeout

        self._endpoint = httpx.URL(endpoint)
        self._user_agent = user_agent
        self._connect_timeout = connect_timeout
        self._client = httpx.Client(
            timeout=httpx.Timeout(None, connect=connect_timeout),
            transport=transport,
            follow_redirects=True,
        )

    @property
    def endpoint(self) -> httpx.URL:
        return self._endpoint

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def connect_timeout(self) -> float:
        return self._connect_timeout

    def close(self) -> None:
        """Close the underlying transport."""
        if not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "EndpointClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def resolve(self, relative_path: str) -> str:
        """
        Resolve a path against the endpoint.

        Relative paths land under the endpoint's path; absolute URLs replace it.

        Raises:
            InvalidPath: If relative_path is not a valid URL reference
        """
        try:
            reference = httpx.URL(relative_path)
        except httpx.InvalidURL as e:
            raise InvalidPath(relative_path, str(e)) from e
        return str(self._endpoint.join(reference))

    def new_request(
        self,
        method: str,
        relative_path: str,
        content: bytes | None = None,
        parts: Sequence[Part] = (),
    ) -> httpx.Request:
        """
        Build a request for a path relative to the endpoint.

        Multipart parts are encoded with a generated boundary and the matching
        Content-Type. Raw content is sent as-is; callers set its Content-Type.

        Raises:
            InvalidPath: If the path cannot be resolved
            AttachmentError: If a file part cannot be read
        """
        url = self.resolve(relative_path)
        headers = {"User-Agent": self._user_agent}

        if parts:
            return self._client.build_request(
                method, url, headers=headers, files=_encode_parts(parts),
            )
        return self._client.build_request(method, url, headers=headers, content=content)

    def build(self, intent: RequestIntent) -> httpx.Request:
        """Build the request described by an intent."""
        return self.new_request(
            intent.method, intent.path, content=intent.content, parts=intent.parts,
        )

    def execute(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and read the full response.

        Raises:
            TransportError: On connection, DNS, TLS or timeout failure
        """
        logger.debug("API request", method=request.method, url=str(request.url))

        try:
            response = self._client.send(request)
        except httpx.HTTPError as e:
            logger.error(
                "API request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
            )
            raise TransportError(f"{request.method} {request.url}: {e}") from e

        logger.debug(
            "API response",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
        )
        return response

    def send(self, intent: RequestIntent) -> httpx.Response:
        """Build and execute an intent."""
        return self.execute(self.build(intent))


def _encode_parts(parts: Sequence[Part]) -> list[tuple[str, tuple[None, bytes | str]]]:
    """
    Convert parts to httpx multipart fields.

    A None filename renders each part as a plain form-data field, and
    passing every part through `files` keeps the body multipart even when
    no file is attached.
    """
    encoded: list[tuple[str, tuple[None, bytes | str]]] = []
    for part in parts:
        if isinstance(part, FileField):
            try:
                value: bytes | str = part.read()
            except OSError as e:
                raise AttachmentError(part.path, e.strerror or str(e)) from e
        else:
            value = part.value
        encoded.append((part.name, (None, value)))
    return encoded
