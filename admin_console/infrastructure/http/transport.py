"""Authenticated HTTP transport shared by every resource client.

Binds an httpx client to one resource base path (e.g. ``.../api/coupons``),
attaches the bearer token from the injected credential provider on every
request, and turns every failure into ``RequestFailed``. Callers never see
status codes or httpx exceptions.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

import httpx

from admin_console.application.interfaces import CredentialProvider
from admin_console.domain.exceptions import RequestFailed

logger = logging.getLogger(__name__)

ResponseKind = Literal["json", "binary"]

DEFAULT_FAILURE_MESSAGE = "Request failed."


@dataclass(frozen=True)
class RawResult:
    """A successful response, decoded according to the requested kind."""

    status_code: int
    content_type: str
    content: bytes
    data: Any = None


def extract_error_message(content: bytes) -> str | None:
    """Return the ``message`` of a JSON error envelope, if there is one."""
    try:
        body = json.loads(content)
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None


class Transport:
    """Stateless request helper for one resource base path.

    An injected ``httpx.AsyncClient`` is reused across calls; otherwise a
    client is opened per request and closed afterwards.
    """

    def __init__(
        self,
        base_url: str,
        credentials: CredentialProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._credentials = credentials
        self._http_client = http_client
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_headers(self) -> dict[str, str]:
        """Headers for one request; the token is looked up fresh every time."""
        headers: dict[str, str] = {}
        token = self._credentials.get_token() if self._credentials is not None else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _build_url(self, path: str) -> str:
        path = path.strip("/")
        return f"{self._base_url}/{path}" if path else self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        if self._timeout is not None:
            return httpx.AsyncClient(timeout=self._timeout)
        return httpx.AsyncClient()

    async def request(
        self,
        method: str,
        path: str = "",
        *,
        json: Any = None,
        files: Any = None,
        params: Mapping[str, Any] | None = None,
        response_kind: ResponseKind = "json",
        fallback_message: str = DEFAULT_FAILURE_MESSAGE,
    ) -> RawResult:
        """Send one request and return its decoded result.

        Args:
            method: HTTP method.
            path: Path relative to the base path ('' for the collection).
            json: JSON body.
            files: Multipart parts in httpx ``files`` form.
            params: Query parameters; ``None`` values are omitted.
            response_kind: 'json' to decode the body, 'binary' to keep raw bytes.
            fallback_message: Error message used when the server supplies none.

        Raises:
            RequestFailed: On any non-2xx status, network error, or
                undecodable JSON body.
        """
        url = self._build_url(path)
        query = {k: v for k, v in params.items() if v is not None} if params else None

        client = await self._get_client()
        should_close = self._http_client is None

        logger.debug("%s %s params=%s", method, url, query)
        try:
            response = await client.request(
                method,
                url,
                headers=self._get_headers(),
                json=json,
                files=files,
                params=query,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise RequestFailed(fallback_message) from exc
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            self._raise_request_failed(method, url, response, fallback_message)

        content_type = response.headers.get("content-type", "")
        if response_kind == "binary":
            return RawResult(response.status_code, content_type, response.content)

        try:
            data = response.json() if response.content else None
        except ValueError as exc:
            logger.warning("%s %s returned a malformed JSON body", method, url)
            raise RequestFailed(fallback_message) from exc
        return RawResult(response.status_code, content_type, response.content, data)

    @staticmethod
    def _raise_request_failed(
        method: str, url: str, response: httpx.Response, fallback_message: str
    ) -> None:
        """Raise RequestFailed from a non-2xx httpx Response."""
        message = extract_error_message(response.content) or fallback_message
        logger.warning("%s %s → %d: %s", method, url, response.status_code, message)
        raise RequestFailed(message)
