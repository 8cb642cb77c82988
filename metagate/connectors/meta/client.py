"""metagate — Meta Graph API Client.

Handles authentication, timeouts and error mapping. One attempt per call:
failures propagate immediately to the caller.
"""

from typing import Any, Dict, Optional, Protocol

import httpx

from metagate.core.errors import TransportError, UpstreamError
from metagate.core.logging import get_logger

logger = get_logger("meta.client")

DEFAULT_TIMEOUT = 30.0


class GraphClient(Protocol):
    """The capability forwarders depend on."""

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        ...

    async def post(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        ...


class MetaClient:
    """Async HTTP client for the Meta Graph API."""

    def __init__(
        self,
        access_token: str,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.host = httpx.URL(self.base_url).host
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    # ── Public API ──

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self._request("POST", path, params=params, body=body or {})

    # ── Core Request Method ──

    def _build_params(self, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Drop unset values and attach the access token."""
        query = {k: v for k, v in (params or {}).items() if v is not None}
        query["access_token"] = self.access_token
        return query

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        client = await self._get_client()
        logger.debug(f"Making request to: {method} {path}", extra={"upstream_path": path})

        try:
            resp = await client.request(
                method, url, params=self._build_params(params), json=body
            )
        except httpx.TimeoutException as e:
            logger.error(
                f"{method} request timed out for {path}: {e}",
                extra={"upstream_path": path},
            )
            raise TransportError(
                f"Request to Meta API timed out after {self.timeout}s",
                cause=e,
                host=self.host,
                timed_out=True,
            ) from e
        except httpx.ConnectError as e:
            logger.error(
                f"{method} request could not connect for {path}: {e}",
                extra={"upstream_path": path},
            )
            raise TransportError(
                f"Unable to connect to {self.host}: {e}",
                cause=e,
                host=self.host,
                unreachable=True,
            ) from e
        except httpx.RequestError as e:
            logger.error(
                f"{method} request failed for {path}: {e}",
                extra={"upstream_path": path},
            )
            raise TransportError(
                f"Request to Meta API failed: {e}", cause=e, host=self.host
            ) from e

        logger.debug(
            f"Response received: {resp.status_code} {path}",
            extra={"upstream_path": path, "status_code": resp.status_code},
        )

        if resp.is_error:
            error = self._upstream_error(resp)
            logger.error(
                f"{method} request failed for {path}: {error.message}",
                extra={"upstream_path": path, "status_code": resp.status_code},
            )
            raise error

        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(502, "Meta API returned a non-JSON response") from e

    @staticmethod
    def _upstream_error(resp: httpx.Response) -> UpstreamError:
        """Build an UpstreamError from a non-2xx response."""
        try:
            body = resp.json()
        except ValueError:
            body = resp.text

        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict):
            return UpstreamError(
                resp.status_code,
                f"Meta API responded with HTTP {resp.status_code}",
                body=body,
            )

        return UpstreamError(
            resp.status_code,
            error.get("message", f"Meta API responded with HTTP {resp.status_code}"),
            error_type=error.get("type"),
            code=error.get("code"),
            fbtrace_id=error.get("fbtrace_id"),
            body=body,
        )
