"""
Thin HTTP client for the DeBank Pro OpenAPI.

Every call is a single attempt. Transport errors and non-2xx statuses are
mapped to internal exceptions, logged, and surfaced to the tool layer as
``None`` so that handlers never have to catch upstream failures.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from debank_mcp.config import DebankConfig, default_config

logger = logging.getLogger(__name__)


class DebankApiError(Exception):
    """Base exception for upstream API errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnauthorizedError(DebankApiError):
    """Raised when the upstream rejects the AccessKey."""


class UpstreamUnreachableError(DebankApiError):
    """Raised when the upstream cannot be reached."""


class DebankApiClient:
    """Async client for the DeBank Pro OpenAPI."""

    def __init__(
        self,
        config: DebankConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url, timeout=self.config.timeout
            )
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_headers(self, *, json_body: bool = False) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "AccessKey": self.config.access_key or "",
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _process_response(self, response: httpx.Response) -> Any:
        status_code = response.status_code
        if status_code in {401, 403}:
            raise UnauthorizedError("Unauthorized or AccessKey rejected.", status_code=status_code)
        if status_code < 200 or status_code >= 300:
            raise DebankApiError(f"HTTP error {status_code}", status_code=status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise DebankApiError("Unexpected response from upstream.", status_code=status_code) from exc

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        client = await self._get_client()
        try:
            if method == "POST":
                response = await client.post(path, json=body, headers=self._build_headers(json_body=True))
            else:
                response = await client.get(path, params=params, headers=self._build_headers())
        except httpx.RequestError as exc:
            raise UpstreamUnreachableError("Upstream unreachable") from exc
        return self._process_response(response)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``path`` and return decoded JSON, or None on any failure."""
        try:
            return await self._request("GET", path, params=params)
        except DebankApiError as exc:
            logger.warning(
                "Upstream GET failed path=%s status=%s error=%s", path, exc.status_code, exc
            )
            return None

    async def post(self, path: str, body: Any) -> Any:
        """POST ``body`` as JSON to ``path`` and return decoded JSON, or None on any failure."""
        try:
            return await self._request("POST", path, body=body)
        except DebankApiError as exc:
            logger.warning(
                "Upstream POST failed path=%s status=%s error=%s", path, exc.status_code, exc
            )
            return None


default_client = DebankApiClient()
