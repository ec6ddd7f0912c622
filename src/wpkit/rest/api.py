# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Async REST transport backed by httpx."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from wpkit import __version__
from wpkit.core.config import Settings, get_settings
from wpkit.rest.errors import WordPressComRestApiError, check_response

logger = logging.getLogger("wpkit.rest.api")

_USER_AGENT = f"wpkit/{__version__}"


class RestTransport(Protocol):
    """What a service remote needs from the transport.

    Both calls return the parsed JSON body and raise on any failure.
    """

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any: ...

    async def post(self, path: str, params: dict[str, Any] | None = None) -> Any: ...


class WordPressComRestApi:
    """JSON-over-HTTP client for one API host.

    Parameters
    ----------
    base_url:
        Host root; paths passed to :meth:`get` and :meth:`post` are joined to it.
    oauth_token:
        Bearer token sent with every request when non-empty.
    timeout:
        HTTP timeout in seconds.
    locale:
        Sent as the ``locale`` query parameter on every request.
    """

    def __init__(
        self,
        base_url: str,
        *,
        oauth_token: str = "",
        timeout: float = 15.0,
        user_agent: str = "",
        locale: str = "",
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.oauth_token = oauth_token
        self.timeout = timeout
        self.user_agent = user_agent or _USER_AGENT
        self.locale = locale

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> WordPressComRestApi:
        settings = settings or get_settings()
        return cls(
            settings.api_base_url,
            oauth_token=settings.oauth_token,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            locale=settings.locale,
        )

    @classmethod
    def for_plugin_directory(cls, settings: Settings | None = None) -> WordPressComRestApi:
        settings = settings or get_settings()
        return cls(
            settings.plugin_directory_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )

    def _client(self) -> httpx.AsyncClient:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        if self.oauth_token:
            headers["Authorization"] = f"Bearer {self.oauth_token}"
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers=headers,
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _query(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        query: dict[str, Any] = {}
        if self.locale:
            query["locale"] = self.locale
        if params:
            query.update(params)
        return query

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Issue a GET and return the decoded JSON body."""
        async with self._client() as client:
            resp = await client.get(self._url(path), params=self._query(params))
        return self._parse(resp, f"GET {path}")

    async def post(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Issue a POST with *params* as the JSON body and return the decoded body."""
        async with self._client() as client:
            resp = await client.post(
                self._url(path),
                params=self._query(),
                json=params or {},
            )
        return self._parse(resp, f"POST {path}")

    @staticmethod
    def _parse(resp: httpx.Response, context: str) -> Any:
        check_response(resp, context)
        logger.debug("%s -> HTTP %s", context, resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise WordPressComRestApiError(
                f"{context}: response body is not JSON",
                status_code=resp.status_code,
                response=resp,
            ) from exc
