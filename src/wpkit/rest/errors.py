# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Transport-level errors and response checking."""

from __future__ import annotations

import httpx

from wpkit.core.exceptions import WPKitError


class WordPressComRestApiError(WPKitError):
    """The API answered with a non-2xx status or an unreadable body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        error_code: str = "",
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.response = response


def _error_details(resp: httpx.Response) -> tuple[str, str]:
    """Pull ``(error, message)`` out of a WordPress error body, if any."""
    try:
        body = resp.json()
    except ValueError:
        return "", resp.text[:200]
    if not isinstance(body, dict):
        return "", resp.text[:200]
    code = body.get("error") or body.get("code") or ""
    message = body.get("message") or ""
    return str(code), str(message)


def check_response(resp: httpx.Response, context: str = "") -> None:
    """Raise :class:`WordPressComRestApiError` for non-2xx responses."""
    if resp.is_success:
        return
    msg = f"{context}: HTTP {resp.status_code}" if context else f"HTTP {resp.status_code}"
    code, detail = _error_details(resp)
    if detail:
        msg = f"{msg} - {detail}"
    raise WordPressComRestApiError(
        msg,
        status_code=resp.status_code,
        error_code=code,
        response=resp,
    )
