# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import copy
import logging
import os
from typing import Any

import pytest

API_BASE = "https://public-api.wordpress.com/"

THREAT_PAYLOAD: dict[str, Any] = {
    "id": 13216959,
    "signature": "EICAR_AV_Test",
    "description": "This is the standard EICAR antivirus test code, and not a real infection.",
    "first_detected": "2020-07-06T14:37:11.000Z",
    "fixable": {"fixer": "delete", "file": "/var/www/html/wp-content/uploads/jptt_eicar.php"},
    "filename": "/var/www/html/wp-content/uploads/jptt_eicar.php",
    "status": "current",
    "context": {
        "3": "start test",
        "4": "VIRUS_SIG",
        "5": "end test",
        "marks": {"4": [[0, 9]]},
    },
}

BACKUP_PAYLOAD: dict[str, Any] = {
    "downloadId": 40,
    "rewindId": "1601467290.123",
    "backupPoint": "2020-09-30T12:01:30+00:00",
    "startedAt": "2020-10-01T08:15:02+00:00",
    "progress": 100,
    "downloadCount": 0,
    "url": "https://example.jetpack.com/download/40",
    "validUntil": "2020-10-08T08:15:32+00:00",
}

SITE_CREATION_RESPONSE: dict[str, Any] = {
    "success": True,
    "blog_details": {
        "url": "https://example.wordpress.com/",
        "blogid": "184070734",
        "blogname": "Example",
        "xmlrpc": "https://example.wordpress.com/xmlrpc.php",
    },
}


class FakeTransport:
    """In-memory stand-in for :class:`wpkit.rest.api.WordPressComRestApi`."""

    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []

    async def _respond(self, method: str, path: str, params: dict[str, Any] | None) -> Any:
        self.calls.append((method, path, params))
        if self.error is not None:
            raise self.error
        return self.response

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._respond("GET", path, params)

    async def post(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._respond("POST", path, params)


@pytest.fixture
def threat_payload() -> dict[str, Any]:
    return copy.deepcopy(THREAT_PAYLOAD)


@pytest.fixture
def backup_payload() -> dict[str, Any]:
    return copy.deepcopy(BACKUP_PAYLOAD)


@pytest.fixture
def site_creation_response() -> dict[str, Any]:
    return copy.deepcopy(SITE_CREATION_RESPONSE)


@pytest.fixture
def fake_transport():
    """Factory for :class:`FakeTransport` instances."""
    return FakeTransport


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep a developer's WPKIT_* environment and .env out of the tests."""
    for key in list(os.environ):
        if key.startswith("WPKIT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging so they don't outlive the test."""
    yield
    root = logging.getLogger("wpkit")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
