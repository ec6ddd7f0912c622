# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared plumbing for WordPress.com service remotes."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, TypeVar

from pydantic import BaseModel

from wpkit.core.exceptions import DecodingError
from wpkit.models.decoding import decode
from wpkit.rest.api import RestTransport, WordPressComRestApi

logger = logging.getLogger("wpkit.services.base")

M = TypeVar("M", bound=BaseModel)


class ApiVersion(StrEnum):
    V1_1 = "rest/v1.1"
    V2_0 = "wpcom/v2"


class ServiceRemoteWordPressComREST:
    """Binds a transport to a group of endpoints.

    Each call issues exactly one request. Transport errors propagate
    unchanged; bodies that do not decode raise :class:`DecodingError`.
    """

    def __init__(self, api: RestTransport | None = None) -> None:
        self.api: RestTransport = api if api is not None else WordPressComRestApi.from_settings()

    @staticmethod
    def path_for_endpoint(endpoint: str, version: ApiVersion) -> str:
        return f"{version.value}/{endpoint.lstrip('/')}"

    @staticmethod
    def decode_response(model: type[M], response: Any, context: str) -> M:
        try:
            return decode(model, response)
        except DecodingError as exc:
            logger.error("Failed to decode %s for %s: %s", model.__name__, context, exc)
            raise
