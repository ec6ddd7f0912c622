# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""WordPress.org plugin directory lookups."""

from __future__ import annotations

import logging
from urllib.parse import quote

from wpkit.core.exceptions import DecodingError
from wpkit.models.plugin_directory import PluginDirectoryEntry
from wpkit.rest.api import RestTransport, WordPressComRestApi
from wpkit.services.base import ServiceRemoteWordPressComREST

logger = logging.getLogger("wpkit.services.plugin_directory")


class PluginDirectoryServiceRemote(ServiceRemoteWordPressComREST):
    """Talks to ``api.wordpress.org`` rather than the WordPress.com API."""

    def __init__(self, api: RestTransport | None = None) -> None:
        super().__init__(api if api is not None else WordPressComRestApi.for_plugin_directory())

    async def get_plugin_information(self, slug: str) -> PluginDirectoryEntry:
        path = f"plugins/info/1.0/{quote(slug, safe='')}.json"
        response = await self.api.get(path, {"fields": "icons,banners"})
        try:
            return PluginDirectoryEntry.from_wire(response)
        except DecodingError as exc:
            logger.error("Failed to decode plugin '%s': %s", slug, exc)
            raise
