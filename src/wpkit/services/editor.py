# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-site mobile editor preference."""

from __future__ import annotations

import logging

from wpkit.core.exceptions import DecodingError
from wpkit.models.editor_settings import EditorSettings
from wpkit.services.base import ApiVersion, ServiceRemoteWordPressComREST

logger = logging.getLogger("wpkit.services.editor")


class EditorServiceRemote(ServiceRemoteWordPressComREST):

    def _path(self, site_id: int) -> str:
        return self.path_for_endpoint(f"sites/{site_id}/gutenberg", ApiVersion.V2_0)

    async def get_editor_settings(self, site_id: int) -> EditorSettings:
        """Fetch the editor the site's mobile apps should use."""
        response = await self.api.get(self._path(site_id))
        return self._editor(response, site_id)

    async def set_mobile_editor(self, site_id: int, editor: EditorSettings) -> EditorSettings:
        """Designate *editor* as the site's mobile editor and return the stored value."""
        response = await self.api.post(
            self._path(site_id),
            {"platform": "mobile", "editor": editor.value},
        )
        return self._editor(response, site_id)

    @staticmethod
    def _editor(response: object, site_id: int) -> EditorSettings:
        try:
            return EditorSettings.from_response(response)
        except DecodingError as exc:
            logger.error("Failed to decode editor settings for site %s: %s", site_id, exc)
            raise
