# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Jetpack backup downloads (``rewind/downloads``)."""

from __future__ import annotations

from typing import Any

from wpkit.models.jetpack_backup import JetpackBackup, JetpackRestoreTypes
from wpkit.services.base import ApiVersion, ServiceRemoteWordPressComREST


class JetpackBackupServiceRemote(ServiceRemoteWordPressComREST):

    async def prepare_backup(
        self,
        site_id: int,
        rewind_id: str | None = None,
        types: JetpackRestoreTypes | None = None,
    ) -> JetpackBackup:
        """Prepare a downloadable backup snapshot for a site.

        Parameters
        ----------
        site_id:
            The target site's ID.
        rewind_id:
            The rewind point to snapshot; the server picks the latest if omitted.
        types:
            The types of items to include.
        """
        parameters: dict[str, Any] = {}
        if rewind_id is not None:
            parameters["rewindId"] = rewind_id
        if types is not None:
            parameters["types"] = types.encode()

        response = await self.api.post(self.backup_path(site_id), parameters)
        return self.decode_response(JetpackBackup, response, f"prepare backup for site {site_id}")

    async def get_backup_status(
        self,
        site_id: int,
        download_id: int | None = None,
    ) -> JetpackBackup:
        """Get the status of a backup download.

        Without *download_id* the server reports on the site's downloads as a whole.
        """
        subpath = str(download_id) if download_id is not None else None
        response = await self.api.get(self.backup_path(site_id, subpath))
        return self.decode_response(JetpackBackup, response, f"backup status for site {site_id}")

    def backup_path(self, site_id: int, subpath: str | None = None) -> str:
        endpoint = f"sites/{site_id}/rewind/downloads/"
        if subpath:
            endpoint += subpath
        return self.path_for_endpoint(endpoint, ApiVersion.V2_0)
