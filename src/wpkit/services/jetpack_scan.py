# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Jetpack Scan threat reports."""

from __future__ import annotations

import logging

from wpkit.models.jetpack_scan import JetpackScan, JetpackScanThreat
from wpkit.services.base import ApiVersion, ServiceRemoteWordPressComREST

logger = logging.getLogger("wpkit.services.jetpack_scan")


class JetpackScanServiceRemote(ServiceRemoteWordPressComREST):

    async def get_scan(self, site_id: int) -> JetpackScan:
        """Fetch the scan state and current threats for a site."""
        path = self.path_for_endpoint(f"sites/{site_id}/scan", ApiVersion.V2_0)
        response = await self.api.get(path)
        scan = self.decode_response(JetpackScan, response, f"scan for site {site_id}")
        logger.info("Site %s scan state %r with %d threat(s)", site_id, scan.state, len(scan.threats))
        return scan

    async def get_threats(self, site_id: int) -> tuple[JetpackScanThreat, ...]:
        return (await self.get_scan(site_id)).threats
