# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Site creation, exclusive to WordPress.com."""

from __future__ import annotations

import logging

from wpkit.core.exceptions import RequestEncodingError
from wpkit.models.site_creation import SiteCreationRequest, SiteCreationResponse
from wpkit.services.base import ApiVersion, ServiceRemoteWordPressComREST

logger = logging.getLogger("wpkit.services.site_creation")


class WordPressComServiceRemote(ServiceRemoteWordPressComREST):

    async def create_wpcom_site(self, request: SiteCreationRequest) -> SiteCreationResponse:
        """Create a new WordPress.com site.

        Raises
        ------
        RequestEncodingError
            *request* could not be encoded; no HTTP call is made.
        DecodingError
            The server replied with an unexpected body.
        WordPressComRestApiError
            The call itself failed; raised as-is by the transport.
        """
        path = self.path_for_endpoint("sites/new", ApiVersion.V1_1)

        try:
            parameters = request.encode()
        except RequestEncodingError as exc:
            logger.error("Failed to encode %s: %s", type(request).__name__, exc)
            raise

        try:
            response = await self.api.post(path, parameters)
        except Exception as exc:
            logger.error("Site creation for %s failed: %s", request.site_url_string, exc)
            raise

        logger.info("Site creation for %s returned %s", request.site_url_string, response)
        return self.decode_response(SiteCreationResponse, response, "site creation")
