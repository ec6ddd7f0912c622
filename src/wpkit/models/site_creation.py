# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Site creation request and response models.

The request is built by the caller and encoded to the nested wire shape
expected by ``POST sites/new``::

    {
        "client_id": "...", "client_secret": "...",
        "lang_id": "en", "validate": true,
        "blog_name": "example.wordpress.com", "blog_title": "Example",
        "public": 1,
        "options": {
            "site_segment": 1,
            "site_vertical": "p25v1",
            "site_information": {"site_tagline": "..."}
        }
    }

``public`` is sent as ``1``/``0``, never as a JSON boolean. ``site_vertical``
and ``site_information`` are left out entirely when not supplied.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    field_validator,
)

from wpkit.core.exceptions import DecodingError, RequestEncodingError
from wpkit.models.decoding import decode


class SiteCreationRequest(BaseModel):
    segment_identifier: int
    vertical_identifier: str | None = None
    title: str
    tagline: str | None = None
    site_url_string: str
    is_public: bool
    language_identifier: str
    should_validate: bool
    client_identifier: str
    client_secret: str = Field(repr=False)

    model_config = ConfigDict(frozen=True)

    def encode(self) -> dict[str, Any]:
        """Build the request body, raising :class:`RequestEncodingError` on failure."""
        try:
            options: dict[str, Any] = {"site_segment": self.segment_identifier}
            if self.vertical_identifier is not None:
                options["site_vertical"] = self.vertical_identifier
            if self.tagline is not None:
                options["site_information"] = {"site_tagline": self.tagline}

            body: dict[str, Any] = {
                "client_id": self.client_identifier,
                "client_secret": self.client_secret,
                "lang_id": self.language_identifier,
                "validate": self.should_validate,
                "blog_name": self.site_url_string,
                "blog_title": self.title,
                "public": 1 if self.is_public else 0,
                "options": options,
            }
            # Surface non-JSON values as encoding errors.
            json.dumps(body)
        except (TypeError, ValueError) as exc:
            raise RequestEncodingError(
                f"Failed to encode {type(self).__name__}: {exc}"
            ) from exc
        return body

    @classmethod
    def from_wire(cls, payload: Any) -> SiteCreationRequest:
        """Rebuild a request from its encoded body."""
        if not isinstance(payload, dict):
            raise DecodingError("Expected a JSON object for a site creation request")
        options = payload.get("options")
        if not isinstance(options, dict):
            raise DecodingError("Missing options object", field_path="options")
        site_information = options.get("site_information")
        tagline = (
            site_information.get("site_tagline")
            if isinstance(site_information, dict)
            else None
        )
        public = payload.get("public")
        if public not in (0, 1) or isinstance(public, bool):
            raise DecodingError("public must be 0 or 1", field_path="public")
        return decode(
            cls,
            {
                "segment_identifier": options.get("site_segment"),
                "vertical_identifier": options.get("site_vertical"),
                "title": payload.get("blog_title"),
                "tagline": tagline,
                "site_url_string": payload.get("blog_name"),
                "is_public": public == 1,
                "language_identifier": payload.get("lang_id"),
                "should_validate": payload.get("validate"),
                "client_identifier": payload.get("client_id"),
                "client_secret": payload.get("client_secret"),
            },
        )


class CreatedSite(BaseModel):
    identifier: str = Field(alias="blogid")
    title: str = Field(alias="blogname")
    url_string: str = Field(alias="url")
    xmlrpc_string: str = Field(alias="xmlrpc")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("identifier", mode="before")
    @classmethod
    def _identifier_as_str(cls, v: Any) -> Any:
        # blogid arrives as either a string or a number
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class SiteCreationResponse(BaseModel):
    created_site: CreatedSite = Field(alias="blog_details")
    success: StrictBool

    model_config = ConfigDict(frozen=True, populate_by_name=True)
