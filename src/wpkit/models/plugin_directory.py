# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""WordPress.org plugin directory metadata."""

from __future__ import annotations

import html
import re
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, WrapValidator

from wpkit.core.exceptions import DecodingError
from wpkit.models.decoding import decode, soft

# e.g. "2017-11-21 9:13pm GMT"
_LAST_UPDATED_FORMAT = "%Y-%m-%d %I:%M%p"
_ANCHOR = re.compile(r"""<a\s[^>]*href=["']([^"']*)["'][^>]*>(.*?)</a>""", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]+>")


def parse_last_updated(value: Any) -> datetime | None:
    """Parse the directory's ``last_updated`` string; ``None`` if unparseable."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.upper().endswith(" GMT"):
        text = text[:-4]
    try:
        return datetime.strptime(text.upper(), _LAST_UPDATED_FORMAT).replace(tzinfo=UTC)
    except ValueError:
        return None


def parse_author(value: Any) -> tuple[str, str | None]:
    """Split an author anchor like ``<a href="url">Name</a>`` into name and URL."""
    if not isinstance(value, str):
        return "", None
    match = _ANCHOR.search(value)
    if match:
        return html.unescape(_TAG.sub("", match.group(2))).strip(), match.group(1) or None
    return html.unescape(_TAG.sub("", value)).strip(), None


def _first(mapping: Any, *keys: str) -> str | None:
    if not isinstance(mapping, dict):
        return None
    for key in keys:
        value = mapping.get(key)
        if isinstance(value, str) and value:
            return value
    return None


class PluginDirectoryEntry(BaseModel):
    """A plugin as described by the WordPress.org plugin directory."""

    name: str
    slug: str
    version: str | None = None
    last_updated: Annotated[datetime | None, WrapValidator(soft)] = None
    icon: str | None = None
    banner: str | None = None
    author: str = ""
    author_url: str | None = None
    description_html: str | None = None
    installation_html: str | None = None
    faq_html: str | None = None
    changelog_html: str | None = None
    rating: int = 0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_wire(cls, payload: Any) -> PluginDirectoryEntry:
        """Build an entry from an ``api.wordpress.org`` plugin information body."""
        if not isinstance(payload, dict):
            raise DecodingError("Expected a JSON object for plugin information")

        author, author_link = parse_author(payload.get("author"))
        sections = payload.get("sections") if isinstance(payload.get("sections"), dict) else {}
        name = payload.get("name")
        return decode(
            cls,
            {
                "name": html.unescape(name) if isinstance(name, str) else name,
                "slug": payload.get("slug"),
                "version": payload.get("version"),
                "last_updated": parse_last_updated(payload.get("last_updated")),
                "icon": _first(payload.get("icons"), "2x", "1x", "default"),
                "banner": _first(payload.get("banners"), "high", "low"),
                "author": author,
                "author_url": _first(payload, "author_profile") or author_link,
                "description_html": sections.get("description"),
                "installation_html": sections.get("installation"),
                "faq_html": sections.get("faq"),
                "changelog_html": sections.get("changelog"),
                "rating": payload.get("rating") or 0,
            },
        )
