# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Mobile editor preference for a site."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from wpkit.core.exceptions import DecodingError
from wpkit.models.decoding import decode


class RemoteEditorSettings(BaseModel):
    """Exact wire shape returned by the ``gutenberg`` endpoint."""

    editor_mobile: str
    editor_web: str

    model_config = {"frozen": True}


class EditorSettings(StrEnum):
    GUTENBERG = "gutenberg"
    AZTEC = "aztec"

    @classmethod
    def default(cls) -> EditorSettings:
        return cls.AZTEC

    @classmethod
    def _missing_(cls, value: object) -> EditorSettings:
        return cls.AZTEC

    @classmethod
    def from_response(cls, response: Any) -> EditorSettings:
        """Decode the editor preference from a parsed response body.

        Unrecognized ``editor_mobile`` values fall back to :meth:`default`.
        """
        if not isinstance(response, dict):
            raise DecodingError(
                f"Expected a JSON object for editor settings, got {type(response).__name__}"
            )
        remote = decode(RemoteEditorSettings, response)
        return cls(remote.editor_mobile)
