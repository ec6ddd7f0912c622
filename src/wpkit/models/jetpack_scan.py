# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Jetpack Scan threat models."""

from __future__ import annotations

import math
from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    field_validator,
)

from wpkit.core.exceptions import ContextParseError
from wpkit.models.decoding import soft

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)

MARKS_KEY = "marks"


class ThreatStatus(StrEnum):
    FIXED = "fixed"
    IGNORED = "ignored"
    CURRENT = "current"


class ThreatFixType(StrEnum):
    REPLACE = "replace"
    DELETE = "delete"
    UPDATE = "update"
    EDIT = "edit"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> ThreatFixType:
        return cls.UNKNOWN


class ThreatExtensionType(StrEnum):
    PLUGIN = "plugin"
    THEME = "theme"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> ThreatExtensionType:
        return cls.UNKNOWN


def _require_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    return value


class JetpackScanThreatFixer(BaseModel):
    """How a threat can be fixed."""

    type: ThreatFixType = Field(alias="fixer")
    file: Annotated[str | None, WrapValidator(soft)] = None
    target: Annotated[str | None, WrapValidator(soft)] = None

    model_config = _MODEL_CONFIG

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, v: Any) -> ThreatFixType:
        if isinstance(v, ThreatFixType):
            return v
        return ThreatFixType(_require_str(v))


class JetpackThreatExtension(BaseModel):
    """Plugin or theme metadata attached to a threat."""

    slug: str
    name: str
    type: ThreatExtensionType
    is_premium: StrictBool = Field(alias="isPremium")
    version: str

    model_config = _MODEL_CONFIG

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, v: Any) -> ThreatExtensionType:
        if isinstance(v, ThreatExtensionType):
            return v
        return ThreatExtensionType(_require_str(v))


class HighlightRange(BaseModel):
    """Half-open character range ``[start, start + length)`` within a line."""

    start: int
    length: int

    model_config = _MODEL_CONFIG

    @property
    def end(self) -> int:
        return self.start + self.length

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


class ThreatContextLine(BaseModel):
    line_number: int
    contents: str
    highlights: tuple[HighlightRange, ...] = ()

    model_config = _MODEL_CONFIG

    def highlighted_text(self) -> list[str]:
        return [self.contents[h.as_slice()] for h in self.highlights]


class JetpackThreatContext(BaseModel):
    """Source excerpt around a file-based threat.

    The API sends it as::

        {"3": "start test", "4": "VIRUS_SIG", "5": "end test",
         "marks": {"4": [[0, 9]]}}
    """

    lines: tuple[ThreatContextLine, ...]

    model_config = _MODEL_CONFIG

    @field_validator("lines")
    @classmethod
    def _sort_lines(cls, v: tuple[ThreatContextLine, ...]) -> tuple[ThreatContextLine, ...]:
        return tuple(sorted(v, key=lambda line: line.line_number))

    @classmethod
    def from_raw(cls, raw: Any) -> JetpackThreatContext | None:
        """Parse a raw context mapping, returning ``None`` if it is malformed."""
        try:
            return parse_threat_context(raw)
        except ContextParseError:
            return None


def _line_number(key: Any) -> int | None:
    if not isinstance(key, str) or key != key.strip() or "_" in key:
        return None
    try:
        return int(key)
    except ValueError:
        return None


def _highlight(pair: Any) -> HighlightRange | None:
    if not isinstance(pair, list) or len(pair) != 2:
        return None
    for n in pair:
        if isinstance(n, bool) or not isinstance(n, int | float):
            return None
        if isinstance(n, float) and not math.isfinite(n):
            return None
    start, length = pair
    return HighlightRange(start=int(start), length=int(length))


def _highlights(entry: Any) -> tuple[HighlightRange, ...]:
    if not isinstance(entry, list):
        return ()
    ranges = (_highlight(pair) for pair in entry)
    return tuple(r for r in ranges if r is not None)


def parse_threat_context(raw: Any) -> JetpackThreatContext:
    """Parse a raw context mapping or raise :class:`ContextParseError`.

    Keys other than ``marks`` are line numbers holding the line's text. Keys that
    are not integers and lines that are not strings are skipped, as are malformed
    ``[start, length]`` pairs. The context must keep at least one line.
    """
    if not isinstance(raw, dict):
        raise ContextParseError("context must be a JSON object", field_path="context")

    marks = raw.get(MARKS_KEY)
    if not isinstance(marks, dict):
        raise ContextParseError(
            "context is missing its marks object", field_path=f"context.{MARKS_KEY}"
        )

    lines: list[ThreatContextLine] = []
    for key, contents in raw.items():
        if key == MARKS_KEY:
            continue
        line_number = _line_number(key)
        if line_number is None or not isinstance(contents, str):
            continue
        lines.append(
            ThreatContextLine(
                line_number=line_number,
                contents=contents,
                highlights=_highlights(marks.get(key)),
            )
        )

    if not lines:
        raise ContextParseError("context has no content lines", field_path="context")

    return JetpackThreatContext(lines=tuple(lines))


def _soft_context(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    if value is None or isinstance(value, JetpackThreatContext):
        return value
    return JetpackThreatContext.from_raw(value)


class JetpackScanThreat(BaseModel):
    """A single threat detected by Jetpack Scan."""

    id: StrictInt
    signature: str
    description: str
    first_detected: datetime
    fixable: Annotated[JetpackScanThreatFixer | None, WrapValidator(soft)] = None
    file_name: Annotated[str | None, WrapValidator(soft)] = Field(default=None, alias="filename")
    status: Annotated[ThreatStatus | None, WrapValidator(soft)] = None
    fixed_on: Annotated[datetime | None, WrapValidator(soft)] = None
    extension: Annotated[JetpackThreatExtension | None, WrapValidator(soft)] = None
    context: Annotated[JetpackThreatContext | None, WrapValidator(_soft_context)] = None
    # Core modification threats carry a git diff
    diff: Annotated[str | None, WrapValidator(soft)] = None
    # Database threats carry row information
    rows: Annotated[dict[str, Any] | None, WrapValidator(soft)] = None

    model_config = _MODEL_CONFIG


class JetpackScan(BaseModel):
    """Scan state for a site along with its current threats."""

    state: str = ""
    threats: tuple[JetpackScanThreat, ...] = ()

    model_config = _MODEL_CONFIG

    @field_validator("threats", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return () if v is None else v
