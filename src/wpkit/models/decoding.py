# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Translate loosely-typed JSON into domain models."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError, ValidatorFunctionWrapHandler

from wpkit.core.exceptions import DecodingError

M = TypeVar("M", bound=BaseModel)


def _field_path(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ""
    return ".".join(str(part) for part in errors[0]["loc"])


def decode(model: type[M], payload: Any) -> M:
    """Validate *payload* into *model*, raising :class:`DecodingError` on mismatch."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        path = _field_path(exc)
        reason = exc.errors()[0]["msg"] if exc.errors() else str(exc)
        raise DecodingError(
            f"Failed to decode {model.__name__} at '{path or '<root>'}': {reason}",
            field_path=path,
        ) from exc


def soft(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Wrap-validator body: an optional field that fails to validate becomes ``None``."""
    try:
        return handler(value)
    except ValidationError:
        return None
