# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for wpkit."""


class WPKitError(Exception):
    """Base exception for all wpkit errors."""


class ConfigurationError(WPKitError):
    """Invalid or missing configuration."""


class RequestEncodingError(WPKitError):
    """A request value could not be serialized to the wire format."""


class DecodingError(WPKitError):
    """The server replied but the body did not match the expected shape."""

    def __init__(self, message: str, field_path: str = "") -> None:
        super().__init__(message)
        self.field_path = field_path


class ContextParseError(DecodingError):
    """A threat context mapping violated its expected structure."""
