# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""wpkit - Async client for the WordPress.com REST API."""

__version__ = "0.1.0"

from wpkit.core.completion import Failure, Success, capture, dispatch
from wpkit.core.exceptions import (
    ContextParseError,
    DecodingError,
    RequestEncodingError,
    WPKitError,
)
from wpkit.rest import WordPressComRestApi, WordPressComRestApiError
from wpkit.services import (
    EditorServiceRemote,
    JetpackBackupServiceRemote,
    JetpackScanServiceRemote,
    PluginDirectoryServiceRemote,
    WordPressComServiceRemote,
)

__all__ = [
    "ContextParseError",
    "DecodingError",
    "EditorServiceRemote",
    "Failure",
    "JetpackBackupServiceRemote",
    "JetpackScanServiceRemote",
    "PluginDirectoryServiceRemote",
    "RequestEncodingError",
    "Success",
    "WPKitError",
    "WordPressComRestApi",
    "WordPressComRestApiError",
    "WordPressComServiceRemote",
    "__version__",
    "capture",
    "dispatch",
]
