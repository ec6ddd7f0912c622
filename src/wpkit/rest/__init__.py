# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""HTTP transport for the WordPress.com and WordPress.org APIs."""

from wpkit.rest.api import RestTransport, WordPressComRestApi
from wpkit.rest.errors import WordPressComRestApiError

__all__ = [
    "RestTransport",
    "WordPressComRestApi",
    "WordPressComRestApiError",
]
