# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Service remotes: one coroutine per REST endpoint."""

from wpkit.services.base import ApiVersion, ServiceRemoteWordPressComREST
from wpkit.services.editor import EditorServiceRemote
from wpkit.services.jetpack_backup import JetpackBackupServiceRemote
from wpkit.services.jetpack_scan import JetpackScanServiceRemote
from wpkit.services.plugin_directory import PluginDirectoryServiceRemote
from wpkit.services.site_creation import WordPressComServiceRemote

__all__ = [
    "ApiVersion",
    "EditorServiceRemote",
    "JetpackBackupServiceRemote",
    "JetpackScanServiceRemote",
    "PluginDirectoryServiceRemote",
    "ServiceRemoteWordPressComREST",
    "WordPressComServiceRemote",
]
