# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models decoded from (and encoded to) the remote wire shapes."""

from wpkit.models.editor_settings import EditorSettings
from wpkit.models.jetpack_backup import JetpackBackup, JetpackRestoreTypes
from wpkit.models.jetpack_scan import (
    HighlightRange,
    JetpackScan,
    JetpackScanThreat,
    JetpackScanThreatFixer,
    JetpackThreatContext,
    JetpackThreatExtension,
    ThreatContextLine,
    ThreatExtensionType,
    ThreatFixType,
    ThreatStatus,
)
from wpkit.models.plugin_directory import PluginDirectoryEntry
from wpkit.models.site_creation import CreatedSite, SiteCreationRequest, SiteCreationResponse

__all__ = [
    "CreatedSite",
    "EditorSettings",
    "HighlightRange",
    "JetpackBackup",
    "JetpackRestoreTypes",
    "JetpackScan",
    "JetpackScanThreat",
    "JetpackScanThreatFixer",
    "JetpackThreatContext",
    "JetpackThreatExtension",
    "PluginDirectoryEntry",
    "SiteCreationRequest",
    "SiteCreationResponse",
    "ThreatContextLine",
    "ThreatExtensionType",
    "ThreatFixType",
    "ThreatStatus",
]
