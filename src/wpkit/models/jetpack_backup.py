# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Jetpack backup (rewind download) models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class JetpackBackup(BaseModel):
    """Snapshot of a prepared backup download."""

    download_id: StrictInt = Field(alias="downloadId")
    rewind_id: str = Field(alias="rewindId")
    backup_point: datetime = Field(alias="backupPoint")
    started_at: datetime = Field(alias="startedAt")
    progress: int | None = None
    download_count: int | None = Field(default=None, alias="downloadCount")
    url: str | None = None
    valid_until: datetime | None = Field(default=None, alias="validUntil")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_ready(self) -> bool:
        return self.url is not None


class JetpackRestoreTypes(BaseModel):
    """Which parts of a site a backup download should include."""

    themes: bool = True
    plugins: bool = True
    uploads: bool = True
    sqls: bool = True
    roots: bool = True
    contents: bool = True

    model_config = ConfigDict(frozen=True)

    def encode(self) -> dict[str, bool]:
        return self.model_dump()
