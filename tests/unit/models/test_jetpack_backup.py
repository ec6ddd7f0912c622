# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for Jetpack backup models."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from wpkit.core.exceptions import DecodingError
from wpkit.models.decoding import decode
from wpkit.models.jetpack_backup import JetpackBackup, JetpackRestoreTypes


class TestJetpackBackup:

    def test_decodes(self, backup_payload):
        backup = decode(JetpackBackup, backup_payload)

        assert backup.download_id == 40
        assert backup.rewind_id == "1601467290.123"
        assert backup.backup_point == datetime(2020, 9, 30, 12, 1, 30, tzinfo=UTC)
        assert backup.progress == 100
        assert backup.is_ready

    def test_in_progress_backup(self, backup_payload):
        for key in ("url", "validUntil", "downloadCount"):
            del backup_payload[key]
        backup_payload["progress"] = 35

        backup = decode(JetpackBackup, backup_payload)

        assert backup.url is None
        assert backup.valid_until is None
        assert not backup.is_ready

    @pytest.mark.parametrize("field", ["downloadId", "rewindId", "backupPoint", "startedAt"])
    def test_required_fields(self, backup_payload, field):
        del backup_payload[field]
        with pytest.raises(DecodingError) as exc_info:
            decode(JetpackBackup, backup_payload)
        assert exc_info.value.field_path == field


class TestJetpackRestoreTypes:

    def test_defaults_include_everything(self):
        assert JetpackRestoreTypes().encode() == {
            "themes": True,
            "plugins": True,
            "uploads": True,
            "sqls": True,
            "roots": True,
            "contents": True,
        }

    def test_partial(self):
        encoded = JetpackRestoreTypes(sqls=False, uploads=False).encode()
        assert encoded["sqls"] is False
        assert encoded["uploads"] is False
        assert encoded["themes"] is True
