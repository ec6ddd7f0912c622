# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for EditorSettings decoding."""

from __future__ import annotations

import pytest

from wpkit.core.exceptions import DecodingError
from wpkit.models.editor_settings import EditorSettings


class TestEditorSettings:

    def test_gutenberg(self):
        response = {"editor_mobile": "gutenberg", "editor_web": "gutenberg"}
        assert EditorSettings.from_response(response) is EditorSettings.GUTENBERG

    def test_aztec(self):
        response = {"editor_mobile": "aztec", "editor_web": "classic"}
        assert EditorSettings.from_response(response) is EditorSettings.AZTEC

    def test_unrecognized_value_falls_back_to_default(self):
        response = {"editor_mobile": "classic", "editor_web": "classic"}
        assert EditorSettings.from_response(response) is EditorSettings.default()
        assert EditorSettings.default() is EditorSettings.AZTEC

    def test_empty_value_falls_back_to_default(self):
        response = {"editor_mobile": "", "editor_web": "gutenberg"}
        assert EditorSettings.from_response(response) is EditorSettings.AZTEC

    def test_non_mapping_is_a_decoding_error(self):
        with pytest.raises(DecodingError):
            EditorSettings.from_response(["gutenberg"])

    def test_missing_field_reports_its_path(self):
        with pytest.raises(DecodingError) as exc_info:
            EditorSettings.from_response({"editor_web": "gutenberg"})
        assert exc_info.value.field_path == "editor_mobile"

    def test_wrong_type_is_a_decoding_error(self):
        with pytest.raises(DecodingError) as exc_info:
            EditorSettings.from_response({"editor_mobile": 1, "editor_web": "gutenberg"})
        assert exc_info.value.field_path == "editor_mobile"
