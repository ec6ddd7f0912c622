# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for settings and logging setup."""

from __future__ import annotations

import json
import logging

from wpkit.core.config import Settings, get_settings
from wpkit.core.logging import JsonFormatter, redact_sensitive, setup_logging


class TestSettings:

    def test_defaults(self):
        settings = get_settings()
        assert settings.api_base_url == "https://public-api.wordpress.com/"
        assert settings.plugin_directory_url == "https://api.wordpress.org/"
        assert settings.timeout == 15.0
        assert settings.log_format == "json"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WPKIT_OAUTH_TOKEN", "abc")
        monkeypatch.setenv("WPKIT_TIMEOUT", "2.5")
        monkeypatch.setenv("WPKIT_API_BASE_URL", "https://example.test/api")
        settings = get_settings()
        assert settings.oauth_token == "abc"
        assert settings.timeout == 2.5
        assert settings.api_base_url == "https://example.test/api/"

    def test_empty_values_are_ignored(self, monkeypatch):
        monkeypatch.setenv("WPKIT_LOCALE", "")
        assert get_settings().locale == "en"

    def test_dotenv(self, tmp_path):
        (tmp_path / ".env").write_text("WPKIT_CLIENT_ID=from-dotenv\n")
        assert Settings().client_id == "from-dotenv"


class TestRedaction:

    def test_bearer_token(self):
        redacted = redact_sensitive("Authorization: Bearer abcdefghijklmnop")
        assert "abcdefghijklmnop" not in redacted
        assert "[REDACTED]" in redacted

    def test_client_secret_in_dict_repr(self):
        redacted = redact_sensitive("{'client_id': '42', 'client_secret': 'hunter2'}")
        assert "hunter2" not in redacted
        assert "'client_id': '42'" in redacted

    def test_client_secret_in_query(self):
        assert "hunter2" not in redact_sensitive("client_secret=hunter2&lang_id=en")


class TestSetupLogging:

    def test_json_format(self):
        setup_logging("DEBUG", "json")
        root = logging.getLogger("wpkit")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_json_formatter_redacts(self):
        record = logging.LogRecord(
            "wpkit.test", logging.INFO, __file__, 1, "sent %s", ("Bearer abcdefghijkl",), None
        )
        entry = json.loads(JsonFormatter().format(record))
        assert entry["logger"] == "wpkit.test"
        assert "abcdefghijkl" not in entry["message"]

    def test_text_format_and_unknown_level(self):
        setup_logging("nonsense", "text")
        root = logging.getLogger("wpkit")
        assert root.level == logging.INFO
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
