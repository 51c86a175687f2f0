"""Tests for helper Settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from view_helpers.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("SHORT_FORMAT", "LONG_FORMAT", "STRIPE", "PREVIEW_PORT"):
            monkeypatch.delenv(f"VIEW_HELPERS_{key}", raising=False)
        config = Settings(_env_file=None)
        assert config.short_format is None
        assert config.long_format is None
        assert config.stripe is True
        assert config.list_separator == "\n"
        assert config.preview_port == 7860

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("VIEW_HELPERS_SHORT_FORMAT", "%d %b")
        monkeypatch.setenv("VIEW_HELPERS_STRIPE", "false")
        monkeypatch.setenv("VIEW_HELPERS_PREVIEW_PORT", "9000")
        config = Settings(_env_file=None)
        assert config.short_format == "%d %b"
        assert config.stripe is False
        assert config.preview_port == 9000

    def test_from_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("VIEW_HELPERS_LONG_FORMAT", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("VIEW_HELPERS_LONG_FORMAT=%Y\nUNRELATED=1\n")
        config = Settings(_env_file=str(env_file))
        assert config.long_format == "%Y"

    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv("VIEW_HELPERS_PREVIEW_PORT", "not-a-number")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
