"""RuntimeSettings tests: defaults, environment overrides and validation."""

import pytest
from pydantic import ValidationError

from contentblockers.config.runtime import RuntimeSettings, get_settings


class TestRuntimeSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CONTENT_BLOCKERS_JSON_INDENT", raising=False)
        settings = RuntimeSettings(_env_file=None)
        assert settings.canonical_order is True
        assert settings.json_indent is None
        assert settings.ensure_ascii is False
        assert settings.log_operations is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CONTENT_BLOCKERS_CANONICAL_ORDER", "false")
        monkeypatch.setenv("CONTENT_BLOCKERS_JSON_INDENT", "2")
        settings = RuntimeSettings(_env_file=None)
        assert settings.canonical_order is False
        assert settings.json_indent == 2

    def test_indent_out_of_range_fails_fast(self):
        with pytest.raises(ValidationError):
            RuntimeSettings(json_indent=12)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
