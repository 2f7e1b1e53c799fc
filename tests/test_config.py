"""
Tests for EditConfig and credential resolution
"""
from nano_edit import EditConfig
from nano_edit.config import DEFAULT_MODEL, DEFAULT_TIMEOUT


class TestResolveCredential:
    """Precedence: explicit → config → GEMINI_API_KEY → API_KEY"""

    def test_explicit_wins(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env")
        config = EditConfig(api_key="config")
        assert config.resolve_credential("explicit") == "explicit"

    def test_config_before_env(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env")
        assert EditConfig(api_key="config").resolve_credential() == "config"

    def test_env_order(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "legacy")
        assert EditConfig().resolve_credential() == "legacy"
        monkeypatch.setenv("GEMINI_API_KEY", "gemini")
        assert EditConfig().resolve_credential() == "gemini"

    def test_env_read_at_call_time(self, monkeypatch):
        config = EditConfig()
        assert config.resolve_credential() is None
        monkeypatch.setenv("GEMINI_API_KEY", "later")
        assert config.resolve_credential() == "later"

    def test_empty_values_are_missing(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "")
        assert EditConfig(api_key="").resolve_credential("") is None


class TestFromEnv:
    """Tests for EditConfig.from_env"""

    def test_defaults(self):
        config = EditConfig.from_env()
        assert config.api_key is None
        assert config.model == DEFAULT_MODEL
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.request_image_modality is True

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "k")
        monkeypatch.setenv("GEMINI_IMAGE_MODEL", "custom-image-model")
        monkeypatch.setenv("GEMINI_TIMEOUT", "30")
        config = EditConfig.from_env()
        assert config.api_key == "k"
        assert config.model == "custom-image-model"
        assert config.timeout == 30.0

    def test_bad_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("GEMINI_TIMEOUT", "soon")
        assert EditConfig.from_env().timeout == DEFAULT_TIMEOUT
