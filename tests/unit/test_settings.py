"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables a developer or CI might set
SETTINGS_ENV_VARS = [
    "ENVIRONMENT",
    "LOG_LEVEL",
    "STRICT_TEMPLATE_REFERENCES",
    "DEFAULT_BASE_EFFORT",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear settings environment variables to test true defaults."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_log_level_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"

    def test_library_defaults(self, clean_env):
        """Library construction is lenient and keeps each program's effort."""
        settings = Settings(_env_file=None)
        assert settings.strict_template_references is False
        assert settings.default_base_effort is None


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Values are read from environment variables."""

    def test_reads_environment_variables(self, clean_env, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("STRICT_TEMPLATE_REFERENCES", "true")
        monkeypatch.setenv("DEFAULT_BASE_EFFORT", "7")

        settings = Settings(_env_file=None)

        assert settings.environment == "staging"
        assert settings.log_level == "WARNING"
        assert settings.strict_template_references is True
        assert settings.default_base_effort == 7

    def test_reads_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("STRICT_TEMPLATE_REFERENCES=1\nUNRELATED_VARIABLE=ignored\n")

        settings = Settings(_env_file=env_file)

        assert settings.strict_template_references is True


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings validation behavior."""

    def test_valid_environments_accepted(self):
        """Valid environment values should be accepted."""
        for env in ["development", "staging", "production", "test"]:
            settings = Settings(environment=env, _env_file=None)
            assert settings.environment == env

    def test_environment_case_insensitive(self):
        """Environment validation should be case-insensitive."""
        settings = Settings(environment="PRODUCTION", _env_file=None)
        assert settings.environment == "production"

    def test_invalid_environment_raises_error(self):
        """Invalid environment should raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(environment="invalid", _env_file=None)
        assert "Invalid environment" in str(exc_info.value)

    def test_log_level_normalized(self):
        settings = Settings(log_level="debug", _env_file=None)
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level_raises_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(log_level="chatty", _env_file=None)
        assert "Invalid log level" in str(exc_info.value)

    @pytest.mark.parametrize("effort", [3, 8, 10])
    def test_base_effort_in_range(self, effort):
        settings = Settings(default_base_effort=effort, _env_file=None)
        assert settings.default_base_effort == effort

    @pytest.mark.parametrize("effort", [0, 2, 11])
    def test_base_effort_out_of_range(self, effort):
        """Efforts below 3 leave no room for the deload drop."""
        with pytest.raises(ValidationError):
            Settings(default_base_effort=effort, _env_file=None)


@pytest.mark.unit
class TestSettingsProperties:
    """Test Settings computed properties."""

    def test_is_production_property(self):
        """is_production should return True only in production."""
        assert Settings(environment="production", _env_file=None).is_production is True
        assert Settings(environment="development", _env_file=None).is_production is False

    def test_is_development_property(self):
        """is_development should return True only in development."""
        assert Settings(environment="development", _env_file=None).is_development is True
        assert Settings(environment="production", _env_file=None).is_development is False

    def test_is_test_property(self):
        """is_test should return True only in test environment."""
        assert Settings(environment="test", _env_file=None).is_test is True
        assert Settings(environment="development", _env_file=None).is_test is False


@pytest.mark.unit
class TestGetSettings:
    """Test get_settings() function."""

    def test_get_settings_returns_settings_instance(self):
        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self):
        """get_settings() should return the same cached instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()

    def test_get_settings_cache_can_be_cleared(self):
        get_settings.cache_clear()
        first = get_settings()
        get_settings.cache_clear()
        second = get_settings()
        assert first is not second
