"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    _coerce,
    get_compiler_url,
    get_environment,
    get_environment_info,
    get_history_debounce,
    get_preview_debounce,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("MAILCRAFT_COMPILER_PORT", raising=False)
        result = get_environment(EnvVar.COMPILER_PORT)
        assert result == 13030

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("MAILCRAFT_COMPILER_PORT", "9999")
        result = get_environment(EnvVar.COMPILER_PORT, override=5000)
        assert result == 5000

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("MAILCRAFT_HISTORY_LIMIT", "12")
        result = get_environment(EnvVar.HISTORY_LIMIT)
        assert result == 12
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_float_type_conversion(self, monkeypatch):
        """Float type conversion from string."""
        monkeypatch.setenv("MAILCRAFT_COMPILER_TIMEOUT", "2.5")
        result = get_environment(EnvVar.COMPILER_TIMEOUT)
        assert result == 2.5
        assert isinstance(result, float)

    @pytest.mark.unit
    def test_invalid_int_raises(self, monkeypatch):
        """Invalid integer value names the variable."""
        monkeypatch.setenv("MAILCRAFT_PREVIEW_DEBOUNCE_MS", "soon")
        with pytest.raises(ValueError, match="MAILCRAFT_PREVIEW_DEBOUNCE_MS"):
            get_environment(EnvVar.PREVIEW_DEBOUNCE_MS)

    @pytest.mark.unit
    def test_invalid_float_raises(self, monkeypatch):
        monkeypatch.setenv("MAILCRAFT_COMPILER_TIMEOUT", "forever")
        with pytest.raises(ValueError, match="float"):
            get_environment(EnvVar.COMPILER_TIMEOUT)

    @pytest.mark.unit
    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("MAILCRAFT_HISTORY_LIMIT", "  ")
        assert get_environment(EnvVar.HISTORY_LIMIT) == 50

    @pytest.mark.unit
    @pytest.mark.parametrize("raw, expected", [("yes", True), ("Off", False), ("1", True)])
    def test_bool_conversion(self, raw, expected):
        config = EnvConfig(name="MAILCRAFT_FLAG", default=False, var_type=bool)
        assert _coerce(config, raw) is expected

    @pytest.mark.unit
    def test_bool_rejects_unknown(self):
        with pytest.raises(ValueError):
            _coerce(EnvConfig(name="MAILCRAFT_FLAG", default=False, var_type=bool), "maybe")

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("MAILCRAFT_LOG_LEVEL", "DEBUG")
        result = get_environment(EnvVar.LOG_LEVEL)
        assert result == "DEBUG"

    @pytest.mark.unit
    def test_none_default_for_url(self, monkeypatch):
        """Compiler URL defaults to None when not set."""
        monkeypatch.delenv("MAILCRAFT_COMPILER_URL", raising=False)
        assert get_environment(EnvVar.COMPILER_URL) is None


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.HISTORY_LIMIT)
        assert isinstance(info, EnvConfig)
        assert info.name == "MAILCRAFT_HISTORY_LIMIT"
        assert info.default == 50
        assert info.var_type is int
        assert info.category == "editor"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.COMPILER_URL)
        assert "compiler" in info.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        editor_vars = list_environment_variables("editor")
        assert EnvVar.HISTORY_LIMIT in editor_vars
        assert EnvVar.PREVIEW_DEBOUNCE_MS in editor_vars
        assert EnvVar.COMPILER_URL not in editor_vars

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        assert list_environment_variables("llm") == []


# =============================================================================
# Tests for convenience functions
# =============================================================================


class TestGetCompilerUrl:
    """Tests for compiler URL resolution."""

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("MAILCRAFT_COMPILER_URL", "http://other:8000")
        result = get_compiler_url(override="http://custom:9000/")
        assert result == "http://custom:9000"

    @pytest.mark.unit
    def test_env_var_used(self, monkeypatch):
        """MAILCRAFT_COMPILER_URL env var used when set."""
        monkeypatch.setenv("MAILCRAFT_COMPILER_URL", "http://compiler.example.com")
        assert get_compiler_url() == "http://compiler.example.com"

    @pytest.mark.unit
    def test_computed_from_port(self, monkeypatch):
        """URL computed from port when URL not set."""
        monkeypatch.delenv("MAILCRAFT_COMPILER_URL", raising=False)
        monkeypatch.setenv("MAILCRAFT_COMPILER_PORT", "19000")
        assert get_compiler_url() == "http://localhost:19000"

    @pytest.mark.unit
    def test_default_url(self, monkeypatch):
        """Default URL uses default port."""
        monkeypatch.delenv("MAILCRAFT_COMPILER_URL", raising=False)
        monkeypatch.delenv("MAILCRAFT_COMPILER_PORT", raising=False)
        assert get_compiler_url() == "http://localhost:13030"


class TestDebounceWindows:
    """Tests for millisecond to second conversion."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MAILCRAFT_PREVIEW_DEBOUNCE_MS", raising=False)
        monkeypatch.delenv("MAILCRAFT_HISTORY_DEBOUNCE_MS", raising=False)
        assert get_preview_debounce() == 0.5
        assert get_history_debounce() == 0.8

    @pytest.mark.unit
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MAILCRAFT_HISTORY_DEBOUNCE_MS", "250")
        assert get_history_debounce() == 0.25
