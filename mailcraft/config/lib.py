"""Environment configuration for mailcraft.

Every setting is an `EnvVar` member carrying its variable name, default,
type and category. `get_environment()` reads one setting, applying an
explicit override first, then the process environment, then the default.
Malformed values raise instead of silently falling back.

Example:
    >>> from mailcraft.config import EnvVar, get_environment
    >>> get_environment(EnvVar.COMPILER_PORT)
    13030
    >>> get_environment(EnvVar.COMPILER_PORT, override=9000)
    9000
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from collections.abc import Callable
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "MAILCRAFT_COMPILER_PORT").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, float, bool, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by mailcraft.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - service: HTML compiler service location and timeouts
        - editor: Debounce windows and history bounds
        - logging: Log verbosity
    """

    # -------------------------------------------------------------------------
    # Compiler Service
    # -------------------------------------------------------------------------
    COMPILER_URL = EnvConfig(
        name="MAILCRAFT_COMPILER_URL",
        default=None,  # Computed from COMPILER_PORT if not set
        var_type=str,
        description="HTML compiler service URL",
        category="service",
    )
    COMPILER_PORT = EnvConfig(
        name="MAILCRAFT_COMPILER_PORT",
        default=13030,
        var_type=int,
        description="HTML compiler service port on localhost",
        category="service",
    )
    COMPILER_TIMEOUT = EnvConfig(
        name="MAILCRAFT_COMPILER_TIMEOUT",
        default=30.0,
        var_type=float,
        description="Compile request timeout in seconds",
        category="service",
    )

    # -------------------------------------------------------------------------
    # Editor Behaviour
    # -------------------------------------------------------------------------
    PREVIEW_DEBOUNCE_MS = EnvConfig(
        name="MAILCRAFT_PREVIEW_DEBOUNCE_MS",
        default=500,
        var_type=int,
        description="Quiet period before a preview compile is issued",
        category="editor",
    )
    HISTORY_DEBOUNCE_MS = EnvConfig(
        name="MAILCRAFT_HISTORY_DEBOUNCE_MS",
        default=800,
        var_type=int,
        description="Quiet period before an edit becomes an undo snapshot",
        category="editor",
    )
    HISTORY_LIMIT = EnvConfig(
        name="MAILCRAFT_HISTORY_LIMIT",
        default=50,
        var_type=int,
        description="Maximum number of undo snapshots kept",
        category="editor",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="MAILCRAFT_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )


# =============================================================================
# Type Conversion
# =============================================================================

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _to_bool(raw: str) -> bool:
    token = raw.strip().lower()
    if token in _TRUTHY:
        return True
    if token in _FALSY:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


_CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: lambda raw: int(raw.strip()),
    float: lambda raw: float(raw.strip()),
    bool: _to_bool,
    Path: Path,
}


def _coerce(config: EnvConfig, raw: str) -> Any:
    """Convert a raw environment string to the variable's declared type.

    Raises:
        ValueError: If the string is not a valid value of that type. The
            message names the variable so a bad ``.env`` entry is easy to find.
    """
    convert = _CONVERTERS.get(config.var_type, str)
    try:
        return convert(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {config.name} ({config.var_type.__name__}): {raw!r}") from e


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: float) -> float: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Resolve a configuration value.

    An explicit ``override`` wins. Otherwise a non-blank environment value is
    converted to the declared type, and an unset or blank variable yields
    the declared default.

    Example:
        >>> get_environment(EnvVar.HISTORY_LIMIT)
        50
        >>> get_environment(EnvVar.HISTORY_LIMIT, override=10)
        10

    Raises:
        ValueError: If the environment holds a value of the wrong type.
    """
    if override is not None:
        return override

    config: EnvConfig = env_var.value
    raw = os.environ.get(config.name, "")
    if not raw.strip():
        return config.default
    return _coerce(config, raw)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Metadata (name, default, type, description) of a variable."""
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_compiler_url(override: str | None = None) -> str:
    """Get HTML compiler service URL.

    Resolution: override > MAILCRAFT_COMPILER_URL > http://localhost:{PORT}
    """
    if override:
        return override.rstrip("/")

    url = get_environment(EnvVar.COMPILER_URL)
    if url:
        return url.rstrip("/")

    port = get_environment(EnvVar.COMPILER_PORT)
    return f"http://localhost:{port}"


def get_preview_debounce() -> float:
    """Preview debounce window in seconds."""
    return get_environment(EnvVar.PREVIEW_DEBOUNCE_MS) / 1000.0


def get_history_debounce() -> float:
    """History debounce window in seconds."""
    return get_environment(EnvVar.HISTORY_DEBOUNCE_MS) / 1000.0


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """Variables in declaration order, limited to ``category`` when given."""
    return [var for var in EnvVar if category is None or var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_compiler_url",
    "get_preview_debounce",
    "get_history_debounce",
    # Introspection
    "list_environment_variables",
]
