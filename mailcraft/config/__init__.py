"""mailcraft settings read from MAILCRAFT_* environment variables.

Each setting is an `EnvVar` member; read it with `get_environment()`.

Example:
    >>> from mailcraft.config import EnvVar, get_environment
    >>>
    >>> timeout = get_environment(EnvVar.COMPILER_TIMEOUT)  # Returns float: 30.0
    >>> url = get_compiler_url()  # "http://localhost:13030" unless overridden
    >>>
    >>> # List available variables by category
    >>> for var in list_environment_variables("editor"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    service: HTML compiler service URL, port and timeout
    editor: Debounce windows and undo history bound
    logging: CLI log level
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_compiler_url,
    get_environment,
    get_environment_info,
    get_history_debounce,
    get_preview_debounce,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_compiler_url",
    "get_history_debounce",
    "get_preview_debounce",
    # Introspection
    "list_environment_variables",
]
