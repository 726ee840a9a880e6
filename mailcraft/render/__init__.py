"""HTML compiler client and preview scheduling.

Example usage:
    >>> from mailcraft.render import CompilerClient, build_preview_variables
    >>> client = CompilerClient()
    >>> result = client.compile(markup, build_preview_variables())
    >>> print(result.html or result.error)
"""

from .lib import CompileError, CompileRequest, CompileResult, CompilerClient
from .scheduler import DEFAULT_DEBOUNCE, PreviewResult, PreviewScheduler
from .variables import (
    SAMPLE_PREVIEW_VARIABLES,
    build_preview_variables,
    find_missing_preview_variables,
    preview_variable_token,
)

__all__ = [
    # Client
    "CompileError",
    "CompileRequest",
    "CompileResult",
    "CompilerClient",
    # Scheduling
    "DEFAULT_DEBOUNCE",
    "PreviewResult",
    "PreviewScheduler",
    # Preview variables
    "SAMPLE_PREVIEW_VARIABLES",
    "build_preview_variables",
    "find_missing_preview_variables",
    "preview_variable_token",
]
