"""Undo/redo history for template sources.

Example usage:
    >>> from mailcraft.history import EditHistory, DebouncedRecorder
    >>> history = EditHistory(limit=50)
    >>> recorder = DebouncedRecorder(history, window=0.8)
    >>> recorder.record(source)
    >>> recorder.poll()
"""

from .lib import DEFAULT_LIMIT, DEFAULT_WINDOW, DebouncedRecorder, EditHistory

__all__ = [
    # History
    "DEFAULT_LIMIT",
    "EditHistory",
    # Debouncing
    "DEFAULT_WINDOW",
    "DebouncedRecorder",
]
