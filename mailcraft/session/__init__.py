"""Editor session - source of truth, index-keyed view state and undo.

Example usage:
    >>> from mailcraft.session import EditorSession
    >>> session = EditorSession(source)
    >>> session.delete_component(2)
    >>> markup = session.preview_markup()
"""

from .lib import EditorSession

__all__ = ["EditorSession"]
