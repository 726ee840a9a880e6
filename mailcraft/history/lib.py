"""Bounded undo/redo history of source snapshots.

Snapshots are whole template sources. Keeping text instead of parsed
documents lets raw code edits and visual edits share one history, and a
snapshot is restored by parsing it again.
"""

import logging
import time
from collections import deque
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
DEFAULT_WINDOW = 0.8


class EditHistory:
    """Linear undo/redo stacks.

    ``past`` ends with the current snapshot. Undo moves the current snapshot
    to ``future`` and returns the new top of ``past``; redo is the mirror.

    Example:
        >>> history = EditHistory()
        >>> history.push("a")
        >>> history.push("b")
        >>> history.undo()
        'a'
        >>> history.redo()
        'b'
    """

    def __init__(self, limit: int = DEFAULT_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self.past: deque[str] = deque(maxlen=limit)
        self.future: list[str] = []

    def __len__(self) -> int:
        return len(self.past)

    def __repr__(self) -> str:
        return f"EditHistory(past={len(self.past)}, future={len(self.future)}, limit={self.limit})"

    @property
    def current(self) -> str | None:
        return self.past[-1] if self.past else None

    @property
    def can_undo(self) -> bool:
        return len(self.past) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def push(self, snapshot: str) -> bool:
        """Record a snapshot.

        Pushing the value already on top is a no-op. Any other push clears
        the redo stack and drops the oldest snapshot beyond ``limit``.

        Returns:
            True if the snapshot was recorded.
        """
        if self.past and self.past[-1] == snapshot:
            return False
        self.past.append(snapshot)
        self.future.clear()
        return True

    def undo(self) -> str | None:
        """Step back one snapshot.

        Returns:
            The snapshot to restore, or None when there is nothing to undo.
        """
        if not self.can_undo:
            return None
        self.future.append(self.past.pop())
        return self.past[-1]

    def redo(self) -> str | None:
        """Step forward one snapshot.

        Returns:
            The snapshot to restore, or None when there is nothing to redo.
        """
        if not self.future:
            return None
        snapshot = self.future.pop()
        self.past.append(snapshot)
        return snapshot

    def clear(self) -> None:
        self.past.clear()
        self.future.clear()


class DebouncedRecorder:
    """Coalesce bursts of edits into one history snapshot.

    Each ``record()`` restarts the quiet window. The pending snapshot is
    pushed by ``poll()`` once ``window`` seconds passed without a new
    record, or immediately by ``flush()``.

    Args:
        history: History receiving the snapshots.
        window: Quiet period in seconds.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        history: EditHistory,
        window: float = DEFAULT_WINDOW,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.history = history
        self.window = window
        self.clock = clock
        self._pending: str | None = None
        self._deadline: float | None = None

    @property
    def pending(self) -> str | None:
        return self._pending

    def record(self, snapshot: str) -> None:
        self._pending = snapshot
        self._deadline = self.clock() + self.window

    def poll(self) -> bool:
        """Push the pending snapshot if its quiet window elapsed.

        Returns:
            True if a snapshot was pushed.
        """
        if self._pending is None or self._deadline is None:
            return False
        if self.clock() < self._deadline:
            return False
        return self.flush()

    def flush(self) -> bool:
        """Push the pending snapshot now, regardless of the window."""
        if self._pending is None:
            return False
        snapshot, self._pending, self._deadline = self._pending, None, None
        pushed = self.history.push(snapshot)
        if pushed:
            logger.debug(f"History snapshot recorded ({len(self.history)} kept)")
        return pushed

    def cancel(self) -> None:
        """Drop the pending snapshot without recording it."""
        self._pending = None
        self._deadline = None


__all__ = ["DEFAULT_LIMIT", "DEFAULT_WINDOW", "DebouncedRecorder", "EditHistory"]
