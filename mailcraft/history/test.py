"""Unit tests for edit history and debounced recording."""

import pytest

from mailcraft.history import DebouncedRecorder, EditHistory


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestEditHistory:
    """Undo/redo stacks."""

    @pytest.mark.unit
    def test_bounded(self):
        history = EditHistory(limit=50)
        for i in range(60):
            history.push(f"v{i}")
        assert len(history) == 50
        assert history.past[0] == "v10"
        assert history.current == "v59"

    @pytest.mark.unit
    def test_undo_redo_symmetry(self):
        history = EditHistory()
        for value in ("a", "b", "c"):
            history.push(value)
        assert history.undo() == "b"
        assert history.undo() == "a"
        assert history.undo() is None
        assert history.redo() == "b"
        assert history.redo() == "c"
        assert history.redo() is None
        assert history.current == "c"

    @pytest.mark.unit
    def test_duplicate_push_is_noop(self):
        history = EditHistory()
        assert history.push("a")
        assert not history.push("a")
        assert len(history) == 1

    @pytest.mark.unit
    def test_push_after_undo_clears_future(self):
        history = EditHistory()
        history.push("a")
        history.push("b")
        history.undo()
        assert history.can_redo
        history.push("c")
        assert not history.can_redo
        assert list(history.past) == ["a", "c"]

    @pytest.mark.unit
    def test_flags(self):
        history = EditHistory()
        assert not history.can_undo
        assert history.current is None
        history.push("a")
        assert not history.can_undo
        history.push("b")
        assert history.can_undo

    @pytest.mark.unit
    def test_clear(self):
        history = EditHistory()
        history.push("a")
        history.push("b")
        history.undo()
        history.clear()
        assert history.current is None
        assert not history.can_redo

    @pytest.mark.unit
    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            EditHistory(limit=0)


class TestDebouncedRecorder:
    """Quiet-window coalescing."""

    @pytest.mark.unit
    def test_burst_becomes_one_snapshot(self):
        clock = FakeClock()
        history = EditHistory()
        recorder = DebouncedRecorder(history, window=0.8, clock=clock)
        for value in ("a", "ab", "abc"):
            recorder.record(value)
            clock.advance(0.3)
            assert not recorder.poll()
        clock.advance(0.6)
        assert recorder.poll()
        assert list(history.past) == ["abc"]
        assert recorder.pending is None

    @pytest.mark.unit
    def test_flush_pushes_immediately(self):
        history = EditHistory()
        recorder = DebouncedRecorder(history, clock=FakeClock())
        recorder.record("x")
        assert recorder.flush()
        assert history.current == "x"
        assert not recorder.flush()

    @pytest.mark.unit
    def test_cancel(self):
        clock = FakeClock()
        history = EditHistory()
        recorder = DebouncedRecorder(history, window=0.1, clock=clock)
        recorder.record("x")
        recorder.cancel()
        clock.advance(1)
        assert not recorder.poll()
        assert history.current is None
