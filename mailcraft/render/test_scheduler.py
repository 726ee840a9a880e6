"""Tests for debounced preview scheduling."""

import asyncio

import pytest

from mailcraft.document import ParsedComponent, ParsedTemplate
from mailcraft.preview import marker_element, tagged_indices
from mailcraft.render import CompileError, CompileResult, PreviewResult, PreviewScheduler


class FakeCompiler:
    """Async compiler double with per-markup latency."""

    def __init__(self, delays: dict[str, float] | None = None, fail: bool = False):
        self.delays = delays or {}
        self.fail = fail
        self.calls: list[str] = []

    async def acompile(self, markup, preview_variables=None):
        self.calls.append(markup)
        await asyncio.sleep(self.delays.get(markup, 0))
        if self.fail:
            raise CompileError("Compiler request failed: refused")
        return CompileResult(html=f"<p>{markup}</p>")


class TestPreviewScheduler:
    """Debouncing and stale-result handling."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_burst_compiles_once(self):
        compiler = FakeCompiler()
        scheduler = PreviewScheduler(compiler, debounce=0.02)
        for markup in ("a", "ab", "abc"):
            scheduler.request(markup)
        result = await scheduler.wait()
        assert compiler.calls == ["abc"]
        assert result == PreviewResult(token=3, html="<p>abc</p>")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_stale_result_discarded(self):
        compiler = FakeCompiler(delays={"slow": 0.1})
        results: list[PreviewResult] = []
        scheduler = PreviewScheduler(compiler, debounce=0, on_result=results.append)
        scheduler.request("slow")
        await asyncio.sleep(0.02)
        scheduler.request("fast")
        await scheduler.wait()
        assert compiler.calls == ["slow", "fast"]
        assert [r.html for r in results] == ["<p>fast</p>"]
        assert scheduler.discarded == 1
        assert scheduler.latest.token == 2

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failure_becomes_error_result(self):
        scheduler = PreviewScheduler(FakeCompiler(fail=True), debounce=0)
        scheduler.request("x")
        result = await scheduler.wait()
        assert not result.ok
        assert "refused" in result.error

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_async_callback_awaited(self):
        seen = []

        async def on_result(result):
            await asyncio.sleep(0)
            seen.append(result.token)

        scheduler = PreviewScheduler(FakeCompiler(), debounce=0, on_result=on_result)
        scheduler.request("x")
        await scheduler.wait()
        assert seen == [1]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_aclose_cancels_pending(self):
        compiler = FakeCompiler()
        scheduler = PreviewScheduler(compiler, debounce=10)
        scheduler.request("x")
        await scheduler.aclose()
        assert compiler.calls == []
        assert not scheduler.busy

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_document_is_projected(self):
        compiler = FakeCompiler()
        doc = ParsedTemplate(components=(ParsedComponent("header"), ParsedComponent("spacer")))
        scheduler = PreviewScheduler(compiler, debounce=0)
        scheduler.request(doc, hidden={0})
        await scheduler.wait()
        assert marker_element(1) in compiler.calls[0]
        assert "x-core.header" not in compiler.calls[0]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_indices_recovered(self):
        markup = marker_element(0) + "<table><tr><td>x</td></tr></table>" + marker_element("end")

        class PassThrough(FakeCompiler):
            async def acompile(self, markup, preview_variables=None):
                return CompileResult(html=markup)

        scheduler = PreviewScheduler(PassThrough(), debounce=0)
        scheduler.request(markup)
        result = await scheduler.wait()
        assert tagged_indices(result.html) == {0}
