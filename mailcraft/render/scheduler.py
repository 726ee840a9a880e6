"""Debounced, last-request-wins preview compilation.

Every request gets a monotonically increasing token. A request arriving
during the debounce window replaces the pending one. Compiles already in
flight keep running, but a result whose token is no longer the latest is
discarded when it arrives, so the preview never shows a stale state.
"""

import asyncio
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from ..document import ParsedTemplate
from ..preview import project_for_preview, recover_indices
from .lib import CompileError, CompilerClient

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE = 0.5


@dataclass(frozen=True)
class PreviewResult:
    """Outcome of one preview compile.

    Attributes:
        token: Request token the result belongs to.
        html: Compiled HTML with component indices recovered.
        error: Compiler or transport error text.
    """

    token: int
    html: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.html is not None


class PreviewScheduler:
    """Schedule preview compiles for the latest document state.

    Example:
        >>> scheduler = PreviewScheduler(CompilerClient(), debounce=0.5)
        >>> scheduler.request(doc)
        >>> result = await scheduler.wait()

    Args:
        client: Compiler client used for ``acompile``.
        debounce: Quiet period in seconds before a compile is issued.
        on_result: Called (or awaited) with each non-stale PreviewResult.
    """

    def __init__(
        self,
        client: CompilerClient,
        debounce: float = DEFAULT_DEBOUNCE,
        on_result: Callable[[PreviewResult], object] | None = None,
    ):
        self.client = client
        self.debounce = debounce
        self.on_result = on_result
        self.latest: PreviewResult | None = None
        self.discarded = 0
        self._token = 0
        self._pending: asyncio.Task | None = None
        self._inflight: set[asyncio.Task] = set()

    @property
    def token(self) -> int:
        """Token of the most recent request."""
        return self._token

    @property
    def busy(self) -> bool:
        pending = self._pending is not None and not self._pending.done()
        return pending or bool(self._inflight)

    def request(
        self,
        source: ParsedTemplate | str,
        preview_variables: Mapping[str, str] | None = None,
        hidden: set[int] | frozenset[int] = frozenset(),
    ) -> int:
        """Schedule a compile, replacing any request still in its debounce window.

        Must be called from a running event loop.

        Args:
            source: Document to project, or already-projected markup.
            preview_variables: Merge-tag values for the compiler.
            hidden: Component indices left out of a document projection.

        Returns:
            The request token.
        """
        markup = project_for_preview(source, hidden) if isinstance(source, ParsedTemplate) else source
        self._token += 1
        token = self._token
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = asyncio.get_running_loop().create_task(
            self._debounced(token, markup, dict(preview_variables or {}))
        )
        return token

    async def _debounced(self, token: int, markup: str, variables: dict[str, str]) -> None:
        await asyncio.sleep(self.debounce)
        task = asyncio.get_running_loop().create_task(self._compile(token, markup, variables))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _compile(self, token: int, markup: str, variables: dict[str, str]) -> PreviewResult | None:
        try:
            compiled = await self.client.acompile(markup, variables)
        except CompileError as e:
            logger.warning(f"Preview compile {token} failed: {e}")
            result = PreviewResult(token=token, error=str(e))
        else:
            if compiled.error is not None:
                result = PreviewResult(token=token, error=compiled.error)
            else:
                result = PreviewResult(token=token, html=recover_indices(compiled.html or ""))

        if token != self._token:
            self.discarded += 1
            logger.debug(f"Discarded stale preview {token} (latest is {self._token})")
            return None

        self.latest = result
        if self.on_result is not None:
            outcome = self.on_result(result)
            if inspect.isawaitable(outcome):
                await outcome
        return result

    async def wait(self) -> PreviewResult | None:
        """Wait until no request is pending or in flight.

        Returns:
            The latest accepted result.
        """
        while self.busy:
            tasks = list(self._inflight)
            if self._pending is not None and not self._pending.done():
                tasks.append(self._pending)
            await asyncio.gather(*tasks, return_exceptions=True)
        return self.latest

    async def aclose(self) -> None:
        """Cancel pending and in-flight work."""
        tasks = list(self._inflight)
        if self._pending is not None:
            tasks.append(self._pending)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._pending = None
        self._inflight.clear()


__all__ = ["DEFAULT_DEBOUNCE", "PreviewResult", "PreviewScheduler"]
