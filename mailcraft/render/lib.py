"""HTML compiler service client.

The compiler is an opaque HTTP service: template markup in, email HTML out,
or an error message. Transport problems raise CompileError; errors the
service reports about the markup come back in CompileResult.error.
"""

import logging
from collections.abc import Mapping

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import EnvVar, get_compiler_url, get_environment

logger = logging.getLogger(__name__)


# =============================================================================
# Wire Models
# =============================================================================


class CompileRequest(BaseModel):
    """Body of a compile request."""

    model_config = ConfigDict(populate_by_name=True)

    markup: str = Field(description="Template source, usually a preview projection")
    preview_variables: dict[str, str] = Field(
        default_factory=dict,
        alias="previewVariables",
        description="Merge-tag tokens and their sample values",
    )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class CompileResult(BaseModel):
    """Body of a compile response: either ``html`` or ``error``."""

    html: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.html is not None


class CompileError(Exception):
    """Compiler service could not be reached or answered unexpectedly."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


# =============================================================================
# Client
# =============================================================================


class CompilerClient:
    """HTTP client for the HTML compiler service.

    Example:
        >>> client = CompilerClient()
        >>> if client.is_available():
        ...     result = client.compile("<x-base><x-core.spacer /></x-base>")
        ...     print(result.html or result.error)

    The async client behind acompile() is created on first use and needs an
    event loop to close, so close it with aclose() or use the client as an
    ``async with`` context manager. The sync context manager and __del__
    only close the sync client.

    Attributes:
        base_url: Compiler service URL.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize compiler client.

        Args:
            base_url: Service URL. Defaults to MAILCRAFT_COMPILER_URL, or
                localhost on MAILCRAFT_COMPILER_PORT.
            timeout: Request timeout. Defaults to MAILCRAFT_COMPILER_TIMEOUT.
            transport: Optional httpx transport for the sync client.
            async_transport: Optional httpx transport for the async client.
        """
        self.base_url = get_compiler_url(base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else get_environment(EnvVar.COMPILER_TIMEOUT)
        self._client = httpx.Client(timeout=self.timeout, transport=transport)
        self._async_transport = async_transport
        self._async_client: httpx.AsyncClient | None = None

    def __del__(self) -> None:
        """Clean up HTTP client."""
        if hasattr(self, "_client"):
            self._client.close()
        if getattr(self, "_async_client", None) is not None:
            logger.warning("CompilerClient dropped with an open async client; call aclose()")

    def __enter__(self) -> "CompilerClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    async def __aenter__(self) -> "CompilerClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
        self.close()

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None

    @property
    def compile_url(self) -> str:
        return f"{self.base_url}/compile"

    def is_available(self) -> bool:
        """Check if the compiler service is reachable.

        Returns:
            True if service responds, False otherwise.
        """
        try:
            response = self._client.get(f"{self.base_url}/health", timeout=5.0)
            return response.status_code == 200
        except (httpx.RequestError, httpx.TimeoutException):
            return False

    def compile(self, markup: str, preview_variables: Mapping[str, str] | None = None) -> CompileResult:
        """Compile markup to HTML.

        Args:
            markup: Template source.
            preview_variables: Merge-tag values for the preview.

        Returns:
            CompileResult with ``html`` on success or ``error`` when the
            service rejected the markup.

        Raises:
            CompileError: If the request fails or the response is malformed.
        """
        payload = CompileRequest(markup=markup, preview_variables=dict(preview_variables or {}))
        try:
            response = self._client.post(self.compile_url, json=payload.to_payload())
        except httpx.TimeoutException as e:
            raise CompileError(f"Compiler request timed out: {e}") from e
        except httpx.RequestError as e:
            raise CompileError(f"Compiler request failed: {e}") from e
        return self._read_response(response)

    async def acompile(self, markup: str, preview_variables: Mapping[str, str] | None = None) -> CompileResult:
        """Async variant of compile()."""
        payload = CompileRequest(markup=markup, preview_variables=dict(preview_variables or {}))
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(timeout=self.timeout, transport=self._async_transport)
        try:
            response = await self._async_client.post(self.compile_url, json=payload.to_payload())
        except httpx.TimeoutException as e:
            raise CompileError(f"Compiler request timed out: {e}") from e
        except httpx.RequestError as e:
            raise CompileError(f"Compiler request failed: {e}") from e
        return self._read_response(response)

    def _read_response(self, response: httpx.Response) -> CompileResult:
        """Turn a compile response into a CompileResult.

        An error status with an ``{"error": ...}`` body is a service-reported
        compile error, not a transport failure.
        """
        try:
            result = CompileResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise CompileError(
                f"Compiler returned {response.status_code} with an unreadable body",
                status_code=response.status_code,
                response_body=response.text[:500],
            ) from e

        if result.error is not None:
            logger.warning(f"Compile failed: {result.error}")
            return result
        if response.status_code != 200 or result.html is None:
            raise CompileError(
                f"Compiler returned {response.status_code}",
                status_code=response.status_code,
                response_body=response.text[:500],
            )
        return result


__all__ = [
    "CompileError",
    "CompileRequest",
    "CompileResult",
    "CompilerClient",
]
