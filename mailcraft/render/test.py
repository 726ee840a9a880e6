"""Tests for the compiler client and preview variables.

Unit tests use httpx.MockTransport (no network).
Integration tests require a running compiler service.
"""

import json

import httpx
import pytest

from mailcraft.render import (
    SAMPLE_PREVIEW_VARIABLES,
    CompileError,
    CompileRequest,
    CompileResult,
    CompilerClient,
    build_preview_variables,
    find_missing_preview_variables,
    preview_variable_token,
)

# =============================================================================
# Unit Tests (Mocked)
# =============================================================================


def client_for(handler) -> CompilerClient:
    transport = httpx.MockTransport(handler)
    return CompilerClient(base_url="http://compiler.test/", transport=transport, async_transport=transport)


class TestWireModels:
    """Request and response models."""

    @pytest.mark.unit
    def test_request_uses_camel_case_alias(self):
        request = CompileRequest(markup="<x-base />", preview_variables={"{{a}}": "1"})
        assert request.to_payload() == {"markup": "<x-base />", "previewVariables": {"{{a}}": "1"}}

    @pytest.mark.unit
    def test_request_accepts_alias(self):
        request = CompileRequest.model_validate({"markup": "m", "previewVariables": {"k": "v"}})
        assert request.preview_variables == {"k": "v"}

    @pytest.mark.unit
    def test_result_ok(self):
        assert CompileResult(html="<p>").ok
        assert not CompileResult(error="bad").ok
        assert not CompileResult().ok


class TestCompilerClient:
    """CompilerClient over a mocked transport."""

    @pytest.mark.unit
    def test_base_url_trailing_slash_removed(self):
        client = client_for(lambda r: httpx.Response(200))
        assert client.compile_url == "http://compiler.test/compile"

    @pytest.mark.unit
    def test_compile_success(self, mock_client, sample_markup):
        result = mock_client.compile(sample_markup)
        assert result.ok
        assert result.html == f"<html>{sample_markup}</html>"

    @pytest.mark.unit
    def test_compile_sends_payload(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"html": "<p>ok</p>"})

        client_for(handler).compile("<x-base />", {"{{contact.first_name}}": "Alex"})
        assert seen == {
            "method": "POST",
            "path": "/compile",
            "body": {"markup": "<x-base />", "previewVariables": {"{{contact.first_name}}": "Alex"}},
        }

    @pytest.mark.unit
    def test_service_error_is_returned(self):
        client = client_for(lambda r: httpx.Response(422, json={"error": "Unknown component x-core.nope"}))
        result = client.compile("<x-base />")
        assert result.error == "Unknown component x-core.nope"
        assert result.html is None

    @pytest.mark.unit
    def test_unreadable_body_raises(self):
        client = client_for(lambda r: httpx.Response(502, text="Bad Gateway"))
        with pytest.raises(CompileError) as exc_info:
            client.compile("<x-base />")
        assert exc_info.value.status_code == 502
        assert exc_info.value.response_body == "Bad Gateway"

    @pytest.mark.unit
    def test_missing_html_raises(self):
        client = client_for(lambda r: httpx.Response(200, json={}))
        with pytest.raises(CompileError, match="Compiler returned 200"):
            client.compile("<x-base />")

    @pytest.mark.unit
    def test_connection_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused")

        with pytest.raises(CompileError, match="request failed"):
            client_for(handler).compile("<x-base />")

    @pytest.mark.unit
    def test_is_available(self, mock_client):
        assert mock_client.is_available() is True

    @pytest.mark.unit
    def test_is_available_failure(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused")

        assert client_for(handler).is_available() is False

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_acompile(self, mock_client, sample_markup):
        result = await mock_client.acompile(sample_markup)
        await mock_client.aclose()
        assert result.html == f"<html>{sample_markup}</html>"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_acompile_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out")

        client = client_for(handler)
        with pytest.raises(CompileError, match="timed out"):
            await client.acompile("<x-base />")
        await client.aclose()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_async_context_closes_both_clients(self, mock_client, sample_markup):
        async with mock_client as client:
            await client.acompile(sample_markup)
            async_client = client._async_client
            assert async_client is not None
        assert async_client.is_closed
        assert client._async_client is None
        assert client._client.is_closed


class TestPreviewVariables:
    """Merge-tag tokens."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("contact.first_name", "{{contact.first_name}}"),
            ("  {{location.name}} ", "{{location.name}}"),
            ("{contact.city}", "{{contact.city}}"),
        ],
    )
    def test_token(self, key, expected):
        assert preview_variable_token(key) == expected

    @pytest.mark.unit
    def test_build_overrides_samples(self):
        values = build_preview_variables({"contact.first_name": "Sam", "contact.city": ""})
        assert values["{{contact.first_name}}"] == "Sam"
        assert values["{{contact.city}}"] == SAMPLE_PREVIEW_VARIABLES["{{contact.city}}"]

    @pytest.mark.unit
    def test_find_missing(self):
        markup = (
            "Hi {{contact.first_name}} {{ custom_values.review_link }} "
            "{{ page.title | upper }} {{#if x}}{{/if}} {{custom_values.review_link}}"
        )
        missing = find_missing_preview_variables(markup, build_preview_variables())
        assert missing == ["custom_values.review_link"]


# =============================================================================
# Integration Tests (require a running compiler)
# =============================================================================


@pytest.fixture
def live_client():
    """CompilerClient for integration tests."""
    client = CompilerClient()
    if not client.is_available():
        pytest.skip("Compiler service not available")
    return client


class TestCompilerIntegration:
    """Integration tests against a running compiler service."""

    @pytest.mark.compiler
    @pytest.mark.integration
    def test_compile_starter(self, live_client):
        from mailcraft.document import starter_template

        result = live_client.compile(starter_template(), build_preview_variables())
        assert result.ok, result.error
        assert "<html" in result.html.lower()
