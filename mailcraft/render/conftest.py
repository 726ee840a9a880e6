"""Render module test fixtures."""

from __future__ import annotations

import json

import httpx
import pytest

from mailcraft.render import CompilerClient


def echo_handler(request: httpx.Request) -> httpx.Response:
    """Compiler stand-in that wraps the markup in a document."""
    if request.url.path == "/health":
        return httpx.Response(200, json={"status": "ok"})
    body = json.loads(request.content)
    return httpx.Response(200, json={"html": f"<html>{body['markup']}</html>"})


@pytest.fixture
def sample_markup() -> str:
    """Minimal template source.

    Returns:
        A template with one spacer component.
    """
    return '<x-base>\n  <x-core.spacer size="24px" />\n</x-base>\n'


@pytest.fixture
def mock_client() -> CompilerClient:
    """CompilerClient whose sync and async transports echo the markup back."""
    transport = httpx.MockTransport(echo_handler)
    return CompilerClient(base_url="http://compiler.test", transport=transport, async_transport=transport)
