"""Root pytest configuration.

This module provides:
- Environment setup (loads .env)
- Auto-skip of compiler tests when the service is not reachable
"""

from __future__ import annotations

import httpx
import pytest
from dotenv import load_dotenv

from mailcraft.config import get_compiler_url

# Load environment variables from .env file
load_dotenv()

COMPILER_URL = get_compiler_url()


def _is_compiler_healthy(url: str = COMPILER_URL, timeout: float = 2.0) -> bool:
    """Check if the compiler service is responding."""
    try:
        response = httpx.get(f"{url}/health", timeout=timeout)
        return response.status_code == 200
    except httpx.HTTPError:
        return False


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Skip tests marked ``compiler`` when the service is unavailable."""
    if not any(item.get_closest_marker("compiler") is not None for item in items):
        return
    if _is_compiler_healthy():
        return

    skip_compiler = pytest.mark.skip(reason="Compiler service not available")
    for item in items:
        if item.get_closest_marker("compiler") is not None:
            item.add_marker(skip_compiler)
