"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_figma_tokens.hosts import DocumentHost


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def document_host(temp_dir: Path) -> DocumentHost:
    """An empty document host that saves into the temp directory."""
    return DocumentHost(temp_dir / "document.yaml")


@pytest.fixture
def color_tokens() -> dict:
    """A small color token set."""
    return {
        "title": "UX-Ops Colors",
        "description": "Hex color codes that can be shared, cross-platform.",
        "items": [
            {"name": "Charcoal Black", "value": "#232323"},
            {"name": "Primary Blue", "value": "#007AFF"},
            {"name": "Success Green", "value": "#34C759"},
        ],
    }
