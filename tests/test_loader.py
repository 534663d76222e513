"""
Tests for the token set loader.

Tests cover:
- Built-in library discovery
- Project overrides
- YAML and JSON files
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_figma_tokens.models import TokenSet, TokenSetError
from chuk_mcp_figma_tokens.tokens import TokenSetLoader


@pytest.fixture
def library_path() -> Path:
    """Path to the token set library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_figma_tokens" / "tokens" / "library"


class TestLibrary:
    """Tests for the built-in library."""

    def test_default_library_path(self) -> None:
        loader = TokenSetLoader()
        assert loader.library_path.name == "library"
        assert loader.library_path.exists()

    def test_list_library(self, library_path: Path) -> None:
        loader = TokenSetLoader(library_path=library_path)
        names = [m.name for m in loader.list_token_sets()]
        assert "ux-ops-colors" in names
        assert "ux-ops-foundations" in names

    def test_get_colors(self, library_path: Path) -> None:
        loader = TokenSetLoader(library_path=library_path)
        token_set = loader.get_token_set("ux-ops-colors")

        assert token_set is not None
        assert token_set.title == "UX-Ops Colors"
        assert {"name": "Primary Blue", "value": "#007AFF"} in token_set.items
        assert len(token_set.items) == 5

    def test_foundations_have_native_values(self, library_path: Path) -> None:
        loader = TokenSetLoader(library_path=library_path)
        token_set = loader.get_token_set("ux-ops-foundations")
        values = {item["name"]: item["value"] for item in token_set.items}

        assert values["Spacing Small"] == 8
        assert values["Dark Mode Enabled"] is True
        assert values["Font Family"] == "Inter"

    def test_missing(self, library_path: Path) -> None:
        loader = TokenSetLoader(library_path=library_path)
        assert loader.get_token_set("nope") is None


class TestProject:
    """Tests for project token sets."""

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path) -> None:
        (temp_dir / "ux-ops-colors.yaml").write_text(
            "title: Custom Colors\nitems:\n  - name: Only\n    value: '#000'\n"
        )
        loader = TokenSetLoader(library_path=library_path, project_path=temp_dir)

        token_set = loader.get_token_set("ux-ops-colors")
        assert token_set.title == "Custom Colors"

        listed = {m.name: m for m in loader.list_token_sets()}
        assert listed["ux-ops-colors"].item_count == 1

    def test_json_file(self, library_path: Path, temp_dir: Path) -> None:
        (temp_dir / "spacing.json").write_text(
            json.dumps({"title": "Spacing", "items": [{"name": "Gap", "value": 4}]})
        )
        loader = TokenSetLoader(library_path=library_path, project_path=temp_dir)

        token_set = loader.get_token_set("spacing")
        assert token_set.items == [{"name": "Gap", "value": 4}]

    def test_unreadable_files_skipped(self, library_path: Path, temp_dir: Path) -> None:
        (temp_dir / "broken.yaml").write_text("title: Broken\n")
        loader = TokenSetLoader(library_path=library_path, project_path=temp_dir)

        names = [m.name for m in loader.list_token_sets()]
        assert "broken" not in names
        assert loader.get_token_set("broken") is None

    def test_save_token_set(self, temp_dir: Path) -> None:
        loader = TokenSetLoader(project_path=temp_dir)
        token_set = TokenSet(title="Saved", items=[{"name": "Gap", "value": 4}])

        path = loader.save_token_set("saved", token_set)
        assert path.exists()
        assert loader.get_token_set("saved") == token_set

    def test_save_without_project(self) -> None:
        with pytest.raises(ValueError):
            TokenSetLoader().save_token_set("x", TokenSet(items=[]))


class TestLoadFile:
    """Tests for load_file."""

    def test_invalid_shape(self, temp_dir: Path) -> None:
        path = temp_dir / "bad.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(TokenSetError):
            TokenSetLoader().load_file(path)

    def test_unsupported_suffix(self, temp_dir: Path) -> None:
        path = temp_dir / "tokens.txt"
        path.write_text("")
        with pytest.raises(ValueError, match="Unsupported"):
            TokenSetLoader().load_file(path)
