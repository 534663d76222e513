"""
Token set loader - discovers and loads token set files.

Token sets can come from:
1. Built-in library (shipped with package)
2. Project token sets (user's project/tokens directory)

Files are YAML (.yaml, .yml) or JSON (.json) with the same shape:
title, description and a flat list of name/value items.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_figma_tokens.models.token import TokenSet

logger = logging.getLogger(__name__)

TOKEN_SET_SUFFIXES = (".yaml", ".yml", ".json")


@dataclass
class TokenSetMetadata:
    """Lightweight metadata for listing token sets."""

    name: str
    title: str
    description: str
    item_count: int
    path: Path


class TokenSetLoader:
    """
    Discovers and loads token set definitions.

    A token set's name is its file stem. Project token sets override
    library token sets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            library_path: Path to built-in token set library
            project_path: Path to project token sets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, TokenSet] = {}

    def list_token_sets(self) -> list[TokenSetMetadata]:
        """
        List all available token sets.

        Returns token sets from both library and project, with project
        token sets taking precedence.
        """
        found: dict[str, TokenSetMetadata] = {}

        for directory in (self.library_path, self.project_path):
            for path in self._iter_files(directory):
                token_set = self._load_quietly(path)
                if token_set:
                    found[path.stem] = TokenSetMetadata(
                        name=path.stem,
                        title=token_set.title,
                        description=token_set.description,
                        item_count=len(token_set.items),
                        path=path,
                    )

        return sorted(found.values(), key=lambda m: m.name)

    def get_token_set(self, name: str) -> TokenSet | None:
        """
        Get a token set by name.

        Project token sets take precedence over library token sets.

        Args:
            name: Token set name (file stem)

        Returns:
            TokenSet if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            path = self._find_file(directory, name)
            if path is None:
                continue
            token_set = self._load_quietly(path)
            if token_set:
                self._cache[name] = token_set
                return token_set

        return None

    def load_file(self, path: Path) -> TokenSet:
        """
        Load a token set from a file.

        Args:
            path: YAML or JSON file

        Returns:
            The parsed TokenSet

        Raises:
            TokenSetError: If the file doesn't hold a token set
            ValueError: If the file type is not supported
        """
        return TokenSet.from_data(self._read(path))

    def save_token_set(self, name: str, token_set: TokenSet) -> Path:
        """
        Save a token set to the project as YAML.

        Args:
            name: Token set name (file stem)
            token_set: Token set to save

        Returns:
            Path to the saved file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{name}.yaml"
        with open(path, "w") as f:
            yaml.safe_dump(token_set.to_dict(), f, default_flow_style=False, sort_keys=False)

        self._cache.pop(name, None)
        return path

    def clear_cache(self) -> None:
        """Clear the token set cache."""
        self._cache.clear()

    def _read(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        if suffix not in TOKEN_SET_SUFFIXES:
            raise ValueError(f"Unsupported token set file type: {path.suffix}")

        with open(path) as f:
            if suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def _load_quietly(self, path: Path) -> TokenSet | None:
        try:
            return self.load_file(path)
        except Exception as e:
            logger.warning(f"Skipping unreadable token set {path}: {e}")
            return None

    @staticmethod
    def _iter_files(directory: Path | None) -> list[Path]:
        if directory is None or not directory.exists():
            return []
        return sorted(p for p in directory.iterdir() if p.suffix.lower() in TOKEN_SET_SUFFIXES)

    @staticmethod
    def _find_file(directory: Path | None, name: str) -> Path | None:
        if directory is None:
            return None
        for suffix in TOKEN_SET_SUFFIXES:
            path = directory / f"{name}{suffix}"
            if path.exists():
                return path
        return None
