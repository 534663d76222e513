"""
Document host - a local variable registry persisted as YAML.

Behaves like the design tool's own registry: collections are created
with one default mode, variable names are unique per collection, and
values must match a variable's resolved type. Useful for dry runs,
for keeping tokens under version control, and for tests.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_figma_tokens.constants import DEFAULT_MODE_NAME, VariableType
from chuk_mcp_figma_tokens.hosts.base import HostError, VariableHost
from chuk_mcp_figma_tokens.models.color import RGB
from chuk_mcp_figma_tokens.models.variable import (
    Mode,
    Variable,
    VariableCollection,
    VariableValue,
)

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "variables-document/v1"
_ID_NUMBER = re.compile(r"\d+")


def _matches_type(value: Any, resolved_type: VariableType) -> bool:
    """Check a value against a variable type (bool is not a number here)."""
    if resolved_type == VariableType.COLOR:
        return isinstance(value, RGB)
    if resolved_type == VariableType.BOOLEAN:
        return isinstance(value, bool)
    if resolved_type == VariableType.FLOAT:
        return isinstance(value, int | float) and not isinstance(value, bool)
    return isinstance(value, str)


class DocumentHost(VariableHost):
    """
    Variable host backed by an in-memory document.

    Changes stay in memory until save() is called.
    """

    name = "document"

    def __init__(self, path: Path | None = None):
        """
        Initialize the host.

        Args:
            path: YAML file to load from and save to (optional)
        """
        self.path = path
        self.notifications: list[tuple[str, bool]] = []
        self._collections: dict[str, VariableCollection] = {}
        self._variables: dict[str, Variable] = {}
        self._next_id = 1

    # Persistence

    def load(self, path: Path | None = None) -> DocumentHost:
        """
        Load the document from YAML, replacing the in-memory state.

        A missing file leaves the document empty.

        Args:
            path: File to read (defaults to the host's path)

        Returns:
            self, for chaining
        """
        path = path or self.path
        if path is None or not path.exists():
            return self

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        self._collections = {}
        self._variables = {}
        for cdata in data.get("collections", []):
            collection = VariableCollection.from_yaml_dict(cdata)
            self._collections[collection.id] = collection
        for vdata in data.get("variables", []):
            variable = Variable.from_yaml_dict(vdata)
            self._variables[variable.id] = variable
        self._next_id = data.get("next_id") or self._highest_id() + 1

        logger.debug(f"Loaded {len(self._variables)} variables from {path}")
        return self

    def save(self, path: Path | None = None) -> Path:
        """
        Save the document as YAML.

        Args:
            path: File to write (defaults to the host's path)

        Returns:
            Path to the saved file
        """
        path = path or self.path
        if path is None:
            raise ValueError("No document path configured")

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)

        self.path = path
        return path

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert the whole document to a YAML-friendly dict."""
        return {
            "schema": SCHEMA_VERSION,
            "next_id": self._next_id,
            "collections": [c.to_yaml_dict() for c in self._collections.values()],
            "variables": [v.to_yaml_dict() for v in self._variables.values()],
        }

    # VariableHost

    async def get_local_collections(self) -> list[VariableCollection]:
        return list(self._collections.values())

    async def create_collection(self, name: str) -> VariableCollection:
        collection = VariableCollection(
            id=f"VariableCollectionId:{self._allocate_id()}",
            name=name,
            modes=[Mode(mode_id=f"{self._allocate_id()}:0", name=DEFAULT_MODE_NAME)],
        )
        self._collections[collection.id] = collection
        return collection

    async def set_collection_description(
        self, collection: VariableCollection, description: str
    ) -> None:
        self._get_collection(collection.id).description = description

    async def get_collection_variables(self, collection: VariableCollection) -> list[Variable]:
        stored = self._get_collection(collection.id)
        return [self._variables[vid] for vid in stored.variable_ids if vid in self._variables]

    async def create_variable(
        self,
        name: str,
        collection: VariableCollection,
        resolved_type: VariableType,
    ) -> Variable:
        stored = self._get_collection(collection.id)
        if not name.strip():
            raise HostError("Variable name cannot be empty")
        if await self.find_variable(stored, name) is not None:
            raise HostError(f"Variable '{name}' already exists in collection '{stored.name}'")

        variable = Variable(
            id=f"VariableID:{self._allocate_id()}",
            name=name,
            collection_id=stored.id,
            resolved_type=resolved_type,
        )
        self._variables[variable.id] = variable
        stored.variable_ids.append(variable.id)
        return variable

    async def set_value_for_mode(
        self, variable: Variable, mode_id: str, value: VariableValue
    ) -> None:
        stored = self._variables.get(variable.id)
        if stored is None:
            raise HostError(f"Variable not found: {variable.id}")

        collection = self._get_collection(stored.collection_id)
        if mode_id not in {m.mode_id for m in collection.modes}:
            raise HostError(f"Mode not found: {mode_id}")

        if not _matches_type(value, stored.resolved_type):
            raise HostError(
                f"Mismatched value type: expected {stored.resolved_type.value}, "
                f"got {type(value).__name__}"
            )

        if stored.resolved_type == VariableType.FLOAT:
            value = float(value)
        stored.values_by_mode[mode_id] = value

    async def notify(self, message: str, error: bool = False) -> None:
        self.notifications.append((message, error))
        if error:
            logger.error(message)
        else:
            logger.info(message)

    # Helpers

    def _get_collection(self, collection_id: str) -> VariableCollection:
        collection = self._collections.get(collection_id)
        if collection is None:
            raise HostError(f"Collection not found: {collection_id}")
        return collection

    def _highest_id(self) -> int:
        ids = [c.id for c in self._collections.values()]
        ids += [m.mode_id for c in self._collections.values() for m in c.modes]
        ids += list(self._variables)
        return max((int(n) for i in ids for n in _ID_NUMBER.findall(i)), default=0)

    def _allocate_id(self) -> int:
        next_id = self._next_id
        self._next_id += 1
        return next_id
