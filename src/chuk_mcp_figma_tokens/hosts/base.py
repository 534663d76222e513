"""
Variable host - the design tool's variable API.

The importer never touches collections or variables directly; it goes
through a host. Hosts own the registry of collections and variables
and decide how (and where) changes are stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from chuk_mcp_figma_tokens.constants import VariableType
from chuk_mcp_figma_tokens.models.variable import Variable, VariableCollection, VariableValue


class HostError(RuntimeError):
    """Raised when the host rejects or fails an operation."""


class VariableHost(ABC):
    """
    Abstract variable host.

    All operations are async; the importer awaits them one at a time.
    """

    name: str = "host"

    @abstractmethod
    async def get_local_collections(self) -> list[VariableCollection]:
        """List the collections in the current document."""

    @abstractmethod
    async def create_collection(self, name: str) -> VariableCollection:
        """Create a collection with a single default mode."""

    @abstractmethod
    async def set_collection_description(
        self, collection: VariableCollection, description: str
    ) -> None:
        """Set a collection's description."""

    @abstractmethod
    async def get_collection_variables(self, collection: VariableCollection) -> list[Variable]:
        """List the variables owned by a collection."""

    @abstractmethod
    async def create_variable(
        self,
        name: str,
        collection: VariableCollection,
        resolved_type: VariableType,
    ) -> Variable:
        """Create a typed variable in a collection."""

    @abstractmethod
    async def set_value_for_mode(
        self, variable: Variable, mode_id: str, value: VariableValue
    ) -> None:
        """Set a variable's value for one mode."""

    @abstractmethod
    async def notify(self, message: str, error: bool = False) -> None:
        """Show a message to the user."""

    async def find_collection(self, name: str) -> VariableCollection | None:
        """Find a collection by exact name."""
        for collection in await self.get_local_collections():
            if collection.name == name:
                return collection
        return None

    async def find_variable(self, collection: VariableCollection, name: str) -> Variable | None:
        """Find a variable by exact name within a collection."""
        for variable in await self.get_collection_variables(collection):
            if variable.name == name:
                return variable
        return None
