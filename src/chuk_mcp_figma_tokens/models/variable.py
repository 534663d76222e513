"""
Variable models - the host's object model.

A VariableCollection groups variables and owns one or more modes.
Each Variable holds one value per mode; the importer only ever
writes the default (first) mode.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictStr, field_validator

from chuk_mcp_figma_tokens.constants import DEFAULT_MODE_NAME, VariableType
from chuk_mcp_figma_tokens.models.color import RGB

VariableValue = RGB | StrictBool | StrictFloat | StrictStr


class Mode(BaseModel):
    """A named value-set dimension within a collection (e.g. light/dark)."""

    mode_id: str = Field(..., description="Host mode id")
    name: str = Field(default=DEFAULT_MODE_NAME, description="Mode name")

    model_config = {"frozen": True}


class Variable(BaseModel):
    """A named, typed value holder scoped to a collection."""

    id: str = Field(..., description="Host variable id")
    name: str = Field(..., description="Variable name (unique within its collection)")
    collection_id: str = Field(..., description="Owning collection id")
    resolved_type: VariableType = Field(..., description="Type every mode value must have")
    values_by_mode: dict[str, VariableValue] = Field(
        default_factory=dict,
        description="Mode id -> value",
    )

    def value_for_mode(self, mode_id: str) -> VariableValue | None:
        """Get the value stored for a mode."""
        return self.values_by_mode.get(mode_id)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "id": self.id,
            "name": self.name,
            "collection_id": self.collection_id,
            "resolved_type": self.resolved_type.value,
            "values_by_mode": {
                mode_id: value.to_dict() if isinstance(value, RGB) else value
                for mode_id, value in self.values_by_mode.items()
            },
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> Variable:
        """Create from a YAML dict."""
        return cls(
            id=data["id"],
            name=data["name"],
            collection_id=data["collection_id"],
            resolved_type=VariableType(data["resolved_type"]),
            values_by_mode=data.get("values_by_mode") or {},
        )


class VariableCollection(BaseModel):
    """A named group of related variables with one or more modes."""

    id: str = Field(..., description="Host collection id")
    name: str = Field(..., description="Collection name")
    description: str = Field(default="", description="Collection description")
    modes: list[Mode] = Field(..., min_length=1, description="Modes; the first is the default")
    variable_ids: list[str] = Field(default_factory=list, description="Ids of owned variables")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Collection names must not be blank."""
        if not v.strip():
            raise ValueError("Collection name cannot be empty")
        return v

    @property
    def default_mode(self) -> Mode:
        """The mode the importer writes to."""
        return self.modes[0]

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "modes": [{"mode_id": m.mode_id, "name": m.name} for m in self.modes],
            "variable_ids": list(self.variable_ids),
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> VariableCollection:
        """Create from a YAML dict."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            modes=[Mode(**m) for m in data.get("modes", [])],
            variable_ids=list(data.get("variable_ids", [])),
        )
