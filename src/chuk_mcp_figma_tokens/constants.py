"""
Constants and enums for the token importer.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class VariableType(str, Enum):
    """
    Resolved type of a host variable.

    Values match the names the design tool uses on the wire.
    """

    COLOR = "COLOR"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"


# Collection title used when a token set doesn't name one
DEFAULT_COLLECTION_TITLE = "Imported Tokens"

# Name given to the single mode of a newly created collection
DEFAULT_MODE_NAME = "Mode 1"

# Characters kept when cleaning up a variable name (plain spaces only)
ALLOWED_NAME_PATTERN = r"[^a-zA-Z0-9 \-_]"


class ErrorMessages:
    """Standardized error messages."""

    HOST_UNAVAILABLE = "No variable host available. Configure a document or Figma file first."
    INVALID_TOKEN_DATA = 'Invalid token data. Expected object with "items" array.'
    MISSING_NAME_OR_VALUE = "Skipped item: missing name or value - {item}"
    INVALID_NAME = "Skipped item: invalid name after cleanup - {name}"
    NAME_NOT_STRING = "Skipped item: name must be a string - {item}"
    ITEM_FAILED = 'Error processing item "{name}": {error}'
    INVALID_HEX = "Invalid hex color: {hex}"
    COLLECTION_NOT_FOUND = "Collection '{name}' not found."
    TOKEN_SET_NOT_FOUND = "Token set '{name}' not found."
    IMPORT_FAILED = "Import failed: {error}"


class SuccessMessages:
    """Standardized success messages."""

    IMPORTED = 'Imported {count} variables to "{title}" collection'
    DOCUMENT_SAVED = "Saved document to {path}."
