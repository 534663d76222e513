"""
Variable hosts - where imported variables live.

This module provides:
- VariableHost: Abstract host API
- DocumentHost: Local registry persisted as YAML
- FigmaRestHost: A Figma file, via the REST API
"""

from chuk_mcp_figma_tokens.hosts.base import HostError, VariableHost
from chuk_mcp_figma_tokens.hosts.document import DocumentHost
from chuk_mcp_figma_tokens.hosts.figma_rest import FigmaRestHost

__all__ = [
    "DocumentHost",
    "FigmaRestHost",
    "HostError",
    "VariableHost",
]
