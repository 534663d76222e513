"""
Figma REST host - writes variables through the Figma REST API.

Uses the local variables endpoints of a single file:
- GET  /v1/files/{file_key}/variables/local
- POST /v1/files/{file_key}/variables

Every mutation is its own POST; new objects are created with temporary
ids that Figma maps to real ids in meta.tempIdToRealId.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

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

FIGMA_API_BASE = "https://api.figma.com/v1"
DEFAULT_TIMEOUT = 30.0


def _to_wire_value(value: VariableValue) -> Any:
    if isinstance(value, RGB):
        return value.to_dict()
    return value


def _from_wire_value(value: Any) -> Any:
    # Colors come back as RGBA; alpha is dropped
    if isinstance(value, dict) and {"r", "g", "b"} <= value.keys():
        return RGB(r=value["r"], g=value["g"], b=value["b"])
    return value


def _parse_collection(data: dict[str, Any]) -> VariableCollection:
    modes = [Mode(mode_id=m["modeId"], name=m.get("name", DEFAULT_MODE_NAME)) for m in data["modes"]]
    default_mode_id = data.get("defaultModeId")
    # The default mode goes first
    modes.sort(key=lambda m: m.mode_id != default_mode_id)

    return VariableCollection(
        id=data["id"],
        name=data["name"],
        description=data.get("description", ""),
        modes=modes,
        variable_ids=list(data.get("variableIds", [])),
    )


def _parse_variable(data: dict[str, Any]) -> Variable:
    values = {
        mode_id: _from_wire_value(value)
        for mode_id, value in data.get("valuesByMode", {}).items()
        # Aliases to other variables aren't importer values
        if not (isinstance(value, dict) and value.get("type") == "VARIABLE_ALIAS")
    }
    return Variable(
        id=data["id"],
        name=data["name"],
        collection_id=data["variableCollectionId"],
        resolved_type=VariableType(data["resolvedType"]),
        values_by_mode=values,
    )


class FigmaRestHost(VariableHost):
    """
    Variable host for a Figma file, via the REST API.

    Requires a personal access token with the file_variables scopes.
    """

    name = "figma"

    def __init__(
        self,
        file_key: str,
        access_token: str,
        client: httpx.AsyncClient | None = None,
        base_url: str = FIGMA_API_BASE,
    ):
        """
        Initialize the host.

        Args:
            file_key: Key of the Figma file to write to
            access_token: Figma personal access token
            client: HTTP client to use (one is created if omitted)
            base_url: API base URL
        """
        if not file_key:
            raise ValueError("Figma file key is required")
        if not access_token:
            raise ValueError("Figma access token is required")

        self.file_key = file_key
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._meta: dict[str, Any] | None = None
        self._descriptions: dict[str, str] = {}

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT)
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self.base_url}/files/{self.file_key}/{path}"
        headers = {"X-Figma-Token": self.access_token, "Accept": "application/json"}

        try:
            response = await self._get_client().request(method, url, headers=headers, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise HostError(self._describe_status_error(e.response)) from e
        except httpx.HTTPError as e:
            raise HostError(f"Figma API request failed: {e}") from e

        return response.json()

    @staticmethod
    def _describe_status_error(response: httpx.Response) -> str:
        status = response.status_code
        try:
            message = response.json().get("message", "")
        except ValueError:
            message = ""

        if status == 401:
            return "Invalid Figma access token."
        if status == 403:
            return f"Access denied for file variables. {message}".strip()
        if status == 404:
            return "Figma file not found. Check the file key."
        if status == 429:
            return "Figma rate limit exceeded. Wait before importing again."
        return f"Figma API returned status {status}. {message}".strip()

    async def _local_meta(self) -> dict[str, Any]:
        if self._meta is None:
            data = await self._request("GET", "variables/local")
            self._meta = data.get("meta", {})
        return self._meta

    async def _post_variables(self, payload: dict[str, Any]) -> dict[str, str]:
        data = await self._request("POST", "variables", json=payload)
        # Local state is stale after any write
        self._meta = None
        return data.get("meta", {}).get("tempIdToRealId", {})

    # VariableHost

    async def get_local_collections(self) -> list[VariableCollection]:
        meta = await self._local_meta()
        collections = []
        for cdata in meta.get("variableCollections", {}).values():
            if cdata.get("remote"):
                continue
            collection = _parse_collection(cdata)
            collection.description = self._descriptions.get(collection.id, collection.description)
            collections.append(collection)
        return collections

    async def create_collection(self, name: str) -> VariableCollection:
        id_map = await self._post_variables(
            {
                "variableCollections": [
                    {
                        "action": "CREATE",
                        "id": "new_collection",
                        "name": name,
                        "initialModeId": "new_mode",
                    }
                ]
            }
        )
        try:
            collection_id = id_map["new_collection"]
            mode_id = id_map["new_mode"]
        except KeyError as e:
            raise HostError(f"Figma did not return an id for {e.args[0]}") from None

        return VariableCollection(
            id=collection_id,
            name=name,
            modes=[Mode(mode_id=mode_id, name=DEFAULT_MODE_NAME)],
        )

    async def set_collection_description(
        self, collection: VariableCollection, description: str
    ) -> None:
        # The REST API has no collection description field
        logger.warning(
            f"Collection descriptions can't be set over the REST API; "
            f"keeping it locally for '{collection.name}'"
        )
        self._descriptions[collection.id] = description
        collection.description = description

    async def get_collection_variables(self, collection: VariableCollection) -> list[Variable]:
        meta = await self._local_meta()
        return [
            _parse_variable(vdata)
            for vdata in meta.get("variables", {}).values()
            if vdata.get("variableCollectionId") == collection.id
            # Deleted variables linger while something still references them
            and not vdata.get("deletedButReferenced")
        ]

    async def create_variable(
        self,
        name: str,
        collection: VariableCollection,
        resolved_type: VariableType,
    ) -> Variable:
        id_map = await self._post_variables(
            {
                "variables": [
                    {
                        "action": "CREATE",
                        "id": "new_variable",
                        "name": name,
                        "variableCollectionId": collection.id,
                        "resolvedType": resolved_type.value,
                    }
                ]
            }
        )
        variable_id = id_map.get("new_variable")
        if not variable_id:
            raise HostError("Figma did not return an id for new_variable")

        collection.variable_ids.append(variable_id)
        return Variable(
            id=variable_id,
            name=name,
            collection_id=collection.id,
            resolved_type=resolved_type,
        )

    async def set_value_for_mode(
        self, variable: Variable, mode_id: str, value: VariableValue
    ) -> None:
        await self._post_variables(
            {
                "variableModeValues": [
                    {
                        "variableId": variable.id,
                        "modeId": mode_id,
                        "value": _to_wire_value(value),
                    }
                ]
            }
        )
        variable.values_by_mode[mode_id] = value

    async def notify(self, message: str, error: bool = False) -> None:
        if error:
            logger.error(message)
        else:
            logger.info(message)
