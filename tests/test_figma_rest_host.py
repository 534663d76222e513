"""
Tests for the Figma REST host.

Uses httpx.MockTransport with a small fake of the variables endpoints.
"""

import json

import httpx
import pytest

from chuk_mcp_figma_tokens.constants import VariableType
from chuk_mcp_figma_tokens.hosts import FigmaRestHost, HostError
from chuk_mcp_figma_tokens.importer import import_tokens
from chuk_mcp_figma_tokens.models import RGB


class FakeFigmaFile:
    """In-memory stand-in for a Figma file's variables endpoints."""

    def __init__(self) -> None:
        self.collections: dict = {}
        self.variables: dict = {}
        self.requests: list[httpx.Request] = []
        self._next = 1

    def _new_id(self, prefix: str) -> str:
        value = f"{prefix}:{self._next}"
        self._next += 1
        return value

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.headers.get("X-Figma-Token") != "secret":
            return httpx.Response(401, json={"status": 401, "error": True})

        if request.method == "GET" and request.url.path.endswith("/variables/local"):
            return httpx.Response(
                200,
                json={
                    "status": 200,
                    "error": False,
                    "meta": {
                        "variableCollections": self.collections,
                        "variables": self.variables,
                    },
                },
            )

        if request.method == "POST" and request.url.path.endswith("/variables"):
            return httpx.Response(200, json=self._apply(json.loads(request.content)))

        return httpx.Response(404, json={"status": 404, "error": True})

    def _apply(self, payload: dict) -> dict:
        temp_ids: dict[str, str] = {}

        for c in payload.get("variableCollections", []):
            collection_id = self._new_id("VariableCollectionId")
            mode_id = self._new_id("mode")
            temp_ids[c["id"]] = collection_id
            temp_ids[c["initialModeId"]] = mode_id
            self.collections[collection_id] = {
                "id": collection_id,
                "name": c["name"],
                "modes": [{"modeId": mode_id, "name": "Mode 1"}],
                "defaultModeId": mode_id,
                "variableIds": [],
                "remote": False,
            }

        for v in payload.get("variables", []):
            variable_id = self._new_id("VariableID")
            temp_ids[v["id"]] = variable_id
            self.variables[variable_id] = {
                "id": variable_id,
                "name": v["name"],
                "variableCollectionId": v["variableCollectionId"],
                "resolvedType": v["resolvedType"],
                "valuesByMode": {},
            }
            self.collections[v["variableCollectionId"]]["variableIds"].append(variable_id)

        for mv in payload.get("variableModeValues", []):
            self.variables[mv["variableId"]]["valuesByMode"][mv["modeId"]] = mv["value"]

        return {"status": 200, "error": False, "meta": {"tempIdToRealId": temp_ids}}


@pytest.fixture
def figma_file() -> FakeFigmaFile:
    return FakeFigmaFile()


@pytest.fixture
def figma_host(figma_file: FakeFigmaFile) -> FigmaRestHost:
    client = httpx.AsyncClient(transport=httpx.MockTransport(figma_file.handler))
    return FigmaRestHost(file_key="FILE123", access_token="secret", client=client)


class TestFigmaRestHost:
    """Tests for host operations against the fake API."""

    def test_requires_credentials(self):
        with pytest.raises(ValueError):
            FigmaRestHost(file_key="", access_token="secret")
        with pytest.raises(ValueError):
            FigmaRestHost(file_key="FILE123", access_token="")

    @pytest.mark.asyncio
    async def test_create_collection(self, figma_host: FigmaRestHost, figma_file: FakeFigmaFile):
        collection = await figma_host.create_collection("Colors")

        assert collection.id in figma_file.collections
        assert collection.default_mode.mode_id == figma_file.collections[collection.id][
            "defaultModeId"
        ]
        assert await figma_host.find_collection("Colors") is not None

    @pytest.mark.asyncio
    async def test_uses_file_key_and_token(
        self, figma_host: FigmaRestHost, figma_file: FakeFigmaFile
    ):
        await figma_host.get_local_collections()
        request = figma_file.requests[0]
        assert request.url.path == "/v1/files/FILE123/variables/local"
        assert request.headers["X-Figma-Token"] == "secret"

    @pytest.mark.asyncio
    async def test_color_sent_as_rgb(self, figma_host: FigmaRestHost, figma_file: FakeFigmaFile):
        collection = await figma_host.create_collection("Colors")
        variable = await figma_host.create_variable("Primary", collection, VariableType.COLOR)
        await figma_host.set_value_for_mode(
            variable, collection.default_mode.mode_id, RGB(r=1.0, g=0.0, b=0.0)
        )

        stored = figma_file.variables[variable.id]["valuesByMode"]
        assert stored[collection.default_mode.mode_id] == {"r": 1.0, "g": 0.0, "b": 0.0}

    @pytest.mark.asyncio
    async def test_reads_rgba_values(self, figma_host: FigmaRestHost, figma_file: FakeFigmaFile):
        collection = await figma_host.create_collection("Colors")
        variable = await figma_host.create_variable("Primary", collection, VariableType.COLOR)
        mode_id = collection.default_mode.mode_id
        figma_file.variables[variable.id]["valuesByMode"][mode_id] = {
            "r": 0.0,
            "g": 0.5,
            "b": 1.0,
            "a": 1.0,
        }

        found = await figma_host.find_variable(collection, "Primary")
        assert found.value_for_mode(mode_id) == RGB(r=0.0, g=0.5, b=1.0)

    @pytest.mark.asyncio
    async def test_deleted_variables_ignored(
        self, figma_host: FigmaRestHost, figma_file: FakeFigmaFile
    ):
        """Variables deleted but still referenced are not matched by name."""
        collection = await figma_host.create_collection("Colors")
        variable = await figma_host.create_variable("Primary", collection, VariableType.COLOR)
        figma_file.variables[variable.id]["deletedButReferenced"] = True

        assert await figma_host.find_variable(collection, "Primary") is None
        assert await figma_host.get_collection_variables(collection) == []

    @pytest.mark.asyncio
    async def test_description_kept_locally(self, figma_host: FigmaRestHost):
        collection = await figma_host.create_collection("Colors")
        await figma_host.set_collection_description(collection, "Brand")

        found = await figma_host.find_collection("Colors")
        assert found.description == "Brand"

    @pytest.mark.asyncio
    async def test_auth_error(self, figma_file: FakeFigmaFile):
        client = httpx.AsyncClient(transport=httpx.MockTransport(figma_file.handler))
        host = FigmaRestHost(file_key="FILE123", access_token="wrong", client=client)

        with pytest.raises(HostError, match="Invalid Figma access token"):
            await host.get_local_collections()


class TestImportThroughRest:
    """Tests for the importer against the REST host."""

    @pytest.mark.asyncio
    async def test_import_and_reimport(self, figma_host: FigmaRestHost, figma_file: FakeFigmaFile):
        tokens = {
            "title": "Mixed",
            "items": [
                {"name": "Primary", "value": "#007AFF"},
                {"name": "Gap", "value": 8},
                {"name": "Enabled", "value": False},
            ],
        }

        first = await import_tokens(figma_host, tokens)
        second = await import_tokens(figma_host, tokens)

        assert first.created == 3
        assert second.created == 0
        assert second.updated == 3
        assert len(figma_file.collections) == 1
        assert len(figma_file.variables) == 3

        types = {v["name"]: v["resolvedType"] for v in figma_file.variables.values()}
        assert types == {"Primary": "COLOR", "Gap": "FLOAT", "Enabled": "BOOLEAN"}

    @pytest.mark.asyncio
    async def test_reimport_replaces_deleted_variable(
        self, figma_host: FigmaRestHost, figma_file: FakeFigmaFile
    ):
        tokens = {"title": "T", "items": [{"name": "Gap", "value": 8}]}
        await import_tokens(figma_host, tokens)
        for vdata in figma_file.variables.values():
            vdata["deletedButReferenced"] = True

        result = await import_tokens(figma_host, tokens)

        assert result.created == 1
        assert result.updated == 0
        live = [v for v in figma_file.variables.values() if not v.get("deletedButReferenced")]
        assert [v["name"] for v in live] == ["Gap"]

    @pytest.mark.asyncio
    async def test_auth_failure_is_fatal(self, figma_file: FakeFigmaFile):
        client = httpx.AsyncClient(transport=httpx.MockTransport(figma_file.handler))
        host = FigmaRestHost(file_key="FILE123", access_token="wrong", client=client)

        result = await import_tokens(host, {"items": [{"name": "Gap", "value": 1}]})
        assert result.success is False
        assert "access token" in result.error
