"""Unit tests for MCPServerFactory."""

from __future__ import annotations

import pytest
from mcp import types as mcp_types
from mcp.server.lowlevel import Server
from mcp.server.models import InitializationOptions
from pydantic import AnyUrl

from tests.conftest import EchoTool
from unit_conversion_mcp.registry import ToolRegistry
from unit_conversion_mcp.server.factory import MCPServerFactory
from unit_conversion_mcp.server.router import ExecutionRouter


class BrokenRegistry(ToolRegistry):
    """Registry that lists a name it cannot describe."""

    def list(self, prefix=None):
        return ["ghost", *super().list(prefix=prefix)]

    def get_definition(self, name):
        if name == "ghost":
            return None
        return super().get_definition(name)


@pytest.fixture
def factory() -> MCPServerFactory:
    return MCPServerFactory()


class TestCreateServer:
    def test_create_server_returns_server_instance(self, factory: MCPServerFactory) -> None:
        assert isinstance(factory.create_server(), Server)

    def test_default_name(self, factory: MCPServerFactory) -> None:
        assert factory.create_server().name == "unit-conversion-mcp"

    def test_custom_name(self, factory: MCPServerFactory) -> None:
        assert factory.create_server(name="converter").name == "converter"


class TestBuildTool:
    def test_unit_conversion_tool(self, factory: MCPServerFactory, registry: ToolRegistry) -> None:
        tool = factory.build_tool(registry.get_definition("unit_conversion"))
        assert isinstance(tool, mcp_types.Tool)
        assert tool.name == "unit_conversion"
        assert tool.description.startswith("Convert between different units")
        assert tool.inputSchema["type"] == "object"
        assert set(tool.inputSchema["properties"]) == {"value", "from_unit", "to_unit"}

    def test_annotations_mapped(self, factory: MCPServerFactory, registry: ToolRegistry) -> None:
        tool = factory.build_tool(registry.get_definition("unit_conversion"))
        assert tool.annotations.readOnlyHint is True
        assert tool.annotations.destructiveHint is False
        assert tool.annotations.idempotentHint is True
        assert tool.annotations.openWorldHint is False

    def test_refs_inlined(self, factory: MCPServerFactory, nested_descriptor) -> None:
        tool = factory.build_tool(nested_descriptor)
        assert "$defs" not in tool.inputSchema
        assert "$ref" not in str(tool.inputSchema)


class TestBuildTools:
    def test_all_registered_tools(self, factory: MCPServerFactory, mixed_registry: ToolRegistry) -> None:
        tools = factory.build_tools(mixed_registry)
        assert [t.name for t in tools] == ["echo", "explode", "unit_conversion"]

    def test_prefix(self, factory: MCPServerFactory, mixed_registry: ToolRegistry) -> None:
        assert [t.name for t in factory.build_tools(mixed_registry, prefix="unit")] == ["unit_conversion"]

    def test_missing_definition_skipped_with_warning(self, factory: MCPServerFactory, tool, caplog) -> None:
        registry = BrokenRegistry()
        registry.register(tool)
        with caplog.at_level("WARNING", logger="unit_conversion_mcp.server.factory"):
            tools = factory.build_tools(registry)
        assert [t.name for t in tools] == ["unit_conversion"]
        assert "Skipped tool ghost" in caplog.text


class TestHandlers:
    async def test_list_tools_handler(self, factory: MCPServerFactory, registry: ToolRegistry) -> None:
        server = factory.create_server()
        tools = factory.build_tools(registry)
        factory.register_handlers(server, tools, ExecutionRouter(registry))

        handler = server.request_handlers[mcp_types.ListToolsRequest]
        result = await handler(mcp_types.ListToolsRequest(method="tools/list"))
        assert [t.name for t in result.root.tools] == ["unit_conversion"]

    def test_call_tool_handler_registered(self, factory: MCPServerFactory, registry: ToolRegistry) -> None:
        server = factory.create_server()
        factory.register_handlers(server, factory.build_tools(registry), ExecutionRouter(registry))
        assert mcp_types.CallToolRequest in server.request_handlers

    async def test_resource_handlers(self, factory: MCPServerFactory, registry: ToolRegistry) -> None:
        server = factory.create_server()
        factory.register_resource_handlers(server, registry)

        list_handler = server.request_handlers[mcp_types.ListResourcesRequest]
        listed = await list_handler(mcp_types.ListResourcesRequest(method="resources/list"))
        assert [str(r.uri) for r in listed.root.resources] == ["docs://unit_conversion"]

        read_handler = server.request_handlers[mcp_types.ReadResourceRequest]
        read = await read_handler(
            mcp_types.ReadResourceRequest(
                method="resources/read",
                params=mcp_types.ReadResourceRequestParams(uri=AnyUrl("docs://unit_conversion")),
            )
        )
        assert "pounds (lb, lbs)" in read.root.contents[0].text

    async def test_tools_without_docs_are_not_listed(self, factory: MCPServerFactory) -> None:
        registry = ToolRegistry()
        registry.register(EchoTool())
        server = factory.create_server()
        factory.register_resource_handlers(server, registry)
        handler = server.request_handlers[mcp_types.ListResourcesRequest]
        listed = await handler(mcp_types.ListResourcesRequest(method="resources/list"))
        assert listed.root.resources == []


class TestBuildInitOptions:
    def test_init_options(self, factory: MCPServerFactory, registry: ToolRegistry) -> None:
        server = factory.create_server()
        factory.register_handlers(server, factory.build_tools(registry), ExecutionRouter(registry))
        options = factory.build_init_options(server, name="unit-conversion-mcp", version="0.1.0")
        assert isinstance(options, InitializationOptions)
        assert options.server_name == "unit-conversion-mcp"
        assert options.server_version == "0.1.0"
        assert options.capabilities.tools is not None
