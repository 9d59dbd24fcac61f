"""MCPServerFactory: create and configure an MCP Server from a ToolRegistry."""

from __future__ import annotations

import logging
from typing import Any

from mcp import types as mcp_types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from pydantic import AnyUrl

from unit_conversion_mcp.adapters.annotations import AnnotationMapper
from unit_conversion_mcp.adapters.schema import SchemaConverter

logger = logging.getLogger(__name__)

DOCS_URI_PREFIX = "docs://"


class MCPServerFactory:
    """Creates and configures MCP Server instances from a ToolRegistry."""

    def __init__(self) -> None:
        self._schema_converter = SchemaConverter()
        self._annotation_mapper = AnnotationMapper()

    def create_server(self, name: str = "unit-conversion-mcp") -> Server:
        """Create a new MCP low-level Server instance.

        Handlers are NOT registered yet.
        """
        return Server(name)

    def build_tool(self, descriptor: Any) -> mcp_types.Tool:
        """Build an MCP Tool from a ToolDescriptor.

        Mapping:
        - descriptor.name -> Tool.name
        - descriptor.description -> Tool.description
        - SchemaConverter.convert_schema(descriptor.input_schema) -> Tool.inputSchema
        - AnnotationMapper -> Tool.annotations
        """
        return mcp_types.Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=self._schema_converter.convert_schema(descriptor.input_schema),
            annotations=self._annotation_mapper.to_mcp_annotations(descriptor.annotations),
        )

    def build_tools(self, registry: Any, prefix: str | None = None) -> list[mcp_types.Tool]:
        """Build Tool objects for every tool in a registry.

        Tools whose definition is missing or fails to convert are logged
        and skipped.
        """
        tools: list[mcp_types.Tool] = []
        for name in registry.list(prefix=prefix):
            descriptor = registry.get_definition(name)
            if descriptor is None:
                logger.warning("Skipped tool %s: no definition found", name)
                continue
            try:
                tools.append(self.build_tool(descriptor))
            except Exception as e:
                logger.warning("Failed to build tool for %s: %s", name, e)
                continue
        return tools

    def register_handlers(
        self,
        server: Server,
        tools: list[mcp_types.Tool],
        router: Any,
    ) -> None:
        """Register list_tools and call_tool handlers on the Server.

        Input validation in the SDK is switched off: tools explain bad
        arguments in their own output instead of failing the call.

        Args:
            server: The MCP Server to register handlers on.
            tools: List of Tool objects to expose via list_tools.
            router: A router with an async handle_call(name, arguments)
                    method that returns (content_list, is_error).
        """

        @server.list_tools()
        async def handle_list_tools() -> list[mcp_types.Tool]:
            return list(tools)

        @server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[mcp_types.TextContent]:
            content, is_error = await router.handle_call(name, arguments)

            text_contents = [
                mcp_types.TextContent(type="text", text=item["text"]) for item in content if item.get("type") == "text"
            ]
            # The SDK reports a raised exception as CallToolResult(isError=True).
            if is_error:
                raise Exception(text_contents[0].text if text_contents else "Unknown error")
            return text_contents

    def register_resource_handlers(self, server: Server, registry: Any) -> None:
        """Expose each tool's documentation as a ``docs://{tool}`` text resource."""
        docs_map: dict[str, str] = {}
        for name in registry.list():
            descriptor = registry.get_definition(name)
            if descriptor is not None and descriptor.documentation:
                docs_map[name] = descriptor.documentation

        @server.list_resources()
        async def handle_list_resources() -> list[mcp_types.Resource]:
            return [
                mcp_types.Resource(
                    uri=AnyUrl(f"{DOCS_URI_PREFIX}{name}"),
                    name=f"{name} documentation",
                    mimeType="text/plain",
                )
                for name in docs_map
            ]

        @server.read_resource()
        async def handle_read_resource(uri: Any) -> list[ReadResourceContents]:
            uri_str = str(uri)
            if not uri_str.startswith(DOCS_URI_PREFIX):
                raise ValueError(f"Unsupported URI scheme: {uri_str}")
            name = uri_str[len(DOCS_URI_PREFIX) :].rstrip("/")
            if name not in docs_map:
                raise ValueError(f"Resource not found: {uri_str}")
            return [ReadResourceContents(content=docs_map[name], mime_type="text/plain")]

    def build_init_options(self, server: Server, name: str, version: str) -> InitializationOptions:
        """Build InitializationOptions for running the server."""
        return InitializationOptions(
            server_name=name,
            server_version=version,
            capabilities=server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )
