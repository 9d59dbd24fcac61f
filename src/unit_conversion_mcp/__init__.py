"""unit-conversion-mcp: MCP tool server for converting values between physical units."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from unit_conversion_mcp.adapters.annotations import AnnotationMapper
from unit_conversion_mcp.adapters.errors import ErrorMapper
from unit_conversion_mcp.adapters.schema import SchemaConverter
from unit_conversion_mcp.constants import ERROR_CODES, TOOL_NAME_PATTERN, UNIT_CONVERSION_TOOL
from unit_conversion_mcp.conversion import (
    CategoryMismatchError,
    ConversionError,
    UnitConversionTool,
    UnitType,
    UnknownUnitError,
    convert,
)
from unit_conversion_mcp.converters.openai import OpenAIConverter
from unit_conversion_mcp.registry import ToolDescriptor, ToolHints, ToolRegistry, default_registry
from unit_conversion_mcp.server.factory import MCPServerFactory
from unit_conversion_mcp.server.router import ExecutionRouter
from unit_conversion_mcp.server.transport import TransportManager

__all__ = [
    # Public API
    "serve",
    "to_openai_tools",
    "convert",
    # Conversion engine
    "UnitConversionTool",
    "UnitType",
    "ConversionError",
    "UnknownUnitError",
    "CategoryMismatchError",
    # Registry
    "ToolRegistry",
    "ToolDescriptor",
    "ToolHints",
    "default_registry",
    # Server building blocks
    "MCPServerFactory",
    "ExecutionRouter",
    "TransportManager",
    # Adapters
    "AnnotationMapper",
    "SchemaConverter",
    "ErrorMapper",
    # Converters
    "OpenAIConverter",
    # Constants
    "ERROR_CODES",
    "TOOL_NAME_PATTERN",
    "UNIT_CONVERSION_TOOL",
]

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "streamable-http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def serve(
    registry: ToolRegistry | None = None,
    *,
    transport: str = "stdio",
    host: str = "127.0.0.1",
    port: int = 8000,
    name: str = "unit-conversion-mcp",
    version: str | None = None,
    on_startup: Callable[[], None] | None = None,
    on_shutdown: Callable[[], None] | None = None,
    log_level: str | None = None,
) -> None:
    """Launch an MCP server exposing the registered tools.

    Args:
        registry: Tools to expose. Defaults to :func:`default_registry`.
        transport: Transport type - "stdio" or "streamable-http".
        host: Host address for the HTTP transport.
        port: Port number for the HTTP transport.
        name: MCP server name.
        version: MCP server version. Defaults to the package version.
        on_startup: Optional callback invoked after setup, before transport starts.
        on_shutdown: Optional callback invoked after the transport completes.
        log_level: Set the log level for the unit_conversion_mcp logger (e.g. "DEBUG").
    """
    if not name:
        raise ValueError("name must not be empty")
    if len(name) > 255:
        raise ValueError(f"name exceeds maximum length of 255: {len(name)}")
    transport_lower = transport.lower()
    if transport_lower not in TRANSPORTS:
        raise ValueError(f"Unknown transport: {transport!r}. Expected 'stdio' or 'streamable-http'.")
    if log_level is not None:
        if log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level!r}. Valid: {sorted(LOG_LEVELS)}")
        logging.getLogger("unit_conversion_mcp").setLevel(getattr(logging, log_level.upper()))

    version = version or __version__
    if registry is None:
        registry = default_registry()

    factory = MCPServerFactory()
    server = factory.create_server(name=name)
    tools = factory.build_tools(registry)
    router = ExecutionRouter(registry)
    factory.register_handlers(server, tools, router)
    factory.register_resource_handlers(server, registry)
    init_options = factory.build_init_options(server, name=name, version=version)

    logger.info(
        "Starting MCP server '%s' v%s with %d tools via %s",
        name,
        version,
        len(tools),
        transport_lower,
    )

    transport_manager = TransportManager()
    transport_manager.set_tool_count(len(tools))

    async def _run() -> None:
        if transport_lower == "stdio":
            await transport_manager.run_stdio(server, init_options)
        else:
            await transport_manager.run_streamable_http(server, init_options, host=host, port=port)

    if on_startup is not None:
        on_startup()

    try:
        asyncio.run(_run())
    finally:
        if on_shutdown is not None:
            on_shutdown()


def to_openai_tools(
    registry: ToolRegistry | None = None,
    *,
    embed_annotations: bool = False,
    strict: bool = False,
    prefix: str | None = None,
) -> list[dict]:
    """Export registered tools as OpenAI-compatible tool definitions.

    Args:
        registry: Tools to export. Defaults to :func:`default_registry`.
        embed_annotations: Embed annotation hints in tool descriptions.
        strict: Add strict: true for OpenAI Structured Outputs.
        prefix: Only export tools whose name starts with this prefix.

    Returns:
        List of OpenAI tool definition dicts, directly usable with
        openai.chat.completions.create(tools=...).
    """
    if registry is None:
        registry = default_registry()
    tools = OpenAIConverter().convert_registry(
        registry,
        embed_annotations=embed_annotations,
        strict=strict,
        prefix=prefix,
    )
    logger.debug("Converted %d tools to OpenAI format", len(tools))
    return tools
