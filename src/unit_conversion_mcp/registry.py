"""ToolRegistry: in-process catalog of tools the server exposes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from unit_conversion_mcp.constants import TOOL_NAME_PATTERN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolHints:
    """Behaviour hints advertised to clients alongside a tool."""

    readonly: bool = False
    destructive: bool = False
    idempotent: bool = False
    open_world: bool = True


@dataclass
class ToolDescriptor:
    """Static metadata describing a registered tool."""

    name: str
    description: str
    input_schema: dict[str, Any]
    annotations: ToolHints | None = None
    documentation: str | None = None


@runtime_checkable
class Tool(Protocol):
    """Anything with tool metadata and a synchronous ``execute(arguments)``."""

    name: str
    description: str
    input_schema: dict[str, Any]

    def execute(self, arguments: Any | None) -> Any: ...


class ToolRegistry:
    """Maps tool names to tool instances.

    Populated once at start-up and read-only afterwards.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Add *tool* under ``tool.name``.

        Raises:
            ValueError: If the name is malformed or already registered.
        """
        name = tool.name
        if not TOOL_NAME_PATTERN.match(name):
            raise ValueError(f"Invalid tool name '{name}': must match pattern {TOOL_NAME_PATTERN.pattern}")
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        self._tools[name] = tool
        logger.debug("Registered tool %s", name)

    def list(self, prefix: str | None = None) -> list[str]:
        names = self._tools.keys()
        if prefix is not None:
            names = [name for name in names if name.startswith(prefix)]
        return sorted(names)

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def get_definition(self, name: str) -> ToolDescriptor | None:
        """Return the descriptor for *name*, or None if it is not registered."""
        tool = self._tools.get(name)
        if tool is None:
            return None
        return ToolDescriptor(
            name=tool.name,
            description=tool.description,
            input_schema=tool.input_schema,
            annotations=getattr(tool, "annotations", None),
            documentation=getattr(tool, "documentation", None),
        )

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools


def default_registry() -> ToolRegistry:
    """Build a registry holding the unit conversion tool."""
    from unit_conversion_mcp.conversion.tool import UnitConversionTool

    registry = ToolRegistry()
    registry.register(UnitConversionTool())
    return registry
