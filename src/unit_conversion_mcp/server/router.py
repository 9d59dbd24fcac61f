"""ExecutionRouter: route MCP tool calls -> registered tools."""

from __future__ import annotations

import json
import logging
from typing import Any

from unit_conversion_mcp.adapters.errors import ErrorMapper, ToolNotFoundError

logger = logging.getLogger(__name__)


class ExecutionRouter:
    """Routes MCP tool calls to tools held in a ToolRegistry.

    The router sits between the MCP server's call_tool handler and the
    tools.  It looks the tool up, runs ``tool.execute(arguments)`` and
    converts the outcome into a ``(content, is_error)`` tuple.

    A tool's own text output, including its explanations of bad input, is
    a normal result.  Only an unknown tool name or an exception escaping
    the tool is reported with ``is_error=True``.

    Args:
        registry: A ToolRegistry (duck-typed -- must expose ``get(name)``).
    """

    def __init__(self, registry: Any) -> None:
        self._registry = registry
        self._error_mapper = ErrorMapper()

    async def handle_call(
        self,
        tool_name: str,
        arguments: dict[str, Any] | None,
    ) -> tuple[list[dict[str, str]], bool]:
        """Execute a tool call.

        Args:
            tool_name: The MCP tool name.
            arguments: The tool call arguments, or None if the request had none.

        Returns:
            A ``(content, is_error)`` tuple where *content* is a list of
            ``TextContent``-compatible dicts.
        """
        logger.debug("Executing tool call: %s", tool_name)

        try:
            tool = self._registry.get(tool_name)
            if tool is None:
                raise ToolNotFoundError(tool_name)
            result = tool.execute(arguments)
        except Exception as error:
            logger.debug("handle_call error for %s: %s", tool_name, error, exc_info=True)
            error_info = self._error_mapper.to_mcp_error(error)
            return ([{"type": "text", "text": error_info["message"]}], True)

        if isinstance(result, str):
            text = result
        else:
            text = json.dumps(result, separators=(",", ":"), default=str)
        return ([{"type": "text", "text": text}], False)
