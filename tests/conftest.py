"""Shared test fixtures for unit-conversion-mcp tests."""

from __future__ import annotations

from typing import Any

import pytest

from unit_conversion_mcp.conversion.tool import UnitConversionTool
from unit_conversion_mcp.registry import ToolDescriptor, ToolHints, ToolRegistry

# ---------------------------------------------------------------------------
# Lightweight stand-in tools for registry/server tests
# ---------------------------------------------------------------------------


class EchoTool:
    """Returns its arguments unchanged."""

    name = "echo"
    description = "Echo the input arguments"
    input_schema: dict[str, Any] = {
        "type": "object",
        "properties": {"text": {"type": "string"}},
        "required": ["text"],
    }
    annotations = ToolHints(readonly=True, idempotent=True)
    documentation = None

    def execute(self, arguments: Any | None) -> Any:
        return dict(arguments or {})


class ExplodingTool:
    """Raises a plain exception from execute()."""

    name = "explode"
    description = "Always fails"
    input_schema: dict[str, Any] = {}

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or RuntimeError("secret internal detail")

    def execute(self, arguments: Any | None) -> Any:
        raise self.error


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tool() -> UnitConversionTool:
    return UnitConversionTool()


@pytest.fixture
def registry(tool: UnitConversionTool) -> ToolRegistry:
    """Registry holding the unit conversion tool only."""
    registry = ToolRegistry()
    registry.register(tool)
    return registry


@pytest.fixture
def mixed_registry(tool: UnitConversionTool) -> ToolRegistry:
    """Registry holding the unit conversion tool plus the stand-in tools."""
    registry = ToolRegistry()
    registry.register(tool)
    registry.register(EchoTool())
    registry.register(ExplodingTool())
    return registry


@pytest.fixture
def nested_descriptor() -> ToolDescriptor:
    """A descriptor whose schema uses $defs/$ref and pydantic-style titles."""
    return ToolDescriptor(
        name="batch_convert",
        description="Convert several values at once",
        input_schema={
            "title": "BatchParams",
            "type": "object",
            "$defs": {
                "Item": {
                    "title": "Item",
                    "type": "object",
                    "properties": {
                        "value": {"title": "Value", "type": "number"},
                        "unit": {"title": "Unit", "type": "string"},
                    },
                    "required": ["value", "unit"],
                }
            },
            "properties": {
                "items": {"title": "Items", "type": "array", "items": {"$ref": "#/$defs/Item"}},
                "to_unit": {"title": "To Unit", "type": "string"},
                "precision": {"title": "Precision", "type": "integer", "default": 4},
            },
            "required": ["items", "to_unit"],
        },
        annotations=ToolHints(readonly=True, open_world=False),
    )
