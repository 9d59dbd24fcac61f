"""OpenAIConverter: ToolRegistry -> OpenAI-compatible tool definitions."""

from __future__ import annotations

import copy
from typing import Any

from unit_conversion_mcp.adapters.annotations import AnnotationMapper
from unit_conversion_mcp.adapters.schema import SchemaConverter


class OpenAIConverter:
    """Converts registered tools to OpenAI function-tool definitions."""

    def __init__(self) -> None:
        self._schema_converter = SchemaConverter()
        self._annotation_mapper = AnnotationMapper()

    def convert_registry(
        self,
        registry: Any,
        embed_annotations: bool = False,
        strict: bool = False,
        prefix: str | None = None,
    ) -> list[dict[str, Any]]:
        """Convert every tool in *registry* (optionally filtered by name prefix)."""
        tools: list[dict[str, Any]] = []
        for name in registry.list(prefix=prefix):
            descriptor = registry.get_definition(name)
            if descriptor is None:
                continue
            tools.append(self.convert_descriptor(descriptor, embed_annotations=embed_annotations, strict=strict))
        return tools

    def convert_descriptor(
        self,
        descriptor: Any,
        embed_annotations: bool = False,
        strict: bool = False,
    ) -> dict[str, Any]:
        """Convert a single ToolDescriptor.

        Returns:
            ``{"type": "function", "function": {"name", "description",
            "parameters"[, "strict"]}}``
        """
        parameters = self._schema_converter.convert_schema(descriptor.input_schema)
        description = descriptor.description
        if embed_annotations:
            description += self._annotation_mapper.to_description_suffix(descriptor.annotations)

        function: dict[str, Any] = {
            "name": descriptor.name,
            "description": description,
            "parameters": parameters,
        }
        if strict:
            function["parameters"] = self._apply_strict_mode(parameters)
            function["strict"] = True

        return {"type": "function", "function": function}

    def _apply_strict_mode(self, schema: dict[str, Any]) -> dict[str, Any]:
        """Rewrite a schema for OpenAI Structured Outputs.

        Every object gets ``additionalProperties: false`` and lists all of its
        properties as required; properties that were optional become
        nullable and lose their defaults.
        """
        return self._strict_node(copy.deepcopy(schema))

    def _strict_node(self, node: Any) -> Any:
        if not isinstance(node, dict):
            return node

        properties = node.get("properties")
        if node.get("type") == "object" and isinstance(properties, dict):
            required = set(node.get("required", []))
            for name, prop in properties.items():
                prop.pop("default", None)
                prop_type = prop.get("type")
                if name not in required and prop_type not in (None, "null"):
                    if isinstance(prop_type, list):
                        if "null" not in prop_type:
                            prop["type"] = [*prop_type, "null"]
                    else:
                        prop["type"] = [prop_type, "null"]
                properties[name] = self._strict_node(prop)
            node["additionalProperties"] = False
            node["required"] = list(properties)

        if node.get("type") == "array" and "items" in node:
            node["items"] = self._strict_node(node["items"])
        return node
