"""SchemaConverter: pydantic models / JSON Schemas → MCP inputSchema."""

from __future__ import annotations

import copy
from typing import Any

from pydantic import BaseModel


class SchemaConverter:
    """Produces flat, object-rooted JSON Schemas for tool inputs.

    Key transformations:
    - Empty schemas → {"type": "object", "properties": {}}
    - $ref pointers into $defs are inlined and $defs dropped
    - pydantic's generated "title" keys are removed
    - Input schemas are never modified in place
    """

    def convert_model(self, model: type[BaseModel]) -> dict[str, Any]:
        """Build an MCP inputSchema from a pydantic model class."""
        return self.convert_schema(model.model_json_schema())

    def convert_schema(self, schema: dict[str, Any]) -> dict[str, Any]:
        """Normalise a raw JSON Schema dict.

        Raises:
            ValueError: On a circular or unresolvable $ref.
        """
        schema = copy.deepcopy(schema)
        if not schema:
            return {"type": "object", "properties": {}}

        defs = schema.pop("$defs", {})
        schema = self._inline_refs(schema, defs, frozenset())
        schema = self._strip_titles(schema)

        if "type" not in schema or "properties" in schema:
            schema["type"] = "object"
        return schema

    def _inline_refs(self, node: Any, defs: dict[str, Any], seen: frozenset[str]) -> Any:
        if isinstance(node, list):
            return [self._inline_refs(item, defs, seen) for item in node]
        if not isinstance(node, dict):
            return node

        ref = node.get("$ref")
        if ref is not None:
            if ref in seen:
                raise ValueError(f"Circular $ref detected: {ref}")
            if not ref.startswith("#/$defs/"):
                raise ValueError(f"Unsupported $ref format: {ref}")
            name = ref[len("#/$defs/") :]
            if name not in defs:
                raise ValueError(f"Definition not found: {name}")
            return self._inline_refs(copy.deepcopy(defs[name]), defs, seen | {ref})

        return {key: self._inline_refs(value, defs, seen) for key, value in node.items() if key != "$defs"}

    def _strip_titles(self, node: Any) -> Any:
        if isinstance(node, list):
            return [self._strip_titles(item) for item in node]
        if not isinstance(node, dict):
            return node
        result = {}
        for key, value in node.items():
            if key == "properties" and isinstance(value, dict):
                # Property names may legitimately be "title"; only strip inside each property schema.
                result[key] = {name: self._strip_titles(prop) for name, prop in value.items()}
            elif key == "title" and isinstance(value, str):
                continue
            else:
                result[key] = self._strip_titles(value)
        return result
