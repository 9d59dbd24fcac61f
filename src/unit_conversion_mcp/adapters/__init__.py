"""Adapters: schema conversion, annotation mapping, error mapping."""

from unit_conversion_mcp.adapters.annotations import AnnotationMapper
from unit_conversion_mcp.adapters.errors import ErrorMapper
from unit_conversion_mcp.adapters.schema import SchemaConverter

__all__ = ["AnnotationMapper", "ErrorMapper", "SchemaConverter"]
