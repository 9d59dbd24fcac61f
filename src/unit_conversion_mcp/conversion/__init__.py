"""Conversion engine: unit catalog, arithmetic and the unit_conversion tool."""

from unit_conversion_mcp.conversion.arithmetic import convert
from unit_conversion_mcp.conversion.catalog import UnitType, resolve
from unit_conversion_mcp.conversion.errors import (
    CategoryMismatchError,
    ConversionError,
    InvalidArgumentsError,
    UnknownUnitError,
)
from unit_conversion_mcp.conversion.tool import UnitConversionTool

__all__ = [
    "convert",
    "resolve",
    "UnitType",
    "ConversionError",
    "UnknownUnitError",
    "CategoryMismatchError",
    "InvalidArgumentsError",
    "UnitConversionTool",
]
