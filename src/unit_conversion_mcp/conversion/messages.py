"""Human-readable texts returned by the unit conversion tool.

Failures are reported as tool output rather than protocol errors, so each
message tells the caller what went wrong and what it can send instead.
"""

from __future__ import annotations

import math
from decimal import Decimal

from unit_conversion_mcp.conversion.catalog import UnitType, units_for

USAGE_MESSAGE = (
    "Error: Missing arguments for unit conversion.\n\n"
    "To use this tool, please provide:\n"
    "- value: The numeric value to convert (e.g., 10)\n"
    '- from_unit: The source unit (e.g., "meters", "pounds", "celsius")\n'
    '- to_unit: The target unit (e.g., "feet", "kilograms", "fahrenheit")\n\n'
    'Example: {"value": 10, "from_unit": "meters", "to_unit": "feet"}'
)

_CATEGORY_LABELS = {
    UnitType.DISTANCE: "Distance",
    UnitType.VOLUME: "Volume",
    UnitType.WEIGHT: "Weight",
    UnitType.TEMPERATURE: "Temperature",
    UnitType.DIGITAL: "Digital",
    UnitType.PRESSURE: "Pressure",
    UnitType.SPEED: "Speed",
}


def category_units(unit_type: UnitType) -> str:
    """Comma-separated canonical unit names of one category."""
    return ", ".join(unit.name for unit in units_for(unit_type))


def supported_units_by_category() -> str:
    """One ``Label: unit, unit, ...`` line per category."""
    return "\n".join(f"{_CATEGORY_LABELS[unit_type]}: {category_units(unit_type)}" for unit_type in UnitType)


def invalid_arguments_message(detail: str) -> str:
    return (
        "Error: Invalid arguments for unit conversion.\n\n"
        f"Parsing failed with: {detail}\n\n"
        "Required parameters:\n"
        "- value: A number (e.g., 10.5)\n"
        "- from_unit: A string specifying the source unit\n"
        "- to_unit: A string specifying the target unit\n\n"
        "Please ensure your JSON is properly formatted and includes all required fields."
    )


def unknown_source_message(from_unit: str) -> str:
    return (
        f'Error: Unrecognized source unit "{from_unit}".\n\n'
        "Supported units by category:\n\n"
        f"{supported_units_by_category()}\n\n"
        "Note: Units are case-insensitive. Try using the full unit name or common abbreviations."
    )


def invalid_target_message(from_unit: str, unit_type: UnitType, to_unit: str) -> str:
    return (
        f'Error: Cannot convert from {from_unit} ({unit_type}) to "{to_unit}".\n\n'
        f'The target unit "{to_unit}" is either:\n'
        f"1. Not supported for {unit_type} conversions\n"
        "2. From a different unit category\n"
        "3. Misspelled\n\n"
        f"Supported {unit_type} units: {category_units(unit_type)}\n\n"
        "Note: You can only convert between units of the same type "
        "(e.g., distance to distance, weight to weight)."
    )


def format_number(value: float) -> str:
    """Render a float in shortest round-trip form without exponent or trailing ``.0``.

    >>> format_number(10.0)
    '10'
    >>> format_number(32.80839895013123)
    '32.80839895013123'
    >>> format_number(1e21)
    '1000000000000000000000'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
