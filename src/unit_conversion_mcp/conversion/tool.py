"""UnitConversionTool: the ``unit_conversion`` tool exposed over MCP."""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from unit_conversion_mcp.adapters.errors import format_validation_errors, validation_errors_from_pydantic
from unit_conversion_mcp.adapters.schema import SchemaConverter
from unit_conversion_mcp.constants import UNIT_CONVERSION_TOOL
from unit_conversion_mcp.conversion import messages
from unit_conversion_mcp.conversion.arithmetic import convert
from unit_conversion_mcp.conversion.catalog import UnitType, resolve, units_for
from unit_conversion_mcp.conversion.errors import (
    CategoryMismatchError,
    InvalidArgumentsError,
    UnknownUnitError,
)
from unit_conversion_mcp.registry import ToolHints

logger = logging.getLogger(__name__)

_UNIT_EXAMPLES = (
    "meters, kilometers, miles, feet, inches, yards, nautical_miles, liters, gallons, "
    "kilograms, pounds, celsius, fahrenheit, bytes, bits, pascal, psi, mph, kph, knots, beaufort"
)


class ConversionParams(BaseModel):
    """Arguments accepted by the ``unit_conversion`` tool."""

    model_config = ConfigDict(strict=True)

    value: float = Field(..., description="The value to convert")
    from_unit: str = Field(..., description=f"The unit to convert from (e.g., {_UNIT_EXAMPLES})")
    to_unit: str = Field(..., description=f"The target unit to convert to (e.g., {_UNIT_EXAMPLES})")


class ConversionResult(BaseModel):
    original: str = Field(..., description='Input as "<value> <from_unit>"')
    converted: str = Field(..., description='Result as "<value> <to_unit>"')
    value: float | None = Field(..., description="Converted value at full precision (null if not finite)")
    unit_type: str = Field(..., description="Category of both units")


def _describe() -> str:
    labels = {
        UnitType.DISTANCE: "distance",
        UnitType.VOLUME: "volume",
        UnitType.WEIGHT: "weight",
        UnitType.TEMPERATURE: "temperature",
        UnitType.DIGITAL: "digital storage",
        UnitType.PRESSURE: "pressure",
        UnitType.SPEED: "speed",
    }
    parts = [
        f"{labels[unit_type]} ({', '.join(unit.name for unit in units_for(unit_type))})" for unit_type in UnitType
    ]
    return "Convert between different units including " + ", ".join(parts[:-1]) + f", and {parts[-1]}"


def _document() -> str:
    lines = ["Unit conversion catalog", "", "Units are case-insensitive. Aliases are shown in parentheses.", ""]
    for unit_type in UnitType:
        lines.append(f"{unit_type}:")
        for unit in units_for(unit_type):
            alias_text = f" ({', '.join(unit.aliases)})" if unit.aliases else ""
            lines.append(f"  - {unit.name}{alias_text}")
        lines.append("")
    lines.append("Beaufort is a banded scale; converting to it and back does not return the original speed.")
    return "\n".join(lines)


class UnitConversionTool:
    """Converts a value between two units of the same physical quantity.

    ``execute`` never raises for bad input: missing arguments, malformed
    arguments, unknown units and cross-category requests all come back as
    explanatory text the caller can read and correct.
    """

    name = UNIT_CONVERSION_TOOL
    description = _describe()
    input_model = ConversionParams
    annotations = ToolHints(readonly=True, idempotent=True, open_world=False)
    documentation = _document()

    def __init__(self) -> None:
        self.input_schema = SchemaConverter().convert_model(self.input_model)

    def execute(self, arguments: Any | None) -> dict[str, Any] | str:
        """Validate *arguments*, convert, and return the result payload or an explanation.

        Returns:
            ``{"original", "converted", "value", "unit_type"}`` on success,
            otherwise a message string.
        """
        if arguments is None or arguments == {}:
            return messages.USAGE_MESSAGE

        try:
            params = self.parse_arguments(arguments)
        except InvalidArgumentsError as error:
            logger.debug("Rejected arguments %r: %s", arguments, error.errors)
            return messages.invalid_arguments_message(format_validation_errors(error.errors))

        try:
            result, unit_type = convert(params.value, params.from_unit, params.to_unit)
        except UnknownUnitError as error:
            if error.unit == params.from_unit:
                logger.debug("Unknown source unit %r", params.from_unit)
                return messages.unknown_source_message(params.from_unit)
            logger.debug("Unknown target unit %r", params.to_unit)
            return messages.invalid_target_message(params.from_unit, resolve(params.from_unit).unit_type, params.to_unit)
        except CategoryMismatchError as error:
            logger.debug("Cannot convert %r to %r: %s", params.from_unit, params.to_unit, error.code)
            return messages.invalid_target_message(params.from_unit, error.from_type, params.to_unit)

        logger.debug("Converted %s %s -> %s %s", params.value, params.from_unit, result, params.to_unit)
        return ConversionResult(
            original=f"{messages.format_number(params.value)} {params.from_unit}",
            converted=f"{messages.format_number(result)} {params.to_unit}",
            value=result if math.isfinite(result) else None,
            unit_type=str(unit_type),
        ).model_dump()

    def parse_arguments(self, arguments: Any) -> ConversionParams:
        """Validate raw tool arguments.

        Raises:
            InvalidArgumentsError: If the shape or types are wrong.
        """
        try:
            return self.input_model.model_validate(arguments)
        except ValidationError as error:
            errors = validation_errors_from_pydantic(error)
            raise InvalidArgumentsError(errors) from error

