"""Conversion error hierarchy.

Every error carries ``code``, ``message`` and ``details`` so that
:class:`~unit_conversion_mcp.adapters.errors.ErrorMapper` can treat it like
any other coded tool error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from unit_conversion_mcp.constants import ErrorCodes

if TYPE_CHECKING:
    from unit_conversion_mcp.conversion.catalog import UnitType


class ConversionError(Exception):
    """Base class for errors raised by the conversion engine."""

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}


class UnknownUnitError(ConversionError):
    """The unit name matches no catalog alias."""

    def __init__(self, unit: str) -> None:
        super().__init__(
            code=ErrorCodes["UNKNOWN_UNIT"],
            message=f"Unsupported unit: {unit}",
            details={"unit": unit},
        )
        self.unit = unit


class CategoryMismatchError(ConversionError):
    """Both units resolve but measure different quantities."""

    def __init__(self, from_unit: str, to_unit: str, from_type: UnitType, to_type: UnitType) -> None:
        super().__init__(
            code=ErrorCodes["CATEGORY_MISMATCH"],
            message=f"Cannot convert {from_unit} ({from_type}) to {to_unit} ({to_type})",
            details={
                "from_unit": from_unit,
                "to_unit": to_unit,
                "from_type": str(from_type),
                "to_type": str(to_type),
            },
        )
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.from_type = from_type
        self.to_type = to_type


class InvalidArgumentsError(ConversionError):
    """The tool arguments do not have the ``value``/``from_unit``/``to_unit`` shape."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        super().__init__(
            code=ErrorCodes["INVALID_ARGUMENTS"],
            message="Invalid arguments for unit conversion",
            details={"errors": errors},
        )
        self.errors = errors
