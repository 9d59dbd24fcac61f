"""Conversion arithmetic: route every value through its category's base unit."""

from __future__ import annotations

from unit_conversion_mcp.conversion.catalog import UnitType, resolve
from unit_conversion_mcp.conversion.errors import CategoryMismatchError


def convert(value: float, from_unit: str, to_unit: str) -> tuple[float, UnitType]:
    """Convert *value* from *from_unit* to *to_unit*.

    The source unit is resolved before the target, so when both are unknown
    the error names the source. No rounding is applied and the value's sign
    or physical plausibility is not checked: negative masses and
    temperatures below absolute zero convert like any other number.

    Returns:
        ``(converted_value, unit_type)``

    Raises:
        UnknownUnitError: If either unit is not in the catalog.
        CategoryMismatchError: If the units measure different quantities.
    """
    source = resolve(from_unit)
    target = resolve(to_unit)
    if source.unit_type is not target.unit_type:
        raise CategoryMismatchError(from_unit, to_unit, source.unit_type, target.unit_type)
    return target.from_base(source.to_base(value)), source.unit_type
