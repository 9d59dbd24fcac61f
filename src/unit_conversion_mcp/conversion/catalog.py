"""Unit catalog: categories, canonical units, aliases and base-unit relations."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from unit_conversion_mcp.conversion.errors import UnknownUnitError


class UnitType(str, Enum):
    """Physical quantity a unit measures. Units only convert within one type."""

    DISTANCE = "distance"
    VOLUME = "volume"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    DIGITAL = "digital"
    PRESSURE = "pressure"
    SPEED = "speed"

    def __str__(self) -> str:
        return self.value


BASE_UNITS: Mapping[UnitType, str] = MappingProxyType(
    {
        UnitType.DISTANCE: "meters",
        UnitType.VOLUME: "liters",
        UnitType.WEIGHT: "kilograms",
        UnitType.TEMPERATURE: "celsius",
        UnitType.DIGITAL: "bytes",
        UnitType.PRESSURE: "pascal",
        UnitType.SPEED: "meters_per_second",
    }
)


@dataclass(frozen=True)
class Unit:
    """A canonical unit with its aliases and conversions to/from the base unit."""

    name: str
    aliases: tuple[str, ...]
    unit_type: UnitType
    to_base: Callable[[float], float]
    from_base: Callable[[float], float]

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)


def _identity(value: float) -> float:
    return value


def _scaled(name: str, unit_type: UnitType, factor: float, *aliases: str) -> Unit:
    return Unit(
        name=name,
        aliases=aliases,
        unit_type=unit_type,
        to_base=lambda v: v * factor,
        from_base=lambda v: v / factor,
    )


def _divided(name: str, unit_type: UnitType, divisor: float, *aliases: str) -> Unit:
    return Unit(
        name=name,
        aliases=aliases,
        unit_type=unit_type,
        to_base=lambda v: v / divisor,
        from_base=lambda v: v * divisor,
    )


def _base(name: str, unit_type: UnitType, *aliases: str) -> Unit:
    return Unit(name=name, aliases=aliases, unit_type=unit_type, to_base=_identity, from_base=_identity)


def _bits(name: str, power: int, *aliases: str) -> Unit:
    # 1024**power bits, eight bits to a byte
    factor = 1024.0**power
    return Unit(
        name=name,
        aliases=aliases,
        unit_type=UnitType.DIGITAL,
        to_base=lambda v: v * factor / 8.0,
        from_base=lambda v: v * 8.0 / factor,
    )


# ---------------------------------------------------------------------------
# Beaufort wind force
# ---------------------------------------------------------------------------

# Representative wind speed in m/s for each force.
BEAUFORT_SPEEDS: tuple[float, ...] = (
    0.0,
    1.5,
    3.0,
    5.0,
    7.5,
    10.0,
    12.5,
    15.5,
    18.5,
    22.0,
    26.0,
    30.0,
    35.0,
)

# Upper bounds (exclusive, m/s) for forces 0..11; anything at or above the last is force 12.
BEAUFORT_BANDS: tuple[float, ...] = (0.5, 2.0, 4.0, 6.0, 9.0, 11.0, 14.0, 17.0, 21.0, 24.0, 28.0, 33.0)


def beaufort_to_mps(force: float) -> float:
    """Map a Beaufort force to a wind speed in m/s.

    The force is truncated toward zero first, so 3.9 reads as force 3.
    Anything that does not land on 0..12 (negative forces, forces above 12,
    infinities) clamps to the hurricane-force speed; NaN reads as force 0.
    """
    if math.isnan(force):
        return BEAUFORT_SPEEDS[0]
    if math.isinf(force):
        return BEAUFORT_SPEEDS[-1]
    index = int(force)
    if 0 <= index < len(BEAUFORT_SPEEDS):
        return BEAUFORT_SPEEDS[index]
    return BEAUFORT_SPEEDS[-1]


def mps_to_beaufort(mps: float) -> float:
    """Map a wind speed in m/s to the Beaufort force whose band contains it.

    Not an inverse of :func:`beaufort_to_mps`; the scale is banded.
    """
    for force, upper in enumerate(BEAUFORT_BANDS):
        if mps < upper:
            return float(force)
    return float(len(BEAUFORT_BANDS))


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

_KIB = 1024.0

UNITS: tuple[Unit, ...] = (
    # Distance (meters)
    _base("meters", UnitType.DISTANCE, "m"),
    _scaled("kilometers", UnitType.DISTANCE, 1000.0, "km"),
    _scaled("miles", UnitType.DISTANCE, 1609.344, "mi"),
    _scaled("feet", UnitType.DISTANCE, 0.3048, "ft"),
    _scaled("inches", UnitType.DISTANCE, 0.0254, "in"),
    _scaled("yards", UnitType.DISTANCE, 0.9144, "yd"),
    _scaled("nautical_miles", UnitType.DISTANCE, 1852.0, "nmi"),
    # Volume (liters)
    _base("liters", UnitType.VOLUME, "l"),
    _divided("milliliters", UnitType.VOLUME, 1000.0, "ml"),
    _scaled("gallons", UnitType.VOLUME, 3.78541, "gal"),
    _scaled("quarts", UnitType.VOLUME, 0.946353, "qt"),
    _scaled("pints", UnitType.VOLUME, 0.473176, "pt"),
    _scaled("cups", UnitType.VOLUME, 0.236588),
    _scaled("fluid_ounces", UnitType.VOLUME, 0.0295735, "fl_oz"),
    # Weight (kilograms)
    _base("kilograms", UnitType.WEIGHT, "kg"),
    _divided("grams", UnitType.WEIGHT, 1000.0, "g"),
    _scaled("pounds", UnitType.WEIGHT, 0.453592, "lb", "lbs"),
    _scaled("ounces", UnitType.WEIGHT, 0.0283495, "oz"),
    _scaled("stones", UnitType.WEIGHT, 6.35029, "st"),
    # Temperature (celsius), affine
    _base("celsius", UnitType.TEMPERATURE, "c"),
    Unit(
        name="fahrenheit",
        aliases=("f",),
        unit_type=UnitType.TEMPERATURE,
        to_base=lambda v: (v - 32.0) * 5.0 / 9.0,
        from_base=lambda v: v * 9.0 / 5.0 + 32.0,
    ),
    Unit(
        name="kelvin",
        aliases=("k",),
        unit_type=UnitType.TEMPERATURE,
        to_base=lambda v: v - 273.15,
        from_base=lambda v: v + 273.15,
    ),
    # Digital (bytes), binary prefixes
    _base("bytes", UnitType.DIGITAL, "b"),
    _scaled("kilobytes", UnitType.DIGITAL, _KIB, "kb"),
    _scaled("megabytes", UnitType.DIGITAL, _KIB**2, "mb"),
    _scaled("gigabytes", UnitType.DIGITAL, _KIB**3, "gb"),
    _scaled("terabytes", UnitType.DIGITAL, _KIB**4, "tb"),
    _bits("bits", 0),
    _bits("kilobits", 1, "kbit"),
    _bits("megabits", 2, "mbit"),
    _bits("gigabits", 3, "gbit"),
    # Pressure (pascal)
    _base("pascal", UnitType.PRESSURE, "pa"),
    _scaled("kilopascal", UnitType.PRESSURE, 1000.0, "kpa"),
    _scaled("megapascal", UnitType.PRESSURE, 1_000_000.0, "mpa"),
    _scaled("bar", UnitType.PRESSURE, 100_000.0),
    _scaled("psi", UnitType.PRESSURE, 6894.76),
    _scaled("atmosphere", UnitType.PRESSURE, 101_325.0, "atm"),
    _scaled("torr", UnitType.PRESSURE, 133.322),
    _scaled("mmhg", UnitType.PRESSURE, 133.322),
    # Speed (meters per second)
    _base("meters_per_second", UnitType.SPEED, "mps", "m/s"),
    _divided("kilometers_per_hour", UnitType.SPEED, 3.6, "kph", "km/h"),
    _scaled("miles_per_hour", UnitType.SPEED, 0.44704, "mph"),
    _scaled("knots", UnitType.SPEED, 0.514444, "kt"),
    _scaled("feet_per_second", UnitType.SPEED, 0.3048, "fps", "ft/s"),
    Unit(
        name="beaufort",
        aliases=(),
        unit_type=UnitType.SPEED,
        to_base=beaufort_to_mps,
        from_base=mps_to_beaufort,
    ),
)


def build_alias_map(units: Iterable[Unit]) -> Mapping[str, Unit]:
    """Index units by every name they answer to.

    Raises:
        ValueError: If two units claim the same name.
    """
    aliases: dict[str, Unit] = {}
    for unit in units:
        for name in unit.names:
            key = name.lower()
            if key in aliases:
                raise ValueError(f"Duplicate unit alias {key!r}: {aliases[key].name} and {unit.name}")
            aliases[key] = unit
    return MappingProxyType(aliases)


ALIASES: Mapping[str, Unit] = build_alias_map(UNITS)


def resolve(name: str) -> Unit:
    """Look up a unit by name or alias, ignoring case.

    Raises:
        UnknownUnitError: If nothing in the catalog answers to *name*.
    """
    unit = ALIASES.get(name.lower())
    if unit is None:
        raise UnknownUnitError(name)
    return unit


def units_for(unit_type: UnitType) -> list[Unit]:
    """Return the canonical units of one category, in catalog order."""
    return [unit for unit in UNITS if unit.unit_type is unit_type]
