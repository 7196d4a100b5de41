"""
Unit registry for dimensional calculations.

A fixed, process-wide table mapping every supported unit to its dimension,
its conversion to the dimension's base unit, and a human-readable name.

CONVENTIONS:
- Each dimension has exactly one base unit with a scalar factor of 1.0
- "1 unit = factor x base unit" for scalar units
- Affine units (temperature) carry an explicit (to_base, from_base) pair
- Factors for mph, knots, ft2, ft3, psi etc. are the handbook's rounded
  values, not exact SI definitions
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional

from aerounits.units.errors import RegistryError, UnknownUnit
from aerounits.units.temperature import c_to_f, f_to_c

if TYPE_CHECKING:
    from aerounits.units.quantity import Quantity

logger = logging.getLogger(__name__)


class Dimension(str, Enum):
    """Physical quantity category, independent of any unit."""
    MASS = "mass"
    LENGTH = "length"
    TIME = "time"
    AREA = "area"
    VOLUME = "volume"
    VELOCITY = "velocity"
    ACCELERATION = "acceleration"
    FORCE = "force"
    PRESSURE = "pressure"
    POWER = "power"
    ENERGY = "energy"
    DENSITY = "density"
    MOMENT = "moment"
    TEMPERATURE = "temperature"


class Unit(str, Enum):
    """Closed set of unit identifiers known to the registry."""
    # Mass
    KG = "kg"
    G = "g"
    LBS = "lbs"
    SLUG = "slug"
    OZ = "oz"
    # Length
    M = "m"
    CM = "cm"
    MM = "mm"
    FT = "ft"
    IN = "in"
    # Time
    S = "s"
    MIN = "min"
    HRS = "hrs"
    # Area
    M2 = "m2"
    FT2 = "ft2"
    IN2 = "in2"
    # Volume
    M3 = "m3"
    L = "l"
    FT3 = "ft3"
    IN3 = "in3"
    GAL = "gal"
    # Velocity
    MS = "ms"
    MPH = "mph"
    KNOTS = "knots"
    KPH = "kph"
    # Acceleration
    MS2 = "ms2"
    FTS2 = "fts2"
    # Force
    N = "n"
    LBF = "lbf"
    # Pressure
    PA = "pa"
    KPA = "kpa"
    PSI = "psi"
    PSF = "psf"
    INHG = "inhg"
    # Power
    W = "w"
    KW = "kw"
    HP = "hp"
    # Energy
    J = "j"
    KJ = "kj"
    KWH = "kwh"
    # Density
    KGM3 = "kgm3"
    SLUGFT3 = "slugft3"
    # Moment
    NM = "nm"
    LBFT = "lbft"
    # Temperature
    C = "c"
    F = "f"


@dataclass(frozen=True)
class Conversion:
    """
    Conversion between a unit and its dimension's base unit.

    Every conversion is a pair of pure functions so the converter has a
    single code path. ``factor`` is set for scalar conversions only.
    """
    to_base: Callable[[float], float]
    from_base: Callable[[float], float]
    factor: Optional[float] = None

    @property
    def is_base(self) -> bool:
        """True for the base unit of a dimension (scalar factor of 1.0)."""
        return self.factor == 1.0


def scalar(factor: float) -> Conversion:
    """Linear conversion: 1 unit = factor x base unit."""
    return Conversion(
        to_base=lambda v: v * factor,
        from_base=lambda v: v / factor,
        factor=factor,
    )


def affine(to_base: Callable[[float], float], from_base: Callable[[float], float]) -> Conversion:
    """Conversion needing an offset as well as a scale."""
    return Conversion(to_base=to_base, from_base=from_base)


@dataclass(frozen=True)
class UnitDescriptor:
    """Registry entry for a single unit."""
    dimension: Dimension
    conversion: Conversion
    description: str


def _entry(dimension: Dimension, conversion: float | Conversion, description: str) -> UnitDescriptor:
    if not isinstance(conversion, Conversion):
        conversion = scalar(float(conversion))
    return UnitDescriptor(dimension, conversion, description)


UNITS: Mapping[Unit, UnitDescriptor] = MappingProxyType({
    Unit.KG: _entry(Dimension.MASS, 1.0, "kilograms"),
    Unit.G: _entry(Dimension.MASS, 0.001, "grams"),
    Unit.LBS: _entry(Dimension.MASS, 0.45359237, "pounds"),
    Unit.SLUG: _entry(Dimension.MASS, 32.174049 * 0.45359237, "slugs"),
    Unit.OZ: _entry(Dimension.MASS, 0.02835, "ounces"),

    Unit.M: _entry(Dimension.LENGTH, 1.0, "metres"),
    Unit.CM: _entry(Dimension.LENGTH, 0.01, "centimetres"),
    Unit.MM: _entry(Dimension.LENGTH, 0.001, "millimetres"),
    Unit.FT: _entry(Dimension.LENGTH, 0.3048, "feet"),
    Unit.IN: _entry(Dimension.LENGTH, 0.0254, "inches"),

    Unit.S: _entry(Dimension.TIME, 1.0, "seconds"),
    Unit.MIN: _entry(Dimension.TIME, 60.0, "minutes"),
    Unit.HRS: _entry(Dimension.TIME, 3600.0, "hours"),

    Unit.M2: _entry(Dimension.AREA, 1.0, "square metres"),
    Unit.FT2: _entry(Dimension.AREA, 1 / 10.76, "square feet"),
    Unit.IN2: _entry(Dimension.AREA, 1 / (10.76 * 144), "square inches"),

    Unit.M3: _entry(Dimension.VOLUME, 1.0, "cubic metres"),
    Unit.L: _entry(Dimension.VOLUME, 0.001, "litres"),
    Unit.FT3: _entry(Dimension.VOLUME, 0.028, "cubic feet"),
    Unit.IN3: _entry(Dimension.VOLUME, 1 / 61_023.744, "cubic inches"),
    Unit.GAL: _entry(Dimension.VOLUME, 0.003785, "US gallons"),

    Unit.MS: _entry(Dimension.VELOCITY, 1.0, "metres per second"),
    Unit.MPH: _entry(Dimension.VELOCITY, 0.45, "miles per hour"),
    Unit.KNOTS: _entry(Dimension.VELOCITY, 0.51, "knots"),
    Unit.KPH: _entry(Dimension.VELOCITY, 1 / 3.6, "kilometres per hour"),

    Unit.MS2: _entry(Dimension.ACCELERATION, 1.0, "metres per second squared"),
    Unit.FTS2: _entry(Dimension.ACCELERATION, 0.3048, "feet per second squared"),

    Unit.N: _entry(Dimension.FORCE, 1.0, "newtons"),
    Unit.LBF: _entry(Dimension.FORCE, 4.448222, "pound force"),

    Unit.PA: _entry(Dimension.PRESSURE, 1.0, "pascals"),  # N/m2
    Unit.KPA: _entry(Dimension.PRESSURE, 1_000, "kilopascals"),
    Unit.PSI: _entry(Dimension.PRESSURE, 6_895, "pounds per square inch"),
    Unit.PSF: _entry(Dimension.PRESSURE, 47.8803, "pounds per square foot"),
    Unit.INHG: _entry(Dimension.PRESSURE, 3_390, "inches of mercury"),

    Unit.W: _entry(Dimension.POWER, 1.0, "watts"),
    Unit.KW: _entry(Dimension.POWER, 1_000, "kilowatts"),
    Unit.HP: _entry(Dimension.POWER, 746, "horsepower"),

    Unit.J: _entry(Dimension.ENERGY, 1.0, "joules"),
    Unit.KJ: _entry(Dimension.ENERGY, 1_000, "kilojoules"),
    Unit.KWH: _entry(Dimension.ENERGY, 3.6e6, "kilowatt hours"),

    Unit.KGM3: _entry(Dimension.DENSITY, 1.0, "kilograms per cubic metre"),
    Unit.SLUGFT3: _entry(Dimension.DENSITY, 515.378818, "slugs per cubic foot"),

    Unit.NM: _entry(Dimension.MOMENT, 1.0, "newton metres"),
    Unit.LBFT: _entry(Dimension.MOMENT, 1.3558179483314004, "pound feet"),

    Unit.C: _entry(Dimension.TEMPERATURE, 1.0, "degrees centigrade"),
    Unit.F: _entry(Dimension.TEMPERATURE, affine(f_to_c, c_to_f), "degrees fahrenheit"),
})

logger.debug(
    "Unit registry initialized: %d units across %d dimensions",
    len(UNITS),
    len({d.dimension for d in UNITS.values()}),
)


def parse_unit(unit_id: Unit | str, role: str | None = None) -> Unit:
    """
    Resolve a unit identifier to a member of the closed ``Unit`` set.

    Raises:
        UnknownUnit: if the identifier is not registered
    """
    if isinstance(unit_id, Unit):
        return unit_id
    try:
        return Unit(unit_id)
    except ValueError:
        raise UnknownUnit(unit_id, role) from None


def lookup(unit_id: Unit | str, role: str | None = None) -> UnitDescriptor:
    """
    Get the registry entry for a unit.

    Args:
        unit_id: Unit member or its string identifier (e.g. "ft")
        role: Optional role used in the error message ("source", "destination")

    Returns:
        The unit's descriptor

    Raises:
        UnknownUnit: if the identifier is not registered
    """
    unit = parse_unit(unit_id, role)
    descriptor = UNITS.get(unit)
    if descriptor is None:
        raise UnknownUnit(unit_id, role)
    return descriptor


def dimension_of(quantity: "Quantity") -> Dimension:
    """Dimension of a quantity's unit, e.g. velocity for ``{10, kph}``."""
    return lookup(quantity.unit).dimension


def describe(quantity: "Quantity") -> str:
    """Human-readable name of a quantity's unit, e.g. "kilometres per hour"."""
    return lookup(quantity.unit).description


def units_of(dimension: Dimension) -> tuple[Unit, ...]:
    """All registered units of a dimension, in registry order."""
    return tuple(unit for unit, d in UNITS.items() if d.dimension == dimension)


def check_registry() -> None:
    """
    Verify that every unit has a descriptor and every dimension exactly one base unit.

    Raises:
        RegistryError: describing the first violated invariant
    """
    missing = [unit.value for unit in Unit if unit not in UNITS]
    if missing:
        raise RegistryError(f"Units without a registry entry: {', '.join(missing)}")

    base_counts = Counter(d.dimension for d in UNITS.values() if d.conversion.is_base)
    for dimension in Dimension:
        if base_counts[dimension] != 1:
            raise RegistryError(
                f"Dimension '{dimension.value}' has {base_counts[dimension]} base units, expected 1"
            )
