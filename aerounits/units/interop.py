"""
Bridge between aerounits quantities and pint.

Uses a shared pint registry so results can be handed to code that works
in pint, and pint quantities can be brought back into the registry's
closed unit set.
"""

import logging
from types import MappingProxyType

import pint

from aerounits.units.convert import ROUND_DECIMALS
from aerounits.units.errors import DimensionMismatch
from aerounits.units.quantity import Quantity
from aerounits.units.registry import Unit, lookup, parse_unit

logger = logging.getLogger(__name__)

# Shared pint registry for the whole package
ureg = pint.UnitRegistry()

# Shorthand for creating pint quantities
Q_ = ureg.Quantity

# pint expression for every registered unit
PINT_UNITS = MappingProxyType({
    Unit.KG: "kilogram",
    Unit.G: "gram",
    Unit.LBS: "pound",
    Unit.SLUG: "slug",
    Unit.OZ: "ounce",
    Unit.M: "meter",
    Unit.CM: "centimeter",
    Unit.MM: "millimeter",
    Unit.FT: "foot",
    Unit.IN: "inch",
    Unit.S: "second",
    Unit.MIN: "minute",
    Unit.HRS: "hour",
    Unit.M2: "meter ** 2",
    Unit.FT2: "foot ** 2",
    Unit.IN2: "inch ** 2",
    Unit.M3: "meter ** 3",
    Unit.L: "liter",
    Unit.FT3: "foot ** 3",
    Unit.IN3: "inch ** 3",
    Unit.GAL: "gallon",
    Unit.MS: "meter / second",
    Unit.MPH: "mile / hour",
    Unit.KNOTS: "knot",
    Unit.KPH: "kilometer / hour",
    Unit.MS2: "meter / second ** 2",
    Unit.FTS2: "foot / second ** 2",
    Unit.N: "newton",
    Unit.LBF: "force_pound",
    Unit.PA: "pascal",
    Unit.KPA: "kilopascal",
    Unit.PSI: "psi",
    Unit.PSF: "force_pound / foot ** 2",
    Unit.INHG: "inch_Hg",
    Unit.W: "watt",
    Unit.KW: "kilowatt",
    Unit.HP: "horsepower",
    Unit.J: "joule",
    Unit.KJ: "kilojoule",
    Unit.KWH: "kilowatt_hour",
    Unit.KGM3: "kilogram / meter ** 3",
    Unit.SLUGFT3: "slug / foot ** 3",
    Unit.NM: "newton * meter",
    Unit.LBFT: "force_pound * foot",
    Unit.C: "degree_Celsius",
    Unit.F: "degree_Fahrenheit",
})


def to_pint(quantity: Quantity) -> pint.Quantity:
    """
    Express a quantity as a pint quantity in the equivalent pint unit.

    The numeric value is carried over unchanged; pint's own definitions are
    only applied on later conversions within pint.
    """
    return Q_(quantity.value, PINT_UNITS[quantity.unit])


def from_pint(pint_quantity: pint.Quantity, unit: Unit | str) -> Quantity:
    """
    Convert a pint quantity into a registered unit using pint's definitions.

    Args:
        pint_quantity: Any pint quantity
        unit: Registered unit to express the result in

    Returns:
        New Quantity, rounded like ``convert``

    Raises:
        UnknownUnit: if ``unit`` is not registered
        DimensionMismatch: if pint cannot convert between the two units
    """
    target_unit = parse_unit(unit, role="destination")
    target = lookup(target_unit)
    try:
        magnitude = pint_quantity.to(PINT_UNITS[target_unit]).magnitude
    except pint.DimensionalityError:
        logger.debug("pint rejected %s -> %s", pint_quantity.units, target_unit.value)
        raise DimensionMismatch(
            str(pint_quantity.units),
            str(pint_quantity.dimensionality),
            target.description,
            target.dimension,
        ) from None
    return Quantity(round(float(magnitude), ROUND_DECIMALS), target_unit)
