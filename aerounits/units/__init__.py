"""
Units-of-measure core.

Provides:
- A fixed registry of units grouped into dimensions
- Dimension algebra to infer the result of multiplying/dividing dimensions
- Conversion between units of the same dimension
- Unit-aware arithmetic over plain numbers and quantities

All tables are immutable module-level data; every operation is pure.
"""

from aerounits.units.errors import (
    UnitError,
    UnknownUnit,
    DimensionMismatch,
    AmbiguousOrMissingDimensionRelation,
    MixedOperands,
    RegistryError,
)
from aerounits.units.registry import (
    Dimension,
    Unit,
    UnitDescriptor,
    Conversion,
    UNITS,
    lookup,
    parse_unit,
    dimension_of,
    describe,
    units_of,
    check_registry,
)
from aerounits.units.algebra import (
    DimensionRelation,
    DIMENSION_RELATIONS,
    multiply_dimensions,
    divide_dimensions,
    base_unit_of,
    check_relations,
)
from aerounits.units.quantity import Quantity, Operand, construct, is_number
from aerounits.units.convert import convert, ROUND_DECIMALS
from aerounits.units.arithmetic import add, subtract, multiply, divide, negate, positive
from aerounits.units.temperature import f_to_c, c_to_f

__all__ = [
    # Errors
    "UnitError",
    "UnknownUnit",
    "DimensionMismatch",
    "AmbiguousOrMissingDimensionRelation",
    "MixedOperands",
    "RegistryError",
    # Registry
    "Dimension",
    "Unit",
    "UnitDescriptor",
    "Conversion",
    "UNITS",
    "lookup",
    "parse_unit",
    "dimension_of",
    "describe",
    "units_of",
    "check_registry",
    # Dimension algebra
    "DimensionRelation",
    "DIMENSION_RELATIONS",
    "multiply_dimensions",
    "divide_dimensions",
    "base_unit_of",
    "check_relations",
    # Quantities
    "Quantity",
    "Operand",
    "construct",
    "is_number",
    "convert",
    "ROUND_DECIMALS",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "positive",
    # Temperature
    "f_to_c",
    "c_to_f",
]
