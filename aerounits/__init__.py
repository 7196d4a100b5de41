"""
aerounits

Units-of-measure arithmetic for light plane design. Tag values with a unit,
convert between compatible units, and combine quantities with arithmetic
that infers the resulting unit or rejects dimensionally invalid operations.

WARNING: The handbook formulae in aerounits.aero provide rough conceptual
estimates only. Not for certification or detailed design purposes.

Usage:
    python -m aerounits units
    python -m aerounits convert 10 ms kph
    python -m aerounits q 175 mph
    python -m aerounits serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "aerounits"

from aerounits.units import (
    Dimension,
    Unit,
    Quantity,
    construct,
    convert,
    dimension_of,
    describe,
    add,
    subtract,
    multiply,
    divide,
    negate,
    UnitError,
    UnknownUnit,
    DimensionMismatch,
    AmbiguousOrMissingDimensionRelation,
    MixedOperands,
)

__all__ = [
    "Dimension",
    "Unit",
    "Quantity",
    "construct",
    "convert",
    "dimension_of",
    "describe",
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "UnitError",
    "UnknownUnit",
    "DimensionMismatch",
    "AmbiguousOrMissingDimensionRelation",
    "MixedOperands",
]
