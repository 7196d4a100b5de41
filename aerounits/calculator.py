"""
Request handlers shared by the CLI and the HTTP API.

Each function takes a validated request model, runs it through the units
core and returns a response model. Unit errors propagate to the caller,
which decides how to report them.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from aerounits.models.schemas import (
    CalculationRequest,
    CalculationResult,
    ConversionResult,
    ConvertRequest,
    DimensionInfo,
    Operation,
    QuantityModel,
    UnitInfo,
    from_operand,
    to_operand,
)
from aerounits.units import (
    DIMENSION_RELATIONS,
    UNITS,
    Dimension,
    Quantity,
    add,
    base_unit_of,
    convert,
    divide,
    multiply,
    negate,
    subtract,
    units_of,
)

BINARY_OPERATIONS: dict[Operation, Callable] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}


def calculate(request: CalculationRequest) -> CalculationResult:
    """
    Evaluate an arithmetic request.

    Raises:
        ValueError: if the result overflows to inf or nan (unit errors
            are ValueErrors too)
    """
    a = to_operand(request.a)

    if request.operation == Operation.NEGATE:
        result = negate(a)
    else:
        result = BINARY_OPERATIONS[request.operation](a, to_operand(request.b))

    value = result.value if isinstance(result, Quantity) else result
    if not math.isfinite(value):
        raise ValueError(f"{request.operation.value} produced a non-finite result ({value})")

    if isinstance(result, Quantity):
        return CalculationResult(
            operation=request.operation,
            result=from_operand(result),
            dimension=result.dimension,
            description=result.description,
        )
    return CalculationResult(operation=request.operation, result=from_operand(result))


def convert_quantity(request: ConvertRequest) -> ConversionResult:
    """Evaluate a conversion request."""
    source = request.quantity.to_quantity()
    result = convert(source, request.to_unit)
    return ConversionResult(
        source=request.quantity,
        result=QuantityModel.from_quantity(result),
        dimension=result.dimension,
    )


def list_units(dimension: Optional[Dimension] = None) -> list[UnitInfo]:
    """Registry entries, optionally filtered to one dimension."""
    units = units_of(dimension) if dimension is not None else tuple(UNITS)
    return [UnitInfo.from_unit(unit) for unit in units]


def list_dimensions() -> list[DimensionInfo]:
    """Every dimension with its base unit, units and relations."""
    infos = []
    for dimension in Dimension:
        relations = [
            f"{r.product.value} = {r.factor_a.value} x {r.factor_b.value}"
            for r in DIMENSION_RELATIONS
            if dimension in (r.product, r.factor_a, r.factor_b)
        ]
        infos.append(
            DimensionInfo(
                dimension=dimension,
                base_unit=base_unit_of(dimension),
                units=list(units_of(dimension)),
                relations=relations,
            )
        )
    return infos
