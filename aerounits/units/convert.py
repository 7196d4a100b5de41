"""
Conversion between units of the same dimension.

Every conversion routes through the dimension's base unit: the source
unit's ``to_base`` followed by the target unit's ``from_base``. The result
is rounded to ``ROUND_DECIMALS`` places to drop the floating-point noise
picked up by the two steps.
"""

from __future__ import annotations

import logging

from aerounits.units.errors import DimensionMismatch
from aerounits.units.quantity import Quantity
from aerounits.units.registry import Unit, lookup, parse_unit

logger = logging.getLogger(__name__)

# Part of the contract: callers compare converted values exactly
ROUND_DECIMALS = 14


def convert(quantity: Quantity, target_unit: Unit | str) -> Quantity:
    """
    Convert a quantity to a compatible unit.

    Args:
        quantity: Value to convert
        target_unit: Unit of the same dimension to express it in

    Returns:
        New Quantity in ``target_unit``

    Raises:
        UnknownUnit: if the source or destination unit is not registered
        DimensionMismatch: if the two units belong to different dimensions

    Examples:
        {1.0, ft} -> in    = {12.0, in}
        {10, ms} -> kph    = {36.0, kph}
        {50, f} -> c       = {10.0, c}
    """
    source = lookup(quantity.unit, role="source")
    target = lookup(target_unit, role="destination")
    target_unit = parse_unit(target_unit, role="destination")

    if source.dimension != target.dimension:
        logger.debug(
            "Rejected conversion %s -> %s (%s vs %s)",
            quantity.unit.value, target_unit.value,
            source.dimension.value, target.dimension.value,
        )
        raise DimensionMismatch(
            source.description, source.dimension,
            target.description, target.dimension,
        )

    # Identity conversions must be exact; no round trip and no rounding
    if target_unit == quantity.unit:
        return Quantity(quantity.value, target_unit)

    interim = source.conversion.to_base(quantity.value)
    output = round(target.conversion.from_base(interim), ROUND_DECIMALS)
    return Quantity(output, target_unit)
