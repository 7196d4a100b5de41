"""
Unit-aware arithmetic.

Each operation dispatches on the shape of its operands (plain number or
Quantity):

- add / subtract: numbers combine as usual; quantities of the same
  dimension combine in the LEFT operand's unit; a plain number mixed with
  a quantity is rejected with ``MixedOperands``
- multiply / divide: a plain number scales a quantity and keeps its unit;
  two quantities combine their base-unit values and the result is
  expressed in the BASE unit of the inferred dimension
- negate / positive: applied to the numeric part, unit kept
"""

from __future__ import annotations

import logging
import operator
from typing import Callable

from aerounits.units.algebra import base_unit_of, divide_dimensions, multiply_dimensions
from aerounits.units.convert import convert
from aerounits.units.errors import MixedOperands
from aerounits.units.quantity import Operand, Quantity, is_number
from aerounits.units.registry import lookup

logger = logging.getLogger(__name__)


def _check_operand(value: object, symbol: str) -> None:
    if not (is_number(value) or isinstance(value, Quantity)):
        raise TypeError(
            f"Unsupported operand for '{symbol}': {value!r} "
            f"(expected a number or a Quantity)"
        )


def _combine(a: Operand, b: Operand, op: Callable, symbol: str) -> Operand:
    """Shared dispatch for + and -."""
    _check_operand(a, symbol)
    _check_operand(b, symbol)

    if is_number(a) and is_number(b):
        return op(a, b)

    if isinstance(a, Quantity) and isinstance(b, Quantity):
        if a.unit == b.unit:
            return Quantity(op(a.value, b.value), a.unit)
        # Left operand wins; DimensionMismatch surfaces from the conversion
        b_in_a = convert(b, a.unit)
        return Quantity(op(a.value, b_in_a.value), a.unit)

    raise MixedOperands(symbol, a, b)


def add(a: Operand, b: Operand) -> Operand:
    """
    Add two numbers or two quantities of the same dimension.

    Examples:
        add({1, ft}, {2, ft}) = {3, ft}
        add({1, in}, {1, ft}) = {13.0, in}

    Raises:
        DimensionMismatch: quantities of different dimensions
        MixedOperands: a plain number and a quantity
    """
    return _combine(a, b, operator.add, "+")


def subtract(a: Operand, b: Operand) -> Operand:
    """
    Subtract two numbers or two quantities of the same dimension.

    Examples:
        subtract({3, ft}, {1, ft}) = {2, ft}
        subtract({61, s}, {1, min}) = {1.0, s}
    """
    return _combine(a, b, operator.sub, "-")


def negate(a: Operand) -> Operand:
    """Negate a number, or the numeric part of a quantity."""
    _check_operand(a, "-")
    if isinstance(a, Quantity):
        return Quantity(-a.value, a.unit)
    return -a


def positive(a: Operand) -> Operand:
    """Unary plus: returns the operand unchanged."""
    _check_operand(a, "+")
    return a


def _scale(a: Operand, b: Operand, op: Callable) -> Operand | None:
    """Number/number and number/quantity cases shared by * and /."""
    if is_number(a) and is_number(b):
        return op(a, b)
    if is_number(a) and isinstance(b, Quantity):
        return Quantity(op(a, b.value), b.unit)
    if isinstance(a, Quantity) and is_number(b):
        return Quantity(op(a.value, b), a.unit)
    return None


def multiply(a: Operand, b: Operand) -> Operand:
    """
    Multiply numbers and/or quantities.

    A plain number is a dimensionless coefficient. For two quantities the
    result dimension comes from the dimension algebra and the value is
    expressed in that dimension's base unit.

    Examples:
        multiply(4, {3, knots}) = {12, knots}
        multiply({1, m}, {200, cm}) = {2.0, m2}

    Raises:
        AmbiguousOrMissingDimensionRelation: no unique result dimension
    """
    _check_operand(a, "*")
    _check_operand(b, "*")
    scaled = _scale(a, b, operator.mul)
    if scaled is not None:
        return scaled

    a_desc = lookup(a.unit, role="left operand of *")
    b_desc = lookup(b.unit, role="right operand of *")
    result_dim = multiply_dimensions(a_desc.dimension, b_desc.dimension)
    result_unit = base_unit_of(result_dim)

    value = (
        a_desc.conversion.to_base(a.value)
        * b_desc.conversion.to_base(b.value)
    )
    logger.debug("%s * %s -> %s %s", a, b, value, result_unit.value)
    return Quantity(value, result_unit)


def divide(a: Operand, b: Operand) -> Operand:
    """
    Divide numbers and/or quantities.

    A plain number on either side scales the quantity's numeric part and
    keeps its unit. For two quantities the result is expressed in the base
    unit of the inferred dimension.

    Examples:
        divide({3, knots}, 4) = {0.75, knots}
        divide({2.0, m2}, {200, cm}) = {1.0, m}

    Raises:
        AmbiguousOrMissingDimensionRelation: no unique result dimension
        ZeroDivisionError: division by a zero value
    """
    _check_operand(a, "/")
    _check_operand(b, "/")
    scaled = _scale(a, b, operator.truediv)
    if scaled is not None:
        return scaled

    a_desc = lookup(a.unit, role="left operand of /")
    b_desc = lookup(b.unit, role="right operand of /")
    result_dim = divide_dimensions(a_desc.dimension, b_desc.dimension)
    result_unit = base_unit_of(result_dim)

    value = (
        a_desc.conversion.to_base(a.value)
        / b_desc.conversion.to_base(b.value)
    )
    logger.debug("%s / %s -> %s %s", a, b, value, result_unit.value)
    return Quantity(value, result_unit)
