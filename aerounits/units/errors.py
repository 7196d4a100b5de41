"""
Exceptions raised by the units core.

Every error is local and recoverable. They all derive from ``UnitError``
(itself a ``ValueError``) so callers can catch the whole family at once,
and each one carries its diagnostic fields as attributes.
"""

from __future__ import annotations

from typing import Any


def _name(tag: Any) -> str:
    """Plain name of an enum tag (or any other value) for messages."""
    return str(getattr(tag, "value", tag))


class UnitError(ValueError):
    """Base class for all unit and dimension errors."""


class UnknownUnit(UnitError):
    """A unit identifier is absent from the registry."""

    def __init__(self, unit_id: Any, role: str | None = None):
        self.unit_id = unit_id
        self.role = role
        if role:
            message = f"Unknown {role} unit '{_name(unit_id)}'."
        else:
            message = f"Unknown unit '{_name(unit_id)}'."
        super().__init__(message)


class DimensionMismatch(UnitError):
    """Conversion or combination attempted across incompatible dimensions."""

    def __init__(
        self,
        from_description: str,
        from_dimension: Any,
        to_description: str,
        to_dimension: Any,
    ):
        self.from_description = from_description
        self.from_dimension = from_dimension
        self.to_description = to_description
        self.to_dimension = to_dimension
        super().__init__(
            f"{from_description} ({_name(from_dimension)}) cannot be converted "
            f"to {to_description} ({_name(to_dimension)})"
        )


class AmbiguousOrMissingDimensionRelation(UnitError):
    """Dimension inference found zero or several matching relations."""

    def __init__(self, dim_a: Any, dim_b: Any, operation: str, matches: int = 0):
        self.dim_a = dim_a
        self.dim_b = dim_b
        self.operation = operation
        self.matches = matches
        verb = "multiplying" if operation == "*" else "dividing"
        joiner = "and" if operation == "*" else "by"
        reason = "no relation" if matches == 0 else f"{matches} relations"
        super().__init__(
            f"Could not resolve result dimension when {verb} "
            f"{_name(dim_a)} {joiner} {_name(dim_b)} ({reason} matched)."
        )


class MixedOperands(UnitError):
    """A plain number and a quantity were combined with + or -."""

    def __init__(self, operation: str, a: Any, b: Any):
        self.operation = operation
        self.a = a
        self.b = b
        super().__init__(
            f"Cannot apply '{operation}' to a plain number and a quantity "
            f"({a!r}, {b!r}); tag both operands with a unit or neither."
        )


class RegistryError(UnitError):
    """The unit or relation tables violate one of their invariants."""
