"""
Dimension algebra.

Infers the dimension produced by multiplying or dividing two dimensions
from a short table of relations ``product = factor_a x factor_b``. The
table is scanned linearly; a lookup is valid only when exactly one
relation matches.

NOTES:
- force x length is registered as moment, not energy, so the unordered
  factor pair stays unambiguous; energy is reached through power x time
- dimensionless results (e.g. length / length) are not representable
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

from aerounits.units.errors import AmbiguousOrMissingDimensionRelation, RegistryError
from aerounits.units.registry import UNITS, Dimension, Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DimensionRelation:
    """product = factor_a x factor_b"""
    product: Dimension
    factor_a: Dimension
    factor_b: Dimension

    @property
    def factors(self) -> frozenset[Dimension]:
        """Unordered factor pair."""
        return frozenset((self.factor_a, self.factor_b))

    def other_factor(self, factor: Dimension) -> Dimension:
        """The factor paired with ``factor`` in this relation."""
        return self.factor_b if factor == self.factor_a else self.factor_a


DIMENSION_RELATIONS: tuple[DimensionRelation, ...] = (
    DimensionRelation(Dimension.AREA, Dimension.LENGTH, Dimension.LENGTH),
    DimensionRelation(Dimension.ENERGY, Dimension.POWER, Dimension.TIME),
    DimensionRelation(Dimension.FORCE, Dimension.MASS, Dimension.ACCELERATION),
    DimensionRelation(Dimension.FORCE, Dimension.PRESSURE, Dimension.AREA),
    DimensionRelation(Dimension.LENGTH, Dimension.VELOCITY, Dimension.TIME),
    DimensionRelation(Dimension.MASS, Dimension.VOLUME, Dimension.DENSITY),
    DimensionRelation(Dimension.MOMENT, Dimension.LENGTH, Dimension.FORCE),
    DimensionRelation(Dimension.POWER, Dimension.FORCE, Dimension.VELOCITY),
    DimensionRelation(Dimension.VELOCITY, Dimension.ACCELERATION, Dimension.TIME),
    DimensionRelation(Dimension.VOLUME, Dimension.AREA, Dimension.LENGTH),
)


def multiply_dimensions(dim_a: Dimension, dim_b: Dimension) -> Dimension:
    """
    Dimension of the product of two dimensions.

    Raises:
        AmbiguousOrMissingDimensionRelation: unless exactly one relation
            has {dim_a, dim_b} as its factors
    """
    pair = frozenset((dim_a, dim_b))
    matches = [r.product for r in DIMENSION_RELATIONS if r.factors == pair]
    if len(matches) != 1:
        raise AmbiguousOrMissingDimensionRelation(dim_a, dim_b, "*", len(matches))
    logger.debug("%s * %s -> %s", dim_a.value, dim_b.value, matches[0].value)
    return matches[0]


def divide_dimensions(numerator: Dimension, denominator: Dimension) -> Dimension:
    """
    Dimension of the quotient of two dimensions.

    Looks for a relation whose product is ``numerator`` and which has
    ``denominator`` as one factor; the result is the other factor.

    Raises:
        AmbiguousOrMissingDimensionRelation: unless exactly one relation matches
    """
    matches = [
        r.other_factor(denominator)
        for r in DIMENSION_RELATIONS
        if r.product == numerator and denominator in (r.factor_a, r.factor_b)
    ]
    if len(matches) != 1:
        raise AmbiguousOrMissingDimensionRelation(numerator, denominator, "/", len(matches))
    logger.debug("%s / %s -> %s", numerator.value, denominator.value, matches[0].value)
    return matches[0]


def base_unit_of(dimension: Dimension) -> Unit:
    """
    Base unit (scalar factor 1.0) of a dimension.

    Raises:
        RegistryError: if the registry does not hold exactly one base unit
            for the dimension
    """
    bases = [
        unit for unit, d in UNITS.items()
        if d.dimension == dimension and d.conversion.is_base
    ]
    if len(bases) != 1:
        raise RegistryError(
            f"Could not resolve base unit for '{dimension.value}' ({len(bases)} candidates)"
        )
    return bases[0]


def check_relations() -> None:
    """
    Verify that no unordered factor pair maps to more than one product.

    Raises:
        RegistryError: naming the ambiguous factor pair
    """
    counts = Counter(r.factors for r in DIMENSION_RELATIONS)
    for factors, count in counts.items():
        if count > 1:
            names = " x ".join(sorted(d.value for d in factors))
            raise RegistryError(f"Factor pair {names} appears in {count} relations")
