"""
Standard atmosphere helpers.

Air density relative to sea level is read from a short altitude table
(ELDH p3) with linear interpolation between samples.

ASSUMPTIONS:
- Standard day; no temperature or humidity correction
- Table covers 0 to 20,000 ft; altitudes outside it are rejected
"""

from __future__ import annotations

from typing import Sequence

from aerounits.units import Quantity, Unit, convert

SEA_LEVEL = Quantity(0, Unit.FT)

# (altitude ft, density ratio sigma)
DENSITY_RATIO_TABLE: tuple[tuple[float, float], ...] = (
    (0, 1.0),
    (5_000, 0.86),
    (10_000, 0.74),
    (15_000, 0.63),
    (20_000, 0.53),
)


def interpolate(x: float, samples: Sequence[tuple[float, float]]) -> float:
    """
    Linearly interpolate an output from a table of (input, output) samples.

    Args:
        x: Input value
        samples: (input, output) pairs in ascending input order

    Returns:
        Interpolated output

    Raises:
        ValueError: if x lies outside the table's input range

    Examples:
        interpolate(7, [(0, 0), (10, 100)])          = 70.0
        interpolate(7, [(0, 0), (5, 50), (10, 60)])  = 54.0
    """
    if len(samples) < 2:
        raise ValueError("Interpolation table needs at least two samples")

    for (x1, y1), (x2, y2) in zip(samples, samples[1:]):
        if x1 <= x <= x2:
            t = (x - x1) / (x2 - x1)
            return y1 + t * (y2 - y1)

    raise ValueError(
        f"{x} is outside the interpolation range [{samples[0][0]}, {samples[-1][0]}]"
    )


def density_ratio(altitude: Quantity = SEA_LEVEL) -> float:
    """
    Air density at altitude relative to sea level (sigma, dimensionless).

    Args:
        altitude: Altitude in any length unit

    Returns:
        Density ratio, 1.0 at sea level
    """
    altitude_ft = convert(altitude, Unit.FT).value
    return interpolate(altitude_ft, DENSITY_RATIO_TABLE)
