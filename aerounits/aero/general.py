"""
General design formulae (ELDH pages 3-4).

Evans, Light Plane Designer's Handbook, chapter 1. The handbook's
equations are empirical and written in imperial units, so every input is
first converted to the unit the equation expects (mph, ft, ft2, lbs, psf)
and results are returned in those same units.

ASSUMPTIONS:
- Weight is given as mass and read as pounds-weight (1 g)
- Where a velocity is supplied instead of a dynamic pressure, sea level
  standard density is assumed
- Results are conceptual sizing estimates, not certification figures
"""

from __future__ import annotations

import math
from enum import Enum

from aerounits.aero.atmosphere import SEA_LEVEL, density_ratio
from aerounits.units import Dimension, Quantity, Unit, convert, dimension_of

# Dynamic pressure q = 0.00256 * V^2 (psf, V in mph)
Q_VELOCITY_COEFFICIENT = 0.00256

# Gross weight = payload / coefficient
EST_GROSS_WT_1_PLACE_COEFFICIENT = 0.35
EST_GROSS_WT_2_PLACE_COEFFICIENT = 0.40

# Re = 778 * chord (in) * V (mph)
REYNOLDS_NUMBER_COEFFICIENT = 778

# Vs = 20 * sqrt((W/S) / Cl max)
VS_COEFFICIENT = 20


class WingSurface(str, Enum):
    """Wing surface construction, used to approximate Cl max."""
    FABRIC = "fabric"
    METAL = "metal"
    COMPOSITE = "composite"


CL_MAX_APPROX = {
    WingSurface.FABRIC: 1.2,
    WingSurface.METAL: 1.3,
    WingSurface.COMPOSITE: 1.35,
}


def dynamic_pressure(velocity: Quantity, altitude: Quantity = SEA_LEVEL) -> Quantity:
    """
    Dynamic pressure (q) at a velocity in a standard atmosphere.

    Uses q = 0.00256 * V^2 * sigma with V in mph (ELDH p3).

    Args:
        velocity: Airspeed in any velocity unit
        altitude: Pressure altitude in any length unit (default sea level)

    Returns:
        Dynamic pressure in psf

    Examples:
        {175, mph}                    -> {78.4, psf}
        {154.412, knots}, {15000, ft} -> {49.392..., psf}
    """
    velocity_mph = convert(velocity, Unit.MPH).value
    return Quantity(
        Q_VELOCITY_COEFFICIENT
        * velocity_mph
        * velocity_mph
        * density_ratio(altitude),
        Unit.PSF,
    )


def _dynamic_pressure_psf(dynamic_pressure_or_velocity: Quantity) -> float:
    """Accept either q or a velocity (sea level assumed) and return q in psf."""
    if dimension_of(dynamic_pressure_or_velocity) == Dimension.VELOCITY:
        return dynamic_pressure(dynamic_pressure_or_velocity).value
    return convert(dynamic_pressure_or_velocity, Unit.PSF).value


def estimate_gross_weight(seats: int, payload: Quantity) -> Quantity:
    """
    Estimate gross weight from seat count and payload (people + baggage + fuel).

    Args:
        seats: 1 or 2
        payload: Payload mass in any mass unit

    Returns:
        Gross weight in the payload's unit

    Example:
        1, {170, kg} -> {485.714..., kg}
    """
    if seats == 1:
        return payload / EST_GROSS_WT_1_PLACE_COEFFICIENT
    if seats == 2:
        return payload / EST_GROSS_WT_2_PLACE_COEFFICIENT
    raise ValueError(f"Gross weight estimate is only defined for 1 or 2 seats, got {seats}")


def reynolds_number(chord: Quantity, velocity: Quantity) -> float:
    """
    Reynolds number (dimensionless) for a chord at an airspeed.

    Example:
        {48, in}, {33, knots} -> 1_396_665.6
    """
    chord_in = convert(chord, Unit.IN).value
    velocity_mph = convert(velocity, Unit.MPH).value
    return REYNOLDS_NUMBER_COEFFICIENT * chord_in * velocity_mph


def cl_max_approx(surface: WingSurface | str) -> float:
    """Approximate Cl max for a wing surface material."""
    return CL_MAX_APPROX[WingSurface(surface)]


def stall_speed(gross_weight: Quantity, wing_area: Quantity, cl_max: float) -> Quantity:
    """
    Stall speed (Vs) from wing loading and Cl max.

    Args:
        gross_weight: Aircraft mass
        wing_area: Wing area (S)
        cl_max: Maximum lift coefficient

    Returns:
        Stall speed in mph

    Example:
        {120, kg}, {31, m2}, 1.2 -> {16.2596..., mph}
    """
    gross_weight_lbs = convert(gross_weight, Unit.LBS).value
    wing_area_ft2 = convert(wing_area, Unit.FT2).value
    return Quantity(
        VS_COEFFICIENT * math.sqrt((gross_weight_lbs / wing_area_ft2) / cl_max),
        Unit.MPH,
    )


def wing_area_required(
    gross_weight: Quantity,
    dynamic_pressure_or_velocity: Quantity,
    cl_max: float,
) -> Quantity:
    """
    Wing area (S) needed to lift a weight at a given q (or velocity) and Cl max.

    Returns:
        Wing area in ft2

    Example:
        {120, kg}, {16, mph}, 1.2 -> {336.398..., ft2}
    """
    gross_weight_lbs = convert(gross_weight, Unit.LBS).value
    dynamic_pressure_psf = _dynamic_pressure_psf(dynamic_pressure_or_velocity)
    return Quantity(gross_weight_lbs / (dynamic_pressure_psf * cl_max), Unit.FT2)


def lift_coefficient(
    gross_weight: Quantity,
    dynamic_pressure_or_velocity: Quantity,
    wing_area: Quantity,
) -> float:
    """
    Lift coefficient (Cl, dimensionless) needed for a weight, q (or velocity) and S.

    Example:
        {390, kg}, {33, knots}, {111, ft2} -> 2.1631...
    """
    gross_weight_lbs = convert(gross_weight, Unit.LBS).value
    wing_area_ft2 = convert(wing_area, Unit.FT2).value
    dynamic_pressure_psf = _dynamic_pressure_psf(dynamic_pressure_or_velocity)
    return gross_weight_lbs / (dynamic_pressure_psf * wing_area_ft2)


def lift(cl: float, wing_area: Quantity, dynamic_pressure_or_velocity: Quantity) -> Quantity:
    """
    Lift (L) generated by a given Cl, S and q (or velocity).

    Returns:
        Lift in lbf

    Example:
        1.2, {336, ft2}, {16, mph} -> {264.241152, lbf}
    """
    wing_area_ft2 = convert(wing_area, Unit.FT2).value
    dynamic_pressure_psf = _dynamic_pressure_psf(dynamic_pressure_or_velocity)
    return Quantity(cl * wing_area_ft2 * dynamic_pressure_psf, Unit.LBF)


def wing_span(wing_area: Quantity, chord: Quantity) -> Quantity:
    """Span (b) from wing area and chord, in ft."""
    wing_area_ft2 = convert(wing_area, Unit.FT2).value
    chord_ft = convert(chord, Unit.FT).value
    return Quantity(wing_area_ft2 / chord_ft, Unit.FT)


def wing_chord(wing_area: Quantity, span: Quantity) -> Quantity:
    """Chord (c) from wing area and span, in ft."""
    wing_area_ft2 = convert(wing_area, Unit.FT2).value
    span_ft = convert(span, Unit.FT).value
    return Quantity(wing_area_ft2 / span_ft, Unit.FT)


def wing_loading(gross_weight: Quantity, wing_area: Quantity) -> Quantity:
    """
    Wing loading (W/S) in psf.

    Example:
        {390, kg}, {111, ft2} -> {7.7459..., psf}
    """
    gross_weight_lbs = convert(gross_weight, Unit.LBS).value
    wing_area_ft2 = convert(wing_area, Unit.FT2).value
    return Quantity(gross_weight_lbs / wing_area_ft2, Unit.PSF)


def aspect_ratio(span: Quantity, chord_or_wing_area: Quantity) -> float:
    """
    Aspect ratio (AR, dimensionless) from span and either chord or wing area.

    AR = b / c for a chord, AR = b^2 / S for an area.

    Raises:
        DimensionMismatch: if the second argument is neither a length nor an area
    """
    span_ft = convert(span, Unit.FT).value

    if dimension_of(chord_or_wing_area) == Dimension.LENGTH:
        chord_ft = convert(chord_or_wing_area, Unit.FT).value
        return span_ft / chord_ft

    wing_area_ft2 = convert(chord_or_wing_area, Unit.FT2).value
    return span_ft ** 2 / wing_area_ft2
