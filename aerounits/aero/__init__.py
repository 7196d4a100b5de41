"""
Light plane design formulae built on the units core.

Formulae from chapter 1 of the Evans Light Plane Designer's Handbook
(ELDH). Inputs are Quantities in any compatible unit; outputs are
Quantities in the handbook's units, or plain floats for dimensionless
results.

NOT for certification or detailed design.
"""

from aerounits.aero.atmosphere import (
    SEA_LEVEL,
    DENSITY_RATIO_TABLE,
    interpolate,
    density_ratio,
)
from aerounits.aero.general import (
    WingSurface,
    dynamic_pressure,
    estimate_gross_weight,
    reynolds_number,
    cl_max_approx,
    stall_speed,
    wing_area_required,
    lift_coefficient,
    lift,
    wing_span,
    wing_chord,
    wing_loading,
    aspect_ratio,
)
from aerounits.aero.drag import (
    FrictionReference,
    Planform,
    ReferenceAircraft,
    skin_friction_coefficient,
    wing_efficiency,
    drag_area_ratio,
)

__all__ = [
    # Atmosphere
    "SEA_LEVEL",
    "DENSITY_RATIO_TABLE",
    "interpolate",
    "density_ratio",
    # General
    "WingSurface",
    "dynamic_pressure",
    "estimate_gross_weight",
    "reynolds_number",
    "cl_max_approx",
    "stall_speed",
    "wing_area_required",
    "lift_coefficient",
    "lift",
    "wing_span",
    "wing_chord",
    "wing_loading",
    "aspect_ratio",
    # Drag
    "FrictionReference",
    "Planform",
    "ReferenceAircraft",
    "skin_friction_coefficient",
    "wing_efficiency",
    "drag_area_ratio",
]
