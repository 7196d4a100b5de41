"""
Drag reference coefficients (ELDH page 5).

Lookup tables for rough parasite and induced drag estimates:
- Cf: skin friction coefficient for wetted-area parasite drag
- e: wing (span) efficiency factor
- D/q: equivalent flat-plate drag area of reference aircraft, ft2
"""

from enum import Enum


class FrictionReference(str, Enum):
    """Reference airframe classes for the skin friction coefficient."""
    SUPER_CLEAN_SAILPLANE = "super_clean_sailplane"
    CLEAN_Q2_DRAGONFLY = "clean_q2_dragonfly"
    ENCLOSED_BASIC_TRAINER_MONO = "enclosed_basic_trainer_mono"
    OPEN_STEARMAN_BIPLANE_EXP_RADIAL = "open_stearman_biplane_exp_radial"


class Planform(str, Enum):
    """Wing planform shapes for the efficiency factor."""
    STRAIGHT = "straight"
    TAPERED = "tapered"
    ELLIPTICAL = "elliptical"


class ReferenceAircraft(str, Enum):
    """Aircraft with a published D/q figure."""
    ERCOUPE = "ercoupe"
    CHEROKEE_180 = "cherokee_180"
    VARIEZE = "varieze"
    LANCAIR_200 = "lancair_200"
    Q2 = "q2"
    DRAGONFLY = "dragonfly"


SKIN_FRICTION_COEFFICIENTS = {
    FrictionReference.SUPER_CLEAN_SAILPLANE: 0.003,
    FrictionReference.CLEAN_Q2_DRAGONFLY: 0.005,
    FrictionReference.ENCLOSED_BASIC_TRAINER_MONO: 0.009,
    FrictionReference.OPEN_STEARMAN_BIPLANE_EXP_RADIAL: 0.014,
}

# Riblett questions the NACA data behind these: the test wings' thickness
# ratio tapered down to ~9% along with aspect ratio (GA Airfoils p99)
WING_EFFICIENCY_FACTORS = {
    Planform.STRAIGHT: 0.85,
    Planform.TAPERED: 0.90,
    Planform.ELLIPTICAL: 1.0,
}

DRAG_AREA_RATIOS = {
    ReferenceAircraft.ERCOUPE: 4.4,
    ReferenceAircraft.CHEROKEE_180: 3.9,
    ReferenceAircraft.VARIEZE: 2.1,
    ReferenceAircraft.LANCAIR_200: 1.6,
    ReferenceAircraft.Q2: 1.3,
    ReferenceAircraft.DRAGONFLY: 1.3,
}


def skin_friction_coefficient(reference: FrictionReference | str) -> float:
    """Cf for wetted-area parasite drag of a reference airframe class."""
    return SKIN_FRICTION_COEFFICIENTS[FrictionReference(reference)]


def wing_efficiency(planform: Planform | str) -> float:
    """Wing efficiency factor (e, dimensionless) for a planform."""
    return WING_EFFICIENCY_FACTORS[Planform(planform)]


def drag_area_ratio(aircraft: ReferenceAircraft | str) -> float:
    """Rough D/q (ft2) of a reference aircraft."""
    return DRAG_AREA_RATIOS[ReferenceAircraft(aircraft)]
