"""
Affine temperature conversions.

Celsius is the base unit of the temperature dimension, so Fahrenheit is
registered with this function pair instead of a scalar factor.
"""


def f_to_c(f: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return 5 / 9 * (f - 32)


def c_to_f(c: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return 9 / 5 * c + 32
