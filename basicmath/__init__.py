"""
BasicMath – базовое числовое ядро для геометрии, симуляции и анимации:
3‑мерный вектор одинарной/двойной точности, интерполяция скаляров и НОД.
"""

from basicmath.utils import logger, Config
from basicmath.math import (
    SINGLE, DOUBLE,
    Vec3, Vec3f, Vec3d,
    center, distance, dot, cross, angle, signed_angle, lerp, make_vec3,
    lerp_scalar, sample,
    gcd, gcd_pair, gcd_sequence,
)

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Config",
    "SINGLE",
    "DOUBLE",
    "Vec3",
    "Vec3f",
    "Vec3d",
    "center",
    "distance",
    "dot",
    "cross",
    "angle",
    "signed_angle",
    "lerp",
    "make_vec3",
    "lerp_scalar",
    "sample",
    "gcd",
    "gcd_pair",
    "gcd_sequence",
]
