"""
Математический суб‑пакет: Vec3 (Vec3f / Vec3d), скалярная интерполяция, НОД.
"""

from basicmath.math.precision import SINGLE, DOUBLE, resolve_dtype
from basicmath.math.linear import sample
from basicmath.math.linear import lerp as lerp_scalar
from basicmath.math.integer import gcd, gcd_pair, gcd_sequence
from basicmath.math.vec3 import (
    Vec3, Vec3f, Vec3d,
    center, distance, dot, cross, angle, signed_angle, lerp, make_vec3,
)

__all__ = [
    "SINGLE", "DOUBLE", "resolve_dtype",
    "sample", "lerp_scalar",
    "gcd", "gcd_pair", "gcd_sequence",
    "Vec3", "Vec3f", "Vec3d",
    "center", "distance", "dot", "cross", "angle", "signed_angle", "lerp",
    "make_vec3",
]
