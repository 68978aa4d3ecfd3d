# -*- coding: utf-8 -*-
import numpy as np
from basicmath.math.vec3 import Vec3f, Vec3d, cross, dot
from basicmath.math.linear import lerp, sample
from basicmath.math.integer import gcd

def test_vec3_ops():
    a = Vec3d(1, 2, 3)
    b = Vec3d(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert (2 * a).as_np().tolist() == [2, 4, 6]

def test_vec3f_is_single_precision():
    v = Vec3f(0.1, 0.2)
    assert v.as_np().dtype == np.float32
    assert v.z == 0.0
    assert v.x == np.float32(0.1)

def test_products():
    assert dot(Vec3d(1, 2, 3), Vec3d(4, 5, 6)) == 32
    assert cross(Vec3f(1, 0, 0), Vec3f(0, 1, 0)) == Vec3f(0, 0, 1)

def test_scalar_helpers():
    assert lerp(0, 10, 0.25) == 2.5
    assert sample([0.0, 10.0], 0.5) == 5.0
    assert gcd(12, 18) == 6
