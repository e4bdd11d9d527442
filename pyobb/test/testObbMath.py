#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import math
import numpy as np
import pytest

from pyobb.src.obbmath import (
    Vector3r,
    Matrix3r,
    Identity3r,
    AlignedBox3r,
    Math,
    is_orthonormal,
    matrix_eigen_decomposition,
    matrix_from_euler_angles_xyz,
)
from pyobb.src.OBB import OBB


def test_basic_types():
    assert Vector3r(1, 2, 3).dtype == np.float64
    assert Matrix3r().shape == (3, 3)
    assert np.array_equal(Matrix3r(1, 0, 0, 0, 1, 0, 0, 0, 1), Identity3r())
    with pytest.raises(ValueError):
        Matrix3r(1, 2, 3)


def test_is_orthonormal():
    assert is_orthonormal(Identity3r())
    assert is_orthonormal(matrix_from_euler_angles_xyz(0.5, 1.0, -2.0))
    assert is_orthonormal(-Identity3r()), "Reflections are orthonormal too"
    assert not is_orthonormal(2.0 * Identity3r())
    assert not is_orthonormal(Matrix3r(1, 1, 0, 0, 1, 0, 0, 0, 1))
    assert not is_orthonormal(np.eye(2))
    assert not is_orthonormal(np.full((3, 3), np.nan))


def test_eigen_decomposition():
    rotation = matrix_from_euler_angles_xyz(0.1, 0.7, -0.3)
    m = rotation @ np.diag([3.0, 2.0, 1.0]) @ rotation.T

    unitary, diagonal = matrix_eigen_decomposition(m)
    assert is_orthonormal(unitary)
    assert np.allclose(unitary @ diagonal @ unitary.T, m)
    assert np.allclose(np.sort(np.diag(diagonal)), [1.0, 2.0, 3.0])


def test_aligned_box():
    box = AlignedBox3r()
    assert box.isEmpty(), "Default box is empty"
    assert box.volume() == 0.0

    box.extend(Vector3r(-1, 0, 2))
    box.extend(Vector3r(1, 3, 4))
    assert not box.isEmpty()
    assert np.allclose(box.sizes(), [2, 3, 2])
    assert box.volume() == pytest.approx(12.0)
    assert box.contains(Vector3r(0, 1, 3))
    assert not box.contains(Vector3r(0, 4, 3))


def test_squared_distance():
    assert Math.squaredDistance([0, 0, 0], [1, 2, 2]) == pytest.approx(9.0)


def test_obb_aligned_box_contains_obb_corners():
    obb = OBB(
        Vector3r(2, -1, 0.5),
        Vector3r(1, 0.5, 2),
        matrix_from_euler_angles_xyz(0.9, 0.1, -1.4),
    )
    box = obb.getAlignedBox()
    for signs in np.array(np.meshgrid([-1, 1], [-1, 1], [-1, 1])).T.reshape(-1, 3):
        corner = obb.center + obb.rotation @ (signs * obb.halfSizes)
        assert np.all(corner >= box.min - 1e-12) and np.all(corner <= box.max + 1e-12)
    assert math.isclose(box.volume(), np.prod(box.sizes()))
