#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
from scipy.spatial.transform import Rotation

# Define precision
Real = np.float64

# Mathematical constants
# Relative size of float64 roundoff in accumulated sums
ROUNDOFF = 1e-12
ORTHONORMAL_TOLERANCE = 1e-6
INF = np.inf

# Fitting needs a tetrahedron at least
MIN_FIT_POINTS = 4


def Vector3r(x=0.0, y=0.0, z=0.0):
    """Create a 3D real vector."""
    return np.array([x, y, z], dtype=Real)


def Matrix3r(*args):
    """Create a 3x3 real matrix (row-major arguments)."""
    if len(args) == 0:
        return np.zeros((3, 3), dtype=Real)
    elif len(args) == 9:
        return np.array(args, dtype=Real).reshape(3, 3)
    else:
        raise ValueError("Matrix3r requires 0 or 9 arguments")


def Identity3r():
    """Create a 3x3 identity matrix."""
    return np.eye(3, dtype=Real)


class AlignedBox3r:
    def __init__(self, min_point=None, max_point=None):
        if min_point is None:
            self.min = Vector3r(INF, INF, INF)
        else:
            self.min = np.asarray(min_point, dtype=Real)

        if max_point is None:
            self.max = Vector3r(-INF, -INF, -INF)
        else:
            self.max = np.asarray(max_point, dtype=Real)

    def extend(self, point):
        """Extend box to include point."""
        self.min = np.minimum(self.min, point)
        self.max = np.maximum(self.max, point)

    def contains(self, point):
        """Check if box contains point."""
        return bool(np.all(point >= self.min) and np.all(point <= self.max))

    def isEmpty(self):
        """Check if box is empty (has no volume)."""
        return bool(np.any(self.min > self.max))

    def center(self):
        """Get center of box."""
        return 0.5 * (self.min + self.max)

    def sizes(self):
        """Get dimensions of box."""
        return self.max - self.min

    def volume(self):
        """Get volume of box."""
        sizes = self.sizes()
        if np.any(sizes < 0):
            return 0.0
        return sizes[0] * sizes[1] * sizes[2]

    def __str__(self):
        """String representation of box."""
        return f"AlignedBox3r(min=[{self.min[0]}, {self.min[1]}, {self.min[2]}], max=[{self.max[0]}, {self.max[1]}, {self.max[2]}])"


# Matrix operations
def matrix_eigen_decomposition(m):
    """
    Compute eigendecomposition of a 3x3 symmetric matrix.

    Returns:
        Tuple (unitary, diagonal): eigenvectors as the columns of ``unitary``
        and the eigenvalues on the diagonal of ``diagonal``.
    """
    eigenvalues, eigenvectors = np.linalg.eigh(m)
    return eigenvectors, np.diag(eigenvalues)


def matrix_from_euler_angles_xyz(x, y, z):
    """Create rotation matrix from Euler angles XYZ."""
    r = Rotation.from_euler("xyz", [x, y, z])
    return r.as_matrix()


def is_orthonormal(m, tolerance=ORTHONORMAL_TOLERANCE):
    """Check that the columns of m are unit length and mutually orthogonal."""
    m = np.asarray(m, dtype=Real)
    if m.shape != (3, 3) or not np.all(np.isfinite(m)):
        return False
    return bool(np.allclose(m.T @ m, np.eye(3), rtol=0.0, atol=tolerance))


# Math functions
class Math:
    """Math utility class with various helper functions."""

    @staticmethod
    def squaredDistance(a, b):
        """Squared euclidean distance between two points."""
        d = np.asarray(a, dtype=Real) - np.asarray(b, dtype=Real)
        return float(np.dot(d, d))


def pow2(x):
    """Power 2 function."""
    return x * x
