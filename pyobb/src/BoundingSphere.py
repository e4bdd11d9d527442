#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import math
import numpy as np

from pyobb.src.Object import Object
from pyobb.src.Errors import InvalidInputError
from pyobb.src.obbmath import Vector3r, Real, AlignedBox3r


class BoundingSphere(Object):
    """Bounding sphere given by center and radius."""

    def __init__(self, center=None, radius=0.0):
        """Initialize sphere, by default a point at the origin."""
        super().__init__()
        self.center = Vector3r() if center is None else np.array(center, dtype=Real)
        self.radius = 0.0
        self.setRadius(radius)

    def setRadius(self, r):
        """
        Set sphere radius.

        Args:
            r: New radius

        Raises:
            InvalidInputError: If radius is negative or not finite
        """
        if not math.isfinite(r) or r < 0:
            raise InvalidInputError(f"Radius must be non-negative (not {r})")
        self.radius = float(r)

    def containsPoint(self, pt) -> bool:
        """Check if point is inside the sphere (boundary inclusive)."""
        d = np.asarray(pt, dtype=Real) - self.center
        return float(np.dot(d, d)) <= self.radius * self.radius

    def getAlignedBox(self) -> AlignedBox3r:
        """
        Get axis-aligned bounding box.

        Returns:
            Axis-aligned bounding box
        """
        ret = AlignedBox3r()
        ret.extend(self.center - self.radius * np.ones(3))
        ret.extend(self.center + self.radius * np.ones(3))
        return ret

    def __repr__(self):
        return f"{self.getClassName()}(center={self.center.tolist()}, radius={self.radius})"
