#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
from collections.abc import Mapping
from typing import List, Tuple

from pyobb.src.Object import Object
from pyobb.src.ConvexHull import ConvexHull
from pyobb.src.Errors import InvalidInputError, NumericError, SerializationError
from pyobb.src.OBBLogging import OBB_LOGGER
from pyobb.src.obbmath import (
    Vector3r,
    Identity3r,
    AlignedBox3r,
    Real,
    ROUNDOFF,
    Math,
    pow2,
    is_orthonormal,
    matrix_eigen_decomposition,
)


@OBB_LOGGER
class OBB(Object):
    """
    Oriented bounding box.

    The box is described by its ``center``, the ``halfSizes`` along each local
    axis and a ``rotation`` matrix whose columns are the local axes expressed in
    world space. All operations keep their temporaries local, so distinct
    instances can be used from different threads.
    """

    typeName = "OBB"

    def __init__(self, center=None, halfSizes=None, rotation=None):
        """Initialize an OBB, by default a zero-sized box at the origin."""
        super().__init__()
        self.center = Vector3r()
        self.halfSizes = Vector3r()
        self.rotation = Identity3r()

        if center is not None or halfSizes is not None or rotation is not None:
            self.set(
                self.center if center is None else center,
                self.halfSizes if halfSizes is None else halfSizes,
                self.rotation if rotation is None else rotation,
            )

    @staticmethod
    def _checked(center, halfSizes, rotation):
        """
        Convert box fields to float arrays and verify the box invariants.

        Returns:
            Tuple (center, halfSizes, rotation) of fresh arrays

        Raises:
            InvalidInputError: If any field has the wrong shape or value
        """
        try:
            center = np.array(center, dtype=Real)
            halfSizes = np.array(halfSizes, dtype=Real)
            rotation = np.array(rotation, dtype=Real)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"OBB: non-numeric box data ({e})") from e

        if center.shape != (3,):
            raise InvalidInputError(f"OBB: center must be a 3D vector (shape {center.shape})")
        if halfSizes.shape != (3,):
            raise InvalidInputError(
                f"OBB: halfSizes must be a 3D vector (shape {halfSizes.shape})"
            )
        if rotation.shape != (3, 3):
            raise InvalidInputError(
                f"OBB: rotation must be a 3x3 matrix (shape {rotation.shape})"
            )
        if not np.all(np.isfinite(center)):
            raise InvalidInputError(f"OBB: center must be finite (not {center})")
        if not np.all(np.isfinite(halfSizes)) or np.any(halfSizes < 0):
            raise InvalidInputError(
                f"OBB: halfSizes must be finite and non-negative (not {halfSizes})"
            )
        if not is_orthonormal(rotation):
            raise InvalidInputError("OBB: rotation columns must be orthonormal")
        if np.linalg.det(rotation) < 0:
            raise InvalidInputError("OBB: rotation must not be a reflection")

        return center, halfSizes, rotation

    def set(self, center, halfSizes, rotation):
        """
        Set the given values to this OBB.

        Args:
            center: Center of the box
            halfSizes: Half sizes along the local axes (width, height, depth)
            rotation: 3x3 matrix whose columns are the local axes

        Returns:
            A reference to this OBB

        Raises:
            InvalidInputError: If the values violate the box invariants
        """
        self.center, self.halfSizes, self.rotation = self._checked(
            center, halfSizes, rotation
        )
        return self

    def copy(self, obb):
        """Copy all values from the given OBB to this OBB."""
        return self.set(obb.center, obb.halfSizes, obb.rotation)

    def clone(self):
        """Create a new OBB holding a copy of this OBB's values."""
        return type(self)().copy(self)

    def toLocal(self, point):
        """Coordinates of point along the local axes, relative to the center."""
        d = np.asarray(point, dtype=Real) - self.center
        return self.rotation.T @ d

    def clampPoint(self, point, result=None):
        """
        Find the point of this OBB closest to the given point.

        Args:
            point: A point in 3D space
            result: Optional vector receiving the result

        Returns:
            The clamped point (``result`` if it was given)
        """
        # project onto the box axes, clamp, then walk out from the center
        local = np.clip(self.toLocal(point), -self.halfSizes, self.halfSizes)
        closest = self.center + self.rotation @ local

        if result is None:
            return closest
        result[:] = closest
        return result

    def containsPoint(self, point, tolerance=0.0) -> bool:
        """
        Check if the given point is inside this OBB (boundary inclusive).

        Args:
            point: A point in 3D space
            tolerance: Extra margin added to every half size

        Returns:
            True if the point is inside the box
        """
        local = self.toLocal(point)
        return bool(np.all(np.abs(local) <= self.halfSizes + tolerance))

    def intersectsBoundingSphere(self, sphere) -> bool:
        """Check if the given bounding sphere intersects this OBB."""
        # the point of the box closest to the sphere center decides
        closest = self.clampPoint(sphere.center)
        return Math.squaredDistance(closest, sphere.center) <= pow2(sphere.radius)

    def getAlignedBox(self) -> AlignedBox3r:
        """
        Get the world-space axis-aligned box enclosing this OBB.

        Returns:
            Axis-aligned bounding box
        """
        extent = np.abs(self.rotation) @ self.halfSizes
        return AlignedBox3r(self.center - extent, self.center + extent)

    def getVolume(self):
        """Return the volume of the box."""
        return float(8.0 * np.prod(self.halfSizes))

    @staticmethod
    def triangulateHull(hull) -> List[Tuple[np.ndarray, np.ndarray, np.ndarray]]:
        """Fan-triangulate every hull face from its first vertex."""
        triangles = []
        for face in hull.faces:
            vertices = face.getVertices()
            for j in range(1, len(vertices) - 1):
                triangles.append((vertices[0], vertices[j], vertices[j + 1]))
        return triangles

    @staticmethod
    def computeCovariance(triangles):
        """
        Covariance matrix of a triangulated surface.

        Every triangle contributes its exact second moment, weighted by its
        area; see S. Gottschalk, "Collision Queries using Oriented Bounding
        Boxes", chapter 3.4.3.

        Args:
            triangles: Sequence of (p, q, r) vertex triples

        Returns:
            Tuple (covariance, weightedMean, areaSum)

        Raises:
            NumericError: If the surface has zero area
        """
        moments = np.zeros((3, 3), dtype=Real)
        weightedMean = Vector3r()
        areaSum = 0.0

        for p, q, r in triangles:
            mean = (p + q + r) / 3.0
            area = np.linalg.norm(np.cross(q - p, r - p)) / 2.0

            weightedMean += mean * area
            areaSum += area

            moments += (
                9.0 * np.outer(mean, mean)
                + np.outer(p, p)
                + np.outer(q, q)
                + np.outer(r, r)
            ) * (area / 12.0)

        if not areaSum > 0.0:
            raise NumericError(
                f"OBB: surface area is {areaSum}, covariance is undefined"
            )

        weightedMean /= areaSum
        covariance = moments / areaSum - np.outer(weightedMean, weightedMean)

        if not np.all(np.isfinite(covariance)):
            raise NumericError("OBB: covariance matrix is not finite")

        # roundoff on otherwise zero entries would tilt axes of symmetric shapes
        scale = np.max(np.abs(covariance))
        covariance[np.abs(covariance) < ROUNDOFF * scale] = 0.0

        return covariance, weightedMean, areaSum

    def fromPoints(self, points, accumulate=False):
        """
        Compute a tight enclosing OBB for the given set of points.

        The axes are the eigenvectors of the covariance of the convex hull's
        surface. The order and sign of the axes are arbitrary; the extents
        are measured along whatever axes the decomposition returns.

        Args:
            points: Sequence of at least 4 affinely independent 3D points
            accumulate: Add the computed center onto the current center
                instead of replacing it

        Returns:
            A reference to this OBB

        Raises:
            InvalidInputError: If the points are too few or degenerate
            NumericError: If the hull surface has zero area
        """
        hull = ConvexHull().fromPoints(points)
        pts = np.asarray(points, dtype=Real)

        # 1. triangulate the hull and build the covariance matrix
        triangles = self.triangulateHull(hull)
        covariance, _, areaSum = self.computeCovariance(triangles)

        # 2. principal axes, as a proper rotation
        unitary, _ = matrix_eigen_decomposition(covariance)
        if np.linalg.det(unitary) < 0:
            unitary[:, 2] = -unitary[:, 2]

        # 3. extents of the points along every axis
        projections = pts @ unitary
        lower = projections.min(axis=0)
        upper = projections.max(axis=0)

        offset = unitary @ (0.5 * (lower + upper))
        center = self.center + offset if accumulate else offset

        self.set(center, 0.5 * (upper - lower), unitary)
        self.debug(
            f"Fitted OBB to {len(pts)} points ({len(triangles)} hull triangles, "
            f"area {areaSum:.6g}): halfSizes={self.halfSizes}"
        )
        return self

    def equals(self, obb) -> bool:
        """Exact field-wise equality with another OBB."""
        if not isinstance(obb, OBB):
            return False
        return (
            np.array_equal(self.center, obb.center)
            and np.array_equal(self.halfSizes, obb.halfSizes)
            and np.array_equal(self.rotation, obb.rotation)
        )

    def __eq__(self, other):
        return self.equals(other)

    __hash__ = None

    def toJSON(self):
        """
        Transform this instance into a JSON-compatible dictionary.

        The rotation is flattened column by column.
        """
        return {
            "type": self.typeName,
            "center": self.center.tolist(),
            "halfSizes": self.halfSizes.tolist(),
            "rotation": self.rotation.flatten(order="F").tolist(),
        }

    def fromJSON(self, json):
        """
        Restore this instance from a dictionary produced by ``toJSON``.

        Nothing is modified unless the whole input is valid.

        Returns:
            A reference to this OBB

        Raises:
            SerializationError: If fields are missing or malformed
        """
        if not isinstance(json, Mapping):
            raise SerializationError(
                f"OBB: expected a mapping, got {type(json).__name__}"
            )

        typeName = json.get("type", self.typeName)
        if typeName != self.typeName:
            raise SerializationError(
                f"OBB: cannot restore from type '{typeName}'"
            )

        fields = {}
        for key, length in (("center", 3), ("halfSizes", 3), ("rotation", 9)):
            if key not in json:
                raise SerializationError(f"OBB: missing field '{key}'")
            try:
                raw = np.asarray(json[key])
            except (TypeError, ValueError) as e:
                raise SerializationError(f"OBB: field '{key}' is not numeric") from e
            if raw.dtype.kind not in "iuf":
                raise SerializationError(
                    f"OBB: field '{key}' must hold numbers (dtype {raw.dtype})"
                )
            values = raw.astype(Real)
            if values.shape != (length,):
                raise SerializationError(
                    f"OBB: field '{key}' must hold {length} numbers (shape {values.shape})"
                )
            fields[key] = values

        try:
            center, halfSizes, rotation = self._checked(
                fields["center"],
                fields["halfSizes"],
                fields["rotation"].reshape((3, 3), order="F"),
            )
        except InvalidInputError as e:
            raise SerializationError(f"OBB: invalid box data ({e})") from e

        self.center, self.halfSizes, self.rotation = center, halfSizes, rotation
        return self

    def __repr__(self):
        return (
            f"{self.getClassName()}(center={self.center.tolist()}, halfSizes={self.halfSizes.tolist()}, "
            f"rotation={self.rotation.tolist()})"
        )
