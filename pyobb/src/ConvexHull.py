#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
from typing import List, Optional
from scipy.spatial import ConvexHull as QhullConvexHull
from scipy.spatial import QhullError

from pyobb.src.Object import Object
from pyobb.src.Errors import InvalidInputError
from pyobb.src.OBBLogging import OBB_LOGGER
from pyobb.src.obbmath import Vector3r, Real, MIN_FIT_POINTS


class HalfEdge:
    """Directed edge of a hull face; ``vertex`` is the edge's head."""

    def __init__(self, vertex, face):
        self.vertex = vertex
        self.face = face
        self.next: Optional["HalfEdge"] = None
        self.prev: Optional["HalfEdge"] = None

    def tail(self):
        """Return the vertex this edge starts from."""
        return self.prev.vertex if self.prev is not None else None

    def head(self):
        """Return the vertex this edge points to."""
        return self.vertex


class Face:
    """
    Planar polygon of a convex hull.

    The boundary is a closed ring of half-edges, ordered counter-clockwise
    when seen from outside the hull.
    """

    def __init__(self, normal=None):
        self.normal = Vector3r() if normal is None else normal
        self.edge: Optional[HalfEdge] = None

    @staticmethod
    def fromVertices(vertices, normal=None):
        """Create a face whose half-edge ring visits the given vertices in order."""
        face = Face(normal)
        edges = [HalfEdge(v, face) for v in vertices]
        count = len(edges)
        for i, edge in enumerate(edges):
            edge.next = edges[(i + 1) % count]
            edge.prev = edges[(i - 1) % count]
        face.edge = edges[0]
        return face

    def getEdges(self) -> List[HalfEdge]:
        """Walk the half-edge ring once, starting at ``self.edge``."""
        edges = []
        edge = self.edge
        while True:
            edges.append(edge)
            edge = edge.next
            if edge is self.edge:
                break
        return edges

    def getVertices(self):
        """Return the ordered boundary vertices of this face."""
        return [edge.vertex for edge in self.getEdges()]

    def getArea(self):
        """Return the polygon area (sum of fan triangles)."""
        vertices = self.getVertices()
        area = 0.0
        for j in range(1, len(vertices) - 1):
            area += 0.5 * np.linalg.norm(
                np.cross(vertices[j] - vertices[0], vertices[j + 1] - vertices[0])
            )
        return area


@OBB_LOGGER
class ConvexHull(Object):
    """
    Convex hull of a 3D point set.

    The hull itself is computed by Qhull; this class only exposes the result
    as faces with ordered half-edge rings.
    """

    def __init__(self):
        super().__init__()
        self.faces: List[Face] = []
        self.vertices = np.zeros((0, 3), dtype=Real)

    def fromPoints(self, points):
        """
        Compute the convex hull of the given points.

        Args:
            points: Sequence of 3D points or an (N, 3) array

        Returns:
            A reference to this hull

        Raises:
            InvalidInputError: If there are too few points or they span no volume
        """
        try:
            pts = np.asarray(points, dtype=Real)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"ConvexHull: points must be numeric ({e})") from e
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise InvalidInputError(
                f"ConvexHull: expected a sequence of 3D points, got shape {pts.shape}"
            )
        if len(pts) < MIN_FIT_POINTS:
            raise InvalidInputError(
                f"ConvexHull: at least {MIN_FIT_POINTS} points are required (got {len(pts)})"
            )
        if not np.all(np.isfinite(pts)):
            raise InvalidInputError("ConvexHull: points must be finite")

        try:
            hull = QhullConvexHull(pts)
        except QhullError as e:
            self.debug(f"Qhull rejected {len(pts)} points: {e}")
            raise InvalidInputError(
                "ConvexHull: points are degenerate (coplanar, collinear or coincident)"
            ) from e

        faces = []
        for simplex, equation in zip(hull.simplices, hull.equations):
            normal = equation[:3].astype(Real)
            a, b, c = (pts[i] for i in simplex)
            # Qhull does not orient simplices; make them counter-clockwise
            if np.dot(np.cross(b - a, c - a), normal) < 0:
                b, c = c, b
            faces.append(Face.fromVertices([a, b, c], normal))

        self.faces = faces
        self.vertices = pts[hull.vertices]
        self.debug(f"Built hull with {len(faces)} faces from {len(pts)} points")
        return self

    def getArea(self):
        """Return the total surface area of the hull."""
        return sum(face.getArea() for face in self.faces)
