import numpy as np

import pyobb
from pyobb import *
from pyobb.src.obbmath import matrix_from_euler_angles_xyz


############################ Points ############################
rng = np.random.default_rng(0)
rotation = matrix_from_euler_angles_xyz(0.2, -0.4, 0.9)
points = (rng.normal(size=(500, 3)) * [4.0, 1.5, 0.5]) @ rotation.T + [10, 0, -3]


############################ Fit ############################
obb = OBB().fromPoints(points)

print("Center:    ", obb.center)
print("HalfSizes: ", obb.halfSizes)
print("Rotation:\n", obb.rotation)
print("Volume:    ", obb.getVolume())
print("All points inside:", all(obb.containsPoint(p, tolerance=1e-9) for p in points))


############################ Queries ############################
probe = Vector3r(20, 5, 5)
print("Clamped probe:", obb.clampPoint(probe))

for radius in (1.0, 10.0):
    sphere = BoundingSphere(probe, radius)
    print(f"Sphere r={radius} intersects:", obb.intersectsBoundingSphere(sphere))

print("Aligned box:", obb.getAlignedBox())


############################ Save / load ############################
data = obb.toJSON()
restored = OBB().fromJSON(data)
print("Restored equals original:", restored.equals(obb))
