"""Build a dumbbell from two spheres and a bar, then move its reference frame."""

from __future__ import annotations

import numpy as np

from rigid_inertia.core.math.pose import Pose
from rigid_inertia.core.rigid_body import box, compose, sphere
from rigid_inertia.io import InertialBinding, element_from_mass_properties


if __name__ == "__main__":
    a = 0.5
    left = sphere(1.0, 0.1, pose=Pose.from_xyz_rpy(-a, 0.0, 0.0))
    right = sphere(1.0, 0.1, pose=Pose.from_xyz_rpy(a, 0.0, 0.0))
    bar = box(0.2, np.array([2.0 * a, 0.02, 0.02]))

    dumbbell = compose([left, right, bar])
    print("mass:", dumbbell.mass)
    print("com:", dumbbell.com)
    print("moi about com:\n", dumbbell.moi)

    offset = Pose.from_xyz_rpy(0.0, 0.0, -1.0, 0.0, 0.0, np.pi / 2.0)
    moved = dumbbell.transform(offset)
    print("com in offset frame:", moved.com)
    print("moi about offset origin:\n", dumbbell.moi_at(offset))

    element = element_from_mass_properties(dumbbell)
    binding = InertialBinding(element)
    binding.props.mass = 3.0
    print("tree mass (live):", element.to_dict()["mass"])
    binding.reset()
    print("tree mass after reset:", binding.props.mass)
