"""Mass properties of common solids and point-mass sets."""

from __future__ import annotations

import numpy as np

from ..math.pose import Pose
from .mass_properties import MassProperties
from .tensor import parallel_axis


def from_point_masses(points: np.ndarray, masses: np.ndarray) -> MassProperties:
    """Return mass properties of a rigid set of point masses.

    Parameters
    ----------
    points : (K, 3)
        Point positions in the body frame.
    masses : (K,)
        Point masses.
    """
    points = np.asarray(points, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError("points must have shape (K, 3)")
    if masses.ndim != 1 or masses.shape[0] != points.shape[0]:
        raise ValueError("masses must have shape (K,)")

    total_mass = float(np.sum(masses))
    if total_mass <= 0.0:
        raise ValueError("total mass must be positive")

    com = np.sum(points * masses[:, np.newaxis], axis=0) / total_mass
    inertia = np.zeros((3, 3), dtype=np.float64)
    for m, p in zip(masses, points - com):
        inertia += parallel_axis(m, p)

    props = MassProperties(mass=total_mass, com_pose=Pose(position=com))
    props.set_moi(inertia)
    return props


def box(mass: float, size: np.ndarray, pose: Pose | None = None) -> MassProperties:
    """Return mass properties of a solid box centered at ``pose``."""
    mass_val = float(mass)
    if mass_val <= 0.0:
        raise ValueError("mass must be > 0")
    dims = np.asarray(size, dtype=np.float64)
    if dims.shape != (3,):
        raise ValueError("size must have shape (3,)")
    if np.any(dims <= 0.0):
        raise ValueError("size values must be > 0")
    sx, sy, sz = dims
    ixx = (mass_val / 12.0) * (sy * sy + sz * sz)
    iyy = (mass_val / 12.0) * (sx * sx + sz * sz)
    izz = (mass_val / 12.0) * (sx * sx + sy * sy)
    return MassProperties(
        mass=mass_val,
        com_pose=pose if pose is not None else Pose.identity(),
        principal_moments=np.array([ixx, iyy, izz]),
    )


def sphere(mass: float, radius: float, pose: Pose | None = None) -> MassProperties:
    """Return mass properties of a solid sphere centered at ``pose``."""
    mass_val = float(mass)
    if mass_val <= 0.0:
        raise ValueError("mass must be > 0")
    radius_val = float(radius)
    if radius_val <= 0.0:
        raise ValueError("radius must be > 0")
    i = (2.0 / 5.0) * mass_val * radius_val * radius_val
    return MassProperties(
        mass=mass_val,
        com_pose=pose if pose is not None else Pose.identity(),
        principal_moments=np.array([i, i, i]),
    )
