"""Inertia tensor assembly and reframing."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ..math.pose import Pose
from ..math.quat import quat_to_rotmat


ArrayF = NDArray[np.float64]


def tensor_from_entries(principals: ArrayF, products: ArrayF) -> ArrayF:
    """Assemble the symmetric 3x3 tensor from (Ixx, Iyy, Izz), (Ixy, Ixz, Iyz)."""
    ixx, iyy, izz = np.asarray(principals, dtype=np.float64)
    ixy, ixz, iyz = np.asarray(products, dtype=np.float64)
    return np.array(
        [
            [ixx, ixy, ixz],
            [ixy, iyy, iyz],
            [ixz, iyz, izz],
        ],
        dtype=np.float64,
    )


def entries_from_tensor(tensor: ArrayF) -> tuple[ArrayF, ArrayF]:
    """Split a tensor into principal moments and products (upper triangle)."""
    t = np.asarray(tensor, dtype=np.float64)
    if t.shape != (3, 3):
        raise ValueError("tensor must have shape (3, 3)")
    principals = np.array([t[0, 0], t[1, 1], t[2, 2]], dtype=np.float64)
    products = np.array([t[0, 1], t[0, 2], t[1, 2]], dtype=np.float64)
    return principals, products


def parallel_axis(mass: float, offset: ArrayF) -> ArrayF:
    """Inertia of a point mass at ``offset`` about the origin."""
    d = np.asarray(offset, dtype=np.float64)
    return float(mass) * (float(np.dot(d, d)) * np.eye(3) - np.outer(d, d))


def moi_at(tensor: ArrayF, com_pose: Pose, mass: float, target_pose: Pose) -> ArrayF:
    """Return the inertia tensor re-expressed at ``target_pose``.

    Parameters
    ----------
    tensor : (3, 3)
        Inertia about the center of mass, in the center-of-mass frame.
    com_pose : Pose
        Center-of-mass frame in the reference frame.
    mass : float
        Body mass; unchanged by this operation.
    target_pose : Pose
        Frame to express the tensor in, given in the same reference frame.
    """
    delta = com_pose - target_pose

    rot = quat_to_rotmat(delta.orientation)
    moi = rot @ np.asarray(tensor, dtype=np.float64) @ rot.T

    # point mass at the CoM, seen from the target origin
    moi = moi + parallel_axis(mass, delta.position)
    return moi
