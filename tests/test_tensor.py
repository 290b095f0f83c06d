from __future__ import annotations

import numpy as np
import pytest

from rigid_inertia.core.math.pose import Pose
from rigid_inertia.core.rigid_body.tensor import (
    entries_from_tensor,
    moi_at,
    parallel_axis,
    tensor_from_entries,
)


def test_point_mass_parallel_axis() -> None:
    moi = moi_at(np.zeros((3, 3)), Pose.from_xyz_rpy(1.0, 0.0, 0.0), 2.0, Pose.identity())
    assert np.allclose(moi, np.diag([0.0, 2.0, 2.0]))


def test_parallel_axis_products() -> None:
    moi = moi_at(np.zeros((3, 3)), Pose.from_xyz_rpy(1.0, 2.0, 0.0), 1.0, Pose.identity())
    expected = np.array(
        [
            [4.0, -2.0, 0.0],
            [-2.0, 1.0, 0.0],
            [0.0, 0.0, 5.0],
        ]
    )
    assert np.allclose(moi, expected)
    assert np.allclose(moi, moi.T)


def test_offset_is_measured_in_target_frame() -> None:
    target = Pose.from_xyz_rpy(1.0, 0.0, 0.0, 0.0, 0.0, np.pi / 2.0)
    com = Pose.from_xyz_rpy(1.0, 1.0, 0.0, 0.0, 0.0, np.pi / 2.0)
    # CoM sits one unit along the target's x axis
    moi = moi_at(np.zeros((3, 3)), com, 3.0, target)
    assert np.allclose(moi, np.diag([0.0, 3.0, 3.0]))


def test_rotated_com_frame() -> None:
    tensor = np.diag([1.0, 2.0, 3.0])
    com = Pose.from_xyz_rpy(0.0, 0.0, 0.0, 0.0, 0.0, np.pi / 2.0)
    moi = moi_at(tensor, com, 5.0, Pose.identity())
    assert np.allclose(moi, np.diag([2.0, 1.0, 3.0]))


def test_rotated_target_frame() -> None:
    tensor = np.diag([1.0, 2.0, 3.0])
    target = Pose.from_xyz_rpy(0.0, 0.0, 0.0, 0.0, 0.0, np.pi / 2.0)
    moi = moi_at(tensor, Pose.identity(), 5.0, target)
    assert np.allclose(moi, np.diag([2.0, 1.0, 3.0]))


def test_same_pose_keeps_tensor() -> None:
    tensor = tensor_from_entries(np.array([1.0, 2.0, 3.0]), np.array([0.1, 0.2, 0.3]))
    pose = Pose.from_xyz_rpy(1.0, -2.0, 0.5, 0.3, 0.2, 0.1)
    assert np.allclose(moi_at(tensor, pose, 4.0, pose), tensor)


def test_parallel_axis_matches_point_mass_formula() -> None:
    d = np.array([0.5, -1.0, 2.0])
    expected = 1.5 * (np.dot(d, d) * np.eye(3) - np.outer(d, d))
    assert np.allclose(parallel_axis(1.5, d), expected)


def test_entries_layout() -> None:
    tensor = tensor_from_entries(np.array([1.0, 2.0, 3.0]), np.array([4.0, 5.0, 6.0]))
    expected = np.array(
        [
            [1.0, 4.0, 5.0],
            [4.0, 2.0, 6.0],
            [5.0, 6.0, 3.0],
        ]
    )
    assert np.array_equal(tensor, expected)
    principals, products = entries_from_tensor(tensor)
    assert np.array_equal(principals, [1.0, 2.0, 3.0])
    assert np.array_equal(products, [4.0, 5.0, 6.0])


def test_entries_from_tensor_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        entries_from_tensor(np.zeros((2, 2)))
