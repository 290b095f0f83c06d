"""Rigid poses (position + orientation).

A ``Pose`` places a child frame inside a parent frame. Composition follows the
usual robotics convention:

- ``a + b`` maps pose ``a`` (expressed in frame ``b``) into ``b``'s parent.
- ``a - b`` expresses pose ``a`` in frame ``b``.

so that ``(a - b) + b == a`` and applying offset ``p1`` then ``p2`` to a frame
is ``p2 + p1``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from .quat import (
    quat_from_rpy,
    quat_identity,
    quat_inverse,
    quat_mul,
    quat_normalize,
    quat_rotate,
    quat_to_rotmat,
    quat_to_rpy,
)
from .vector import vec3


ArrayF = NDArray[np.float64]


@dataclass(slots=True, frozen=True, eq=False)
class Pose:
    position: ArrayF = field(default_factory=lambda: np.zeros(3, dtype=np.float64))
    orientation: ArrayF = field(default_factory=quat_identity)

    def __post_init__(self) -> None:
        q = np.array(self.orientation, dtype=np.float64)
        if q.shape != (4,):
            raise ValueError("orientation must have shape (4,)")
        position = vec3(self.position, "position")
        orientation = quat_normalize(q)
        # shared freely between copies, so the arrays must stay read-only
        position.flags.writeable = False
        orientation.flags.writeable = False
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "orientation", orientation)

    @classmethod
    def identity(cls) -> "Pose":
        return cls()

    @classmethod
    def from_xyz_rpy(
        cls,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        roll: float = 0.0,
        pitch: float = 0.0,
        yaw: float = 0.0,
    ) -> "Pose":
        """Build a pose from the six-number SDF form."""
        return cls(
            position=np.array([x, y, z], dtype=np.float64),
            orientation=quat_from_rpy(np.array([roll, pitch, yaw], dtype=np.float64)),
        )

    @classmethod
    def parse(cls, value: Any) -> "Pose":
        """Accept a Pose, a 6-sequence or an ``"x y z roll pitch yaw"`` string."""
        if isinstance(value, Pose):
            return value
        if isinstance(value, str):
            value = value.split()
        try:
            numbers = [float(v) for v in value]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"cannot parse pose from {value!r}") from exc
        if len(numbers) != 6:
            raise ValueError("pose must have 6 values: x y z roll pitch yaw")
        return cls.from_xyz_rpy(*numbers)

    def to_xyz_rpy(self) -> list[float]:
        rpy = quat_to_rpy(self.orientation)
        return [float(v) for v in self.position] + [float(v) for v in rpy]

    @property
    def rotation_matrix(self) -> ArrayF:
        return quat_to_rotmat(self.orientation)

    def inverse(self) -> "Pose":
        q_inv = quat_inverse(self.orientation)
        return Pose(position=-quat_rotate(q_inv, self.position), orientation=q_inv)

    def __add__(self, other: "Pose") -> "Pose":
        if not isinstance(other, Pose):
            return NotImplemented
        return Pose(
            position=other.position + quat_rotate(other.orientation, self.position),
            orientation=quat_mul(other.orientation, self.orientation),
        )

    def __sub__(self, other: "Pose") -> "Pose":
        if not isinstance(other, Pose):
            return NotImplemented
        q_inv = quat_inverse(other.orientation)
        return Pose(
            position=quat_rotate(q_inv, self.position - other.position),
            orientation=quat_mul(q_inv, self.orientation),
        )

    def is_close(self, other: "Pose", atol: float = 1e-9) -> bool:
        """Compare positions and rotations (q and -q are the same rotation)."""
        if not np.allclose(self.position, other.position, rtol=0.0, atol=atol):
            return False
        return bool(
            np.allclose(self.rotation_matrix, other.rotation_matrix, rtol=0.0, atol=atol)
        )

    def __repr__(self) -> str:
        return f"Pose(position={self.position.tolist()}, orientation={self.orientation.tolist()})"
