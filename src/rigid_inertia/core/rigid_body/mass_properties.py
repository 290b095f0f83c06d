"""Mass properties of a single rigid body.

The inertia tensor is stored about the center of mass, expressed in the
center-of-mass frame ``com_pose``; ``com_pose`` itself is given in the body's
reference frame.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from ...errors import InvalidInertiaError, InvalidMassError
from ..math.pose import Pose
from ..math.quat import quat_identity, quat_mul, quat_rotate
from ..math.vector import vec3
from .tensor import entries_from_tensor, moi_at, tensor_from_entries


ArrayF = NDArray[np.float64]


@dataclass(slots=True, eq=False)
class MassProperties:
    """Mass, center-of-mass pose and inertia tensor of a rigid body.

    Setters never validate; use ``validate()`` to check physical consistency.
    """
    mass: float = 1.0
    com_pose: Pose = field(default_factory=Pose.identity)
    principal_moments: ArrayF = field(default_factory=lambda: np.ones(3, dtype=np.float64))
    products_of_inertia: ArrayF = field(default_factory=lambda: np.zeros(3, dtype=np.float64))

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        if not isinstance(self.com_pose, Pose):
            self.com_pose = Pose.parse(self.com_pose)
        self.principal_moments = vec3(self.principal_moments, "principal_moments")
        self.products_of_inertia = vec3(self.products_of_inertia, "products_of_inertia")

    def copy(self) -> "MassProperties":
        return MassProperties(
            mass=self.mass,
            com_pose=self.com_pose,
            principal_moments=self.principal_moments.copy(),
            products_of_inertia=self.products_of_inertia.copy(),
        )

    def __copy__(self) -> "MassProperties":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "MassProperties":
        return self.copy()

    def assign(self, other: "MassProperties") -> None:
        """Overwrite every field with a value copy of ``other``."""
        self.mass = other.mass
        self.com_pose = other.com_pose
        self.principal_moments = other.principal_moments.copy()
        self.products_of_inertia = other.products_of_inertia.copy()

    # center of mass

    @property
    def com(self) -> ArrayF:
        return self.com_pose.position.copy()

    def set_com(self, x: float, y: float, z: float) -> None:
        """Move the center of mass, keeping its orientation."""
        self.com_pose = Pose(
            position=np.array([x, y, z], dtype=np.float64),
            orientation=self.com_pose.orientation,
        )

    def set_com_pose(self, pose: Pose | Any) -> None:
        self.com_pose = Pose.parse(pose)

    # inertia entries

    @property
    def ixx(self) -> float:
        return float(self.principal_moments[0])

    @ixx.setter
    def ixx(self, value: float) -> None:
        self.principal_moments[0] = value

    @property
    def iyy(self) -> float:
        return float(self.principal_moments[1])

    @iyy.setter
    def iyy(self, value: float) -> None:
        self.principal_moments[1] = value

    @property
    def izz(self) -> float:
        return float(self.principal_moments[2])

    @izz.setter
    def izz(self, value: float) -> None:
        self.principal_moments[2] = value

    @property
    def ixy(self) -> float:
        return float(self.products_of_inertia[0])

    @ixy.setter
    def ixy(self, value: float) -> None:
        self.products_of_inertia[0] = value

    @property
    def ixz(self) -> float:
        return float(self.products_of_inertia[1])

    @ixz.setter
    def ixz(self, value: float) -> None:
        self.products_of_inertia[1] = value

    @property
    def iyz(self) -> float:
        return float(self.products_of_inertia[2])

    @iyz.setter
    def iyz(self, value: float) -> None:
        self.products_of_inertia[2] = value

    def set_inertia_matrix(
        self, ixx: float, iyy: float, izz: float, ixy: float, ixz: float, iyz: float
    ) -> None:
        self.principal_moments = np.array([ixx, iyy, izz], dtype=np.float64)
        self.products_of_inertia = np.array([ixy, ixz, iyz], dtype=np.float64)

    @property
    def moi(self) -> ArrayF:
        """Inertia tensor about the CoM, in the CoM frame."""
        return tensor_from_entries(self.principal_moments, self.products_of_inertia)

    def set_moi(self, tensor: ArrayF) -> None:
        # only the upper triangle is read
        self.principal_moments, self.products_of_inertia = entries_from_tensor(tensor)

    def moi_at(self, pose: Pose) -> ArrayF:
        """Inertia tensor about the origin of ``pose``, in that frame."""
        return moi_at(self.moi, self.com_pose, self.mass, pose)

    # frame changes

    def transform(self, frame_offset: Pose) -> "MassProperties":
        """Return these properties seen from a frame displaced by ``frame_offset``."""
        result = self.copy()
        result.com_pose = self.com_pose - frame_offset
        # the tensor is stored about the CoM in its own frame, so it carries over
        return result

    def rotate(self, rotation: ArrayF) -> None:
        """Rotate the center-of-mass frame about the body origin."""
        q = np.asarray(rotation, dtype=np.float64)
        self.com_pose = Pose(
            position=quat_rotate(q, self.com_pose.position),
            orientation=quat_mul(q, self.com_pose.orientation),
        )

    # composition

    def __add__(self, other: "MassProperties") -> "MassProperties":
        if not isinstance(other, MassProperties):
            return NotImplemented
        total = self.mass + other.mass
        if not np.isfinite(total) or total <= 0.0:
            raise InvalidMassError(f"cannot compose bodies with total mass {total}")

        com = (
            self.com_pose.position * self.mass + other.com_pose.position * other.mass
        ) / total
        # the aggregate frame is axis-aligned with the reference frame
        com_pose = Pose(position=com, orientation=quat_identity())

        result = MassProperties(mass=total, com_pose=com_pose)
        result.set_moi(self.moi_at(com_pose) + other.moi_at(com_pose))
        return result

    def __radd__(self, other: Any) -> "MassProperties":
        # lets sum() start from 0
        if isinstance(other, (int, float)) and other == 0:
            return self.copy()
        return NotImplemented

    def __iadd__(self, other: "MassProperties") -> "MassProperties":
        if not isinstance(other, MassProperties):
            return NotImplemented
        self.assign(self + other)
        return self

    # checks

    def is_same(self, other: "MassProperties", atol: float = 1e-9) -> bool:
        """Check if these mass properties match ``other`` within ``atol``."""
        return (
            bool(np.isclose(self.mass, other.mass, rtol=0.0, atol=atol))
            and self.com_pose.is_close(other.com_pose, atol=atol)
            and bool(np.allclose(self.moi, other.moi, rtol=0.0, atol=atol))
        )

    def is_physically_valid(self, eps: float = 1e-12) -> bool:
        try:
            self.validate(eps)
        except (InvalidMassError, InvalidInertiaError):
            return False
        return True

    def validate(self, eps: float = 1e-12) -> None:
        """Raise if mass is negative or the tensor is not PSD.

        Eigenvalues down to ``-eps`` are accepted.
        """
        if not np.isfinite(self.mass) or self.mass < 0.0:
            raise InvalidMassError(f"mass must be >= 0, got {self.mass}")
        moi = self.moi
        if not np.all(np.isfinite(moi)):
            raise InvalidInertiaError("inertia tensor has non-finite entries")
        eigvals = np.linalg.eigvalsh(moi)
        if np.min(eigvals) < -eps:
            raise InvalidInertiaError(
                f"inertia tensor is not positive semi-definite (eigenvalues {eigvals})"
            )


def compose(bodies: Iterable[MassProperties]) -> MassProperties:
    """Sum the mass properties of several bodies into one aggregate."""
    result: MassProperties | None = None
    for body in bodies:
        result = body.copy() if result is None else result + body
    if result is None:
        raise InvalidMassError("cannot compose an empty set of bodies")
    return result
