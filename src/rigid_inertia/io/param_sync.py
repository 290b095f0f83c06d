"""Binding between ``MassProperties`` and an inertial parameter tree."""

from __future__ import annotations

import logging

from ..core.math.pose import Pose
from ..core.rigid_body.mass_properties import MassProperties
from .param_tree import INERTIA_KEYS, ParamElement, inertial_element


logger = logging.getLogger(__name__)

BOUND_FIELDS = ("mass",) + INERTIA_KEYS


class InertialBinding:
    """Loads mass properties from a tree and serves their live values back.

    The tree holds a reference to this binding for ``mass`` and the six
    ``inertia`` leaves. Call ``detach()`` before dropping the properties if the
    tree is kept around.
    """

    def __init__(self, element: ParamElement, props: MassProperties | None = None) -> None:
        self.props = props if props is not None else MassProperties()
        self.element = element
        self.load()

    def load(self) -> None:
        element = self.element
        pose = Pose.parse(element.get("pose"))
        inertia = element.get_element("inertia")
        values = [float(inertia.get(key)) for key in INERTIA_KEYS]
        mass = float(element.get("mass"))
        leaves = [element.get_element("mass")]
        leaves += [inertia.get_element(key) for key in INERTIA_KEYS]
        if any(leaf.is_frozen for leaf in leaves):
            raise ValueError(f"cannot bind to read-only element {element.name}")

        self.props.set_com_pose(pose)
        self.props.set_inertia_matrix(*values)
        self.props.mass = mass

        element.register_pull_provider("mass", self)
        for key in INERTIA_KEYS:
            inertia.register_pull_provider(key, self)
        logger.debug("loaded inertial %s: mass=%s", element.name, mass)

    def update_parameters(self, element: ParamElement) -> None:
        """Rebind to a new tree and reload from it."""
        self.detach()
        self.element = element
        self.load()

    def current_value(self, field_id: str) -> float:
        if field_id not in BOUND_FIELDS:
            raise KeyError(f"unknown inertial field: {field_id}")
        return float(getattr(self.props, field_id))

    def reset(self) -> None:
        """Restore mass and tensor from the tree; the CoM goes to identity."""
        inertia = self.element.get_element("inertia")
        self.props.mass = float(self.element.get("mass"))
        self.props.set_com_pose(Pose.identity())
        self.props.set_inertia_matrix(*[float(inertia.get(key)) for key in INERTIA_KEYS])
        logger.debug("reset inertial %s", self.element.name)

    def detach(self) -> None:
        if self.element.has_element("mass"):
            self.element.clear_pull_provider("mass")
        if self.element.has_element("inertia"):
            inertia = self.element.get_element("inertia")
            for key in INERTIA_KEYS:
                if inertia.has_element(key):
                    inertia.clear_pull_provider(key)


def element_from_mass_properties(props: MassProperties) -> ParamElement:
    """Return a fresh inertial tree holding a snapshot of ``props``."""
    return inertial_element(
        {
            "pose": props.com_pose,
            "mass": props.mass,
            "inertia": {key: getattr(props, key) for key in INERTIA_KEYS},
        }
    )
