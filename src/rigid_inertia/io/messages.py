"""Sparse inertial update messages."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

import numpy as np

from ..core.rigid_body.mass_properties import MassProperties
from ..errors import MalformedUpdateError


@dataclass(slots=True, frozen=True)
class InertialUpdate:
    """Decoded update; a field is present when it is not ``None``."""
    mass: float | None = None
    position: tuple[float, float, float] | None = None
    ixx: float | None = None
    iyy: float | None = None
    izz: float | None = None
    ixy: float | None = None
    ixz: float | None = None
    iyz: float | None = None

    def has(self, name: str) -> bool:
        if name not in _FIELD_NAMES:
            raise KeyError(f"unknown update field: {name}")
        return getattr(self, name) is not None

    def present_fields(self) -> list[str]:
        return [name for name in _FIELD_NAMES if getattr(self, name) is not None]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InertialUpdate":
        if not isinstance(data, dict):
            raise MalformedUpdateError("update must be an object")
        values: dict[str, Any] = {}
        for key, item in data.items():
            if key not in _FIELD_NAMES:
                raise MalformedUpdateError(f"unknown update field: {key}")
            if key == "position":
                values[key] = _decode_position(item)
            else:
                values[key] = _decode_number(item, key)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for name in self.present_fields():
            value = getattr(self, name)
            if name == "position":
                out[name] = {"x": value[0], "y": value[1], "z": value[2]}
            else:
                out[name] = value
        return out


_FIELD_NAMES = tuple(f.name for f in fields(InertialUpdate))


def _decode_number(value: Any, ctx: str) -> float:
    if isinstance(value, bool):
        raise MalformedUpdateError(f"{ctx} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedUpdateError(f"{ctx} must be a number, got {value!r}") from exc


def _decode_position(value: Any) -> tuple[float, float, float]:
    if isinstance(value, dict):
        for key in value:
            if key not in ("x", "y", "z"):
                raise MalformedUpdateError(f"unknown update field: position.{key}")
        # omitted components default to 0, as in the wire format
        return tuple(
            _decode_number(value.get(axis, 0.0), f"position.{axis}") for axis in ("x", "y", "z")
        )
    if isinstance(value, (list, tuple)) and len(value) == 3:
        return tuple(_decode_number(v, "position") for v in value)
    raise MalformedUpdateError("position must be {x, y, z} or a 3-sequence")


def apply_update(props: MassProperties, update: InertialUpdate) -> None:
    """Overwrite the fields present in ``update``; leave the rest untouched."""
    if update.mass is not None:
        props.mass = update.mass
    if update.position is not None:
        props.set_com(*update.position)
    if update.ixx is not None:
        props.ixx = update.ixx
    if update.ixy is not None:
        props.ixy = update.ixy
    if update.ixz is not None:
        props.ixz = update.ixz
    if update.iyy is not None:
        props.iyy = update.iyy
    if update.iyz is not None:
        props.iyz = update.iyz
    if update.izz is not None:
        props.izz = update.izz


def update_from_mass_properties(props: MassProperties) -> InertialUpdate:
    """Full update carrying every field of ``props``."""
    x, y, z = (float(v) for v in np.asarray(props.com))
    return InertialUpdate(
        mass=props.mass,
        position=(x, y, z),
        ixx=props.ixx,
        iyy=props.iyy,
        izz=props.izz,
        ixy=props.ixy,
        ixz=props.ixz,
        iyz=props.iyz,
    )
