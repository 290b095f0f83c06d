"""Declarative parameter tree and inertial document I/O.

A ``ParamElement`` is a named node holding either a scalar/pose value or child
elements. A leaf can be bound to a ``LiveValueProvider``; serializing the tree
then pulls the provider's current value instead of the stored one, while
``get()`` keeps returning the stored value.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Protocol

from ..core.math.pose import Pose
from ..errors import MissingConfigElementError


logger = logging.getLogger(__name__)

INERTIA_KEYS = ("ixx", "iyy", "izz", "ixy", "ixz", "iyz")


class LiveValueProvider(Protocol):
    def current_value(self, field_id: str) -> Any:
        ...


class ParamElement:
    def __init__(
        self,
        name: str,
        value: Any = None,
        children: Iterable["ParamElement"] = (),
    ) -> None:
        self.name = name
        self._value = _coerce_new(value)
        self._children: dict[str, ParamElement] = {}
        self._provider: LiveValueProvider | None = None
        self._field_id: str | None = None
        self._frozen = False
        for child in children:
            self.add_element(child)

    def __repr__(self) -> str:
        if self._children:
            return f"ParamElement({self.name!r}, children={list(self._children)})"
        return f"ParamElement({self.name!r}, value={self._value!r})"

    # structure

    def add_element(self, child: "ParamElement") -> "ParamElement":
        self._check_mutable()
        if child.name in self._children:
            raise ValueError(f"duplicate element: {self.name}/{child.name}")
        self._children[child.name] = child
        return child

    def has_element(self, name: str) -> bool:
        return name in self._children

    def get_element(self, name: str) -> "ParamElement":
        try:
            return self._children[name]
        except KeyError:
            raise MissingConfigElementError(f"{self.name}/{name}") from None

    # values

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        self._check_mutable()
        self._value = _coerce_like(self._value, value, self.name)

    def get(self, name: str) -> Any:
        """Return the stored value of child ``name``."""
        return self.get_element(name).value

    def merge(self, data: dict[str, Any]) -> None:
        """Overlay nested values onto existing elements."""
        for key, item in data.items():
            if key not in self._children:
                raise ValueError(f"unknown element: {self.name}/{key}")
            child = self._children[key]
            if isinstance(item, dict):
                child.merge(item)
            else:
                child.set(item)

    # live binding

    def register_pull_provider(
        self, name: str, provider: LiveValueProvider, field_id: str | None = None
    ) -> None:
        element = self.get_element(name)
        element._check_mutable()
        element._provider = provider
        element._field_id = field_id if field_id is not None else name

    def clear_pull_provider(self, name: str) -> None:
        element = self.get_element(name)
        element._provider = None
        element._field_id = None

    @property
    def is_bound(self) -> bool:
        return self._provider is not None

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def current_value(self) -> Any:
        if self._provider is not None and self._field_id is not None:
            return self._provider.current_value(self._field_id)
        return self._value

    def update(self) -> None:
        """Store the pulled value of every bound leaf."""
        if self._provider is not None:
            self.set(self.current_value())
        for child in self._children.values():
            child.update()

    # copies and serialization

    def clone(self) -> "ParamElement":
        """Deep copy without provider bindings."""
        return ParamElement(
            self.name,
            self._value,
            [child.clone() for child in self._children.values()],
        )

    def freeze(self) -> None:
        self._frozen = True
        for child in self._children.values():
            child.freeze()

    def to_dict(self) -> Any:
        if self._children:
            return {name: child.to_dict() for name, child in self._children.items()}
        value = self.current_value()
        if isinstance(value, Pose):
            return value.to_xyz_rpy()
        return value

    @classmethod
    def from_dict(cls, name: str, data: Any) -> "ParamElement":
        if isinstance(data, dict):
            return cls(name, children=[cls.from_dict(k, v) for k, v in data.items()])
        return cls(name, data)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise ValueError(f"element {self.name} is read-only")


def _coerce_new(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return value


def _coerce_like(current: Any, value: Any, ctx: str) -> Any:
    if isinstance(current, Pose):
        return Pose.parse(value)
    if isinstance(current, float):
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{ctx} must be a number, got {value!r}") from exc
    return _coerce_new(value)


def _build_inertial_template() -> ParamElement:
    inertia = ParamElement(
        "inertia",
        children=[
            ParamElement(key, 1.0 if key in ("ixx", "iyy", "izz") else 0.0)
            for key in INERTIA_KEYS
        ],
    )
    root = ParamElement(
        "inertial",
        children=[
            ParamElement("pose", Pose.identity()),
            ParamElement("mass", 1.0),
            inertia,
        ],
    )
    root.freeze()
    return root


# built once at import; never bound or mutated
INERTIAL_TEMPLATE = _build_inertial_template()


def inertial_element(data: dict[str, Any] | None = None) -> ParamElement:
    """Return a fresh inertial tree with schema defaults, overlaid with ``data``."""
    element = INERTIAL_TEMPLATE.clone()
    if data:
        element.merge(data)
    return element


def load_inertial(path: str | Path) -> ParamElement:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    data = _validate_inertial_v1(data)
    logger.debug("loaded inertial document %s", path)
    return inertial_element(data["inertial"])


def save_inertial(path: str | Path, element: ParamElement) -> None:
    defn = {"schema_version": 1, "inertial": element.to_dict()}
    Path(path).write_text(
        json.dumps(defn, indent=2, sort_keys=True),
        encoding="utf-8",
    )
    logger.debug("saved inertial document %s", path)


def _require(obj: dict[str, Any], key: str, ctx: str) -> Any:
    if key not in obj:
        raise ValueError(f"missing required field: {ctx}.{key}")
    return obj[key]


def _require_number(value: Any, ctx: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{ctx} must be a number")


def _validate_inertial_v1(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError("inertial document must be a JSON object")
    if data.get("schema_version") != 1:
        raise ValueError("schema_version must be 1")

    inertial = _require(data, "inertial", "document")
    if not isinstance(inertial, dict):
        raise ValueError("inertial must be an object")
    for key in inertial:
        if key not in {"pose", "mass", "inertia"}:
            raise ValueError(f"unknown field: inertial.{key}")

    if "mass" in inertial:
        _require_number(inertial["mass"], "inertial.mass")
    if "pose" in inertial:
        Pose.parse(inertial["pose"])
    if "inertia" in inertial:
        inertia = inertial["inertia"]
        if not isinstance(inertia, dict):
            raise ValueError("inertial.inertia must be an object")
        for key, value in inertia.items():
            if key not in INERTIA_KEYS:
                raise ValueError(f"unknown field: inertial.inertia.{key}")
            _require_number(value, f"inertial.inertia.{key}")
    return data
