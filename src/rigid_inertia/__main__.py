"""Compose inertial documents and print the aggregate mass properties."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import numpy as np

from . import __version__
from .core.math.pose import Pose
from .core.rigid_body.mass_properties import MassProperties, compose
from .io import (
    InertialBinding,
    InertialUpdate,
    apply_update,
    element_from_mass_properties,
    load_inertial,
    save_inertial,
)
from .logging_config import setup_logging


logger = logging.getLogger("rigid_inertia")


def _print_props(props: MassProperties) -> None:
    print("mass:", props.mass)
    # adding 0.0 turns -0.0 into 0.0
    pose = np.round(props.com_pose.to_xyz_rpy(), 12) + 0.0
    print("com pose (x y z roll pitch yaw):", pose.tolist())
    print("principal moments:", props.principal_moments.tolist())
    print("products of inertia:", props.products_of_inertia.tolist())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rigid_inertia", description=__doc__)
    parser.add_argument("inputs", type=Path, nargs="+", help="inertial JSON documents")
    parser.add_argument(
        "--offset",
        type=float,
        nargs=6,
        metavar=("X", "Y", "Z", "ROLL", "PITCH", "YAW"),
        default=None,
        help="frame offset applied to the aggregate",
    )
    parser.add_argument("--update", type=str, default=None, help="sparse update as JSON")
    parser.add_argument("--out", type=Path, default=None, help="save the aggregate here")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"rigid_inertia v{__version__}")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        bodies = [InertialBinding(load_inertial(path)).props for path in args.inputs]
        total = compose(bodies)
        if args.offset is not None:
            total = total.transform(Pose.from_xyz_rpy(*args.offset))
        if args.update is not None:
            apply_update(total, InertialUpdate.from_dict(json.loads(args.update)))
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    _print_props(total)
    if not total.is_physically_valid():
        logger.warning("aggregate mass properties are not physically valid")

    if args.out is not None:
        save_inertial(args.out, element_from_mass_properties(total))
        print("saved aggregate to:", args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
