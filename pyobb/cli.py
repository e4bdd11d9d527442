#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
import json
import argparse
import logging
import numpy as np
import coloredlogs
from IPython import embed

import pyobb
from pyobb.src.OBB import OBB
from pyobb.src.BoundingSphere import BoundingSphere
from pyobb.src.ConvexHull import ConvexHull
from pyobb.src.Errors import OBBError
from pyobb.src.obbmath import Vector3r, Matrix3r, Real


"""
- setup_logging
- load_points
- load_obb
- fit / contains / clamp / intersects / shell commands
- main

"""

logger = logging.getLogger("PyOBB.CLI")

LOG_FORMAT = "[%(asctime)s] - [%(name)s] - [%(levelname)s] - [%(message)s]"


def setup_logging(log_level):
    """Set up logging system"""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))

    # Clear handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # Colored console handler on the root logger
    coloredlogs.install(level=log_level, logger=root_logger, fmt=LOG_FORMAT)

    # Set 3rd-party logging level to root
    logging.getLogger("numpy").setLevel(logging.WARNING)

    return root_logger


def load_points(path):
    """
    Load a point cloud from a file.

    JSON files hold a list of [x, y, z] triples; any other file is read as
    text with three columns, separated by whitespace or commas.
    """
    if path.endswith(".json"):
        with open(path, "r") as f:
            points = np.array(json.load(f), dtype=Real)
    else:
        with open(path, "r") as f:
            text = f.read()
        delimiter = "," if "," in text else None
        points = np.loadtxt(text.splitlines(), delimiter=delimiter, ndmin=2)

    logger.debug(f"Loaded {len(points)} points from {path}")
    return points


def load_obb(path):
    """Load an OBB from a JSON file written by ``pyobb fit``."""
    with open(path, "r") as f:
        return OBB().fromJSON(json.load(f))


def cmd_fit(args):
    points = load_points(args.points)
    obb = OBB(center=args.center).fromPoints(points, accumulate=args.accumulate)
    text = json.dumps(obb.toJSON(), indent=args.indent)

    if args.output:
        with open(args.output, "w") as f:
            f.write(text + "\n")
        logger.info(f"OBB written to {args.output}")
    else:
        print(text)


def cmd_contains(args):
    obb = load_obb(args.obb)
    print(json.dumps(obb.containsPoint(Vector3r(*args.point))))


def cmd_clamp(args):
    obb = load_obb(args.obb)
    print(json.dumps(obb.clampPoint(Vector3r(*args.point)).tolist()))


def cmd_intersects(args):
    obb = load_obb(args.obb)
    sphere = BoundingSphere(args.center, args.radius)
    print(json.dumps(obb.intersectsBoundingSphere(sphere)))


def start_interactive(args):
    """Start interactive IPython environment."""
    logger.info("Starting interactive PyOBB environment")

    banner = f"""
    =====================================================
    PyOBB {pyobb.__version__} Interactive Environment
    -----------------------------------------------------
    OBB, BoundingSphere, ConvexHull, Vector3r and
    Matrix3r are available.
    =====================================================
    """

    namespace = {
        "np": np,
        "OBB": OBB,
        "BoundingSphere": BoundingSphere,
        "ConvexHull": ConvexHull,
        "Vector3r": Vector3r,
        "Matrix3r": Matrix3r,
    }

    embed(banner1=banner, user_ns=namespace)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pyobb", description="PyOBB - Oriented Bounding Boxes"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set log level",
    )
    parser.add_argument(
        "--indent", type=int, default=None, help="Indentation of JSON output"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    fit = subparsers.add_parser("fit", help="Fit an OBB to a point file")
    fit.add_argument("points", help="JSON or text file with 3D points")
    fit.add_argument(
        "--accumulate",
        action="store_true",
        help="Add the fitted center onto --center instead of replacing it",
    )
    fit.add_argument(
        "--center",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        help="Starting center of the box (default: origin)",
    )
    fit.add_argument("-o", "--output", help="Write the OBB JSON to this file")
    fit.set_defaults(func=cmd_fit)

    contains = subparsers.add_parser("contains", help="Test if an OBB contains a point")
    contains.add_argument("obb", help="OBB JSON file")
    contains.add_argument("point", type=float, nargs=3, metavar=("X", "Y", "Z"))
    contains.set_defaults(func=cmd_contains)

    clamp = subparsers.add_parser("clamp", help="Clamp a point into an OBB")
    clamp.add_argument("obb", help="OBB JSON file")
    clamp.add_argument("point", type=float, nargs=3, metavar=("X", "Y", "Z"))
    clamp.set_defaults(func=cmd_clamp)

    intersects = subparsers.add_parser(
        "intersects", help="Test if an OBB intersects a bounding sphere"
    )
    intersects.add_argument("obb", help="OBB JSON file")
    intersects.add_argument("center", type=float, nargs=3, metavar=("CX", "CY", "CZ"))
    intersects.add_argument("radius", type=float)
    intersects.set_defaults(func=cmd_intersects)

    shell = subparsers.add_parser("shell", help="Start an interactive IPython shell")
    shell.set_defaults(func=start_interactive)

    return parser


def main(argv=None):
    """Main function, handle command line arguments."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        args.func(args)
    except (OBBError, OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
