from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suzuka-build",
        description="Build the Suzuka services in order, stopping at the first failure",
    )

    parser.add_argument(
        "--profile-flags",
        default=None,
        help="Extra cargo build flags (default: $CARGO_PROFILE_FLAGS)",
    )

    parser.add_argument(
        "-C",
        "--working-dir",
        default=None,
        help="Run cargo from this directory (default: current directory)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=False,
    )

    # run
    subparsers.add_parser("run", help="Build every target (default)")

    # list
    subparsers.add_parser("list", help="List targets in build order")

    # plan
    subparsers.add_parser("plan", help="Show the cargo command for each target")

    return parser
