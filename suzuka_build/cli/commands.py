from __future__ import annotations

import argparse
import shlex
import sys

from suzuka_build.builder import BuilderUnavailableError, CargoBuilder
from suzuka_build.config import ConfigError, load_build_config, load_default_targets
from suzuka_build.orchestrator import BuildOrchestrator

from .args import build_parser


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)

        match args.command:
            case "run" | None:
                return cmd_run(args)
            case "list":
                return cmd_list(args)
            case "plan":
                return cmd_plan(args)
            case _:
                return 2

    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except BuilderUnavailableError as exc:
        print(str(exc), file=sys.stderr)
        return 127

    except KeyboardInterrupt:
        return 130


def main() -> None:
    sys.exit(run_cli())


def cmd_run(args: argparse.Namespace) -> int:
    config = load_build_config(
        profile_flags=args.profile_flags, working_dir=args.working_dir
    )
    targets = load_default_targets()
    orchestrator = BuildOrchestrator(CargoBuilder())
    rr = orchestrator.run(targets, config)
    return rr.exit_code


def cmd_list(args: argparse.Namespace) -> int:
    for target in load_default_targets():
        print(target.name)
    return 0


def cmd_plan(args: argparse.Namespace) -> int:
    config = load_build_config(
        profile_flags=args.profile_flags, working_dir=args.working_dir
    )
    builder = CargoBuilder()
    for target in load_default_targets():
        print(f"{target.name}: {shlex.join(builder.command(target, config))}")
    return 0
