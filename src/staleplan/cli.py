"""staleplan CLI: inspect and run plan files."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from pydantic import ValidationError

from staleplan.kernel.errors import PlanError


def _configure_logging(quiet: bool, verbose: bool) -> None:
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
        force=True,
    )


def _print_status(result) -> None:
    for node in result.nodes:
        marker = "STALE" if node.stale else "ok"
        print(f"  [{marker:>5}] {node.filename}")
    if result.up_to_date:
        print("Status: UP TO DATE")
    else:
        print(f"Status: STALE ({len(result.stale_filenames)} target(s))")


def main():
    """Main CLI entry point for staleplan commands."""
    try:
        staleplan_version = get_version("staleplan")
    except PackageNotFoundError:
        staleplan_version = "dev"

    parser = argparse.ArgumentParser(
        prog="staleplan",
        description="staleplan: rebuild files whose inputs changed, in dependency order"
    )
    parser.add_argument("--version", action="version", version=f"staleplan {staleplan_version}")
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output (script command lines)."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    status_parser = subparsers.add_parser(
        "status",
        help="Show which targets are stale",
        parents=[parent_parser]
    )
    status_parser.add_argument("planfile", type=Path, help="Path to plan file (JSON)")

    run_parser = subparsers.add_parser(
        "run",
        help="Run scripts until every target is up to date",
        parents=[parent_parser]
    )
    run_parser.add_argument("planfile", type=Path, help="Path to plan file (JSON)")
    run_parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        help="Fail if the plan is still stale after this many rebuilds"
    )

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    _configure_logging(args.quiet, args.verbose)

    if args.command == "status":
        try:
            from .api import status

            result = status(args.planfile.resolve())
            if not args.quiet:
                _print_status(result)
        except (PlanError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    elif args.command == "run":
        try:
            from .api import load_plan
            from .config import PlannerConfig
            from .kernel.scheduler import run_plan

            plan, config = load_plan(args.planfile.resolve())
            if args.max_iterations is not None:
                config = PlannerConfig.model_validate(
                    {**config.model_dump(), "max_iterations": args.max_iterations}
                )
            result = run_plan(plan, config=config)
            if not args.quiet:
                print(f"[OK] Up to date after {result.iterations} rebuild(s)")
                for filename in result.updated_targets:
                    print(f"  Updated: {filename}")
        except (PlanError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except ValidationError as e:
            print(f"Error: invalid configuration:\n{e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)


if __name__ == "__main__":
    main()
