"""
taskdep CLI: draw the dependency graph of a Taskfile.

Consume `Taskfile.yaml` and generate `Taskfile.svg` showing the dependency graph.
Cycles in the graph show in color red.
"""

import argparse
import json
import logging
import sys

from taskdep import __version__
from taskdep.config import (
    DEFAULT_ENGINE,
    DEFAULT_FORMAT,
    DEFAULT_TASKFILE,
    SUPPORTED_FORMATS,
    RunConfig,
)
from taskdep.errors import TaskdepError
from taskdep.pipeline import analyze_taskfile, render_taskfile
from taskdep.render import GraphvizEngine

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskdep",
        description=(
            "Display Taskfile dependency graph. Consume a Taskfile and generate "
            "an image of its dependency graph; cycles show in color red."
        ),
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Do not open browser with the image file",
    )
    parser.add_argument(
        "-f",
        "--taskfile",
        default=DEFAULT_TASKFILE,
        help=f"Taskfile to read (default: {DEFAULT_TASKFILE})",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Image file to write (default: Taskfile.<format>)",
    )
    parser.add_argument(
        "-T",
        "--format",
        default=DEFAULT_FORMAT,
        choices=SUPPORTED_FORMATS,
        help=f"Image format (default: {DEFAULT_FORMAT})",
    )
    parser.add_argument(
        "--engine",
        default=DEFAULT_ENGINE,
        help=f"Graphviz layout program (default: {DEFAULT_ENGINE})",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--print-dot",
        action="store_true",
        help="Print the DOT description to stdout instead of rendering an image",
    )
    mode.add_argument(
        "--json",
        action="store_true",
        help="Print nodes, edges and cyclic groups as JSON to stdout",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code: 0 on success, 1 on errors, 130 when interrupted
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    config = RunConfig.from_args(args)

    try:
        if args.print_dot:
            sys.stdout.write(analyze_taskfile(config.taskfile).to_dot())
            return 0
        if args.json:
            report = analyze_taskfile(config.taskfile)
            print(json.dumps(report.to_dict(), indent=2, sort_keys=True))
            return 0

        report = render_taskfile(
            config.taskfile,
            config.output,
            GraphvizEngine(config.engine, config.output_format),
            open_viewer=config.open_viewer,
        )
        if report.cyclic_groups:
            for group in report.cyclic_groups:
                print(f"Warning: dependency cycle: {', '.join(group)}", file=sys.stderr)
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except TaskdepError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
