"""
Defaults and run configuration built from CLI arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_TASKFILE = "Taskfile.yaml"
DEFAULT_ENGINE = "dot"
DEFAULT_FORMAT = "svg"
SUPPORTED_FORMATS = ("svg", "png", "pdf")
NAMESPACE_SEPARATOR = ":"

# Looked up, in order, when an include points at a directory
TASKFILE_NAMES = ("Taskfile.yml", "Taskfile.yaml", "taskfile.yml", "taskfile.yaml")


def default_output_path(output_format: str = DEFAULT_FORMAT) -> Path:
    """Taskfile.svg, Taskfile.png, ... in the current directory."""
    return Path(f"{Path(DEFAULT_TASKFILE).stem}.{output_format}")


@dataclass(frozen=True)
class RunConfig:
    """Resolved settings for one CLI invocation."""

    taskfile: Path
    output: Path
    output_format: str = DEFAULT_FORMAT
    engine: str = DEFAULT_ENGINE
    open_viewer: bool = True

    @classmethod
    def from_args(cls, args) -> "RunConfig":
        output_format = args.format or DEFAULT_FORMAT
        output = Path(args.output) if args.output else default_output_path(output_format)
        return cls(
            taskfile=Path(args.taskfile or DEFAULT_TASKFILE),
            output=output,
            output_format=output_format,
            engine=args.engine or DEFAULT_ENGINE,
            open_viewer=not args.silent,
        )
