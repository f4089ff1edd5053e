"""
Source openers: how the graph builder locates and reads Taskfiles.
"""

from __future__ import annotations

import logging
from pathlib import Path

from taskdep.config import TASKFILE_NAMES
from taskdep.errors import InputNotFound

logger = logging.getLogger(__name__)


class SourceOpener:
    """Resolve include paths and read Taskfile text."""

    def resolve(self, taskfile: str, parent: str | None) -> str:
        """Location of taskfile as referenced from the document at parent (None for the root)."""
        raise NotImplementedError

    def read(self, location: str) -> str:
        raise NotImplementedError


class FileSourceOpener(SourceOpener):
    """
    Read Taskfiles from disk.

    Relative include paths are resolved against the directory of the including
    Taskfile. A path naming a directory resolves to the first Taskfile found in
    it (see TASKFILE_NAMES).
    """

    def resolve(self, taskfile: str, parent: str | None) -> str:
        path = Path(taskfile).expanduser()
        if not path.is_absolute() and parent is not None:
            path = Path(parent).parent / path
        if path.is_dir():
            for name in TASKFILE_NAMES:
                candidate = path / name
                if candidate.is_file():
                    path = candidate
                    break
            else:
                raise InputNotFound(
                    f"no Taskfile found in directory (looked for {', '.join(TASKFILE_NAMES)})",
                    str(path),
                )
        return str(path.resolve())

    def read(self, location: str) -> str:
        logger.debug("Reading %s", location)
        try:
            return Path(location).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise InputNotFound("file not found", location) from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputNotFound(f"could not read: {e}", location) from e


class InMemorySourceOpener(SourceOpener):
    """Serve Taskfile text from a dict keyed by path, with no path resolution."""

    def __init__(self, documents: dict[str, str]) -> None:
        self.documents = dict(documents)

    def resolve(self, taskfile: str, parent: str | None) -> str:
        return taskfile

    def read(self, location: str) -> str:
        try:
            return self.documents[location]
        except KeyError:
            raise InputNotFound("file not found", location) from None
