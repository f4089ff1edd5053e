"""
Graphviz layout engine: pipe DOT text through `dot -T<format>` and collect the image bytes.
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
from concurrent.futures import ThreadPoolExecutor
from typing import IO

from taskdep.config import DEFAULT_ENGINE, DEFAULT_FORMAT
from taskdep.errors import RenderEngineError

logger = logging.getLogger(__name__)


def _write_all(stream: IO[bytes], data: bytes) -> None:
    try:
        stream.write(data)
    finally:
        stream.close()


def _read_all(stream: IO[bytes]) -> bytes:
    try:
        return stream.read()
    finally:
        stream.close()


class GraphvizEngine:
    """
    Run an external layout program that reads DOT on stdin and writes an image on stdout.

    The DOT text is written and the image read by two concurrent workers, so the
    program may start producing output before it has consumed all of its input.
    Both workers are joined before the exit status is checked.
    """

    def __init__(
        self,
        program: str = DEFAULT_ENGINE,
        output_format: str = DEFAULT_FORMAT,
        command: list[str] | None = None,
    ) -> None:
        self.program = program
        self.output_format = output_format
        self._command = command

    @property
    def command(self) -> list[str]:
        if self._command is not None:
            return list(self._command)
        return [self.program, f"-T{self.output_format}"]

    def render(self, dot_text: str) -> bytes:
        """
        Lay out dot_text and return the rendered image.

        Raises:
            RenderEngineError: If the program cannot be started or exits non-zero.
        """
        cmd = self.command
        logger.debug("Running %s on %d byte(s) of DOT", cmd, len(dot_text))
        with tempfile.TemporaryFile() as stderr_file:
            try:
                proc = subprocess.Popen(
                    cmd,
                    stdin=subprocess.PIPE,
                    stdout=subprocess.PIPE,
                    stderr=stderr_file,
                )
            except FileNotFoundError as e:
                raise RenderEngineError(
                    f"command `{cmd[0]}` not found (please, make sure `graphviz` is installed)"
                ) from e
            except OSError as e:
                raise RenderEngineError(f"couldn't start `{cmd[0]}`: {e}") from e

            with ThreadPoolExecutor(max_workers=2) as pool:
                writer = pool.submit(_write_all, proc.stdin, dot_text.encode("utf-8"))
                reader = pool.submit(_read_all, proc.stdout)
                try:
                    output = reader.result()
                except OSError as e:
                    proc.kill()
                    proc.wait()
                    raise RenderEngineError(
                        f"couldn't read `{cmd[0]}` output: {e}"
                    ) from e
                write_error = writer.exception()
            returncode = proc.wait()

            stderr_file.seek(0)
            stderr = stderr_file.read().decode("utf-8", errors="replace").strip()

        if returncode != 0:
            detail = f": {stderr}" if stderr else ""
            raise RenderEngineError(
                f"failed to create image: `{cmd[0]}` exited with status {returncode}{detail}"
            )
        if write_error is not None:
            raise RenderEngineError(
                f"couldn't write to `{cmd[0]}` stdin: {write_error}"
            ) from write_error
        logger.debug("Layout engine produced %d byte(s)", len(output))
        return output
