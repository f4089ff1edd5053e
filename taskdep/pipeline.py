"""
Pipeline: build the graph, detect cycles, serialize to DOT, render and write the image.
"""

from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass
from pathlib import Path

from taskdep.analysis import find_cyclic_groups
from taskdep.errors import IOWriteError
from taskdep.graph import TaskGraph, task_graph_to_dict, task_graph_to_dot
from taskdep.ingestion import GraphBuilder, SourceOpener
from taskdep.render import GraphvizEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskfileReport:
    """A built graph together with its cyclic groups."""

    graph: TaskGraph
    cyclic_groups: tuple[tuple[str, ...], ...]

    @property
    def cyclic_nodes(self) -> frozenset[str]:
        return frozenset(name for group in self.cyclic_groups for name in group)

    def to_dot(self) -> str:
        return task_graph_to_dot(self.graph, self.cyclic_nodes)

    def to_dict(self) -> dict:
        return task_graph_to_dict(self.graph, self.cyclic_groups)


def analyze_taskfile(
    taskfile: Path | str,
    opener: SourceOpener | None = None,
) -> TaskfileReport:
    """Build the dependency graph of taskfile and find its cyclic groups."""
    graph = GraphBuilder(opener).build(str(taskfile))
    return TaskfileReport(graph=graph, cyclic_groups=tuple(find_cyclic_groups(graph)))


def write_image(image: bytes, output: Path) -> Path:
    try:
        output.write_bytes(image)
    except OSError as e:
        raise IOWriteError(f"couldn't write image: {e}", str(output)) from e
    logger.info("Wrote %s (%d bytes)", output, len(image))
    return output


def open_in_browser(path: Path) -> bool:
    """Open path in the system browser; warn with the path when no browser can be launched."""
    url = path.resolve().as_uri()
    logger.debug("Opening %s", url)
    if not webbrowser.open(url):
        logger.warning("Could not open a browser; the image is at %s", path)
        return False
    return True


def render_taskfile(
    taskfile: Path | str,
    output: Path | str,
    engine: GraphvizEngine | None = None,
    *,
    open_viewer: bool = False,
    opener: SourceOpener | None = None,
) -> TaskfileReport:
    """
    Run the full pipeline: analyze taskfile, lay out the DOT description with
    engine and write the image to output; optionally open it in a browser.

    Returns:
        The TaskfileReport the image was rendered from.
    """
    report = analyze_taskfile(taskfile, opener)
    engine = engine if engine is not None else GraphvizEngine()
    image = engine.render(report.to_dot())
    written = write_image(image, Path(output))
    if open_viewer:
        open_in_browser(written)
    return report
