"""External layout engine invocation."""

from taskdep.render.engine import GraphvizEngine

__all__ = ["GraphvizEngine"]
