"""taskdep: draw Taskfile dependency graphs and flag dependency cycles."""

__version__ = "0.3.0"
