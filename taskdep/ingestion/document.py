"""
Taskfile document model: parse YAML once and decode it into typed, immutable records.

Accepted shape:

    includes:                 # optional
      <namespace>: <path>
      <namespace>: {taskfile: <path>}
    tasks:                    # required
      <name>:
        deps:                 # optional
          - <task name>
          - {task: <task name>}

Unknown keys are ignored at every level.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

from taskdep.errors import SchemaError


@dataclass(frozen=True)
class IncludeRef:
    """An included Taskfile mounted under a namespace."""

    namespace: str
    taskfile: str


@dataclass(frozen=True)
class DependencyRef:
    """One entry of a task's deps list, as written (not yet qualified)."""

    task: str


@dataclass(frozen=True)
class TaskDecl:
    name: str
    deps: tuple[DependencyRef, ...] = ()


@dataclass(frozen=True)
class TaskDocument:
    """A decoded Taskfile; includes and tasks keep their document order."""

    includes: tuple[IncludeRef, ...]
    tasks: tuple[TaskDecl, ...]


def parse_document(text: str, source: str | None = None) -> Any:
    """Parse YAML text into a plain dict/list/scalar tree."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaError(f"invalid YAML: {e}", source) from e


def _decode_include(namespace: Any, descr: Any, source: str | None) -> IncludeRef:
    if not isinstance(namespace, str):
        raise SchemaError("namespace is not a string", source)
    if isinstance(descr, str):
        return IncludeRef(namespace=namespace, taskfile=descr)
    if isinstance(descr, dict):
        taskfile = descr.get("taskfile")
        if not isinstance(taskfile, str):
            raise SchemaError("couldn't find taskfile name to include", source)
        return IncludeRef(namespace=namespace, taskfile=taskfile)
    raise SchemaError("incorrect type for an include", source)


def _decode_dependency(dep: Any, source: str | None) -> DependencyRef:
    if isinstance(dep, str):
        return DependencyRef(task=dep)
    if isinstance(dep, dict):
        name = dep.get("task")
        if not isinstance(name, str):
            raise SchemaError("couldn't find name of task", source)
        return DependencyRef(task=name)
    raise SchemaError("incorrect type for a dependency", source)


def _decode_task(name: Any, descr: Any, source: str | None) -> TaskDecl:
    if not isinstance(name, str):
        raise SchemaError("task name is not a string", source)
    if not isinstance(descr, dict):
        raise SchemaError(f"task is not a mapping: {name}", source)
    if "deps" not in descr:
        return TaskDecl(name=name)
    deps = descr["deps"]
    if not isinstance(deps, list):
        raise SchemaError(f"deps is not a list: {name}", source)
    return TaskDecl(
        name=name,
        deps=tuple(_decode_dependency(d, source) for d in deps),
    )


def decode_document(data: Any, source: str | None = None) -> TaskDocument:
    """
    Decode a parsed Taskfile tree into a TaskDocument.

    Args:
        data: Result of parse_document (or any equivalent dict tree).
        source: Location used in error messages.

    Returns:
        TaskDocument with includes and tasks in document order.

    Raises:
        SchemaError: On the first structural violation found.
    """
    if not isinstance(data, dict):
        raise SchemaError("document is not a mapping", source)

    includes: list[IncludeRef] = []
    if "includes" in data:
        raw_includes = data["includes"]
        if not isinstance(raw_includes, dict):
            raise SchemaError("includes is not a mapping", source)
        for namespace, descr in raw_includes.items():
            includes.append(_decode_include(namespace, descr, source))

    if "tasks" not in data:
        raise SchemaError("tasks not found", source)
    raw_tasks = data["tasks"]
    if not isinstance(raw_tasks, dict):
        raise SchemaError("tasks is not a mapping", source)
    tasks = [_decode_task(name, descr, source) for name, descr in raw_tasks.items()]

    return TaskDocument(includes=tuple(includes), tasks=tuple(tasks))


def load_document(text: str, source: str | None = None) -> TaskDocument:
    """parse_document + decode_document."""
    return decode_document(parse_document(text, source), source)
