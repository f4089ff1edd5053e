"""Taskfile reading, decoding and graph construction."""

from taskdep.ingestion.builder import GraphBuilder, build_graph
from taskdep.ingestion.document import (
    DependencyRef,
    IncludeRef,
    TaskDecl,
    TaskDocument,
    decode_document,
    load_document,
    parse_document,
)
from taskdep.ingestion.sources import (
    FileSourceOpener,
    InMemorySourceOpener,
    SourceOpener,
)

__all__ = [
    "DependencyRef",
    "FileSourceOpener",
    "GraphBuilder",
    "InMemorySourceOpener",
    "IncludeRef",
    "SourceOpener",
    "TaskDecl",
    "TaskDocument",
    "build_graph",
    "decode_document",
    "load_document",
    "parse_document",
]
