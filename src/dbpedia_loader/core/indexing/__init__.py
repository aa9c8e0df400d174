"""
Core indexing pipeline.

Components:
- pipeline.py: document builder, batch flusher and the loader orchestrator
"""

from .pipeline import (
    BatchFlusher,
    DocumentSink,
    LoadResult,
    ShortAbstractLoader,
    build_document,
)

__all__ = [
    "BatchFlusher",
    "DocumentSink",
    "LoadResult",
    "ShortAbstractLoader",
    "build_document",
]
