"""Lazy and eager fixed-size chunking of iterables.

`chunked` partitions a single-pass iterable into live chunk views without
materializing it; `collect_chunks` realizes a finite iterable as nested lists.
"""
from __future__ import annotations

import logging

from chunkstream.chunking import Chunk, ChunkingIterator, StaleChunkError, chunked
from chunkstream.collector import ChunkCollector, UnsupportedMergeError, collect_chunks
from chunkstream.config import ChunkConfig, ChunkSizeError
from chunkstream.utils import chunk_iterable

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Chunk",
    "ChunkCollector",
    "ChunkConfig",
    "ChunkSizeError",
    "ChunkingIterator",
    "StaleChunkError",
    "UnsupportedMergeError",
    "__version__",
    "chunk_iterable",
    "chunked",
    "collect_chunks",
]
