"""Shared helper utilities for the chunkstream package.

Small conveniences layered over :mod:`chunkstream.chunking` for callers that
want each chunk realized as a list rather than as a live view.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, TypeVar

from chunkstream.chunking import chunked

T = TypeVar("T")


def chunk_iterable(iterable: Iterable[T], size: int) -> Iterator[List[T]]:
    """Yield successive chunks of `size` from `iterable` as lists.

    Only one chunk is held in memory at a time, so unbounded sources are fine.
    Useful for batching API requests or writing data in segments.
    """

    for chunk in chunked(iterable, size):
        yield list(chunk)


__all__ = ["chunk_iterable"]
