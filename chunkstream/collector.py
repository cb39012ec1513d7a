"""Eager grouping of a finite iterable into fixed-capacity lists.

Unlike :mod:`chunkstream.chunking`, this realizes every group in memory. It is
meant for callers that want plain nested lists, for example to fan a bounded
result set out into request batches. Grouping is position dependent, so two
independently accumulated collectors cannot be merged.
"""
from __future__ import annotations

from typing import Generic, Iterable, List, TypeVar

from chunkstream.config import ChunkConfig, resolve_config

T = TypeVar("T")


class UnsupportedMergeError(RuntimeError):
    """Raised when two partial groupings are combined."""


class ChunkCollector(Generic[T]):
    """Accumulate elements into consecutive groups of at most ``size``."""

    def __init__(self, size: int | ChunkConfig) -> None:
        self._config = resolve_config(size)
        self._chunks: List[List[T]] = []

    @property
    def size(self) -> int:
        return self._config.size

    @property
    def chunks(self) -> List[List[T]]:
        """The groups collected so far, in insertion order."""

        return self._chunks

    def add(self, item: T) -> None:
        """Append to the last group, opening a new one when it is full."""

        if not self._chunks or len(self._chunks[-1]) >= self._config.size:
            self._chunks.append([])
        self._chunks[-1].append(item)

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def combine(self, other: ChunkCollector[T]) -> ChunkCollector[T]:
        """Always fails: partial groupings have no meaningful interleaving."""

        raise UnsupportedMergeError(
            "Cannot combine independently collected chunk groupings; "
            "collect the concatenated source with a single collector instead"
        )

    def __add__(self, other: object) -> ChunkCollector[T]:
        if isinstance(other, ChunkCollector):
            return self.combine(other)
        return NotImplemented

    def __len__(self) -> int:
        return len(self._chunks)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size}, chunks={len(self)})"


def collect_chunks(iterable: Iterable[T], size: int | ChunkConfig) -> List[List[T]]:
    """Realize ``iterable`` as a list of lists holding at most ``size`` items each."""

    collector: ChunkCollector[T] = ChunkCollector(size)
    collector.extend(iterable)
    return collector.chunks


__all__ = ["ChunkCollector", "UnsupportedMergeError", "collect_chunks"]
