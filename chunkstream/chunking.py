"""Lazy partitioning of a single-pass iterable into fixed-size chunks.

The outer iterator and every chunk it hands out share one cursor over the
source, so nothing is copied and nothing is read ahead beyond the single
element needed to answer "is there more?". A chunk is a view: reading from it
advances the shared cursor. Requesting the next chunk first drains whatever the
consumer left unread in the previous one, so every chunk starts at the right
absolute offset regardless of how much of its predecessor was consumed.

Only one chunk is live at a time. Advancing the outer iterator bumps a
generation counter; a chunk from an older generation raises
:class:`StaleChunkError` when read instead of silently returning elements that
belong to its successor.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, TypeVar

from chunkstream.config import ChunkConfig, resolve_config

T = TypeVar("T")

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class StaleChunkError(RuntimeError):
    """Raised when a chunk is read after the outer iterator moved past it."""


class _SourceCursor(Generic[T]):
    """Single-pass cursor with a one-element lookahead."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterator = iter(iterable)
        self._lookahead: T = _MISSING
        self._exhausted = False

    def has_next(self) -> bool:
        if self._lookahead is not _MISSING:
            return True
        if self._exhausted:
            return False
        try:
            self._lookahead = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return False
        return True

    def take(self) -> T:
        """Return the next source element or raise ``StopIteration``."""

        if self._lookahead is not _MISSING:
            value, self._lookahead = self._lookahead, _MISSING
            return value
        if self._exhausted:
            raise StopIteration
        try:
            return next(self._iterator)
        except StopIteration:
            self._exhausted = True
            raise


@dataclass
class _ChunkState(Generic[T]):
    """Mutable state shared by the outer iterator and its live chunk."""

    cursor: _SourceCursor[T]
    size: int
    count: int = 0
    generation: int = 0


class Chunk(Iterator[T]):
    """Iterator over at most ``size`` consecutive source elements.

    Attributes
    ----------
    index:
        Zero-based position of this chunk in the outer sequence.
    size:
        Capacity of the chunk; the final chunk may hold fewer elements.
    consumed:
        Number of elements read through this chunk so far.
    """

    def __init__(self, state: _ChunkState[T], generation: int) -> None:
        self._state = state
        self._generation = generation
        self.index = generation - 1
        self.size = state.size
        self.consumed = 0

    @property
    def stale(self) -> bool:
        """True once the outer iterator has produced a later chunk."""

        return self._generation != self._state.generation

    def __iter__(self) -> Chunk[T]:
        return self

    def __next__(self) -> T:
        state = self._state
        if self.stale:
            raise StaleChunkError(
                f"Chunk {self.index} was superseded by chunk {state.generation - 1}; "
                "read each chunk before advancing to the next"
            )
        if state.count >= state.size:
            raise StopIteration
        value = state.cursor.take()
        state.count += 1
        self.consumed += 1
        return value

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return (
            f"{name}(index={self.index}, size={self.size}, "
            f"consumed={self.consumed}, stale={self.stale})"
        )


class ChunkingIterator(Iterator[Chunk[T]]):
    """Outer iterator yielding :class:`Chunk` views over ``iterable``.

    Parameters
    ----------
    iterable:
        Ordered source; consumed exactly once, element by element.
    size:
        Maximum elements per chunk, or a prepared :class:`ChunkConfig`.

    Raises
    ------
    ChunkSizeError
        If ``size`` is not a positive integer.
    """

    def __init__(self, iterable: Iterable[T], size: int | ChunkConfig) -> None:
        self._config = resolve_config(size)
        self._state: _ChunkState[T] = _ChunkState(
            cursor=_SourceCursor(iterable), size=self._config.size
        )

    @property
    def size(self) -> int:
        return self._config.size

    @property
    def chunks_produced(self) -> int:
        return self._state.generation

    def has_next(self) -> bool:
        """Report whether another chunk is available.

        Drains the unread tail of the current chunk first, so repeated calls
        agree with each other and with the following ``next()``.
        """

        self._catch_up()
        return self._state.cursor.has_next()

    def __iter__(self) -> ChunkingIterator[T]:
        return self

    def __next__(self) -> Chunk[T]:
        if not self.has_next():
            raise StopIteration
        state = self._state
        state.count = 0
        state.generation += 1
        logger.debug("Starting chunk %d (size=%d)", state.generation - 1, state.size)
        return Chunk(state, state.generation)

    def _catch_up(self) -> None:
        """Discard elements the consumer left unread in the current chunk."""

        state = self._state
        if state.generation == 0:
            return
        discarded = 0
        while state.count < state.size and state.cursor.has_next():
            state.cursor.take()
            state.count += 1
            discarded += 1
        if discarded:
            logger.debug(
                "Discarded %d unread element(s) of chunk %d",
                discarded,
                state.generation - 1,
            )


def chunked(iterable: Iterable[T], size: int | ChunkConfig) -> ChunkingIterator[T]:
    """Lazily split ``iterable`` into consecutive chunks of at most ``size``.

    Each chunk must be read before advancing; leftovers are skipped::

        for chunk in chunked(rows, 500):
            write_batch(list(chunk))
    """

    return ChunkingIterator(iterable, size)


__all__ = ["Chunk", "ChunkingIterator", "StaleChunkError", "chunked"]
