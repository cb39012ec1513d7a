"""Configuration shared by the lazy and eager chunking front ends.

Chunk size is the only tunable. It is validated eagerly so misconfiguration
surfaces at construction time instead of degenerating into an endless stream
of empty chunks.
"""
from __future__ import annotations

from dataclasses import dataclass


class ChunkSizeError(ValueError):
    """Raised when a chunk size is not a positive integer."""


@dataclass(frozen=True)
class ChunkConfig:
    """Parameters controlling how a source is partitioned."""

    size: int

    def validate(self) -> None:
        """Sanity-check the chunk size before any element is read."""

        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ChunkSizeError(
                f"Chunk size must be an integer, got {type(self.size).__name__}"
            )
        if self.size <= 0:
            raise ChunkSizeError(f"Chunk size must be positive, got {self.size}")


def resolve_config(size: int | ChunkConfig) -> ChunkConfig:
    """Accept either a raw size or a prepared config and return a validated config."""

    config = size if isinstance(size, ChunkConfig) else ChunkConfig(size=size)
    config.validate()
    return config


__all__ = ["ChunkConfig", "ChunkSizeError", "resolve_config"]
