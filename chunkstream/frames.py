"""pandas adapters for writing or uploading tabular data in row batches.

`chunk_frame` slices an in-memory DataFrame positionally; `frames_from_records`
turns an arbitrarily long record stream into one DataFrame per chunk without
realizing the stream. Dependencies: `pandas`.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Sequence

import pandas as pd

from chunkstream.chunking import chunked
from chunkstream.config import ChunkConfig, resolve_config


def chunk_frame(frame: pd.DataFrame, size: int | ChunkConfig) -> Iterator[pd.DataFrame]:
    """Yield consecutive row slices of `frame` holding at most `size` rows.

    The index is preserved, so concatenating the slices reproduces `frame`.
    An empty frame yields nothing.
    """

    config = resolve_config(size)
    for start in range(0, len(frame), config.size):
        yield frame.iloc[start : start + config.size]


def frames_from_records(
    records: Iterable[Any],
    size: int | ChunkConfig,
    columns: Optional[Sequence[str]] = None,
) -> Iterator[pd.DataFrame]:
    """Build one DataFrame per chunk of `records`.

    Records may be mappings or row tuples, anything `pd.DataFrame.from_records`
    accepts. Rows of each frame are indexed from zero.
    """

    for chunk in chunked(records, size):
        yield pd.DataFrame.from_records(list(chunk), columns=columns)


__all__ = ["chunk_frame", "frames_from_records"]
