from __future__ import annotations

import itertools

import pytest

from chunkstream import utils


def test_chunk_iterable_splits_evenly() -> None:
    chunks = list(utils.chunk_iterable(range(6), size=2))
    assert chunks == [[0, 1], [2, 3], [4, 5]]


def test_chunk_iterable_keeps_short_tail() -> None:
    chunks = list(utils.chunk_iterable("abcde", size=2))
    assert chunks == [["a", "b"], ["c", "d"], ["e"]]


def test_chunk_iterable_handles_unbounded_source() -> None:
    chunks = list(itertools.islice(utils.chunk_iterable(itertools.count(), size=3), 2))
    assert chunks == [[0, 1, 2], [3, 4, 5]]


def test_chunk_iterable_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        list(utils.chunk_iterable([1, 2, 3], size=0))
