from __future__ import annotations

import itertools

import pandas as pd
import pytest

from chunkstream.config import ChunkSizeError
from chunkstream.frames import chunk_frame, frames_from_records


def _frame() -> pd.DataFrame:
    index = pd.date_range("2020-01-01", periods=5, freq="D")
    return pd.DataFrame({"close": [1.0, 2.0, 3.0, 4.0, 5.0], "volume": [10, 20, 30, 40, 50]}, index=index)


def test_chunk_frame_slices_rows() -> None:
    frame = _frame()
    pieces = list(chunk_frame(frame, 2))
    assert [len(piece) for piece in pieces] == [2, 2, 1]
    pd.testing.assert_frame_equal(pd.concat(pieces), frame, check_freq=False)


def test_chunk_frame_empty() -> None:
    assert list(chunk_frame(pd.DataFrame({"close": []}), 3)) == []


def test_chunk_frame_rejects_bad_size() -> None:
    with pytest.raises(ChunkSizeError):
        list(chunk_frame(_frame(), 0))


def test_frames_from_records_builds_frame_per_chunk() -> None:
    records = ({"ticker": f"T{i}", "price": float(i)} for i in range(5))
    frames = list(frames_from_records(records, 2))
    assert [len(frame) for frame in frames] == [2, 2, 1]
    expected = pd.DataFrame({"ticker": ["T4"], "price": [4.0]})
    pd.testing.assert_frame_equal(frames[-1], expected)


def test_frames_from_records_with_columns() -> None:
    rows = [(1, "a"), (2, "b"), (3, "c")]
    frames = list(frames_from_records(rows, 3, columns=["id", "label"]))
    assert len(frames) == 1
    assert list(frames[0].columns) == ["id", "label"]
    assert frames[0]["id"].tolist() == [1, 2, 3]


def test_frames_from_records_is_lazy() -> None:
    records = ({"n": i} for i in itertools.count())
    first = next(frames_from_records(records, 4))
    assert first["n"].tolist() == [0, 1, 2, 3]
