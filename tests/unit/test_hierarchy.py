import numpy as np
import pandas as pd
import pytest

from precision_utility.hierarchy import build_level_map, build_level_maps, load_hierarchy
from precision_utility.cancellation import CancellationToken
from precision_utility.PrecisionError import EvaluationInterrupted


def test_two_level_hierarchy():
    levels = build_level_map([["a", "x"], ["b", "x"]])
    assert levels == {"a": 0.0, "b": 0.0, "x": 1.0}


def test_levels_are_normalized_by_height():
    hierarchy = [
        ["A+", "A", "*"],
        ["A-", "A", "*"],
        ["B+", "B", "*"],
    ]
    levels = build_level_map(hierarchy)

    assert levels["A+"] == 0.0
    assert levels["A"] == 0.5
    assert levels["B"] == 0.5
    assert levels["*"] == 1.0


def test_first_occurrence_wins():
    # "A" is a leaf of the second row and a level-1 generalization of the first
    hierarchy = [
        ["A1", "A", "*"],
        ["A", "A", "*"],
    ]
    levels = build_level_map(hierarchy)
    assert levels["A"] == 0.0


def test_single_level_hierarchy_is_unusable():
    assert build_level_map([["a"], ["b"]]) is None


def test_empty_hierarchy_is_unusable():
    assert build_level_map([]) is None


def test_ragged_hierarchy_is_unusable():
    assert build_level_map([["a", "x", "*"], ["b", "x"]]) is None


def test_unhashable_cell_is_unusable():
    assert build_level_map([["a", ["x"]]]) is None


def test_accepts_dataframe_and_ndarray():
    rows = [["a", "x"], ["b", "x"]]
    expected = {"a": 0.0, "b": 0.0, "x": 1.0}
    assert build_level_map(pd.DataFrame(rows)) == expected
    assert build_level_map(np.array(rows)) == expected


def test_build_level_maps_isolates_failures():
    maps = build_level_maps([
        [["a", "x"]],
        [["only"]],
        [["m", "f", "*"]],
    ])
    assert maps[0] == {"a": 0.0, "x": 1.0}
    assert maps[1] is None
    assert maps[2] == {"m": 0.0, "f": 0.5, "*": 1.0}


def test_cancellation_is_not_swallowed():
    token = CancellationToken()
    token.cancel()
    with pytest.raises(EvaluationInterrupted):
        build_level_maps([[["a", "x"]]], cancel=token)


def test_load_hierarchy(tmp_path):
    path = tmp_path / "age.csv"
    path.write_text("20;20-29;*\n25;20-29;*\nNA;NA;*\n")

    rows = load_hierarchy(str(path))
    assert rows == [
        ["20", "20-29", "*"],
        ["25", "20-29", "*"],
        ["NA", "NA", "*"],
    ]


def test_load_hierarchy_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_hierarchy(str(tmp_path / "nope.csv"))


def test_load_hierarchy_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(ValueError):
        load_hierarchy(str(path))


def test_longer_row_is_unusable():
    assert build_level_map([["a", "x"], ["b", "y", "*"]]) is None


def test_cancellation_polled_after_each_level():
    class CancelAfter:
        """Event-like flag that turns on after a number of polls."""

        def __init__(self, polls):
            self.polls = polls
            self.seen = 0

        def is_set(self):
            self.seen += 1
            return self.seen > self.polls

    flag = CancelAfter(polls=1)
    hierarchy = [["A+", "A", "*"], ["B+", "B", "*"]]

    with pytest.raises(EvaluationInterrupted):
        build_level_map(hierarchy, cancel=flag)

    # level 0 finished, interrupted after level 1
    assert flag.seen == 2


def test_load_hierarchy_keeps_short_rows(tmp_path):
    path = tmp_path / "gender.csv"
    path.write_text("Male;*\nFemale\n")

    rows = load_hierarchy(str(path))

    assert rows == [["Male", "*"], ["Female"]]
    assert build_level_map(rows) is None


def test_load_hierarchy_keeps_long_rows(tmp_path):
    path = tmp_path / "gender.csv"
    path.write_text("Male;*\nFemale;X;*\n")

    rows = load_hierarchy(str(path))

    assert rows == [["Male", "*"], ["Female", "X", "*"]]
    assert build_level_map(rows) is None


def test_load_hierarchy_keeps_empty_cells(tmp_path):
    path = tmp_path / "zip.csv"
    path.write_text("123;;*\n")
    assert load_hierarchy(str(path)) == [["123", "", "*"]]
