# tests/unit/test_types.py

import pytest

from term_lessons.types import Cell, DotDict, Position, SGR


def test_position_arithmetic():
    assert Position(5, 5) + (1, 0) == Position(6, 5)
    assert Position(5, 5) + (0, -1) == (5, 4)
    assert Position(5, 5) - Position(2, 1) == (3, 4)
    assert Position(3, 2).with_relative_column(3).with_relative_row(2) == (6, 4)
    assert Position(3, 2).with_column(0) == (0, 2)


def test_position_equality_and_hash():
    assert Position(1, 2) == (1, 2)
    assert Position(1, 2) != (2, 1)
    assert {Position(1, 2): "a"}[Position(1, 2)] == "a"
    assert Position(1, 2).x == 1 and Position(1, 2).y == 2


def test_cell_holds_one_character():
    with pytest.raises(ValueError):
        Cell("ab")
    with pytest.raises(ValueError):
        Cell("")


def test_cell_sgr_normalized_to_frozenset():
    assert Cell("a", sgr={SGR.BOLD}) == Cell("a", sgr=frozenset([SGR.BOLD]))
    assert Cell("a", sgr=[SGR.BOLD]).sgr == frozenset([SGR.BOLD])


def test_dot_dict_is_case_insensitive_and_nested():
    d = DotDict({"Window": {"Columns": 80}})
    assert d.window.columns == 80
    d.Poll_Interval = 0.1
    assert d["poll_interval"] == 0.1
    with pytest.raises(AttributeError):
        d.missing
    del d.poll_interval
    assert "poll_interval" not in d
