from __future__ import annotations

import pytest

from cube_core.notation import (
    AVAILABLE_MOVES,
    Move,
    face_of,
    is_valid_move_format,
    parse_move,
    reverse_move,
    sequence_to_string,
    string_to_sequence,
)


def test_available_moves_are_the_18_wire_tokens():
    assert len(AVAILABLE_MOVES) == 18
    assert len(set(AVAILABLE_MOVES)) == 18
    assert all(is_valid_move_format(m) for m in AVAILABLE_MOVES)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("R", Move("R", clockwise=True, double=False)),
        ("R'", Move("R", clockwise=False, double=False)),
        ("U2", Move("U", clockwise=True, double=True)),
        ("  f' ", Move("F", clockwise=False, double=False)),
        ("b2", Move("B", clockwise=True, double=True)),
    ],
)
def test_parse_move_canonicalises(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "X", "R3", "R''", "RU", "2R", "M", None, 42])
def test_parse_move_returns_none_for_non_moves(text):
    assert parse_move(text) is None


def test_move_turns_and_notation():
    assert Move("R").turns == 1
    assert Move("R", clockwise=False).turns == -1
    assert Move("R", double=True).turns == 2
    assert Move("L", clockwise=False).notation == "L'"
    assert str(Move("D", double=True)) == "D2"


def test_reverse_move():
    assert reverse_move("R") == "R'"
    assert reverse_move("R'") == "R"
    assert reverse_move("U2") == "U2"
    assert reverse_move(" d ") == "D'"
    assert reverse_move("nope") is None


def test_strict_format_does_not_canonicalise():
    assert is_valid_move_format("R'")
    assert not is_valid_move_format("r")
    assert not is_valid_move_format(" R")
    assert not is_valid_move_format("R\n")


def test_sequence_helpers():
    assert string_to_sequence("  R U  R'\tU' ") == ["R", "U", "R'", "U'"]
    assert string_to_sequence("") == []
    assert sequence_to_string(["F2", "B"]) == "F2 B"
    assert face_of("U'") == "U"
    assert face_of("") is None
    assert face_of(5) is None
    assert face_of(None) is None
