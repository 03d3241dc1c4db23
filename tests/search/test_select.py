from __future__ import annotations

import pytest

from plyselect.engine.board import Board, STARTPOS_FEN
from plyselect.search.service import (
    MAX_MOVES,
    MAX_TOKEN_LEN,
    SelectionService,
    choose_move,
    split_moves,
)


OPENING_MOVES = (
    "a3 a4 b3 b4 c3 c4 d3 d4 e3 e4 f3 f4 g3 g4 h3 h4 Na3 Nc3 Nf3 Nh3"
)
AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"


def test_opening_choice_is_deterministic() -> None:
    picks = {choose_move(STARTPOS_FEN, OPENING_MOVES, 5) for _ in range(5)}
    assert len(picks) == 1


def test_opening_prefers_first_double_push() -> None:
    # Every double push scores +10; a4 is the earliest of them
    assert choose_move(STARTPOS_FEN, OPENING_MOVES, 5) == 1


def test_all_opening_moves_apply() -> None:
    res = SelectionService().select(Board.startpos(), OPENING_MOVES)
    assert res.applied == 20
    assert res.score_cp == 10
    assert res.best_move == "a4"


def test_black_minimizes() -> None:
    # e6 and Nf6 leave +5, e5 leaves 0
    assert choose_move(AFTER_E4, "e6 e5 Nf6", 1) == 1


def test_white_takes_the_rook() -> None:
    fen = "4k3/8/8/3r4/8/8/3Q4/4K3 w - - 0 1"
    assert choose_move(fen, "Qd3 Qxd5+ Qa5", 1) == 1


def test_black_takes_the_queen() -> None:
    fen = "4k3/8/8/3q4/8/8/3R4/4K3 b - - 0 1"
    assert choose_move(fen, "Kf7 Qa2 Qxd2", 1) == 2


def test_tie_keeps_earliest() -> None:
    assert choose_move(STARTPOS_FEN, "d4 e4", 0) == 0
    assert choose_move(STARTPOS_FEN, "e4 d4", 0) == 0


def test_unapplicable_moves_are_never_chosen() -> None:
    moves = "Nf6 e4 Qh5 d4"
    res = SelectionService().select(Board.startpos(), moves)
    assert res.index == 1
    assert res.candidates[0].score_cp is None
    assert res.candidates[2].score_cp is None
    assert res.applied == 2


def test_unapplicable_capture_does_not_win() -> None:
    # Qxd8 would win the queen if it could be played, but the d-file is blocked
    fen = "3qk3/8/8/8/8/8/3P4/3QK3 w - - 0 1"
    assert choose_move(fen, "Qxd8 d3", 0) == 1


@pytest.mark.parametrize("moves", ["", "   ", "Nf6 Qh5", "zz 99 O"])
def test_default_index_zero(moves: str) -> None:
    assert choose_move(STARTPOS_FEN, moves, 0) == 0


def test_nothing_applicable_has_no_score() -> None:
    res = SelectionService().select(Board.startpos(), "Nf6 Qh5")
    assert res.index == 0
    assert res.applied == 0
    assert res.score_cp is None


def test_root_board_is_not_mutated() -> None:
    board = Board.startpos()
    before = board.copy()
    SelectionService().select(board, OPENING_MOVES)
    assert board == before


def test_candidates_do_not_see_each_other() -> None:
    # If e4 leaked into the next candidate, e2 would be empty and e3 would fail
    res = SelectionService().select(Board.startpos(), "e4 e3")
    assert [c.score_cp for c in res.candidates] == [10, 5]


def test_split_moves_caps_count_and_length() -> None:
    tokens = split_moves(" ".join(["e4"] * (MAX_MOVES + 10)))
    assert len(tokens) == MAX_MOVES
    assert split_moves("a" * 40) == ["a" * MAX_TOKEN_LEN]
    assert split_moves(["e4", "", "d4"]) == ["e4", "d4"]


def test_moves_beyond_cap_are_ignored() -> None:
    moves = " ".join(["a3"] * MAX_MOVES + ["e4"])
    assert choose_move(STARTPOS_FEN, moves, 0) == 0


def test_list_input() -> None:
    res = SelectionService().select(Board.startpos(), ["e3", "e4"])
    assert res.index == 1


def test_only_spaces_separate_moves() -> None:
    moves = "a3\te4 h3"
    assert split_moves(moves) == ["a3\te4", "h3"]
    res = SelectionService().select(Board.startpos(), moves)
    assert res.index == 1
    assert res.best_move == moves.split(" ")[res.index] == "h3"
    assert res.candidates[0].score_cp is None


def test_repeated_spaces_collapse() -> None:
    assert split_moves("  e3   e4 ") == ["e3", "e4"]
    assert choose_move(STARTPOS_FEN, "e3  e4", 0) == 1
