from __future__ import annotations

import pytest

from plyselect.engine.board import Board, STARTPOS_FEN
from plyselect.eval import evaluate, evaluate_terms


def test_startpos_is_balanced() -> None:
    assert evaluate(Board.from_fen(STARTPOS_FEN)) == 0


def test_empty_board_scores_zero() -> None:
    assert evaluate(Board.empty()) == 0


def test_material_only() -> None:
    # Extra rook, kings in the corners
    terms = evaluate_terms(Board.from_fen("k7/8/8/8/8/8/8/R6K w - - 0 1"))
    assert terms.material == 500
    assert terms.centrality == 0
    assert terms.pawn_advance == 0


def test_knight_centralization_scores_higher() -> None:
    sc_center = evaluate(Board.from_fen("4k3/8/8/8/3N4/8/8/4K3 w - - 0 1"))
    sc_rim = evaluate(Board.from_fen("4k3/8/8/8/8/8/8/N3K3 w - - 0 1"))
    assert sc_center == 320 + 3 * 5
    assert sc_rim == 320
    assert sc_center > sc_rim


@pytest.mark.parametrize(
    "fen,bonus",
    [
        ("4k3/8/8/8/8/2B5/8/4K3 w - - 0 1", 5),  # c3
        ("4k3/8/8/8/8/3B4/8/4K3 w - - 0 1", 10),  # d3
        ("4k3/8/8/4B3/8/8/8/4K3 w - - 0 1", 15),  # e5
        ("4k3/8/8/8/8/8/1B6/4K3 w - - 0 1", 0),  # b2
    ],
)
def test_bishop_centre_table(fen: str, bonus: int) -> None:
    assert evaluate_terms(Board.from_fen(fen)).centrality == bonus


def test_rooks_and_queens_get_no_centre_bonus() -> None:
    terms = evaluate_terms(Board.from_fen("4k3/8/8/3QR3/8/8/8/4K3 w - - 0 1"))
    assert terms.centrality == 0


def test_pawn_advancement_both_colours() -> None:
    # White pawn on b6 (row 2), black pawn on g3 (row 5)
    terms = evaluate_terms(Board.from_fen("4k3/8/1P6/8/8/6p1/8/4K3 w - - 0 1"))
    assert terms.pawn_advance == 5 * 5 - 5 * 5
    terms = evaluate_terms(Board.from_fen("4k3/8/1P6/8/8/8/6p1/4K3 w - - 0 1"))
    assert terms.pawn_advance == 25 - 30


def _mirror_and_swap_colors(fen: str) -> str:
    placement, stm = fen.split()[:2]
    ranks = [r.swapcase() for r in reversed(placement.split("/"))]
    return f"{'/'.join(ranks)} {'b' if stm == 'w' else 'w'} - - 0 1"


@pytest.mark.parametrize(
    "fen",
    [
        "4k3/8/8/2n5/3B4/8/8/4K3 w - - 0 1",
        "r1bqkbnr/pppp1ppp/2n5/4p3/3P4/5N2/PPP1PPPP/RNBQKB1R b KQ - 2 3",
        "4k3/2p5/8/8/5P2/8/8/4K3 w - - 0 1",
    ],
)
def test_eval_mirror_swap_negates_score(fen: str) -> None:
    sc = evaluate(Board.from_fen(fen))
    sc_m = evaluate(Board.from_fen(_mirror_and_swap_colors(fen)))
    assert sc_m == -sc


def test_total_is_sum_of_terms() -> None:
    b = Board.from_fen("r1bqkbnr/pppp1ppp/2n5/4p3/3P4/5N2/PPP1PPPP/RNBQKB1R b KQ - 2 3")
    t = evaluate_terms(b)
    assert evaluate(b) == t.material + t.centrality + t.pawn_advance == t.total
