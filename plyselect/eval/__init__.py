"""Static evaluation heuristics.

Pure, deterministic, and side-effect free. Scores are centipawns from
White's point of view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Final, Tuple

from plyselect.engine.board import Board, Color, PieceKind


# Material values in centipawns
P_VAL: Final = 100
N_VAL: Final = 320
B_VAL: Final = 330
R_VAL: Final = 500
Q_VAL: Final = 900
K_VAL: Final = 20000

PIECE_VALUES: Final[Dict[PieceKind, int]] = {
    PieceKind.PAWN: P_VAL,
    PieceKind.KNIGHT: N_VAL,
    PieceKind.BISHOP: B_VAL,
    PieceKind.ROOK: R_VAL,
    PieceKind.QUEEN: Q_VAL,
    PieceKind.KING: K_VAL,
}

# Heuristic weights (centipawns)
CENTRE_WEIGHT: Final = 5
PAWN_ADVANCE_WEIGHT: Final = 5

# Indexed [row][col], row 0 = rank 8; symmetric so it serves both colours
CENTRE_BONUS: Final[Tuple[Tuple[int, ...], ...]] = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 1, 2, 2, 1, 0, 0),
    (0, 0, 2, 3, 3, 2, 0, 0),
    (0, 0, 2, 3, 3, 2, 0, 0),
    (0, 0, 1, 2, 2, 1, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0),
)

MINOR_PIECES: Final = (PieceKind.KNIGHT, PieceKind.BISHOP)


@dataclass(frozen=True)
class EvalTerms:
    material: int
    centrality: int
    pawn_advance: int

    @property
    def total(self) -> int:
        return self.material + self.centrality + self.pawn_advance


def evaluate_terms(board: Board) -> EvalTerms:
    """Score each heuristic term separately.

    - material: piece values, added for White and subtracted for Black
    - centrality: knights and bishops on central squares
    - pawn_advance: pawns closer to their promotion rank
    """
    material = 0
    centrality = 0
    pawn_advance = 0
    for (row, col), piece in board.pieces():
        sign = 1 if piece.color is Color.WHITE else -1
        material += sign * PIECE_VALUES[piece.kind]
        if piece.kind in MINOR_PIECES:
            centrality += sign * CENTRE_BONUS[row][col] * CENTRE_WEIGHT
        elif piece.kind is PieceKind.PAWN:
            steps = 7 - row if piece.color is Color.WHITE else row
            pawn_advance += sign * steps * PAWN_ADVANCE_WEIGHT
    return EvalTerms(material=material, centrality=centrality, pawn_advance=pawn_advance)


def evaluate(board: Board) -> int:
    """Static evaluation in centipawns, positive when White is better."""
    return evaluate_terms(board).total
