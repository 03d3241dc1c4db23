"""Source-square search for SAN moves.

Geometry only: no legality (pins, checks) is considered.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Tuple

from .board import Board, Color, Piece, PieceKind, Square, on_board


Direction = Tuple[int, int]

KNIGHT_OFFSETS: Tuple[Direction, ...] = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1),
)
BISHOP_DIRS: Tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: Tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: Tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS

# White pawns move towards row 0 (rank 8)
PAWN_FORWARD = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW = {Color.WHITE: 6, Color.BLACK: 1}


def _slides_to(board: Board, src: Square, dest: Square, dirs: Iterable[Direction]) -> bool:
    for dr, dc in dirs:
        r, c = src[0] + dr, src[1] + dc
        while on_board(r, c):
            if (r, c) == dest:
                return True
            if board.grid[r][c] is not None:
                break
            r += dr
            c += dc
    return False


def _pawn_reaches(board: Board, src: Square, dest: Square, color: Color, capture: bool) -> bool:
    step = PAWN_FORWARD[color]
    (r, c), (dr, dc) = src, dest
    if capture:
        # Diagonal only; an empty destination is en passant
        return r + step == dr and abs(c - dc) == 1
    if c == dc and board.is_empty(dest):
        if r + step == dr:
            return True
        if r == PAWN_START_ROW[color] and dr == r + 2 * step and board.is_empty((r + step, c)):
            return True
    return False


def _knight_reaches(board: Board, src: Square, dest: Square, color: Color, capture: bool) -> bool:
    return (dest[0] - src[0], dest[1] - src[1]) in KNIGHT_OFFSETS


def _bishop_reaches(board: Board, src: Square, dest: Square, color: Color, capture: bool) -> bool:
    return _slides_to(board, src, dest, BISHOP_DIRS)


def _rook_reaches(board: Board, src: Square, dest: Square, color: Color, capture: bool) -> bool:
    return _slides_to(board, src, dest, ROOK_DIRS)


def _queen_reaches(board: Board, src: Square, dest: Square, color: Color, capture: bool) -> bool:
    return _slides_to(board, src, dest, QUEEN_DIRS)


def _king_reaches(board: Board, src: Square, dest: Square, color: Color, capture: bool) -> bool:
    return max(abs(dest[0] - src[0]), abs(dest[1] - src[1])) <= 1


# (board, source, destination, mover colour, capture marker present)
ReachRule = Callable[[Board, Square, Square, Color, bool], bool]

REACH_RULES: Dict[PieceKind, ReachRule] = {
    PieceKind.PAWN: _pawn_reaches,
    PieceKind.KNIGHT: _knight_reaches,
    PieceKind.BISHOP: _bishop_reaches,
    PieceKind.ROOK: _rook_reaches,
    PieceKind.QUEEN: _queen_reaches,
    PieceKind.KING: _king_reaches,
}


def find_source(
    board: Board,
    piece: Piece,
    dest: Square,
    file_hint: Optional[int] = None,
    rank_hint: Optional[int] = None,
    capture: bool = False,
) -> Optional[Square]:
    """Find the square from which ``piece`` can reach ``dest``.

    Args:
        board (Board): Position to search.
        piece (Piece): Kind and colour of the moving piece.
        dest (Square): Destination square.
        file_hint (Optional[int]): Required source column, if disambiguated.
        rank_hint (Optional[int]): Required source row, if disambiguated.
        capture (bool): Whether the move was written as a capture. Pawns
            move diagonally only on captures and straight ahead otherwise.

    Returns:
        Optional[Square]: First matching source in row-major order (rank 8
        to 1, file a to h), or ``None`` when no such piece exists.
    """
    reaches = REACH_RULES[piece.kind]
    for sq, occupant in board.pieces():
        if occupant != piece:
            continue
        if rank_hint is not None and sq[0] != rank_hint:
            continue
        if file_hint is not None and sq[1] != file_hint:
            continue
        if reaches(board, sq, dest, piece.color, capture):
            return sq
    return None
