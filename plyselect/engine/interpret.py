from __future__ import annotations

from typing import Dict, Tuple

from .board import Board, Color, Piece, PieceKind
from .locate import find_source
from .move import Castle, SanMove, parse_san


BACK_ROW = {Color.WHITE: 7, Color.BLACK: 0}

# (king from, king to, rook from, rook to) as columns on the back row
CASTLE_COLUMNS: Dict[Castle, Tuple[int, int, int, int]] = {
    Castle.KINGSIDE: (4, 6, 7, 5),
    Castle.QUEENSIDE: (4, 2, 0, 3),
}


def _castle(board: Board, side: Castle, color: Color) -> None:
    row = BACK_ROW[color]
    k_from, k_to, r_from, r_to = CASTLE_COLUMNS[side]
    board.clear((row, k_from))
    board.clear((row, r_from))
    board.put((row, k_to), Piece(PieceKind.KING, color))
    board.put((row, r_to), Piece(PieceKind.ROOK, color))


def apply_intent(board: Board, move: SanMove, color: Color) -> None:
    """Apply a decoded move for ``color`` to ``board`` in place.

    Raises:
        ValueError: If no piece of the moving kind can reach the destination.
            The board is left untouched in that case.
    """
    if move.castle is not None:
        # Castling rights and check are not verified
        _castle(board, move.castle, color)
        return

    dest = move.dest
    if dest is None:
        raise ValueError("move has no destination")
    mover = Piece(move.kind, color)
    src = find_source(board, mover, dest, move.file_hint, move.rank_hint, move.capture)
    if src is None:
        raise ValueError(f"no {move.kind.name.lower()} can reach the destination")

    if move.kind is PieceKind.PAWN and src[1] != dest[1] and board.is_empty(dest):
        # En passant: the captured pawn sits beside the source
        board.clear((src[0], dest[1]))

    board.clear(src)
    if move.promotion is not None:
        mover = Piece(move.promotion, color)
    board.put(dest, mover)


def apply_san(board: Board, token: str, color: Color) -> None:
    """Interpret a SAN token and apply it to ``board`` in place.

    Args:
        board (Board): Board to mutate.
        token (str): Move in standard algebraic notation.
        color (Color): Side making the move.

    Raises:
        ValueError: If the token cannot be parsed or applied. No mutation is
            performed on failure.
    """
    apply_intent(board, parse_san(token), color)


def try_apply(board: Board, token: str, color: Color) -> bool:
    """Like :func:`apply_san` but report failure as ``False``."""
    try:
        apply_san(board, token, color)
    except ValueError:
        return False
    return True
