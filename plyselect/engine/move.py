from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import COLS, ROWS, PieceKind, Square


PIECE_LETTERS = {
    "N": PieceKind.KNIGHT,
    "B": PieceKind.BISHOP,
    "R": PieceKind.ROOK,
    "Q": PieceKind.QUEEN,
    "K": PieceKind.KING,
}


class Castle(Enum):
    KINGSIDE = "O-O"
    QUEENSIDE = "O-O-O"


CASTLE_TOKENS = {
    "O-O": Castle.KINGSIDE,
    "O-O+": Castle.KINGSIDE,
    "O-O#": Castle.KINGSIDE,
    "O-O-O": Castle.QUEENSIDE,
    "O-O-O+": Castle.QUEENSIDE,
    "O-O-O#": Castle.QUEENSIDE,
}


@dataclass(frozen=True)
class SanMove:
    """Move intent decoded from a SAN token, independent of any board.

    Attributes:
        kind (PieceKind): Kind of the moving piece (king for castling).
        dest (Optional[Square]): Destination square; ``None`` for castling.
        file_hint (Optional[int]): Source column given for disambiguation.
        rank_hint (Optional[int]): Source row given for disambiguation.
        capture (bool): Whether the token carried an ``x`` marker.
        promotion (Optional[PieceKind]): Promotion kind, if any.
        castle (Optional[Castle]): Castling side for ``O-O``/``O-O-O``.
    """

    kind: PieceKind
    dest: Optional[Square] = None
    file_hint: Optional[int] = None
    rank_hint: Optional[int] = None
    capture: bool = False
    promotion: Optional[PieceKind] = None
    castle: Optional[Castle] = None


def str_to_square(s: str) -> Square:
    """Convert a square name such as ``"e4"`` into ``(row, col)``.

    Raises:
        ValueError: If ``s`` is not a square on the board.
    """
    if len(s) != 2:
        raise ValueError(f"invalid square: {s!r}")
    col = ord(s[0]) - ord("a")
    row = ord("8") - ord(s[1])
    if not (0 <= row < ROWS and 0 <= col < COLS):
        raise ValueError(f"invalid square: {s!r}")
    return row, col


def square_to_str(sq: Square) -> str:
    row, col = sq
    if not (0 <= row < ROWS and 0 <= col < COLS):
        raise ValueError(f"invalid square: {sq!r}")
    return chr(ord("a") + col) + chr(ord("8") - row)


def parse_san(token: str) -> SanMove:
    """Tokenize a move in standard algebraic notation.

    Args:
        token (str): Move such as ``"Nbd2"``, ``"exd6"``, ``"e8=Q+"`` or ``"O-O"``.

    Returns:
        SanMove: Decoded move intent.

    Raises:
        ValueError: If the token is too short, names an off-board destination
            or an unknown promotion piece.
    """
    castle = CASTLE_TOKENS.get(token)
    if castle is not None:
        return SanMove(kind=PieceKind.KING, castle=castle)

    body = token.rstrip("+#")

    promotion: Optional[PieceKind] = None
    if len(body) >= 4 and body[-2] == "=":
        promotion = PieceKind.from_letter(body[-1])
        body = body[:-2]

    kind = PieceKind.PAWN
    if body and body[0] in PIECE_LETTERS:
        kind = PIECE_LETTERS[body[0]]
        body = body[1:]

    if len(body) < 2:
        raise ValueError(f"move too short: {token!r}")
    dest = str_to_square(body[-2:])

    file_hint: Optional[int] = None
    rank_hint: Optional[int] = None
    capture = False
    for ch in body[:-2]:
        if ch == "x":
            capture = True
        elif "a" <= ch <= "h":
            file_hint = ord(ch) - ord("a")
        elif "1" <= ch <= "8":
            rank_hint = ord("8") - ord(ch)

    return SanMove(
        kind=kind,
        dest=dest,
        file_hint=file_hint,
        rank_hint=rank_hint,
        capture=capture,
        promotion=promotion,
    )
