from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple


STARTPOS_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

ROWS = 8
COLS = 8

# (row, col); row 0 is rank 8, col 0 is file a
Square = Tuple[int, int]


class Color(Enum):
    WHITE = "w"
    BLACK = "b"

    @property
    def other(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class PieceKind(Enum):
    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"

    @classmethod
    def from_letter(cls, letter: str) -> "PieceKind":
        """Decode a piece letter case-insensitively.

        Raises:
            ValueError: If ``letter`` is not one of P/N/B/R/Q/K.
        """
        try:
            return cls(letter.lower())
        except ValueError as e:
            raise ValueError(f"invalid piece letter: {letter!r}") from e


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    color: Color

    @property
    def symbol(self) -> str:
        """FEN letter: uppercase for White, lowercase for Black."""
        ch = self.kind.value
        return ch.upper() if self.color is Color.WHITE else ch

    @classmethod
    def from_symbol(cls, ch: str) -> "Piece":
        kind = PieceKind.from_letter(ch)
        return cls(kind, Color.WHITE if ch.isupper() else Color.BLACK)


def _empty_grid() -> List[List[Optional[Piece]]]:
    return [[None] * COLS for _ in range(ROWS)]


def on_board(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


@dataclass
class Board:
    """Mailbox board: an 8x8 grid of pieces plus the side to move.

    Notes:
    - ``grid[row][col]``; row 0 is rank 8 and col 0 is file a.
    - No castling rights, en-passant target or move counters are kept.
    """

    grid: List[List[Optional[Piece]]] = field(default_factory=_empty_grid)
    side_to_move: Color = Color.WHITE

    @classmethod
    def empty(cls, side_to_move: Color = Color.WHITE) -> "Board":
        return cls(grid=_empty_grid(), side_to_move=side_to_move)

    @classmethod
    def startpos(cls) -> "Board":
        return cls.from_fen(STARTPOS_FEN)

    @classmethod
    def from_fen(cls, fen: str) -> "Board":
        """Decode the placement and active-colour fields of a FEN string.

        Args:
            fen (str): FEN string. Only the first two fields are read.

        Returns:
            Board: Decoded board.

        Notes:
            Decoding is lenient and never raises. Pieces that would land off
            the grid are dropped, unknown letters take up a square without
            placing anything, and any active colour other than ``"w"``
            (including a missing field) is read as Black.
        """
        board = cls.empty()
        row = 0
        col = 0
        idx = 0
        while idx < len(fen) and fen[idx] != " ":
            ch = fen[idx]
            if ch == "/":
                row += 1
                col = 0
            elif "1" <= ch <= "8":
                col += int(ch)
            else:
                if on_board(row, col):
                    try:
                        board.grid[row][col] = Piece.from_symbol(ch)
                    except ValueError:
                        pass
                col += 1
            idx += 1

        if idx < len(fen) and fen[idx] == " ":
            idx += 1
        stm = fen[idx] if idx < len(fen) else ""
        board.side_to_move = Color.WHITE if stm == "w" else Color.BLACK
        return board

    def placement(self) -> str:
        """Serialize the piece-placement field of FEN."""
        ranks: List[str] = []
        for row in range(ROWS):
            run = 0
            out: List[str] = []
            for col in range(COLS):
                piece = self.grid[row][col]
                if piece is None:
                    run += 1
                    continue
                if run > 0:
                    out.append(str(run))
                    run = 0
                out.append(piece.symbol)
            if run > 0:
                out.append(str(run))
            ranks.append("".join(out))
        return "/".join(ranks)

    def to_fen(self) -> str:
        """Serialize into a FEN string.

        Castling, en-passant and counter fields are not tracked and are
        always written as ``- - 0 1``.
        """
        return f"{self.placement()} {self.side_to_move.value} - - 0 1"

    def copy(self) -> "Board":
        # Pieces are immutable, so copying the rows is enough
        return Board(grid=[list(r) for r in self.grid], side_to_move=self.side_to_move)

    def piece_at(self, sq: Square) -> Optional[Piece]:
        row, col = sq
        return self.grid[row][col]

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    def put(self, sq: Square, piece: Piece) -> None:
        row, col = sq
        self.grid[row][col] = piece

    def clear(self, sq: Square) -> None:
        row, col = sq
        self.grid[row][col] = None

    def pieces(self) -> Iterator[Tuple[Square, Piece]]:
        """Yield occupied squares in row-major order (rank 8 to 1, file a to h)."""
        for row in range(ROWS):
            for col in range(COLS):
                piece = self.grid[row][col]
                if piece is not None:
                    yield (row, col), piece
