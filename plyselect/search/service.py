from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from plyselect.engine.board import Board, Color
from plyselect.engine.interpret import apply_san
from plyselect.eval import evaluate


logger = logging.getLogger(__name__)

# Bounds on the candidate list; longer input is truncated silently
MAX_MOVES = 256
MAX_TOKEN_LEN = 15

INF = 10_000_000


@dataclass
class CandidateScore:
    move: str
    score_cp: Optional[int]  # None when the move could not be applied


@dataclass
class SelectionResult:
    index: int
    score_cp: Optional[int]
    candidates: List[CandidateScore] = field(default_factory=list)
    applied: int = 0
    time_ms: int = 0

    @property
    def best_move(self) -> Optional[str]:
        if not self.candidates:
            return None
        return self.candidates[self.index].move


def split_moves(moves: Union[str, Sequence[str]]) -> List[str]:
    """Split a move list on spaces into at most ``MAX_MOVES`` tokens.

    Only the space character separates moves, so indices line up with a
    caller splitting the same string on spaces. Tokens longer than
    ``MAX_TOKEN_LEN`` characters are cut to that length.
    """
    parts = moves.split(" ") if isinstance(moves, str) else moves
    tokens = [t for t in parts if t]
    return [t[:MAX_TOKEN_LEN] for t in tokens[:MAX_MOVES]]


class SelectionService:
    """One-ply move selector.

    Each candidate is applied to its own copy of the root board, scored with
    the static evaluator, and the best score for the side to move wins. Ties
    keep the earliest candidate.
    """

    def select(
        self,
        board: Board,
        moves: Union[str, Sequence[str]],
        time_budget_s: Optional[int] = None,
    ) -> SelectionResult:
        start = time.perf_counter()
        # The budget is advisory: a single ply always runs to completion
        logger.debug("select: side=%s budget_s=%s", board.side_to_move.value, time_budget_s)

        tokens = split_moves(moves)
        white = board.side_to_move is Color.WHITE
        best_idx = 0
        best_score = -INF if white else INF
        applied = 0
        candidates: List[CandidateScore] = []

        for i, token in enumerate(tokens):
            trial = board.copy()
            try:
                apply_san(trial, token, board.side_to_move)
            except ValueError as e:
                logger.debug("skip move %d %r: %s", i, token, e)
                candidates.append(CandidateScore(token, None))
                continue
            applied += 1
            score = evaluate(trial)
            candidates.append(CandidateScore(token, score))
            if (white and score > best_score) or (not white and score < best_score):
                best_score = score
                best_idx = i

        time_ms = int((time.perf_counter() - start) * 1000)
        logger.debug("select: index=%d applied=%d/%d time_ms=%d", best_idx, applied, len(tokens), time_ms)
        return SelectionResult(
            index=best_idx,
            score_cp=best_score if applied else None,
            candidates=candidates,
            applied=applied,
            time_ms=time_ms,
        )


def choose_move(fen: str, moves: str, timeout: int = 0) -> int:
    """Pick the best move from ``moves`` for the side to move in ``fen``.

    Args:
        fen (str): Position in FEN; only placement and active colour are read.
        moves (str): Space-separated SAN moves, trusted to be legal.
        timeout (int): Seconds available. Accepted but not enforced.

    Returns:
        int: Zero-based index into ``moves``. ``0`` when the list is empty or
        no move could be applied.
    """
    board = Board.from_fen(fen)
    return SelectionService().select(board, moves, timeout).index
