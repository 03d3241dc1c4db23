from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from .error import (
    exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware
from ...engine.board import Board
from ...engine.interpret import apply_san
from ...eval import evaluate_terms
from ...search.service import SelectionService


logger = logging.getLogger(__name__)


class SelectRequest(BaseModel):
    fen: str = Field(..., description="FEN string")
    moves: Union[str, List[str]] = Field(
        ..., description="SAN moves, space-separated or as a list, e.g. 'e4 Nf3'"
    )
    timeout: int = Field(default=0, ge=0, description="Seconds available (advisory)")


class CandidateOut(BaseModel):
    move: str
    score_cp: Optional[int]


class SelectResponse(BaseModel):
    index: int
    move: Optional[str]
    score_cp: Optional[int]
    applicable: bool
    candidates: List[CandidateOut]


class EvaluateRequest(BaseModel):
    fen: str = Field(..., description="FEN string")


class EvaluateResponse(BaseModel):
    score_cp: int
    material: int
    centrality: int
    pawn_advance: int


class ApplyRequest(BaseModel):
    fen: str = Field(..., description="FEN string")
    move: str = Field(..., description="SAN move, e.g. Nf3")


class ApplyResponse(BaseModel):
    fen: str


def create_app() -> FastAPI:
    app = FastAPI(title="plyselect", version="0.1.0")

    # Basic logging setup
    logging.basicConfig(level=logging.INFO)

    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, exception_handler)

    selector = SelectionService()

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/select", response_model=SelectResponse)
    async def select(req: SelectRequest) -> SelectResponse:
        board = Board.from_fen(req.fen)
        res = selector.select(board, req.moves, req.timeout)
        return SelectResponse(
            index=res.index,
            move=res.best_move,
            score_cp=res.score_cp,
            applicable=res.applied > 0,
            candidates=[CandidateOut(move=c.move, score_cp=c.score_cp) for c in res.candidates],
        )

    @app.post("/api/evaluate", response_model=EvaluateResponse)
    async def evaluate(req: EvaluateRequest) -> EvaluateResponse:
        terms = evaluate_terms(Board.from_fen(req.fen))
        return EvaluateResponse(
            score_cp=terms.total,
            material=terms.material,
            centrality=terms.centrality,
            pawn_advance=terms.pawn_advance,
        )

    @app.post("/api/apply", response_model=ApplyResponse)
    async def apply(req: ApplyRequest) -> ApplyResponse:
        board = Board.from_fen(req.fen)
        try:
            apply_san(board, req.move, board.side_to_move)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        board.side_to_move = board.side_to_move.other
        return ApplyResponse(fen=board.to_fen())

    return app
