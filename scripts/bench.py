#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

# Allow running this script directly via `python scripts/bench.py`
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from plyselect.engine.board import Board, STARTPOS_FEN
from plyselect.search.service import SelectionService


@dataclass
class BenchItem:
    name: str
    fen: str
    moves: str


DEFAULT_POSITIONS: List[BenchItem] = [
    BenchItem(
        "startpos",
        STARTPOS_FEN,
        "a3 a4 b3 b4 c3 c4 d3 d4 e3 e4 f3 f4 g3 g4 h3 h4 Na3 Nc3 Nf3 Nh3",
    ),
    BenchItem(
        "italian",
        "r1bqkbnr/pppp1ppp/2n5/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R b KQkq - 3 3",
        "Nf6 Bc5 Be7 d6 h6 a6 Nge7 Qf6 Qe7 Nd4 Na5 f5",
    ),
    BenchItem(
        "castles",
        "r3k2r/pppq1ppp/2n1bn2/3pp3/3PP3/2N1BN2/PPPQ1PPP/R3K2R w KQkq - 0 1",
        "O-O O-O-O dxe5 exd5 Nxd5 Nxe5 Bg5 Qd3 Kd1 Rd1 a3 h3",
    ),
]


def load_positions(path: str) -> List[BenchItem]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [BenchItem(o["name"], o["fen"], o["moves"]) for o in data.get("positions", [])]


def run_bench(items: List[BenchItem], iterations: int) -> int:
    """Run ``iterations`` selections per position and return the number of moves scored."""
    iterations = max(1, iterations)
    service = SelectionService()
    total_moves = 0
    for item in items:
        board = Board.from_fen(item.fen)
        start = time.perf_counter()
        for _ in range(iterations):
            res = service.select(board, item.moves)
        dt = time.perf_counter() - start
        total_moves += res.applied * iterations
        print(
            f"{item.name}: best={res.best_move} score_cp={res.score_cp} "
            f"applied={res.applied}/{len(res.candidates)} time_ms={int(dt * 1000)}"
        )
    return total_moves


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Time the one-ply selector over a set of positions")
    parser.add_argument("--positions", type=str, default=None, help="JSON file with positions")
    parser.add_argument("--iterations", type=int, default=1000, help="Selections per position (min 1)")
    args = parser.parse_args(argv)

    items = load_positions(args.positions) if args.positions else DEFAULT_POSITIONS
    start_all = time.perf_counter()
    total_moves = run_bench(items, args.iterations)
    dt_all = time.perf_counter() - start_all
    print(f"total time_ms={int(dt_all * 1000)} moves_per_s={int(total_moves / max(dt_all, 1e-9))}")


if __name__ == "__main__":
    main()
