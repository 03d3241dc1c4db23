from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from plyselect.engine.board import Board
from plyselect.search.service import SelectionService


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plyselect",
        description="Print the 0-based index of the best move after a one-ply search",
    )
    parser.add_argument("fen", type=str, help="Position in Forsyth-Edwards Notation")
    parser.add_argument("moves", type=str, help="Space-separated legal moves in SAN")
    parser.add_argument("timeout", type=int, help="Seconds available (advisory)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every candidate's score to stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once a handler exists; the package level still applies
    logging.getLogger("plyselect").setLevel(level)

    res = SelectionService().select(Board.from_fen(args.fen), args.moves, args.timeout)
    for i, cand in enumerate(res.candidates):
        logger.info("%3d %-8s %s", i, cand.move, "-" if cand.score_cp is None else cand.score_cp)

    print(res.index)
    return 0


def serve(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="plyselect-server", description="Run the HTTP API")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Bind address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    args = parser.parse_args(argv)
    uvicorn.run("plyselect.protocol.http.app:create_app", factory=True, host=args.host, port=args.port)


if __name__ == "__main__":
    sys.exit(main())
