"""One-ply chess move selector over FEN positions and SAN move lists."""

from plyselect.search.service import choose_move

__all__ = ["choose_move"]
