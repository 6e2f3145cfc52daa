
"""LCG piece source threaded through the game state"""
import math
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from tetris_config import CONFIG
from tetris_piece import FallingPiece, ROTATIONS, COLOURS, shape_for

# GCC constants
M = 0x80000000
A = 1103515245
C = 12345


def lcg_hash(seed: int) -> int:
    return (A * seed + C) % M


def scale(h: int) -> float:
    """Maps a hash onto [-1, 1]."""
    return (2 * h) / (M - 1) - 1


def pick_index(h: int, n: int) -> int:
    return min(int(math.floor((scale(h) + 1) * (n / 2))), n - 1)


@dataclass(frozen=True)
class PieceSource:
    state: int

    @staticmethod
    def seeded(seed: Optional[int] = None) -> "PieceSource":
        if seed is None:
            seed = CONFIG["SEED"]
        if seed is None:
            seed = int(time.time() * 1000)
        return PieceSource(seed % M)

    def _next(self) -> Tuple[int, "PieceSource"]:
        h = lcg_hash(self.state)
        return h, PieceSource(h)

    def random_kind(self) -> Tuple[int, "PieceSource"]:
        h, src = self._next()
        return pick_index(h, len(ROTATIONS)), src

    def random_shape(self):
        kind, src = self.random_kind()
        return shape_for(kind, 0), src

    def random_colour(self) -> Tuple[str, "PieceSource"]:
        h, src = self._next()
        return COLOURS[pick_index(h, len(COLOURS))], src

    def draw(self) -> Tuple[FallingPiece, "PieceSource"]:
        kind, src = self.random_kind()
        colour, src = src.random_colour()
        return FallingPiece.spawn(kind, colour), src
