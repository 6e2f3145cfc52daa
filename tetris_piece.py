
"""Piece model, shape catalog, table-driven rotation"""
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from tetris_config import SPAWN_X, SPAWN_Y
from tetris_board import Grid, Shape, overlaps_occupied_or_wall, has_reached_floor

KINDS = ("O", "I", "S", "Z", "J", "L", "T")
COLOURS = ("green", "cyan", "pink", "violet", "red", "yellow", "blue")

# Every orientation is authored by hand; index 0 is the spawn orientation.
ROTATIONS: Tuple[Tuple[Shape, ...], ...] = (
    (  # O
        ((1,1),(1,1)),
        ((0,1,1),(0,1,1)),
        ((0,0,0),(0,1,1),(0,1,1)),
        ((0,0,0),(1,1,0),(1,1,0)),
    ),
    (  # I
        ((1,1,1,1),),
        ((0,1),(0,1),(0,1),(0,1)),
        ((0,0,0,0),(0,0,0,0),(1,1,1,1)),
        ((0,1,0,0),(0,1,0,0),(0,1,0,0),(0,1,0,0)),
    ),
    (  # S
        ((0,1,1),(1,1,0)),
        ((0,1,0),(0,1,1),(0,0,1)),
        ((0,0,0),(0,1,1),(1,1,0)),
        ((1,0,0),(1,1,0),(0,1,0)),
    ),
    (  # Z
        ((1,1,0),(0,1,1)),
        ((0,0,1),(0,1,1),(0,1,0)),
        ((0,0,0),(1,1,0),(0,1,1)),
        ((0,0,1),(0,1,1),(0,1,0)),
    ),
    (  # J
        ((1,0,0),(1,1,1)),
        ((0,1,1),(0,1,0),(0,1,0)),
        ((0,0,0),(1,1,1),(0,0,1)),
        ((0,0,1),(0,0,1),(0,1,1)),
    ),
    (  # L
        ((0,0,1),(1,1,1)),
        ((0,1,0),(0,1,0),(0,1,1)),
        ((0,0,0),(1,1,1),(1,0,0)),
        ((1,1,0),(0,1,0),(0,1,0)),
    ),
    (  # T
        ((0,1,0),(1,1,1)),
        ((0,1,0),(0,1,1),(0,1,0)),
        ((0,0,0),(1,1,1),(0,1,0)),
        ((0,1,0),(1,1,0),(0,1,0)),
    ),
)

SHAPES: Tuple[Shape, ...] = tuple(r[0] for r in ROTATIONS)


def shape_for(kind: int, rotation: int) -> Shape:
    table = ROTATIONS[kind]
    return table[rotation % len(table)]


@dataclass(frozen=True)
class FallingPiece:
    shape: Shape
    x: int = SPAWN_X
    y: int = SPAWN_Y
    kind: Optional[int] = None
    rotation: int = 0
    colour: str = COLOURS[-1]

    @staticmethod
    def spawn(kind: int, colour: str = COLOURS[-1]) -> "FallingPiece":
        return FallingPiece(shape_for(kind, 0), SPAWN_X, SPAWN_Y, kind, 0, colour)

    @property
    def name(self) -> str:
        return KINDS[self.kind] if self.kind is not None else "?"

    def moved(self, x: int, y: int) -> "FallingPiece":
        return replace(self, x=x, y=y)

# rotation

def try_rotate(grid: Grid, piece: FallingPiece) -> Optional[FallingPiece]:
    """Next orientation from the table, or None when it does not fit in place."""
    if piece.kind is None:
        return None
    new = (piece.rotation + 1) % len(ROTATIONS[piece.kind])
    shape = shape_for(piece.kind, new)
    if overlaps_occupied_or_wall(shape, piece.x, piece.y, grid) or has_reached_floor(shape, piece.y):
        return None
    return replace(piece, shape=shape, rotation=new)
