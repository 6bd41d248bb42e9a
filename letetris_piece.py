
"""Piece model and per-rotation offset tables"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

Offset = Tuple[int, int]

KINDS = ("I", "O", "T", "S", "Z", "J", "L")

# kind -> 4 rotation states -> 4 (dx, dy) offsets from the pivot, +dy is up
SHAPES: Dict[str, Tuple[Tuple[Offset, ...], ...]] = {
    "I": (
        ((-1, 0), (0, 0), (1, 0), (2, 0)),
        ((0, -1), (0, 0), (0, 1), (0, 2)),
        ((-1, 0), (0, 0), (1, 0), (2, 0)),
        ((0, -1), (0, 0), (0, 1), (0, 2)),
    ),
    "O": (
        ((0, 0), (1, 0), (0, 1), (1, 1)),
        ((0, 0), (1, 0), (0, 1), (1, 1)),
        ((0, 0), (1, 0), (0, 1), (1, 1)),
        ((0, 0), (1, 0), (0, 1), (1, 1)),
    ),
    "T": (
        ((-1, 0), (0, 0), (1, 0), (0, 1)),
        ((0, -1), (0, 0), (1, 0), (0, 1)),
        ((-1, 0), (0, 0), (1, 0), (0, -1)),
        ((0, -1), (0, 0), (-1, 0), (0, 1)),
    ),
    "S": (
        ((0, 0), (1, 0), (-1, 1), (0, 1)),
        ((0, 0), (0, 1), (1, -1), (1, 0)),
        ((0, 0), (1, 0), (-1, 1), (0, 1)),
        ((0, 0), (0, 1), (1, -1), (1, 0)),
    ),
    "Z": (
        ((-1, 0), (0, 0), (0, 1), (1, 1)),
        ((1, -1), (1, 0), (0, 0), (0, 1)),
        ((-1, 0), (0, 0), (0, 1), (1, 1)),
        ((1, -1), (1, 0), (0, 0), (0, 1)),
    ),
    "J": (
        ((-1, 0), (0, 0), (1, 0), (1, 1)),
        ((0, -1), (0, 0), (0, 1), (1, -1)),
        ((-1, -1), (-1, 0), (0, 0), (1, 0)),
        ((0, -1), (0, 0), (0, 1), (-1, 1)),
    ),
    "L": (
        ((-1, 0), (0, 0), (1, 0), (-1, 1)),
        ((0, -1), (0, 0), (0, 1), (1, 1)),
        ((1, -1), (-1, 0), (0, 0), (1, 0)),
        ((0, -1), (0, 0), (0, 1), (-1, -1)),
    ),
}


def rotated_offsets(kind: str, rotation: int) -> Tuple[Offset, ...]:
    if not 0 <= rotation < 4:
        raise ValueError(f"rotation must be in 0..3, got {rotation}")
    return SHAPES[kind][rotation]


@dataclass
class Piece:
    kind: str
    rotation: int
    x: int
    y: int

    @staticmethod
    def spawn(kind: str, board_width: int, board_height: int) -> "Piece":
        if kind not in SHAPES:
            raise KeyError(kind)
        return Piece(kind, 0, board_width // 2, board_height - 1)

    def offsets(self) -> Tuple[Offset, ...]:
        return rotated_offsets(self.kind, self.rotation)

    def cells(self) -> List[Offset]:
        return [(self.x + dx, self.y + dy) for dx, dy in self.offsets()]
