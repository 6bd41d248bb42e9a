
"""Board helpers: collide, merge, sweep, landing row"""
from collections import Counter
from typing import Dict, List, Tuple

from letetris_piece import Piece

# (column, row) -> piece kind; row 0 is the floor
Frozen = Dict[Tuple[int, int], str]


def collide(frozen: Frozen, piece: Piece, width: int,
            check_x: bool = True, check_y: bool = True) -> bool:
    """True if the piece overlaps frozen cells or leaves the checked bounds.

    check_x=False ignores the side walls, check_y=False ignores the floor.
    """
    for x, y in piece.cells():
        if check_y and y < 0:
            return True
        if check_x and (x < 0 or x >= width):
            return True
        if (x, y) in frozen:
            return True
    return False


def merge(frozen: Frozen, piece: Piece, width: int, height: int) -> int:
    """Freeze the piece's cells that lie on the board; return how many did."""
    kept = 0
    for x, y in piece.cells():
        if 0 <= x < width and 0 <= y < height:
            frozen[(x, y)] = piece.kind
            kept += 1
    return kept


def full_rows(frozen: Frozen, width: int) -> List[int]:
    counts = Counter(y for _, y in frozen)
    return sorted(y for y, n in counts.items() if n == width)


def sweep(frozen: Frozen, width: int) -> List[int]:
    """Clear full rows in place and compact the rest; return the cleared rows."""
    rows = full_rows(frozen, width)
    if not rows:
        return rows
    survivors = {}
    for (x, y), kind in frozen.items():
        if y in rows:
            continue
        below = sum(1 for r in rows if r < y)
        survivors[(x, y - below)] = kind
    frozen.clear()
    frozen.update(survivors)
    return rows


def landing_row(frozen: Frozen, piece: Piece) -> int:
    """Row the piece's pivot would rest on if dropped straight down."""
    test = Piece(piece.kind, piece.rotation, piece.x, piece.y)
    while not collide(frozen, test, 0, check_x=False):
        test.y -= 1
    return test.y + 1
