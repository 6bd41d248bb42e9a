# letetris_layout.py
from dataclasses import dataclass
from typing import Tuple


@dataclass
class Dims:
    cell: int
    board_cols: int
    board_rows: int
    spacing: float
    x_padding: float
    y_padding: float
    board_offset: float
    world_w: float
    world_h: float
    board_w: int
    board_h: int
    total_w: int
    total_h: int

    def board_x(self, right: bool = False) -> int:
        """Pixel x of the left edge of the left or right board."""
        x = self.x_padding + (self.board_offset if right else 0.0)
        return int(round(x * self.cell))

    @property
    def board_y(self) -> int:
        """Pixel y of the top edge of both boards."""
        return self.total_h - int(round((self.y_padding + self.board_rows) * self.cell))

    def cell_rect(self, x: int, y: int, right: bool = False) -> Tuple[int, int, int, int]:
        """Pixel rect (left, top, w, h) of board cell (x, y); row 0 is the bottom row."""
        left = self.board_x(right) + x * self.cell
        top = self.board_y + (self.board_rows - 1 - y) * self.cell
        return left, top, self.cell, self.cell


def padding_for(spacing: float, constant_spacing: float) -> float:
    # keeps 2 * padding + spacing constant until the spacing alone exceeds it
    return max((constant_spacing - spacing) / 2, 0.0)


def compute_dims(cols: int, rows: int, spacing: float, x_padding: float,
                 y_padding: float, cell: int) -> Dims:
    board_offset = cols + spacing
    world_w = cols * 2 + spacing + x_padding * 2
    world_h = rows + y_padding

    return Dims(
        cell=cell, board_cols=cols, board_rows=rows,
        spacing=spacing, x_padding=x_padding, y_padding=y_padding,
        board_offset=board_offset, world_w=world_w, world_h=world_h,
        board_w=cols * cell, board_h=rows * cell,
        total_w=int(round(world_w * cell)), total_h=int(round(world_h * cell)),
    )
