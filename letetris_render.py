
"""
Rendering helpers for the versus layout.

- Pre-render block cell Surfaces per kind (solid + ghost outline) and blit them.
- Pre-render the static background (both board wells + grid) per Dims.
- Cache the frozen-stack surface; rebuild it only when the frozen cells change.
- Cache HUD text surfaces; re-render only when the score changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from letetris_layout import Dims

# Colors per tetromino kind
COLORS: Dict[str, Tuple[int, int, int]] = {
    "I": (0, 255, 255),
    "O": (255, 255, 0),
    "T": (255, 0, 255),
    "S": (0, 255, 0),
    "Z": (255, 0, 0),
    "J": (0, 0, 255),
    "L": (255, 165, 0),
}

WELL = (64, 64, 64)
GRID = (128, 128, 128)
TEXT = (255, 255, 255)


@dataclass
class HudCache:
    score: int = -1
    score_s: Optional[pygame.Surface] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        # Frozen stack cache, keyed by the frozen cells it was built from
        self.stack_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._stack_key = None

    # ---------- Static background (two wells + grid) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((0, 0, 0))
        for right in (False, True):
            bx, by = d.board_x(right), d.board_y
            pygame.draw.rect(self.bg, WELL, (bx, by, d.board_w, d.board_h))
            for x in range(d.board_cols + 1):
                X = bx + x * d.cell
                pygame.draw.line(self.bg, GRID, (X, by), (X, by + d.board_h))
            for y in range(d.board_rows + 1):
                Y = by + y * d.cell
                pygame.draw.line(self.bg, GRID, (bx, Y), (bx + d.board_w, Y))

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c - 2, c - 2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c - 8, c - 8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0, 0, c - 8, c - 8), 2)
            self.ghost_surf[t] = g

    # ---------- Frozen stack cache ----------
    def rebuild_stack_surface(self, frozen):
        """Rebuilds the frozen-cell surface when the frozen cells changed."""
        key = frozenset(frozen.items())
        if key == self._stack_key:
            return
        self.stack_surface.fill((0, 0, 0, 0))
        d = self.dims
        for (x, y), t in frozen.items():
            rx = x * d.cell + 1
            ry = (d.board_rows - 1 - y) * d.cell + 1
            self.stack_surface.blit(self.cell_surf[t], (rx, ry))
        self._stack_key = key

    def _blit_cell(self, screen, surf, x, y, right, inset):
        d = self.dims
        if not (0 <= x < d.board_cols and 0 <= y < d.board_rows):
            return
        left, top, _, _ = d.cell_rect(x, y, right)
        screen.blit(surf, (left + inset, top + inset))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, state):
        d = self.dims
        piece_side = not state.falling_on_left
        screen.blit(self.bg, (0, 0))

        self.rebuild_stack_surface(state.frozen)
        screen.blit(self.stack_surface, (d.board_x(not piece_side), d.board_y))

        p = state.piece
        if state.playing:
            gy = state.ghost_row()
            for dx, dy in p.offsets():
                self._blit_cell(screen, self.ghost_surf[p.kind], p.x + dx, gy + dy, piece_side, 4)
        for x, y in p.cells():
            self._blit_cell(screen, self.cell_surf[p.kind], x, y, piece_side, 1)

        if state.waiting_for_start:
            self._banner(screen, ["Get Ready!", "Press Space to Start"])
        elif state.game_over:
            self._banner(screen, ["Game Over", "Press R to Restart", f"Score: {state.score}"])
        else:
            self.draw_score(screen, state.score)

    def draw_score(self, screen: pygame.Surface, score: int):
        d = self.dims
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = self.font.render(f"Score: {score}", True, TEXT)
        screen.blit(self.hud.score_s, (d.board_x(True), d.board_y + d.board_h + 4))

    def _banner(self, screen, lines):
        """Same message centred over both boards."""
        d = self.dims
        surfs = [self.big_font.render(s, True, TEXT) for s in lines]
        h = sum(s.get_height() for s in surfs) + 20
        w = max(s.get_width() for s in surfs) + 40
        for right in (False, True):
            cx = d.board_x(right) + d.board_w // 2
            top = d.board_y + (d.board_h - h) // 2
            box = pygame.Surface((w, h), pygame.SRCALPHA)
            box.fill((0, 0, 0, 180))
            screen.blit(box, (cx - w // 2, top))
            y = top + 10
            for s in surfs:
                screen.blit(s, s.get_rect(midtop=(cx, y)))
                y += s.get_height()
