
import logging

import pygame
from letetris_config import CONFIG
from letetris_settings import SettingsError

log = logging.getLogger(__name__)


class Overlay:
    """Settings overlay: board spacing (persisted) and cell size (session only)."""

    def __init__(self, state):
        self.state = state
        self.active = False
        self.items = [
            ("internal_spacing", "Board spacing", 0.0, 16.0, 0.5),
            ("CELL_SIZE", "Cell size", 12, 48, 2),
        ]
        self.index = 0

    def toggle(self): self.active = not self.active

    def value(self, key):
        if key in CONFIG:
            return CONFIG[key]
        return getattr(self.state, key)

    def _store(self, key, v):
        if key in CONFIG:
            CONFIG[key] = v
            self.state.update_dimensions()
            return
        try:
            setattr(self.state, key, v)
        except SettingsError as e:
            # the new value still applies to this session
            log.warning("could not persist %s: %s", key, e)

    def handle(self, e):
        if e.key in (pygame.K_ESCAPE, pygame.K_F1): self.toggle(); return
        if e.key == pygame.K_UP: self.index = (self.index - 1) % len(self.items); return
        if e.key == pygame.K_DOWN: self.index = (self.index + 1) % len(self.items); return
        key, label, lo, hi, step = self.items[self.index]
        val = self.value(key)
        if e.key == pygame.K_LEFT: self._store(key, type(val)(max(lo, val - step)))
        if e.key == pygame.K_RIGHT: self._store(key, type(val)(min(hi, val + step)))

    def draw(self, screen, font, w, h):
        if not self.active: return
        s = pygame.Surface((w - 80, h - 80), pygame.SRCALPHA); s.fill((20, 25, 40, 230))
        screen.blit(s, (40, 40))
        screen.blit(font.render("SETTINGS (F1/Esc to close)", True, (230, 240, 255)), (60, 56))
        y = 80
        for i, (key, label, lo, hi, step) in enumerate(self.items):
            col = (255, 255, 255) if i == self.index else (200, 210, 235)
            v = self.value(key)
            txt = f"{label}: {v:.1f}" if isinstance(v, float) else f"{label}: {v}"
            screen.blit(font.render(txt, True, col), (60, 40 + y)); y += 30
