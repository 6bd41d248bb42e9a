import unittest
from types import SimpleNamespace

import pygame

from helpers import FixedKinds
from letetris_config import CONFIG
from letetris_overlay import Overlay
from letetris_settings import MemorySettings, SettingsError
from letetris_state import GameState


def key(k):
    return SimpleNamespace(key=k)


class FailingSettings(MemorySettings):
    def set(self, key, value):
        raise SettingsError("read-only")


class TestOverlay(unittest.TestCase):

    def setUp(self):
        self.cell_size = CONFIG["CELL_SIZE"]
        self.settings = MemorySettings()
        self.state = GameState(settings=self.settings, rng=FixedKinds())
        self.overlay = Overlay(self.state)
        self.overlay.toggle()

    def tearDown(self):
        CONFIG["CELL_SIZE"] = self.cell_size

    def test_adjust_spacing_persists(self):
        self.overlay.handle(key(pygame.K_RIGHT))
        self.assertEqual(self.state.internal_spacing, 4.5)
        self.assertEqual(self.settings.get("internalSpacing"), 4.5)
        self.overlay.handle(key(pygame.K_LEFT))
        self.overlay.handle(key(pygame.K_LEFT))
        self.assertEqual(self.state.internal_spacing, 3.5)

    def test_spacing_clamped_at_zero(self):
        self.state.internal_spacing = 0.0
        self.overlay.handle(key(pygame.K_LEFT))
        self.assertEqual(self.state.internal_spacing, 0.0)

    def test_cell_size_recomputes_layout(self):
        self.overlay.handle(key(pygame.K_DOWN))
        self.overlay.handle(key(pygame.K_RIGHT))
        self.assertEqual(CONFIG["CELL_SIZE"], self.cell_size + 2)
        self.assertEqual(self.state.dims.cell, self.cell_size + 2)
        self.assertNotIn("CELL_SIZE", self.settings.values)

    def test_navigation_wraps(self):
        self.overlay.handle(key(pygame.K_UP))
        self.assertEqual(self.overlay.index, len(self.overlay.items) - 1)

    def test_escape_closes(self):
        self.overlay.handle(key(pygame.K_ESCAPE))
        self.assertFalse(self.overlay.active)

    def test_unwritable_settings_keep_session_value(self):
        state = GameState(settings=FailingSettings(), rng=FixedKinds())
        overlay = Overlay(state)
        with self.assertLogs("letetris_overlay", level="WARNING"):
            overlay.handle(key(pygame.K_RIGHT))
        self.assertEqual(state.internal_spacing, 4.5)


if __name__ == '__main__':
    unittest.main()
