import logging
import sys

import pygame
from letetris_config import CONFIG
from letetris_input import StickRepeat, handle_button, handle_key
from letetris_overlay import Overlay
from letetris_render import RenderAssets
from letetris_settings import JsonSettings
from letetris_state import GameState

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def open_joysticks():
    """Open every connected gamepad so its events reach the queue."""
    pads = {}
    for i in range(pygame.joystick.get_count()):
        pad = pygame.joystick.Joystick(i)
        pads[pad.get_instance_id()] = pad
        log.info("gamepad connected: %s", pad.get_name())
    return pads


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.joystick.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN,
                              pygame.JOYBUTTONDOWN, pygame.JOYAXISMOTION,
                              pygame.JOYDEVICEADDED, pygame.JOYDEVICEREMOVED])
    pads = open_joysticks()

    state = GameState(settings=JsonSettings())
    dims = state.dims
    screen = recreate_window(dims)
    pygame.display.set_caption("Letetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 36)

    render = RenderAssets(dims, font, big_font)
    overlay = Overlay(state)
    stick = StickRepeat()
    clock = pygame.time.Clock()

    while True:
        dt = clock.tick(CONFIG["FPS"]) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_F1:
                    overlay.toggle(); continue
                if overlay.active:
                    overlay.handle(e); continue
                if e.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                handle_key(state, e.key)
            elif e.type == pygame.JOYDEVICEADDED:
                pad = pygame.joystick.Joystick(e.device_index)
                pads[pad.get_instance_id()] = pad
                log.info("gamepad connected: %s", pad.get_name())
            elif e.type == pygame.JOYDEVICEREMOVED:
                pads.pop(e.instance_id, None)
            elif overlay.active:
                continue
            elif e.type == pygame.JOYBUTTONDOWN:
                handle_button(state, e.button)
            elif e.type == pygame.JOYAXISMOTION:
                stick.handle_axis(state, e.axis, e.value, pygame.time.get_ticks() / 1000.0)

        # Spacing or cell size changed: rebuild the window and cached assets
        if state.dims != dims:
            dims = state.dims
            screen = recreate_window(dims)
            render = RenderAssets(dims, font, big_font)

        if not overlay.active:
            state.tick(dt)

        render.draw(screen, state)
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
