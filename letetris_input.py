
"""Keyboard and gamepad -> GameState command dispatch"""
import pygame

MOVES = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_DOWN: "move_down",
    pygame.K_UP: "rotate_piece",
}

# Button indices of an Xbox-layout pad as SDL reports them through pygame.joystick
BUTTON_A, BUTTON_B, BUTTON_X, BUTTON_Y = 0, 1, 2, 3
BUTTON_START = 7
BUTTONS = {
    BUTTON_A: "move_down",
    BUTTON_B: "move_right",
    BUTTON_X: "move_left",
    BUTTON_Y: "rotate_piece",
}

AXIS_LEFT_X, AXIS_LEFT_Y = 0, 1
DEAD_ZONE = 0.5
AXIS_COOLDOWN = 0.2  # seconds between stick-triggered moves


def handle_key(state, key) -> bool:
    """Apply the command bound to key; return True if the key is bound."""
    if key == pygame.K_SPACE:
        if state.waiting_for_start:
            state.start_game()
        else:
            state.drop()
        return True
    if key == pygame.K_r:
        if state.game_over:
            state.restart_game()
        return True
    name = MOVES.get(key)
    if name is None:
        return False
    getattr(state, name)()
    return True


def handle_button(state, button) -> bool:
    """Apply the command bound to a gamepad button; return True if it is bound."""
    if button == BUTTON_START:
        if state.waiting_for_start:
            state.start_game()
        elif state.game_over:
            state.restart_game()
        return True
    name = BUTTONS.get(button)
    if name is None:
        return False
    getattr(state, name)()
    return True


class StickRepeat:
    """Left-stick dispatch with a dead zone and a cooldown between moves.

    Stick right/left shift the piece, stick down moves it down a row and
    stick up rotates it. A deflection inside the dead zone does nothing and
    does not consume the cooldown.
    """
    def __init__(self, dead_zone: float = DEAD_ZONE, cooldown: float = AXIS_COOLDOWN):
        self.dead_zone = dead_zone
        self.cooldown = cooldown
        self.last_move = None

    def handle_axis(self, state, axis, value, now: float) -> bool:
        """Apply the stick command for this motion; return True if one fired."""
        if self.last_move is not None and now - self.last_move < self.cooldown:
            return False
        if axis == AXIS_LEFT_X:
            name = _pick(value, self.dead_zone, "move_right", "move_left")
        elif axis == AXIS_LEFT_Y:
            # SDL reports stick down as positive
            name = _pick(value, self.dead_zone, "move_down", "rotate_piece")
        else:
            return False
        if name is None:
            return False
        getattr(state, name)()
        self.last_move = now
        return True


def _pick(value, dead_zone, positive, negative):
    if value > dead_zone:
        return positive
    if value < -dead_zone:
        return negative
    return None
