
CONFIG = {
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,
    "FALL_INTERVAL": 0.5,
    "LOCK_SCORE": 10,
    "LINE_SCORE": 100,
    "CELL_SIZE": 30,
    "DEFAULT_SPACING": 4.0,
    "CONSTANT_SPACING": 8.0,
    "Y_PADDING": 1.0,
    "FPS": 60,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
