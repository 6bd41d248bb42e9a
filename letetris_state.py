
"""
Board simulation for the versus layout.

GameState owns the frozen cells, the active piece, the score and the
WAITING -> PLAYING -> GAME_OVER state machine. The frame driver calls
tick(dt) once per frame; the input layer calls the command methods. Commands
issued in the wrong phase are no-ops, never errors.

Coordinates are integer (column, row) pairs with row 0 at the floor. The
piece falls on one board of the dual layout and its frozen cells are shown on
the other; the simulation itself only knows one grid.
"""
import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from letetris_board import Frozen, collide, landing_row, merge, sweep
from letetris_config import CONFIG
from letetris_layout import Dims, compute_dims, padding_for
from letetris_piece import Offset, Piece, rotated_offsets
from letetris_rng import PieceRandomizer
from letetris_settings import MemorySettings

log = logging.getLogger(__name__)

SPACING_KEY = "internalSpacing"


class Phase(enum.Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class FrozenBlock:
    x: int
    y: int
    kind: str


class GameState:
    def __init__(self, board_width: int = None, board_height: int = None,
                 settings=None, rng: Optional[PieceRandomizer] = None):
        board_width = CONFIG["BOARD_WIDTH"] if board_width is None else board_width
        board_height = CONFIG["BOARD_HEIGHT"] if board_height is None else board_height
        _check_dims(board_width, board_height)
        self.board_width = board_width
        self.board_height = board_height

        self.settings = settings if settings is not None else MemorySettings()
        self.rng = rng if rng is not None else PieceRandomizer(CONFIG["SEED"])

        self._spacing = self._load_spacing()
        self.x_padding = padding_for(self._spacing, CONFIG["CONSTANT_SPACING"])
        self.y_padding = CONFIG["Y_PADDING"]
        self.falling_on_left = True
        self.dims: Dims = None
        self.update_dimensions()

        self.frozen: Frozen = {}
        self.score = 0
        self.phase = Phase.WAITING
        self.piece = self._new_piece()
        self.fall_timer = 0.0

    def _load_spacing(self) -> float:
        default = float(CONFIG["DEFAULT_SPACING"])
        raw = self.settings.get(SPACING_KEY, default)
        try:
            value = float(raw)
        except (TypeError, ValueError):
            value = None
        # NaN fails both comparisons
        if value is None or not 0 <= value < float("inf"):
            log.warning("ignoring stored %s=%r, using %s", SPACING_KEY, raw, default)
            return default
        return value

    # ---------- layout ----------
    @property
    def internal_spacing(self) -> float:
        return self._spacing

    @internal_spacing.setter
    def internal_spacing(self, value: float):
        value = float(value)
        if value < 0:
            raise ValueError(f"spacing must be non-negative, got {value}")
        self._spacing = value
        self.x_padding = padding_for(value, CONFIG["CONSTANT_SPACING"])
        self.update_dimensions()
        self.settings.set(SPACING_KEY, value)

    def update_dimensions(self, cell: int = None) -> Dims:
        """Recompute the dual-board layout; call after any geometry change."""
        cell = CONFIG["CELL_SIZE"] if cell is None else cell
        self.dims = compute_dims(self.board_width, self.board_height, self._spacing,
                                 self.x_padding, self.y_padding, cell)
        return self.dims

    def resize_board(self, board_width: int, board_height: int):
        _check_dims(board_width, board_height)
        self.board_width = board_width
        self.board_height = board_height
        self.update_dimensions()
        log.info("board resized to %dx%d", board_width, board_height)
        self.restart_game()

    # ---------- snapshot ----------
    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def waiting_for_start(self) -> bool:
        return self.phase is Phase.WAITING

    @property
    def playing(self) -> bool:
        return self.phase is Phase.PLAYING

    @property
    def spawn_position(self) -> Tuple[int, int]:
        return self.board_width // 2, self.board_height - 1

    @property
    def frozen_blocks(self) -> List[FrozenBlock]:
        return [FrozenBlock(x, y, k) for (x, y), k in sorted(self.frozen.items(), key=_row_major)]

    def offsets(self, kind: str = None, rotation: int = None) -> Tuple[Offset, ...]:
        kind = self.piece.kind if kind is None else kind
        rotation = self.piece.rotation if rotation is None else rotation
        return rotated_offsets(kind, rotation)

    def piece_cells(self) -> List[Offset]:
        return self.piece.cells()

    def ghost_row(self) -> int:
        return landing_row(self.frozen, self.piece)

    # ---------- state machine ----------
    def start_game(self):
        if self.phase is Phase.WAITING:
            self.phase = Phase.PLAYING

    def restart_game(self):
        self.frozen.clear()
        self.piece = self._new_piece()
        self.score = 0
        self.phase = Phase.WAITING
        self.fall_timer = 0.0
        log.info("game restarted")

    def tick(self, dt: float):
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if self.phase is not Phase.PLAYING:
            return
        self.clear_completed_lines()
        self.fall_timer += dt
        if self.fall_timer >= CONFIG["FALL_INTERVAL"]:
            self.move_down()
            self.fall_timer = 0.0

    # ---------- commands ----------
    def move_left(self):
        self._shift(-1)

    def move_right(self):
        self._shift(1)

    def move_down(self):
        if self.phase is not Phase.PLAYING:
            return
        self.piece.y -= 1
        if collide(self.frozen, self.piece, self.board_width, check_x=False):
            self.piece.y += 1
            self._lock_and_spawn()

    def drop(self):
        if self.phase is not Phase.PLAYING:
            return
        while not collide(self.frozen, self.piece, self.board_width, check_x=False):
            self.piece.y -= 1
        self.piece.y += 1
        self._lock_and_spawn()

    def rotate_piece(self):
        if self.phase is not Phase.PLAYING:
            return
        old = self.piece.rotation
        self.piece.rotation = (old + 1) % 4
        if collide(self.frozen, self.piece, self.board_width):
            self.piece.rotation = old

    def clear_completed_lines(self) -> int:
        rows = sweep(self.frozen, self.board_width)
        if rows:
            self.score += CONFIG["LINE_SCORE"] * len(rows)
            log.debug("cleared rows %s, score %d", rows, self.score)
        return len(rows)

    # ---------- internals ----------
    def _shift(self, dx: int):
        if self.phase is not Phase.PLAYING:
            return
        self.piece.x += dx
        if collide(self.frozen, self.piece, self.board_width, check_y=False):
            self.piece.x -= dx

    def _lock_and_spawn(self):
        merge(self.frozen, self.piece, self.board_width, self.board_height)
        self.score += CONFIG["LOCK_SCORE"]
        log.debug("locked %s at (%d, %d)", self.piece.kind, self.piece.x, self.piece.y)
        self.piece = self._new_piece()
        if collide(self.frozen, self.piece, self.board_width):
            self.phase = Phase.GAME_OVER
            log.info("game over, score %d", self.score)

    def _new_piece(self) -> Piece:
        return Piece.spawn(self.rng.next_kind(), self.board_width, self.board_height)


def _check_dims(width: int, height: int):
    if width <= 0 or height <= 0:
        raise ValueError(f"board dimensions must be positive, got {width}x{height}")


def _row_major(item):
    (x, y), _ = item
    return y, x
