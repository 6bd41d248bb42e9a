
"""Uniform piece randomizer"""
import random
from typing import Optional

from letetris_piece import KINDS


class PieceRandomizer:
    PIECES = list(KINDS)

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_kind(self) -> str:
        return self._rng.choice(self.PIECES)
