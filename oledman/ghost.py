"""Ghosts that wander the map in random directions."""

import random

from . import bitmaps
from .constants import Pixel

# Index is the direction number: right, down, up, left.
_DIRECTIONS = ((1, 0), (0, 1), (0, -1), (-1, 0))
_MAX_STEPS = 6


class Ghost:
    """A ghost with a position, a sprite and its current random walk."""

    def __init__(self, position, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self.position = position
        self.graphic = bitmaps.GHOST_BASIC
        self.alive = True
        self.direction = 0
        self.steps = 0
        self._new_walk()

    def _new_walk(self):
        self.direction = self._rng.randrange(len(_DIRECTIONS))
        self.steps = self._rng.randrange(_MAX_STEPS)

    def draw(self, display):
        """Draw the sprite centred on the ghost's position."""
        for y, line in enumerate(self.graphic):
            for x, value in enumerate(line):
                display.set(x - 2 + self.position.x, y - 2 + self.position.y, value)

    def can_move(self, playfield, dx, dy):
        """Whether the cell one step away is not inaccessible."""
        return not playfield.pixel_data(self.position.moved(dx, dy)) & Pixel.INACCESSIBLE

    def move(self, playfield):
        """Take one step, choosing new random walks until an open direction comes up."""
        while True:
            dx, dy = _DIRECTIONS[self.direction]
            moved = self.can_move(playfield, dx, dy)
            if moved:
                self.position = self.position.moved(dx, dy)
                self.steps -= 1
            if not moved or self.steps == 0:
                self._new_walk()
            if moved:
                return