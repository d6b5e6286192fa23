"""The player's sprite, position and movement."""

from dataclasses import dataclass

from . import bitmaps
from .constants import INITIAL_LIVES, Button, Pixel
from .coordinates import Coord

_MOVES = (
    (Button.BTN1, 1, 0, bitmaps.PLAYER_RIGHT),
    (Button.BTN2, 0, 1, bitmaps.PLAYER_DOWN),
    (Button.BTN3, 0, -1, bitmaps.PLAYER_UP),
    (Button.BTN4, -1, 0, bitmaps.PLAYER_LEFT),
)


@dataclass
class Player:
    """The player: where it stands, how it looks, its lives and its coins."""

    position: Coord
    graphic: tuple = bitmaps.PLAYER_BASIC
    lives: int = INITIAL_LIVES
    coins: int = 0
    alive: bool = True

    def respawn(self, origin):
        """Put the player back at origin with the resting sprite."""
        self.position = origin
        self.graphic = bitmaps.PLAYER_BASIC

    def draw(self, display):
        """Draw the sprite centred on the player's position."""
        for y, line in enumerate(self.graphic):
            for x, value in enumerate(line):
                display.set(x - 2 + self.position.x, y - 2 + self.position.y, value)

    def can_move(self, playfield, dx, dy):
        """Whether the cell one step away is neither inaccessible nor part of the ghost pen."""
        target = playfield.pixel_data(self.position.moved(dx, dy))
        return not target & (Pixel.INACCESSIBLE | Pixel.GHOST)

    def move(self, playfield, buttons):
        """Step according to a single pressed button; no button shows the resting sprite."""
        for button, dx, dy, graphic in _MOVES:
            if buttons == button and self.can_move(playfield, dx, dy):
                self.position = self.position.moved(dx, dy)
                self.graphic = graphic
        if buttons == Button.NONE:
            self.graphic = bitmaps.PLAYER_BASIC