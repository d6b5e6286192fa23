"""The level: map cells, coins, food, portals and spawn points."""

from dataclasses import dataclass

from . import bitmaps
from .constants import MAP_COLUMNS, MAP_ROWS, NUMBER_OF_GHOSTS, Pixel
from .coordinates import Coord

_REACH = range(-2, 3)


@dataclass(frozen=True)
class Portal:
    """A cell that sends whatever stands on it to another cell."""

    entry: Coord
    target: Coord


class Playfield:
    """Positions of the level's features and the mutable map they live on."""

    def __init__(self):
        self.origin = Coord(63, 28)
        self.spawns = (Coord(58, 3), Coord(63, 3), Coord(68, 3))
        self.food = (Coord(3, 3), Coord(3, 28), Coord(124, 3), Coord(124, 28))
        self.portals = (
            Portal(Coord(0, 15), Coord(127, 15)),
            Portal(Coord(127, 15), Coord(0, 15)),
        )
        self.ghosts_left = NUMBER_OF_GHOSTS
        self._cells = []
        self.load()

    def load(self):
        """Reset the ghost count and copy the level map afresh."""
        self.ghosts_left = NUMBER_OF_GHOSTS
        self._cells = [list(row) for row in bitmaps.map_cells()]

    def pixel_data(self, coord):
        """What the map holds at a coordinate; anything off the map reads as empty."""
        if not coord.is_valid():
            return Pixel.EMPTY
        return Pixel(self._cells[coord.y][coord.x])

    def _clear(self, coord):
        if coord.is_valid():
            self._cells[coord.y][coord.x] = Pixel.EMPTY

    def load_coins(self):
        """Place a coin on each empty cell with no coin, food or portal within two cells."""
        blocking = Pixel.COIN | Pixel.FOOD | Pixel.PORTAL
        for row in range(MAP_ROWS):
            for column in range(MAP_COLUMNS):
                if self._cells[row][column] != Pixel.EMPTY:
                    continue
                here = Coord(column, row)
                if any(
                    self.pixel_data(here.moved(dx, dy)) & blocking
                    for dx in _REACH
                    for dy in _REACH
                ):
                    continue
                self._cells[row][column] = Pixel.COIN

    def draw(self, display):
        """Draw walls, coins and the food that is still uneaten."""
        visible = Pixel.WALL | Pixel.COIN
        for row in range(MAP_ROWS):
            for column in range(MAP_COLUMNS):
                display.set(column, row, self._cells[row][column] & visible)
        for spot in self.food:
            if not self.pixel_data(spot) & Pixel.FOOD:
                continue
            for y, line in enumerate(bitmaps.FOOD):
                for x, value in enumerate(line):
                    display.set(x - 1 + spot.x, y - 1 + spot.y, value)

    def pass_through_portal(self, coord):
        """The coordinate reached by stepping onto a portal, or coord itself if none applies."""
        for portal in self.portals:
            if coord == portal.entry:
                return portal.target
        return coord

    def take_coins(self, position):
        """Remove every coin within two cells of position and return how many were taken."""
        taken = 0
        for dx in _REACH:
            for dy in _REACH:
                spot = position.moved(dx, dy)
                if self.pixel_data(spot) & Pixel.COIN:
                    self._clear(spot)
                    taken += 1
        return taken

    def consume_food(self, position):
        """Remove the food at position from the map."""
        self._clear(position)


def collision(a, b):
    """Whether two sprite centres are close enough that the sprites overlap."""
    return abs(a.x - b.x) < 5 and abs(a.y - b.y) < 5