"""Map coordinates."""

from dataclasses import dataclass

from .constants import MAP_COLUMNS, MAP_ROWS


@dataclass(frozen=True)
class Coord:
    """A column/row position on the map."""

    x: int
    y: int

    def moved(self, dx, dy):
        """Return the coordinate shifted by dx columns and dy rows."""
        return Coord(self.x + dx, self.y + dy)

    def is_valid(self):
        """Whether the coordinate lies inside the map."""
        return 0 <= self.x < MAP_COLUMNS and 0 <= self.y < MAP_ROWS