"""Sprites, the text font and the level map."""

from functools import lru_cache

from .constants import MAP_COLUMNS, MAP_ROWS, Pixel

PLAYER_BASIC = (
    (0, 1, 1, 1, 0),
    (1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1),
    (0, 1, 1, 1, 0),
)

PLAYER_UP = (
    (0, 0, 0, 0, 0),
    (1, 0, 0, 0, 1),
    (1, 1, 0, 1, 1),
    (1, 1, 1, 1, 1),
    (0, 1, 1, 1, 0),
)

PLAYER_DOWN = (
    (0, 1, 1, 1, 0),
    (1, 1, 1, 1, 1),
    (1, 1, 0, 1, 1),
    (1, 0, 0, 0, 1),
    (0, 0, 0, 0, 0),
)

PLAYER_LEFT = (
    (0, 1, 1, 1, 0),
    (0, 0, 1, 1, 1),
    (0, 0, 0, 1, 1),
    (0, 0, 1, 1, 1),
    (0, 1, 1, 1, 0),
)

PLAYER_RIGHT = (
    (0, 1, 1, 1, 0),
    (1, 1, 1, 0, 0),
    (1, 1, 0, 0, 0),
    (1, 1, 1, 0, 0),
    (0, 1, 1, 1, 0),
)

FOOD = (
    (1, 1, 1),
    (1, 1, 1),
    (1, 1, 1),
)

GHOST_BASIC = (
    (0, 0, 1, 0, 0),
    (0, 1, 0, 1, 0),
    (1, 0, 0, 0, 1),
    (0, 1, 0, 1, 0),
    (1, 0, 0, 0, 1),
)

_PRINTABLE_GLYPHS = (
    (0, 0, 0, 94, 0, 0, 0, 0),
    (0, 0, 4, 3, 4, 3, 0, 0),
    (0, 36, 126, 36, 36, 126, 36, 0),
    (0, 36, 74, 255, 82, 36, 0, 0),
    (0, 70, 38, 16, 8, 100, 98, 0),
    (0, 52, 74, 74, 52, 32, 80, 0),
    (0, 0, 0, 4, 3, 0, 0, 0),
    (0, 0, 0, 126, 129, 0, 0, 0),
    (0, 0, 0, 129, 126, 0, 0, 0),
    (0, 42, 28, 62, 28, 42, 0, 0),
    (0, 8, 8, 62, 8, 8, 0, 0),
    (0, 0, 0, 128, 96, 0, 0, 0),
    (0, 8, 8, 8, 8, 8, 0, 0),
    (0, 0, 0, 0, 96, 0, 0, 0),
    (0, 64, 32, 16, 8, 4, 2, 0),
    (0, 62, 65, 73, 65, 62, 0, 0),
    (0, 0, 66, 127, 64, 0, 0, 0),
    (0, 0, 98, 81, 73, 70, 0, 0),
    (0, 0, 34, 73, 73, 54, 0, 0),
    (0, 0, 14, 8, 127, 8, 0, 0),
    (0, 0, 35, 69, 69, 57, 0, 0),
    (0, 0, 62, 73, 73, 50, 0, 0),
    (0, 0, 1, 97, 25, 7, 0, 0),
    (0, 0, 54, 73, 73, 54, 0, 0),
    (0, 0, 6, 9, 9, 126, 0, 0),
    (0, 0, 0, 102, 0, 0, 0, 0),
    (0, 0, 128, 102, 0, 0, 0, 0),
    (0, 0, 8, 20, 34, 65, 0, 0),
    (0, 0, 20, 20, 20, 20, 0, 0),
    (0, 0, 65, 34, 20, 8, 0, 0),
    (0, 2, 1, 81, 9, 6, 0, 0),
    (0, 28, 34, 89, 89, 82, 12, 0),
    (0, 0, 126, 9, 9, 126, 0, 0),
    (0, 0, 127, 73, 73, 54, 0, 0),
    (0, 0, 62, 65, 65, 34, 0, 0),
    (0, 0, 127, 65, 65, 62, 0, 0),
    (0, 0, 127, 73, 73, 65, 0, 0),
    (0, 0, 127, 9, 9, 1, 0, 0),
    (0, 0, 62, 65, 81, 50, 0, 0),
    (0, 0, 127, 8, 8, 127, 0, 0),
    (0, 0, 65, 127, 65, 0, 0, 0),
    (0, 0, 32, 64, 64, 63, 0, 0),
    (0, 0, 127, 8, 20, 99, 0, 0),
    (0, 0, 127, 64, 64, 64, 0, 0),
    (0, 127, 2, 4, 2, 127, 0, 0),
    (0, 127, 6, 8, 48, 127, 0, 0),
    (0, 0, 62, 65, 65, 62, 0, 0),
    (0, 0, 127, 9, 9, 6, 0, 0),
    (0, 0, 62, 65, 97, 126, 64, 0),
    (0, 0, 127, 9, 9, 118, 0, 0),
    (0, 0, 38, 73, 73, 50, 0, 0),
    (0, 1, 1, 127, 1, 1, 0, 0),
    (0, 0, 63, 64, 64, 63, 0, 0),
    (0, 31, 32, 64, 32, 31, 0, 0),
    (0, 63, 64, 48, 64, 63, 0, 0),
    (0, 0, 119, 8, 8, 119, 0, 0),
    (0, 3, 4, 120, 4, 3, 0, 0),
    (0, 0, 113, 73, 73, 71, 0, 0),
    (0, 0, 127, 65, 65, 0, 0, 0),
    (0, 2, 4, 8, 16, 32, 64, 0),
    (0, 0, 0, 65, 65, 127, 0, 0),
    (0, 4, 2, 1, 2, 4, 0, 0),
    (0, 64, 64, 64, 64, 64, 64, 0),
    (0, 0, 1, 2, 4, 0, 0, 0),
    (0, 0, 48, 72, 40, 120, 0, 0),
    (0, 0, 127, 72, 72, 48, 0, 0),
    (0, 0, 48, 72, 72, 0, 0, 0),
    (0, 0, 48, 72, 72, 127, 0, 0),
    (0, 0, 48, 88, 88, 16, 0, 0),
    (0, 0, 126, 9, 1, 2, 0, 0),
    (0, 0, 80, 152, 152, 112, 0, 0),
    (0, 0, 127, 8, 8, 112, 0, 0),
    (0, 0, 0, 122, 0, 0, 0, 0),
    (0, 0, 64, 128, 128, 122, 0, 0),
    (0, 0, 127, 16, 40, 72, 0, 0),
    (0, 0, 0, 127, 0, 0, 0, 0),
    (0, 120, 8, 16, 8, 112, 0, 0),
    (0, 0, 120, 8, 8, 112, 0, 0),
    (0, 0, 48, 72, 72, 48, 0, 0),
    (0, 0, 248, 40, 40, 16, 0, 0),
    (0, 0, 16, 40, 40, 248, 0, 0),
    (0, 0, 112, 8, 8, 16, 0, 0),
    (0, 0, 72, 84, 84, 36, 0, 0),
    (0, 0, 8, 60, 72, 32, 0, 0),
    (0, 0, 56, 64, 32, 120, 0, 0),
    (0, 0, 56, 64, 56, 0, 0, 0),
    (0, 56, 64, 32, 64, 56, 0, 0),
    (0, 0, 72, 48, 48, 72, 0, 0),
    (0, 0, 24, 160, 160, 120, 0, 0),
    (0, 0, 100, 84, 84, 76, 0, 0),
    (0, 0, 8, 28, 34, 65, 0, 0),
    (0, 0, 0, 126, 0, 0, 0, 0),
    (0, 0, 65, 34, 28, 8, 0, 0),
    (0, 0, 4, 2, 4, 2, 0, 0),
    (0, 120, 68, 66, 68, 120, 0, 0),
)

_BLANK_GLYPH = (0,) * 8
FONT = (_BLANK_GLYPH,) * 33 + _PRINTABLE_GLYPHS


def glyph(char):
    """Return the eight column bytes that draw a single ASCII character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    code = ord(char)
    if code >= len(FONT):
        raise ValueError(f"character {char!r} is not in the font")
    return FONT[code]


_CELL_CODES = {
    "E": Pixel.EMPTY,
    "W": Pixel.WALL,
    "I": Pixel.INACCESSIBLE,
    "G": Pixel.GHOST,
    "P": Pixel.PORTAL,
    "F": Pixel.FOOD,
    "S": Pixel.GHOST,  # ghost spawn
    "O": Pixel.EMPTY,  # player origin
}

_ROW_1 = "W" + "I" * 45 + "WIW" + "IIIII" + "WW" + "I" * 15 + "WW" + "IIIII" + "WIW" + "I" * 46 + "W"
_ROW_4 = (
    "WIIE" + "I" * 10 + "E" + "I" * 10 + "E" + "I" * 8 + "E" + "I" * 8 + "EIIWIWIIEIIWW"
    + "I" * 7 + "G" + "I" * 7 + "WWIIEIIWIWIIE" + "I" * 8 + "E" + "I" * 8 + "E"
    + "I" * 11 + "E" + "I" * 10 + "EIIW"
)
_ROW_7 = (
    "WIIEIIW" + "I" * 7 + "E" + "I" * 7 + "WIIEIIWIIWIIEIIWIIWIIE" + "I" * 7 + "E"
    + "I" * 11 + "G" + "I" * 11 + "E" + "I" * 7 + "EIIWIIWIIEIIWIIWIIEIIW"
    + "I" * 8 + "E" + "I" * 7 + "WIIEIIW"
)
_ROW_10 = (
    "WIIEIIWIIE" + "I" * 9 + "EIIWIIE" + "I" * 8 + "E" + "I" * 8 + "E" + "I" * 10 + "E"
    + "I" * 17 + "E" + "I" * 10 + "E" + "I" * 8 + "E" + "I" * 8 + "EIIWIIE"
    + "I" * 10 + "EIIWIIEIIW"
)
_ROW_18 = (
    "WIIEIIIIIE" + "I" * 9 + "E" + "IIIII" + "E" + "I" * 23 + "WIWIIE" + "I" * 17
    + "EIIWIW" + "I" * 23 + "{mid}" + "I" * 10 + "E" + "IIIII" + "EIIW"
)
_ROW_21 = (
    "WIIE" + "I" * 9 + "E" + "I" * 16 + "E" + "I" * 15 + "EIIWIWIIE" + "I" * 8 + "W"
    + "I" * 8 + "EIIWIWIIE" + "I" * 15 + "E" + "I" * 16 + "E" + "I" * 10 + "EIIW"
)
_ROW_23 = (
    "WIIEII" + "W" * 5 + "IIEII" + "W" * 12 + "IIEII" + "W" * 11 + "IIEIIWIWII"
    + "E" * 7 + "IIWII" + "E" * 7 + "IIWIWIIEII" + "W" * 11 + "IIEII" + "W" * 12
    + "IIEII" + "W" * 6 + "IIEIIW"
)
_ROW_26 = (
    "WIIE" + "I" * 9 + "E" + "I" * 16 + "E" + "I" * 15 + "E" + "I" * 7 + "EIIWIIE"
    + "IIIII" + "EIIWIIE" + "I" * 7 + "E" + "I" * 15 + "E" + "I" * 16 + "E"
    + "I" * 10 + "EIIW"
)
_ROW_29 = "W" + "I" * 56 + "W" + "I" * 11 + "W" + "I" * 57 + "W"

_MAP_ROWS = (
    "W" * 128,
    _ROW_1,
    _ROW_1,
    "WIIF" + "E" * 40 + "IIWIWIIEIIWWIISGGGGSGGGGSIIWWIIEIIWIWII" + "E" * 41 + "FIIW",
    _ROW_4,
    _ROW_4,
    "WIIEII" + "W" * 6 + "IIEII" + "W" * 6 + "IIEII" + "WWWW" + "IIEII" + "WWWW"
    + "IIEII" + "WWW" + "IIEII" + "W" * 7 + "IIGII" + "W" * 7 + "IIEII" + "WWW"
    + "IIEII" + "WWWW" + "IIEII" + "WWWW" + "IIEII" + "W" * 7 + "IIEII" + "W" * 6 + "IIEIIW",
    _ROW_7,
    _ROW_7,
    "WIIEIIWII" + "E" * 11 + "IIWIIEIIWWWWIIEIIWWWWII" + "E" * 41
    + "IIWWWWIIEIIWWWWIIEIIWII" + "E" * 12 + "IIWIIEIIW",
    _ROW_10,
    _ROW_10,
    "WIIEIIWIIEII" + "W" * 5 + "IIEIIWII" + "E" * 19 + "II" + "W" * 6 + "IIEII"
    + "W" * 13 + "IIEII" + "W" * 6 + "II" + "E" * 19 + "IIWIIEII" + "W" * 6 + "IIEIIWIIEIIW",
    "IIIEIIWIIEIIWIIIWIIEIIWIIE" + "I" * 20 + "WIIIIWIIEIIW" + "I" * 11
    + "WIIEIIWIIIIW" + "I" * 20 + "EIIWIIEIIWIIIIWIIEIIWIIEIII",
    "IIIEIIWIIEIIWIIIWIIEIIWIIE" + "I" * 20 + "WIIIIWIIEII" + "W" * 13
    + "IIEIIWIIIIW" + "I" * 20 + "EIIWIIEIIWIIIIWIIEIIWIIEIII",
    "PEEEIIWIIEIIWIIIWIIEIIWIIEII" + "W" * 19 + "IIIIWIIE" + "I" * 17 + "EIIWIIII"
    + "W" * 19 + "IIEIIWIIEIIWIIIIWIIEIIWIIEEEP",
    "IIIEIIWIIEIIWIIIWIIEIIWIIEIIW" + "I" * 22 + "WIIE" + "I" * 17 + "EIIW"
    + "I" * 22 + "WIIEIIWIIEIIWIIIIWIIEIIWIIEIII",
    "IIIEIIWIIEII" + "W" * 5 + "IIEIIWIIEII" + "W" * 22 + "IWII" + "E" * 19 + "IIWI"
    + "W" * 22 + "IIEIIWIIEII" + "W" * 6 + "IIEIIWIIEIII",
    _ROW_18.replace("{mid}", "EIIWIIE"),
    _ROW_18.replace("{mid}", "EIIIIIE"),
    "WII" + "E" * 44 + "IIWIWIIEII" + "W" * 13 + "IIEIIWIWII" + "E" * 45 + "IIW",
    _ROW_21,
    _ROW_21,
    _ROW_23,
    "WIIEIIWIIIWIIEIIW" + "I" * 10 + "WIIEIIW" + "I" * 9 + "WIIEIIWIWIIE" + "IIIII"
    + "EIIWIIE" + "IIIII" + "EIIWIWIIEIIW" + "I" * 9 + "WIIEIIW" + "I" * 10
    + "WIIEIIWIIIIWIIEIIW",
    "WIIEII" + "W" * 5 + "IIEII" + "W" * 12 + "IIEII" + "W" * 11 + "IIEIIWWWIIE"
    + "IIIII" + "EIIWIIE" + "IIIII" + "EIIWWWIIEII" + "W" * 11 + "IIEII" + "W" * 12
    + "IIEII" + "W" * 6 + "IIEIIW",
    _ROW_26,
    _ROW_26,
    "WIIF" + "E" * 51 + "IIWIIEEEOEEEIIWII" + "E" * 52 + "FIIW",
    _ROW_29,
    _ROW_29,
    "W" * 128,
)


@lru_cache(maxsize=None)
def map_cells():
    """Return the level as rows of Pixel values, indexed [row][column]."""
    if len(_MAP_ROWS) != MAP_ROWS:
        raise ValueError("level map has the wrong number of rows")
    rows = []
    for number, text in enumerate(_MAP_ROWS):
        if len(text) != MAP_COLUMNS:
            raise ValueError(f"level map row {number} has {len(text)} cells")
        rows.append(tuple(_CELL_CODES[c] for c in text))
    return tuple(rows)