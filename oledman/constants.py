"""Shared constants: screen and map dimensions, map cell flags, buttons and states."""

from enum import IntEnum, IntFlag

DISPLAY_COLUMNS = 128
DISPLAY_ROWS = 32
DISPLAY_PAGES = 4

MAP_COLUMNS = 128
MAP_ROWS = 32

NUMBER_OF_GHOSTS = 3
NUMBER_OF_FOOD = 4
NUMBER_OF_PORTALS = 2
SIZE_OF_FOOD = 3
SIZE_OF_PLAYER = 5
SIZE_OF_GHOST = 5

INITIAL_LIVES = 3
HIGHSCORE_SLOTS = 3
FOOD_EFFECT_TICKS = 100


class Pixel(IntFlag):
    """What a single map cell holds."""

    EMPTY = 0x00
    WALL = 0x01
    INACCESSIBLE = 0x02
    GHOST = 0x04
    COIN = 0x08
    FOOD = 0x10
    PORTAL = 0x20


class Button(IntFlag):
    """Bits of the button word; in game BTN1 right, BTN2 down, BTN3 up, BTN4 left."""

    NONE = 0
    BTN1 = 1
    BTN2 = 2
    BTN3 = 4
    BTN4 = 8


class MainState(IntEnum):
    """Which window the console shows."""

    PLAYING = 10
    MENU = 14
    HIGHSCORES = 15
    DEAD = 16
    GAMEOVER = 18
    WON = 20


class PlayingState(IntEnum):
    """Sub-state of a running game."""

    CONTINUE_PLAYING = 12
    START_PLAYING = 13
    FOOD_EFFECT = 19