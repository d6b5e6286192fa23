from oledman import bitmaps
from oledman.constants import INITIAL_LIVES, Button
from oledman.coordinates import Coord
from oledman.display import Display
from oledman.playfield import Playfield
from oledman.player import Player


def test_new_player_defaults():
    player = Player(Coord(63, 28))
    assert player.lives == INITIAL_LIVES
    assert player.coins == 0
    assert player.alive is True
    assert player.graphic == bitmaps.PLAYER_BASIC


def test_move_right():
    pf = Playfield()
    player = Player(pf.origin)
    player.move(pf, Button.BTN1)
    assert player.position == pf.origin.moved(1, 0)
    assert player.graphic == bitmaps.PLAYER_RIGHT


def test_move_left():
    pf = Playfield()
    player = Player(pf.origin)
    player.move(pf, Button.BTN4)
    assert player.position == pf.origin.moved(-1, 0)
    assert player.graphic == bitmaps.PLAYER_LEFT


def test_blocked_move_keeps_position_and_sprite():
    pf = Playfield()
    player = Player(pf.origin)
    assert player.can_move(pf, 0, -1) is False
    player.move(pf, Button.BTN3)
    assert player.position == pf.origin
    assert player.graphic == bitmaps.PLAYER_BASIC


def test_ghost_pen_blocks_player():
    pf = Playfield()
    player = Player(Coord(58, 2))
    assert player.can_move(pf, 0, 1) is False


def test_no_button_restores_basic_sprite():
    pf = Playfield()
    player = Player(pf.origin)
    player.move(pf, Button.BTN1)
    player.move(pf, Button.NONE)
    assert player.graphic == bitmaps.PLAYER_BASIC
    assert player.position == pf.origin.moved(1, 0)


def test_two_buttons_do_nothing():
    pf = Playfield()
    player = Player(pf.origin)
    player.move(pf, Button.BTN1 | Button.BTN4)
    assert player.position == pf.origin
    assert player.graphic == bitmaps.PLAYER_BASIC


def test_respawn():
    pf = Playfield()
    player = Player(Coord(10, 3), graphic=bitmaps.PLAYER_UP)
    player.respawn(pf.origin)
    assert player.position == pf.origin
    assert player.graphic == bitmaps.PLAYER_BASIC


def test_draw_matches_sprite():
    player = Player(Coord(20, 10))
    display = Display()
    player.draw(display)
    for y, line in enumerate(bitmaps.PLAYER_BASIC):
        for x, value in enumerate(line):
            assert display.pixel(18 + x, 8 + y) is bool(value)