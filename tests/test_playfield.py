import pytest

from oledman.constants import MAP_COLUMNS, MAP_ROWS, NUMBER_OF_GHOSTS, Pixel
from oledman.coordinates import Coord
from oledman.display import Display
from oledman.playfield import Playfield, Portal, collision


def _all_coords():
    return [Coord(x, y) for y in range(MAP_ROWS) for x in range(MAP_COLUMNS)]


def test_default_positions():
    pf = Playfield()
    assert pf.origin == Coord(63, 28)
    assert pf.spawns == (Coord(58, 3), Coord(63, 3), Coord(68, 3))
    assert pf.ghosts_left == NUMBER_OF_GHOSTS
    assert pf.portals[0] == Portal(Coord(0, 15), Coord(127, 15))


def test_pixel_data_known_cells():
    pf = Playfield()
    assert pf.pixel_data(Coord(0, 0)) == Pixel.WALL
    assert pf.pixel_data(Coord(0, 15)) == Pixel.PORTAL
    assert pf.pixel_data(Coord(3, 3)) == Pixel.FOOD
    assert pf.pixel_data(Coord(58, 3)) == Pixel.GHOST


@pytest.mark.parametrize("coord", [Coord(-1, 0), Coord(0, -1), Coord(MAP_COLUMNS, 5), Coord(5, MAP_ROWS)])
def test_pixel_data_off_map_is_empty(coord):
    assert Playfield().pixel_data(coord) == Pixel.EMPTY


def test_food_cells_are_food():
    pf = Playfield()
    assert all(pf.pixel_data(spot) == Pixel.FOOD for spot in pf.food)


def test_load_coins_spacing_invariant():
    pf = Playfield()
    pf.load_coins()
    coins = [c for c in _all_coords() if pf.pixel_data(c) == Pixel.COIN]
    assert coins
    blocking = Pixel.COIN | Pixel.FOOD | Pixel.PORTAL
    for coin in coins:
        for dx in range(-2, 3):
            for dy in range(-2, 3):
                if (dx, dy) == (0, 0):
                    continue
                assert not pf.pixel_data(coin.moved(dx, dy)) & blocking


def test_load_coins_only_fills_empty_cells():
    before = Playfield()
    after = Playfield()
    after.load_coins()
    for coord in _all_coords():
        if before.pixel_data(coord) != Pixel.EMPTY:
            assert after.pixel_data(coord) == before.pixel_data(coord)


def test_pass_through_portal_both_ways():
    pf = Playfield()
    assert pf.pass_through_portal(Coord(0, 15)) == Coord(127, 15)
    assert pf.pass_through_portal(Coord(127, 15)) == Coord(0, 15)


def test_pass_through_portal_elsewhere_unchanged():
    pf = Playfield()
    assert pf.pass_through_portal(Coord(10, 10)) == Coord(10, 10)


def test_take_coins_removes_nearby_coins():
    pf = Playfield()
    pf.load_coins()
    coin = next(c for c in _all_coords() if pf.pixel_data(c) == Pixel.COIN)
    nearby = [coin.moved(dx, dy) for dx in range(-2, 3) for dy in range(-2, 3)]
    expected = sum(1 for c in nearby if pf.pixel_data(c) == Pixel.COIN)
    assert pf.take_coins(coin) == expected
    assert all(pf.pixel_data(c) != Pixel.COIN for c in nearby)
    assert pf.take_coins(coin) == 0


def test_take_coins_without_coins():
    pf = Playfield()
    assert pf.take_coins(pf.origin) == 0


def test_consume_food_and_reload():
    pf = Playfield()
    pf.consume_food(Coord(3, 3))
    assert pf.pixel_data(Coord(3, 3)) == Pixel.EMPTY
    pf.ghosts_left = 0
    pf.load()
    assert pf.pixel_data(Coord(3, 3)) == Pixel.FOOD
    assert pf.ghosts_left == NUMBER_OF_GHOSTS


def test_draw_shows_walls_and_food():
    pf = Playfield()
    display = Display()
    pf.draw(display)
    assert display.pixel(0, 0) is True
    assert all(display.pixel(x, y) for x in range(2, 5) for y in range(2, 5))
    assert display.pixel(1, 1) is False


def test_draw_hides_eaten_food():
    pf = Playfield()
    pf.consume_food(Coord(3, 3))
    display = Display()
    pf.draw(display)
    assert not any(display.pixel(x, y) for x in range(2, 5) for y in range(2, 5))


def test_draw_shows_coins():
    pf = Playfield()
    pf.load_coins()
    coin = next(c for c in _all_coords() if pf.pixel_data(c) == Pixel.COIN)
    display = Display()
    pf.draw(display)
    assert display.pixel(coin.x, coin.y) is True


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (Coord(10, 10), Coord(14, 14), True),
        (Coord(10, 10), Coord(10, 10), True),
        (Coord(10, 10), Coord(15, 10), False),
        (Coord(10, 10), Coord(10, 5), False),
    ],
)
def test_collision(a, b, expected):
    assert collision(a, b) is expected
    assert collision(b, a) is expected