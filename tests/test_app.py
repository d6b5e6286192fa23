import io
import random

import pytest

from oledman.app import Console, main
from oledman.constants import DISPLAY_ROWS, INITIAL_LIVES, Button, MainState, PlayingState
from oledman.coordinates import Coord
from oledman.display import Display


@pytest.fixture
def console():
    return Console(random.Random(1))


def _frame(*lines):
    display = Display()
    for line, text, offset in lines:
        display.text(line, text, offset)
    return display.render()


def test_starts_in_menu_and_draws_it(console):
    frame = console.tick(Button.NONE)
    assert console.main_state == MainState.MENU
    assert frame == _frame(
        (0, "MENU", 0),
        (1, "BTN4: START GAME", 0),
        (2, "BTN3: HIGHSCORE", 0),
    )


def test_tick_clears_the_screen_afterwards(console):
    console.tick(Button.NONE)
    assert "#" not in console.display.render()


def test_menu_starts_a_game(console):
    console.tick(Button.BTN4)
    assert console.main_state == MainState.PLAYING
    assert console.game.playing_state == PlayingState.START_PLAYING
    frame = console.tick(Button.NONE)
    assert console.main_state == MainState.PLAYING
    assert console.game.playing_state == PlayingState.CONTINUE_PLAYING
    assert "#" in frame


def test_highscore_window_and_back(console):
    console.highscores.submit(5)
    console.highscores.submit(3)
    console.tick(Button.BTN3)
    assert console.main_state == MainState.HIGHSCORES
    frame = console.tick(Button.NONE)
    assert frame == _frame(
        (0, "5", 10), (1, "3", 10), (2, "0", 10), (3, "BTN4: MENU", 10)
    )
    console.tick(Button.BTN4)
    assert console.main_state == MainState.MENU


def test_food_effect_expires(console):
    console.main_state = MainState.PLAYING
    console.game.playing_state = PlayingState.FOOD_EFFECT
    console.game.food_ticks = 99
    console.tick(Button.NONE)
    assert console.game.playing_state == PlayingState.CONTINUE_PLAYING
    assert console.game.food_ticks == 0


def test_food_effect_counts_ticks(console):
    console.main_state = MainState.PLAYING
    console.game.playing_state = PlayingState.FOOD_EFFECT
    console.game.food_ticks = 50
    console.tick(Button.NONE)
    assert console.game.playing_state == PlayingState.FOOD_EFFECT
    assert console.game.food_ticks == 51


def test_collision_shows_dead_window(console):
    console.main_state = MainState.PLAYING
    console.game.ghosts[0].position = console.game.player.position
    console.tick(Button.NONE)
    assert console.main_state == MainState.DEAD
    frame = console.tick(Button.NONE)
    assert frame == _frame(
        (0, "YOU ARE DEAD", 10),
        (1, "Lives left: ", 10),
        (2, str(INITIAL_LIVES - 1), 10),
        (3, "BTN4: CONTINUE", 10),
    )


def test_continue_after_death_respawns(console):
    console.main_state = MainState.DEAD
    console.game.player.position = Coord(10, 10)
    console.tick(Button.BTN4)
    assert console.main_state == MainState.PLAYING
    assert console.game.player.position == console.game.playfield.origin


def test_gameover_window_shows_score(console):
    console.main_state = MainState.GAMEOVER
    console.game.player.coins = 7
    frame = console.tick(Button.NONE)
    assert console.main_state == MainState.GAMEOVER
    assert frame == _frame(
        (0, "GAMEOVER", 10), (1, "SCORE: ", 10), (2, "7", 10), (3, "BTN4: MENU", 10)
    )
    console.tick(Button.BTN4)
    assert console.main_state == MainState.MENU


def test_won_window_returns_to_menu(console):
    console.main_state = MainState.WON
    console.game.player.coins = 9
    frame = console.tick(Button.NONE)
    assert frame == _frame(
        (0, "WON", 10), (1, "SCORE: ", 10), (2, "9", 10), (3, "BTN4: MENU", 10)
    )
    console.tick(Button.BTN4)
    assert console.main_state == MainState.MENU


def test_main_prints_a_frame_per_key(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n\nq\n2\n"))
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert len(out.splitlines()) == 2 * (DISPLAY_ROWS + 1)


def test_main_reports_unknown_keys(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("zz\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "unknown key" in captured.err
    assert captured.out == ""


def test_main_rejects_bad_steps(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main(["--steps", "0"])