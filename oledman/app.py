"""The console: the window shown each tick, and a text-mode command to play it."""

import argparse
import random
import sys

from .buttons import buttons_from_key
from .constants import FOOD_EFFECT_TICKS, Button, MainState, PlayingState
from .display import Display
from .game import Game
from .highscore import Highscores

_TEXT_OFFSET = 10


class Console:
    """The whole device: a screen, the high-score table and the game, driven by ticks."""

    def __init__(self, rng=None):
        self.display = Display()
        self.highscores = Highscores()
        self.game = Game(self.highscores, rng)
        self.main_state = MainState.MENU
        self._windows = {
            MainState.MENU: self._menu,
            MainState.PLAYING: self._play,
            MainState.HIGHSCORES: self._scores,
            MainState.DEAD: self._dead,
            MainState.GAMEOVER: lambda buttons: self._result("GAMEOVER", buttons),
            MainState.WON: lambda buttons: self._result("WON", buttons),
        }

    def tick(self, buttons):
        """Run the current window for one tick and return the frame it drew as text."""
        self._windows[self.main_state](Button(buttons))
        frame = self.display.render()
        self.display.clear()
        return frame

    def _menu(self, buttons):
        self.display.text(0, "MENU", 0)
        self.display.text(1, "BTN4: START GAME", 0)
        self.display.text(2, "BTN3: HIGHSCORE", 0)
        if buttons == Button.BTN4:
            self.game.playing_state = PlayingState.START_PLAYING
            self.main_state = MainState.PLAYING
        if buttons == Button.BTN3:
            self.main_state = MainState.HIGHSCORES

    def _play(self, buttons):
        game = self.game
        if game.playing_state == PlayingState.START_PLAYING:
            game.load()
            game.playing_state = PlayingState.CONTINUE_PLAYING
        if game.playing_state == PlayingState.FOOD_EFFECT:
            game.food_ticks += 1
        if game.food_ticks == FOOD_EFFECT_TICKS:
            game.playing_state = PlayingState.CONTINUE_PLAYING
            game.food_ticks = 0

        game.update(buttons)
        if game.player.alive:
            game.draw(self.display)

        outcome = game.update_state()
        if outcome is not None:
            self.main_state = outcome

    def _scores(self, buttons):
        for line, score in enumerate(self.highscores.scores):
            self.display.text(line, str(score), _TEXT_OFFSET)
        self.display.text(3, "BTN4: MENU", _TEXT_OFFSET)
        if buttons == Button.BTN4:
            self.main_state = MainState.MENU

    def _dead(self, buttons):
        self.display.text(0, "YOU ARE DEAD", _TEXT_OFFSET)
        self.display.text(1, "Lives left: ", _TEXT_OFFSET)
        self.display.text(2, str(self.game.player.lives), _TEXT_OFFSET)
        self.display.text(3, "BTN4: CONTINUE", _TEXT_OFFSET)
        if buttons == Button.BTN4:
            self.main_state = MainState.PLAYING
            self.game.player.respawn(self.game.playfield.origin)

    def _result(self, title, buttons):
        self.display.text(0, title, _TEXT_OFFSET)
        self.display.text(1, "SCORE: ", _TEXT_OFFSET)
        self.display.text(2, str(self.game.player.coins), _TEXT_OFFSET)
        self.display.text(3, "BTN4: MENU", _TEXT_OFFSET)
        if buttons == Button.BTN4:
            self.main_state = MainState.MENU


def main(argv=None):
    """Read one key per line from standard input and print a frame for each tick."""
    parser = argparse.ArgumentParser(
        prog="oledman",
        description=(
            "Play the maze game on a text screen. Each input line is a key: "
            "w/a/s/d, up/down/left/right or 1-4; an empty line presses nothing; q quits."
        ),
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the ghosts' moves")
    parser.add_argument("--steps", type=int, default=1, help="ticks to run for each key")
    args = parser.parse_args(argv)
    if args.steps < 1:
        parser.error("--steps must be at least 1")

    console = Console(random.Random(args.seed))
    for line in sys.stdin:
        key = line.strip()
        if key.lower() in ("q", "quit"):
            break
        try:
            buttons = buttons_from_key(key)
        except ValueError as error:
            print(error, file=sys.stderr)
            continue
        for _ in range(args.steps):
            print(console.tick(buttons))
            print()
    return 0