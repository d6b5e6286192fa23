"""One round of the game: the playfield, the player and the ghosts."""

import random

from .constants import MainState, Pixel, PlayingState
from .ghost import Ghost
from .highscore import Highscores
from .player import Player
from .playfield import Playfield, collision


class Game:
    """A running game and the rules that advance it one tick at a time."""

    def __init__(self, highscores=None, rng=None):
        self.highscores = highscores if highscores is not None else Highscores()
        self._rng = rng if rng is not None else random.Random()
        self.playfield = Playfield()
        self.player = Player(self.playfield.origin)
        self.ghosts = []
        self.playing_state = PlayingState.CONTINUE_PLAYING
        self.food_ticks = 0
        self.load()

    def load(self):
        """Start a fresh round: new map with coins, player at the origin, ghosts at their spawns."""
        self.playfield.load()
        self.player = Player(self.playfield.origin)
        self.ghosts = [Ghost(spawn, self._rng) for spawn in self.playfield.spawns]
        self.playfield.load_coins()
        self.playing_state = PlayingState.CONTINUE_PLAYING
        self.food_ticks = 0

    def update(self, buttons):
        """Move everyone one step, then handle portals, food and coins for the player."""
        playfield = self.playfield
        self.player.move(playfield, buttons)

        for ghost in self.ghosts:
            ghost.move(playfield)
            if playfield.pixel_data(ghost.position) == Pixel.PORTAL:
                ghost.position = playfield.pass_through_portal(ghost.position)

        here = playfield.pixel_data(self.player.position)
        if here == Pixel.PORTAL:
            self.player.position = playfield.pass_through_portal(self.player.position)
        elif here & Pixel.FOOD:
            self.playing_state = PlayingState.FOOD_EFFECT
            playfield.consume_food(self.player.position)
            self.food_ticks = 0

        self.player.coins += playfield.take_coins(self.player.position)

    def update_state(self):
        """Resolve collisions; return the window to switch to, or None to keep playing."""
        outcome = None
        for ghost in self.ghosts:
            if not (ghost.alive and collision(self.player.position, ghost.position)):
                continue
            if self.playing_state == PlayingState.FOOD_EFFECT:
                ghost.alive = False
                self.playfield.ghosts_left -= 1
            else:
                self.player.alive = False

        if not self.player.alive:
            self.player.lives -= 1
            if self.player.lives > 0:
                self.player.alive = True
                outcome = MainState.DEAD
            else:
                self.highscores.submit(self.player.coins)
                outcome = MainState.GAMEOVER

        if self.playfield.ghosts_left == 0:
            self.highscores.submit(self.player.coins)
            outcome = MainState.WON

        return outcome

    def draw(self, display):
        """Draw the playfield, then the player and ghosts that are alive."""
        self.playfield.draw(display)
        if self.player.alive:
            self.player.draw(display)
        for ghost in self.ghosts:
            if ghost.alive:
                ghost.draw(display)