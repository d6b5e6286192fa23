"""The table of best scores."""

from dataclasses import dataclass, field

from .constants import HIGHSCORE_SLOTS


@dataclass
class Highscores:
    """The best scores, highest first."""

    scores: list = field(default_factory=lambda: [0] * HIGHSCORE_SLOTS)

    def submit(self, score):
        """Insert a score, pushing lower ones down and dropping the lowest off the end."""
        for index, held in enumerate(self.scores):
            if score > held:
                self.scores[index], score = score, held