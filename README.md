# oledman

A tiny maze-chasing arcade game for a 128×32 monochrome screen. You
steer a round player through a maze, collect coins and avoid three
wandering ghosts. Eat one of the four food pellets in the corners and
for the next 100 ticks any ghost you touch is caught instead of catching
you. Catch all three ghosts to win. You have three lives, and the three
best scores are kept in a high-score table.

## Installing

```
pip install .
```

## Playing

```
oledman
```

The command is turn-based: it reads one key per line from standard
input, runs the game for one tick per key and prints the screen after
each tick as 32 lines of 128 characters (`#` for a lit pixel, `.` for a
dark one), followed by a blank line.

Keys, one per line:

| Key                    | Button | In menus      | In game |
|------------------------|--------|---------------|---------|
| `d`, `right`, `1`      | BTN1   |               | right   |
| `s`, `down`, `2`       | BTN2   |               | down    |
| `w`, `up`, `3`         | BTN3   | second option | up      |
| `a`, `left`, `4`       | BTN4   | first option  | left    |
| empty line             | none   |               | stand   |
| `q`, `quit`            |        | quit          | quit    |

An unknown key is reported on standard error and skipped.

Options:

- `--seed N` seeds the ghosts' random walks, so a game can be replayed.
- `--steps N` runs N ticks for each key (at least 1; default 1).

From the menu, BTN4 starts a game and BTN3 shows the high scores. After
you lose a life, BTN4 carries on from the start point. On the game-over
and win screens, and on the high-score screen, BTN4 returns to the menu.

The maze has a portal at each end of its middle row: stepping onto one
puts you at the other, and the same goes for the ghosts.

## Using it as a library

`oledman.app.Console` is the whole machine. Each call to
`Console.tick(buttons)` advances one tick with the given button bits
(from `oledman.constants.Button`) and returns the frame it drew as text.
`oledman.game.Game` holds one round of play, `oledman.display.Display`
is the 128×32 frame buffer (its `render()` method returns the picture as
text and `pages()` the raw page bytes), and
`oledman.buttons.buttons_from_key` turns a key name into button bits.

```python
import random

from oledman.app import Console
from oledman.constants import Button

console = Console(random.Random(1))
console.tick(Button.BTN4)           # start a game from the menu
frame = console.tick(Button.BTN1)   # step right
print(frame)
```

## What it does not do

- It does not read the keyboard in real time or run on a clock: the game
  advances only when a key line arrives.
- High scores live in memory only and are lost when the program exits.
- It does not drive a physical screen or buttons; `decode_buttons` only
  turns raw port values into button bits.

## Running the tests

```
pip install .[test]
pytest
```