"""Reading the four push buttons, from port bits or from keyboard keys."""

from .constants import Button

_PORT_D_MASK = 0xE0  # bits 7:5 hold BTN4, BTN3, BTN2
_PORT_F_MASK = 0x02  # bit 1 holds BTN1

_KEYS = {
    "": Button.NONE,
    "d": Button.BTN1,
    "right": Button.BTN1,
    "1": Button.BTN1,
    "s": Button.BTN2,
    "down": Button.BTN2,
    "2": Button.BTN2,
    "w": Button.BTN3,
    "up": Button.BTN3,
    "3": Button.BTN3,
    "a": Button.BTN4,
    "left": Button.BTN4,
    "4": Button.BTN4,
}


def decode_buttons(port_d, port_f):
    """Build the button word from the raw values of the two input ports."""
    return Button(((port_d & _PORT_D_MASK) >> 4) | ((port_f & _PORT_F_MASK) >> 1))


def buttons_from_key(key):
    """Map a keyboard key (wasd, arrow names or 1-4; empty for none) to the button word."""
    try:
        return _KEYS[key.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown key {key!r}") from None