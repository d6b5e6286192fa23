"""A maze-chasing arcade game for a 128x32 monochrome screen, playable as a text-mode command."""

__version__ = "0.1.0"
__all__ = ["__version__"]