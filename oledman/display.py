"""Frame buffer for a 128x32 monochrome screen organised in 8-pixel pages."""

from .bitmaps import glyph
from .constants import DISPLAY_COLUMNS, DISPLAY_PAGES, DISPLAY_ROWS

_GLYPH_WIDTH = 8


class Display:
    """An in-memory screen: each column of each page is one byte, bit 0 at the top."""

    def __init__(self):
        self._pages = [bytearray(DISPLAY_COLUMNS) for _ in range(DISPLAY_PAGES)]

    @staticmethod
    def _in_range(column, row):
        return 0 <= column < DISPLAY_COLUMNS and 0 <= row < DISPLAY_ROWS

    def set(self, column, row, value):
        """Light or clear one pixel; positions off the screen are ignored."""
        if not self._in_range(column, row):
            return
        page = self._pages[row >> 3]
        bit = 1 << (row & 0x07)
        if value:
            page[column] |= bit
        else:
            page[column] &= ~bit & 0xFF

    def pixel(self, column, row):
        """Whether the pixel is lit; positions off the screen read as dark."""
        if not self._in_range(column, row):
            return False
        return bool(self._pages[row >> 3][column] & (1 << (row & 0x07)))

    def text(self, line, s, offset):
        """Write a string into a page starting at a column, clipping at the right edge."""
        if not (0 <= offset < DISPLAY_COLUMNS and 0 <= line < DISPLAY_PAGES):
            return
        page = self._pages[line]
        for char in s:
            for column_byte in glyph(char)[:_GLYPH_WIDTH]:
                if offset >= DISPLAY_COLUMNS:
                    break
                page[offset] = column_byte & 0xFF
                offset += 1

    def clear(self):
        """Darken the whole screen."""
        for page in self._pages:
            page[:] = bytes(DISPLAY_COLUMNS)

    def pages(self):
        """The bytes sent to the screen, one bytes object per page, left to right."""
        return tuple(bytes(page) for page in self._pages)

    def render(self):
        """The screen as text: one line per row, '#' for lit and '.' for dark pixels."""
        return "\n".join(
            "".join("#" if self.pixel(column, row) else "." for column in range(DISPLAY_COLUMNS))
            for row in range(DISPLAY_ROWS)
        )