# -*- coding: utf-8 -*-

# (C) 2014- by Adam Tauber, <asciimoo@gmail.com>
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

import os
from collections import defaultdict
from turtlehost.surface import Surface, FOREGROUND, BACKGROUND, colors

"""
http://www.alanwood.net/unicode/braille_patterns.html

dots:
   ,___,
   |1 4|
   |2 5|
   |3 6|
   |7 8|
   `````
"""

pixel_map = ((0x01, 0x08),
             (0x02, 0x10),
             (0x04, 0x20),
             (0x40, 0x80))

# braille unicode characters starts at 0x2800
braille_char_offset = 0x2800

# drawable width and height of the console canvas, the turtle origin is its center
EXTENT = (800, 1000)

def iround(coord):
    if isinstance(coord, bool): raise TypeError("Unsupported coordinate type <bool>")
    if isinstance(coord, int):   return coord
    if isinstance(coord, float): return int(round(coord))
    raise TypeError("Unsupported coordinate type <{0}>".format(type(coord)))

def colrow(x, y):
    """Convert x, y to column, row in the braille matrix"""
    return iround(x) // 2, iround(y) // 4

def IntDict():   return defaultdict(int)

def IntDict2d(): return defaultdict(IntDict)


class BrailleCanvas(Surface):
    """BrailleCanvas implements a pixel surface rendered with braille characters.

    Strokes in the FOREGROUND color set pixels, strokes in the BACKGROUND
    color unset them. With a `width` and `height`, strokes are clipped to
    the drawable area from (0, 0) to (width-1, height-1).
    """

    def __init__(self, width=None, height=None, line_ending=os.linesep):
        self.width = width
        self.height = height
        self.line_ending = line_ending
        self.color = FOREGROUND
        self.clear_all()


    def clear_all(self):
        """Remove all pixels and the current path."""
        self.chars = IntDict2d()
        self.begin_stroke()


    def begin_stroke(self):
        """Discard the current path."""
        self.path = []
        self.cursor = None


    def move_cursor_to(self, x, y):
        """Start a new sub-path at x, y."""
        self.cursor = (x, y)


    def line_to(self, x, y):
        """Add a line from the path cursor to x, y to the current path."""
        if self.cursor is not None:
            self.path.append((self.cursor, (x, y)))
        self.cursor = (x, y)


    def stroke(self):
        """Render all lines of the current path using the stroke color."""
        paint = self.set if self.color == FOREGROUND else self.unset
        for (x1, y1), (x2, y2) in self.path:
            segment = self.clip(x1, y1, x2, y2)
            if segment is None: continue
            for x, y in line(*segment):
                if self.inside(x, y): paint(x, y)


    def clip(self, x1, y1, x2, y2):
        """Clip a line to the drawable area. Returns None if it is outside."""
        if self.width is None or self.height is None: return x1, y1, x2, y2
        return clip(x1, y1, x2, y2, -0.5, -0.5, self.width - 0.5, self.height - 0.5)


    def inside(self, x, y):
        if self.width is None or self.height is None: return True
        return 0 <= iround(x) < self.width and 0 <= iround(y) < self.height


    def set_stroke_color(self, color):
        if color not in colors:
            raise ValueError('invalid stroke color: {}'.format(color))
        self.color = color


    def set(self, x, y):
        """Set a pixel of the :class:`BrailleCanvas` object.

        :param x: x coordinate of the pixel
        :param y: y coordinate of the pixel
        """
        x = iround(x)
        y = iround(y)
        col, row = colrow(x, y)
        self.chars[row][col] |= pixel_map[y % 4][x % 2]


    def unset(self, x, y):
        """Unset a pixel of the :class:`BrailleCanvas` object.

        :param x: x coordinate of the pixel
        :param y: y coordinate of the pixel
        """
        x = iround(x)
        y = iround(y)
        col, row = colrow(x, y)
        if row not in self.chars or col not in self.chars[row]: return

        self.chars[row][col] &= ~pixel_map[y % 4][x % 2]
        if self.chars[row][col] == 0: del self.chars[row][col]
        if not self.chars[row]:       del self.chars[row]


    def get(self, x, y):
        """Get the state of a pixel. Returns bool.

        :param x: x coordinate of the pixel
        :param y: y coordinate of the pixel
        """
        x = iround(x)
        y = iround(y)
        col, row = colrow(x, y)
        char = self.chars.get(row, {}).get(col)
        return bool(char and char & pixel_map[y % 4][x % 2])


    def rows(self):
        """Yields the current :class:`BrailleCanvas` lines, cropped to the set pixels."""
        if not self.chars: return

        minrow = min(self.chars.keys())
        maxrow = max(self.chars.keys())
        mincol = min(min(r.keys()) for r in self.chars.values())

        for rownum in range(minrow, maxrow+1):
            if rownum not in self.chars: yield ''; continue

            maxcol = max(self.chars[rownum].keys())
            row = []
            for x in range(mincol, maxcol+1):
                char = self.chars[rownum].get(x, 0)
                row.append(chr(braille_char_offset + char))

            yield ''.join(row)


    def frame(self):
        """String representation of the current :class:`BrailleCanvas` pixels."""
        return self.line_ending.join(self.rows())


def line(x1, y1, x2, y2):
    """Yields the pixel coordinates of the line between (x1, y1), (x2, y2)

    :param x1: x coordinate of the startpoint
    :param y1: y coordinate of the startpoint
    :param x2: x coordinate of the endpoint
    :param y2: y coordinate of the endpoint
    """

    x1 = iround(x1)
    y1 = iround(y1)
    x2 = iround(x2)
    y2 = iround(y2)

    xdiff = max(x1, x2) - min(x1, x2)
    ydiff = max(y1, y2) - min(y1, y2)
    xdir = 1 if x1 <= x2 else -1
    ydir = 1 if y1 <= y2 else -1

    if ydiff == 0 and xdiff == 0:
        yield (x1, y1)
        return

    r = max(xdiff, ydiff)
    dy = ydiff / float(r) * ydir
    dx = xdiff / float(r) * xdir

    for i in range(r+1):
        yield (x1 + i * dx, y1 + i * dy)


def clip(x1, y1, x2, y2, min_x, min_y, max_x, max_y):
    """Clips the line between (x1, y1), (x2, y2) to a rectangle (Liang-Barsky).
    Returns the clipped end points or None if the line is outside.
    """
    dx = x2 - x1
    dy = y2 - y1
    t0, t1 = 0.0, 1.0

    for p, q in ((-dx, x1 - min_x), (dx, max_x - x1),
                 (-dy, y1 - min_y), (dy, max_y - y1)):
        if p == 0:
            if q < 0: return None
            continue
        t = q / float(p)
        if p < 0:
            if t > t1: return None
            t0 = max(t0, t)
        else:
            if t < t0: return None
            t1 = min(t1, t)

    return x1 + t0 * dx, y1 + t0 * dy, x1 + t1 * dx, y1 + t1 * dy
