# -*- coding: utf-8 -*-

# (C) 2019, Uwe Jugel, @ubunatic
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

from turtlehost.errors import SurfaceUnavailable

FOREGROUND = 'foreground'
BACKGROUND = 'background'

colors = (FOREGROUND, BACKGROUND)


class Surface(object):
    """Surface is the drawing capability the turtle requires from a renderer.

    Paths work like on a 2D canvas: `begin_stroke` discards the current path,
    `move_cursor_to` starts a new sub-path, `line_to` extends it and `stroke`
    renders it with the current stroke color.
    """

    def begin_stroke(self):           raise NotImplementedError('begin_stroke')
    def move_cursor_to(self, x, y):   raise NotImplementedError('move_cursor_to')
    def line_to(self, x, y):          raise NotImplementedError('line_to')
    def stroke(self):                 raise NotImplementedError('stroke')
    def set_stroke_color(self, color): raise NotImplementedError('set_stroke_color')
    def clear_all(self):              raise NotImplementedError('clear_all')


class RecordingSurface(Surface):
    """RecordingSurface records all draw calls as tuples, e.g.:

        [('set_stroke_color', 'foreground'), ('begin_stroke',),
         ('move_cursor_to', 0, 0), ('line_to', 0, -10), ('stroke',)]
    """

    def __init__(self):
        self.calls = []

    def begin_stroke(self):            self.calls.append(('begin_stroke',))
    def move_cursor_to(self, x, y):    self.calls.append(('move_cursor_to', x, y))
    def line_to(self, x, y):           self.calls.append(('line_to', x, y))
    def stroke(self):                  self.calls.append(('stroke',))
    def clear_all(self):               self.calls.append(('clear_all',))

    def set_stroke_color(self, color):
        if color not in colors:
            raise ValueError('invalid stroke color: {}'.format(color))
        self.calls.append(('set_stroke_color', color))

    def names(self):
        """names returns the recorded method names"""
        return [c[0] for c in self.calls]

    def strokes(self):
        """strokes returns the stroke color of each recorded `stroke` call"""
        color, result = None, []
        for c in self.calls:
            if   c[0] == 'set_stroke_color': color = c[1]
            elif c[0] == 'stroke':           result.append(color)
        return result

    def reset(self):
        self.calls = []


def resolve(surface):
    """resolve returns the surface for the next draw call.
    A `surface` can be a Surface or a callable looking up a Surface.
    """
    if isinstance(surface, Surface): return surface
    if callable(surface):            surface = surface()
    if surface is None:
        raise SurfaceUnavailable('no drawing surface available')
    return surface
