# -*- coding: utf-8 -*-

# (C) 2014- by Adam Tauber, <asciimoo@gmail.com>
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

import enum, logging
from turtlehost.convention import get_convention
from turtlehost.errors import InvalidPenState
from turtlehost.surface import FOREGROUND, BACKGROUND, resolve

log = logging.getLogger(__name__)

ORIGIN = (400, 500)


class PenState(enum.Enum):
    UP    = 'UP'
    DOWN  = 'DOWN'
    ERASE = 'ERASE'


class TurtleState(object):
    """Turtle graphics interface
    http://en.wikipedia.org/wiki/Turtle_graphics

    The turtle keeps its pose and pen state and sends each movement as draw
    calls to a rendering `surface`. The surface is a `Surface` or a callable
    that looks one up before each draw call.
    """

    def __init__(self, surface=None, origin=ORIGIN, convention=None):
        self.surface = surface
        self.origin = origin
        self.convention = get_convention(convention)
        self.x, self.y = self.convention.coordinate(origin[0]), self.convention.coordinate(origin[1])
        self.heading = 0
        self.pen_state = PenState.DOWN
        self.visible = True


    def move(self, distance):
        """Move the turtle forward, drawing according to the pen state.

        :param distance: Number. Distance to move, may be negative.
        """
        x, y = self.convention.destination(self.x, self.y, self.heading, distance)
        self._draw_line(self.x, self.y, x, y)
        self.x, self.y = x, y


    def move_backward(self, distance):
        """Move the turtle backwards.

        :param distance: Number. Distance to move backwards.
        """
        self.move(-distance)


    def turn_left(self, degrees):
        """Rotate the turtle (positive direction).

        :param degrees: Number. Rotation angle in degrees.
        """
        self.heading += degrees


    def turn_right(self, degrees):
        """Rotate the turtle (negative direction).

        :param degrees: Number. Rotation angle in degrees.
        """
        self.turn_left(-degrees)


    def set_x(self, x):
        """Place the turtle at a new x coordinate without drawing."""
        self.x = self.convention.coordinate(x)


    def set_y(self, y):
        """Place the turtle at a new y coordinate without drawing."""
        self.y = self.convention.coordinate(y)


    def home(self):
        """Place the turtle at its origin and heading 0 without drawing."""
        self.set_x(self.origin[0])
        self.set_y(self.origin[1])
        self.heading = 0


    def show_turtle(self): self.visible = True
    def hide_turtle(self): self.visible = False
    def is_visible(self):  return self.visible


    def set_pen_up(self):
        """Pull the pen up."""
        self.pen_state = PenState.UP


    def set_pen_down(self):
        """Push the pen down."""
        self.pen_state = PenState.DOWN


    def set_pen_erase(self):
        """Switch the pen to erase mode."""
        self.pen_state = PenState.ERASE


    def clear_surface(self):
        """Clear the whole surface. Keeps pose and pen state."""
        resolve(self.surface).clear_all()


    def reset(self):
        """Clear the surface and restore the initial turtle state."""
        self.clear_surface()
        self.home()
        self.pen_state = PenState.DOWN
        self.visible = True


    def xcor(self):     return self.x
    def ycor(self):     return self.y
    def position(self): return self.x, self.y


    def _draw_line(self, x0, y0, x1, y1):
        surface = resolve(self.surface)
        pen = self.pen_state
        if pen is PenState.DOWN:
            log.debug('pen is down: stroke (%s, %s) -> (%s, %s)', x0, y0, x1, y1)
            self._stroke(surface, FOREGROUND, x0, y0, x1, y1)
        elif pen is PenState.UP:
            log.debug('pen is up: move to (%s, %s)', x1, y1)
            surface.move_cursor_to(x1, y1)
        elif pen is PenState.ERASE:
            log.debug('pen erase: stroke (%s, %s) -> (%s, %s)', x0, y0, x1, y1)
            self._stroke(surface, BACKGROUND, x0, y0, x1, y1)
        else:
            raise InvalidPenState('invalid pen state: {!r}'.format(pen))


    @staticmethod
    def _stroke(surface, color, x0, y0, x1, y1):
        surface.set_stroke_color(color)
        surface.begin_stroke()
        surface.move_cursor_to(x0, y0)
        surface.line_to(x1, y1)
        surface.stroke()


    # LOGO aliases
    forward = fd = move
    back = backward = bk = move_backward
    left = lt = turn_left
    right = rt = turn_right
    setx = set_x
    sety = set_y
    penup = pu = set_pen_up
    pendown = pd = set_pen_down
    penerase = pe = set_pen_erase
    showturtle = st = show_turtle
    hideturtle = ht = hide_turtle
    clean = clear_surface
    clearscreen = cs = reset
