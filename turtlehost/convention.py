# -*- coding: utf-8 -*-

# (C) 2019, Uwe Jugel, @ubunatic
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

"""
Heading and axis conventions used by the turtle.

The default `screen` convention points heading 0 along the negative y axis
(up on a screen) and turns positive headings towards the negative x axis:

    dx, dy = sin(heading), cos(heading)
    x, y   = x - dx * distance, y - dy * distance

Older hosts used other conventions. They are kept as named profiles so that
drawings made with them can be reproduced, but they are deprecated:

    screen-clamped  like `screen`, but coordinates never go below zero
    math            heading 0 points along the positive x axis, and
                    positive headings turn towards the positive y axis
"""

import math, logging

log = logging.getLogger(__name__)


def heading_vector(heading):
    """Unit vector (sin, cos) of a heading given in degrees."""
    theta = heading * math.pi / 180
    return math.sin(theta), math.cos(theta)


def clamp(value, low=0):
    return value if value >= low else low


class Convention(object):
    """Convention converts headings and distances into destination points."""

    def __init__(self, name, vector=heading_vector, sign=-1, clamped=False, deprecated=False):
        self.name = name
        self.vector = vector
        self.sign = sign
        self.clamped = clamped
        self.deprecated = deprecated

    def __repr__(self):
        return 'Convention({!r})'.format(self.name)

    def displacement(self, heading, distance):
        """Displacement (dx, dy) of a move of `distance` at `heading`."""
        dx, dy = self.vector(heading)
        return self.sign * dx * distance, self.sign * dy * distance

    def destination(self, x, y, heading, distance):
        """Destination point of a move from (x, y)."""
        dx, dy = self.displacement(heading, distance)
        return self.coordinate(x + dx), self.coordinate(y + dy)

    def coordinate(self, value):
        if self.clamped: return clamp(value)
        return value


def math_vector(heading):
    """Unit vector (cos, sin) of a heading given in degrees."""
    theta = math.radians(heading)
    return math.cos(theta), math.sin(theta)


SCREEN         = Convention('screen')
SCREEN_CLAMPED = Convention('screen-clamped', clamped=True, deprecated=True)
MATH           = Convention('math', vector=math_vector, sign=1, deprecated=True)

conventions = {c.name: c for c in (SCREEN, SCREEN_CLAMPED, MATH)}


def get_convention(name_or_convention=None):
    """get_convention returns the named convention, `screen` by default."""
    if name_or_convention is None:
        return SCREEN
    if isinstance(name_or_convention, Convention):
        conv = name_or_convention
    else:
        try: conv = conventions[name_or_convention]
        except KeyError:
            raise ValueError('unknown convention: {} (choose from: {})'.format(
                name_or_convention, ', '.join(sorted(conventions))))
    if conv.deprecated:
        log.warning('using deprecated convention: %s', conv.name)
    return conv
