# -*- coding: utf-8 -*-

# (C) 2019, Uwe Jugel, @ubunatic
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

from turtlehost.canvas import BrailleCanvas, line                         # noqa: F401
from turtlehost.convention import Convention, get_convention              # noqa: F401
from turtlehost.errors import (TurtleError, InvalidPenState, SurfaceUnavailable,  # noqa: F401
                               CommandError, StopConsole)
from turtlehost.surface import Surface, RecordingSurface, FOREGROUND, BACKGROUND  # noqa: F401
from turtlehost.turtle import TurtleState, PenState                       # noqa: F401
from turtlehost.repl import Host, Console                                 # noqa: F401
from turtlehost.cli import main                                           # noqa: F401
