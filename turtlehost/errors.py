# -*- coding: utf-8 -*-

# (C) 2019, Uwe Jugel, @ubunatic
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

class TurtleError(Exception):          pass
class InvalidPenState(TurtleError):    pass
class SurfaceUnavailable(TurtleError): pass
class CommandError(TurtleError):       pass
class StopConsole(Exception):          pass
