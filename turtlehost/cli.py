# -*- coding: utf-8 -*-

# (C) 2019, Uwe Jugel, @ubunatic
# License: GNU AGPL (see LICENSE file or http://www.gnu.org/licenses)

from turtlehost.convention import conventions
from turtlehost.errors import StopConsole, TurtleError
from turtlehost.repl import Console
from turtlehost.turtle import TurtleState
import argparse, logging, sys

log = logging.getLogger(__name__)

def main(argv=None):
    p = argparse.ArgumentParser(prog='turtlehost'); add = p.add_argument
    add("--debug",       help='enable debug logs', action='store_true')
    add("--print", "-p", help='print the turtle frame on exit', action='store_true', dest='_print')
    add("--run",   "-c", help='turtle commands', nargs='+', default=None, metavar='COMMAND')
    add("--convention",  help='heading convention (default: screen)', choices=sorted(conventions), default='screen')
    add("--origin",      help='initial turtle position', nargs=2, type=float, default=None, metavar=('X', 'Y'))
    add("logofile",      help='file with turtle commands', nargs='?', metavar='FILE')
    args = p.parse_args(argv)

    level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(level=level)

    con = Console()
    kwargs = dict(convention=args.convention)
    if args.origin is not None: kwargs['origin'] = tuple(args.origin)
    con.turtle = TurtleState(con.canvas, **kwargs)

    code = 0
    try:
        if args.run is not None: con.run(' '.join(args.run))
        elif args.logofile:      con.run_file(args.logofile)
        else:                    con.start()
    except StopConsole: pass
    except TurtleError as err:
        log.error('%s', err)
        code = 1
    except OSError as err:
        log.error('cannot run commands from %s: %s', args.logofile, err)
        code = 1
    if args._print: con.print_frame()
    sys.exit(code)
