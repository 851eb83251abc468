# -*- coding: utf-8 -*-

# (C) 2018 Uwe Jugel, @ubunatic
# License: GNU AGPLv3+ (see LICENSE file or http://www.gnu.org/licenses)

"""
This module implements a REPL to send LOGO turtle commands to a turtle
drawing on the console.

To start this module, run: `turtlehost` or `python -m turtlehost`.

The module can also be embedded using the `turtlehost.Console` class,
or the `turtlehost.Host` class if only command dispatch is needed.
"""

import re, math, logging
import lark
from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.lexers import PygmentsLexer

from pygments.lexer import RegexLexer, bygroups, words
from pygments.token import Text, Name, Keyword, Comment, Number

from turtlehost.canvas import BrailleCanvas, EXTENT
from turtlehost.errors import CommandError, StopConsole
from turtlehost.turtle import TurtleState

log = logging.getLogger(__name__)

usage = """
# This is turtlehost, a LOGO turtle drawing on your console.
#
# License:   GNU AGPLv3 (see LICENSE file or http://www.gnu.org/licenses)

Type 'q' or 'quit' to leave. Type 'forward', 'backward', 'left', or 'right' to move.
You can also chain commands. For instance, for drawing a rectangle:

    forward 40 right 90  forward 40 right 90  forward 40 right 90  forward 40 right 90

The short LOGO names also work:

    fd 40 rt 90  fd 40 rt 90  fd 40 rt 90  fd 40 rt 90

Moving and turning without a number moves 20 steps or turns 45 degrees.

Pen and turtle commands are:

    penup      pu   # move without drawing
    pendown    pd   # draw when moving
    penerase   pe   # erase when moving
    showturtle st   # show the turtle
    hideturtle ht   # hide the turtle
    setx 10         # place the turtle at x=10 without drawing
    sety 10         # place the turtle at y=10 without drawing
    home            # place the turtle at its origin without drawing
    xcor  ycor      # print the turtle's coordinates
    print 42        # print a number

Other commands are:

    help             # show this help
    clean            # clear the screen (but do not reset angle and position)
    clearscreen  cs  # clear the screen and reset the turtle
    frame            # print the turtle frame to the screen
    quit             # exit turtlehost

"""

DIRECTIONS = 'forward fd backward back bk left lt right rt setx sety'.split()
COMMANDS   = ('penup pu pendown pd penerase pe showturtle st hideturtle ht '
              'clean clearscreen cs home xcor ycor').split()

# arguments used when moving or turning without a number
DEFAULTS = {'forward': 20, 'fd': 20, 'backward': 20, 'back': 20, 'bk': 20,
            'left': 45, 'lt': 45, 'right': 45, 'rt': 45}


def number_text(value):
    """number_text formats a number without losing digits, whole numbers without a fraction"""
    if float(value).is_integer(): return str(int(value))
    return str(value)


class ConsoleLexer(RegexLexer):
    """ConsoleLexer is a simple RegexLexer,
    required for pygments syntax highlighting."""
    name = 'turtlehost'
    aliases = ['turtlehost', 'logo']
    filenames = ['*.logo']
    flags = re.IGNORECASE

    tokens = dict(root=[
        (r'\s+',                                   Text),
        (words(DIRECTIONS, suffix=r'\b'),          Keyword),
        (words(COMMANDS + ['print'], suffix=r'\b'), Name.Builtin),
        (r'(#)(.*)',                               bygroups(Comment, Comment)),
        (r'[+-]?[0-9]*\.?[0-9]+',                  Number),
        (r'[a-z_]+',                               Name),
        (r'.',                                     Text),
    ])


class ConsolePrinter(object):
    """ConsolePrinter is a Mixin Class for the Host for printing output to the console.
    All output is handled in this class, the Host is output agnostic.
    """
    def print_text(host, *args):
        """print_text is the text output function of the Host.
        It uses Python's print function."""
        print(*args)

    def print_frame(host):
        """print_frame prints the canvas frame and the turtle's pose if it is visible"""
        host.print_text(host.canvas.frame())
        t = host.turtle
        if t.is_visible():
            host.print_text('# turtle at ({}, {}) heading {} pen {}'.format(
                number_text(t.xcor()), number_text(t.ycor()), number_text(t.heading), t.pen_state.value))


class Host(ConsolePrinter):
    """Host runs LOGO primitives on its `turtle`, drawing on its `canvas`.
    Usage Example:

        host = Host()
        host.exec_direct('forward', 10)
        host.exec_cmd('penup')
        host.run_program([('rt', 90), ('fd', 10)])

    """
    def __init__(host, turtle=None, canvas=None):
        host.canvas = canvas if canvas is not None else BrailleCanvas(*EXTENT)
        host.turtle = turtle if turtle is not None else TurtleState(host.canvas)
        host.commands = {}
        for name in DIRECTIONS: host.add_command(name, host.exec_direct)
        for name in COMMANDS:   host.add_command(name, host.exec_cmd)
        host.add_command('print', host.exec_print)

    def add_command(host, name, fn):
        log.debug("adding command: %s", name)
        assert name not in host.commands, "overriding commands not supported"
        host.commands[name] = fn

    def exec_direct(host, direction, count=None):
        """exec_direct moves, turns, or places the turtle"""
        if count is None: count = DEFAULTS.get(direction)
        if count is None: raise CommandError('missing number for: {}'.format(direction))
        log.debug('direction: %s %s', direction, count)
        getattr(host.turtle, direction)(count)

    def exec_cmd(host, command, arg=None):
        """exec_cmd runs pen, visibility, screen, and query commands"""
        if arg is not None: raise CommandError('{} takes no number, got: {}'.format(command, arg))
        log.debug('command: %s', command)
        result = getattr(host.turtle, command)()
        if result is not None: host.print_text(number_text(result))
        return result

    def exec_print(host, command, value=None):
        if value is None: raise CommandError('missing number for: print')
        host.print_text('[PRINT] ' + number_text(value))

    def run_program(host, program):
        """run_program runs a list of (name, number) tuples, a number can be None"""
        for name, arg in program:
            name = name.lower()
            fn = host.commands.get(name)
            if fn is None: raise CommandError('invalid command: "{}"'.format(name))
            if arg is not None and not math.isfinite(arg):
                raise CommandError('invalid number for {}: {}'.format(name, arg))
            fn(name, arg)


grammar = r"""
    start: call*
    call:  NAME [number]
    number: SIGNED_NUMBER

    NAME: /[a-z_]+/i
    COMMENT: /#[^\n]*/

    %import common.SIGNED_NUMBER
    %import common.WS
    %ignore WS
    %ignore COMMENT
"""

@lark.v_args(inline=True)
class CommandTransformer(lark.Transformer):
    def start(t, *calls):         return list(calls)
    def call(t, name, value):     return (name.value.lower(), value)
    def number(t, token):         return float(token)


class Console(Host):
    """Console is a REPL for interactively running turtle commands"""
    def __init__(con, turtle=None, canvas=None):
        super().__init__(turtle, canvas)
        for name, fn in [('help',  con.help),
                         ('frame', con.print_frame),
                         ('quit',  con.quit),
                         ('q',     con.quit)]:
            con.add_command(name, con.no_args(name, fn))
        con.history = InMemoryHistory()
        con.lino = 1
        con._lark = lark.Lark(grammar, parser='lalr')
        con._transformer = CommandTransformer()

    @staticmethod
    def no_args(name, fn):
        def run(command, arg=None):
            if arg is not None: raise CommandError('{} takes no number, got: {:g}'.format(name, arg))
            return fn()
        return run

    def parse(con, text):
        """parse reads a command line into a program of (name, number) tuples"""
        try: tree = con._lark.parse(text)
        except lark.exceptions.LarkError as err:
            raise CommandError('cannot read command line: {}'.format(err))
        program = con._transformer.transform(tree)
        if len(program) > 0: log.debug("PROGRAM: %s", program)
        return program

    def run(con, text): con.run_program(con.parse(text))

    def run_file(con, filename):
        log.info('running commands from %s', filename)
        with open(filename) as f:
            con.run(f.read())

    def quit(con): raise StopConsole("quit")

    def help(con): con.print_text(usage)

    def start(con):
        """start the repl loop"""
        log.debug("starting REPL")
        con.help()
        while True:
            try: con.repl(); con.lino += 1
            except (StopConsole, EOFError): return True
            except KeyboardInterrupt:       con.print_text("Type 'q' or 'quit' to stop.")
            except Exception as err:        con.print_text(err)  # any errors are printed to repl

    def repl(con):
        """run the repl once: first read the input, then execute the program"""
        completer = WordCompleter(list(con.commands), ignore_case=True)
        text = prompt('turtle [{}]: '.format(con.lino),
                      history=con.history,
                      lexer=PygmentsLexer(ConsoleLexer),
                      completer=completer)
        program = con.parse(text)
        con.run_program(program)
        if any(name not in ('help', 'frame', 'xcor', 'ycor', 'print') for name, _ in program):
            con.print_frame()
