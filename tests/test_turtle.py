from turtlehost import TurtleState, PenState, RecordingSurface, FOREGROUND, BACKGROUND
from turtlehost.convention import heading_vector
from turtlehost.errors import InvalidPenState, SurfaceUnavailable

import math, random
import pytest

def new_turtle(x=0, y=0, **kwargs):
    surface = RecordingSurface()
    return TurtleState(surface, origin=(x, y), **kwargs), surface

def test_defaults():
    tur = TurtleState(RecordingSurface())
    assert tur.position() == (400, 500)
    assert tur.heading == 0
    assert tur.pen_state is PenState.DOWN
    assert tur.is_visible()

def test_move_forward_from_origin():
    tur, surface = new_turtle(400, 500)
    tur.move(100)
    assert tur.position() == (400, 400)
    assert surface.calls == [
        ('set_stroke_color', FOREGROUND),
        ('begin_stroke',),
        ('move_cursor_to', 400, 500),
        ('line_to', 400, 400),
        ('stroke',),
    ]

def test_turn_right_then_move():
    tur, surface = new_turtle()
    tur.turn_right(90)
    assert tur.heading == -90
    tur.move(50)
    assert tur.xcor() == pytest.approx(50)
    assert tur.ycor() == pytest.approx(0)

def test_turn_left_then_move():
    tur, surface = new_turtle()
    tur.turn_left(90)
    tur.move(50)
    assert tur.position() == pytest.approx((-50, 0))

def test_erase_strokes_with_background():
    tur, surface = new_turtle()
    tur.set_pen_erase()
    tur.move(10)
    assert surface.strokes() == [BACKGROUND]
    assert ('line_to', 0, -10) in surface.calls

def test_pen_up_never_strokes():
    tur, surface = new_turtle()
    tur.set_pen_up()
    for i in range(10):
        tur.move(i)
        tur.turn_left(36)
    assert 'stroke' not in surface.names()
    assert surface.names() == ['move_cursor_to'] * 10

    tur.set_pen_down()
    for i in range(5): tur.move(1)
    assert surface.strokes() == [FOREGROUND] * 5

def test_pen_up_moves_path_cursor_to_destination():
    tur, surface = new_turtle()
    tur.set_pen_up()
    tur.move(10)
    assert surface.calls == [('move_cursor_to', 0, -10)]

def test_set_xy_does_not_draw():
    tur, surface = new_turtle()
    tur.turn_left(30)
    tur.set_pen_erase()
    tur.set_x(-15)
    tur.set_y(25.5)
    assert tur.position() == (-15, 25.5)
    assert tur.heading == 30
    assert tur.pen_state is PenState.ERASE
    assert surface.calls == []

def test_visibility_does_not_draw():
    tur, surface = new_turtle()
    tur.hide_turtle()
    assert not tur.visible
    tur.move(5)
    tur.show_turtle()
    assert tur.visible
    assert surface.strokes() == [FOREGROUND]

def test_clear_surface_keeps_state():
    tur, surface = new_turtle()
    tur.turn_left(10)
    tur.move(10)
    tur.set_pen_up()
    pose = tur.position(), tur.heading
    surface.reset()
    tur.clear_surface()
    assert surface.calls == [('clear_all',)]
    assert (tur.position(), tur.heading) == pose
    assert tur.pen_state is PenState.UP

def test_reset():
    tur, surface = new_turtle(3, 4)
    tur.turn_left(10)
    tur.move(10)
    tur.set_pen_erase()
    tur.hide_turtle()
    tur.reset()
    assert tur.position() == (3, 4)
    assert tur.heading == 0
    assert tur.pen_state is PenState.DOWN
    assert tur.visible
    assert surface.names()[-1] == 'clear_all'

def test_home_does_not_draw():
    tur, surface = new_turtle(3, 4)
    tur.set_pen_up()
    tur.move(10)
    tur.turn_left(90)
    tur.home()
    assert tur.position() == (3, 4)
    assert tur.heading == 0
    assert surface.names() == ['move_cursor_to']

def test_invalid_pen_state():
    tur, surface = new_turtle()
    tur.pen_state = 'DOWN'
    with pytest.raises(InvalidPenState): tur.move(10)
    assert tur.position() == (0, 0)

def test_missing_surface():
    tur = TurtleState(origin=(1, 2))
    with pytest.raises(SurfaceUnavailable): tur.move(10)
    assert tur.position() == (1, 2)
    with pytest.raises(SurfaceUnavailable): tur.clear_surface()

def test_surface_lookup():
    found = []
    surface = RecordingSurface()
    def lookup(): return found[0] if found else None

    tur = TurtleState(lookup, origin=(0, 0))
    with pytest.raises(SurfaceUnavailable): tur.move(10)
    assert tur.position() == (0, 0)

    found.append(surface)
    tur.move(10)
    assert tur.position() == (0, -10)
    assert surface.strokes() == [FOREGROUND]

def test_failing_surface_does_not_commit():
    class Broken(RecordingSurface):
        def stroke(self): raise IOError("surface gone")

    tur = TurtleState(Broken(), origin=(0, 0))
    with pytest.raises(IOError): tur.move(10)
    assert tur.position() == (0, 0)

def test_move_sequence_is_vector_sum():
    rnd = random.Random(42)
    for _ in range(50):
        tur, surface = new_turtle(rnd.uniform(-100, 100), rnd.uniform(-100, 100))
        x, y, heading = tur.x, tur.y, 0
        for _ in range(20):
            op = rnd.choice(('move', 'turn_left', 'turn_right'))
            value = rnd.uniform(-360, 360)
            getattr(tur, op)(value)
            if op == 'move':
                dx, dy = heading_vector(heading)
                x, y = x - dx * value, y - dy * value
            elif op == 'turn_left':  heading += value
            else:                    heading -= value
        assert tur.heading == pytest.approx(heading)
        assert tur.position() == pytest.approx((x, y))

def test_turn_left_right_restores_heading():
    rnd = random.Random(7)
    for d in [0, 1, -1, 90, 360, 720.5, 1e6] + [rnd.uniform(-1e4, 1e4) for _ in range(50)]:
        tur, surface = new_turtle()
        tur.turn_left(d)
        tur.turn_right(d)
        assert tur.heading == 0

def test_move_backward_restores_position():
    rnd = random.Random(11)
    for _ in range(50):
        tur, surface = new_turtle(rnd.uniform(-100, 100), rnd.uniform(-100, 100))
        start = tur.position()
        tur.turn_left(rnd.uniform(-360, 360))
        n = rnd.uniform(-500, 500)
        tur.move(n)
        tur.move_backward(n)
        assert tur.position() == pytest.approx(start, abs=1e-9)

def test_move_backward_is_negative_move():
    tur, surface = new_turtle()
    tur.move_backward(10)
    assert tur.position() == (0, 10)
    assert surface.calls[-2] == ('line_to', 0, 10)

def test_draw_order_follows_calls():
    tur, surface = new_turtle()
    for i in range(4):
        tur.move(10)
        tur.turn_right(90)
    ends = [v for c in surface.calls if c[0] == 'line_to' for v in c[1:]]
    assert ends == pytest.approx([0, -10, 10, -10, 10, 0, 0, 0], abs=1e-9)

def test_heading_accumulates():
    tur, surface = new_turtle()
    for _ in range(5): tur.turn_left(90)
    assert tur.heading == 450
    for _ in range(10): tur.turn_right(90)
    assert tur.heading == -450

def test_logo_aliases():
    tur, surface = new_turtle()
    tur.fd(10); tur.rt(90); tur.bk(5); tur.lt(90)
    tur.pu(); assert tur.pen_state is PenState.UP
    tur.pe(); assert tur.pen_state is PenState.ERASE
    tur.pd(); assert tur.pen_state is PenState.DOWN
    tur.ht(); assert not tur.visible
    tur.st(); assert tur.visible
    assert tur.position() == pytest.approx((-5, -10))
    assert tur.heading == 0
    assert math.isfinite(tur.xcor())
