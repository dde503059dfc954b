import math

from sardips.interaction import AttachToCursor, Clickable, MoveTowardsCursor


def test_clickable_contains_inside_and_edges():
    area = Clickable(width=(-10.0, 10.0), height=(-5.0, 5.0))
    assert area.contains((100.0, 50.0), (100.0, 50.0))
    assert area.contains((100.0, 50.0), (110.0, 55.0))
    assert area.contains((100.0, 50.0), (90.0, 45.0))


def test_clickable_outside():
    area = Clickable(width=(-10.0, 10.0), height=(-5.0, 5.0))
    assert not area.contains((100.0, 50.0), (111.0, 50.0))
    assert not area.contains((100.0, 50.0), (100.0, 44.0))


def test_attach_default_attaches_both():
    result = AttachToCursor().apply((1.0, 2.0, 3.0), (7.0, 8.0))
    assert result == (7.0, 8.0, 3.0)


def test_attach_only_x():
    attach = AttachToCursor(False, False).with_attach_x(True)
    assert attach.apply((1.0, 2.0), (7.0, 8.0)) == (7.0, 2.0)


def test_attach_only_y():
    attach = AttachToCursor(False, False).with_attach_y(True)
    assert attach.apply((1.0, 2.0), (7.0, 8.0)) == (1.0, 8.0)


def test_move_towards_cursor_x_only():
    mover = MoveTowardsCursor().with_x(True)
    vx, vy = mover.velocity((0.0, 9.0), (0.0, 0.0), (5.0, 0.0), 3.0)
    assert vx == 3.0
    assert vy == 9.0


def test_move_towards_cursor_speed_is_preserved():
    mover = MoveTowardsCursor().with_x(True).with_y(True)
    vx, vy = mover.velocity((0.0, 0.0), (1.0, 1.0), (4.0, 5.0), 2.0)
    assert math.isclose(math.hypot(vx, vy), 2.0)
    assert vx > 0 and vy > 0


def test_move_towards_cursor_disabled_keeps_velocity():
    mover = MoveTowardsCursor()
    assert mover.velocity((1.5, -2.5), (0.0, 0.0), (5.0, 5.0), 10.0) == (1.5, -2.5)