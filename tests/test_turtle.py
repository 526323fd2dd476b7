import math

import pytest

from turtle3d import colors
from turtle3d.config import TurtleConfig
from turtle3d.errors import (InvalidAngle, InvalidCoordinate, InvalidPenSize,
                             InvalidState)
from turtle3d.geom import dot, mag, pi2, sub, unit
from turtle3d.surface import RecordingSurface
from turtle3d.turtle import PenLine, Turtle

NAN = float("nan")
INF = float("inf")


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def turtle(surface):
    return Turtle(surface)


def _balanced(surface):
    return surface.count("push_transform") == surface.count("pop_transform") \
        and surface.depth == 0


class TestState:

    def test_defaults(self, turtle, surface):
        assert turtle.position == [0, 0, 0, 1]
        assert (turtle.yaw, turtle.pitch, turtle.spin) == (0, 0, 0)
        assert turtle.pen_down
        assert turtle.pen_width == 1.0 and turtle.pen_height == 1.0
        assert turtle.pen_color == colors.WHITE
        assert turtle.pen_line is PenLine.BOX
        assert turtle.parent is None and turtle.child is None
        assert turtle.surface is surface
        assert surface.calls == []

    def test_start_position(self, surface):
        t = Turtle(surface, 1, 2, 3)
        assert t.position == [1, 2, 3, 1]
        assert (t.x, t.y, t.z) == (1, 2, 3)

    def test_position_is_a_copy(self, turtle):
        p = turtle.position
        p[0] = 99
        assert turtle.x == 0

    @pytest.mark.parametrize("angle,expected", [
        (-math.pi / 2, 3 * math.pi / 2),
        (5 * math.pi, math.pi),
        (pi2, 0.0),
        (0.25, 0.25),
    ])
    def test_angles_normalized(self, turtle, angle, expected):
        turtle.yaw = angle
        turtle.pitch = angle
        turtle.spin = angle
        for value in (turtle.yaw, turtle.pitch, turtle.spin):
            assert 0.0 <= value < pi2
            assert value == pytest.approx(expected, abs=1e-12)

    @pytest.mark.parametrize("increment", [0.1, -0.1, 3.0, -7.5, 100.0, -1e-20])
    def test_rotate_increments_stay_in_range(self, turtle, increment):
        for _ in range(25):
            turtle.yaw_rotate(increment)
            turtle.pitch_rotate(increment)
            turtle.spin_rotate(increment)
            for value in (turtle.yaw, turtle.pitch, turtle.spin):
                assert 0.0 <= value < pi2

    @pytest.mark.parametrize("bad", [NAN, INF, -INF])
    def test_bad_angles(self, turtle, bad):
        turtle.yaw = 1.0
        with pytest.raises(InvalidAngle):
            turtle.yaw = bad
        with pytest.raises(InvalidAngle):
            turtle.pitch_rotate(bad)
        with pytest.raises(ValueError):
            turtle.spin = bad
        assert turtle.yaw == 1.0

    @pytest.mark.parametrize("bad", [NAN, INF, -INF])
    def test_bad_coordinates(self, turtle, bad):
        turtle.position = (1, 2, 3)
        with pytest.raises(InvalidCoordinate):
            turtle.x = bad
        with pytest.raises(InvalidCoordinate):
            turtle.position = (0, bad, 0)
        assert turtle.position == [1, 2, 3, 1]

    @pytest.mark.parametrize("bad", [-1, NAN, INF])
    def test_bad_pen_sizes(self, turtle, bad):
        with pytest.raises(InvalidPenSize):
            turtle.pen_width = bad
        with pytest.raises(InvalidPenSize):
            turtle.pen_height = bad
        with pytest.raises(InvalidPenSize):
            turtle.pen_size(bad)
        assert turtle.pen_width == 1.0 and turtle.pen_height == 1.0

    def test_pen_size_and_toggle(self, turtle):
        turtle.pen_size(4)
        assert turtle.pen_width == 4 and turtle.pen_height == 4
        turtle.pen_width = 0
        assert turtle.pen_width == 0
        turtle.toggle_pen()
        assert not turtle.pen_down
        turtle.toggle_pen()
        assert turtle.pen_down

    def test_pen_color_and_line(self, turtle):
        turtle.pen_color = colors.color(1, 2, 3)
        assert turtle.pen_color == colors.color(1, 2, 3)
        with pytest.raises(TypeError):
            turtle.pen_color = "red"
        turtle.pen_line = "line"
        assert turtle.pen_line is PenLine.LINE
        with pytest.raises(ValueError):
            turtle.pen_line = "dashes"

    def test_config_defaults(self, surface):
        cfg = TurtleConfig(pen_width=3, pen_height=2, pen_line=PenLine.LINE, pen_down=False)
        t = Turtle(surface, config=cfg)
        assert t.pen_width == 3 and t.pen_height == 2
        assert t.pen_line is PenLine.LINE
        assert not t.pen_down
        assert t.config is cfg
        with pytest.raises(ValueError):
            Turtle(surface, config={"pen_width": 3})


class TestDirection:

    @pytest.mark.parametrize("yaw", [0.0, 0.7, 2.0, 3.5, 6.0])
    @pytest.mark.parametrize("pitch", [0.0, 0.4, 1.5, 3.0, 5.2])
    def test_direction_is_unit(self, turtle, yaw, pitch):
        turtle.yaw = yaw
        turtle.pitch = pitch
        assert mag(turtle.direction()) == pytest.approx(1.0)

    def test_face_positive_x(self, turtle):
        turtle.face(1, 0, 0)
        assert turtle.yaw == pytest.approx(math.pi / 2)
        assert turtle.pitch == pytest.approx(0.0)
        assert turtle.direction()[:3] == pytest.approx([1, 0, 0], abs=1e-12)

    @pytest.mark.parametrize("target", [(3, -2, 5), (-1, 4, -2), (0, 5, 0),
                                        (0, -5, 0), (-7, 0, 0), (0.1, 0.2, -9)])
    def test_face_points_at_target(self, surface, target):
        t = Turtle(surface, 1, 1, 1)
        t.face(target)
        expected = unit(sub(target, t.position))
        assert dot(t.direction(), expected) == pytest.approx(1.0)
        assert 0.0 <= t.yaw < pi2 and 0.0 <= t.pitch < pi2

    def test_face_two_coordinates_uses_own_z(self, surface):
        t = Turtle(surface, 0, 0, 4)
        t.face(0, 3)
        assert t.direction()[:3] == pytest.approx([0, 1, 0], abs=1e-12)

    def test_face_own_position_is_noop(self, turtle):
        turtle.yaw = 1.0
        turtle.pitch = 2.0
        turtle.face(turtle.position)
        assert (turtle.yaw, turtle.pitch) == (1.0, 2.0)

    def test_face_bad_target(self, turtle):
        with pytest.raises(InvalidCoordinate):
            turtle.face(NAN, 0, 0)
        with pytest.raises(InvalidCoordinate):
            turtle.face(1)

    def test_set_direction(self, turtle):
        turtle.set_direction((0, 0, -2))
        assert turtle.yaw == pytest.approx(math.pi)
        assert turtle.direction()[:3] == pytest.approx([0, 0, -1], abs=1e-12)
        turtle.set_direction((0, 0, 0))
        assert turtle.yaw == pytest.approx(math.pi)

    def test_add_directions(self, turtle):
        turtle.add_directions((1, 0, -1))
        assert turtle.direction()[:3] == pytest.approx([1, 0, 0], abs=1e-12)
        turtle.add_directions((0, 0, 1), (-1, 0, 0))
        assert turtle.direction()[:3] == pytest.approx([0, 0, 1], abs=1e-12)

    def test_add_directions_cancelling(self, turtle):
        turtle.yaw = 0.0
        with pytest.raises(InvalidState):
            turtle.add_directions((0, 0, -1))
        assert turtle.yaw == 0.0 and turtle.pitch == 0.0


class TestMovement:

    def test_forward_box(self, turtle, surface):
        turtle.forward(4)
        assert turtle.position[:3] == pytest.approx([0, 0, 4])
        assert surface.count("draw_box") == 1
        assert _balanced(surface)
        (box,) = surface.primitives()
        assert box.args == (1, 1, 1)
        # far face of the unit box lands at the new position
        assert box.matrix.apply_point([0, 0, 0.5])[:3] == pytest.approx([0, 0, 4])
        assert box.matrix.apply_point([0, 0, -0.5])[:3] == pytest.approx([0, 0, 0])

    def test_forward_line(self, turtle, surface):
        turtle.pen_line = PenLine.LINE
        turtle.pen_width = 3
        turtle.pen_color = colors.RED
        turtle.forward(5)
        (line,) = surface.primitives()
        assert line.name == "draw_line"
        assert line.args == (0, 0, 0, 0, 0, 5)
        names = surface.names()
        assert "stroke_color" in names and "stroke_weight" in names
        assert _balanced(surface)

    def test_forward_along_direction(self, turtle):
        turtle.yaw = 0.6
        turtle.pitch = 0.3
        d = turtle.direction()
        turtle.forward(10)
        assert turtle.position[:3] == pytest.approx([10 * d[0], 10 * d[1], 10 * d[2]])

    def test_pen_up_forward_touches_nothing(self, turtle, surface):
        turtle.pen_down = False
        turtle.forward(10)
        assert turtle.position[:3] == pytest.approx([0, 0, 10])
        assert surface.calls == []

    def test_backward(self, turtle):
        turtle.pen_down = False
        turtle.backward(3)
        assert turtle.position[:3] == pytest.approx([0, 0, -3])

    def test_forward_bad_distance(self, turtle, surface):
        with pytest.raises(InvalidCoordinate):
            turtle.forward(NAN)
        with pytest.raises(InvalidCoordinate):
            turtle.forward(1e308 * 10)
        assert surface.calls == []
        assert turtle.position == [0, 0, 0, 1]

    def test_forward_project_does_not_move(self, turtle, surface):
        turtle.forward_project(7)
        assert turtle.position == [0, 0, 0, 1]
        assert surface.count("draw_box") == 1

    def test_move_to(self, turtle, surface):
        turtle.yaw = 0.3
        turtle.pitch = 1.2
        turtle.move_to((3, 4, 0))
        assert turtle.position == [3, 4, 0, 1.0]
        assert turtle.yaw == 0.3 and turtle.pitch == 1.2
        assert surface.count("draw_box") == 1
        scales = [c.args for c in surface.calls if c.name == "scale"]
        assert scales == [(1.0, 1.0, 5.0)]
        (box,) = surface.primitives()
        assert box.matrix.apply_point([0, 0, 0.5])[:3] == pytest.approx([3, 4, 0])
        assert _balanced(surface)

    def test_move_to_exact_position(self, surface):
        t = Turtle(surface, 0.1, 0.2, 0.3)
        t.move_to(0.7, 1.9, -2.3)
        assert t.position == [0.7, 1.9, -2.3, 1.0]

    def test_move_to_two_coordinates(self, surface):
        t = Turtle(surface, 0, 0, 2)
        t.pen_down = False
        t.move_to(5, 5)
        assert t.position == [5, 5, 2, 1.0]

    def test_move_to_bad_target(self, turtle, surface):
        with pytest.raises(InvalidCoordinate):
            turtle.move_to(1, INF, 0)
        assert surface.calls == []
        assert turtle.position == [0, 0, 0, 1]

    def test_move_to_far_target_with_pen_up(self, surface):
        # the distance overflows even though both ends are finite
        t = Turtle(surface, -1e308, 0, 0)
        t.pen_down = False
        t.move_to(1e308, 0, 0)
        assert t.position == [1e308, 0, 0, 1.0]
        assert surface.calls == []

    def test_forward_project_pen_up_skips_distance(self, turtle, surface):
        turtle.pen_down = False
        turtle.forward_project(INF)
        assert surface.calls == []

    def test_move_to_far_target_with_pen_down(self, surface):
        t = Turtle(surface, -1e308, 0, 0)
        t.yaw = 0.4
        with pytest.raises(InvalidCoordinate):
            t.move_to(1e308, 0, 0)
        assert t.position == [-1e308, 0, 0, 1.0]
        assert t.yaw == 0.4
        assert surface.calls == []

    def test_imitate(self, turtle, surface):
        other = Turtle(surface, 2, 0, 0)
        other.yaw = 1.0
        other.pitch = 0.5
        turtle.imitate(other)
        assert turtle.position == other.position
        assert (turtle.yaw, turtle.pitch) == (1.0, 0.5)
        assert surface.count("draw_box") == 1


class TestMarkers:

    def test_dot(self, turtle, surface):
        turtle.pen_width = 2
        turtle.dot()
        assert [c.args for c in surface.primitives()] == [(3.0,)]
        turtle.dot(0.5)
        assert surface.count("draw_sphere") == 2
        assert _balanced(surface)
        with pytest.raises(InvalidPenSize):
            turtle.dot(-1)

    def test_dot_pen_up(self, turtle, surface):
        turtle.pen_down = False
        turtle.dot()
        assert surface.calls == []

    def test_mark_draws_with_pen_up(self, turtle, surface):
        turtle.pen_down = False
        turtle.yaw = 0.5
        turtle.mark(2)
        assert surface.count("draw_circle") == 2
        assert surface.count("draw_line") == 2
        assert [c.args for c in surface.primitives() if c.name == "draw_circle"] == [(4,), (4,)]
        assert _balanced(surface)

    def test_mark_skips_own_rotation(self, surface):
        t = Turtle(surface, 1, 2, 3)
        t.yaw = 0.5
        t.pitch = 0.25
        t.spin = 1.0
        t.mark()
        rotations = [c for c in surface.calls if c.name.startswith("rotate")]
        # only the explicit marker rotations are issued
        assert [c.name for c in rotations] == ["rotatey", "rotatex", "rotatey", "rotatez"]
        assert rotations[0].args == (0.5,)
        assert rotations[-1].args == (0.25,)


class TestClone:

    def test_clone_copies_state(self, turtle):
        turtle.position = (1, 2, 3)
        turtle.yaw = 0.1
        turtle.pitch = 0.2
        turtle.spin = 0.3
        turtle.pen_down = False
        turtle.pen_color = colors.BLUE
        turtle.pen_width = 5
        turtle.pen_height = 6
        turtle.pen_line = PenLine.LINE
        child = turtle.assign_child()
        c = turtle.clone()
        assert c is not turtle
        assert c.position == turtle.position
        assert (c.yaw, c.pitch, c.spin) == (0.1, 0.2, 0.3)
        assert not c.pen_down
        assert c.pen_color == colors.BLUE
        assert (c.pen_width, c.pen_height) == (5, 6)
        assert c.pen_line is PenLine.LINE
        assert c.child is None and c.parent is None
        assert child.parent is turtle

    def test_clone_of_child_is_root(self, turtle):
        child = turtle.assign_child()
        assert child.clone().parent is None

    def test_clone_is_independent(self, turtle):
        c = turtle.clone()
        c.x = 10
        assert turtle.x == 0
