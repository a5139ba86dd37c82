import math

import pytest

from canvas_qt.board.core.data_models import Circle, Rectangle, Tool, Triangle
from canvas_qt.board.core.geometry import clamp_position, hit_test, shape_size, triangle_vertices
from canvas_qt.board.core.styles import get_style


def test_clamp_inside_is_identity():
    assert clamp_position((100, 120), (50, 50), (800, 600)) == (100, 120)


@pytest.mark.parametrize("pos, expected", [
    ((-1000, -1000), (25, 10)),
    ((5000, 5000), (775, 590)),
    ((-5, 300), (25, 300)),
    ((400, 9999), (400, 590)),
])
def test_clamp_each_axis_independently(pos, expected):
    assert clamp_position(pos, (50, 20), (800, 600)) == expected


def test_shape_sizes():
    assert shape_size(Rectangle(0, 0, 30, 40)) == (30, 40)
    assert shape_size(Circle(0, 0, 25)) == (50, 50)
    assert shape_size(Triangle(0, 0, 40)) == (80, 80)


def test_triangle_vertices_point_up_and_sit_on_radius():
    pts = triangle_vertices(50, 50, 40)
    assert pts[0] == pytest.approx((50, 10))
    for x, y in pts:
        assert math.hypot(x - 50, y - 50) == pytest.approx(40)


def test_hit_test():
    assert hit_test(Rectangle(50, 50, 50, 50), (70, 30))
    assert not hit_test(Rectangle(50, 50, 50, 50), (80, 50))
    assert hit_test(Circle(50, 50, 25), (50, 74))
    assert not hit_test(Circle(50, 50, 25), (70, 70))
    assert hit_test(Triangle(50, 50, 40), (50, 50))
    assert not hit_test(Triangle(50, 50, 40), (15, 15))


@pytest.mark.parametrize("tool, color, dash", [
    (Tool.SOLID, "red", None),
    (Tool.DASHED, "black", (10, 5)),
    (Tool.DOTTED, "blue", (3, 3)),
])
def test_get_style_defaults(tool, color, dash):
    style = get_style(tool)
    assert style.stroke_color == color
    assert style.dash == dash
    assert style.stroke_width == 2
    assert style.line_cap == "round"


def test_get_style_uses_configured_color():
    assert get_style(Tool.DOTTED, "purple").stroke_color == "purple"
    assert get_style(Tool.DOTTED, "purple").dash == (3, 3)


def test_get_style_without_tool_falls_back_to_solid():
    assert get_style(Tool.NONE) == get_style(Tool.SOLID)
