from PySide6 import QtCore, QtGui
from PySide6.QtGui import QImage, QPainter
from PySide6.QtCore import Qt

from canvas_qt.board.core.data_models import Circle, Line, Rectangle, Tool, Triangle
from canvas_qt.board.core.renderer import EntityRenderer, make_pen
from canvas_qt.board.core.styles import get_style


class RecordingPainter:
    """Ghi lại các lệnh vẽ thay cho QPainter"""

    def __init__(self):
        self.calls = []
        self.pen = None
        self.brush = None

    def setPen(self, pen): self.pen = pen
    def setBrush(self, brush): self.brush = brush
    def drawPath(self, path): self.calls.append(("path", path.elementCount(), self.pen))
    def drawRect(self, rect): self.calls.append(("rect", rect, self.brush))
    def drawEllipse(self, center, rx, ry): self.calls.append(("ellipse", (center.x(), center.y(), rx), self.brush))
    def drawPolygon(self, pts): self.calls.append(("polygon", len(pts), self.brush))


def _line(points, tool=Tool.SOLID):
    return Line(points=tuple(points), style=get_style(tool))


def test_renders_in_committed_order_with_stroke_on_top():
    p = RecordingPainter()
    entities = [_line([0, 0, 10, 10]), Rectangle(50, 50), Circle(60, 60, 25, "green"), Triangle(70, 70)]
    EntityRenderer().render(p, entities, stroke=(1, 1, 2, 2, 3, 3), stroke_style=get_style(Tool.DASHED))

    kinds = [c[0] for c in p.calls]
    assert kinds == ["path", "rect", "ellipse", "polygon", "path"]
    assert p.calls[-1][1] == 3


def test_rectangle_is_centered_on_position():
    p = RecordingPainter()
    EntityRenderer().render(p, [Rectangle(50, 50, 50, 50)])
    rect = p.calls[0][1]
    assert rect == QtCore.QRectF(25, 25, 50, 50)


def test_circle_uses_its_fill():
    p = RecordingPainter()
    EntityRenderer().render(p, [Circle(10, 20, 25, "green")])
    _, geom, brush = p.calls[0]
    assert geom == (10, 20, 25)
    assert QtGui.QColor(brush) == QtGui.QColor("green")


def test_short_lines_and_unknown_entities_render_nothing():
    p = RecordingPainter()
    EntityRenderer().render(p, [_line([]), _line([5, 5]), object()])
    assert p.calls == []


def test_stroke_without_style_is_not_drawn():
    p = RecordingPainter()
    EntityRenderer().render(p, [], stroke=(1, 1, 2, 2))
    assert p.calls == []


def test_moving_shape_drawn_at_preview_position_in_place():
    p = RecordingPainter()
    entities = [Circle(10, 10, 5), Rectangle(50, 50, 10, 10)]
    EntityRenderer().render(p, entities, moving=(0, Circle(200, 100, 5)))
    assert p.calls[0][0] == "ellipse" and p.calls[0][1] == (200, 100, 5)
    assert p.calls[1][0] == "rect"


def test_make_pen_scales_dash_by_width():
    pen = make_pen(get_style(Tool.DASHED))
    assert pen.width() == 2
    assert pen.capStyle() == Qt.RoundCap
    assert list(pen.dashPattern()) == [5.0, 2.5]
    assert make_pen(get_style(Tool.SOLID)).style() == Qt.SolidLine


def test_render_onto_image(qapp):
    img = QImage(100, 100, QImage.Format_ARGB32_Premultiplied)
    img.fill(Qt.white)
    p = QPainter(img)
    EntityRenderer().render(p, [Circle(50, 50, 25, "red")])
    p.end()
    assert img.pixelColor(50, 50).name() == "#ff0000"
    assert img.pixelColor(2, 2).name() == "#ffffff"
