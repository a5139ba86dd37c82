from __future__ import annotations
from typing import Optional, Sequence, Tuple
import logging

from PySide6 import QtCore, QtGui
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter, QPen

from canvas_qt.board.core.data_models import Circle, Entity, Line, LineStyle, Rectangle, Shape, Triangle
from canvas_qt.board.core.geometry import triangle_vertices
from canvas_qt.board.core import styles

logger = logging.getLogger(__name__)

_CAPS = {"round": Qt.RoundCap, "square": Qt.SquareCap, "butt": Qt.FlatCap}


def make_pen(style: LineStyle) -> QPen:
    pen = QPen(QColor(style.stroke_color), style.stroke_width, Qt.SolidLine,
               _CAPS.get(style.line_cap, Qt.RoundCap), Qt.RoundJoin)
    if style.dash:
        # QPen đo dash theo bội số độ dày nét, dash lưu theo pixel
        w = max(1, style.stroke_width)
        pen.setDashPattern([d / w for d in style.dash])
    return pen


class EntityRenderer:
    """Vẽ danh sách entity theo thứ tự commit; nét đang vẽ nằm trên cùng."""

    def render(self, p: QPainter, entities: Sequence[Entity],
               stroke: Sequence[float] = (), stroke_style: Optional[LineStyle] = None,
               moving: Optional[Tuple[int, Shape]] = None):
        for i, e in enumerate(entities):
            if moving is not None and moving[0] == i:
                e = moving[1]
            self.draw_entity(p, e)

        if stroke and stroke_style is not None:
            self.draw_line(p, stroke, stroke_style)

    def draw_entity(self, p: QPainter, e: Entity):
        if isinstance(e, Line):
            self.draw_line(p, e.points, e.style)
        elif isinstance(e, Rectangle):
            self._outline(p, styles.SHAPE_FILL)
            p.drawRect(QtCore.QRectF(e.x - e.width / 2, e.y - e.height / 2, e.width, e.height))
        elif isinstance(e, Circle):
            self._outline(p, e.fill)
            p.drawEllipse(QtCore.QPointF(e.x, e.y), e.radius, e.radius)
        elif isinstance(e, Triangle):
            self._outline(p, styles.SHAPE_FILL)
            p.drawPolygon([QtCore.QPointF(x, y) for x, y in triangle_vertices(e.x, e.y, e.radius)])
        else:
            logger.debug(f"Bỏ qua entity không rõ loại: {type(e).__name__}")

    def draw_line(self, p: QPainter, points: Sequence[float], style: LineStyle):
        if len(points) < 4:
            return
        path = QtGui.QPainterPath(QtCore.QPointF(points[0], points[1]))
        for i in range(2, len(points) - 1, 2):
            path.lineTo(QtCore.QPointF(points[i], points[i + 1]))
        p.setPen(make_pen(style))
        p.setBrush(Qt.NoBrush)
        p.drawPath(path)

    def _outline(self, p: QPainter, fill: str):
        p.setPen(QPen(QColor(styles.SHAPE_OUTLINE), styles.SHAPE_OUTLINE_WIDTH))
        p.setBrush(QColor(fill))
