from __future__ import annotations
from PySide6 import QtCore, QtGui, QtWidgets
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QPainter
import logging

from canvas_qt.board.core.renderer import EntityRenderer

logger = logging.getLogger(__name__)


class CanvasWidget(QtWidgets.QWidget):
    """Canvas: vẽ danh sách entity từ BoardState, chuyển sự kiện chuột cho tool kéo hình hoặc bút."""
    def __init__(self, win: 'DrawingBoardWindowQt', width: int, height: int):
        super().__init__(win)
        self.win = win
        self.setAttribute(Qt.WA_OpaquePaintEvent, False)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)

        # kích thước cố định theo viewport lúc mở, không đổi khi resize
        self.virtual_w = int(width)
        self.virtual_h = int(height)
        self.setMinimumSize(self.virtual_w, self.virtual_h)

        self.renderer = EntityRenderer()
        self._gesture_tool = None

    def sizeHint(self) -> QtCore.QSize: return QSize(self.virtual_w, self.virtual_h)

    def stage_size(self):
        return float(self.virtual_w), float(self.virtual_h)

    # ---- paint ----
    def paintEvent(self, e: QtGui.QPaintEvent):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)
        p.fillRect(self.rect(), Qt.white)
        state = self.win.state
        try:
            self.renderer.render(
                p, state.entities,
                stroke=state.current_points,
                stroke_style=state.current_style() if state.drawing else None,
                moving=self.win.drag_tool.moving(),
            )
        except Exception as ex:
            logger.warning(f"Lỗi vẽ canvas: {ex}")
        finally:
            p.end()

    def reflect_drawing(self):
        self.setCursor(Qt.CrossCursor if self.win.state.drawing else Qt.ArrowCursor)

    # ---- events → drag tool (nếu trúng hình) hoặc bút ----
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if self.win.drag_tool.mousePressEvent(e):
            self._gesture_tool = self.win.drag_tool
        else:
            self._gesture_tool = self.win.pen_tool
            self.win.pen_tool.mousePressEvent(e)

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        (self._gesture_tool or self.win.pen_tool).mouseMoveEvent(e)

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        tool = self._gesture_tool or self.win.pen_tool
        self._gesture_tool = None
        tool.mouseReleaseEvent(e)
