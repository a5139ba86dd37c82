from __future__ import annotations
from PySide6 import QtGui
from PySide6.QtCore import Qt


class PenTool:
    """Công cụ nét tự do: chuyển sự kiện chuột thành pointer_down/move/up của BoardState"""

    def __init__(self, win: 'DrawingBoardWindowQt'):
        self.win = win

    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() != Qt.LeftButton:
            return
        self.win.state.pointer_down()
        self.win.canvas.reflect_drawing()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        if not self.win.state.drawing:
            return
        pos = e.position()
        self.win.state.pointer_move(pos.x(), pos.y())
        self.win.canvas.update()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() != Qt.LeftButton:
            return
        self.win.state.pointer_up()
        self.win.canvas.reflect_drawing()
        self.win.canvas.update()
