from __future__ import annotations
from dataclasses import replace
from typing import Optional, Tuple
from PySide6 import QtGui
from PySide6.QtCore import Qt

from canvas_qt.board.core.data_models import Shape, is_shape
from canvas_qt.board.core.geometry import clamp_position, hit_test, shape_size


class DragTool:
    """Kéo hình: giữ vị trí tạm khi đang kéo, commit bằng drag_end khi thả chuột.

    Hình được theo dõi bằng uid; index tra lại ở mỗi bước vì danh sách có thể đổi giữa chừng (undo).
    """

    def __init__(self, win: 'DrawingBoardWindowQt'):
        self.win = win
        self._drag_uid: Optional[int] = None
        self._drag_offset: Tuple[float, float] = (0.0, 0.0)
        self._preview: Optional[Shape] = None

    def hit_shape(self, x: float, y: float) -> Optional[int]:
        """Index của hình trên cùng chứa điểm (x, y)"""
        entities = self.win.state.entities
        for i in range(len(entities) - 1, -1, -1):
            if is_shape(entities[i]) and hit_test(entities[i], (x, y)):
                return i
        return None

    def _resolve(self) -> Optional[int]:
        """Index hiện tại của hình đang kéo; None nếu hình đã bị gỡ"""
        if self._drag_uid is None:
            return None
        for i, e in enumerate(self.win.state.entities):
            if is_shape(e) and e.uid == self._drag_uid:
                return i
        return None

    def cancel(self):
        self._drag_uid = None; self._preview = None

    def moving(self) -> Optional[Tuple[int, Shape]]:
        if self._preview is None:
            return None
        idx = self._resolve()
        if idx is None:
            return None
        return idx, self._preview

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> bool:
        if e.button() != Qt.LeftButton:
            return False
        pos = e.position()
        idx = self.hit_shape(pos.x(), pos.y())
        if idx is None:
            return False
        shape = self.win.state.entities[idx]
        self._drag_uid = shape.uid
        self._drag_offset = (pos.x() - shape.x, pos.y() - shape.y)
        self._preview = None
        # click lên hình bỏ chọn công cụ nét
        self.win.state.clear_tool()
        self.win.reflect_tool()
        return True

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        idx = self._resolve()
        if idx is None:
            self.cancel()
            return
        pos = e.position()
        shape = self.win.state.entities[idx]
        x, y = pos.x() - self._drag_offset[0], pos.y() - self._drag_offset[1]
        if self.win.state.clamp:
            x, y = clamp_position((x, y), shape_size(shape), self.win.state.clamp_stage())
        self._preview = replace(shape, x=x, y=y)
        self.win.canvas.update()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() != Qt.LeftButton:
            return
        idx, preview = self._resolve(), self._preview
        self.cancel()
        if idx is not None and preview is not None:
            self.win.state.drag_end(idx, preview.x, preview.y)
            self.win.reflect_tool()
        self.win.canvas.update()
