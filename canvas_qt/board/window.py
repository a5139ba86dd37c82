from __future__ import annotations
from typing import Optional, Tuple
import logging

from PySide6 import QtWidgets

from canvas_qt.board.core.canvas_widget import CanvasWidget
from canvas_qt.board.settings import BoardSettings
from canvas_qt.board.state.board_state import BoardState
from canvas_qt.board.tools.drag_tool import DragTool
from canvas_qt.board.tools.pen_tool import PenTool
from canvas_qt.board.ui.toolbar import BoardToolbar

logger = logging.getLogger(__name__)


class DrawingBoardWindowQt(QtWidgets.QMainWindow):
    """Cửa sổ chính – điều phối state/canvas/toolbar, giữ QSettings."""
    def __init__(self, parent=None, settings: Optional[BoardSettings] = None,
                 state: Optional[BoardState] = None,
                 stage_size: Optional[Tuple[int, int]] = None):
        super().__init__(parent)
        self.setWindowTitle("✨ Bảng vẽ (Qt)")
        self.resize(1200, 800)

        # ---- settings ----
        self.settings = settings or BoardSettings.load()

        # ---- state ----
        w, h = stage_size or self._viewport_stage_size()
        self.state = state or BoardState(
            clamp=self.settings.clamp_drag,
            max_history=self.settings.max_history,
            line_color=self.settings.line_color or None,
        )
        self.state.stage_size = (float(w), float(h))

        # ---- tools ----
        self.pen_tool = PenTool(self)
        self.drag_tool = DragTool(self)

        # ---- UI ----
        self._build_ui(w, h)
        self.reflect_tool()
        logger.info(f"Mở bảng vẽ {w}x{h}, clamp={self.state.clamp}")

    def _viewport_stage_size(self) -> Tuple[int, int]:
        """Kích thước cửa sổ chủ lúc mở (không theo dõi resize); chiều cao nhân hệ số."""
        return self.width(), self.height() * self.settings.stage_height_factor

    # ========== UI ==========
    def _build_ui(self, w: int, h: int):
        self.toolbar = BoardToolbar(self, init_line_color=self.settings.line_color)
        self.addToolBar(self.toolbar)

        self.toolbar.toolChanged.connect(self.select_tool)
        self.toolbar.shapeRequested.connect(self.add_shape)
        self.toolbar.lineColorPicked.connect(self._on_line_color)
        self.toolbar.requestUndo.connect(self.undo)

        # Central canvas + scroll
        self.scroll = QtWidgets.QScrollArea(self)
        self.scroll.setWidgetResizable(False)
        self.canvas = CanvasWidget(self, w, h)
        self.canvas.resize(w, h)
        self.scroll.setWidget(self.canvas)
        self.setCentralWidget(self.scroll)

    # ========== actions ==========
    def select_tool(self, name: str):
        self.state.select_tool(name)
        self.reflect_tool()

    def add_shape(self, kind: str, color: str = "white"):
        if self.state.add_shape(kind, color) is not None:
            self.reflect_tool()
            self.canvas.update()

    def undo(self):
        if self.state.undo():
            self.canvas.update()
        self.reflect_tool()

    def _on_line_color(self, color: str):
        self.state.line_color = color or None
        self.settings.line_color = color
        self.settings.save()
        self.canvas.update()

    def reflect_tool(self):
        self.toolbar.reflect_tool(self.state.tool.value)
        self.toolbar.reflect_undo(self.state.can_undo())
