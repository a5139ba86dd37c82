from __future__ import annotations
from PySide6 import QtWidgets
from PySide6.QtCore import Signal
from PySide6.QtGui import QAction, QActionGroup, QKeySequence

from canvas_qt.board.core.styles import CIRCLE_COLORS, LINE_COLORS


class BoardToolbar(QtWidgets.QToolBar):
    # ==== Signals (Window sẽ connect) ====
    toolChanged = Signal(str)               # "solid"|"dashed"|"dotted"
    shapeRequested = Signal(str, str)       # (kind, màu tô)
    lineColorPicked = Signal(str)           # "" = màu mặc định theo công cụ
    requestUndo = Signal()

    def __init__(self, parent=None, init_line_color: str = ""):
        super().__init__("Tools", parent)
        self.setMovable(False)

        # Swatch màu → thêm hình tròn
        self.swatches = []
        for color in CIRCLE_COLORS:
            btn = QtWidgets.QToolButton(self)
            btn.setFixedSize(28, 28)
            btn.setToolTip(f"Thêm hình tròn {color}")
            btn.setStyleSheet(f"background-color: {color}; border-radius: 14px; border: 1px solid #444;")
            btn.clicked.connect(lambda _=False, c=color: self.shapeRequested.emit("circle", c))
            self.addWidget(btn); self.swatches.append(btn)

        self.addSeparator()

        # Hình
        self.act_rect = self._act("▭ Thêm hình chữ nhật", lambda: self.shapeRequested.emit("rectangle", "white"))
        self.act_triangle = self._act("△ Thêm tam giác", lambda: self.shapeRequested.emit("triangle", "white"))
        self.addAction(self.act_rect); self.addAction(self.act_triangle)

        self.addSeparator()

        # Kiểu nét (loại trừ nhau)
        group = QActionGroup(self); group.setExclusive(True)
        self.act_solid = QAction("━ Nét liền", self, checkable=True)
        self.act_dashed = QAction("╍ Nét đứt", self, checkable=True)
        self.act_dotted = QAction("┈ Nét chấm", self, checkable=True)
        self._tool_actions = {"solid": self.act_solid, "dashed": self.act_dashed, "dotted": self.act_dotted}
        for name, act in self._tool_actions.items():
            group.addAction(act)
            act.triggered.connect(lambda _=False, n=name: self.toolChanged.emit(n))
            self.addAction(act)
        self._tool_group = group

        self.addSeparator()

        a_undo = self._act("↶ Hoàn tác", self.requestUndo.emit); a_undo.setShortcut(QKeySequence.Undo)
        self.act_undo = a_undo; self.addAction(a_undo)

        self.addSeparator()

        # Màu nét
        self.addWidget(QtWidgets.QLabel("Màu nét: "))
        self.cmb_line_color = QtWidgets.QComboBox(self)
        self.cmb_line_color.addItem("Mặc định", "")
        for label, value in LINE_COLORS:
            self.cmb_line_color.addItem(label, value)
        idx = self.cmb_line_color.findData(init_line_color or "")
        self.cmb_line_color.setCurrentIndex(max(0, idx))
        self.cmb_line_color.currentIndexChanged.connect(
            lambda i: self.lineColorPicked.emit(self.cmb_line_color.itemData(i) or ""))
        self.addWidget(self.cmb_line_color)

    # ---- helpers ----
    def _act(self, text, slot):
        a = QAction(text, self); a.triggered.connect(slot); return a

    # Window đồng bộ lại nút khi công cụ bị bỏ chọn từ ngoài (thêm/kéo hình)
    def reflect_tool(self, name: str):
        self._tool_group.setExclusive(False)
        for n, act in self._tool_actions.items():
            act.setChecked(n == name)
        self._tool_group.setExclusive(True)

    def reflect_undo(self, enabled: bool):
        self.act_undo.setEnabled(enabled)
