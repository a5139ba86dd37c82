# canvas_qt/board/core/styles.py
"""
Hằng số giao diện bảng vẽ: bảng màu, kiểu nét theo công cụ, kích thước mặc định
"""
from __future__ import annotations
from typing import Optional
from canvas_qt.board.core.data_models import LineStyle, Tool

# ========== PALETTES ==========
CIRCLE_COLORS = ["red", "orange", "yellow", "green", "blue", "purple", "black"]

LINE_COLORS = [
    ("Đen", "black"),
    ("Đỏ", "red"),
    ("Xanh dương", "blue"),
    ("Xanh lá", "green"),
    ("Cam", "orange"),
    ("Tím", "purple"),
]

# Màu mặc định khi chưa chọn màu nét
DEFAULT_TOOL_COLORS = {
    Tool.SOLID: "red",
    Tool.DASHED: "black",
    Tool.DOTTED: "blue",
}

DASH_PATTERNS = {
    Tool.DASHED: (10, 5),
    Tool.DOTTED: (3, 3),
}

STROKE_WIDTH = 2
LINE_CAP = "round"

# ========== SHAPES ==========
SHAPE_ORIGIN = (50, 50)
RECT_SIZE = (50, 50)
CIRCLE_RADIUS = 25
TRIANGLE_RADIUS = 40
SHAPE_OUTLINE = "black"
SHAPE_OUTLINE_WIDTH = 1
SHAPE_FILL = "white"


def get_style(tool: Tool, line_color: Optional[str] = None) -> LineStyle:
    """Kiểu nét cho công cụ. Tool.NONE rơi về kiểu nét liền."""
    base = tool if tool in DEFAULT_TOOL_COLORS else Tool.SOLID
    return LineStyle(
        stroke_color=line_color or DEFAULT_TOOL_COLORS[base],
        stroke_width=STROKE_WIDTH,
        dash=DASH_PATTERNS.get(tool),
        line_cap=LINE_CAP,
    )
