from __future__ import annotations
from collections import deque
from dataclasses import replace
from typing import List, Optional, Tuple
import logging
import math

from canvas_qt.board.core.data_models import (
    Circle, Entity, Line, Rectangle, Shape, Tool, Triangle, is_shape,
)
from canvas_qt.board.core.geometry import clamp_position, shape_size
from canvas_qt.board.core import styles

logger = logging.getLogger(__name__)

Snapshot = Tuple[Shape, ...]


class BoardState:
    """Máy trạng thái tương tác: công cụ, nét đang vẽ, danh sách đã commit, lịch sử hình.

    Trạng thái: Idle (không công cụ) → ToolSelected(tool) → Drawing(tool, points).
    Undo khôi phục snapshot gần nhất của danh sách hình; nét vẽ không nằm trong lịch sử.
    """
    def __init__(self, stage_size: Optional[Tuple[float, float]] = None, clamp: bool = True,
                 max_history: int = 50, line_color: Optional[str] = None):
        self._entities: List[Entity] = []
        self._history = ShapeHistory(max_history)
        self._tool: Tool = Tool.NONE
        self._drawing = False
        self._points: List[float] = []
        self.stage_size = stage_size
        self.clamp = clamp
        self.line_color = line_color

    # --------- views ----------
    @property
    def tool(self) -> Tool: return self._tool
    @property
    def drawing(self) -> bool: return self._drawing
    @property
    def current_points(self) -> Tuple[float, ...]: return tuple(self._points)
    @property
    def entities(self) -> Tuple[Entity, ...]: return tuple(self._entities)
    @property
    def history(self) -> "ShapeHistory": return self._history

    def lines(self) -> List[Line]:  return [e for e in self._entities if isinstance(e, Line)]
    def shapes(self) -> List[Shape]: return [e for e in self._entities if is_shape(e)]

    def clamp_stage(self) -> Tuple[float, float]:
        """Kích thước dùng để giới hạn kéo; chưa biết kích thước bảng vẽ thì chỉ giữ cận trên-trái."""
        return self.stage_size or (math.inf, math.inf)

    def current_style(self):
        return styles.get_style(self._tool, self.line_color)

    # --------- freehand ----------
    def select_tool(self, tool) -> None:
        """Chọn kiểu nét; không ảnh hưởng các điểm đã có của nét đang vẽ."""
        self._tool = Tool(tool)
        logger.debug(f"Chọn công cụ: {self._tool.value or 'none'}")

    def clear_tool(self) -> None:
        self._tool = Tool.NONE

    def pointer_down(self) -> None:
        if self._tool is Tool.NONE:
            return
        self._drawing = True
        self._points = []

    def pointer_move(self, x: float, y: float) -> None:
        if not self._drawing:
            return
        self._points.extend((x, y))

    def pointer_up(self) -> Optional[Line]:
        if not self._drawing:
            return None
        self._drawing = False
        points, self._points = tuple(self._points), []
        if self._tool is Tool.NONE:
            # công cụ bị bỏ chọn giữa chừng (thêm hình khi đang vẽ) → bỏ nét
            logger.debug("Bỏ nét đang vẽ vì không còn công cụ")
            return None
        line = Line(points=points, style=self.current_style())
        self._entities.append(line)
        logger.debug(f"Commit nét {self._tool.value}: {len(points) // 2} điểm")
        return line

    # --------- shapes ----------
    def add_shape(self, kind: str, color: str = styles.SHAPE_FILL) -> Optional[Shape]:
        x, y = styles.SHAPE_ORIGIN
        if kind == "rectangle":
            w, h = styles.RECT_SIZE
            shape = Rectangle(x=x, y=y, width=w, height=h)
        elif kind == "circle":
            shape = Circle(x=x, y=y, radius=styles.CIRCLE_RADIUS, fill=color or styles.SHAPE_FILL)
        elif kind == "triangle":
            shape = Triangle(x=x, y=y, radius=styles.TRIANGLE_RADIUS)
        else:
            logger.warning(f"Loại hình không hỗ trợ: {kind!r}")
            return None

        self._history.push(self._snapshot())
        self._entities.append(shape)
        self.clear_tool()
        logger.debug(f"Thêm hình {kind} (uid={shape.uid})")
        return shape

    def drag_end(self, index: int, x: float, y: float) -> Optional[Shape]:
        if not (0 <= index < len(self._entities)) or not is_shape(self._entities[index]):
            logger.warning(f"drag_end: index {index} không phải hình")
            return None

        shape = self._entities[index]
        if self.clamp:
            x, y = clamp_position((x, y), shape_size(shape), self.clamp_stage())

        self._history.push(self._snapshot())
        self._entities[index] = replace(shape, x=x, y=y)
        self.clear_tool()
        return self._entities[index]

    def undo(self) -> bool:
        """Khôi phục danh sách hình về snapshot gần nhất. Trả về False nếu không có gì để undo."""
        snapshot = self._history.pop()
        if snapshot is None:
            return False

        by_uid = {s.uid: s for s in snapshot}
        restored: List[Entity] = []
        for e in self._entities:
            if not is_shape(e):
                restored.append(e)
            elif e.uid in by_uid:
                restored.append(replace(by_uid[e.uid]))
        self._entities = restored
        logger.debug(f"Undo → {len(snapshot)} hình")
        return True

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def _snapshot(self) -> Snapshot:
        return tuple(replace(s) for s in self._entities if is_shape(s))


class ShapeHistory:
    """Ngăn xếp snapshot danh sách hình (có giới hạn)"""

    def __init__(self, max_history: int = 50):
        self.max_history = max_history
        self.undo_stack = deque(maxlen=max_history)

    def push(self, snapshot: Snapshot):
        self.undo_stack.append(snapshot)

    def pop(self) -> Optional[Snapshot]:
        if not self.can_undo():
            return None
        return self.undo_stack.pop()

    def can_undo(self) -> bool:
        return len(self.undo_stack) > 0

    def __len__(self) -> int:
        return len(self.undo_stack)
