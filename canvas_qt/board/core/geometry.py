from __future__ import annotations
import math
from typing import List, Tuple
from canvas_qt.board.core.data_models import Circle, Rectangle, Triangle

Point = Tuple[float, float]
Size = Tuple[float, float]


def clamp_position(pos: Point, size: Size, stage: Size) -> Point:
    """Giữ tâm hình sao cho khung bao nằm trọn trong bảng vẽ (từng trục độc lập)."""
    (x, y), (w, h), (sw, sh) = pos, size, stage
    min_x, max_x = w / 2, sw - w / 2
    min_y, max_y = h / 2, sh - h / 2
    return max(min_x, min(x, max_x)), max(min_y, min(y, max_y))


def shape_size(shape) -> Size:
    """Kích thước khung bao của hình"""
    if isinstance(shape, Rectangle):
        return shape.width, shape.height
    if isinstance(shape, (Circle, Triangle)):
        # tam giác đều nội tiếp đường tròn bán kính r → dùng khung của đường tròn
        return 2 * shape.radius, 2 * shape.radius
    return 0.0, 0.0


def triangle_vertices(x: float, y: float, radius: float) -> List[Point]:
    """3 đỉnh tam giác đều tâm (x, y), đỉnh đầu hướng lên trên."""
    pts = []
    for i in range(3):
        angle = 2 * math.pi * i / 3
        pts.append((x + radius * math.sin(angle), y - radius * math.cos(angle)))
    return pts


def hit_test(shape, pos: Point) -> bool:
    px, py = pos
    if isinstance(shape, Rectangle):
        return abs(px - shape.x) <= shape.width / 2 and abs(py - shape.y) <= shape.height / 2
    if isinstance(shape, Circle):
        return (px - shape.x) ** 2 + (py - shape.y) ** 2 <= shape.radius ** 2
    if isinstance(shape, Triangle):
        (ax, ay), (bx, by), (cx, cy) = triangle_vertices(shape.x, shape.y, shape.radius)
        d1 = (px - bx) * (ay - by) - (ax - bx) * (py - by)
        d2 = (px - cx) * (by - cy) - (bx - cx) * (py - cy)
        d3 = (px - ax) * (cy - ay) - (cx - ax) * (py - ay)
        has_neg = d1 < 0 or d2 < 0 or d3 < 0
        has_pos = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_neg and has_pos)
    return False
