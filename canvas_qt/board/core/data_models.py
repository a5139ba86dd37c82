from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from itertools import count
from typing import Optional, Tuple, Union

_uids = count(1)


class Tool(Enum):
    """Kiểu nét tự do đang chọn"""
    NONE = ""
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"

    @classmethod
    def _missing_(cls, value):
        # "none" là tên gọi của trạng thái không có công cụ
        if isinstance(value, str) and value.strip().lower() == "none":
            return cls.NONE
        return None


@dataclass(frozen=True)
class LineStyle:
    stroke_color: str
    stroke_width: int = 2
    dash: Optional[Tuple[int, ...]] = None   # None = nét liền
    line_cap: str = "round"


# Nét tự do: points là dãy phẳng x0, y0, x1, y1, ...
@dataclass(frozen=True)
class Line:
    points: Tuple[float, ...]
    style: LineStyle


# Hình: (x, y) là TÂM của hình; uid giữ định danh qua các lần kéo/undo
@dataclass
class Rectangle:
    x: float
    y: float
    width: float = 50
    height: float = 50
    uid: int = field(default_factory=lambda: next(_uids))
    kind = "rectangle"


@dataclass
class Circle:
    x: float
    y: float
    radius: float = 25
    fill: str = "white"
    uid: int = field(default_factory=lambda: next(_uids))
    kind = "circle"


@dataclass
class Triangle:
    x: float
    y: float
    radius: float = 40
    uid: int = field(default_factory=lambda: next(_uids))
    kind = "triangle"


Shape = Union[Rectangle, Circle, Triangle]
Entity = Union[Line, Rectangle, Circle, Triangle]
SHAPE_TYPES = (Rectangle, Circle, Triangle)


def is_shape(entity) -> bool:
    return isinstance(entity, SHAPE_TYPES)
