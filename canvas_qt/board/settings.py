# canvas_qt/board/settings.py
"""
Cấu hình bảng vẽ lưu qua QSettings: màu nét, giới hạn kéo hình, chiều cao canvas, số bước undo
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from PySide6 import QtCore

logger = logging.getLogger(__name__)

ORGANIZATION_NAME = "TutorApp"
APPLICATION_NAME = "DrawingCanvas"

DEFAULT_SETTINGS = {
    "line_color": "",            # "" = màu mặc định theo công cụ
    "clamp_drag": True,
    "stage_height_factor": 10,   # chiều cao canvas = chiều cao màn hình × hệ số
    "max_history": 50,
}


def _to_bool(value) -> bool:
    # QSettings trả về "true"/"false" dạng chuỗi với backend INI
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass
class BoardSettings:
    """Cài đặt bảng vẽ"""
    line_color: str = DEFAULT_SETTINGS["line_color"]
    clamp_drag: bool = DEFAULT_SETTINGS["clamp_drag"]
    stage_height_factor: int = DEFAULT_SETTINGS["stage_height_factor"]
    max_history: int = DEFAULT_SETTINGS["max_history"]

    @classmethod
    def load(cls, store: Optional[QtCore.QSettings] = None) -> "BoardSettings":
        store = store if store is not None else QtCore.QSettings()
        try:
            return cls(
                line_color=str(store.value("line_color", DEFAULT_SETTINGS["line_color"]) or ""),
                clamp_drag=_to_bool(store.value("clamp_drag", DEFAULT_SETTINGS["clamp_drag"])),
                stage_height_factor=max(1, int(store.value("stage_height_factor", DEFAULT_SETTINGS["stage_height_factor"]))),
                max_history=max(1, int(store.value("max_history", DEFAULT_SETTINGS["max_history"]))),
            )
        except (TypeError, ValueError) as e:
            logger.warning(f"Cài đặt không hợp lệ, dùng mặc định: {e}")
            return cls()

    def save(self, store: Optional[QtCore.QSettings] = None):
        store = store if store is not None else QtCore.QSettings()
        store.setValue("line_color", self.line_color)
        store.setValue("clamp_drag", self.clamp_drag)
        store.setValue("stage_height_factor", self.stage_height_factor)
        store.setValue("max_history", self.max_history)
