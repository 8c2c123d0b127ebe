"""Инструменты рисования и состояние активного инструмента."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Point = Tuple[int, int]


class Tool(Enum):
    BRUSH = "brush"
    BUCKET = "bucket"
    RECTANGLE = "rectangle"
    EYEDROPPER = "eyedropper"

    @property
    def title(self) -> str:
        return self.value.capitalize()


@dataclass
class ToolState:
    """Изменяемое состояние инструмента.

    Fields:
        tool: Активный инструмент.
        eraser: Режим ластика, независим от инструмента (кроме пипетки).
        drawing: Кнопка мыши зажата, идёт жест.
        anchor: Начальная ячейка прямоугольника.
        current: Текущая ячейка прямоугольника во время перетаскивания.
        changed: Жест уже изменил сетку.
    """
    tool: Tool = Tool.BRUSH
    eraser: bool = False
    drawing: bool = False
    anchor: Optional[Point] = None
    current: Optional[Point] = None
    changed: bool = False

    def end_gesture(self) -> None:
        self.drawing = False
        self.anchor = None
        self.current = None
        self.changed = False
