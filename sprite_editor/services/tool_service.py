"""Движок инструментов: жест мыши (down -> move* -> up) превращается в правки сетки.

Принципы:
- SRP: интерпретация ввода; отрисовкой и виджетами не занимается.
- Замкнутый набор инструментов: обработчики выбираются по `Tool`, таблица
  обязана покрывать все элементы перечисления.
- Одна завершённая правка = один снимок в истории. Предпросмотр прямоугольника
  и промежуточные движения кисти историю не трогают.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from sprite_editor.models.color_model import ColorState
from sprite_editor.models.grid_model import Cell, Color, PixelGrid
from sprite_editor.models.tool_model import Point, Tool, ToolState
from sprite_editor.services.color_service import ColorService, colors_equal
from sprite_editor.services.history_service import HistoryService

logger = logging.getLogger(__name__)

Rect = Tuple[int, int, int, int]


@dataclass(frozen=True)
class ToolResult:
    """Что изменилось после события.

    Fields:
        redraw: Нужна перерисовка канвы.
        committed: В историю добавлен снимок.
        picked: Цвет, взятый пипеткой.
    """
    redraw: bool = False
    committed: bool = False
    picked: Optional[Color] = None


_NOTHING = ToolResult()


def normalize_rect(a: Point, b: Point) -> Rect:
    """Ограничивающий прямоугольник двух ячеек, углы включительно: (x0, y0, x1, y1)."""
    return min(a[0], b[0]), min(a[1], b[1]), max(a[0], b[0]), max(a[1], b[1])


def flood_fill(grid: PixelGrid, x: int, y: int, fill: Cell) -> int:
    """4-связная заливка явным стеком, без рекурсии.

    Returns:
        Количество перекрашенных ячеек; 0, если цвет заливки совпадает с целевым.
    """
    target = grid.get(x, y)
    if colors_equal(target, fill):
        return 0
    size = grid.size
    painted = 0
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if cx < 0 or cy < 0 or cx >= size or cy >= size:
            continue
        if not colors_equal(grid.get(cx, cy), target):
            continue
        grid.set(cx, cy, fill)
        painted += 1
        stack.append((cx + 1, cy))
        stack.append((cx - 1, cy))
        stack.append((cx, cy + 1))
        stack.append((cx, cy - 1))
    return painted


def fill_rect(grid: PixelGrid, a: Point, b: Point, fill: Cell) -> int:
    """Заполняет прямоугольник между двумя ячейками. Возвращает число изменённых ячеек."""
    x0, y0, x1, y1 = normalize_rect(a, b)
    changed = 0
    for y in range(y0, y1 + 1):
        for x in range(x0, x1 + 1):
            if not colors_equal(grid.get(x, y), fill):
                grid.set(x, y, fill)
                changed += 1
    return changed


class ToolEngine:
    def __init__(
        self,
        grid: PixelGrid,
        color: ColorState,
        history: HistoryService,
        color_service: Optional[ColorService] = None,
    ) -> None:
        self._grid = grid
        self._color = color
        self._history = history
        self._color_service = color_service or ColorService()
        self._state = ToolState()

        self._on_down: Dict[Tool, Callable[[int, int], ToolResult]] = {
            Tool.BRUSH: self._paint,
            Tool.BUCKET: self._bucket,
            Tool.RECTANGLE: self._rect_anchor,
            Tool.EYEDROPPER: self._eyedrop,
        }
        self._on_move: Dict[Tool, Callable[[int, int], ToolResult]] = {
            Tool.BRUSH: self._paint,
            Tool.BUCKET: self._ignore,
            Tool.RECTANGLE: self._rect_drag,
            Tool.EYEDROPPER: self._ignore,
        }
        missing = set(Tool) - set(self._on_down) | set(Tool) - set(self._on_move)
        if missing:
            raise RuntimeError(f"Нет обработчиков для инструментов: {sorted(t.value for t in missing)}")

    # ---- State ----
    @property
    def tool(self) -> Tool:
        return self._state.tool

    @property
    def eraser(self) -> bool:
        return self._state.eraser

    @property
    def drawing(self) -> bool:
        return self._state.drawing

    def set_tool(self, tool: Tool) -> ToolResult:
        """Переключает инструмент. Незавершённый прямоугольник отбрасывается без коммита."""
        result = self.finish()
        self._state.tool = tool
        logger.debug("tool -> %s", tool.value)
        return result

    def set_eraser(self, enabled: bool) -> None:
        self._state.eraser = enabled

    def toggle_eraser(self) -> bool:
        self._state.eraser = not self._state.eraser
        return self._state.eraser

    def finish(self) -> ToolResult:
        """Закрывает жест перед undo/redo и сменой размера: штрих кисти коммитится, прямоугольник отбрасывается."""
        had_preview = self.preview_rect() is not None
        committed = self._finish_gesture()
        return ToolResult(redraw=had_preview or committed, committed=committed)

    def preview_rect(self) -> Optional[Rect]:
        s = self._state
        if s.tool is not Tool.RECTANGLE or not s.drawing or s.anchor is None or s.current is None:
            return None
        return normalize_rect(s.anchor, s.current)

    # ---- Pointer events ----
    def pointer_down(self, x: int, y: int) -> ToolResult:
        self._state.drawing = True
        self._state.changed = False
        return self._on_down[self._state.tool](x, y)

    def pointer_move(self, x: int, y: int) -> ToolResult:
        if not self._state.drawing:
            return _NOTHING
        return self._on_move[self._state.tool](x, y)

    def pointer_up(self, x: int, y: int) -> ToolResult:
        if not self._state.drawing:
            return _NOTHING
        redraw = False
        if self._state.tool is Tool.RECTANGLE and self._state.anchor is not None:
            if fill_rect(self._grid, self._state.anchor, (x, y), self._fill_value()):
                self._state.changed = True
            redraw = True
        committed = self._finish_gesture()
        return ToolResult(redraw=redraw or committed, committed=committed)

    # ---- Handlers ----
    def _fill_value(self) -> Cell:
        return None if self._state.eraser else self._color.rgb

    def _paint(self, x: int, y: int) -> ToolResult:
        fill = self._fill_value()
        if colors_equal(self._grid.get(x, y), fill):
            return _NOTHING
        self._grid.set(x, y, fill)
        self._state.changed = True
        return ToolResult(redraw=True)

    def _bucket(self, x: int, y: int) -> ToolResult:
        if flood_fill(self._grid, x, y, self._fill_value()) == 0:
            return _NOTHING
        self._state.changed = True
        return ToolResult(redraw=True)

    def _rect_anchor(self, x: int, y: int) -> ToolResult:
        self._state.anchor = (x, y)
        self._state.current = (x, y)
        return ToolResult(redraw=True)

    def _rect_drag(self, x: int, y: int) -> ToolResult:
        if self._state.anchor is None:
            return _NOTHING
        self._state.current = (x, y)
        return ToolResult(redraw=True)

    def _eyedrop(self, x: int, y: int) -> ToolResult:
        color = self._grid.get(x, y)
        if color is None:
            return _NOTHING
        return ToolResult(picked=self._color_service.pick(self._color, color))

    def _ignore(self, _x: int, _y: int) -> ToolResult:
        return _NOTHING

    # ---- Helpers ----
    def _finish_gesture(self) -> bool:
        """Закрывает жест; если сетка менялась, коммитит ровно один снимок."""
        committed = False
        if self._state.drawing and self._state.changed:
            self._history.commit(self._grid.snapshot())
            committed = True
        self._state.end_gesture()
        return committed
