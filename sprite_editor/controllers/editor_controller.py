"""Ядро редактора спрайтов: сетка, история, инструменты, цвет, экспорт.

SOLID:
- SRP: координирует сервисы; алгоритмы живут в `services`, виджеты в `ui`.
- DIP: пользователь уведомляется через внедрённый `Notifier`, а не через глобальное окно.
Clean Code:
- Все изменения синхронны и выполняются внутри одного обработчика события.
- Не зависит от Tk, поэтому тестируется без дисплея.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

from PIL import Image

from sprite_editor.config import (
    BASE_CANVAS_SIZE,
    DEFAULT_GRID_SIZE,
    ERASER_PREVIEW_COLOR,
    ZOOM_DEFAULT,
    ZOOM_MAX,
    ZOOM_MIN,
    ZOOM_STEP,
)
from sprite_editor.models.color_model import ColorState
from sprite_editor.models.grid_model import PixelGrid
from sprite_editor.models.tool_model import Tool
from sprite_editor.services.color_service import ColorService, from_wheel_click, parse_channel, rgb_to_hex
from sprite_editor.services.export_service import ExportService
from sprite_editor.services.history_service import HistoryService
from sprite_editor.services.notifier import Notifier
from sprite_editor.services.render_service import RenderService
from sprite_editor.services.tool_service import ToolEngine, ToolResult

logger = logging.getLogger(__name__)


class EditorController:
    def __init__(self, notifier: Notifier, grid_size: int = DEFAULT_GRID_SIZE) -> None:
        self._notifier = notifier
        self._color_service = ColorService()
        self._render_service = RenderService()
        self._export_service = ExportService()

        self.grid = PixelGrid(grid_size)
        self.history = HistoryService(self.grid.snapshot())
        self.color = ColorState()
        self.engine = ToolEngine(self.grid, self.color, self.history, self._color_service)
        self.zoom: float = ZOOM_DEFAULT

        # UI subscribers
        self.on_redraw: Optional[Callable[[], None]] = None
        self.on_state_change: Optional[Callable[[], None]] = None

    # ---- Geometry ----
    @property
    def canvas_size(self) -> int:
        return int(round(BASE_CANVAS_SIZE * self.zoom))

    def cell_at(self, px: float, py: float) -> Tuple[int, int]:
        """Пиксель канвы -> ячейка, зажатая в [0, N-1]."""
        n = self.grid.size
        cell = self.canvas_size / n
        x = int(px // cell)
        y = int(py // cell)
        return max(0, min(n - 1, x)), max(0, min(n - 1, y))

    # ---- Pointer ----
    def pointer_down(self, px: float, py: float) -> None:
        self._apply(self.engine.pointer_down(*self.cell_at(px, py)))

    def pointer_move(self, px: float, py: float) -> None:
        if not self.engine.drawing:
            return
        self._apply(self.engine.pointer_move(*self.cell_at(px, py)))

    def pointer_up(self, px: float, py: float) -> None:
        self._apply(self.engine.pointer_up(*self.cell_at(px, py)))

    # ---- Tools ----
    def select_tool(self, tool: Tool | str) -> None:
        tool = Tool(tool) if isinstance(tool, str) else tool
        self._apply(self.engine.set_tool(tool))
        self._emit_state()

    def toggle_eraser(self) -> bool:
        enabled = self.engine.toggle_eraser()
        self._emit_state()
        return enabled

    # ---- History ----
    def undo(self) -> bool:
        self._close_gesture()
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self.grid.restore(snapshot)
        self._emit_redraw()
        self._emit_state()
        return True

    def redo(self) -> bool:
        self._close_gesture()
        snapshot = self.history.redo()
        if snapshot is None:
            return False
        self.grid.restore(snapshot)
        self._emit_redraw()
        self._emit_state()
        return True

    def change_grid_size(self, size: int) -> None:
        """Новая пустая сетка N×N и история из одного снимка."""
        self._close_gesture()
        self.grid.resize(size)
        self.history.reset(self.grid.snapshot())
        logger.info("grid resized to %dx%d", size, size)
        self._emit_redraw()
        self._emit_state()

    # ---- Color ----
    def wheel_click(self, dx: float, dy: float, radius: float) -> bool:
        picked = from_wheel_click(dx, dy, radius)
        if picked is None:
            return False
        self._color_service.apply_wheel(self.color, *picked)
        self._emit_state()
        return True

    def set_brightness(self, brightness: float) -> None:
        self._color_service.set_brightness(self.color, brightness)
        self._emit_state()

    def set_rgb_channel(self, channel: str, value: int | str) -> None:
        value = parse_channel(value) if isinstance(value, str) else value
        self._color_service.set_channel(self.color, channel, value)
        self._emit_state()

    # ---- Zoom ----
    def zoom_in(self) -> float:
        return self._set_zoom(self.zoom + ZOOM_STEP)

    def zoom_out(self) -> float:
        return self._set_zoom(self.zoom - ZOOM_STEP)

    # ---- Export ----
    def export(self, fmt: str, filename: str, directory: str | Path = ".") -> Optional[Path]:
        try:
            path = self._export_service.export(self.grid, fmt, filename, directory)
        except (ValueError, OSError) as exc:
            logger.warning("export failed: %s", exc)
            self._notifier.notify(f"Не удалось экспортировать: {exc}", "error")
            return None
        self._notifier.notify(f"Сохранено: {path}", "success")
        return path

    def export_filename(self, fmt: str, filename: str) -> str:
        return self._export_service.build_filename(filename, fmt)

    # ---- Rendering ----
    def render(self) -> Image.Image:
        preview_color = ERASER_PREVIEW_COLOR if self.engine.eraser else rgb_to_hex(self.color.rgb)
        return self._render_service.render(
            self.grid, self.canvas_size, preview=self.engine.preview_rect(), preview_color=preview_color
        )

    def status_text(self) -> str:
        tool = "Eraser" if self.engine.eraser else self.engine.tool.title
        n = self.grid.size
        r, g, b = self.color.rgb
        return f"Tool: {tool} | Grid: {n}x{n} | Color: RGB({r}, {g}, {b})"

    # ---- Host hooks ----
    def on_show(self) -> None:
        self._emit_redraw()

    def on_resize(self) -> None:
        self._emit_redraw()

    # ---- Helpers ----
    def _close_gesture(self) -> None:
        # незакоммиченный штрих кисти не должен пережить undo/redo
        self._apply(self.engine.finish())

    def _apply(self, result: ToolResult) -> None:
        if result.redraw:
            self._emit_redraw()
        if result.committed or result.picked is not None:
            self._emit_state()

    def _set_zoom(self, zoom: float) -> float:
        new_zoom = max(ZOOM_MIN, min(ZOOM_MAX, zoom))
        if new_zoom != self.zoom:
            self.zoom = new_zoom
            self._emit_redraw()
            self._emit_state()
        return self.zoom

    def _emit_redraw(self) -> None:
        if self.on_redraw:
            self.on_redraw()

    def _emit_state(self) -> None:
        if self.on_state_change:
            self.on_state_change()
