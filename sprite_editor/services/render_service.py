"""Отрисовка канвы редактора в изображение PIL.

Принципы:
- Чистая функция от сетки и размера канвы: повторный вызов даёт тот же результат.
- Порядок слоёв: шахматный фон -> закрашенные ячейки -> линии сетки -> контур предпросмотра.
"""
from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image, ImageDraw

from sprite_editor.config import CHECKER_DARK, CHECKER_LIGHT, GRID_LINE_COLOR, PREVIEW_LINE_WIDTH
from sprite_editor.models.grid_model import PixelGrid

Rect = Tuple[int, int, int, int]


class RenderService:
    def render(
        self,
        grid: PixelGrid,
        canvas_size: int,
        preview: Optional[Rect] = None,
        preview_color: str = "#000000",
    ) -> Image.Image:
        """Рисует сетку на квадратной канве `canvas_size`×`canvas_size` (RGB).

        Args:
            grid: Сетка для отрисовки (только чтение).
            canvas_size: Сторона канвы в пикселях.
            preview: Прямоугольник предпросмотра в ячейках (x0, y0, x1, y1), включительно.
            preview_color: Цвет контура предпросмотра.
        """
        canvas_size = max(1, int(canvas_size))
        n = grid.size
        cell = canvas_size / n

        image = Image.new("RGB", (canvas_size, canvas_size), CHECKER_LIGHT)
        draw = ImageDraw.Draw(image)

        # шахматка как индикатор прозрачности
        for y in range(n):
            for x in range(n):
                if (x + y) % 2 == 0:
                    draw.rectangle(self._cell_box(x, y, x, y, cell), fill=CHECKER_DARK)

        for x, y, color in grid.cells():
            if color is not None:
                draw.rectangle(self._cell_box(x, y, x, y, cell), fill=tuple(color))

        last = canvas_size - 1
        for i in range(n + 1):
            pos = min(last, int(round(i * cell)))
            draw.line([(pos, 0), (pos, last)], fill=GRID_LINE_COLOR, width=1)
            draw.line([(0, pos), (last, pos)], fill=GRID_LINE_COLOR, width=1)

        if preview is not None:
            x0, y0, x1, y1 = preview
            draw.rectangle(self._cell_box(x0, y0, x1, y1, cell), outline=preview_color, width=PREVIEW_LINE_WIDTH)
        return image

    @staticmethod
    def _cell_box(x0: int, y0: int, x1: int, y1: int, cell: float) -> Tuple[int, int, int, int]:
        # PIL включает правую/нижнюю границу, поэтому -1
        left = int(round(x0 * cell))
        top = int(round(y0 * cell))
        right = max(left, int(round((x1 + 1) * cell)) - 1)
        bottom = max(top, int(round((y1 + 1) * cell)) - 1)
        return left, top, right, bottom
