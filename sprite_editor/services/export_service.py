"""Экспорт сетки в растровый файл: одна ячейка = один пиксель.

Принципы:
- SRP: сериализация сетки; диалоги и уведомления остаются в контроллере.
- OCP: новый формат добавляется строкой в `EXPORT_FORMATS`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

import numpy as np
from PIL import Image

from sprite_editor.config import DEFAULT_EXPORT_NAME, EXPORT_BACKGROUND
from sprite_editor.models.grid_model import PixelGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportFormat:
    """Описание формата.

    Fields:
        extension: Расширение файла без точки.
        pil_format: Имя формата для `Image.save`.
        supports_alpha: Пустые ячейки остаются прозрачными; иначе заливаются фоном.
    """
    extension: str
    pil_format: str
    supports_alpha: bool


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    "png": ExportFormat("png", "PNG", True),
    "jpg": ExportFormat("jpg", "JPEG", False),
    "bmp": ExportFormat("bmp", "BMP", False),
    "gif": ExportFormat("gif", "GIF", False),
}


class ExportService:
    @property
    def formats(self) -> Dict[str, ExportFormat]:
        return dict(EXPORT_FORMATS)

    def get_format(self, fmt: str) -> ExportFormat:
        try:
            return EXPORT_FORMATS[fmt.lower()]
        except KeyError:
            raise ValueError(f"Неподдерживаемый формат экспорта: {fmt}") from None

    def to_rgba_array(self, grid: PixelGrid) -> np.ndarray:
        """Массив (N, N, 4) uint8; пустые ячейки = (0, 0, 0, 0)."""
        arr = np.zeros((grid.size, grid.size, 4), dtype=np.uint8)
        for x, y, color in grid.cells():
            if color is not None:
                arr[y, x, :3] = color
                arr[y, x, 3] = 255
        return arr

    def to_image(self, grid: PixelGrid, fmt: str = "png") -> Image.Image:
        """Изображение ровно N×N без линий сетки и шахматки."""
        export_format = self.get_format(fmt)
        rgba = Image.fromarray(self.to_rgba_array(grid), mode="RGBA")
        if export_format.supports_alpha:
            return rgba
        background = Image.new("RGB", rgba.size, EXPORT_BACKGROUND)
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background

    def build_filename(self, filename: str, fmt: str) -> str:
        stem = filename.strip() or DEFAULT_EXPORT_NAME
        return f"{stem}.{self.get_format(fmt).extension}"

    def export(self, grid: PixelGrid, fmt: str, filename: str, directory: str | Path = ".") -> Path:
        """Сохраняет сетку как `<filename>.<ext>` в каталоге `directory`.

        Raises:
            ValueError: неизвестный формат.
            OSError: ошибка записи файла.
        """
        export_format = self.get_format(fmt)
        path = Path(directory) / self.build_filename(filename, fmt)
        image = self.to_image(grid, fmt)
        image.save(path, format=export_format.pil_format)
        logger.info("exported %dx%d sprite to %s", grid.size, grid.size, path)
        return path
