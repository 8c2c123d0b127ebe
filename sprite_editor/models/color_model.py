"""Модель активного цвета: RGB и его HSB-представление."""
from __future__ import annotations

from dataclasses import dataclass

from sprite_editor.config import DEFAULT_BRIGHTNESS, DEFAULT_HUE, DEFAULT_RGB, DEFAULT_SATURATION
from sprite_editor.models.grid_model import Color


@dataclass
class ColorState:
    """Активный цвет рисования.

    HSB задаётся цветовым кругом и ползунком яркости и всегда перезаписывает RGB.
    Прямой ввод RGB (и пипетка) меняет только `rgb`, HSB остаётся прежним.

    Fields:
        rgb: Текущий цвет, каналы 0..255.
        hue: Тон, градусы [0, 360).
        saturation: Насыщенность 0..1.
        brightness: Яркость 0..1.
    """
    rgb: Color = DEFAULT_RGB
    hue: float = DEFAULT_HUE
    saturation: float = DEFAULT_SATURATION
    brightness: float = DEFAULT_BRIGHTNESS
