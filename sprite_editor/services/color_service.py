"""Цветовая модель: HSB -> RGB, выбор на цветовом круге, растр круга.

Принципы:
- SRP: только математика цвета; состояние хранится в `ColorState`.
- Однонаправленность: HSB всегда перезаписывает RGB, обратного пересчёта нет.
"""
from __future__ import annotations

import colorsys
import math
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from sprite_editor.models.color_model import ColorState
from sprite_editor.models.grid_model import Cell, Color

_CHANNELS = ("r", "g", "b")


def clamp_channel(value: float) -> int:
    return max(0, min(255, int(value)))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> Color:
    """Переводит HSB (тон в градусах) в RGB с округлением каналов до 0..255."""
    h = (hue % 360.0) / 360.0
    s = max(0.0, min(1.0, saturation))
    v = max(0.0, min(1.0, brightness))
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return (
        clamp_channel(_round_half_up(r * 255)),
        clamp_channel(_round_half_up(g * 255)),
        clamp_channel(_round_half_up(b * 255)),
    )


def from_wheel_click(dx: float, dy: float, radius: float) -> Optional[Tuple[float, float]]:
    """Тон и насыщенность по смещению клика от центра круга.

    Returns:
        `(hue, saturation)` или `None`, если клик за пределами круга.
    """
    distance = math.hypot(dx, dy)
    if radius <= 0 or distance > radius:
        return None
    hue = (math.degrees(math.atan2(dy, dx)) + 360.0) % 360.0
    saturation = min(distance / radius, 1.0)
    return hue, saturation


def rgb_to_hex(color: Color) -> str:
    r, g, b = color
    return f"#{r:02X}{g:02X}{b:02X}"


def colors_equal(a: Cell, b: Cell) -> bool:
    """Покомпонентное сравнение; `None` равен только `None`."""
    if a is None or b is None:
        return a is None and b is None
    return tuple(a) == tuple(b)


def parse_channel(text: str) -> int:
    """Текст поля ввода -> канал; нечисловой ввод и NaN дают 0, бесконечности зажимаются."""
    try:
        value = float(text.strip())
    except ValueError:
        return 0
    if math.isnan(value):
        return 0
    return clamp_channel(max(0.0, min(255.0, value)))


def render_color_wheel(size: int, margin: int) -> Image.Image:
    """Растр цветового круга: тон по углу, насыщенность по радиусу, светлота 50% (HSL).

    Пиксели вне радиуса полностью прозрачны.
    """
    center = size / 2.0
    radius = center - margin
    ys, xs = np.mgrid[0:size, 0:size].astype(np.float32)
    dx = xs + 0.5 - center
    dy = ys + 0.5 - center
    dist = np.hypot(dx, dy)
    hue = (np.degrees(np.arctan2(dy, dx)) + 360.0) % 360.0
    sat = np.clip(dist / max(radius, 1.0), 0.0, 1.0)

    # HSL -> RGB при L = 0.5 (CSS-формула через k = (n + h/30) mod 12)
    lightness = 0.5
    a = sat * min(lightness, 1.0 - lightness)
    channels = []
    for n in (0.0, 8.0, 4.0):
        k = (n + hue / 30.0) % 12.0
        f = lightness - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))
        channels.append(np.clip(np.rint(f * 255.0), 0, 255))
    alpha = np.where(dist <= radius, 255, 0)
    rgba = np.stack(channels + [alpha], axis=-1).astype(np.uint8)
    return Image.fromarray(rgba, mode="RGBA")


class ColorService:
    """Операции над `ColorState`. Каждая возвращает итоговый RGB."""

    def apply_wheel(self, state: ColorState, hue: float, saturation: float) -> Color:
        state.hue = hue
        state.saturation = saturation
        return self._sync_rgb(state)

    def set_brightness(self, state: ColorState, brightness: float) -> Color:
        state.brightness = max(0.0, min(1.0, brightness))
        return self._sync_rgb(state)

    def set_channel(self, state: ColorState, channel: str, value: int) -> Color:
        """Прямая правка одного канала; HSB не трогаем."""
        if channel not in _CHANNELS:
            raise ValueError(f"Неизвестный канал: {channel}")
        rgb = list(state.rgb)
        rgb[_CHANNELS.index(channel)] = clamp_channel(value)
        state.rgb = (rgb[0], rgb[1], rgb[2])
        return state.rgb

    def pick(self, state: ColorState, color: Color) -> Color:
        """Цвет из пипетки: как прямой ввод RGB."""
        state.rgb = (clamp_channel(color[0]), clamp_channel(color[1]), clamp_channel(color[2]))
        return state.rgb

    def _sync_rgb(self, state: ColorState) -> Color:
        state.rgb = hsb_to_rgb(state.hue, state.saturation, state.brightness)
        return state.rgb
