"""Настройки редактора: размеры сетки, масштаб, цвета отрисовки и форматы экспорта.

Принципы:
- Единый источник правды: все «магические числа» UI и сервисов живут здесь.
- Только данные, без логики.
"""
from __future__ import annotations

from typing import Tuple

# ---- Сетка ----
GRID_SIZES: Tuple[int, ...] = (8, 16, 32, 64, 128)
DEFAULT_GRID_SIZE = 32

# Edge of the drawing canvas in px at 100% zoom
BASE_CANVAS_SIZE = 512

# ---- Масштаб ----
ZOOM_MIN = 0.5
ZOOM_MAX = 3.0
ZOOM_STEP = 0.25
ZOOM_DEFAULT = 1.0

# ---- Отрисовка ----
CHECKER_LIGHT = "#f0f0f0"
CHECKER_DARK = "#e0e0e0"
GRID_LINE_COLOR = "#cccccc"
PREVIEW_LINE_WIDTH = 2
ERASER_PREVIEW_COLOR = "#ff0000"

# ---- Цветовой круг ----
COLOR_WHEEL_SIZE = 120
COLOR_WHEEL_MARGIN = 5

# ---- Цвет по умолчанию ----
DEFAULT_RGB: Tuple[int, int, int] = (255, 0, 0)
DEFAULT_HUE = 0.0
DEFAULT_SATURATION = 1.0
DEFAULT_BRIGHTNESS = 1.0

# ---- Экспорт ----
DEFAULT_EXPORT_NAME = "sprite"
EXPORT_BACKGROUND: Tuple[int, int, int] = (255, 255, 255)
