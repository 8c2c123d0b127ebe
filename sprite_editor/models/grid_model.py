"""Модель сетки пикселей и её снимков.

Принципы:
- SRP: только хранение цветов ячеек, без инструментов и отрисовки.
- Снимки неизменяемы (`frozen=True`), поэтому история не может их испортить.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from sprite_editor.config import GRID_SIZES

Color = Tuple[int, int, int]
Cell = Optional[Color]


@dataclass(frozen=True)
class GridSnapshot:
    """Неизменяемая глубокая копия сетки.

    Fields:
        size: Сторона сетки N.
        rows: N строк по N ячеек; `None` означает прозрачную ячейку.
    """
    size: int
    rows: Tuple[Tuple[Cell, ...], ...]


class PixelGrid:
    """Квадратная сетка N×N, каждая ячейка хранит RGB-тройку или `None`.

    Координаты приходят уже зажатыми в [0, N-1], поэтому проверок границ
    здесь нет.
    """

    def __init__(self, size: int) -> None:
        self._size = _validate_size(size)
        self._rows: List[List[Cell]] = _empty_rows(self._size)

    @property
    def size(self) -> int:
        return self._size

    def get(self, x: int, y: int) -> Cell:
        return self._rows[y][x]

    def set(self, x: int, y: int, color: Cell) -> None:
        self._rows[y][x] = None if color is None else tuple(color)

    def resize(self, size: int) -> None:
        """Меняет размер, отбрасывая содержимое: новая сетка всегда пустая."""
        self._size = _validate_size(size)
        self._rows = _empty_rows(self._size)

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(size=self._size, rows=tuple(tuple(row) for row in self._rows))

    def restore(self, snapshot: GridSnapshot) -> None:
        if len(snapshot.rows) != snapshot.size or any(len(r) != snapshot.size for r in snapshot.rows):
            raise ValueError(f"Снимок повреждён: ожидалась сетка {snapshot.size}x{snapshot.size}")
        self._size = snapshot.size
        self._rows = [list(row) for row in snapshot.rows]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Обходит все ячейки построчно: (x, y, цвет)."""
        for y, row in enumerate(self._rows):
            for x, color in enumerate(row):
                yield x, y, color

    def is_empty(self) -> bool:
        return all(color is None for row in self._rows for color in row)


def _validate_size(size: int) -> int:
    if size not in GRID_SIZES:
        raise ValueError(f"Недопустимый размер сетки: {size}; допустимо {GRID_SIZES}")
    return size


def _empty_rows(size: int) -> List[List[Cell]]:
    return [[None] * size for _ in range(size)]
