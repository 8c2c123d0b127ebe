"""Линейная история правок: стек снимков сетки и курсор.

Принципы:
- SRP: только хранение снимков; кто и когда коммитит, решает движок инструментов.
- Инвариант: в стеке всегда есть хотя бы один снимок, курсор указывает на существующий.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sprite_editor.models.grid_model import GridSnapshot

logger = logging.getLogger(__name__)


class HistoryService:
    def __init__(self, initial: GridSnapshot) -> None:
        self._entries: List[GridSnapshot] = [initial]
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> GridSnapshot:
        return self._entries[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def __len__(self) -> int:
        return len(self._entries)

    def commit(self, snapshot: GridSnapshot) -> None:
        """Отбрасывает redo-хвост после курсора и добавляет снимок в конец."""
        del self._entries[self._cursor + 1:]
        self._entries.append(snapshot)
        self._cursor = len(self._entries) - 1
        logger.debug("history commit: cursor=%d size=%d", self._cursor, len(self._entries))

    def undo(self) -> Optional[GridSnapshot]:
        if not self.can_undo:
            return None
        self._cursor -= 1
        logger.debug("history undo: cursor=%d", self._cursor)
        return self._entries[self._cursor]

    def redo(self) -> Optional[GridSnapshot]:
        if not self.can_redo:
            return None
        self._cursor += 1
        logger.debug("history redo: cursor=%d", self._cursor)
        return self._entries[self._cursor]

    def reset(self, initial: GridSnapshot) -> None:
        """Новая история из одного снимка (смена размера сетки)."""
        self._entries = [initial]
        self._cursor = 0
