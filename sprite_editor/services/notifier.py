"""Порт уведомлений: редактор сообщает пользователю о результатах, не зная о виджетах."""
from __future__ import annotations

from typing import Protocol


class Notifier(Protocol):
    def notify(self, message: str, level: str = "info") -> None:
        """level: "info" | "success" | "warning" | "error"."""
        ...
