"""Настольная реализация порта `Notifier`."""
from __future__ import annotations

from tkinter import messagebox

from sprite_editor.ui.bottom_bar import BottomBar


class WindowNotifier:
    """Ошибки и предупреждения показывает диалогом, остальное пишет в строку состояния."""
    def __init__(self, bottom: BottomBar, title: str = "Sprite Editor") -> None:
        self._bottom = bottom
        self._title = title

    def notify(self, message: str, level: str = "info") -> None:
        if level == "error":
            messagebox.showerror(self._title, message)
        elif level == "warning":
            messagebox.showwarning(self._title, message)
        else:
            self._bottom.set_message(message)
