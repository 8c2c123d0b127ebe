"""Контроллер приложения: связывает виджеты с ядром редактора.

SOLID:
- SRP: только проводка событий UI <-> `EditorController`, без логики рисования.
- DIP: виджеты ничего не знают друг о друге и о сервисах, общаются через контроллер.
"""
from __future__ import annotations

from dataclasses import dataclass
import tkinter as tk
from tkinter import filedialog, TclError

import customtkinter as ctk

from sprite_editor.controllers.editor_controller import EditorController
from sprite_editor.models.tool_model import Tool
from sprite_editor.ui.bottom_bar import BottomBar
from sprite_editor.ui.sidebar import Sidebar
from sprite_editor.ui.sprite_canvas import SpriteCanvas

_TOOL_KEYS = {
    "b": Tool.BRUSH,
    "f": Tool.BUCKET,
    "r": Tool.RECTANGLE,
    "i": Tool.EYEDROPPER,
}


@dataclass
class AppController:
    """Связывает элементы UI с редактором.

    Ответственности:
    - Бинд событий мыши, клавиатуры и панелей.
    - Перерисовка канвы и синхронизация панелей после изменений ядра.
    - Диалог выбора пути при экспорте.
    """
    editor: EditorController
    canvas: SpriteCanvas
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk

    def bind_events(self) -> None:
        self.editor.on_redraw = self.redraw
        self.editor.on_state_change = self.sync_panels

        self.canvas.on_pointer_down = self.editor.pointer_down
        self.canvas.on_pointer_move = self.editor.pointer_move
        self.canvas.on_pointer_up = self.editor.pointer_up
        self.canvas.on_resize = self.editor.on_resize

        self.sidebar.on_wheel_click = self._handle_wheel_click
        self.sidebar.on_brightness_change = self.editor.set_brightness
        self.sidebar.on_rgb_change = self.editor.set_rgb_channel
        self.sidebar.on_grid_size_change = self.editor.change_grid_size
        self.sidebar.on_tool_change = self.editor.select_tool
        self.sidebar.on_eraser_toggle = self._handle_eraser_toggle
        self.sidebar.on_undo = self.editor.undo
        self.sidebar.on_redo = self.editor.redo
        self.sidebar.on_export = self._handle_export

        self.bottom.on_zoom_in = self.editor.zoom_in
        self.bottom.on_zoom_out = self.editor.zoom_out

        # Keyboard
        self.window.bind("<Control-z>", lambda _e: self.editor.undo())
        self.window.bind("<Control-y>", lambda _e: self.editor.redo())
        self.window.bind("<Control-Z>", lambda _e: self.editor.redo())  # Ctrl+Shift+Z
        self.window.bind("<KeyPress>", self._handle_key)

        self.sidebar.set_grid_size_value(self.editor.grid.size)
        self.sync_panels()

    # ---- Sync ----
    def redraw(self) -> None:
        self.canvas.show_image(self.editor.render())

    def sync_panels(self) -> None:
        self.sidebar.set_color(self.editor.color.rgb)
        self.sidebar.set_tool_value(self.editor.engine.tool.value)
        self.sidebar.set_eraser_value(self.editor.engine.eraser)
        self.sidebar.set_history_state(self.editor.history.can_undo, self.editor.history.can_redo)
        self.bottom.set_status(self.editor.status_text())
        self.bottom.set_zoom_percent(int(round(self.editor.zoom * 100)))

    # ---- Handlers ----
    def _handle_wheel_click(self, dx: float, dy: float, radius: float) -> None:
        # клик мимо круга цвет не меняет
        self.editor.wheel_click(dx, dy, radius)

    def _handle_eraser_toggle(self) -> None:
        self.editor.toggle_eraser()

    def _handle_key(self, event) -> None:
        # не перехватываем ввод в текстовых полях
        widget = event.widget
        if not isinstance(widget, tk.Misc) or widget.winfo_class() == "Entry" or event.state & 0x4:
            return
        key = (event.keysym or "").lower()
        if key in _TOOL_KEYS:
            self.editor.select_tool(_TOOL_KEYS[key])
        elif key == "e":
            self.editor.toggle_eraser()

    def _handle_export(self, fmt: str) -> None:
        filename = self.editor.export_filename(fmt, self.sidebar.get_filename())
        try:
            directory = filedialog.askdirectory(title=f"Папка для {filename}")
        except TclError:
            # Silent fail if dialog cannot open
            return
        if not directory:
            return
        self.editor.export(fmt, self.sidebar.get_filename(), directory)
