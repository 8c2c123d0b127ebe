"""Боковая панель: цвет, размер сетки, инструменты, история, экспорт.

Принципы:
- SRP: управляет только виджетами параметров, не содержит логики рисования.
- ISP: события наружу через `on_*`, синхронизация внутрь через компактные `set_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import ImageTk

from sprite_editor.config import COLOR_WHEEL_MARGIN, COLOR_WHEEL_SIZE, DEFAULT_EXPORT_NAME, GRID_SIZES
from sprite_editor.models.tool_model import Tool
from sprite_editor.services.color_service import render_color_wheel, rgb_to_hex
from sprite_editor.services.export_service import EXPORT_FORMATS


def _size_label(size: int) -> str:
    return f"{size}x{size}"


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: цвет, сетка, инструменты, экспорт."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_wheel_click: Optional[Callable[[float, float, float], None]] = None
        self.on_brightness_change: Optional[Callable[[float], None]] = None
        self.on_rgb_change: Optional[Callable[[str, str], None]] = None
        self.on_grid_size_change: Optional[Callable[[int], None]] = None
        self.on_tool_change: Optional[Callable[[str], None]] = None
        self.on_eraser_toggle: Optional[Callable[[], None]] = None
        self.on_undo: Optional[Callable[[], None]] = None
        self.on_redo: Optional[Callable[[], None]] = None
        self.on_export: Optional[Callable[[str], None]] = None

        # ---- Цвет ----
        self._color_title = ctk.CTkLabel(self, text="Color Picker", font=ctk.CTkFont(size=16, weight="bold"))
        self._color_title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._wheel_canvas = tk.Canvas(
            self, width=COLOR_WHEEL_SIZE, height=COLOR_WHEEL_SIZE, highlightthickness=0, cursor="crosshair"
        )
        self._wheel_canvas.grid(row=1, column=0, padx=8, pady=4)
        self._wheel_image = ImageTk.PhotoImage(render_color_wheel(COLOR_WHEEL_SIZE, COLOR_WHEEL_MARGIN))
        self._wheel_canvas.create_image(0, 0, image=self._wheel_image, anchor="nw")
        self._wheel_canvas.bind("<Button-1>", self._on_wheel_click)

        self._brightness_slider = ctk.CTkSlider(
            self, from_=0, to=100, number_of_steps=100, command=self._on_brightness_slider
        )
        self._brightness_slider.set(100)
        self._brightness_slider.grid(row=2, column=0, padx=8, pady=4, sticky="ew")

        rgb_frame = ctk.CTkFrame(self, fg_color="transparent")
        rgb_frame.grid(row=3, column=0, padx=8, pady=4, sticky="ew")
        self._rgb_vars = {}
        for col, channel in enumerate(("r", "g", "b")):
            rgb_frame.grid_columnconfigure(col, weight=1)
            ctk.CTkLabel(rgb_frame, text=channel.upper()).grid(row=0, column=col)
            var = ctk.StringVar(value="0")
            entry = ctk.CTkEntry(rgb_frame, textvariable=var, width=56, justify="center")
            entry.grid(row=1, column=col, padx=2)
            entry.bind("<Return>", lambda _e, ch=channel: self._emit_rgb_change(ch))
            entry.bind("<FocusOut>", lambda _e, ch=channel: self._emit_rgb_change(ch))
            self._rgb_vars[channel] = var

        self._preview = ctk.CTkFrame(self, height=36, corner_radius=8)
        self._preview.grid(row=4, column=0, padx=8, pady=(4, 10), sticky="ew")

        # ---- Сетка ----
        self._grid_title = ctk.CTkLabel(self, text="Grid Size", font=ctk.CTkFont(size=16, weight="bold"))
        self._grid_title.grid(row=5, column=0, padx=8, pady=(8, 4), sticky="w")
        self._size_buttons = ctk.CTkSegmentedButton(
            self, values=[_size_label(s) for s in GRID_SIZES], command=self._on_size_click
        )
        self._size_buttons.grid(row=6, column=0, padx=8, pady=(0, 10), sticky="ew")

        # ---- Инструменты ----
        self._tools_title = ctk.CTkLabel(self, text="Tools", font=ctk.CTkFont(size=16, weight="bold"))
        self._tools_title.grid(row=7, column=0, padx=8, pady=(8, 4), sticky="w")

        history_frame = ctk.CTkFrame(self, fg_color="transparent")
        history_frame.grid(row=8, column=0, padx=8, pady=(0, 6), sticky="ew")
        history_frame.grid_columnconfigure((0, 1), weight=1)
        self._undo_btn = ctk.CTkButton(history_frame, text="↶ Undo", command=self._emit_undo)
        self._redo_btn = ctk.CTkButton(history_frame, text="↷ Redo", command=self._emit_redo)
        self._undo_btn.grid(row=0, column=0, padx=(0, 4), sticky="ew")
        self._redo_btn.grid(row=0, column=1, padx=(4, 0), sticky="ew")

        self._tool_var = ctk.StringVar(value=Tool.BRUSH.value)
        titles = {
            Tool.BRUSH: "Brush",
            Tool.BUCKET: "Bucket Fill",
            Tool.RECTANGLE: "Rectangle",
            Tool.EYEDROPPER: "Eyedropper",
        }
        for row, tool in enumerate(Tool, start=9):
            ctk.CTkRadioButton(
                self, text=titles[tool], variable=self._tool_var, value=tool.value, command=self._emit_tool_change
            ).grid(row=row, column=0, padx=12, pady=2, sticky="w")

        self._eraser_switch = ctk.CTkSwitch(self, text="Eraser Mode", command=self._emit_eraser_toggle)
        self._eraser_switch.grid(row=13, column=0, padx=12, pady=(6, 10), sticky="w")

        # ---- Экспорт ----
        self._export_title = ctk.CTkLabel(self, text="Export", font=ctk.CTkFont(size=16, weight="bold"))
        self._export_title.grid(row=14, column=0, padx=8, pady=(8, 4), sticky="w")
        self._filename_var = ctk.StringVar(value=DEFAULT_EXPORT_NAME)
        self._filename_entry = ctk.CTkEntry(
            self, textvariable=self._filename_var, placeholder_text="Filename without extension"
        )
        self._filename_entry.grid(row=15, column=0, padx=8, pady=(0, 6), sticky="ew")

        export_frame = ctk.CTkFrame(self, fg_color="transparent")
        export_frame.grid(row=16, column=0, padx=8, pady=(0, 8), sticky="ew")
        for idx, fmt in enumerate(EXPORT_FORMATS):
            export_frame.grid_columnconfigure(idx % 2, weight=1)
            ctk.CTkButton(export_frame, text=fmt.upper(), command=lambda f=fmt: self._emit_export(f)).grid(
                row=idx // 2, column=idx % 2, padx=2, pady=2, sticky="ew"
            )

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_color(self, rgb: Tuple[int, int, int]) -> None:
        """Отражает активный цвет в полях RGB и в образце."""
        for channel, value in zip(("r", "g", "b"), rgb):
            self._rgb_vars[channel].set(str(value))
        self._preview.configure(fg_color=rgb_to_hex(rgb))

    def set_grid_size_value(self, size: int) -> None:
        self._size_buttons.set(_size_label(size))

    def set_tool_value(self, tool: str) -> None:
        self._tool_var.set(tool)

    def set_eraser_value(self, enabled: bool) -> None:
        if enabled:
            self._eraser_switch.select()
        else:
            self._eraser_switch.deselect()

    def set_history_state(self, can_undo: bool, can_redo: bool) -> None:
        self._undo_btn.configure(state="normal" if can_undo else "disabled")
        self._redo_btn.configure(state="normal" if can_redo else "disabled")

    def get_filename(self) -> str:
        return self._filename_var.get().strip() or DEFAULT_EXPORT_NAME

    # ---- Events ----
    def _on_wheel_click(self, event: tk.Event) -> None:
        center = COLOR_WHEEL_SIZE / 2
        radius = center - COLOR_WHEEL_MARGIN
        if self.on_wheel_click:
            self.on_wheel_click(event.x - center, event.y - center, radius)

    def _on_brightness_slider(self, value: float) -> None:
        if self.on_brightness_change:
            self.on_brightness_change(value / 100.0)

    def _emit_rgb_change(self, channel: str) -> None:
        if self.on_rgb_change:
            self.on_rgb_change(channel, self._rgb_vars[channel].get())

    def _on_size_click(self, value: str) -> None:
        try:
            size = int(value.split("x", 1)[0])
        except ValueError:
            return
        if self.on_grid_size_change:
            self.on_grid_size_change(size)

    def _emit_tool_change(self) -> None:
        if self.on_tool_change:
            self.on_tool_change(self._tool_var.get())

    def _emit_eraser_toggle(self) -> None:
        if self.on_eraser_toggle:
            self.on_eraser_toggle()

    def _emit_undo(self) -> None:
        if self.on_undo:
            self.on_undo()

    def _emit_redo(self) -> None:
        if self.on_redo:
            self.on_redo()

    def _emit_export(self, fmt: str) -> None:
        if self.on_export:
            self.on_export(fmt)
