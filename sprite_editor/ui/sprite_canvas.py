"""Виджет канвы спрайта: показывает готовый растр и переводит мышь в координаты канвы.

Принципы:
- SRP: только показ изображения и сбор событий указателя; рисованием занимается контроллер.
- Чистый код: публичный API (`show_image`, `on_*`) отделён от внутренних обработчиков.
- Крупный масштаб: канва прокручивается полосами и средней кнопкой мыши.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

PointerCallback = Callable[[float, float], None]


class SpriteCanvas(ctk.CTkFrame):
    """Центрирует изображение, если оно меньше области; иначе даёт прокрутку."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg(), cursor="crosshair")
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._vscroll = ctk.CTkScrollbar(self, orientation="vertical", command=self._canvas.yview)
        self._vscroll.grid(row=0, column=1, sticky="ns")
        self._hscroll = ctk.CTkScrollbar(self, orientation="horizontal", command=self._canvas.xview)
        self._hscroll.grid(row=1, column=0, sticky="ew")
        self._canvas.configure(xscrollcommand=self._hscroll.set, yscrollcommand=self._vscroll.set)

        self._image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None
        self._image_top_left: Tuple[int, int] = (0, 0)

        self.on_pointer_down: Optional[PointerCallback] = None
        self.on_pointer_move: Optional[PointerCallback] = None
        self.on_pointer_up: Optional[PointerCallback] = None
        self.on_resize: Optional[Callable[[], None]] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)
        self._canvas.bind("<ButtonPress-1>", self._on_press)
        self._canvas.bind("<B1-Motion>", self._on_drag)
        self._canvas.bind("<ButtonRelease-1>", self._on_release)

        # Panning with middle mouse drag
        self._canvas.bind("<ButtonPress-2>", self._on_pan_start)
        self._canvas.bind("<B2-Motion>", self._on_pan_move)

    # ---- Public API ----
    def show_image(self, image: Image.Image) -> None:
        """Показывает новый растр канвы (уже нужного масштаба)."""
        self._image = image
        self._render_image()

    # ---- Internals ----
    def _render_image(self) -> None:
        self._canvas.delete("all")
        if self._image is None:
            return
        canvas_w = int(self._canvas.winfo_width())
        canvas_h = int(self._canvas.winfo_height())
        img_w, img_h = self._image.size
        x = max(0, (canvas_w - img_w) // 2)
        y = max(0, (canvas_h - img_h) // 2)
        self._image_top_left = (x, y)
        self._tk_image = ImageTk.PhotoImage(self._image)
        self._canvas.create_image(x, y, image=self._tk_image, anchor="nw")
        # scroll region covers the whole image when it exceeds the viewport
        self._canvas.configure(scrollregion=(0, 0, max(canvas_w, x + img_w), max(canvas_h, y + img_h)))

    def _to_image_coords(self, event: tk.Event) -> Tuple[float, float]:
        ox, oy = self._image_top_left
        return float(self._canvas.canvasx(event.x) - ox), float(self._canvas.canvasy(event.y) - oy)

    def _on_canvas_resize(self, _event: tk.Event) -> None:
        if self.on_resize:
            self.on_resize()
        else:
            self._render_image()

    def _on_press(self, event: tk.Event) -> None:
        self._canvas.focus_set()
        if self.on_pointer_down:
            self.on_pointer_down(*self._to_image_coords(event))

    def _on_drag(self, event: tk.Event) -> None:
        if self.on_pointer_move:
            self.on_pointer_move(*self._to_image_coords(event))

    def _on_release(self, event: tk.Event) -> None:
        if self.on_pointer_up:
            self.on_pointer_up(*self._to_image_coords(event))

    # ---- Panning ----
    def _on_pan_start(self, event: tk.Event) -> None:
        self._canvas.scan_mark(event.x, event.y)

    def _on_pan_move(self, event: tk.Event) -> None:
        self._canvas.scan_dragto(event.x, event.y, gain=1)

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"
