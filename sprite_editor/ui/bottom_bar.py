from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    """Строка состояния и кнопки масштаба."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=48, **kwargs)

        # callbacks
        self.on_zoom_in: Optional[Callable[[], None]] = None
        self.on_zoom_out: Optional[Callable[[], None]] = None

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)  # status stretches

        self._status_value = ctk.StringVar(value="")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status_value, anchor="w")
        self._status_label.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="ew")

        self._message_value = ctk.StringVar(value="")
        self._message_label = ctk.CTkLabel(self, textvariable=self._message_value, anchor="e")
        self._message_label.grid(row=0, column=1, padx=6, pady=8, sticky="e")

        # Zoom controls
        self._zoom_out_btn = ctk.CTkButton(self, text="− Zoom Out", width=96, command=self._emit_zoom_out)
        self._zoom_out_btn.grid(row=0, column=2, padx=6, pady=8)
        self._zoom_value = ctk.StringVar(value="100%")
        self._zoom_value_label = ctk.CTkLabel(self, textvariable=self._zoom_value, width=48)
        self._zoom_value_label.grid(row=0, column=3, padx=6, pady=8)
        self._zoom_in_btn = ctk.CTkButton(self, text="+ Zoom In", width=96, command=self._emit_zoom_in)
        self._zoom_in_btn.grid(row=0, column=4, padx=(6, 10), pady=8)

    # public API (sync from controller)
    def set_status(self, text: str) -> None:
        self._status_value.set(text)

    def set_message(self, text: str) -> None:
        self._message_value.set(text)

    def set_zoom_percent(self, percent: int) -> None:
        self._zoom_value.set(f"{percent}%")

    # events
    def _emit_zoom_in(self) -> None:
        if self.on_zoom_in:
            self.on_zoom_in()

    def _emit_zoom_out(self) -> None:
        if self.on_zoom_out:
            self.on_zoom_out()
